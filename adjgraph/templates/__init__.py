"""Jinja templates for command output."""

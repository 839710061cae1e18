"""Built-in sample network."""

from pathlib import Path

# Shown in log messages in place of a file path.
SAMPLE_PATH = Path("<sample>")

sample_yml = """\
vertices:
  - singapore
  - tokyo
  - hong kong
  - detroit
  - san francisco
  - washington
  - seattle

default_kind: undirected
currency: $

edges:
  - {from: singapore, to: hong kong, weight: 300}
  - {from: singapore, to: tokyo, weight: 500}
  - {from: hong kong, to: washington, weight: 750}
  - {from: tokyo, to: seattle, weight: 450}
  - {from: seattle, to: detroit, weight: 100}
  - {from: washington, to: san francisco, weight: 150}
"""

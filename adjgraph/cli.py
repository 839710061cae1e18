"""Command-line interface."""

import logging
import sys
from argparse import ArgumentParser, Namespace
from pathlib import Path
from typing import Any, List, Mapping, Optional, Tuple

from jinja2 import Environment, PackageLoader

from adjgraph.logs import fatal, setup_logging
from adjgraph.network import Network


def main(argv: Optional[List[str]] = None):
    parser, commands = get_parser()
    args = parser.parse_args(argv)
    if args.command == "help":
        if args.help_target:
            commands[args.help_target].print_help()
        else:
            parser.print_help()
        return

    log_level = logging.WARNING
    if args.verbose and args.verbose == 1:
        log_level = logging.INFO
    elif args.verbose and args.verbose >= 2:
        log_level = logging.DEBUG
    exit_level = logging.ERROR
    if args.keep_going:
        exit_level = logging.FATAL
    setup_logging(sys.stderr, log_level, exit_level)

    command = globals()[f"command_{args.command}"]
    assert command, "unexpected command name"
    command(args)


def get_parser() -> Tuple[ArgumentParser, Mapping[str, ArgumentParser]]:
    parser = ArgumentParser(
        prog="adjgraph", description="inspect weighted networks of named vertices"
    )
    commands = parser.add_subparsers(metavar="command", dest="command", required=True)

    parser_help = commands.add_parser("help", help="show this help message and exit")
    parser_help.add_argument(
        metavar="command",
        dest="help_target",
        nargs="?",
        choices=["show", "flights", "weight"],
        help="get help for a specific command",
    )

    parser_show = commands.add_parser("show", help="print every vertex and its edges")

    parser_flights = commands.add_parser(
        "flights", help="list outgoing edges of a vertex with their costs"
    )
    parser_flights.add_argument("source", help="vertex name")

    parser_weight = commands.add_parser("weight", help="show the weight of an edge")
    parser_weight.add_argument("source", help="source vertex name")
    parser_weight.add_argument("destination", help="destination vertex name")

    for subparser in [parser_show, parser_flights, parser_weight]:
        subparser.add_argument(
            "-c",
            "--config",
            type=Path,
            help="network file to load (default: built-in sample)",
        )
        subparser.add_argument(
            "-k",
            "--keep-going",
            action="store_true",
            help="keep going if there are errors",
        )
        subparser.add_argument(
            "-v",
            "--verbose",
            action="count",
            help="increase logging (can use multiple times)",
        )

    return parser, commands.choices


def load_network(args: Namespace) -> Network:
    if args.config is None:
        return Network.sample()
    if not args.config.is_file():
        fatal("%s: no such file", args.config)
    return Network.load(args.config)


def command_show(args: Namespace):
    network = load_network(args)
    network.graph.dump(sys.stdout)


def command_flights(args: Namespace):
    network = load_network(args)
    source = network.vertex(args.source)
    if source is None:
        return
    graph = network.graph
    flights = []
    for edge in graph.edges(source):
        cost = graph.weight(edge.source, edge.destination)
        if cost is not None:
            flights.append((edge, cost))
    Renderer().write(
        "flights.txt.jinja", source=source, flights=flights, currency=network.currency
    )


def command_weight(args: Namespace):
    network = load_network(args)
    source = network.vertex(args.source)
    destination = network.vertex(args.destination)
    if source is None or destination is None:
        return
    cost = network.graph.weight(source, destination)
    Renderer().write(
        "weight.txt.jinja",
        source=source,
        destination=destination,
        cost=cost,
        currency=network.currency,
    )


class Renderer:

    """Helper class for rendering command output from templates."""

    def __init__(self):
        self.env = Environment(
            loader=PackageLoader("adjgraph", "templates"),
            autoescape=False,
            trim_blocks=True,
            keep_trailing_newline=True,
        )

    def write(self, name: str, **vals: Any):
        sys.stdout.write(self.env.get_template(name).render(**vals))

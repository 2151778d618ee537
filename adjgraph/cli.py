"""Command-line interface."""

import logging
import sys
from argparse import ArgumentParser, Namespace
from pathlib import Path
from typing import List, Mapping, Optional, Tuple

from adjgraph.letters import (
    LetterConfig,
    build_letter_graph,
    letter_range,
    print_adjacency,
    print_edges,
    print_summary,
)
from adjgraph.logs import fatal, setup_logging, verbosity_level


def main(argv: Optional[List[str]] = None):
    parser, commands = get_parser()
    args = parser.parse_args(argv)
    if args.command == "help":
        if args.help_target:
            commands[args.help_target].print_help()
        else:
            parser.print_help()
        return

    log_level = verbosity_level(args.verbose)
    exit_level = logging.ERROR
    if args.keep_going:
        exit_level = logging.FATAL
    setup_logging(sys.stderr, log_level, exit_level)

    command = globals()[f"command_{args.command}"]
    assert command, "unexpected command name"
    command(args)


def get_parser() -> Tuple[ArgumentParser, Mapping[str, ArgumentParser]]:
    parser = ArgumentParser(
        prog="adjgraph", description="explore the example letter graph"
    )
    commands = parser.add_subparsers(metavar="command", dest="command", required=True)

    parser_help = commands.add_parser("help", help="show this help message and exit")
    parser_help.add_argument(
        metavar="command",
        dest="help_target",
        nargs="?",
        choices=["adjacency", "edges", "info"],
        help="get help for a specific command",
    )

    parser_adjacency = commands.add_parser(
        "adjacency", help="print the adjacency list of each letter"
    )
    parser_adjacency.add_argument(
        "-c", "--config", type=Path, help="YAML file with title and letter range"
    )

    parser_edges = commands.add_parser("edges", help="print every edge")

    parser_info = commands.add_parser("info", help="print graph statistics")

    for subparser in [parser_adjacency, parser_edges, parser_info]:
        subparser.add_argument(
            "-u",
            "--undirected",
            action="store_true",
            help="push every edge in both directions",
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


def command_adjacency(args: Namespace):
    if args.config:
        if not args.config.is_file():
            fatal("config file %s not found", args.config)
        cfg = LetterConfig.load(args.config)
        cfg.validate()
    else:
        cfg = LetterConfig.default()
    logging.debug("letter config: %r", cfg)
    graph = build_letter_graph(args.undirected or cfg.get_bool("undirected"))
    letters = letter_range(cfg["first"], cfg["last"])
    logging.info("%s: %d letters", cfg["title"], len(letters))
    print("Let's generate the graph!")
    print_adjacency(graph, letters)
    print("OK, that's enough")


def command_edges(args: Namespace):
    print_edges(build_letter_graph(args.undirected))


def command_info(args: Namespace):
    print_summary(build_letter_graph(args.undirected))

"""The letter graph: a fixed 26-vertex example graph."""

from __future__ import annotations

import logging
import string
from typing import Any, Iterable, List, Optional, TextIO, Tuple

from adjgraph.config import Config
from adjgraph.graph import Graph, Unit

LETTERS: List[str] = list(string.ascii_uppercase)

# (src, dst) pairs in insertion order.
# fmt: off
LETTER_PAIRS: List[Tuple[str, str]] = [
    ("E", "A"), ("K", "B"), ("V", "C"), ("Y", "D"), ("P", "E"),
    ("V", "F"), ("S", "G"), ("H", "H"), ("X", "I"), ("S", "J"),
    ("D", "K"), ("S", "L"), ("E", "M"), ("L", "N"), ("F", "O"),
    ("U", "P"), ("A", "Q"), ("O", "R"), ("I", "S"), ("N", "T"),
    ("M", "U"), ("O", "V"), ("V", "W"), ("W", "X"), ("D", "Y"),
    ("P", "Z"), ("B", "G"), ("B", "A"), ("B", "B"), ("B", "Y"),
    ("Z", "Z"), ("Z", "O"), ("Z", "M"), ("Z", "B"), ("Z", "I"),
    ("Z", "E"), ("T", "T"), ("T", "O"), ("T", "N"), ("T", "A"),
    ("Q", "W"), ("Q", "E"), ("Q", "R"), ("Q", "T"), ("Q", "Y"),
    ("R", "M"), ("J", "C"), ("G", "L"), ("C", "A"), ("C", "T"),
]
# fmt: on


def edge_label(src: str, dst: str) -> str:
    """Human-readable payload for an edge, e.g. "A -> B" or "A loop"."""
    if src == dst:
        return f"{src} loop"
    return f"{src} -> {dst}"


LETTER_EDGES: List[Tuple[str, str, str]] = [
    (src, dst, edge_label(src, dst)) for src, dst in LETTER_PAIRS
]

LetterGraph = Graph[str, str, Unit]


class LetterConfig(Config):

    required = {
        "title": "Letter graph",
    }

    optional = {
        "first": "A",
        "last": "Z",
        "undirected": False,
    }


def build_letter_graph(undirected: bool = False) -> LetterGraph:
    """Build the letter graph.

    Every letter is pushed as a vertex with the empty payload. With undirected,
    each edge is also pushed in reverse.
    """
    graph: LetterGraph = Graph()
    for letter in LETTERS:
        graph.push_vid(letter)
    push = graph.push_undirected_edge if undirected else graph.push_edge
    for src, dst, label in LETTER_EDGES:
        push(src, dst, label)
    logging.debug("built letter graph: %r", graph)
    return graph


def letter_range(first: str, last: str) -> List[str]:
    """Return the letters from first to last inclusive.

    Logs an error and returns an empty list if either end is not an uppercase
    letter or the range is reversed.
    """
    for end in (first, last):
        if end not in LETTERS:
            logging.error("not an uppercase letter: %r", end)
            return []
    start, stop = LETTERS.index(first), LETTERS.index(last)
    if start > stop:
        logging.error("empty letter range %s..%s", first, last)
        return []
    return LETTERS[start : stop + 1]


def identity(x: Any) -> Any:
    return x


def print_adjacency(
    graph: LetterGraph, letters: Iterable[str], out: Optional[TextIO] = None
):
    """Print the adjacency list of each letter, one per line."""
    for letter in letters:
        print(graph.map_adjacent(letter, identity), file=out)


def print_edges(graph: LetterGraph, out: Optional[TextIO] = None):
    """Print every edge as "src -> dst: label", grouped by source."""
    for src, dst, label in sorted(
        graph.iter_complete_edges(), key=lambda triple: triple[0]
    ):
        print(f"{src} -> {dst}: {label}", file=out)


def print_summary(graph: LetterGraph, out: Optional[TextIO] = None):
    """Print vertex, edge, source and self-loop counts."""
    sources = sum(1 for _ in graph.iter_edges())
    loops = sum(1 for src, dst, _ in graph.iter_complete_edges() if src == dst)
    print(f"vertices:   {graph.vertex_count()}", file=out)
    print(f"edges:      {graph.edge_count()}", file=out)
    print(f"sources:    {sources}", file=out)
    print(f"self-loops: {loops}", file=out)

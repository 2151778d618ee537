import logging

import pytest

from adjgraph.graph import Graph, Unit
from adjgraph.letters import build_letter_graph


@pytest.fixture(scope="function")
def abc_graph() -> Graph[str, str, Unit]:
    """
    Fixture to provide the three-vertex graph with a self-loop on A.
    """
    g: Graph[str, str, Unit] = Graph()
    g.push_vid("A")
    g.push_vid("B")
    g.push_vid("C")
    g.push_edge("A", "B", "A -> B")
    g.push_edge("B", "C", "B -> C")
    g.push_edge("C", "A", "C -> A")
    g.push_edge("A", "A", "A loop")
    return g


@pytest.fixture(scope="module")
def letter_graph() -> Graph[str, str, Unit]:
    """
    Fixture to provide the directed letter graph. Tests must not modify it.
    """
    return build_letter_graph()


@pytest.fixture(scope="function")
def restore_root_logger():
    """
    Fixture to undo handler and level changes made by setup_logging.
    """
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level

    yield root

    root.handlers = handlers
    root.setLevel(level)

import logging

import pytest

from adjgraph.graph import AdjacencyList


@pytest.fixture(autouse=True)
def restore_root_logger():
    logger = logging.getLogger()
    handlers = list(logger.handlers)
    level = logger.level
    yield
    logger.handlers = handlers
    logger.setLevel(level)


@pytest.fixture
def flights():
    """The seven city flight network, with vertices keyed by city name."""
    graph = AdjacencyList()
    names = [
        "singapore",
        "tokyo",
        "hong kong",
        "detroit",
        "san francisco",
        "washington",
        "seattle",
    ]
    v = {name: graph.create_vertex(name) for name in names}
    graph.add_undirected_edge(v["singapore"], v["hong kong"], 300)
    graph.add_undirected_edge(v["singapore"], v["tokyo"], 500)
    graph.add_undirected_edge(v["hong kong"], v["washington"], 750)
    graph.add_undirected_edge(v["tokyo"], v["seattle"], 450)
    graph.add_undirected_edge(v["seattle"], v["detroit"], 100)
    graph.add_undirected_edge(v["washington"], v["san francisco"], 150)
    return graph, v

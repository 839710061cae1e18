"""Graphs of named vertices built from configuration."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional

from adjgraph.config import NetworkConfig
from adjgraph.defaults import SAMPLE_PATH, sample_yml
from adjgraph.graph import AdjacencyList, Vertex


class Network:

    """An adjacency list graph whose vertices are looked up by name.

    Networks should be created via Network.build(), or one of the load
    helpers, which create vertices and edges in the order they are listed.
    """

    def __init__(self, cfg: NetworkConfig, graph: AdjacencyList[str]):
        self.cfg = cfg
        self.graph = graph
        self.by_name: Dict[str, Vertex[str]] = {}

    def __repr__(self) -> str:
        return f"Network(path={self.cfg.path!r}, graph={self.graph!r})"

    @staticmethod
    def build(cfg: NetworkConfig) -> Network:
        network = Network(cfg, AdjacencyList(strict=bool(cfg["strict"])))
        for name in cfg.vertex_names():
            if name in network.by_name:
                logging.error("%s: duplicate vertex %r", cfg.path, name)
                continue
            network.by_name[name] = network.graph.create_vertex(name)
        for spec in cfg.edge_specs():
            source = network.vertex(spec.source)
            destination = network.vertex(spec.destination)
            if source is not None and destination is not None:
                network.graph.add(spec.kind, source, destination, spec.weight)
        logging.info(
            "loaded %d vertices from %s", len(network.graph), cfg.path,
        )
        return network

    @staticmethod
    def load(path: Path) -> Network:
        cfg = NetworkConfig.load(path)
        cfg.validate()
        return Network.build(cfg)

    @staticmethod
    def sample() -> Network:
        """Return the built-in network of flights between seven cities."""
        cfg = NetworkConfig.loads(SAMPLE_PATH, sample_yml)
        cfg.validate()
        return Network.build(cfg)

    @property
    def currency(self) -> str:
        return str(self.cfg["currency"])

    def vertex(self, name: str) -> Optional[Vertex[str]]:
        """Look up a vertex by name, logging an error if it does not exist."""
        vertex = self.by_name.get(name)
        if vertex is None:
            logging.error("%s: unknown vertex %r", self.cfg.path, name)
        return vertex

"""Network configuration files."""

import logging
from abc import ABC, abstractmethod
from io import StringIO
from pathlib import Path
from typing import (
    Any,
    Dict,
    Iterator,
    List,
    Mapping,
    NamedTuple,
    Optional,
    TextIO,
    Type,
    TypeVar,
)

import yaml

from adjgraph.graph import EdgeType

C = TypeVar("C", bound="Config")


class Config(ABC):

    """Abstract base class for YAML configuration.

    Subclasses override the abstract properties "required" and "optional".
    The creator must call validate() after loading:

        cfg = NetworkConfig.load(Path("routes.yml"))
        cfg.validate()
    """

    def __init__(self, path: Path, data: Mapping[str, Any]):
        self.path = path
        self.data = data

    def __repr__(self) -> str:
        name = self.__class__.__name__
        return f"{name}(path={self.path!r}, data={self.data!r})"

    @property
    @abstractmethod
    def required(self) -> Dict[str, Any]:
        """Required configuration keys and their defaults."""

    @property
    @abstractmethod
    def optional(self) -> Dict[str, Any]:
        """Optional configuration keys and their defaults."""

    def validate(self, **defaults: Any):
        """Log missing required keys, then fill in defaults.

        Keyword arguments take precedence over the class defaults but not over
        values present in the file.
        """
        for key in self.required:
            if key not in self.data:
                logging.error("%s: missing %r", self.path, key)
        self.data = {**self.required, **self.optional, **defaults, **self.data}

    @classmethod
    def load(cls: Type[C], path: Path) -> C:
        with open(path) as f:
            return cls.load_from(path, f)

    @classmethod
    def loads(cls: Type[C], path: Path, content: str) -> C:
        return cls.load_from(path, StringIO(content))

    @classmethod
    def load_from(cls: Type[C], path: Path, content: TextIO) -> C:
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as ex:
            logging.error("cannot parse %s: %s", path, ex)
            data = {}
        if not isinstance(data, dict):
            logging.error("invalid YAML in %s: %s", path, type(data))
            data = {}
        return cls(path, data)

    def __getitem__(self, key: str) -> Any:
        return self.data[key]

    def get(self, key: str) -> Optional[Any]:
        """Get a configuration value, or None if it does not exist."""
        return self.data.get(key)


class EdgeSpec(NamedTuple):
    """An edge entry from a network file, with names instead of vertices."""

    kind: EdgeType
    source: str
    destination: str
    weight: Optional[float]


class NetworkConfig(Config):

    """Configuration describing a network of named vertices.

    Example:

        vertices: [singapore, tokyo]
        edges:
          - {from: singapore, to: tokyo, weight: 500}
          - {from: tokyo, to: singapore, kind: directed}
    """

    required = {
        "vertices": [],
        "edges": [],
    }

    optional = {
        "strict": False,
        "default_kind": EdgeType.UNDIRECTED.value,
        "currency": "$",
    }

    def vertex_names(self) -> List[str]:
        names = self["vertices"]
        if not isinstance(names, list):
            logging.error("%s: 'vertices' must be a list", self.path)
            return []
        valid = []
        for i, name in enumerate(names):
            if not isinstance(name, str):
                logging.error("%s: vertex %d: invalid name %r", self.path, i, name)
                continue
            valid.append(name)
        return valid

    def edge_specs(self) -> Iterator[EdgeSpec]:
        """Parse the edge entries, logging and skipping invalid ones."""
        entries = self["edges"]
        if not isinstance(entries, list):
            logging.error("%s: 'edges' must be a list", self.path)
            return
        for i, entry in enumerate(entries):
            spec = self._parse_edge(i, entry)
            if spec is not None:
                yield spec

    def _parse_edge(self, i: int, entry: Any) -> Optional[EdgeSpec]:
        if not isinstance(entry, dict):
            logging.error("%s: edge %d: expected a mapping", self.path, i)
            return None
        if "from" not in entry or "to" not in entry:
            logging.error("%s: edge %d: needs 'from' and 'to'", self.path, i)
            return None
        kind_name = entry.get("kind", self["default_kind"])
        try:
            kind = EdgeType(kind_name)
        except ValueError:
            logging.error("%s: edge %d: invalid kind %r", self.path, i, kind_name)
            return None
        weight = entry.get("weight")
        if weight is not None:
            if isinstance(weight, bool) or not isinstance(weight, (int, float)):
                logging.error("%s: edge %d: invalid weight %r", self.path, i, weight)
                return None
            weight = float(weight)
        return EdgeSpec(kind, str(entry["from"]), str(entry["to"]), weight)

# seedgen/graph.py
"""Read-only graph view used by the seed generators.

Nodes carry string names and are addressed by dense integer identifiers
(``0..n-1`` in insertion order). Storage is delegated to networkx.
"""
import logging
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

import networkx as nx

logger = logging.getLogger(__name__)


class Graph:
    def __init__(self):
        self._nx = nx.Graph()
        self._names: List[str] = []
        self._index: Dict[str, int] = {}

    @classmethod
    def from_edges(cls, edges: Iterable[Tuple[str, str]], nodes: Iterable[str] = ()):
        """Build a graph from ``(name, name)`` pairs.

        Args:
            edges: Edge endpoint name pairs; endpoints are added on first use
            nodes: Extra (possibly isolated) node names, added before the edges
        """
        graph = cls()
        for name in nodes:
            graph.add_node(name)
        for source, target in edges:
            graph.add_edge(source, target)
        return graph

    @classmethod
    def from_networkx(cls, nx_graph: nx.Graph):
        """Wrap the nodes and edges of an existing NetworkX graph.

        Node keys are converted to names with ``str()``.
        """
        graph = cls()
        for node in nx_graph.nodes():
            graph.add_node(str(node))
        for source, target in nx_graph.edges():
            graph.add_edge(str(source), str(target))
        logger.debug(
            f"Wrapped NetworkX graph: {graph.node_count} nodes, {graph.edge_count} edges"
        )
        return graph

    def add_node(self, name: str) -> int:
        """Add a node by name and return its identifier (existing names are reused)."""
        if name in self._index:
            return self._index[name]
        if not name:
            raise ValueError("Node name cannot be empty")
        index = len(self._names)
        self._names.append(name)
        self._index[name] = index
        self._nx.add_node(index, name=name)
        return index

    def add_edge(self, source: str, target: str) -> Tuple[int, int]:
        u = self.add_node(source)
        v = self.add_node(target)
        self._nx.add_edge(u, v)
        return u, v

    @property
    def node_count(self) -> int:
        return self._nx.number_of_nodes()

    @property
    def edge_count(self) -> int:
        return self._nx.number_of_edges()

    def nodes(self) -> Iterator[int]:
        return iter(range(len(self._names)))

    def edges(self) -> Iterator[Tuple[int, int]]:
        return iter(self._nx.edges())

    def has_node(self, node: int) -> bool:
        return isinstance(node, int) and 0 <= node < len(self._names)

    def get_node_index(self, name: str) -> Optional[int]:
        """Return the identifier of the node called ``name``, or None if unknown."""
        return self._index.get(name)

    def get_node_name(self, node: int) -> str:
        return self._names[node]

    def to_networkx(self) -> nx.Graph:
        """Return a copy of the underlying graph keyed by node name."""
        return nx.relabel_nodes(self._nx, dict(enumerate(self._names)), copy=True)

    def __len__(self) -> int:
        return self.node_count

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count}, edges={self.edge_count})"

"""Mutable node sets handed out as seeds."""

from typing import Any, Dict, Iterable, Iterator, List, Tuple


class MutableNodeSet:
    """Ordered, duplicate-free set of node identifiers tied to one graph.

    A seed generator creates an empty set, fills it in a single step and hands
    it over to the caller; the generator keeps no reference to it afterwards.
    """

    def __init__(self, graph, nodes: Iterable[int] = ()):
        """Initialize node set.

        Args:
            graph: Graph the node identifiers belong to
            nodes: Optional initial members
        """
        self.graph = graph
        self._members: Dict[int, None] = {}
        for node in nodes:
            self.add(node)

    def add(self, node: int) -> bool:
        """Add a node. Returns False if it was already a member."""
        if not self.graph.has_node(node):
            raise ValueError(f"Node {node!r} does not belong to {self.graph!r}")
        if node in self._members:
            return False
        self._members[node] = None
        return True

    @property
    def members(self) -> Tuple[int, ...]:
        return tuple(self._members)

    def names(self) -> List[str]:
        return [self.graph.get_node_name(node) for node in self._members]

    def to_dict(self) -> Dict[str, Any]:
        return {"nodes": list(self._members), "names": self.names()}

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[int]:
        return iter(self._members)

    def __contains__(self, node: object) -> bool:
        return node in self._members

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MutableNodeSet):
            return NotImplemented
        return self.graph is other.graph and self.members == other.members

    __hash__ = None

    def __repr__(self) -> str:
        return f"MutableNodeSet({self.names()!r})"

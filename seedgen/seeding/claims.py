"""Claimed-node oracles consulted by the unused-nodes seed generator."""

from abc import ABC, abstractmethod
from typing import Iterable, Set


class ClaimOracle(ABC):
    """Read-only view of the nodes already covered by discovered clusters."""

    @abstractmethod
    def is_claimed(self, node: int) -> bool:
        """Return True if ``node`` is part of a cluster found so far."""
        pass


class ClaimedNodes(ClaimOracle):
    """Set-backed claim oracle.

    The owner (usually the cluster growth loop) marks nodes as claimed; the
    seed generator only ever queries it.
    """

    def __init__(self, nodes: Iterable[int] = ()):
        self._claimed: Set[int] = set(nodes)

    def is_claimed(self, node: int) -> bool:
        return node in self._claimed

    def claim(self, node: int) -> None:
        self._claimed.add(node)

    def claim_all(self, nodes: Iterable[int]) -> None:
        self._claimed.update(nodes)

    def claim_cluster(self, cluster) -> None:
        """Mark every member of a cluster (any iterable of node identifiers)."""
        self.claim_all(cluster)

    def __len__(self) -> int:
        return len(self._claimed)

    def __contains__(self, node: object) -> bool:
        return node in self._claimed

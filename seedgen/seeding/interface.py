"""Seed generator and seed iterator interface definitions.

A seed generator is an algorithm that produces candidate seed node sets from
a graph. Each seed is later handed to a cluster growth process that expands
it into a cluster. Generators are iterable, so the easiest way to consume the
seeds is a plain ``for`` loop::

    for seed in generator:
        cluster = grow(seed)
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from ..exceptions import UnboundGeneratorError
from ..nodeset import MutableNodeSet

logger = logging.getLogger(__name__)

# Returned by SeedGenerator.size() when the seed count is not known in advance
UNKNOWN_SIZE = -1


class SeedIterator(ABC):
    """Single-pass, lazy producer of seed node sets.

    Once exhausted (or closed) the iterator keeps raising StopIteration; a new
    pass needs a fresh iterator from the generator.
    """

    def __init__(self):
        self._finished = False

    @abstractmethod
    def _next_seed(self) -> Optional[MutableNodeSet]:
        """Build the next seed, or return None when the sequence is exhausted."""
        pass

    def process_found_cluster(self, cluster) -> None:
        """Notify the iterator about a cluster grown from the last seed.

        The default implementation ignores the notification.

        Args:
            cluster: Iterable of node identifiers forming the cluster
        """
        pass

    def close(self) -> None:
        """Stop the iteration and release any resource held by the iterator."""
        if self._finished:
            return
        self._finished = True
        self._release()

    def _release(self) -> None:
        pass

    @property
    def exhausted(self) -> bool:
        return self._finished

    def __iter__(self) -> "SeedIterator":
        return self

    def __next__(self) -> MutableNodeSet:
        if self._finished:
            raise StopIteration
        try:
            seed = self._next_seed()
        except Exception:
            self.close()
            raise
        if seed is None:
            self.close()
            raise StopIteration
        return seed

    def __enter__(self) -> "SeedIterator":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class SeedGenerator(ABC):
    """Abstract seed node set generator.

    A generator may be created without a graph and bound later with
    :meth:`bind`. Measuring or iterating an unbound generator raises
    :class:`UnboundGeneratorError`.
    """

    def __init__(self, graph=None):
        """Initialize seed generator.

        Args:
            graph: Graph the generator operates on (None leaves it unbound)
        """
        self._graph = graph

    @property
    def graph(self):
        return self._graph

    @property
    def is_bound(self) -> bool:
        return self._graph is not None

    def bind(self, graph) -> "SeedGenerator":
        """Associate the generator with a graph.

        Returns:
            The generator itself, so calls can be chained
        """
        self._graph = graph
        return self

    def _require_graph(self):
        if self._graph is None:
            raise UnboundGeneratorError(type(self).__name__)
        return self._graph

    def size(self) -> int:
        """Return the number of seeds that will be generated.

        Returns:
            The expected number of seeds, or ``UNKNOWN_SIZE`` (-1) if it
            cannot be known without enumerating them
        """
        return self._count_seeds(self._require_graph())

    def iterator(self) -> SeedIterator:
        """Return a fresh iterator that starts from the first seed."""
        graph = self._require_graph()
        logger.debug(f"Starting seed iteration with {self!r}")
        return self._create_iterator(graph)

    def __iter__(self) -> SeedIterator:
        return self.iterator()

    @property
    @abstractmethod
    def specification(self) -> str:
        """Specification string that selects this generator in the factory."""
        pass

    @abstractmethod
    def _count_seeds(self, graph) -> int:
        pass

    @abstractmethod
    def _create_iterator(self, graph) -> SeedIterator:
        pass

    def __repr__(self) -> str:
        state = repr(self._graph) if self._graph is not None else "unbound"
        return f"{type(self).__name__}({self.specification!r}, {state})"

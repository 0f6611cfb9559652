"""Seed generation strategies."""

import io
import logging
import os
from typing import Iterator, List, Optional, Tuple

from ..exceptions import SourceReadError, SourceUnavailable
from ..nodeset import MutableNodeSet
from .claims import ClaimedNodes, ClaimOracle
from .interface import UNKNOWN_SIZE, SeedGenerator, SeedIterator

logger = logging.getLogger(__name__)


class _NodeIterator(SeedIterator):
    def __init__(self, graph):
        super().__init__()
        self._graph = graph
        self._nodes = graph.nodes()

    def _next_seed(self) -> Optional[MutableNodeSet]:
        for node in self._nodes:
            return MutableNodeSet(self._graph, (node,))
        return None


class EveryNodeSeedGenerator(SeedGenerator):
    """Generates a singleton seed for each node of the graph."""

    @property
    def specification(self) -> str:
        return "nodes"

    def _count_seeds(self, graph) -> int:
        return graph.node_count

    def _create_iterator(self, graph) -> SeedIterator:
        return _NodeIterator(graph)


class _EdgeIterator(SeedIterator):
    def __init__(self, graph):
        super().__init__()
        self._graph = graph
        self._edges = graph.edges()

    def _next_seed(self) -> Optional[MutableNodeSet]:
        for source, target in self._edges:
            # a self-loop collapses into a singleton seed
            return MutableNodeSet(self._graph, (source, target))
        return None


class EveryEdgeSeedGenerator(SeedGenerator):
    """Generates a seed containing the two endpoints of each edge of the graph."""

    @property
    def specification(self) -> str:
        return "edges"

    def _count_seeds(self, graph) -> int:
        return graph.edge_count

    def _create_iterator(self, graph) -> SeedIterator:
        return _EdgeIterator(graph)


class _UnusedNodesIterator(SeedIterator):
    def __init__(self, graph, claims: ClaimOracle, owns_claims: bool):
        super().__init__()
        self._graph = graph
        self._nodes = graph.nodes()
        self._claims = claims
        self._owns_claims = owns_claims

    def _next_seed(self) -> Optional[MutableNodeSet]:
        # Claim status is checked right before yielding; it may change between pulls.
        for node in self._nodes:
            if not self._claims.is_claimed(node):
                return MutableNodeSet(self._graph, (node,))
        return None

    def process_found_cluster(self, cluster) -> None:
        if self._owns_claims:
            self._claims.claim_cluster(cluster)


class UnusedNodesSeedGenerator(SeedGenerator):
    """Generates a singleton seed for each node not yet covered by a cluster.

    With an injected ``claims`` oracle the caller keeps the oracle up to date.
    Without one, each iterator tracks claims itself from the clusters reported
    through ``SeedIterator.process_found_cluster``.
    """

    def __init__(self, graph=None, claims: Optional[ClaimOracle] = None):
        super().__init__(graph)
        self.claims = claims

    @property
    def specification(self) -> str:
        return "unused_nodes"

    def _count_seeds(self, graph) -> int:
        return UNKNOWN_SIZE

    def _create_iterator(self, graph) -> SeedIterator:
        if self.claims is not None:
            return _UnusedNodesIterator(graph, self.claims, owns_claims=False)
        return _UnusedNodesIterator(graph, ClaimedNodes(), owns_claims=True)


def _parse_seed_line(graph, line: str, source: str, line_number: int,
                     unresolved: Optional[List[str]] = None) -> Optional[MutableNodeSet]:
    """Resolve the node names on one line of a seed source.

    Unknown names are skipped; the remaining names still form a seed. Returns
    None for blank lines and for lines where no name resolves. A byte order mark
    at the start of the first line is ignored.
    """
    if line_number == 1:
        line = line.lstrip("\ufeff")
    seed = None
    for token in line.split():
        node = graph.get_node_index(token)
        if node is None:
            if unresolved is not None:
                logger.warning(f"{source}:{line_number}: skipping unknown node name {token!r}")
                unresolved.append(token)
            continue
        if seed is None:
            seed = MutableNodeSet(graph)
        seed.add(node)
    return seed


class _LineSeedIterator(SeedIterator):
    """Turns numbered text lines into seeds, one seed per usable line."""

    def __init__(self, graph, lines: Iterator[Tuple[int, str]], source: str):
        super().__init__()
        self._graph = graph
        self._lines = lines
        self._source = source
        self.unresolved_names: List[str] = []

    def _next_seed(self) -> Optional[MutableNodeSet]:
        for line_number, line in self._lines:
            seed = _parse_seed_line(
                self._graph, line, self._source, line_number, self.unresolved_names
            )
            if seed is not None:
                return seed
        return None

    def _release(self) -> None:
        close = getattr(self._lines, "close", None)
        if close is not None:
            close()


def _read_file_lines(path: str, encoding: str) -> Iterator[Tuple[int, str]]:
    try:
        with open(path, encoding=encoding) as handle:
            for line_number, line in enumerate(handle, 1):
                yield line_number, line
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceReadError(path) from exc


class FileBasedSeedGenerator(SeedGenerator):
    """Reads seeds from a text file, one seed per line.

    Each line holds whitespace-separated node names. Names missing from the
    graph are skipped, blank lines and lines without any known name produce
    no seed.
    """

    def __init__(self, graph, path: str, encoding: str = "utf-8",
                 prescan: bool = False):
        """Initialize file based seed generator.

        Args:
            graph: Graph the seeds refer to (None leaves it unbound)
            path: Path of the seed file
            encoding: Text encoding of the seed file
            prescan: Read the whole file now, making size() exact

        Raises:
            SourceUnavailable: If the file does not exist
            SourceReadError: If the file cannot be opened or read
        """
        super().__init__(graph)
        self.path = os.fspath(path)
        self.encoding = encoding
        self._lines: Optional[List[str]] = None
        try:
            with open(self.path, encoding=encoding) as handle:
                if prescan:
                    self._lines = list(handle)
        except FileNotFoundError as exc:
            raise SourceUnavailable(self.path) from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise SourceReadError(self.path) from exc
        if prescan:
            logger.info(f"Pre-scanned {len(self._lines)} lines from seed file {self.path}")

    @property
    def prescanned(self) -> bool:
        return self._lines is not None

    @property
    def specification(self) -> str:
        return f"file({self.path})"

    def _count_seeds(self, graph) -> int:
        if self._lines is None:
            return UNKNOWN_SIZE
        return sum(
            1 for number, line in enumerate(self._lines, 1)
            if _parse_seed_line(graph, line, self.path, number) is not None
        )

    def _create_iterator(self, graph) -> SeedIterator:
        if self._lines is not None:
            return _LineSeedIterator(graph, enumerate(self._lines, 1), self.path)
        return _LineSeedIterator(graph, _read_file_lines(self.path, self.encoding), self.path)


class _StreamBuffer:
    """Line reader over a one-shot stream, shared by all iterators."""

    def __init__(self, stream, name: str, encoding: str, replay: bool):
        self.stream = stream
        self.name = name
        self.encoding = encoding
        self.replay = replay
        # only filled when replaying
        self.lines: List[str] = []
        self.lines_read = 0
        self.exhausted = False

    def read_line(self) -> Optional[str]:
        """Read the next line from the stream, or return None at end of stream."""
        if self.exhausted:
            return None
        try:
            line = self.stream.readline()
            if isinstance(line, bytes):
                line = line.decode(self.encoding)
        except (OSError, ValueError) as exc:
            raise SourceReadError(self.name) from exc
        if not line:
            self.exhausted = True
            logger.debug(f"Reached end of {self.name} after {self.lines_read} lines")
            return None
        self.lines_read += 1
        if self.replay:
            self.lines.append(line)
        return line

    def get(self, index: int) -> Optional[str]:
        while index >= len(self.lines) and not self.exhausted:
            self.read_line()
        if index < len(self.lines):
            return self.lines[index]
        return None


def _buffered_lines(buffer: _StreamBuffer) -> Iterator[Tuple[int, str]]:
    index = 0
    while True:
        line = buffer.get(index)
        if line is None:
            return
        index += 1
        yield index, line


def _shared_lines(buffer: _StreamBuffer) -> Iterator[Tuple[int, str]]:
    while True:
        line = buffer.read_line()
        if line is None:
            return
        yield buffer.lines_read, line


class StreamBasedSeedGenerator(SeedGenerator):
    """Reads seeds from an already open stream, one seed per line.

    The stream is read lazily. With ``replay`` on (the default) every line read
    is kept for the lifetime of the generator, so each iterator replays the
    same sequence from the start; memory grows with the size of the input.
    With ``replay`` off nothing is kept and all iterators share the stream
    position, so a new iterator continues where the previous one stopped.

    The stream is not closed by the generator; its owner remains responsible
    for it.
    """

    def __init__(self, graph, stream: io.IOBase, encoding: str = "utf-8",
                 name: Optional[str] = None, replay: bool = True):
        super().__init__(graph)
        if stream is None:
            raise ValueError("StreamBasedSeedGenerator requires a stream")
        self.name = name or getattr(stream, "name", None) or "<stream>"
        if not isinstance(self.name, str):
            self.name = f"<fd {self.name}>"
        self.replay = replay
        self._buffer = _StreamBuffer(stream, self.name, encoding, replay)

    @property
    def specification(self) -> str:
        return "stdin"

    def _count_seeds(self, graph) -> int:
        return UNKNOWN_SIZE

    def _create_iterator(self, graph) -> SeedIterator:
        if self.replay:
            lines = _buffered_lines(self._buffer)
        else:
            lines = _shared_lines(self._buffer)
        return _LineSeedIterator(graph, lines, self.name)

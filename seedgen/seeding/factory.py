"""Seed generator factory functions."""

import logging
import sys
from typing import Optional

from ..config import SeedingConfig
from ..exceptions import ConstructionError, SourceReadError
from .claims import ClaimOracle
from .generators import (
    EveryEdgeSeedGenerator,
    EveryNodeSeedGenerator,
    FileBasedSeedGenerator,
    StreamBasedSeedGenerator,
    UnusedNodesSeedGenerator,
)
from .interface import SeedGenerator

logger = logging.getLogger(__name__)

SUPPORTED_SPECIFICATIONS = {
    "nodes": "a singleton seed for each node of the graph",
    "unused_nodes": "a singleton seed for each node not yet part of a cluster",
    "edges": "the two endpoints of each edge of the graph",
    "stdin": "one seed per line of standard input (node names separated by whitespace)",
    "file(<path>)": "one seed per line of <path> (node names separated by whitespace)",
}


def create_seed_generator(
    specification: Optional[str] = None,
    graph=None,
    *,
    claims: Optional[ClaimOracle] = None,
    stream=None,
    config: Optional[SeedingConfig] = None,
) -> SeedGenerator:
    """Factory function to create a seed generator from a specification string.

    Args:
        specification: "nodes", "unused_nodes", "edges", "stdin" or
            "file(<path>)"; defaults to the configured seed method
        graph: Graph used by the generator (None creates an unbound generator)
        claims: Claimed-node oracle for "unused_nodes"
        stream: Stream read by "stdin" instead of ``sys.stdin.buffer``
        config: Seeding config (read from the environment if omitted)

    Returns:
        SeedGenerator instance

    Raises:
        ConstructionError: If the specification is invalid or the seed file
            cannot be opened (SourceUnavailable when it does not exist)

    Examples:
        >>> generator = create_seed_generator("edges", graph)
        >>> generator = create_seed_generator("file(seeds.txt)", graph)
    """
    config = config or SeedingConfig.from_env()
    if specification is None:
        specification = config.seed_method

    if specification == "nodes":
        generator = EveryNodeSeedGenerator(graph)

    elif specification == "unused_nodes":
        generator = UnusedNodesSeedGenerator(graph, claims=claims)

    elif specification == "edges":
        generator = EveryEdgeSeedGenerator(graph)

    elif specification == "stdin":
        name = None
        if stream is None:
            # raw bytes, so the configured encoding applies instead of the locale's
            stream = getattr(sys.stdin, "buffer", sys.stdin)
            name = "<stdin>"
        generator = StreamBasedSeedGenerator(
            graph, stream, encoding=config.encoding, name=name
        )

    elif specification.startswith("file(") and specification.endswith(")"):
        path = specification[len("file("):-1]
        try:
            generator = FileBasedSeedGenerator(
                graph, path, encoding=config.encoding, prescan=config.prescan_files
            )
        except ConstructionError as exc:
            exc.specification = specification
            raise
        except SourceReadError as exc:
            raise ConstructionError(
                f"IO error while reading file: {path}", specification=specification
            ) from exc

    else:
        raise ConstructionError(
            f"unknown seed generator type: {specification}", specification=specification
        )

    logger.info(f"Created seed generator {generator!r}")
    return generator


def from_string(specification: str, graph=None, **kwargs) -> SeedGenerator:
    """Alias of :func:`create_seed_generator`."""
    return create_seed_generator(specification, graph, **kwargs)

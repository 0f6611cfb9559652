"""Seeding module: candidate seed node sets for cluster growth."""

from .claims import ClaimOracle, ClaimedNodes
from .interface import UNKNOWN_SIZE, SeedGenerator, SeedIterator
from .generators import (
    EveryNodeSeedGenerator,
    EveryEdgeSeedGenerator,
    UnusedNodesSeedGenerator,
    FileBasedSeedGenerator,
    StreamBasedSeedGenerator,
)
from .factory import SUPPORTED_SPECIFICATIONS, create_seed_generator, from_string

__all__ = [
    "ClaimOracle",
    "ClaimedNodes",
    "UNKNOWN_SIZE",
    "SeedGenerator",
    "SeedIterator",
    "EveryNodeSeedGenerator",
    "EveryEdgeSeedGenerator",
    "UnusedNodesSeedGenerator",
    "FileBasedSeedGenerator",
    "StreamBasedSeedGenerator",
    "SUPPORTED_SPECIFICATIONS",
    "create_seed_generator",
    "from_string",
]

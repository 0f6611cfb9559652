"""seedgen - seed node set generation for cluster growth"""
__version__ = "0.1.0"

# Core types (lightweight - import directly)
from .exceptions import (
    SeedingError,
    ConstructionError,
    SourceUnavailable,
    SourceReadError,
    UnboundGeneratorError,
)
from .graph import Graph
from .nodeset import MutableNodeSet

__all__ = [
    # Errors
    "SeedingError",
    "ConstructionError",
    "SourceUnavailable",
    "SourceReadError",
    "UnboundGeneratorError",
    # Collaborators
    "Graph",
    "MutableNodeSet",
    # Seeding
    "SeedGenerator",
    "SeedIterator",
    "ClaimOracle",
    "ClaimedNodes",
    "create_seed_generator",
    "from_string",
    # Config
    "SeedingConfig",
    "load_config",
    "configure_logging",
]


def __getattr__(name: str):
    """Lazy loading for the seeding and config modules.

    Imported objects are cached in globals() for subsequent access.
    """
    lazy_imports = {
        "SeedGenerator": ".seeding",
        "SeedIterator": ".seeding",
        "ClaimOracle": ".seeding",
        "ClaimedNodes": ".seeding",
        "EveryNodeSeedGenerator": ".seeding",
        "EveryEdgeSeedGenerator": ".seeding",
        "UnusedNodesSeedGenerator": ".seeding",
        "FileBasedSeedGenerator": ".seeding",
        "StreamBasedSeedGenerator": ".seeding",
        "UNKNOWN_SIZE": ".seeding",
        "create_seed_generator": ".seeding",
        "from_string": ".seeding",
        "SeedingConfig": ".config",
        "load_config": ".config",
        "configure_logging": ".config",
    }

    if name in lazy_imports:
        import importlib
        module = importlib.import_module(lazy_imports[name], __name__)
        attr = getattr(module, name)
        globals()[name] = attr
        return attr

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

"""Exceptions raised by seed generators and their factory."""

from typing import Optional


class SeedingError(Exception):
    """Base class for all seed generation errors."""


class ConstructionError(SeedingError, ValueError):
    """Raised when a seed generator cannot be built from a specification.

    Attributes:
        specification: The specification string that was rejected (if known)
        reason: Human-readable reason
    """

    def __init__(self, reason: str, specification: Optional[str] = None):
        self.reason = reason
        self.specification = specification
        super().__init__(reason)


class SourceUnavailable(ConstructionError):
    """Raised when a file-backed seed source does not exist."""

    def __init__(self, path: str, specification: Optional[str] = None):
        self.path = path
        super().__init__(f"file not found: {path}", specification=specification)


class SourceReadError(SeedingError):
    """Raised on an I/O failure while opening or reading a seed source.

    Attributes:
        path: Path (or stream description) of the failing source
    """

    def __init__(self, path: str, message: Optional[str] = None):
        self.path = path
        if message is None:
            message = f"IO error while reading seeds from: {path}"
        super().__init__(message)


class UnboundGeneratorError(SeedingError, RuntimeError):
    """Raised when a generator with no associated graph is iterated or measured."""

    def __init__(self, generator_name: str):
        self.generator_name = generator_name
        super().__init__(
            f"{generator_name} is not bound to a graph; call bind(graph) first"
        )

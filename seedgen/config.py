"""
Seeding configuration module.

Reads seed generation defaults from environment variables (optionally loaded
from a local ``.env`` file first). No global state: every call to
``SeedingConfig.from_env()`` reads the environment again.
"""
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_SEED_METHOD = "nodes"
DEFAULT_SEED_ENCODING = "utf-8"
DEFAULT_LOG_LEVEL = "WARNING"

ENV_PREFIX = "SEEDGEN_"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class SeedingConfig:
    """Seed generation settings.

    Attributes:
        seed_method: Default specification string (e.g. "nodes", "file(seeds.txt)")
        encoding: Text encoding of seed files and byte streams
        prescan_files: Read seed files fully at construction so size() is exact
        log_level: Level used by configure_logging()
    """
    seed_method: str = DEFAULT_SEED_METHOD
    encoding: str = DEFAULT_SEED_ENCODING
    prescan_files: bool = False
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "SeedingConfig":
        """Build a config from SEEDGEN_* environment variables."""
        return cls(
            seed_method=os.getenv("SEEDGEN_SEED_METHOD", DEFAULT_SEED_METHOD).strip(),
            encoding=os.getenv("SEEDGEN_SEED_ENCODING", DEFAULT_SEED_ENCODING).strip(),
            prescan_files=os.getenv("SEEDGEN_PRESCAN_SEED_FILES", "").strip().lower() in _TRUTHY,
            log_level=os.getenv("SEEDGEN_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper(),
        )


def read_dotenv_settings(path) -> Dict[str, str]:
    """Read the SEEDGEN_* assignments from a ``.env`` file.

    Lines look like ``SEEDGEN_SEED_METHOD=edges`` (optionally prefixed with
    ``export`` and with a quoted value). Comments, blank lines and keys
    outside the SEEDGEN_ namespace are ignored. A missing file yields no
    settings.
    """
    dotenv = Path(path)
    if not dotenv.is_file():
        return {}

    settings: Dict[str, str] = {}
    with dotenv.open(encoding="utf-8") as handle:
        for raw_line in handle:
            line = raw_line.strip()
            if line.startswith("export "):
                line = line[len("export "):]
            key, sep, value = line.partition("=")
            key = key.strip()
            if not sep or not key.startswith(ENV_PREFIX):
                continue
            value = value.strip()
            if len(value) >= 2 and value[0] == value[-1] and value[0] in "'\"":
                value = value[1:-1]
            settings[key] = value
    return settings


def load_config(dotenv_path: Optional[str] = None) -> SeedingConfig:
    """Load seeding config, applying settings from ``dotenv_path`` first.

    Variables already present in the environment win over the file.
    """
    if dotenv_path is not None:
        applied = []
        for key, value in read_dotenv_settings(dotenv_path).items():
            if key not in os.environ:
                os.environ[key] = value
                applied.append(key)
        if applied:
            logger.info(f"Seeding settings from {dotenv_path}: {', '.join(sorted(applied))}")
    return SeedingConfig.from_env()


def configure_logging(config: Optional[SeedingConfig] = None) -> None:
    """Configure root logging for scripts using the config's log level."""
    config = config or SeedingConfig.from_env()
    level = getattr(logging, config.log_level, None)
    if not isinstance(level, int):
        logger.warning(f"Unknown log level {config.log_level!r}, using {DEFAULT_LOG_LEVEL}")
        level = getattr(logging, DEFAULT_LOG_LEVEL)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

"""
Runtime configuration from environment variables.

Variables may be set in the process environment or in a `.env.local`
(local development) / `.env` file in the working directory. Values already
present in the environment win over the files.

    KATADASAR_DICTIONARY_PATH  Root-word file for the default stemmer
                               (default: bundled list)
    KATADASAR_CACHE_SIZE       LRU size for stem results, 0 disables
                               (default: 4096)
    KATADASAR_LOG_LEVEL        Console log level for scripts (default: INFO)
    KATADASAR_LOG_FILE         Rotating log file for scripts (default: none)
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_CACHE_SIZE = 4096

_env_loaded = False


def load_environment(base_dir: Optional[Path] = None) -> Optional[Path]:
    """
    Load the first of `.env.local` / `.env` found in base_dir.

    Returns:
        Path of the file that was loaded, or None
    """
    base_dir = Path(base_dir) if base_dir else Path.cwd()

    for name in (".env.local", ".env"):
        env_file = base_dir / name
        if env_file.exists():
            logger.debug(f"Loading environment from: {env_file}")
            load_dotenv(env_file, override=False)
            return env_file

    return None


@dataclass(frozen=True)
class Settings:
    """Resolved configuration values"""
    dictionary_path: Optional[Path] = None
    cache_size: int = DEFAULT_CACHE_SIZE
    log_level: int = logging.INFO
    log_file: Optional[Path] = None


def _int_from_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        number = int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None
    if number < 0:
        raise ValueError(f"{name} must not be negative, got {number}")
    return number


def _path_from_env(name: str) -> Optional[Path]:
    value = os.getenv(name)
    if not value or not value.strip():
        return None
    return Path(value.strip()).expanduser()


def get_settings() -> Settings:
    """
    Read settings from the environment.

    `.env` files are loaded once per process, on the first call.

    Raises:
        ValueError: KATADASAR_CACHE_SIZE is not a non-negative integer
    """
    global _env_loaded
    if not _env_loaded:
        load_environment()
        _env_loaded = True

    level_name = os.getenv("KATADASAR_LOG_LEVEL", "INFO").upper()

    return Settings(
        dictionary_path=_path_from_env("KATADASAR_DICTIONARY_PATH"),
        cache_size=_int_from_env("KATADASAR_CACHE_SIZE", DEFAULT_CACHE_SIZE),
        log_level=getattr(logging, level_name, logging.INFO),
        log_file=_path_from_env("KATADASAR_LOG_FILE"),
    )

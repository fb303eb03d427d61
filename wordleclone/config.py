"""Default paths and logging setup shared by the CLIs."""

from __future__ import annotations

import logging
from pathlib import Path

PACKAGE_DIR = Path(__file__).resolve().parent
DEFAULT_WORDS_PATH = PACKAGE_DIR / "datasets" / "data" / "words.txt"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def choose_app_dir() -> Path:
    """
    Pick a writable app directory.

    Preferred location is user home, with local workspace fallback when blocked.
    """
    preferred = Path.home() / ".wordleclone"
    try:
        preferred.mkdir(parents=True, exist_ok=True)
        return preferred
    except OSError:
        fallback = Path(".wordleclone")
        fallback.mkdir(parents=True, exist_ok=True)
        return fallback


def default_stats_path() -> Path:
    return choose_app_dir() / "stats.json"


def setup_logging(level: str | int = "WARNING", log_file: str | None = None) -> None:
    """Configure the root logger once per process; stderr unless `log_file` is given."""
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)
    kwargs = {"level": level, "format": LOG_FORMAT}
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        kwargs["filename"] = str(log_file)
    logging.basicConfig(**kwargs)

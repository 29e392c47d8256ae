"""Runtime settings, read from the environment.

A ``.env`` file in the working directory is loaded first; variables that
are already set in the environment win.

Environment variables:
- BACKOFFICE_DATA_DIR: directory holding the JSON record files
- BACKOFFICE_LOG_LEVEL: logging level name (default WARNING)
- BACKOFFICE_CURRENCY: currency code for prices and totals (default USD)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    log_level: str = "WARNING"
    currency: str = "USD"


def load_settings(env_file: Path | None = None) -> Settings:
    load_dotenv(dotenv_path=env_file)

    data_dir = os.getenv("BACKOFFICE_DATA_DIR")
    log_level = os.getenv("BACKOFFICE_LOG_LEVEL", "WARNING").upper()
    currency = os.getenv("BACKOFFICE_CURRENCY", "USD").upper()

    if not isinstance(logging.getLevelName(log_level), int):
        raise RuntimeError(
            f"Invalid BACKOFFICE_LOG_LEVEL: {log_level!r}. "
            "Use DEBUG, INFO, WARNING or ERROR."
        )

    return Settings(
        data_dir=Path(data_dir).expanduser() if data_dir else DEFAULT_DATA_DIR,
        log_level=log_level,
        currency=currency,
    )

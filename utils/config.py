"""Process-wide settings loaded once at startup.

Values come from the environment (optionally populated from a `.env` file
via python-dotenv). The OpenAI key may instead live in a local JSON file
pointed to by `ARTWORK_CONFIG_PATH` (default `config.json`).
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_CONFIG_FILE = "config.json"


@dataclass(frozen=True)
class Settings:
    """Immutable configuration for the lifetime of the process."""

    openai_api_key: str
    database_dir: Path
    storage_dir: Path
    openai_model: str = DEFAULT_MODEL


def _read_key_from_file(config_path: Path) -> Optional[str]:
    """Return OPENAI_API_KEY from a JSON config file, or None if absent."""
    if not config_path.is_file():
        return None
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise RuntimeError(f"Failed to read configuration file at {config_path}") from exc
    if not isinstance(data, dict):
        raise RuntimeError(f"Configuration file {config_path} must contain a JSON object")
    return data.get("OPENAI_API_KEY") or None


def load_settings() -> Settings:
    """Load settings from `.env`, the environment and the JSON config file.

    Raises:
        RuntimeError: If the OpenAI key or DATABASE_DIR is missing.
    """
    load_dotenv()

    api_key = os.getenv("OPENAI_API_KEY")
    if not api_key:
        config_path = Path(os.getenv("ARTWORK_CONFIG_PATH", DEFAULT_CONFIG_FILE)).expanduser()
        api_key = _read_key_from_file(config_path)
    if not api_key:
        raise RuntimeError("OPENAI_API_KEY is not set in the environment or the config file")

    env_dir = os.getenv("DATABASE_DIR")
    if env_dir is None or not env_dir.strip():
        raise RuntimeError("DATABASE_DIR environment variable must be set")
    database_dir = Path(env_dir).expanduser()

    storage_env = os.getenv("STORAGE_DIR")
    storage_dir = Path(storage_env).expanduser() if storage_env else database_dir / "storage"

    return Settings(
        openai_api_key=api_key,
        database_dir=database_dir,
        storage_dir=storage_dir,
        openai_model=os.getenv("OPENAI_MODEL") or DEFAULT_MODEL,
    )

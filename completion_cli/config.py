from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv


logger = logging.getLogger(__name__)

API_KEY_ENV = "OPENAI_API_KEY"
BASE_URL_ENV = "BASE_URL"
DEFAULT_ENV_FILE = Path(".env")


class ConfigError(RuntimeError):
    """A required setting is missing from the environment."""


@dataclass(frozen=True)
class Settings:
    api_key: str
    base_url: str

    @staticmethod
    def mask(value: str, keep: int = 2) -> str:
        if not value:
            return ""
        if len(value) <= keep * 2:
            return "*" * len(value)
        return value[:keep] + "*" * (len(value) - keep * 2) + value[-keep:]


def merge_env_file(path: Optional[Path] = None) -> bool:
    """Merge KEY=VALUE pairs from an env file into ``os.environ``.

    Variables already set in the process environment win. A missing file is
    not an error; returns whether anything was loaded. An unreadable file
    raises ConfigError.
    """
    path = Path(path) if path is not None else DEFAULT_ENV_FILE
    if not path.is_file():
        logger.debug("env file not found, skipping: %s", path)
        return False
    try:
        loaded = load_dotenv(dotenv_path=path, override=False)
    except UnicodeDecodeError as e:
        raise ConfigError(f"env file {path} is not valid UTF-8: {e}") from e
    logger.debug("merged env file %s (loaded=%s)", path, loaded)
    return loaded


def _require(env: Mapping[str, str], name: str) -> str:
    value = env.get(name)
    if value is None or not value.strip():
        raise ConfigError(f"{name} must be set")
    return value


def load_settings(env_file: Optional[Path] = None, env: Optional[Mapping[str, str]] = None) -> Settings:
    """Single configuration step: env file merge, then required lookups.

    ``env`` defaults to ``os.environ`` after the merge.
    """
    if env is None:
        merge_env_file(env_file)
        env = os.environ
    api_key = _require(env, API_KEY_ENV)
    base_url = _require(env, BASE_URL_ENV)
    return Settings(api_key=api_key, base_url=base_url)

"""Configuration helpers for SearchPro components."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional
import os

from dotenv import load_dotenv

from .errors import InvalidConfiguration

_ENV_LOADED = False

_TRUE_VALUES = {"1", "true", "t", "yes", "y", "on"}
_FALSE_VALUES = {"0", "false", "f", "no", "n", "off"}
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _load_env_files() -> None:
    global _ENV_LOADED
    if _ENV_LOADED:
        return
    env_paths = [Path.cwd() / ".env", Path(__file__).resolve().parents[2] / ".env"]
    for path in env_paths:
        if path.exists():
            load_dotenv(path)
    _ENV_LOADED = True


@dataclass(frozen=True)
class SearchProConfig:
    debounce_ms: int = 300
    cache_size: int = 10
    commit_enabled: bool = True
    data_file: Optional[Path] = None
    log_dir: Path = Path("logs")
    log_level: str = "INFO"

    @property
    def debounce_seconds(self) -> float:
        return self.debounce_ms / 1000.0

    def validate(self) -> "SearchProConfig":
        if self.debounce_ms < 0:
            raise InvalidConfiguration(f"debounce_ms must be >= 0, got {self.debounce_ms}")
        if self.cache_size < 1:
            raise InvalidConfiguration(f"cache_size must be >= 1, got {self.cache_size}")
        if self.log_level not in _LOG_LEVELS:
            raise InvalidConfiguration(f"unknown log level: {self.log_level}")
        return self


def _parse_bool(value: Optional[str], default: bool = False) -> bool:
    if value is None:
        return default
    text = value.strip().lower()
    if not text:
        return default
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    return default


def _parse_int(value: Optional[str], default: int) -> int:
    if value is None:
        return default
    try:
        return int(value.strip())
    except (TypeError, ValueError):
        return default


def load_config() -> SearchProConfig:
    _load_env_files()
    env = os.environ.get

    raw_data_file = (env("SEARCHPRO_DATA_FILE") or "").strip()
    raw_level = (env("SEARCHPRO_LOG_LEVEL") or SearchProConfig.log_level).strip().upper()

    return SearchProConfig(
        debounce_ms=_parse_int(env("SEARCHPRO_DEBOUNCE_MS"), SearchProConfig.debounce_ms),
        cache_size=_parse_int(env("SEARCHPRO_CACHE_SIZE"), SearchProConfig.cache_size),
        commit_enabled=_parse_bool(env("SEARCHPRO_COMMIT_ENABLED"), SearchProConfig.commit_enabled),
        data_file=Path(raw_data_file).expanduser() if raw_data_file else None,
        log_dir=Path(env("SEARCHPRO_LOG_DIR", str(SearchProConfig.log_dir))),
        log_level=raw_level if raw_level in _LOG_LEVELS else SearchProConfig.log_level,
    )


CONFIG = load_config()

__all__ = ["CONFIG", "SearchProConfig", "load_config"]

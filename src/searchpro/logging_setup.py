"""Central logging configuration for SearchPro."""
from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from .config import CONFIG, SearchProConfig

LOG_FILE_NAME = "searchpro.log"
ROOT_LOGGER = "searchpro"

_LOGGERS: dict[str, logging.Logger] = {}
_ACTIVE: Optional[SearchProConfig] = None


def log_file_path(config: SearchProConfig = CONFIG) -> Path:
    return config.log_dir / LOG_FILE_NAME


def configure_logging(config: Optional[SearchProConfig] = None, force: bool = False) -> None:
    """Attach file and console handlers to the ``searchpro`` logger.

    The first call wins unless ``force`` is set; the CLI forces a second call
    once ``--log-level``/env overrides are merged into its config.
    """
    global _ACTIVE
    if _ACTIVE is not None and not force:
        return
    cfg = config or CONFIG

    log_path = log_file_path(cfg)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")

    root_logger = logging.getLogger(ROOT_LOGGER)
    root_logger.setLevel(cfg.log_level)

    rotating = RotatingFileHandler(log_path, maxBytes=2_000_000, backupCount=5, encoding="utf-8")
    rotating.setFormatter(formatter)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    # debounce/cache chatter stays in the file
    console.setLevel(max(logging.INFO, root_logger.level))

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()
    root_logger.addHandler(rotating)
    root_logger.addHandler(console)
    _ACTIVE = cfg


def active_config() -> Optional[SearchProConfig]:
    return _ACTIVE


def get_logger(name: Optional[str] = None) -> logging.Logger:
    configure_logging()
    logger_name = name or ROOT_LOGGER
    if logger_name not in _LOGGERS:
        _LOGGERS[logger_name] = logging.getLogger(logger_name)
    return _LOGGERS[logger_name]


__all__ = ["active_config", "configure_logging", "get_logger", "log_file_path"]

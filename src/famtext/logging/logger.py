"""
Centralized logging configuration for famtext.

Key behaviors
-------------
* ``get_logger`` is the only way modules obtain a logger.
* One master log file (default: ``logs/famtext.log``) plus a file per module,
  only when ``config/famtext.yml`` was loaded and ``logging.to_file`` is not
  false. Relative log dirs resolve against the project root.
* Without a config file (library use) nothing is written to disk and the
  console only shows warnings.
* ``debug: true`` in the config, or ``set_debug(True)``, forces DEBUG.
* Optional size-based rotation.
"""

from __future__ import annotations

import logging
from logging import Logger, StreamHandler
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, List

from famtext.config import get_config

# -----------------------------------------------------------------------------
# Paths and configuration
# -----------------------------------------------------------------------------

BASE_LOGGER_NAME = "famtext"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_logger_cache: Dict[str, Logger] = {}
_base_configured: bool = False
_config_level: int = logging.INFO
_effective_level: int = logging.INFO
_to_file: bool = False
_rotate_logs: bool = False
_log_dir_path: Path = Path("logs")


# -----------------------------------------------------------------------------
# Internal helpers
# -----------------------------------------------------------------------------

def _resolve_log_dir(cfg) -> Path:
    log_dir = Path(cfg.logging.get("dir") or cfg.paths.get("logs_dir") or "logs")
    if not log_dir.is_absolute():
        log_dir = cfg.root / log_dir
    return log_dir


def _ensure_log_dir() -> Path:
    _log_dir_path.mkdir(parents=True, exist_ok=True)
    return _log_dir_path


def _build_file_handler(path: Path, level: int) -> logging.Handler:
    if _rotate_logs:
        handler = RotatingFileHandler(
            path,
            maxBytes=5 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
    else:
        handler = logging.FileHandler(path, encoding="utf-8")

    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _drop_handlers(logger: Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def _attach_module_handler(logger: Logger, module_name: str) -> None:
    if any(getattr(h, "is_module_handler", False) for h in logger.handlers):
        return

    path = _ensure_log_dir() / f"{module_name.replace('.', '_')}.log"
    handler = _build_file_handler(path, _effective_level)
    handler.is_module_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)


def _configure_base_logger() -> Logger:
    if not _base_configured:
        configure_logging()
    return logging.getLogger(BASE_LOGGER_NAME)


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------

def configure_logging(cfg=None) -> Logger:
    """(Re)build the shared ``famtext`` handlers from a config object.

    Loggers already handed out are rewired to the new settings.
    """
    global _base_configured, _config_level, _effective_level, _to_file, _rotate_logs, _log_dir_path

    cfg = cfg if cfg is not None else get_config()
    file_loaded = cfg.source is not None

    _rotate_logs = bool(cfg.logging.get("rotate", False))
    _to_file = bool(cfg.logging.get("to_file", file_loaded))
    _log_dir_path = _resolve_log_dir(cfg)

    level_name = str(cfg.logging.get("level", "INFO" if file_loaded else "WARNING")).upper()
    _config_level = getattr(logging, level_name, logging.INFO)
    _effective_level = logging.DEBUG if bool(getattr(cfg, "debug", False)) else _config_level

    base_logger = logging.getLogger(BASE_LOGGER_NAME)
    _drop_handlers(base_logger)
    base_logger.setLevel(_effective_level)
    base_logger.propagate = False

    if _to_file:
        master = _ensure_log_dir() / cfg.logging.get("file", "famtext.log")
        base_logger.addHandler(_build_file_handler(master, _effective_level))

    console = StreamHandler()
    console.setLevel(_effective_level)
    console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    base_logger.addHandler(console)

    _base_configured = True

    for name, logger in _logger_cache.items():
        _drop_handlers(logger)
        logger.setLevel(_effective_level)
        if _to_file:
            _attach_module_handler(logger, name)

    return base_logger


def set_debug(enabled: bool) -> None:
    """Switch every famtext logger and handler to DEBUG, or back to the configured level."""
    global _effective_level

    base_logger = _configure_base_logger()
    _effective_level = logging.DEBUG if enabled else _config_level

    for logger in [base_logger, *_logger_cache.values()]:
        logger.setLevel(_effective_level)
        for handler in logger.handlers:
            handler.setLevel(_effective_level)


def get_logger(name: str | None = None) -> Logger:
    """Return a logger wired to the project-wide handlers.

    Short names such as ``"leveling"`` are placed under the ``famtext``
    namespace so records reach the base console and master handlers.
    """

    base_logger = _configure_base_logger()
    logger_name = name or BASE_LOGGER_NAME
    if logger_name != BASE_LOGGER_NAME and not logger_name.startswith(BASE_LOGGER_NAME + "."):
        logger_name = f"{BASE_LOGGER_NAME}.{logger_name}"

    if logger_name == base_logger.name:
        return base_logger

    logger = logging.getLogger(logger_name)
    logger.setLevel(_effective_level)
    if _to_file:
        _attach_module_handler(logger, logger_name)
    logger.propagate = True

    _logger_cache[logger_name] = logger
    return logger


def list_active_loggers() -> List[str]:
    """Helper for debugging configuration issues in tests."""
    return list(_logger_cache.keys())

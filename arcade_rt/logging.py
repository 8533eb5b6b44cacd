"""
Arcade Runtime Logging

Per-module loggers that print one line per message to stdout:

    [fruitcatch] INFO: Bomb caught, game over with score 12

Usage:
    from arcade_rt.logging import get_logger

    log = get_logger('fruitcatch')
    log.debug("Spawned %s at x=%d", kind, x)

Levels come from the environment when this module is imported:
    ARCADE_LOG_LEVEL=DEBUG          # default for every module
    ARCADE_LOG_BOUNCINGBALL=TRACE   # one module only (per-frame ball output)
    ARCADE_LOG_HOST=WARNING

or at runtime:
    configure_logging(level='DEBUG', modules={'host': 'INFO'})
"""

import os
import sys
import traceback
from enum import IntEnum
from functools import lru_cache
from typing import Any, Dict, Optional


class LogLevel(IntEnum):
    """Numeric levels; TRACE sits below DEBUG, OFF above everything."""
    TRACE = 5
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50
    OFF = 100


ENV_PREFIX = 'ARCADE_LOG_'

# Label printed for each level
_LABELS = {
    LogLevel.TRACE: 'TRACE',
    LogLevel.DEBUG: 'DEBUG',
    LogLevel.INFO: 'INFO',
    LogLevel.WARNING: 'WARN',
    LogLevel.ERROR: 'ERROR',
    LogLevel.CRITICAL: 'CRIT',
}

_config: Dict[str, Any] = {
    'default_level': LogLevel.INFO,
    'module_levels': {},
}


def _format_message(module: str, label: str, msg: str) -> str:
    return f"[{module}] {label}: {msg}"


def _level_from_string(name: str) -> LogLevel:
    """Parse a level name (case-insensitive, WARN accepted). Unknown names mean INFO."""
    name = name.strip().upper()
    if name == 'WARN':
        return LogLevel.WARNING
    return LogLevel.__members__.get(name, LogLevel.INFO)


def _module_key(module: str) -> str:
    """Normalize a module name so 'Fruit.Catch' and 'fruit_catch' match."""
    return module.lower().replace('.', '_').replace('/', '_')


def configure_logging(
    level: str = 'INFO',
    modules: Optional[Dict[str, str]] = None,
) -> None:
    """
    Set the default level and, optionally, per-module overrides.

    Args:
        level: Level name used by every module without an override
        modules: Module name -> level name
    """
    _config['default_level'] = _level_from_string(level)
    for name, module_level in (modules or {}).items():
        _config['module_levels'][_module_key(name)] = _level_from_string(module_level)


def _load_env_config() -> None:
    """Read ARCADE_LOG_LEVEL and ARCADE_LOG_<MODULE> from the environment."""
    default_key = ENV_PREFIX + 'LEVEL'
    for key, value in os.environ.items():
        if not key.startswith(ENV_PREFIX):
            continue
        if key == default_key:
            _config['default_level'] = _level_from_string(value)
        else:
            _config['module_levels'][_module_key(key[len(ENV_PREFIX):])] = _level_from_string(value)


_load_env_config()


class ArcadeLogger:
    """Logger bound to one module name.

    The effective level is looked up on every call, so configure_logging()
    takes effect on loggers that already exist.
    """

    def __init__(self, module: str):
        self.module = module
        self._key = _module_key(module)

    @property
    def level(self) -> LogLevel:
        return _config['module_levels'].get(self._key, _config['default_level'])

    def is_enabled_for(self, level: LogLevel) -> bool:
        return level >= self.level

    def _emit(self, level: LogLevel, msg: str, args: tuple, label: Optional[str] = None) -> None:
        if not self.is_enabled_for(level):
            return
        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                # Mismatched format string; keep the arguments visible
                msg = f"{msg} {args}"
        print(_format_message(self.module, label or _LABELS[level], msg))

    def trace(self, msg: str, *args) -> None:
        """Very verbose output, e.g. once per frame."""
        self._emit(LogLevel.TRACE, msg, args)

    def debug(self, msg: str, *args) -> None:
        self._emit(LogLevel.DEBUG, msg, args)

    def info(self, msg: str, *args) -> None:
        self._emit(LogLevel.INFO, msg, args)

    def warning(self, msg: str, *args) -> None:
        self._emit(LogLevel.WARNING, msg, args)

    warn = warning

    def error(self, msg: str, *args) -> None:
        self._emit(LogLevel.ERROR, msg, args)

    def critical(self, msg: str, *args) -> None:
        self._emit(LogLevel.CRITICAL, msg, args)

    def exception(self, msg: str, *args) -> None:
        """Log at ERROR followed by the traceback of the exception being handled."""
        self._emit(LogLevel.ERROR, msg, args)
        exc_type, exc, tb = sys.exc_info()
        if exc is None:
            return
        for chunk in traceback.format_exception(exc_type, exc, tb):
            for line in chunk.rstrip('\n').split('\n'):
                self._emit(LogLevel.ERROR, line, (), label='TRACE')


@lru_cache(maxsize=64)
def get_logger(module: str) -> ArcadeLogger:
    """Return the (cached) logger for a module name."""
    return ArcadeLogger(module)


def enable_all_logging() -> None:
    """Drop per-module overrides and log everything down to TRACE."""
    _config['module_levels'].clear()
    _config['default_level'] = LogLevel.TRACE


def disable_logging() -> None:
    _config['module_levels'].clear()
    _config['default_level'] = LogLevel.OFF

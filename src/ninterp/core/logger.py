"""
Thin wrapper around Python's ``logging`` module with two extra debug
levels for per-query tracing.

Usage
-----
>>> from ninterp.core.logger import get_logger
>>> log = get_logger(__name__)
>>> log.debug("validated 3-D grid")     # setup / configuration detail
>>> log.debug3("bracket (4, 0.25)")     # per-query trace
"""

import logging
import sys

# ── Custom levels (below DEBUG=10) ──────────────────────────────────────
DEBUG2 = 9
DEBUG3 = 8

logging.addLevelName(DEBUG2, "DEBUG2")
logging.addLevelName(DEBUG3, "DEBUG3")

ROOT_NAME = "ninterp"


class _NinterpLogger(logging.Logger):
    """Logger subclass that adds ``debug2`` and ``debug3`` convenience methods."""

    def debug2(self, msg, *args, **kwargs):
        if self.isEnabledFor(DEBUG2):
            self._log(DEBUG2, msg, args, **kwargs)

    def debug3(self, msg, *args, **kwargs):
        if self.isEnabledFor(DEBUG3):
            self._log(DEBUG3, msg, args, **kwargs)


class _NinterpAdapter(logging.LoggerAdapter):
    """Adds ``debug2`` and ``debug3`` to a plain logger created before ninterp was imported."""

    def debug2(self, msg, *args, **kwargs):
        self.log(DEBUG2, msg, *args, **kwargs)

    def debug3(self, msg, *args, **kwargs):
        self.log(DEBUG3, msg, *args, **kwargs)


# ── Named verbosity levels accepted by set_level() ──────────────────────
LEVEL_NAMES = {
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "debug2": DEBUG2,
    "debug3": DEBUG3,
}


def get_logger(name: str | None = None) -> _NinterpLogger | _NinterpAdapter:
    """Return a logger under the ``ninterp`` hierarchy.

    Module loggers (``ninterp.core.data`` etc.) inherit from the
    ``ninterp`` root logger so a single ``set_level()`` call controls
    everything. The logger class is swapped only for the duration of
    the lookup so other libraries keep the default class. A plain
    logger already registered under *name* (e.g. by
    ``logging.config.dictConfig``) is wrapped in an adapter instead.
    """
    name = name or ROOT_NAME
    manager = logging.Logger.manager
    existing = manager.loggerDict.get(name)
    if isinstance(existing, _NinterpLogger):
        return existing
    if isinstance(existing, logging.Logger):
        return _NinterpAdapter(existing, {})
    previous = manager.loggerClass
    manager.setLoggerClass(_NinterpLogger)
    try:
        return logging.getLogger(name)
    finally:
        manager.loggerClass = previous


def _root_logger() -> logging.Logger:
    get_logger(ROOT_NAME)
    return logging.getLogger(ROOT_NAME)


def set_level(level: int | str = logging.INFO) -> None:
    """Set the log level for *all* ninterp loggers at once.

    Accepts Python level ints or the names in :data:`LEVEL_NAMES`
    (case-insensitive), including ``"debug2"`` and ``"debug3"``.
    """
    if isinstance(level, str):
        key = level.lower()
        if key not in LEVEL_NAMES:
            raise ValueError(f"Unknown log level: {level!r}")
        level = LEVEL_NAMES[key]
    _root_logger().setLevel(level)


def setup(level: int | str = logging.INFO, stream=None) -> None:
    """One-time setup: attach a stderr handler with the ninterp format.

    Safe to call multiple times; extra calls only update the level.
    """
    root = _root_logger()
    if not root.handlers:
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)-7s: %(name)s: %(message)s"))
        root.addHandler(handler)
    set_level(level)

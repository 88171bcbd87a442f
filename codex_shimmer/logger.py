"""
Package logger setup
"""
import logging
import os

_LOGGER_NAME = "codex_shimmer"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_LOGGER = logging.getLogger(_LOGGER_NAME)


def debug_enabled():
    return os.environ.get("CODEX_SHIMMER_DEBUG", "").lower() in {"1", "true", "yes", "on"}


def get_logger(name=None):
    """Returns the package logger or one of its children"""
    if not name or name == _LOGGER_NAME:
        return _LOGGER
    if name.startswith(_LOGGER_NAME + "."):
        name = name[len(_LOGGER_NAME) + 1:]
    return _LOGGER.getChild(name)


def configure_logging(level=None):
    """Attaches a stream handler once; level defaults to the env switch"""
    if level is None:
        level = logging.DEBUG if debug_enabled() else logging.INFO
    _LOGGER.setLevel(level)
    if not any(getattr(h, "_codex_shimmer", False) for h in _LOGGER.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._codex_shimmer = True
        _LOGGER.addHandler(handler)
    return _LOGGER

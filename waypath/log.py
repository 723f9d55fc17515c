"""
waypath.log - Logging facade for the "waypath" logger.

Each function takes either a message or an exception; exceptions are
logged with their traceback and an optional context prefix.

Usage:
    from waypath import log

    log.warn("[PathTweenManager] Cannot cancel tween 3: not found")

    try:
        settings = TweenSettings.load(path)
    except Exception as e:
        log.error(e, "Failed to load tween settings")
"""

import logging
import traceback

_logger = logging.getLogger("waypath")


def debug(msg_or_exc, context: str = ""):
    _emit(logging.DEBUG, msg_or_exc, context)


def info(msg_or_exc, context: str = ""):
    _emit(logging.INFO, msg_or_exc, context)


def warn(msg_or_exc, context: str = ""):
    _emit(logging.WARNING, msg_or_exc, context)


def error(msg_or_exc, context: str = ""):
    _emit(logging.ERROR, msg_or_exc, context)


def set_level(level) -> None:
    """Threshold of the "waypath" logger (int or level name)."""
    _logger.setLevel(level)


def _emit(level: int, msg_or_exc, context: str) -> None:
    if not _logger.isEnabledFor(level):
        return
    if isinstance(msg_or_exc, BaseException):
        _logger.log(level, _format_exception(msg_or_exc, context))
    else:
        _logger.log(level, str(msg_or_exc))


def _format_exception(exc: BaseException, context: str) -> str:
    head = f"{type(exc).__name__}: {exc}"
    if context:
        head = f"{context}: {head}"
    tb = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    return f"{head}\n{tb}"

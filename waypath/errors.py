"""Exceptions raised by the path tween engine."""

from __future__ import annotations


class PathTweenError(Exception):
    """Base class for path tween failures."""


class InvalidTargetError(PathTweenError, ValueError):
    """Raised when a tween is requested without a target transform."""


class InvalidParametersError(PathTweenError, ValueError):
    """Raised on bad duration, waypoints, subdivision or pool misuse."""


class TweenNotFoundError(PathTweenError, KeyError):
    """Raised when no active tween holds the requested uid."""

    def __init__(self, uid: int, message: str | None = None) -> None:
        self.uid = uid
        super().__init__(message or f"No active path tween with uid {uid}")

    def __str__(self) -> str:
        return str(self.args[0])

"""Exceptions raised at the lookup and mutation boundaries."""
from __future__ import annotations


class OrbitViewerError(Exception):
    """Base class for every recoverable orbit viewer error."""


class UnknownBodyError(OrbitViewerError, KeyError):
    """Raised when a celestial body key is not in the registry."""

    def __init__(self, key: str, available: list[str] | None = None) -> None:
        self.key = key
        self.available = list(available or [])
        message = f"Unknown body '{key}'"
        if self.available:
            message += f". Available: {', '.join(self.available)}"
        super().__init__(message)

    def __str__(self) -> str:
        return str(self.args[0])


class InvalidGeometryError(OrbitViewerError, ValueError):
    """Raised when an orbit radius would not be strictly positive."""


class InvalidParameterError(OrbitViewerError, ValueError):
    """Raised when a satellite parameter is outside its valid range."""


__all__ = [
    "InvalidGeometryError",
    "InvalidParameterError",
    "OrbitViewerError",
    "UnknownBodyError",
]

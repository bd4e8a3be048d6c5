"""
Exceptions raised by the persistence package itself.

Store errors (connectivity, integrity errors other than a duplicate todo
title) are NOT wrapped; they reach the caller unchanged.
"""

from __future__ import annotations


class PersistenceError(Exception):
    """Base exception for persistence configuration errors."""

    def __init__(self, message: str, *, details: dict | None = None) -> None:
        self.details = details or {}
        super().__init__(message)


class UnknownBackendError(PersistenceError):
    """The requested storage strategy name is not recognised."""

    def __init__(self, backend: str) -> None:
        self.backend = backend
        super().__init__(
            f"Unknown persistence backend: {backend!r}",
            details={"backend": backend},
        )

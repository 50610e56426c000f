"""Error types shared by the tests.

Each class is its own error kind, so errors with the same text but from
different classes must never be treated as the same error.
"""

from __future__ import annotations

from multierr.domain.model.error_value import KindedError


class NotFoundError(Exception):
    pass


class PermissionDeniedError(Exception):
    pass


class SilentError(Exception):
    """Renders an empty message."""

    def __str__(self) -> str:
        return ""


class TaggedError(KindedError):
    """A KindedError subclass: same tags as KindedError, different type."""


class MethodKindError(Exception):
    """Defines ``kind`` as a method, not as a tag."""

    def kind(self) -> str:
        return "method"

"""Helpers for treating arbitrary exceptions as comparable error values.

An error value exposes two things: a rendered message and a kind identity.
Kind comparison is what makes two errors with the same text but a different
origin distinguishable.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable


class KindedError(Exception):
    """An error that carries an explicit kind tag set at creation.

    Useful when several logical error kinds share one Python class, e.g.
    errors rebuilt from text. Two instances with different tags are
    different kinds.
    """

    def __init__(self, kind: Hashable, message: str) -> None:
        super().__init__(message)
        self._kind = kind
        self._message = message

    @property
    def kind(self) -> Hashable:
        return self._kind

    @property
    def message(self) -> str:
        return self._message

    def __str__(self) -> str:
        return self._message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._kind!r}, {self._message!r})"

    def __reduce__(self):
        return (type(self), (self._kind, self._message))


def message_of(err: BaseException) -> str:
    return str(err)


def kind_of(err: BaseException) -> Hashable:
    """Return the kind identity of *err*.

    The runtime type always takes part. A KindedError tag splits one type
    into several kinds but never makes two types the same kind.
    """
    if isinstance(err, KindedError):
        return (type(err), err.kind)
    return type(err)


def similar_errors(first: BaseException, second: BaseException) -> bool:
    """True if both errors have the same kind and the same message."""
    if kind_of(first) != kind_of(second):
        return False
    return message_of(first) == message_of(second)


def sort_errors(errors: Iterable[BaseException]) -> list[BaseException]:
    """Return a new list sorted by message; equal messages keep their order."""
    # sorted() is guaranteed stable
    return sorted(errors, key=message_of)

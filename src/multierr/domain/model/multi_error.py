"""MultiError: several independent errors combined into one.

A MultiError is immutable and never empty. Use the ``new()`` factory, which
returns ``None`` when there is nothing to report, instead of building an
aggregate by hand.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import overload

from multierr.domain.exceptions import ValidationError
from multierr.domain.model.error_value import message_of, similar_errors, sort_errors

# Separates one error message from another.
SEP = "; "


class MultiError(Exception):
    """Aggregate of an ordered, non-empty sequence of errors.

    The aggregate owns a private copy of the errors it was built from.
    ``unwrap()`` hands out a fresh list, so callers can never change the
    aggregate through it.
    """

    def __init__(self, errors: Iterable[BaseException]) -> None:
        es = tuple(errors)
        if not es:
            raise ValidationError("MultiError requires at least one error")
        for err in es:
            if not isinstance(err, BaseException):
                raise ValidationError(
                    f"MultiError can only hold exceptions, got {type(err).__name__}"
                )
        super().__init__(*es)
        self._errors = es

    # --- Access ---------------------------------------------------------------

    def get(self, index: int) -> BaseException:
        """Return the *index*-th error (0-based, insertion order).

        Raises IndexError unless ``0 <= index < len(self)``.
        """
        if not 0 <= index < len(self._errors):
            raise IndexError(
                f"MultiError index {index} out of range for {len(self._errors)} errors"
            )
        return self._errors[index]

    @overload
    def __getitem__(self, index: int) -> BaseException: ...

    @overload
    def __getitem__(self, index: slice) -> list[BaseException]: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return list(self._errors[index])
        return self.get(index)

    def __len__(self) -> int:
        return len(self._errors)

    def __iter__(self) -> Iterator[BaseException]:
        return iter(self._errors)

    @property
    def exceptions(self) -> tuple[BaseException, ...]:
        return self._errors

    def unwrap(self) -> list[BaseException]:
        """Return a new list holding the errors in their original order."""
        return list(self._errors)

    # --- Display --------------------------------------------------------------

    def message(self) -> str:
        return SEP.join(message_of(err) for err in self._errors)

    def __str__(self) -> str:
        return self.message()

    def __repr__(self) -> str:
        return f"MultiError({list(self._errors)!r})"

    def __reduce__(self):
        return (type(self), (self._errors,))

    # --- Comparison -----------------------------------------------------------

    def similar(self, other: object) -> bool:
        """Check whether *other* holds the same errors, in any order.

        Errors match when they have the same kind and the same message.
        Anything that is not an aggregate of exactly the same type and length
        never matches.
        """
        if other is None:
            return False
        if type(other) is not type(self):
            return False
        if len(self) != len(other):
            return False

        es1 = sort_errors(self._errors)
        es2 = sort_errors(other._errors)
        for first, second in zip(es1, es2):
            if not similar_errors(first, second):
                return False
        return True


def new(errors: Iterable[BaseException]) -> MultiError | None:
    """Combine *errors* into a MultiError, or return None if there are none."""
    es = list(errors)
    if not es:
        return None
    return MultiError(es)

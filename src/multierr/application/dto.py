"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from multierr.domain.exceptions import ValidationError
from multierr.domain.model.error_value import KindedError

DEFAULT_KIND = "error"


@dataclass(frozen=True)
class ErrorSpec:
    """Input: one error described as text (kind + message)."""

    kind: str
    message: str

    @staticmethod
    def parse(raw: str) -> ErrorSpec:
        """Parse 'Kind:message' into an ErrorSpec.

        Only the first ':' separates the kind, so messages may contain
        colons. Text without a ':' gets the default kind.
        """
        if ":" not in raw:
            return ErrorSpec(kind=DEFAULT_KIND, message=raw.strip())
        kind, message = raw.split(":", 1)
        kind = kind.strip()
        if not kind:
            raise ValidationError(f"Missing error kind in '{raw}'")
        return ErrorSpec(kind=kind, message=message.strip())

    def to_error(self) -> KindedError:
        return KindedError(self.kind, self.message)


@dataclass(frozen=True)
class AggregateDTO:
    """Output: a combined error as displayed to the user."""

    count: int
    message: str
    errors: list[str]


@dataclass(frozen=True)
class ComparisonDTO:
    """Output: result of comparing two sets of errors."""

    similar: bool
    left_count: int
    right_count: int

"""Application service: Compare Errors use case."""

from __future__ import annotations

import logging

from multierr.application.dto import ComparisonDTO, ErrorSpec
from multierr.domain.model.multi_error import new

logger = logging.getLogger(__name__)


class CompareErrorsHandler:

    def handle(
        self,
        left_specs: list[ErrorSpec],
        right_specs: list[ErrorSpec],
    ) -> ComparisonDTO:
        """Check whether both sides describe the same errors in any order.

        An empty side produces no aggregate, so it is never similar to
        anything, not even another empty side.
        """
        left = new(spec.to_error() for spec in left_specs)
        right = new(spec.to_error() for spec in right_specs)

        similar = left is not None and left.similar(right)
        logger.debug(
            "Compared %d against %d errors: similar=%s",
            len(left_specs),
            len(right_specs),
            similar,
        )
        return ComparisonDTO(
            similar=similar,
            left_count=len(left_specs),
            right_count=len(right_specs),
        )

"""Application service: Render Errors use case."""

from __future__ import annotations

import logging

from multierr.application.dto import AggregateDTO, ErrorSpec
from multierr.domain.model.error_value import message_of
from multierr.domain.model.multi_error import new

logger = logging.getLogger(__name__)


class RenderErrorsHandler:

    def handle(self, specs: list[ErrorSpec]) -> AggregateDTO | None:
        """Combine the described errors; None when there is nothing to report."""
        merr = new(spec.to_error() for spec in specs)
        if merr is None:
            logger.debug("No errors given, nothing to render")
            return None

        logger.debug("Built aggregate of %d errors", len(merr))
        return AggregateDTO(
            count=len(merr),
            message=str(merr),
            errors=[message_of(err) for err in merr],
        )

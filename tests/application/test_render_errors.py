"""Tests for the RenderErrorsHandler use case."""

import logging

from multierr.application.dto import ErrorSpec
from multierr.application.render_errors import RenderErrorsHandler


class TestRenderErrors:

    def test_no_specs_returns_none(self):
        assert RenderErrorsHandler().handle([]) is None

    def test_combines_messages_in_order(self):
        dto = RenderErrorsHandler().handle(
            [ErrorSpec("io", "error1"), ErrorSpec("net", "error2")]
        )
        assert dto.count == 2
        assert dto.message == "error1; error2"
        assert dto.errors == ["error1", "error2"]

    def test_logs_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="multierr"):
            RenderErrorsHandler().handle([ErrorSpec("io", "error1")])
        assert "Built aggregate of 1 errors" in caplog.text

"""End-to-end tests for the click command line."""

import pytest
from click.testing import CliRunner

from multierr.infrastructure.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


class TestRenderCommand:

    def test_renders_combined_message(self, runner):
        result = runner.invoke(cli, ["render", "io:error1", "net:error2"])
        assert result.exit_code == 0
        assert result.output == "error1; error2\n"

    def test_no_errors(self, runner):
        result = runner.invoke(cli, ["render"])
        assert result.exit_code == 0
        assert "No errors." in result.output

    def test_list_flag_shows_each_error(self, runner):
        result = runner.invoke(cli, ["render", "--list", "io:error1", "net:error2"])
        assert result.exit_code == 0
        assert "0  error1" in result.output
        assert "1  error2" in result.output
        assert "2 error(s)" in result.output

    def test_bad_spec_is_usage_error(self, runner):
        result = runner.invoke(cli, ["render", ":boom"])
        assert result.exit_code == 2
        assert "Missing error kind" in result.output


class TestCompareCommand:

    def test_similar_exits_zero(self, runner):
        result = runner.invoke(
            cli,
            ["compare", "--left", "io:a", "--left", "io:b", "--right", "io:b", "--right", "io:a"],
        )
        assert result.exit_code == 0
        assert result.output == "similar\n"

    def test_not_similar_exits_one(self, runner):
        result = runner.invoke(cli, ["compare", "--left", "io:a", "--right", "net:a"])
        assert result.exit_code == 1
        assert "not similar" in result.output

    def test_nothing_given_is_not_similar(self, runner):
        result = runner.invoke(cli, ["compare"])
        assert result.exit_code == 1


class TestLogLevel:

    def test_unknown_level_in_environment_fails(self, runner):
        result = runner.invoke(cli, ["render", "io:a"], env={"MULTIERR_LOG_LEVEL": "LOUD"})
        assert result.exit_code == 1
        assert "Unknown log level" in result.output

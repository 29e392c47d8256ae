"""End-to-end tests for the click CLI against a temporary data directory."""

import pytest
from click.testing import CliRunner

from backoffice.infrastructure.cli.main import cli


@pytest.fixture
def runner(monkeypatch, tmp_path):
    monkeypatch.setenv("BACKOFFICE_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("BACKOFFICE_LOG_LEVEL", "WARNING")
    return CliRunner()


def _invoke(runner, *args):
    return runner.invoke(cli, list(args))


def _seed_catalog(runner):
    assert _invoke(runner, "product", "add", "--name", "Widget", "--price", "10.00").exit_code == 0
    assert _invoke(runner, "product", "add", "--name", "Gadget", "--price", "5.50").exit_code == 0


class TestPurchaseCommands:

    def test_create_and_show(self, runner):
        _seed_catalog(runner)
        created = _invoke(
            runner, "purchase", "create",
            "--customer", "Alice",
            "--lines", "1:2:gift wrap,2:1",
            "--date", "2024-01-02",
        )
        assert created.exit_code == 0, created.output
        assert "Purchase #1" in created.output
        assert "25.50" in created.output

        shown = _invoke(runner, "purchase", "show", "--id", "1")
        assert shown.exit_code == 0
        assert "Widget" in shown.output
        assert "gift wrap" in shown.output

    def test_show_keeps_price_after_reprice(self, runner):
        _seed_catalog(runner)
        _invoke(runner, "purchase", "create", "--customer", "Alice", "--lines", "1:1")
        assert _invoke(runner, "product", "update", "--id", "1", "--price", "12.00").exit_code == 0

        shown = _invoke(runner, "purchase", "show", "--id", "1")
        assert "10.00" in shown.output
        assert "12.00" not in shown.output

    def test_inactive_product_rejected(self, runner):
        _seed_catalog(runner)
        _invoke(runner, "product", "deactivate", "--id", "2")
        result = _invoke(runner, "purchase", "create", "--customer", "Alice", "--lines", "2:1")
        assert result.exit_code != 0
        assert "unknown or inactive product" in result.output

    def test_bad_line_format(self, runner):
        result = _invoke(runner, "purchase", "create", "--customer", "Alice", "--lines", "oops")
        assert result.exit_code != 0
        assert "Invalid line format" in result.output

    def test_list_newest_first(self, runner):
        _seed_catalog(runner)
        _invoke(runner, "purchase", "create", "--customer", "Alice", "--lines", "1:1", "--date", "2024-01-02")
        _invoke(runner, "purchase", "create", "--customer", "Bob", "--lines", "2:2", "--date", "2024-02-01")

        result = _invoke(runner, "purchase", "list")
        assert result.exit_code == 0, result.output
        rows = [line.split() for line in result.output.splitlines()[2:]]
        assert [(r[0], r[3], r[-1]) for r in rows] == [("2", "Bob", "11.00"), ("1", "Alice", "10.00")]

    def test_list_empty_ledger(self, runner):
        assert "No purchases found." in _invoke(runner, "purchase", "list").output

    def test_show_missing_purchase(self, runner):
        result = _invoke(runner, "purchase", "show", "--id", "42")
        assert result.exit_code != 0
        assert "Purchase #42 not found" in result.output


class TestReportCommands:

    def test_daily_report_is_gap_filled(self, runner):
        _seed_catalog(runner)
        _invoke(
            runner, "purchase", "create", "--customer", "Alice",
            "--lines", "1:2,2:1", "--date", "2024-01-02",
        )
        result = _invoke(runner, "report", "daily", "--from", "2024-01-03", "--to", "2024-01-01")
        assert result.exit_code == 0, result.output
        rows = [line.split() for line in result.output.splitlines()[2:]]
        assert rows == [
            ["2024-01-01", "0", "0.00"],
            ["2024-01-02", "1", "25.50"],
            ["2024-01-03", "0", "0.00"],
        ]

    def test_monthly_report_without_purchases(self, runner):
        result = _invoke(runner, "report", "monthly", "--months", "0")
        assert result.exit_code == 0
        assert "No purchases in range." in result.output


class TestProductCommands:

    def test_list_hides_inactive_by_default(self, runner):
        _seed_catalog(runner)
        _invoke(runner, "product", "deactivate", "--id", "2")
        assert "Gadget" not in _invoke(runner, "product", "list").output
        assert "Gadget" in _invoke(runner, "product", "list", "--all").output

    def test_activate_puts_product_back_on_sale(self, runner):
        _seed_catalog(runner)
        _invoke(runner, "product", "deactivate", "--id", "2")
        result = _invoke(runner, "product", "activate", "--id", "2")
        assert result.exit_code == 0
        assert "activated" in result.output
        assert "Gadget" in _invoke(runner, "product", "list").output


class TestSettingsErrors:

    def test_bad_log_level_is_reported_without_traceback(self, runner, monkeypatch):
        monkeypatch.setenv("BACKOFFICE_LOG_LEVEL", "LOUD")
        result = _invoke(runner, "product", "list")
        assert result.exit_code == 1
        assert "Invalid BACKOFFICE_LOG_LEVEL" in result.output
        assert isinstance(result.exception, SystemExit)

"""Tests for scythe/main.py - the top level error handler."""

from unittest.mock import MagicMock, patch

import pytest

from scythe import main as main_module
from scythe.errors import ConfigError, DateParseError


@pytest.fixture(autouse=True)
def no_logging_setup():
    with patch.object(main_module, "setup_logging"):
        yield


class TestMain:
    """Tests for the main entry point."""

    def test_success(self):
        """A completed run exits 0."""
        reconciler = MagicMock()
        reconciler.run.return_value = []
        with patch.object(main_module, "load_config") as load_config, patch.object(
            main_module, "build_reconciler", return_value=reconciler
        ):
            assert main_module.main(["--config-file", "scythe.env"]) == 0

        load_config.assert_called_once_with("scythe.env")

    def test_config_error_exits_one(self, capsys):
        """Configuration errors are printed and exit 1."""
        with patch.object(main_module, "load_config", side_effect=ConfigError("Missing EMPLOYEE")):
            assert main_module.main([]) == 1

        assert "Error: Missing EMPLOYEE" in capsys.readouterr().err

    def test_fatal_run_error_exits_one(self, capsys):
        """Errors raised mid run are handled at the top level."""
        reconciler = MagicMock()
        reconciler.run.side_effect = DateParseError("Invalid date 'x'")
        with patch.object(main_module, "load_config"), patch.object(
            main_module, "build_reconciler", return_value=reconciler
        ):
            assert main_module.main([]) == 1

        assert "Invalid date" in capsys.readouterr().err

    def test_interrupt(self):
        """Ctrl-C exits 130."""
        reconciler = MagicMock()
        reconciler.run.side_effect = KeyboardInterrupt
        with patch.object(main_module, "load_config"), patch.object(
            main_module, "build_reconciler", return_value=reconciler
        ):
            assert main_module.main([]) == 130


class TestBuildReconciler:
    """Tests for build_reconciler."""

    def test_uses_first_sheet_when_unset(self):
        """Without SHEET_NAME the first sheet of the spreadsheet is the ledger."""
        config = MagicMock(sheet_name=None, employee="Jane Doe", category="Engineering")
        with patch.object(main_module, "GoogleSheetsClient") as sheets_cls, patch.object(
            main_module, "HarvestClient"
        ):
            sheets_cls.return_value.first_sheet_name.return_value = "Ledger"
            reconciler = main_module.build_reconciler(config)

        assert reconciler.ledger.sheet_name == "Ledger"
        assert reconciler.ledger.employee == "Jane Doe"

    def test_configured_sheet(self):
        """An explicit SHEET_NAME skips the metadata lookup."""
        config = MagicMock(sheet_name="Hours")
        with patch.object(main_module, "GoogleSheetsClient") as sheets_cls, patch.object(
            main_module, "HarvestClient"
        ):
            reconciler = main_module.build_reconciler(config)

        sheets_cls.return_value.first_sheet_name.assert_not_called()
        assert reconciler.ledger.sheet_name == "Hours"

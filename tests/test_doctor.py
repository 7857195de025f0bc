"""Tests for the ``shape-radius doctor`` command (cli/doctor.py).

Coverage:
* Individual check functions return correct tuples.
* Missing optional UI libraries warn but do not fail.
* A broken shape-variables file fails the run.
"""

from __future__ import annotations

import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from shape_radius.cli import exit_codes
from shape_radius.cli.doctor import (
    _categories_check,
    _optional_module_check,
    _python_version_check,
    _status_plain,
    run_doctor,
)


class TestPythonVersionCheck:
    def test_returns_tuple(self) -> None:
        label, value, status = _python_version_check()
        assert label == "Python"
        assert isinstance(value, str)
        assert "OK" in status or "FAIL" in status


class TestOptionalModuleCheck:
    def test_installed(self) -> None:
        label, value, status = _optional_module_check("rich", "rich")
        assert label == "rich"
        assert "OK" in status

    @patch.dict("sys.modules", {"questionary": None})
    def test_not_installed_warns(self) -> None:
        label, value, status = _optional_module_check("questionary", "questionary")
        assert value == "NOT INSTALLED"
        assert "WARN" in status


class TestCategoriesCheck:
    def test_defaults(self) -> None:
        assert _categories_check(None) == ("categories", "built-in defaults", "[green]OK[/green]")

    def test_valid_file(self, shape_variables: Path) -> None:
        label, value, status = _categories_check(shape_variables)
        assert "2 entries" in value
        assert "OK" in status

    def test_missing_file(self, tmp_path: Path) -> None:
        label, value, status = _categories_check(tmp_path / "absent.json")
        assert "not found" in value
        assert "FAIL" in status


class TestStatusPlain:
    @pytest.mark.parametrize(
        ("status", "expected"),
        [
            ("[green]OK[/green]", "OK"),
            ("[yellow]WARN[/yellow]", "WARN"),
            ("[red]FAIL (>=3.10 required)[/red]", "FAIL"),
        ],
    )
    def test_strips_markup(self, status: str, expected: str) -> None:
        assert _status_plain(status) == expected


class TestRunDoctor:
    def test_success_with_defaults(self) -> None:
        assert run_doctor() == exit_codes.SUCCESS

    def test_failure_with_broken_file(self, tmp_path: Path) -> None:
        assert run_doctor(tmp_path / "absent.json") == exit_codes.GENERAL_ERROR

    def test_plain_output_without_rich(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        for name in ("rich", "rich.console", "rich.table", "rich.logging"):
            monkeypatch.setitem(sys.modules, name, None)

        assert run_doctor() == exit_codes.SUCCESS
        err = capsys.readouterr().err
        assert "shape-radius doctor" in err
        assert "All checks passed." in err

    def test_cli_routes_categories_path(self, shape_variables: Path) -> None:
        from shape_radius.cli.app import main

        with patch("shape_radius.cli.doctor.run_doctor", return_value=0) as mock_doctor:
            main(["--categories", str(shape_variables), "doctor"])
        mock_doctor.assert_called_once_with(shape_variables)

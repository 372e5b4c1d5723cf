# topmark:header:start
#
#   project      : SubDiag
#   file         : test_cli_config.py
#   file_relpath : tests/cli/test_cli_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: config discovery, explicit config files and the `config` command."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from subdiag.core.exit_codes import ExitCode
from tests.cli.conftest import assert_exit_code, assert_SUCCESS, run_cli_in
from tests.samples import SAMPLE_ENERGY, SAMPLE_TEXT, WIDE_TEXT

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = pytest.mark.cli


def test_local_subdiag_toml_sets_width(tmp_path: Path) -> None:
    (tmp_path / "subdiag.toml").write_text(
        "[report]\nrate_width = 7\nbig_fallback = false\n", encoding="utf-8"
    )

    result = run_cli_in(tmp_path, ["--no-color", "energy"], input_text=SAMPLE_TEXT)

    assert_exit_code(result, ExitCode.OVERFLOW_ERROR)


def test_cli_overrides_local_config(tmp_path: Path) -> None:
    (tmp_path / "subdiag.toml").write_text(
        "[report]\nrate_width = 7\nbig_fallback = false\n", encoding="utf-8"
    )

    result = run_cli_in(
        tmp_path, ["--no-color", "energy", "--big-fallback"], input_text=SAMPLE_TEXT
    )

    assert_SUCCESS(result)
    assert result.output.strip() == str(SAMPLE_ENERGY)


def test_no_config_ignores_local_files(tmp_path: Path) -> None:
    (tmp_path / "subdiag.toml").write_text(
        "[report]\nbig_fallback = false\n", encoding="utf-8"
    )

    result = run_cli_in(tmp_path, ["--no-color", "--no-config", "energy"], input_text=WIDE_TEXT)

    assert_SUCCESS(result)


def test_pyproject_tool_section(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[project]\nname = "x"\n\n[tool.subdiag.output]\nformat = "json"\n', encoding="utf-8"
    )

    result = run_cli_in(tmp_path, ["energy"], input_text=SAMPLE_TEXT)

    assert_SUCCESS(result)
    assert json.loads(result.output) == {"energy_consumption": SAMPLE_ENERGY, "big": False}


def test_subdiag_toml_wins_over_pyproject(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[tool.subdiag.output]\nformat = "json"\n', encoding="utf-8"
    )
    (tmp_path / "subdiag.toml").write_text('[output]\nformat = "text"\n', encoding="utf-8")

    result = run_cli_in(tmp_path, ["--no-color", "energy"], input_text=SAMPLE_TEXT)

    assert_SUCCESS(result)
    assert result.output.strip() == str(SAMPLE_ENERGY)


def test_explicit_config_file(tmp_path: Path) -> None:
    (tmp_path / "strict.toml").write_text("[report]\nbig_fallback = false\n", encoding="utf-8")

    result = run_cli_in(
        tmp_path, ["--no-color", "--config", "strict.toml", "energy"], input_text=WIDE_TEXT
    )

    assert_exit_code(result, ExitCode.OVERFLOW_ERROR)


@pytest.mark.parametrize(
    "content",
    [
        '[report]\nrate_width = "wide"\n',
        "[report]\nbig_fallback = 1\n",
        '[output]\nformat = "yaml"\n',
        'report = "flat"\n',
        "[report\nrate_width = 8\n",
    ],
)
def test_invalid_config(tmp_path: Path, content: str) -> None:
    (tmp_path / "subdiag.toml").write_text(content, encoding="utf-8")

    result = run_cli_in(tmp_path, ["--no-color", "energy"], input_text=SAMPLE_TEXT)

    assert_exit_code(result, ExitCode.CONFIG_ERROR)


def test_missing_explicit_config(tmp_path: Path) -> None:
    result = run_cli_in(
        tmp_path, ["--no-color", "--config", "absent.toml", "energy"], input_text=SAMPLE_TEXT
    )

    assert_exit_code(result, ExitCode.CONFIG_ERROR)


def test_config_command_shows_defaults(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["--no-color", "config"])

    assert_SUCCESS(result)
    assert "# Sources: <defaults>" in result.output
    assert "rate_width = 64" in result.output
    assert "big_fallback = true" in result.output
    assert 'format = "text"' in result.output


def test_config_command_shows_merged_sources(tmp_path: Path) -> None:
    (tmp_path / "subdiag.toml").write_text("[report]\nrate_width = 32\n", encoding="utf-8")

    result = run_cli_in(tmp_path, ["--no-color", "config", "--format", "markdown"])

    assert_SUCCESS(result)
    assert "subdiag.toml" in result.output
    assert "rate_width = 32" in result.output
    assert 'format = "markdown"' in result.output

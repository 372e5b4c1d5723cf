# topmark:header:start
#
#   project      : SubDiag
#   file         : test_config_io.py
#   file_relpath : tests/config/test_config_io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for TOML I/O helpers in subdiag.config.io.

Covers loading (and failing to load) TOML files with tomlkit, extracting the
``[tool.subdiag]`` table from ``pyproject.toml``, and local file discovery.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest
import tomlkit

from subdiag.config.io import (
    ConfigLoadError,
    discover_local_config_files,
    extract_subdiag_table,
    load_defaults_dict,
    load_toml_dict,
    to_toml,
)

if TYPE_CHECKING:
    from pathlib import Path


def test_defaults_are_fresh_copies() -> None:
    """Mutating the returned defaults must not leak into the next call."""
    first = load_defaults_dict()
    first["report"]["rate_width"] = 8

    assert load_defaults_dict()["report"]["rate_width"] == 64


def test_load_toml_dict(tmp_path: Path) -> None:
    path = tmp_path / "subdiag.toml"
    path.write_text("[report]\nrate_width = 32 # bits\n", encoding="utf-8")

    data = load_toml_dict(path)

    assert data == {"report": {"rate_width": 32}}
    assert type(data["report"]["rate_width"]) is int


def test_load_toml_dict_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigLoadError, match="Error loading TOML"):
        load_toml_dict(tmp_path / "absent.toml")


def test_load_toml_dict_malformed(tmp_path: Path) -> None:
    path = tmp_path / "subdiag.toml"
    path.write_text("[report\n", encoding="utf-8")

    with pytest.raises(ConfigLoadError, match="Error decoding TOML"):
        load_toml_dict(path)


@pytest.mark.parametrize(
    ("data", "expected"),
    [
        ({"tool": {"subdiag": {"report": {"rate_width": 8}}}}, {"report": {"rate_width": 8}}),
        ({"tool": {"black": {}}}, None),
        ({"project": {"name": "x"}}, None),
        ({"tool": "oops"}, None),
    ],
)
def test_extract_from_pyproject(
    tmp_path: Path, data: dict[str, Any], expected: dict[str, Any] | None
) -> None:
    assert extract_subdiag_table(tmp_path / "pyproject.toml", data) == expected


def test_extract_from_subdiag_toml_returns_document(tmp_path: Path) -> None:
    data: dict[str, Any] = {"output": {"format": "json"}}

    assert extract_subdiag_table(tmp_path / "subdiag.toml", data) is data


def test_discover_local_config_files_order(tmp_path: Path) -> None:
    """``pyproject.toml`` comes first so that ``subdiag.toml`` wins the merge."""
    (tmp_path / "subdiag.toml").write_text("", encoding="utf-8")
    (tmp_path / "pyproject.toml").write_text("", encoding="utf-8")
    (tmp_path / "other.toml").write_text("", encoding="utf-8")

    found = discover_local_config_files(tmp_path)

    assert [p.name for p in found] == ["pyproject.toml", "subdiag.toml"]


def test_discover_ignores_directories(tmp_path: Path) -> None:
    (tmp_path / "subdiag.toml").mkdir()

    assert discover_local_config_files(tmp_path) == []


def test_to_toml_is_valid_toml() -> None:
    text = to_toml(load_defaults_dict())

    parsed: Any = tomlkit.parse(text).unwrap()
    assert parsed == load_defaults_dict()
    assert "[report]" in text

# topmark:header:start
#
#   project      : SubDiag
#   file         : io.py
#   file_relpath : src/subdiag/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

This module provides I/O helpers for reading SubDiag configuration from
on-disk TOML files (``subdiag.toml`` / ``pyproject.toml``). Parsing is done
with ``tomlkit`` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeAlias, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from subdiag.config.keys import Toml
from subdiag.config.logging import get_logger
from subdiag.constants import DEFAULT_RATE_WIDTH, PYPROJECT_TOML_NAME, SUBDIAG_TOML_NAME

if TYPE_CHECKING:
    from pathlib import Path

    from subdiag.config.logging import SubdiagLogger

TomlTable: TypeAlias = dict[str, Any]

logger: SubdiagLogger = get_logger(__name__)


class ConfigLoadError(Exception):
    """A configuration file exists but cannot be read or parsed."""


def load_defaults_dict() -> TomlTable:
    """Return SubDiag's **runtime defaults** as a Python dict.

    This function performs no I/O. The returned value is a new dict so callers
    can mutate it safely.
    """
    return {
        Toml.SECTION_REPORT: {
            Toml.KEY_RATE_WIDTH: DEFAULT_RATE_WIDTH,
            Toml.KEY_BIG_FALLBACK: True,
        },
        Toml.SECTION_OUTPUT: {
            Toml.KEY_FORMAT: "text",
        },
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document (``subdiag.toml`` or ``pyproject.toml``).

    Returns:
        The parsed TOML content.

    Raises:
        ConfigLoadError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        raise ConfigLoadError(f"Error loading TOML from {path}: {e}") from e
    except TomlkitParseError as e:
        raise ConfigLoadError(f"Error decoding TOML from {path}: {e}") from e

    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_subdiag_table(path: Path, toml_data: TomlTable) -> TomlTable | None:
    """Return the SubDiag table from parsed TOML data.

    For ``pyproject.toml`` this is the ``[tool.subdiag]`` section (None if
    absent); for any other file it is the whole document.
    """
    if path.name != PYPROJECT_TOML_NAME:
        return toml_data
    tool: Any = toml_data.get(Toml.SECTION_TOOL, {})
    section: Any = tool.get(Toml.SECTION_TOOL_SUBDIAG) if isinstance(tool, dict) else None
    if not isinstance(section, dict):
        logger.debug("No [tool.subdiag] section in %s", path)
        return None
    return cast("TomlTable", section)


def discover_local_config_files(start: Path) -> list[Path]:
    """Return config files found in ``start``, lowest precedence first.

    ``pyproject.toml`` comes before ``subdiag.toml`` so that a later merge
    (last-wins) gives precedence to ``subdiag.toml``.
    """
    found: list[Path] = []
    for name in (PYPROJECT_TOML_NAME, SUBDIAG_TOML_NAME):
        candidate: Path = start / name
        if candidate.is_file():
            found.append(candidate)
    logger.trace("Discovered config files in %s: %s", start, found)
    return found


def to_toml(data: TomlTable) -> str:
    """Render a TOML table as text."""
    return tomlkit.dumps(data)

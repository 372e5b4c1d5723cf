# topmark:header:start
#
#   project      : SubDiag
#   file         : model.py
#   file_relpath : src/subdiag/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime configuration model for SubDiag.

Configuration is layered, lowest precedence first:

1. runtime defaults ([`load_defaults_dict`][subdiag.config.io.load_defaults_dict]);
2. local config files discovered in the working directory
   (``pyproject.toml`` ``[tool.subdiag]``, then ``subdiag.toml``);
3. explicit ``--config`` files, in the order given;
4. CLI overrides.

Layers are merged on a [`MutableConfig`][subdiag.config.model.MutableConfig]
builder and frozen into an immutable [`Config`][subdiag.config.model.Config].
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from subdiag.config.io import (
    discover_local_config_files,
    extract_subdiag_table,
    load_defaults_dict,
    load_toml_dict,
)
from subdiag.config.keys import Toml
from subdiag.config.logging import get_logger
from subdiag.core.formats import OutputFormat

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from subdiag.config.io import TomlTable
    from subdiag.config.logging import SubdiagLogger

logger: SubdiagLogger = get_logger(__name__)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for SubDiag.

    Attributes:
        rate_width (int): Width in bits of the gamma/epsilon rates and of the
            checked energy consumption.
        big_fallback (bool): Whether to fall back to arbitrary precision when the
            checked energy consumption overflows.
        output_format (OutputFormat): How results are rendered.
        config_files (tuple[Path | str, ...]): Config sources that were merged.
    """

    rate_width: int
    big_fallback: bool
    output_format: OutputFormat
    config_files: tuple[Path | str, ...]

    def to_toml_dict(self) -> TomlTable:
        """Convert this Config into a TOML-serializable dict."""
        return {
            Toml.SECTION_REPORT: {
                Toml.KEY_RATE_WIDTH: self.rate_width,
                Toml.KEY_BIG_FALLBACK: self.big_fallback,
            },
            Toml.SECTION_OUTPUT: {
                Toml.KEY_FORMAT: self.output_format.value,
            },
        }

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this config."""
        return MutableConfig(
            rate_width=self.rate_width,
            big_fallback=self.big_fallback,
            output_format=self.output_format.value,
            config_files=list(self.config_files),
        )


# ------------------ Mutable builder ------------------


@dataclass
class MutableConfig:
    """Mutable configuration draft used while merging layers.

    Values are kept as loaded (possibly ill-typed) until `freeze` validates them,
    so a bad value in one layer can still be overridden by a later one.
    """

    rate_width: Any = None
    big_fallback: Any = None
    output_format: Any = None
    config_files: list[Path | str] = field(default_factory=lambda: [])

    def freeze(self) -> Config:
        """Validate this draft and return an immutable Config.

        Raises:
            ValueError: If a value has the wrong type or is out of range.
        """
        width: Any = self.rate_width
        if isinstance(width, bool) or not isinstance(width, int) or width < 1:
            raise ValueError(
                f"Config invalid: '{Toml.KEY_RATE_WIDTH}' must be a positive integer, "
                f"got {width!r}."
            )
        if not isinstance(self.big_fallback, bool):
            raise ValueError(
                f"Config invalid: '{Toml.KEY_BIG_FALLBACK}' must be a boolean, "
                f"got {self.big_fallback!r}."
            )
        try:
            fmt = OutputFormat(self.output_format)
        except ValueError as exc:
            choices = ", ".join(f.value for f in OutputFormat)
            raise ValueError(
                f"Config invalid: '{Toml.KEY_FORMAT}' must be one of {choices}, "
                f"got {self.output_format!r}."
            ) from exc

        return Config(
            rate_width=width,
            big_fallback=self.big_fallback,
            output_format=fmt,
            config_files=tuple(self.config_files),
        )

    # --------------------------- Loaders/parsers --------------------------

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a draft populated with the runtime defaults."""
        draft = cls.from_toml_dict(load_defaults_dict())
        draft.config_files = ["<defaults>"]
        return draft

    @classmethod
    def from_toml_dict(cls, data: TomlTable) -> MutableConfig:
        """Create a draft from a SubDiag TOML table; missing keys stay unset."""
        report: Any = data.get(Toml.SECTION_REPORT, {})
        output: Any = data.get(Toml.SECTION_OUTPUT, {})
        if not isinstance(report, dict):
            raise ValueError(f"Config invalid: [{Toml.SECTION_REPORT}] must be a table.")
        if not isinstance(output, dict):
            raise ValueError(f"Config invalid: [{Toml.SECTION_OUTPUT}] must be a table.")

        for section, table, known in (
            (Toml.SECTION_REPORT, report, {Toml.KEY_RATE_WIDTH, Toml.KEY_BIG_FALLBACK}),
            (Toml.SECTION_OUTPUT, output, {Toml.KEY_FORMAT}),
        ):
            for key in table:
                if key not in known:
                    logger.warning("Ignoring unknown config key [%s].%s", section, key)

        return cls(
            rate_width=report.get(Toml.KEY_RATE_WIDTH),
            big_fallback=report.get(Toml.KEY_BIG_FALLBACK),
            output_format=output.get(Toml.KEY_FORMAT),
        )

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load a draft from a single TOML file.

        Returns:
            MutableConfig | None: The draft, or None if ``path`` is a
                ``pyproject.toml`` without a ``[tool.subdiag]`` section.

        Raises:
            ConfigLoadError: If the file cannot be read or parsed.
            ValueError: If a section has the wrong shape.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        table = extract_subdiag_table(path, load_toml_dict(path))
        if table is None:
            return None
        draft = cls.from_toml_dict(table)
        draft.config_files = [path]
        return draft

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Overlay the set values of ``other`` onto this draft (in place).

        Returns:
            MutableConfig: ``self``, for chaining.
        """
        if other.rate_width is not None:
            self.rate_width = other.rate_width
        if other.big_fallback is not None:
            self.big_fallback = other.big_fallback
        if other.output_format is not None:
            self.output_format = other.output_format
        self.config_files.extend(other.config_files)
        return self

    def apply_overrides(self, overrides: Mapping[str, Any]) -> MutableConfig:
        """Apply non-None overrides (e.g. parsed CLI options) to this draft.

        Recognized keys are ``rate_width``, ``big_fallback`` and ``output_format``.

        Returns:
            MutableConfig: ``self``, for chaining.
        """
        layer = MutableConfig(
            rate_width=overrides.get("rate_width"),
            big_fallback=overrides.get("big_fallback"),
            output_format=overrides.get("output_format"),
        )
        return self.merge_with(layer)

    @classmethod
    def load_merged(
        cls,
        *,
        cwd: Path | None = None,
        extra_config_files: Iterable[Path] = (),
        no_config: bool = False,
    ) -> MutableConfig:
        """Return defaults merged with discovered and explicit config files.

        Args:
            cwd (Path | None): Directory searched for local config files.
                Defaults to the current working directory.
            extra_config_files (Iterable[Path]): Explicit config files, applied
                after discovered ones.
            no_config (bool): If True, skip discovery of local config files.

        Returns:
            MutableConfig: The merged draft (not yet validated).
        """
        draft = cls.from_defaults()
        sources: list[Path] = []
        if not no_config:
            sources.extend(discover_local_config_files(cwd or Path.cwd()))
        sources.extend(extra_config_files)

        for path in sources:
            layer = cls.from_toml_file(path)
            if layer is None:
                continue
            draft.merge_with(layer)

        logger.debug("Merged config from %d source(s): %s", len(draft.config_files), draft)
        return draft

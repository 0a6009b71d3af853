# topmark:header:start
#
#   project      : RecordJSON
#   file         : model.py
#   file_relpath : src/recordjson/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable snapshot consulted by the serializer / deserializer.
    - `MutableConfig`: a mutable builder used during discovery/merge; it
      can be frozen into `Config` and thawed back for edits.

Layering (lowest to highest precedence):
    1. built-in defaults (`MutableConfig.from_defaults`),
    2. a discovered or explicit TOML file (`MutableConfig.from_toml_file`),
    3. CLI overrides (`MutableConfig.apply_cli_args`).

Unset builder values are ``None`` so that merging can tell "not specified"
apart from an explicit empty list or ``False``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from recordjson.config.io import (
    get_bool_value_or_none_checked,
    get_string_list_value_or_none_checked,
    get_table_value,
    load_toml_dict,
    to_toml,
)
from recordjson.config.keys import Toml
from recordjson.config.logging import get_logger
from recordjson.constants import PYPROJECT_TOML_NAME, RECORDJSON_TOML_NAME

if TYPE_CHECKING:
    from recordjson.config.io import TomlTable
    from recordjson.config.logging import RecordJsonLogger

# ArgsLike: generic mapping accepted by config loaders (works for CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]

logger: RecordJsonLogger = get_logger(__name__)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for RecordJSON.

    Attributes:
        fields (tuple[str, ...]): Default field selection for serialization
            (empty = all declared fields).
        include (tuple[str, ...]): Default include paths for serialization.
        pretty_print (bool): Whether serialized JSON is pretty-printed by default.
        ensure_ascii (bool): Whether non-ASCII characters are escaped when encoding.
        allowed_fields (tuple[str, ...]): Default allowed fields for `from_json`
            (empty = all declared fields).
        config_files (tuple[Path, ...]): Config sources that contributed to this snapshot.
        diagnostics (tuple[str, ...]): Warnings collected while loading config.
    """

    fields: tuple[str, ...] = ()
    include: tuple[str, ...] = ()
    pretty_print: bool = False
    ensure_ascii: bool = True
    allowed_fields: tuple[str, ...] = ()
    config_files: tuple[Path, ...] = ()
    diagnostics: tuple[str, ...] = ()

    @classmethod
    def from_defaults(cls) -> Config:
        """Return the built-in default configuration."""
        return MutableConfig.from_defaults().freeze()

    def to_toml_dict(self) -> TomlTable:
        """Return this configuration as a TOML table (``recordjson.toml`` layout)."""
        return {
            Toml.SECTION_SERIALIZER: {
                Toml.KEY_FIELDS: list(self.fields),
                Toml.KEY_INCLUDE: list(self.include),
                Toml.KEY_PRETTY_PRINT: self.pretty_print,
                Toml.KEY_ENSURE_ASCII: self.ensure_ascii,
            },
            Toml.SECTION_DESERIALIZER: {
                Toml.KEY_ALLOWED_FIELDS: list(self.allowed_fields),
            },
        }

    def to_toml(self) -> str:
        """Render this configuration as a TOML document."""
        return to_toml(self.to_toml_dict())

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config.

        Returns:
            MutableConfig: A mutable builder initialized from this snapshot.
        """
        return MutableConfig(
            fields=list(self.fields),
            include=list(self.include),
            pretty_print=self.pretty_print,
            ensure_ascii=self.ensure_ascii,
            allowed_fields=list(self.allowed_fields),
            config_files=list(self.config_files),
            diagnostics=list(self.diagnostics),
        )


# -------------------------- Mutable builder --------------------------
@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    ``None`` means "not specified at this layer"; `freeze` resolves unset values to the
    `Config` defaults.
    """

    fields: list[str] | None = None
    include: list[str] | None = None
    pretty_print: bool | None = None
    ensure_ascii: bool | None = None
    allowed_fields: list[str] | None = None

    config_files: list[Path] = field(default_factory=lambda: [])
    diagnostics: list[str] = field(default_factory=lambda: [])

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Freeze this mutable builder into an immutable Config."""
        defaults = Config()
        return Config(
            fields=tuple(self.fields) if self.fields is not None else defaults.fields,
            include=tuple(self.include) if self.include is not None else defaults.include,
            pretty_print=(
                self.pretty_print if self.pretty_print is not None else defaults.pretty_print
            ),
            ensure_ascii=(
                self.ensure_ascii if self.ensure_ascii is not None else defaults.ensure_ascii
            ),
            allowed_fields=(
                tuple(self.allowed_fields)
                if self.allowed_fields is not None
                else defaults.allowed_fields
            ),
            config_files=tuple(self.config_files),
            diagnostics=tuple(self.diagnostics),
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder populated with the built-in defaults."""
        return cls(
            fields=[],
            include=[],
            pretty_print=False,
            ensure_ascii=True,
            allowed_fields=[],
        )

    @classmethod
    def from_toml_dict(
        cls,
        data: TomlTable,
        *,
        config_file: Path | None = None,
    ) -> MutableConfig:
        """Parse a ``recordjson.toml``-shaped table into a builder.

        Wrong-shaped values are ignored and reported in ``diagnostics``.

        Args:
            data (TomlTable): The parsed TOML table.
            config_file (Path | None): The file the table was read from, if any.

        Returns:
            MutableConfig: The builder; keys absent from ``data`` stay unset.
        """
        diagnostics: list[str] = []
        serializer: TomlTable = get_table_value(data, Toml.SECTION_SERIALIZER)
        deserializer: TomlTable = get_table_value(data, Toml.SECTION_DESERIALIZER)

        draft = cls(
            fields=get_string_list_value_or_none_checked(
                serializer,
                Toml.KEY_FIELDS,
                where=Toml.SECTION_SERIALIZER,
                diagnostics=diagnostics,
            ),
            include=get_string_list_value_or_none_checked(
                serializer,
                Toml.KEY_INCLUDE,
                where=Toml.SECTION_SERIALIZER,
                diagnostics=diagnostics,
            ),
            pretty_print=get_bool_value_or_none_checked(
                serializer,
                Toml.KEY_PRETTY_PRINT,
                where=Toml.SECTION_SERIALIZER,
                diagnostics=diagnostics,
            ),
            ensure_ascii=get_bool_value_or_none_checked(
                serializer,
                Toml.KEY_ENSURE_ASCII,
                where=Toml.SECTION_SERIALIZER,
                diagnostics=diagnostics,
            ),
            allowed_fields=get_string_list_value_or_none_checked(
                deserializer,
                Toml.KEY_ALLOWED_FIELDS,
                where=Toml.SECTION_DESERIALIZER,
                diagnostics=diagnostics,
            ),
            diagnostics=diagnostics,
        )
        if config_file is not None:
            draft.config_files = [config_file]
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Supports both ``recordjson.toml`` and ``pyproject.toml`` (the ``[tool.recordjson]``
        table is extracted from the latter).

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableConfig | None: The builder if successful; None if ``pyproject.toml`` has
                no ``[tool.recordjson]`` section.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)

        toml_data: TomlTable = load_toml_dict(path)

        if path.name == PYPROJECT_TOML_NAME:
            tool_section: TomlTable = get_table_value(
                get_table_value(toml_data, Toml.SECTION_TOOL), Toml.SECTION_TOOL_NAME
            )
            if not tool_section:
                logger.error("[tool.recordjson] section missing or malformed in %s", path)
                return None
            toml_data = tool_section

        draft: MutableConfig = cls.from_toml_dict(toml_data, config_file=path)
        logger.debug("Generated MutableConfig: %s", draft)
        return draft

    @classmethod
    def discover_config_file(cls, start: Path) -> Path | None:
        """Return the nearest config file, walking upward from ``start``.

        In a given directory ``recordjson.toml`` wins over ``pyproject.toml``; a
        ``pyproject.toml`` only counts when it has a ``[tool.recordjson]`` table.

        Args:
            start (Path): Directory (or file) to start from.

        Returns:
            Path | None: The discovered config file, or None.
        """
        anchor: Path = start if start.is_dir() else start.parent
        for directory in (anchor, *anchor.parents):
            candidate: Path = directory / RECORDJSON_TOML_NAME
            if candidate.is_file():
                return candidate
            pyproject: Path = directory / PYPROJECT_TOML_NAME
            if pyproject.is_file():
                tool: TomlTable = get_table_value(load_toml_dict(pyproject), Toml.SECTION_TOOL)
                if Toml.SECTION_TOOL_NAME in tool:
                    return pyproject
        return None

    @classmethod
    def load_merged(
        cls,
        *,
        config_path: Path | None = None,
        start: Path | None = None,
    ) -> MutableConfig:
        """Return defaults merged with an explicit or discovered config file.

        Args:
            config_path (Path | None): Explicit config file; disables discovery.
            start (Path | None): Discovery anchor (defaults to the current directory).

        Returns:
            MutableConfig: A builder ready to be frozen or further edited.
        """
        merged: MutableConfig = cls.from_defaults()
        path: Path | None = config_path or cls.discover_config_file(start or Path.cwd())
        if path is None:
            return merged
        loaded: MutableConfig | None = cls.from_toml_file(path)
        if loaded is None:
            merged.diagnostics.append(f"No RecordJSON configuration found in {path}")
            return merged
        return merged.merge_with(loaded)

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new builder where values set in ``other`` override this one.

        Args:
            other (MutableConfig): The higher-precedence layer.

        Returns:
            MutableConfig: The merged builder (neither input is modified).
        """
        return MutableConfig(
            fields=list(other.fields) if other.fields is not None else self._copy(self.fields),
            include=(
                list(other.include) if other.include is not None else self._copy(self.include)
            ),
            pretty_print=(
                other.pretty_print if other.pretty_print is not None else self.pretty_print
            ),
            ensure_ascii=(
                other.ensure_ascii if other.ensure_ascii is not None else self.ensure_ascii
            ),
            allowed_fields=(
                list(other.allowed_fields)
                if other.allowed_fields is not None
                else self._copy(self.allowed_fields)
            ),
            config_files=[*self.config_files, *other.config_files],
            diagnostics=[*self.diagnostics, *other.diagnostics],
        )

    def apply_cli_args(self, args: ArgsLike) -> MutableConfig:
        """Apply CLI overrides in place.

        Only keys present with a non-None value (and, for lists, non-empty) override
        the current layer.

        Args:
            args (ArgsLike): CLI-style mapping (``fields``, ``include``, ``pretty_print``,
                ``ensure_ascii``, ``allowed_fields``).

        Returns:
            MutableConfig: ``self``, for chaining.
        """
        for key in ("fields", "include", "allowed_fields"):
            values = args.get(key)
            if values:
                setattr(self, key, list(values))
        for key in ("pretty_print", "ensure_ascii"):
            value = args.get(key)
            if value is not None:
                setattr(self, key, bool(value))
        return self

    @staticmethod
    def _copy(values: list[str] | None) -> list[str] | None:
        return None if values is None else list(values)

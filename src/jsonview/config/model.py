# topmark:header:start
#
#   project      : JSONView
#   file         : model.py
#   file_relpath : src/jsonview/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 JSONView contributors
#
# topmark:header:end

"""Renderer option model and merge policy.

This module defines:
    - `RendererOptions`: an immutable snapshot consumed by
      [`JsonRenderer`][jsonview.rendering.api.JsonRenderer].
    - `MutableRendererOptions`: a mutable builder used while merging defaults,
      config files and CLI overrides; it can be frozen into `RendererOptions` and
      thawed back for edits.

Unrecognized option keys are kept in ``extras`` so options written for a newer
release survive a round trip through an older one. The renderer never reads them.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from jsonview.config.errors import ConfigError
from jsonview.config.io import (
    get_bool_value_or_none,
    get_int_value_or_none,
    get_string_value_or_none,
    load_toml_dict,
    select_options_table,
    to_toml,
)
from jsonview.config.keys import Toml
from jsonview.config.logging import get_logger
from jsonview.constants import DEFAULT_INFO_ICON_SRC, DEFAULT_MAX_DEPTH

if TYPE_CHECKING:
    from pathlib import Path

    from jsonview.config.io import TomlTable
    from jsonview.config.logging import JsonviewLogger

logger: JsonviewLogger = get_logger(__name__)


# ------------------ Immutable runtime options ------------------


@dataclass(frozen=True, slots=True)
class RendererOptions:
    """Immutable renderer options.

    Attributes:
        colorize (bool): Wrap rendered JSON in a shell that embeds color rules.
        info_icon_src (str): Image source of the info affordance in item title rows.
        max_depth (int): Deepest value nesting the structure formatter accepts.
        extras (Mapping[str, Any]): Unrecognized options, preserved but ignored.
    """

    colorize: bool = True
    info_icon_src: str = DEFAULT_INFO_ICON_SRC
    max_depth: int = DEFAULT_MAX_DEPTH
    extras: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    def to_toml_dict(self) -> TomlTable:
        """Convert these options into a TOML-serializable dict.

        Returns:
            TomlTable: Known options first, followed by an ``extras`` table when
                unrecognized options were preserved.
        """
        toml_dict: TomlTable = {
            Toml.KEY_COLORIZE: self.colorize,
            Toml.KEY_INFO_ICON_SRC: self.info_icon_src,
            Toml.KEY_MAX_DEPTH: self.max_depth,
        }
        if self.extras:
            toml_dict[Toml.KEY_EXTRAS] = dict(self.extras)
        return toml_dict

    def to_toml(self) -> str:
        """Render these options as a ``[jsonview]`` TOML document."""
        return to_toml({"jsonview": self.to_toml_dict()})

    def thaw(self) -> MutableRendererOptions:
        """Return a mutable copy of these options.

        Returns:
            MutableRendererOptions: A builder initialized from this snapshot.
        """
        return MutableRendererOptions(
            colorize=self.colorize,
            info_icon_src=self.info_icon_src,
            max_depth=self.max_depth,
            extras=dict(self.extras),
        )


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableRendererOptions:
    """Mutable renderer options used while merging configuration layers.

    Fields left as ``None`` are "unset" and inherit from lower-precedence layers in
    [`merge_with`][jsonview.config.model.MutableRendererOptions.merge_with]; they fall
    back to the `RendererOptions` defaults on
    [`freeze`][jsonview.config.model.MutableRendererOptions.freeze].
    """

    colorize: bool | None = None
    info_icon_src: str | None = None
    max_depth: int | None = None
    extras: dict[str, Any] = field(default_factory=lambda: {})

    def freeze(self) -> RendererOptions:
        """Freeze into an immutable `RendererOptions` snapshot."""
        defaults = RendererOptions()
        return RendererOptions(
            colorize=defaults.colorize if self.colorize is None else self.colorize,
            info_icon_src=(
                defaults.info_icon_src if self.info_icon_src is None else self.info_icon_src
            ),
            max_depth=defaults.max_depth if self.max_depth is None else self.max_depth,
            extras=MappingProxyType(dict(self.extras)),
        )

    @classmethod
    def from_defaults(cls) -> MutableRendererOptions:
        """Return a builder holding the built-in defaults."""
        return RendererOptions().thaw()

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> MutableRendererOptions:
        """Build options from a plain mapping (API callers, TOML tables).

        Args:
            options (Mapping[str, Any]): Option values keyed by the names in
                [`Toml`][jsonview.config.keys.Toml]. Unknown keys go to ``extras``.

        Returns:
            MutableRendererOptions: The builder; absent keys stay unset.

        Raises:
            ConfigError: If a known key holds a value of the wrong type.
        """
        extras: dict[str, Any] = {
            k: v for k, v in options.items() if k not in Toml.known_keys()
        }
        nested: Any = extras.pop(Toml.KEY_EXTRAS, None)
        if isinstance(nested, Mapping):
            # An exported ``extras`` table reads back as the preserved options
            extras = {**dict(nested), **extras}  # pyright: ignore[reportUnknownArgumentType]
        elif nested is not None:
            extras[Toml.KEY_EXTRAS] = nested
        if extras:
            logger.debug("Preserving unrecognized renderer options: %s", ", ".join(extras))

        return cls(
            colorize=get_bool_value_or_none(options, Toml.KEY_COLORIZE),
            info_icon_src=get_string_value_or_none(options, Toml.KEY_INFO_ICON_SRC),
            max_depth=get_int_value_or_none(options, Toml.KEY_MAX_DEPTH, minimum=1),
            extras=extras,
        )

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableRendererOptions:
        """Load options from ``jsonview.toml`` (``[jsonview]``) or ``pyproject.toml``.

        Args:
            path (Path): The config file to read.

        Returns:
            MutableRendererOptions: The builder; options absent from the file stay unset.

        Raises:
            ConfigError: If the file is unreadable, malformed, or holds invalid values.
        """
        data: TomlTable = load_toml_dict(path)
        table: TomlTable = select_options_table(path, data)
        try:
            return cls.from_mapping(table)
        except ConfigError as exc:
            raise ConfigError(f"{path}: {exc}", path=path) from exc

    def merge_with(self, other: MutableRendererOptions) -> MutableRendererOptions:
        """Return a new builder where the values set on ``other`` win.

        Args:
            other (MutableRendererOptions): The higher-precedence layer.

        Returns:
            MutableRendererOptions: The merged builder (neither input is modified).
        """
        return MutableRendererOptions(
            colorize=self.colorize if other.colorize is None else other.colorize,
            info_icon_src=(
                self.info_icon_src if other.info_icon_src is None else other.info_icon_src
            ),
            max_depth=self.max_depth if other.max_depth is None else other.max_depth,
            extras={**self.extras, **other.extras},
        )


def coerce_options(options: RendererOptions | Mapping[str, Any] | None) -> RendererOptions:
    """Normalize what callers pass as renderer options into a `RendererOptions`.

    Args:
        options (RendererOptions | Mapping[str, Any] | None): A snapshot, a plain
            mapping such as ``{"colorize": False}``, or None for defaults.

    Returns:
        RendererOptions: The frozen snapshot.
    """
    if options is None:
        return RendererOptions()
    if isinstance(options, RendererOptions):
        return options
    return MutableRendererOptions.from_mapping(options).freeze()

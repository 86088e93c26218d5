# topmark:header:start
#
#   project      : JSONView
#   file         : io.py
#   file_relpath : src/jsonview/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 JSONView contributors
#
# topmark:header:end

"""TOML I/O and typed value extraction for JSONView configuration.

Parsing and rendering are done with ``tomlkit``. Parsed documents are unwrapped to
plain ``dict`` structures before they reach the option model.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from jsonview.config.errors import ConfigError
from jsonview.config.logging import get_logger
from jsonview.constants import JSONVIEW_TOML_SECTION, PYPROJECT_TOML_NAME, PYPROJECT_TOML_SECTION

if TYPE_CHECKING:
    from pathlib import Path

    from jsonview.config.logging import JsonviewLogger

TomlTable = dict[str, Any]

logger: JsonviewLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigError(f"Cannot read config file {path}: {e}", path=path) from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"Config file {path} is not valid UTF-8: {e}", path=path) from e

    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigError(f"Invalid TOML in {path}: {e}", path=path) from e

    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def select_options_table(path: Path, data: TomlTable) -> TomlTable:
    """Return the table holding renderer options for a parsed config file.

    ``pyproject.toml`` keeps options under ``[tool.jsonview]``; any other file keeps
    them under ``[jsonview]``. A missing table yields an empty dict.

    Args:
        path (Path): The file the data was parsed from.
        data (TomlTable): The parsed document.

    Returns:
        TomlTable: The options table (possibly empty).
    """
    section: str = (
        PYPROJECT_TOML_SECTION if path.name == PYPROJECT_TOML_NAME else JSONVIEW_TOML_SECTION
    )
    table: Any = data
    for part in section.split("."):
        table = table.get(part) if isinstance(table, Mapping) else None
        if table is None:
            logger.debug("No [%s] table in %s", section, path)
            return {}
    if not isinstance(table, Mapping):
        raise ConfigError(f"[{section}] in {path} must be a table", path=path)
    return dict(cast("Mapping[str, Any]", table))


def get_bool_value_or_none(table: Mapping[str, Any], key: str) -> bool | None:
    """Extract an optional boolean value.

    Args:
        table (Mapping[str, Any]): Table to query.
        key (str): Key to extract.

    Returns:
        bool | None: The value, or None when absent.

    Raises:
        ConfigError: If the key is present but not a boolean.
    """
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    raise ConfigError(f"Expected bool for '{key}', got {type(value).__name__}: {value!r}")


def get_int_value_or_none(table: Mapping[str, Any], key: str, *, minimum: int = 0) -> int | None:
    """Extract an optional integer value not lower than ``minimum``.

    Args:
        table (Mapping[str, Any]): Table to query.
        key (str): Key to extract.
        minimum (int): Smallest accepted value.

    Returns:
        int | None: The value, or None when absent.

    Raises:
        ConfigError: If the key is present but not an integer, or below ``minimum``.
    """
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"Expected int for '{key}', got {type(value).__name__}: {value!r}")
    if value < minimum:
        raise ConfigError(f"'{key}' must be >= {minimum} (got {value})")
    return value


def get_string_value_or_none(table: Mapping[str, Any], key: str) -> str | None:
    """Extract an optional string value.

    Args:
        table (Mapping[str, Any]): Table to query.
        key (str): Key to extract.

    Returns:
        str | None: The value, or None when absent.

    Raises:
        ConfigError: If the key is present but not a string.
    """
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    raise ConfigError(f"Expected str for '{key}', got {type(value).__name__}: {value!r}")


def _strip_none_for_toml(value: object) -> object:
    """Remove TOML-incompatible `None` from mappings and lists."""
    if isinstance(value, Mapping):
        m: Mapping[object, object] = cast("Mapping[object, object]", value)
        return {
            (k if isinstance(k, str) else str(k)): _strip_none_for_toml(v)
            for k, v in m.items()
            if v is not None
        }
    if isinstance(value, (list, tuple)):
        seq: list[object] = list(cast("list[object]", value))
        return [_strip_none_for_toml(v) for v in seq if v is not None]
    return value


def to_toml(toml_dict: Mapping[str, Any]) -> str:
    """Serialize a TOML mapping to a string.

    Args:
        toml_dict (Mapping[str, Any]): TOML mapping to render.

    Returns:
        str: The rendered TOML document.
    """
    cleaned: Any = _strip_none_for_toml(toml_dict)
    return cast("str", cast("Any", tomlkit).dumps(cleaned))

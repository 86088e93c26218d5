# topmark:header:start
#
#   project      : JSONView
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 JSONView contributors
#
# topmark:header:end

"""Pytest configuration for the JSONView test suite.

This file sets up global fixtures and turns on TRACE logging for test runs, so
dispatch decisions and contained failures show up in captured logs.

Notes:
    Tests should respect the immutable/mutable option split: build options with
    `jsonview.config.MutableRendererOptions`, then `freeze()` them into a
    `jsonview.config.RendererOptions` before handing them to a renderer.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Callable
from typing import Any, TypeVar, cast

import pytest

from jsonview.config import MutableRendererOptions, RendererOptions, logging
from jsonview.constants import LOG_LEVEL_ENV_VAR
from jsonview.rendering.api import JsonRenderer

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.hookimpl`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.hookimpl`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_jsonview_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


def make_options(**overrides: Any) -> RendererOptions:
    """Return frozen renderer options built from defaults and overrides.

    Args:
        **overrides (Any): Field overrides applied to the mutable builder.

    Returns:
        RendererOptions: The frozen options.
    """
    m: MutableRendererOptions = MutableRendererOptions.from_defaults()
    for k, v in overrides.items():
        setattr(m, k, v)
    return m.freeze()


@pytest.fixture
def renderer() -> JsonRenderer:
    """A renderer with default options."""
    return JsonRenderer()


@pytest.fixture
def plain_renderer() -> JsonRenderer:
    """A renderer that emits the unstyled shell."""
    return JsonRenderer(make_options(colorize=False))


def find_by_class(root: ET.Element, class_name: str) -> list[ET.Element]:
    """Return all elements under ``root`` (inclusive) whose class is ``class_name``."""
    return [el for el in root.iter() if el.get("class") == class_name]


def only_by_class(root: ET.Element, class_name: str) -> ET.Element:
    """Return the single element under ``root`` whose class is ``class_name``."""
    found: list[ET.Element] = find_by_class(root, class_name)
    assert len(found) == 1, f"expected one .{class_name}, found {len(found)}"
    return found[0]

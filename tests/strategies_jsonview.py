# topmark:header:start
#
#   project      : JSONView
#   file         : strategies_jsonview.py
#   file_relpath : tests/strategies_jsonview.py
#   license      : MIT
#   copyright    : (c) 2025 JSONView contributors
#
# topmark:header:end

# pyright: strict

"""Hypothesis strategies for generating JSON values and item records.

Generated strings avoid surrogates (they cannot be encoded) and, where a test needs
to count brackets, the bracket characters themselves.
"""

from __future__ import annotations

from typing import Any, Literal

from hypothesis import strategies as st

BLACKLIST_CATEGORIES: tuple[Literal["Cs"], ...] = ("Cs",)
BRACKETS: str = "{}[]"


def s_text(*, exclude: str = "") -> st.SearchStrategy[str]:
    """Arbitrary text without surrogates (and without the ``exclude`` characters)."""
    return st.text(
        alphabet=st.characters(
            blacklist_categories=BLACKLIST_CATEGORIES,
            blacklist_characters=exclude,
        ),
        max_size=20,
    )


def s_json_scalar(*, exclude: str = "") -> st.SearchStrategy[Any]:
    """JSON scalars: null, booleans, integers, finite floats and strings."""
    return st.one_of(
        st.none(),
        st.booleans(),
        st.integers(min_value=-(2**63), max_value=2**63),
        st.floats(allow_nan=False, allow_infinity=False),
        s_text(exclude=exclude),
        s_text(exclude=exclude).map(lambda s: f"https://example.org/{s}"),
    )


def s_json_value(*, exclude: str = "", max_leaves: int = 25) -> st.SearchStrategy[Any]:
    """Arbitrary JSON values (objects keep insertion order)."""
    return st.recursive(
        s_json_scalar(exclude=exclude),
        lambda children: st.one_of(
            st.lists(children, max_size=5),
            st.dictionaries(
                st.one_of(s_text(exclude=exclude), s_text(exclude=exclude).map("@{}".format)),
                children,
                max_size=5,
            ),
        ),
        max_leaves=max_leaves,
    )


def s_image_reference() -> st.SearchStrategy[Any]:
    """Image fields of every supported shape, plus some junk."""
    url = st.sampled_from(["https://example.org/a.jpg", "http://x", ""])
    image_object = st.fixed_dictionaries(
        {},
        optional={"url": st.one_of(url, st.integers()), "contentUrl": url},
    )
    return st.recursive(
        st.one_of(url, image_object, st.none(), st.integers()),
        lambda children: st.lists(children, max_size=3),
        max_leaves=6,
    )


def s_item_record() -> st.SearchStrategy[dict[str, Any]]:
    """Loosely shaped item records, with fields of the right and wrong types."""
    any_scalar = s_json_scalar()
    return st.fixed_dictionaries(
        {},
        optional={
            "url": any_scalar,
            "name": any_scalar,
            "site": any_scalar,
            "siteUrl": any_scalar,
            "description": any_scalar,
            "explanation": any_scalar,
            "score": any_scalar,
            "time": any_scalar,
            "schema_object": st.one_of(
                any_scalar,
                st.fixed_dictionaries(
                    {},
                    optional={
                        "@type": any_scalar,
                        "keywords": st.one_of(any_scalar, st.lists(s_text(), max_size=3)),
                        "image": s_image_reference(),
                    },
                ),
            ),
        },
    )

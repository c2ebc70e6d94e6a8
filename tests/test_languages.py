from __future__ import annotations

import pytest

from linguaflow.core.languages import (
    DEFAULT_SOURCE_LANG,
    DEFAULT_TARGET_LANG,
    LANGUAGES,
    display_name,
    find_language,
)


@pytest.mark.parametrize(
    ("code", "expected"),
    [
        ("en", "English"),
        ("zh", "Chinese"),
        ("no", "Norwegian"),
        ("xx", "xx"),
        ("", ""),
    ],
)
def test_display_name(code: str, expected: str) -> None:
    assert display_name(code) == expected


def test_language_table_codes_are_unique() -> None:
    codes = [entry.code for entry in LANGUAGES]
    assert len(codes) == len(set(codes)) == 20


def test_defaults_are_supported() -> None:
    assert find_language(DEFAULT_SOURCE_LANG) is not None
    assert find_language(DEFAULT_TARGET_LANG) is not None
    assert find_language("klingon") is None
    assert find_language(None) is None

from __future__ import annotations

import pytest

from confusables_db.codepoints import format_codepoint, is_valid_scalar, to_codepoint


@pytest.mark.parametrize("cp", [0, 0x41, 0x7F, 0xD7FF, 0xE000, 0xFFFF, 0x10000, 0x10FFFF])
def test_valid_scalars(cp: int) -> None:
    assert is_valid_scalar(cp) is True


@pytest.mark.parametrize("cp", [-1, 0xD800, 0xDBFF, 0xDC00, 0xDFFF, 0x110000, 2**31, 2**63])
def test_invalid_scalars(cp: int) -> None:
    assert is_valid_scalar(cp) is False


def test_oversized_value_is_not_truncated() -> None:
    # 0x100000041 would read as "A" after a 32-bit cast.
    assert 0x100000041 & 0xFFFFFFFF == 0x41
    assert is_valid_scalar(0x100000041) is False


def test_non_integers_are_not_scalars() -> None:
    assert is_valid_scalar(True) is False
    assert is_valid_scalar(65.0) is False  # type: ignore[arg-type]
    assert is_valid_scalar("A") is False  # type: ignore[arg-type]


def test_format_codepoint() -> None:
    assert format_codepoint(0x41) == "U+0041"
    assert format_codepoint(0x1D400) == "U+1D400"
    assert format_codepoint(0x100000041) == "U+100000041"
    assert format_codepoint(-5) == "-U+0005"


def test_to_codepoint() -> None:
    assert to_codepoint("\u0430") == 0x430
    assert to_codepoint(0x430) == 0x430
    for bad in ("", "ab", None, True, 1.5):
        with pytest.raises(TypeError):
            to_codepoint(bad)  # type: ignore[arg-type]

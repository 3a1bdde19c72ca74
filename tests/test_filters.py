import re

import pytest

from repofetch.filters import hex_to_rgb, strip_color_tokens


def test_strip_color_tokens_removes_markers():
    assert strip_color_tokens("{0}ab{1}c{12}") == "abc"


@pytest.mark.parametrize("text", ["plain text", "{x}", "{ 1}", ""])
def test_strip_color_tokens_keeps_text_without_markers(text):
    assert strip_color_tokens(text) == text


@pytest.mark.parametrize("text", ["{2}  .:--{1}::", "{0}{1}{2}", "a{99}b{3}"])
def test_strip_color_tokens_leaves_no_marker(text):
    result = strip_color_tokens(text)
    assert re.search(r"\{\d+\}", result) is None
    assert strip_color_tokens(result) == result


def test_strip_color_tokens_rejects_non_string():
    with pytest.raises(TypeError):
        strip_color_tokens(5)


def test_hex_to_rgb_known_value():
    assert hex_to_rgb("#FF8000") == {"r": 255, "g": 128, "b": 0}


@pytest.mark.parametrize("rgb", [(0, 0, 0), (255, 255, 255), (18, 52, 86), (171, 205, 239)])
def test_hex_to_rgb_round_trip(rgb):
    r, g, b = rgb
    assert hex_to_rgb(f"#{r:02x}{g:02x}{b:02X}") == {"r": r, "g": g, "b": b}


def test_hex_to_rgb_requires_hash():
    with pytest.raises(ValueError, match="starting with"):
        hex_to_rgb("FF8000")


@pytest.mark.parametrize("value", ["#FFF", "#FF80001", "#"])
def test_hex_to_rgb_requires_six_digits(value):
    with pytest.raises(ValueError, match="6 digit"):
        hex_to_rgb(value)


@pytest.mark.parametrize("value", ["#GG0000", "#12 456", "#1_2345"])
def test_hex_to_rgb_rejects_invalid_digits(value):
    with pytest.raises(ValueError, match="valid hex"):
        hex_to_rgb(value)


def test_hex_to_rgb_rejects_non_string():
    with pytest.raises(TypeError):
        hex_to_rgb(None)
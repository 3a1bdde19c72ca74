import re

import pytest

from repofetch.ascii import (
    AsciiArt,
    Token,
    TokenKind,
    char_token,
    color_token,
    get_min_start_max_end,
    is_blank,
    leading_spaces,
    render,
    space_token,
    style_segment,
    tokenize,
    true_length,
    truncate,
)

ANSI = re.compile(r"\x1b\[[0-9;]*m")

SPACE = Token(TokenKind.SPACE)


def visible(text):
    return ANSI.sub("", text)


def test_get_min_start_max_end():
    lines = [
        "                     xxx",
        "   xxx",
        "         oo",
        "     o",
        "                           xx",
    ]
    assert get_min_start_max_end(lines) == (3, 29)


def test_space_parses():
    assert space_token(" ") == ("", SPACE)
    assert space_token(" hello") == ("hello", SPACE)
    assert space_token("      ") == ("     ", SPACE)
    assert space_token(" {1}{2}") == ("{1}{2}", SPACE)


def test_space_token_rejects_other_characters():
    assert space_token("x") is None
    assert space_token("") is None


def test_color_indicator_parses():
    assert color_token("{1}") == ("", Token(TokenKind.COLOR, 1))
    assert color_token("{9} ") == (" ", Token(TokenKind.COLOR, 9))


def test_color_token_rejects_non_digit_and_unclosed():
    assert color_token("{a}") is None
    assert color_token("{1") is None
    assert color_token("{12}") is None


def test_char_token():
    assert char_token("ab") == ("b", Token(TokenKind.CHAR, "a"))
    assert char_token("") is None


def test_leading_spaces_counts_correctly():
    assert leading_spaces("") == 0
    assert leading_spaces("     ") == 5
    assert leading_spaces("     a;lksjf;a") == 5
    assert leading_spaces("  {1} {5}  {9} a") == 6


@pytest.mark.parametrize("line", ["", "   ", "  {1} {5}  {9} a", "{a}{12}x y", "███"])
def test_tokens_round_trip(line):
    assert "".join(str(t) for t in tokenize(line)) == line


def test_is_blank():
    assert is_blank("  {1}  {2} ")
    assert is_blank("")
    assert not is_blank("  {1} a")


@pytest.mark.parametrize("line", ["xxx", "  {1} {5}  {9} a", "   ab c"])
def test_true_length_ignores_trailing_spaces_and_colors(line):
    assert true_length(line + "   {3} ") == true_length(line)
    assert true_length(line) == len(visible(line).replace("{", "").rstrip()) or "{" in line


def test_render():
    colors = []
    assert render("", colors, 0, 0, True) == "\x1b[39;1m\x1b[0m"
    assert render("     ", colors, 0, 0, True) == "\x1b[39;1m\x1b[0m"
    assert render("     ", colors, 0, 5, True) == "\x1b[39;1m     \x1b[0m"
    assert render("     ", colors, 1, 5, True) == "\x1b[39;1m    \x1b[0m"
    assert render("     ", colors, 3, 5, True) == "\x1b[39;1m  \x1b[0m"
    assert render("     ", colors, 0, 4, True) == "\x1b[39;1m    \x1b[0m"
    assert render("     ", colors, 0, 3, True) == "\x1b[39;1m   \x1b[0m"
    assert render("███", [], 0, 3, True) == "\x1b[39;1m███\x1b[0m"
    assert (
        render("  {1} {5}  {9} a", colors, 4, 10, True)
        == "\x1b[39;1m\x1b[0m\x1b[39;1m\x1b[0m\x1b[39;1m \x1b[0m\x1b[39;1m a\x1b[0m   "
    )


def test_render_without_bold():
    assert render("     ", [], 0, 0, False) == "\x1b[39m\x1b[0m"
    assert render("     ", [], 0, 5, False) == "\x1b[39m     \x1b[0m"


def test_render_uses_given_colors():
    assert render("{0}x", [1], 0, 1, False) == "\x1b[39m\x1b[0m\x1b[31mx\x1b[0m"
    assert style_segment("x", (10, 20, 30), True) == "\x1b[38;2;10;20;30;1mx\x1b[0m"


def test_render_missing_color_falls_back_to_default():
    assert render("{5}a", [], 0, 1, True) == render("{0}a", [None], 0, 1, True)


def test_render_rejects_start_after_end():
    with pytest.raises(ValueError):
        render("abc", [], 3, 1, True)


def test_style_segment_rejects_invalid_color():
    with pytest.raises(ValueError):
        style_segment("x", 16, False)


def test_truncate():
    def tokens(line, start, end):
        return list(truncate(line, start, end))

    assert tokens("", 0, 0) == list(tokenize(""))
    assert tokens("     ", 0, 0) == list(tokenize(""))
    assert tokens("     ", 0, 5) == list(tokenize("     "))
    assert tokens("     ", 1, 5) == list(tokenize("    "))
    assert tokens("     ", 3, 5) == list(tokenize("  "))
    assert tokens("     ", 0, 4) == list(tokenize("    "))
    assert tokens("     ", 0, 3) == list(tokenize("   "))
    assert tokens("  {1} {5}  {9} a", 4, 10) == list(tokenize("{1}{5} {9} a"))


def test_truncate_rejects_start_after_end():
    with pytest.raises(ValueError):
        list(truncate("abc", 2, 1))


ART = """

{0}   /\\
{1}  /  \\
{0} /____\\
{2}   {1}
"""


def test_ascii_art_crops_and_pads_every_line():
    art = AsciiArt(ART, [1, 2, 3], True)
    lines = list(art)
    assert len(lines) == 3
    assert art.width() == get_min_start_max_end(["   /\\", "  /  \\", " /____\\"])[1] - 1
    assert all(len(visible(line)) == art.width() for line in lines)
    assert visible(lines[2]).startswith("/")


def test_ascii_art_skips_leading_empty_and_trailing_blank_lines():
    art = AsciiArt("\n\nab\n{1}  \n", [], False)
    assert [visible(line) for line in art] == ["ab"]


def test_ascii_art_empty_input():
    art = AsciiArt("", [], True)
    assert list(art) == []
    assert art.width() == 0
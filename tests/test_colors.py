import pytest

from xdccget.colors import convert_from_mirc, convert_to_mirc, strip_from_mirc

CONTROL_CHARS = "\x02\x03\x0f\x16\x1f"


@pytest.mark.parametrize("text", ["", "plain text", "a [b] c", "#channel 42"])
def test_strip_plain_text_is_identity(text):
    assert strip_from_mirc(text) == text


def test_convert_from_mirc_without_codes_is_identity():
    assert convert_from_mirc("nothing special here") == "nothing special here"


def test_color_code_format():
    assert convert_to_mirc("[COLOR=RED]") == "\x0304"


def test_close_order_of_open_tags():
    assert convert_from_mirc("\x02a\x1fb") == "[B]a[U]b[/B][/U]"


@pytest.mark.parametrize(
    "markup",
    [
        "[B]bold[/B]",
        "[U]under[/U]",
        "[I]rev[/I]",
        "[COLOR=RED]hi[/COLOR]",
        "[COLOR=GREEN/BLACK]tree[/COLOR]",
        "x [B]y[/B] z",
    ],
)
def test_markup_round_trip(markup):
    assert convert_from_mirc(convert_to_mirc(markup)) == markup


@pytest.mark.parametrize(
    "markup",
    ["[B]a[/B]", "[COLOR=BLUE/RED]b[/COLOR]", "[U]c[/U] [I]d[/I]"],
)
def test_strip_removes_all_controls(markup):
    stripped = strip_from_mirc(convert_to_mirc(markup))
    assert not any(c in stripped for c in CONTROL_CHARS)
    assert "[" not in stripped


def test_strip_keeps_text_between_codes():
    assert strip_from_mirc(convert_to_mirc("[B]abc[/B]")) == "abc"


def test_unclosed_bold_is_closed():
    result = convert_from_mirc("\x02abc")
    assert result.startswith("[B]")
    assert result.endswith("[/B]")


def test_out_of_range_color_is_dropped():
    assert convert_from_mirc("\x0316x") == "x"


def test_color_marker_without_digits_is_dropped():
    assert convert_from_mirc("\x03x") == "x"


def test_second_color_closes_first():
    result = convert_from_mirc(convert_to_mirc("[COLOR=RED]a[COLOR=BLUE]b"))
    assert result.count("[/COLOR]") == 2


@pytest.mark.parametrize(
    "text",
    ["[X]", "abc[", "[", "[]", "[" + "B" * 40 + "]", "[COLOR=NOPE]", "[COLOR=RED/NOPE]"],
)
def test_unknown_markup_is_unchanged(text):
    assert convert_to_mirc(text) == text


def test_colour_strip_of_digits_only_removes_code():
    assert strip_from_mirc("\x0304,01hello") == "hello"
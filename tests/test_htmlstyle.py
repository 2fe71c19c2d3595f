from mdglance.htmlstyle import (
    FontStyle,
    FontWeight,
    Style,
    StyleKind,
    TextDecoration,
    iter_styles,
)


def test_all_properties_in_order():
    style = (
        "background-color:#1a1d22;color:#9DACBB;font-weight:bold;"
        "font-style:italic;text-decoration:underline"
    )
    assert list(iter_styles(style)) == [
        Style(StyleKind.BACKGROUND_COLOR, 0x1A1D22),
        Style(StyleKind.COLOR, 0x9DACBB),
        Style(StyleKind.FONT_WEIGHT, FontWeight.BOLD),
        Style(StyleKind.FONT_STYLE, FontStyle.ITALIC),
        Style(StyleKind.TEXT_DECORATION, TextDecoration.UNDERLINE),
    ]


def test_unknown_values_are_skipped():
    style = "font-weight:normal;font-style:oblique;text-decoration:none;margin:0"
    assert list(iter_styles(style)) == []


def test_invalid_hex_is_skipped():
    assert list(iter_styles("color:#zzz;color:#;background-color:#1ffffffff")) == []


def test_whitespace_is_not_trimmed():
    assert list(iter_styles(" color:#fff; font-weight: bold")) == []


def test_background_color_is_not_read_as_color():
    [style] = iter_styles("background-color:#abc")
    assert style.kind is StyleKind.BACKGROUND_COLOR
    assert style.value == 0xABC


def test_empty_style_yields_nothing():
    assert list(iter_styles("")) == []
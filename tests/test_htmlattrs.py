import pytest

from mdglance.htmlattrs import (
    Attr,
    AttrKind,
    ColorScheme,
    find_align,
    find_style,
    iter_attrs,
    prefers_color_scheme,
)


def test_prefers_color_scheme():
    assert prefers_color_scheme("(prefers-color-scheme: dark)") is ColorScheme.DARK
    assert prefers_color_scheme("(prefers-color-scheme: light)") is ColorScheme.LIGHT
    assert prefers_color_scheme("(min-width: 10px)") is None


def test_id_becomes_anchor():
    [attr] = iter_attrs([("id", "foo")])
    assert attr == Attr(AttrKind.ANCHOR, "#foo")
    assert attr.to_anchor() == "#foo"


def test_non_anchor_has_no_anchor():
    [attr] = iter_attrs([("href", "https://example.com")])
    assert attr.to_anchor() is None
    assert attr.value == "https://example.com"


@pytest.mark.parametrize("value", ["500", "500px"])
def test_pixel_dimensions(value):
    assert list(iter_attrs([("width", value), ("height", value)])) == [
        Attr(AttrKind.WIDTH, 500),
        Attr(AttrKind.HEIGHT, 500),
    ]


def test_unparsable_values_are_skipped():
    attrs = [
        ("width", "50%"),
        ("start", "-1"),
        ("align", "sideways"),
        ("type", "text"),
        ("media", "print"),
        ("class", "x"),
    ]
    assert list(iter_attrs(attrs)) == []


def test_order_and_values_are_kept():
    attrs = [
        ("type", "checkbox"),
        ("checked", ""),
        ("start", "3"),
        ("src", "a.png"),
        ("srcset", "b.png"),
        ("media", "(prefers-color-scheme: dark)"),
    ]
    assert list(iter_attrs(attrs)) == [
        Attr(AttrKind.IS_CHECKBOX),
        Attr(AttrKind.IS_CHECKED),
        Attr(AttrKind.START, 3),
        Attr(AttrKind.SRC, "a.png"),
        Attr(AttrKind.SRCSET, "b.png"),
        Attr(AttrKind.MEDIA, ColorScheme.DARK),
    ]


def test_mapping_is_accepted():
    kinds = [attr.kind for attr in iter_attrs({"href": "x", "style": "y"})]
    assert kinds == [AttrKind.HREF, AttrKind.STYLE]


def test_find_align_skips_invalid():
    assert find_align([("align", "bogus"), ("align", "center")]) == "center"
    assert find_align([("id", "x")]) is None


def test_find_style():
    assert find_style([("id", "x"), ("style", "color:#fff")]) == "color:#fff"
    assert find_style([]) is None
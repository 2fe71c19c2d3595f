import pytest

from mdglance.htmltags import (
    Header,
    HeaderType,
    ListType,
    TagName,
    TextOptions,
    tag_name,
)


@pytest.mark.parametrize(
    "names, expected",
    [
        (["b", "strong"], TagName.BOLD_OR_STRONG),
        (["code", "kbd"], TagName.CODE),
        (["em", "i"], TagName.EMPHASIS_OR_ITALIC),
        (["s", "del"], TagName.STRIKETHROUGH),
        (["u", "ins"], TagName.UNDERLINE),
        (["a"], TagName.ANCHOR),
        (["img"], TagName.IMAGE),
        (["th"], TagName.TABLE_HEADER),
        (["thead"], TagName.TABLE_HEAD),
    ],
)
def test_aliases_share_a_tag(names, expected):
    assert [tag_name(name) for name in names] == [expected] * len(names)


@pytest.mark.parametrize(
    "name, level",
    [("h1", HeaderType.H1), ("h3", HeaderType.H3), ("h6", HeaderType.H6)],
)
def test_headers_carry_level(name, level):
    assert tag_name(name).header_type is level


def test_non_header_has_no_level():
    assert tag_name("p").header_type is None


@pytest.mark.parametrize("name", ["blink", "H1", "", "article"])
def test_unknown_tag_raises(name):
    with pytest.raises(ValueError):
        tag_name(name)


def test_size_multipliers():
    assert HeaderType.H1.size_multiplier() == 2.0
    assert HeaderType.H2.size_multiplier() == 1.5
    assert HeaderType.H4.size_multiplier() == 1.0
    assert HeaderType.H6.size_multiplier() == 0.67


def test_size_multipliers_shrink_with_level():
    h1 = HeaderType.H1.size_multiplier()
    h2 = HeaderType.H2.size_multiplier()
    h3 = HeaderType.H3.size_multiplier()
    h4 = HeaderType.H4.size_multiplier()
    h5 = HeaderType.H5.size_multiplier()
    h6 = HeaderType.H6.size_multiplier()
    assert h1 > h2 > h3 > h4 > h5 > h6


def test_header_defaults_to_no_align():
    header = Header(HeaderType.H2)
    assert header.ty is HeaderType.H2
    assert header.align is None


def test_list_types():
    ordered = ListType.ordered(3)
    assert ordered.is_ordered
    assert ordered.start == 3
    assert not ListType.unordered().is_ordered
    assert ListType.unordered() == ListType()


def test_text_options_start_empty():
    opts = TextOptions()
    assert (opts.bold, opts.italic, opts.code, opts.block_quote) == (0, 0, 0, 0)
    assert opts.link == []
    other = TextOptions()
    opts.link.append("https://example.com")
    assert other.link == []
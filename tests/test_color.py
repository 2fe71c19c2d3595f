import plistlib

import pytest

from mdglance.color import (
    HighlighterTheme,
    SyntaxTheme,
    ThemeDefaults,
    ThemeLoadError,
    dark_theme,
    hex_to_linear_rgba,
    light_theme,
    load_syntax_theme,
    native_color,
    parse_syntax_theme,
)


def test_linear_extremes():
    assert hex_to_linear_rgba(0xFFFFFF) == pytest.approx((1.0, 1.0, 1.0, 1.0))
    assert hex_to_linear_rgba(0x000000) == pytest.approx((0.0, 0.0, 0.0, 1.0))


def test_linear_is_darker_than_raw_for_midtones():
    linear = native_color(0x808080, "Rgba8UnormSrgb")
    raw = native_color(0x808080, "Rgba8Unorm")
    assert all(lin < r for lin, r in zip(linear[:3], raw[:3]))
    assert linear[3] == raw[3] == 1.0


def test_linear_is_monotonic():
    values = [hex_to_linear_rgba(v)[2] for v in range(256)]
    assert values == sorted(values)


def test_native_color_channel_order():
    red = native_color(0xFF0000, "Bgra8Unorm")
    assert red == pytest.approx((1.0, 0.0, 0.0, 1.0))


def test_srgb_formats_use_linear():
    assert native_color(0x4182EB, "Bgra8UnormSrgb") == hex_to_linear_rgba(0x4182EB)


def test_default_themes():
    assert dark_theme().text_color == 0x9DACBB
    assert light_theme().background_color == 0xFFFFFF
    assert dark_theme().code_highlighter.name == ThemeDefaults.BASE16_OCEAN_DARK.value


def test_github_background_override():
    highlighter = load_syntax_theme(SyntaxTheme.defaults(ThemeDefaults.GITHUB))
    assert highlighter.background == (0xF6, 0xF8, 0xFA, 0xFF)
    assert light_theme().code_highlighter == highlighter


def test_other_default_has_no_override():
    highlighter = load_syntax_theme(SyntaxTheme.defaults(ThemeDefaults.DRACULA))
    assert highlighter.background is None


def test_with_code_highlighter_leaves_original():
    theme = light_theme()
    replacement = HighlighterTheme(name="custom")
    updated = theme.with_code_highlighter(replacement)
    assert updated.code_highlighter == replacement
    assert theme.code_highlighter.name == ThemeDefaults.GITHUB.value
    assert updated.text_color == theme.text_color


def test_parse_default_name():
    assert parse_syntax_theme("zenburn") == SyntaxTheme.defaults(ThemeDefaults.ZENBURN)


def test_parse_every_default_round_trips():
    for default in ThemeDefaults:
        assert parse_syntax_theme(default.value).default is default


def test_parse_unknown_name():
    with pytest.raises(ValueError, match="didn't match any of the expected variants"):
        parse_syntax_theme("inspired-github")


def test_parse_custom_path(tmp_path):
    theme = parse_syntax_theme({"path": str(tmp_path / "t.tmTheme")})
    assert theme.path == tmp_path / "t.tmTheme"


def test_parse_wrong_shape():
    with pytest.raises(ValueError, match="Expects either a default theme name"):
        parse_syntax_theme(3)


def test_load_custom_theme(tmp_path):
    path = tmp_path / "custom.tmTheme"
    data = {
        "name": "Custom",
        "settings": [
            {"settings": {"background": "#102030", "foreground": "#A0B0C0"}},
            {"scope": "comment", "settings": {"foreground": "#888888"}},
        ],
    }
    path.write_bytes(plistlib.dumps(data))
    theme = load_syntax_theme(SyntaxTheme.custom(path))
    assert theme.name == "Custom"
    assert theme.background == (0x10, 0x20, 0x30, 0xFF)
    assert theme.foreground == (0xA0, 0xB0, 0xC0, 0xFF)
    assert [rule["scope"] for rule in theme.rules] == ["comment"]


def test_load_missing_custom_theme(tmp_path):
    with pytest.raises(ThemeLoadError, match="Failed opening theme"):
        load_syntax_theme(SyntaxTheme.custom(tmp_path / "missing.tmTheme"))


def test_load_garbage_custom_theme(tmp_path):
    path = tmp_path / "bad.tmTheme"
    path.write_text("not a plist")
    with pytest.raises(ThemeLoadError, match="Failed loading theme"):
        load_syntax_theme(SyntaxTheme.custom(path))
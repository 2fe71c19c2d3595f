# mdglance

Building blocks for a keyboard-driven Markdown viewer: keybindings and multi-key
combos, navigation history, colour themes, compressed image data, recognition of
HTML tags, attributes and inline styles, and a file watcher.

## Installation

```
pip install mdglance
```

To run the test suite:

```
pip install "mdglance[test]"
pytest
```

Python 3.11 or later is required.

## Modules

- `mdglance.actions` – what a key combo can trigger: `Action` (a kind plus an
  optional argument, built with `Action.scroll(...)`, `Action.quit()` and so on),
  `ActionKind`, `HistDirection`, `VertDirection`, `Zoom`.
- `mdglance.keys` – `VirtKey`, `Modifiers`, `Key` (a virtual key or a raw scan
  code), `ModifiedKey`, `KeyCombo` and `parse_key(text)`. Their `str()` gives a
  readable form such as `<Ctrl+c>` or `gg`.
- `mdglance.keybindings` – `Keybindings`, `default_keybindings()` (Command instead
  of Ctrl on macOS) and `merge_keybindings(base, extra)`, which drops any base
  binding whose combo starts with an extra combo and appends the extra bindings.
- `mdglance.combos` – `KeyCombos`, a trie that takes key presses one at a time
  through `munch()` and returns an `Action` when a combo completes. Bare modifier
  keys are ignored; a key that breaks a multi-key combo is tried as the start of a
  new one. Construction raises `KeyComboError` when a combo is empty or when one
  combo is a prefix of another.
- `mdglance.keyconfig` – reads the `[keybindings]` table of a TOML document with
  `load_keybindings(text)`, returning `(base, extra)`. Without a `base` entry the
  defaults are used; without `extra` it is `None`. The lower-level
  `parse_action`, `parse_config_key`, `parse_modified_key`, `parse_key_combo` and
  `parse_keybindings` accept already-decoded values. A single upper-case letter
  such as `"G"` means that letter with Shift.
- `mdglance.history` – `History`, back and forward navigation between files;
  paths are resolved and must exist.
- `mdglance.color` – `hex_to_linear_rgba`, `native_color`, the `Theme` colours
  returned by `dark_theme()` and `light_theme()`, `ThemeDefaults` (the built-in
  highlighter names), `SyntaxTheme`, `parse_syntax_theme(value)` and
  `load_syntax_theme(syntax_theme)`. A custom theme is read from a `.tmTheme`
  property list; failures raise `ThemeLoadError`.
- `mdglance.imagedata` – `ImageData` holds LZ4-compressed RGBA8 pixels.
  `load_image_data(contents, scale)` decodes any format Pillow reads;
  `lz4_compress`, `lz4_decompress` and `decode_and_compress` are exposed too.
- `mdglance.images` – `Image` (alignment, requested `ImageSize`, link, and
  aspect-preserving `dimensions_from_image_size`), `parse_px` (`"500"` or
  `"500px"`), `point` for placing a quad in clip space, and `http_get_image(url)`,
  which downloads at most 20 MiB.
- `mdglance.htmltags` – `tag_name(name)` maps an element name to a `TagName`
  (raising `ValueError` for others), plus `HeaderType.size_multiplier()`,
  `Header`, `ListType` and `TextOptions`.
- `mdglance.htmlattrs` – `iter_attrs`, `find_align`, `find_style`,
  `prefers_color_scheme` and `ColorScheme`.
- `mdglance.htmlstyle` – `iter_styles(style)` yields the recognised declarations
  of a `style` attribute: background and text colours, bold, italic, underline.
- `mdglance.picture` – `PictureBuilder` and `Picture`, whose `resolve_src(scheme)`
  picks the dark or light variant, falling back to the default source.
- `mdglance.debug_fmt` – `format_color`, `format_maybe_color` and
  `format_bytes_prefix` for short readable output.
- `mdglance.watcher` – `Watcher(file_path, on_reload, on_change)` watches one file
  in background threads, follows it after a rename or removal once it reappears,
  and moves to another file with `update_file(new_path, contents)`. Call `stop()`
  or use it as a context manager. `select_action` picks the action for a batch of
  event kinds.

## Example: key combos

```python
from mdglance.combos import KeyCombos
from mdglance.keyconfig import load_keybindings
from mdglance.keys import Key, ModifiedKey, Modifiers, VirtKey

config = """
[keybindings]
base = [
    ["ToTop", ["g", "g"]],
    ["ToBottom", { key = "g", mod = ["Shift"] }],
    ["ScrollDown", "j"],
]
"""

base, extra = load_keybindings(config)
combos = KeyCombos(base, extra)

g = ModifiedKey(Key(VirtKey.G), Modifiers.NONE)
combos.munch(g)          # None, waiting for the rest of the combo
print(combos.munch(g))   # the ToTop action
```

## Example: navigation history

```python
from mdglance.history import History

history = History("README.md")       # the file must exist
history.make_next("docs/guide.md")   # so must this one
history.previous()   # back to README.md
history.next()       # forward to docs/guide.md
```

## What it does not do

mdglance is a library of parts, not a viewer. It has no command to run, opens no
window and draws nothing: there is no Markdown-to-HTML conversion, no document
layout, no GPU rendering and no clipboard access. Built-in highlighter themes
carry only their name (and, for `github`, a code-block background colour); no
syntax highlighting is performed. `Image` holds pixel data you load yourself; it
does not fetch or rasterise images in the background, and SVG is not decoded.
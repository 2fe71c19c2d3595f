"""Building blocks for a keyboard-driven Markdown viewer: keybindings, themes, image data, HTML handling and file watching."""

__version__ = "0.1.0"
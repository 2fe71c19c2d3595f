"""Short, readable renderings of colours and byte buffers."""

from __future__ import annotations

from collections.abc import Sequence

_BLACK = (0.0, 0.0, 0.0, 1.0)


def format_color(rgba: Sequence[float]) -> str:
    """Render an RGBA colour with two decimals per channel.

    Opaque black is shown as ``Color(BLACK)``. Alpha is left out when it is 1.
    """
    r, g, b, a = rgba
    if (r, g, b, a) == _BLACK:
        return "Color(BLACK)"
    if a == 1.0:
        return f"Color {{ r: {r:.2f}, g: {g:.2f}, b: {b:.2f} }}"
    return f"Color {{ r: {r:.2f}, g: {g:.2f}, b: {b:.2f}, a: {a:.2f} }}"


def format_maybe_color(rgba: Sequence[float] | None) -> str:
    """Render an optional colour as ``None`` or ``Some(...)``."""
    if rgba is None:
        return "None"
    return f"Some({format_color(rgba)})"


def format_bytes_prefix(data: bytes | bytearray | Sequence[int]) -> str:
    """Render a byte buffer, showing only its length and first bytes when long."""
    data = bytes(data)
    if len(data) >= 4:
        x, y, z = data[:3]
        return f"{{ len: {len(data)}, data: [{x}, {y}, {z}, ..] }}"
    return "[" + ", ".join(str(byte) for byte in data) + "]"
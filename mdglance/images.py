"""Images placed in a document: sizing, alignment, links and fetching."""

from __future__ import annotations

import math
import re
import struct
import urllib.request
from dataclasses import dataclass
from typing import Any

from mdglance.imagedata import ImageData

_U32_MAX = 2**32 - 1
_PX_PATTERN = re.compile(r"\+?[0-9]+")

_USER_AGENT = "mdglance"
_DOWNLOAD_LIMIT = 20 * 1024 * 1024


def _as_px(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= _U32_MAX:
        raise ValueError(f"pixel count must be an integer from 0 to {_U32_MAX}, got {value!r}")
    return value


def parse_px(text: str) -> int:
    """Parse a pixel count such as ``"500"`` or ``"500px"``."""
    digits = text[:-2] if text.endswith("px") else text
    if not _PX_PATTERN.fullmatch(digits):
        raise ValueError(f"invalid pixel count: {text!r}")
    return _as_px(int(digits))


@dataclass(frozen=True)
class ImageSize:
    """A requested image width or height in pixels."""

    axis: str
    px: int

    def __post_init__(self) -> None:
        if self.axis not in ("width", "height"):
            raise ValueError(f"axis must be 'width' or 'height', got {self.axis!r}")
        _as_px(self.px)

    @classmethod
    def width(cls, px: int) -> ImageSize:
        return cls("width", px)

    @classmethod
    def height(cls, px: int) -> ImageSize:
        return cls("height", px)


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def _f32_div(numerator: float, denominator: float) -> float:
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.inf if numerator > 0 else -math.inf
    return _f32(numerator / denominator)


def _to_u32(value: float) -> int:
    if math.isnan(value) or value <= 0:
        return 0
    if value >= _U32_MAX:
        return _U32_MAX
    return int(value)


def _scaled(target: int, along: int, across: int) -> int:
    ratio = _f32_div(_f32(target), _f32(along))
    return _to_u32(_f32(ratio * _f32(across)))


@dataclass
class Image:
    """An image in a document, whose pixel data may arrive later."""

    image_data: ImageData | None = None
    is_aligned: Any = None
    size: ImageSize | None = None
    is_link: str | None = None
    hidpi_scale: float = 0.0

    def set_link(self, link: str) -> None:
        self.is_link = link

    def with_align(self, align: Any) -> Image:
        self.is_aligned = align
        return self

    def with_size(self, size: ImageSize) -> Image:
        self.size = size
        return self

    def buffer_dimensions(self) -> tuple[int, int] | None:
        """Dimensions of the loaded pixel data, or ``None`` before it loads."""
        data = self.image_data
        return None if data is None else data.dimensions

    def dimensions_from_image_size(self, size: ImageSize) -> tuple[int, int] | None:
        """Dimensions keeping the aspect ratio for a requested width or height."""
        dims = self.buffer_dimensions()
        if dims is None:
            return None
        width, height = dims
        if size.axis == "width":
            return size.px, _scaled(size.px, width, height)
        return _scaled(size.px, height, width), size.px


def http_get_image(url: str) -> bytes:
    """Download an image body, reading at most 20 MiB."""
    request = urllib.request.Request(url, headers={"User-Agent": _USER_AGENT})
    with urllib.request.urlopen(request) as response:
        return response.read(_DOWNLOAD_LIMIT)


def point(
    x: float,
    y: float,
    position: tuple[float, float],
    size: tuple[float, float],
    screen: tuple[float, float],
) -> tuple[float, float, float]:
    """Map a unit-quad corner to clip space for an image at a screen position."""
    scale_x = size[0] / screen[0]
    scale_y = size[1] / screen[1]
    shift_x = (position[0] / screen[0]) * 2.0
    shift_y = (position[1] / screen[1]) * 2.0
    new_x = (x * scale_x) - (1.0 - scale_x) + shift_x
    new_y = (y * scale_y) + (1.0 - scale_y) - shift_y
    return (new_x, new_y, 0.0)
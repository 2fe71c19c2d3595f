"""Decoded images held as LZ4-compressed RGBA8 pixel data."""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from typing import BinaryIO

import lz4.frame
from PIL import Image as PILImage

_log = logging.getLogger(__name__)

_MIB = 1024 * 1024


def lz4_compress(data: bytes | bytearray | memoryview | BinaryIO) -> bytes:
    """Compress bytes, or everything a binary reader yields, into an LZ4 frame."""
    if hasattr(data, "read"):
        data = data.read()
    return lz4.frame.compress(bytes(data), block_size=lz4.frame.BLOCKSIZE_MAX256KB)


def lz4_decompress(blob: bytes, size: int) -> bytes:
    """Decompress an LZ4 frame, keeping at most ``size`` bytes."""
    if not blob:
        return b""
    try:
        raw = lz4.frame.decompress(blob)
    except (RuntimeError, ValueError) as err:
        raise ValueError("Invalid LZ4 frame") from err
    return raw[:size]


def decode_and_compress(contents: bytes) -> tuple[bytes, tuple[int, int]]:
    """Decode an encoded image to RGBA8 and compress it.

    Returns the compressed pixel data and the image's ``(width, height)``.
    """
    try:
        with PILImage.open(io.BytesIO(contents)) as image:
            rgba = image.convert("RGBA")
    except (OSError, SyntaxError, ValueError, EOFError) as err:
        raise ValueError("Unable to decode image") from err
    dimensions = rgba.size
    raw = rgba.tobytes()
    _log.debug("Decoded full image in memory %.3f MiB", len(raw) / _MIB)
    return lz4_compress(raw), dimensions


@dataclass
class ImageData:
    """Compressed RGBA8 pixels with their dimensions."""

    lz4_blob: bytes = b""
    scale: bool = False
    dimensions: tuple[int, int] = (0, 0)

    def byte_size(self) -> int:
        """Size in bytes of the uncompressed RGBA8 pixels."""
        width, height = self.dimensions
        return width * height * 4

    def to_bytes(self) -> bytes:
        """The uncompressed RGBA8 pixels."""
        return lz4_decompress(self.lz4_blob, self.byte_size())


def load_image_data(contents: bytes, scale: bool) -> ImageData:
    """Decode an encoded image into compressed image data."""
    blob, dimensions = decode_and_compress(contents)
    return ImageData(lz4_blob=blob, scale=scale, dimensions=dimensions)
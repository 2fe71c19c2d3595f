import io

import pytest
from PIL import Image as PILImage

from mdglance.imagedata import (
    ImageData,
    decode_and_compress,
    load_image_data,
    lz4_compress,
    lz4_decompress,
)


def _rgb_image() -> PILImage.Image:
    image = PILImage.new("RGB", (3, 2))
    image.putdata(
        [(255, 0, 0), (0, 255, 0), (0, 0, 255), (10, 20, 30), (200, 100, 50), (0, 0, 0)]
    )
    return image


def _rgba_image() -> PILImage.Image:
    image = PILImage.new("RGBA", (3, 2))
    image.putdata(
        [
            (255, 0, 0, 255),
            (0, 255, 0, 128),
            (0, 0, 255, 0),
            (10, 20, 30, 255),
            (200, 100, 50, 64),
            (0, 0, 0, 255),
        ]
    )
    return image


def _encode(image: PILImage.Image, fmt: str) -> bytes:
    buffer = io.BytesIO()
    if fmt == "JPEG":
        image = image.convert("RGB")
    image.save(buffer, format=fmt)
    return buffer.getvalue()


def _expected_rgba(encoded: bytes) -> bytes:
    with PILImage.open(io.BytesIO(encoded)) as image:
        return image.convert("RGBA").tobytes()


@pytest.mark.parametrize("fmt", ["GIF", "JPEG", "PNG", "BMP"])
@pytest.mark.parametrize("make", [_rgb_image, _rgba_image])
def test_source_image_variety(make, fmt):
    encoded = _encode(make(), fmt)
    data = load_image_data(encoded, False)
    actual = data.to_bytes()
    assert len(actual) % 4 == 0
    assert actual == _expected_rgba(encoded)


def test_load_keeps_dimensions_and_scale():
    data = load_image_data(_encode(_rgb_image(), "PNG"), True)
    assert data.dimensions == (3, 2)
    assert data.scale is True
    assert data.byte_size() == 24


def test_png_pixels_are_exact():
    data = load_image_data(_encode(_rgba_image(), "PNG"), False)
    pixels = data.to_bytes()
    assert pixels[:4] == bytes([255, 0, 0, 255])
    assert pixels[4:8] == bytes([0, 255, 0, 128])


def test_decode_and_compress_produces_lz4_frame():
    blob, dims = decode_and_compress(_encode(_rgb_image(), "PNG"))
    assert dims == (3, 2)
    assert blob[:4] == b"\x04\x22\x4d\x18"


def test_decode_rejects_non_image():
    with pytest.raises(ValueError):
        decode_and_compress(b'{"im": "not an image"}')


def test_lz4_round_trip_bytes():
    payload = bytes(range(256)) * 50
    blob = lz4_compress(payload)
    assert lz4_decompress(blob, len(payload)) == payload


def test_lz4_compress_accepts_reader():
    payload = b"abc" * 1000
    blob = lz4_compress(io.BytesIO(payload))
    assert lz4_decompress(blob, len(payload)) == payload


def test_lz4_decompress_truncates():
    blob = lz4_compress(b"0123456789")
    assert lz4_decompress(blob, 4) == b"0123"


def test_lz4_decompress_rejects_garbage():
    with pytest.raises(ValueError):
        lz4_decompress(b"definitely not lz4 data", 10)


def test_default_image_data_is_empty():
    data = ImageData()
    assert data.byte_size() == 0
    assert data.to_bytes() == b""
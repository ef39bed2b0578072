"""Render text as a pixel-art PNG image."""

from __future__ import annotations

import base64
import colorsys
import struct
import zlib
from collections.abc import Iterable, Sequence

from pixatar.bits import BitRows
from pixatar.settings import Background, Opacity, Spec

SCALE = 32
PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
DATA_URL_PREFIX = "data:image/png;base64,"

_GAMMA = 45455  # 1 / 2.2, scaled by 100000
_CHROMATICITIES = (
    (0.31270, 0.32900),
    (0.64000, 0.33000),
    (0.30000, 0.60000),
    (0.15000, 0.06000),
)

Pixel = tuple[int, int, int, int]


def color_values(spec: Spec) -> tuple[Pixel, Pixel]:
    """Return the (foreground, background) RGBA colours for ``spec``."""
    red, green, blue = colorsys.hls_to_rgb((spec.hue % 360) / 360.0, 0.5, 1.0)
    foreground = (round(red * 255), round(green * 255), round(blue * 255), 255)
    level = 0 if spec.bg is Background.BLACK else 255
    alpha = 255 if spec.opacity is Opacity.SOLID else 0
    return foreground, (level, level, level, alpha)


def pixel_data(spec: Spec, rows: Iterable[Sequence[bool]]) -> bytes:
    """Return raw RGBA pixels, each bit drawn as a SCALE x SCALE square."""
    foreground, background = color_values(spec)
    on = bytes(foreground) * SCALE
    off = bytes(background) * SCALE
    return b"".join(
        b"".join(on if bit else off for bit in row) * SCALE for row in rows
    )


def _chunk(kind: bytes, payload: bytes) -> bytes:
    crc = zlib.crc32(kind + payload) & 0xFFFFFFFF
    return struct.pack(">I", len(payload)) + kind + payload + struct.pack(">I", crc)


def encode_png(text: str, spec: Spec) -> bytes:
    """Encode ``text`` as an RGBA PNG image drawn according to ``spec``."""
    if not text:
        raise ValueError("cannot draw an image of empty text")
    rows = BitRows(text, spec.orient, spec.ordering)
    w, h = rows.dimensions()
    width, height = w * SCALE, h * SCALE
    pixels = pixel_data(spec, rows)

    stride = width * 4
    scanlines = b"".join(
        b"\x00" + pixels[start:start + stride] for start in range(0, len(pixels), stride)
    )

    header = struct.pack(">IIBBBBB", width, height, 8, 6, 0, 0, 0)
    chromaticities = struct.pack(
        ">8I", *(round(value * 100000) for point in _CHROMATICITIES for value in point)
    )
    return b"".join(
        (
            PNG_SIGNATURE,
            _chunk(b"IHDR", header),
            _chunk(b"gAMA", struct.pack(">I", _GAMMA)),
            _chunk(b"cHRM", chromaticities),
            _chunk(b"IDAT", zlib.compress(scanlines)),
            _chunk(b"IEND", b""),
        )
    )


def data_url(text: str, spec: Spec) -> str:
    """Return the image as a base64 data URL, or an empty string for empty text."""
    if not text:
        return ""
    return DATA_URL_PREFIX + base64.b64encode(encode_png(text, spec)).decode("ascii")
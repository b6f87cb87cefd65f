import os
import struct
import zlib
from io import BytesIO

import pytest
from PIL import Image


@pytest.fixture
def sample_png(tmp_path):
    img = Image.new("RGB", (16, 8), color=(200, 30, 30))
    path = tmp_path / "photo.png"
    img.save(str(path))
    return str(path)


@pytest.fixture
def sample_rgba_png(tmp_path):
    img = Image.new("RGBA", (4, 4), color=(0, 128, 255, 100))
    path = tmp_path / "alpha.png"
    img.save(str(path))
    return str(path)


def _png_chunk(cid: bytes, data: bytes) -> bytes:
    crc = zlib.crc32(cid + data) & 0xFFFFFFFF
    return struct.pack(">I", len(data)) + cid + data + struct.pack(">I", crc)


@pytest.fixture
def broken_png(tmp_path):
    """A PNG whose pixel data continues in a chunk with an invalid type."""
    # Noise keeps the compressed stream long enough that half of it is not
    # a complete image.
    img = Image.frombytes("RGB", (64, 64), os.urandom(64 * 64 * 3))
    buf = BytesIO()
    img.save(buf, format="PNG")
    raw = buf.getvalue()

    out = raw[:8]
    pos = 8
    while pos < len(raw):
        (length,) = struct.unpack(">I", raw[pos:pos + 4])
        cid = raw[pos + 4:pos + 8]
        data = raw[pos + 8:pos + 8 + length]
        pos += 12 + length
        if cid == b"IDAT":
            half = len(data) // 2
            out += _png_chunk(b"IDAT", data[:half])
            out += _png_chunk(b"\x00\x01\x02\x03", data[half:])
        else:
            out += _png_chunk(cid, data)

    path = tmp_path / "broken.png"
    path.write_bytes(out)
    return str(path)

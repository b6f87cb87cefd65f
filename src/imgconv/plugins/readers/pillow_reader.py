"""Pillow reader plugin – decodes PNG, JPEG and WEBP files into a RasterImage."""

import struct
from typing import Dict

from PIL import Image

from imgconv.core.errors import DecodeFailedError
from imgconv.core.formats import FormatTag
from imgconv.core.models import RasterImage
from imgconv.plugins.registry import InputReader, PluginRegistry

# Pillow decoder names; the file name decides which one is tried.
_PIL_FORMATS: Dict[FormatTag, str] = {
    FormatTag.PNG: "PNG",
    FormatTag.JPEG: "JPEG",
    FormatTag.WEBP: "WEBP",
}

# Pillow signals broken image data with SyntaxError and struct.error
# as well as OSError.
_DECODE_ERRORS = (
    OSError,
    ValueError,
    SyntaxError,
    EOFError,
    struct.error,
    Image.DecompressionBombError,
)


class PillowReader(InputReader):
    """Decode a raster image fully into memory and release the file."""

    @classmethod
    def get_supported_formats(cls) -> list[FormatTag]:
        return list(_PIL_FORMATS)

    def read(self, file_path: str, fmt: FormatTag) -> RasterImage:
        try:
            with Image.open(file_path, formats=[_PIL_FORMATS[fmt]]) as img:
                img.load()
        except _DECODE_ERRORS as exc:
            raise DecodeFailedError(exc) from exc

        return RasterImage(pixels=img)


PluginRegistry.register_reader(PillowReader)

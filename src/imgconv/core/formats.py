from enum import Enum
from typing import Dict

from imgconv.core.errors import NoExtensionError, UnsupportedExtensionError


class FormatTag(Enum):
    """Raster formats recognised by file name suffix."""

    PNG = "png"
    JPEG = "jpeg"
    WEBP = "webp"

    def __str__(self) -> str:
        return self.value


# Matching is case-sensitive: "PNG" is not a known token.
_TOKENS: Dict[str, FormatTag] = {
    "png": FormatTag.PNG,
    "jpg": FormatTag.JPEG,
    "jpeg": FormatTag.JPEG,
    "webp": FormatTag.WEBP,
}


def supported_extensions() -> Dict[str, FormatTag]:
    """Recognised extension tokens, in display order, with their format."""
    return dict(_TOKENS)


def resolve(path: str) -> FormatTag:
    """
    Map a file name to its FormatTag using the text after the last '.'.
    Only the final segment counts, so 'archive.tar.gz' is judged by 'gz'.
    """
    if "." not in path:
        raise NoExtensionError(path)

    token = path.split(".")[-1]
    tag = _TOKENS.get(token)
    if tag is None:
        raise UnsupportedExtensionError(token)
    return tag

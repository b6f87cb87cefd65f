from dataclasses import dataclass
from typing import Any

from imgconv.core.formats import FormatTag


@dataclass(frozen=True)
class ConversionRequest:
    """Input and output paths exactly as the caller gave them."""
    input_path: str
    output_path: str


@dataclass
class RasterImage:
    """Represents a decoded image handed from a reader to a writer."""
    # Codec-owned pixel buffer (a PIL.Image.Image); never inspected here.
    pixels: Any

    def close(self) -> None:
        self.pixels.close()

    def __enter__(self) -> "RasterImage":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


@dataclass(frozen=True)
class Report:
    input_format: FormatTag
    output_format: FormatTag

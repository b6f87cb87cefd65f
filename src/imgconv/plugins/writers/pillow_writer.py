from imgconv.core.errors import EncodeFailedError, IoFailedError
from imgconv.core.formats import FormatTag
from imgconv.core.models import RasterImage
from imgconv.plugins.registry import OutputWriter, PluginRegistry

# Failures opening the destination, before any encoder runs.
_FS_ERRORS = (FileNotFoundError, PermissionError, IsADirectoryError, NotADirectoryError)


class PillowWriter(OutputWriter):
    @classmethod
    def get_supported_formats(cls) -> list[FormatTag]:
        return [FormatTag.PNG, FormatTag.JPEG, FormatTag.WEBP]

    def write(self, image: RasterImage, output_path: str) -> None:
        # Pillow picks the encoder from the output file's extension and
        # removes the file it created if encoding fails.
        try:
            image.pixels.save(output_path)
        except _FS_ERRORS as exc:
            raise IoFailedError(exc) from exc
        except (OSError, ValueError, KeyError) as exc:
            raise EncodeFailedError(exc) from exc


PluginRegistry.register_writer(PillowWriter)

from imgconv.core.errors import UnsupportedExtensionError
from imgconv.core.formats import resolve
from imgconv.core.models import ConversionRequest, Report
from imgconv.plugins.registry import PluginRegistry


class CoreEngine:
    """
    Orchestrates the conversion from an input image to an output image.
    Does not know about decoding or encoding, only routing.
    """

    @staticmethod
    def convert(request: ConversionRequest) -> Report:
        """
        Convert the image at `request.input_path` to `request.output_path`.
        Both file names are checked before any file is touched, so a bad
        output name never costs a decode.
        """
        in_fmt = resolve(request.input_path)
        out_fmt = resolve(request.output_path)

        ReaderCls = PluginRegistry.get_reader(in_fmt)
        if not ReaderCls:
            raise UnsupportedExtensionError(str(in_fmt))

        WriterCls = PluginRegistry.get_writer(out_fmt)
        if not WriterCls:
            raise UnsupportedExtensionError(str(out_fmt))

        with ReaderCls().read(request.input_path, in_fmt) as image:
            WriterCls().write(image, request.output_path)

        return Report(input_format=in_fmt, output_format=out_fmt)

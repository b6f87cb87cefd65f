class ImageConverterError(Exception):
    """Base exception for all converter errors."""
    pass


class FileFormatError(ImageConverterError):
    """The file name does not name a supported image format."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"File format error: {detail}")


class NoExtensionError(FileFormatError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"The file {path} has no extension, please specify one")


class UnsupportedExtensionError(FileFormatError):
    def __init__(self, token: str):
        self.token = token
        super().__init__(f"The extension {token} is not supported")


class ConversionFailedError(ImageConverterError):
    """The codec library could not complete a decode or encode step."""

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(f"Image conversion error: {cause}")


class DecodeFailedError(ConversionFailedError):
    pass


class EncodeFailedError(ConversionFailedError):
    pass


class IoFailedError(ImageConverterError):
    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(f"IO error: {cause}")

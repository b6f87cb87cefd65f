from abc import ABC, abstractmethod
from typing import Dict, Optional, Type

from imgconv.core.formats import FormatTag, supported_extensions
from imgconv.core.models import RasterImage


class InputReader(ABC):
    @classmethod
    @abstractmethod
    def get_supported_formats(cls) -> list[FormatTag]:
        """e.g., [FormatTag.PNG]"""
        pass

    @abstractmethod
    def read(self, file_path: str, fmt: FormatTag) -> RasterImage:
        pass


class OutputWriter(ABC):
    @classmethod
    @abstractmethod
    def get_supported_formats(cls) -> list[FormatTag]:
        """e.g., [FormatTag.JPEG]"""
        pass

    @abstractmethod
    def write(self, image: RasterImage, output_path: str) -> None:
        pass


class PluginRegistry:
    _readers: Dict[FormatTag, Type[InputReader]] = {}
    _writers: Dict[FormatTag, Type[OutputWriter]] = {}

    @classmethod
    def register_reader(cls, reader_cls: Type[InputReader]) -> None:
        for fmt in reader_cls.get_supported_formats():
            cls._readers[fmt] = reader_cls

    @classmethod
    def register_writer(cls, writer_cls: Type[OutputWriter]) -> None:
        for fmt in writer_cls.get_supported_formats():
            cls._writers[fmt] = writer_cls

    @classmethod
    def get_reader(cls, fmt: FormatTag) -> Optional[Type[InputReader]]:
        return cls._readers.get(fmt)

    @classmethod
    def get_writer(cls, fmt: FormatTag) -> Optional[Type[OutputWriter]]:
        return cls._writers.get(fmt)

    @classmethod
    def available_inputs(cls) -> list[str]:
        """Extension tokens that have a registered reader, e.g. ['png', 'jpg', ...]."""
        return [ext for ext, fmt in supported_extensions().items() if fmt in cls._readers]

    @classmethod
    def available_outputs(cls) -> list[str]:
        return [ext for ext, fmt in supported_extensions().items() if fmt in cls._writers]

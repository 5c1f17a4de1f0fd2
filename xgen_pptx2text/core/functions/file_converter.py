# xgen_pptx2text/core/functions/file_converter.py
"""
BaseFileConverter - Abstract base class for file format conversion

Defines the interface for converting binary file data to a workable format.

The converter's job is to transform raw binary data into a format-specific
object that the handler can work with (e.g., an opened OOXML archive).

This is the FIRST step in the processing pipeline:
    Binary Data -> FileConverter -> Workable Object -> Handler Processing

Usage:
    class PptxFileConverter(BaseFileConverter):
        def convert(self, file_data: bytes, file_stream: BinaryIO) -> Any:
            return PptxArchive(zipfile.ZipFile(BytesIO(file_data)))

        def get_format_name(self) -> str:
            return "PPTX Presentation"
"""
from abc import ABC, abstractmethod
from typing import Any, Optional, BinaryIO


class BaseFileConverter(ABC):
    """
    Abstract base class for file format converters.

    Subclasses must implement:
    - convert(): Convert binary data to workable format
    - get_format_name(): Return human-readable format name
    """

    @abstractmethod
    def convert(
        self,
        file_data: bytes,
        file_stream: Optional[BinaryIO] = None,
        **kwargs
    ) -> Any:
        """
        Convert binary file data to a workable format.

        Args:
            file_data: Raw binary file data
            file_stream: Optional file stream (BytesIO) for libraries that prefer streams
            **kwargs: Additional format-specific options

        Returns:
            Format-specific object

        Raises:
            InvalidArchiveError: If the data cannot be opened
        """
        pass

    @abstractmethod
    def get_format_name(self) -> str:
        """Return human-readable format name."""
        pass

    def close(self, converted_object: Any) -> None:
        """
        Close/cleanup the converted object if needed.

        Default implementation does nothing.
        """
        pass


class NullFileConverter(BaseFileConverter):
    """
    Null implementation of file converter.

    Used as default when no conversion is needed.
    Returns the original file data unchanged.
    """

    def convert(
        self,
        file_data: bytes,
        file_stream: Optional[BinaryIO] = None,
        **kwargs
    ) -> bytes:
        """Return file data unchanged."""
        return file_data

    def get_format_name(self) -> str:
        return "Raw Binary"


__all__ = [
    'BaseFileConverter',
    'NullFileConverter',
]

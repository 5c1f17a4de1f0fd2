# xgen_pptx2text/core/processor/base_handler.py
"""
BaseHandler - Abstract base class for document processing handlers

Manages config, SlideTagProcessor, file converter and preprocessor passed
from PptxReader at instance level for reuse by internal methods.

Each handler should override:
- _create_file_converter(): Provide format-specific file converter
- _create_preprocessor(): Provide format-specific preprocessor

Processing Pipeline:
    1. file_converter.convert() - Binary -> Format-specific object
    2. preprocessor.preprocess() - Select/order the converted data
    3. Format-specific content extraction

Handlers run on a worker thread, so they must not keep per-file state on
the instance.
"""
import io
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, TYPE_CHECKING

from xgen_pptx2text.core.functions.file_converter import (
    BaseFileConverter,
    NullFileConverter,
)
from xgen_pptx2text.core.functions.page_tag_processor import SlideTagProcessor
from xgen_pptx2text.core.functions.preprocessor import (
    BasePreprocessor,
    NullPreprocessor,
    PreprocessedData,
)

if TYPE_CHECKING:
    from xgen_pptx2text.core.pptx_reader import CurrentFile

logger = logging.getLogger("xgen_pptx2text")


class BaseHandler(ABC):
    """
    Abstract base class for document handlers.

    file_converter and preprocessor are lazy-initialized on first access.

    Attributes:
        config: Configuration dictionary passed from PptxReader
        slide_tag_processor: SlideTagProcessor instance passed from PptxReader
        file_converter: Format-specific file converter instance
        preprocessor: Format-specific preprocessor instance
        logger: Logging instance
    """

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        slide_tag_processor: Optional[SlideTagProcessor] = None,
    ):
        """
        Initialize BaseHandler.

        Args:
            config: Configuration dictionary (passed from PptxReader)
            slide_tag_processor: SlideTagProcessor instance (passed from PptxReader)
        """
        self._config = config or {}
        self._slide_tag_processor = slide_tag_processor or self._get_slide_tag_processor_from_config()
        self._file_converter: Optional[BaseFileConverter] = None
        self._preprocessor: Optional[BasePreprocessor] = None
        self._logger = logging.getLogger(f"xgen_pptx2text.{self.__class__.__name__}")

    def _get_slide_tag_processor_from_config(self) -> SlideTagProcessor:
        """Get SlideTagProcessor from config or create default."""
        if self._config and "slide_tag_processor" in self._config:
            return self._config["slide_tag_processor"]
        return SlideTagProcessor()

    def _create_file_converter(self) -> BaseFileConverter:
        """
        Create format-specific file converter.

        Override this method in subclasses to provide the appropriate
        file converter for the file format.
        """
        return NullFileConverter()

    def _create_preprocessor(self) -> BasePreprocessor:
        """
        Create format-specific preprocessor.

        Override this method in subclasses. Runs after
        file_converter.convert() and before content extraction.
        """
        return NullPreprocessor()

    @property
    def config(self) -> Dict[str, Any]:
        """Configuration dictionary."""
        return self._config

    @property
    def slide_tag_processor(self) -> SlideTagProcessor:
        """SlideTagProcessor instance."""
        return self._slide_tag_processor

    @property
    def file_converter(self) -> BaseFileConverter:
        """Format-specific file converter (lazy-initialized)."""
        if self._file_converter is None:
            converter = self._create_file_converter()
            # If subclass returns None, use NullFileConverter
            self._file_converter = converter if converter is not None else NullFileConverter()
        return self._file_converter

    @property
    def preprocessor(self) -> BasePreprocessor:
        """Format-specific preprocessor (lazy-initialized)."""
        if self._preprocessor is None:
            preprocessor = self._create_preprocessor()
            # If subclass returns None, use NullPreprocessor
            self._preprocessor = preprocessor if preprocessor is not None else NullPreprocessor()
        return self._preprocessor

    @property
    def logger(self) -> logging.Logger:
        """Logger instance."""
        return self._logger

    @abstractmethod
    def extract_text(self, current_file: "CurrentFile", **kwargs) -> str:
        """
        Extract text from file.

        Args:
            current_file: CurrentFile dict containing file info and binary data
            **kwargs: Additional options

        Returns:
            Extracted text
        """
        pass

    def convert_file(self, current_file: "CurrentFile", **kwargs) -> Any:
        """
        Convert binary file data to workable format.

        Binary Data -> FileConverter -> Workable Object
        """
        file_data = current_file.get("file_data", b"")
        file_stream = self.get_file_stream(current_file)
        return self.file_converter.convert(file_data, file_stream, **kwargs)

    def preprocess(self, converted_data: Any, **kwargs) -> PreprocessedData:
        """Run the format-specific preprocessor on converted data."""
        return self.preprocessor.preprocess(converted_data, **kwargs)

    def get_file_stream(self, current_file: "CurrentFile") -> io.BytesIO:
        """
        Get a fresh BytesIO stream from current_file.

        Resets the stream position to the beginning for reuse.
        """
        stream = current_file.get("file_stream")
        if stream is not None:
            stream.seek(0)
            return stream
        # Fallback: create new stream from file_data
        return io.BytesIO(current_file.get("file_data", b""))

    def create_slide_tag(self, slide_number: int) -> str:
        """Create a slide marker (e.g., "--- Slide 1 ---")."""
        return self._slide_tag_processor.create_slide_tag(slide_number)


__all__ = [
    "BaseHandler",
]

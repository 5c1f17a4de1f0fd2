# xgen_pptx2text/core/functions/preprocessor.py
"""
BasePreprocessor - Abstract base class for data preprocessing

Defines the interface for preprocessing data after file conversion.

Processing Pipeline Position:
    1. FileConverter.convert() -> Format-specific object
    2. Preprocessor.preprocess() -> Selected/ordered data (THIS STEP)
    3. Content extraction
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class PreprocessedData:
    """
    Result of preprocessing operation.

    Attributes:
        raw_content: Original input data (for reference)
        clean_content: Processed content ready for use - THIS IS THE TRUE SOURCE
        encoding: Encoding used to decode text parts
        metadata: Any metadata discovered during preprocessing
    """
    raw_content: Any = None
    clean_content: Any = None  # TRUE SOURCE
    encoding: str = "utf-8"
    metadata: Dict[str, Any] = field(default_factory=dict)


class BasePreprocessor(ABC):
    """
    Abstract base class for data preprocessors.

    Subclasses must implement:
    - preprocess(): Process converted data and return PreprocessedData
    - get_format_name(): Return human-readable format name
    """

    @abstractmethod
    def preprocess(
        self,
        converted_data: Any,
        **kwargs
    ) -> PreprocessedData:
        """
        Preprocess converted data.

        Args:
            converted_data: Data from FileConverter.convert()
            **kwargs: Additional format-specific options

        Returns:
            PreprocessedData containing the selected content
        """
        pass

    @abstractmethod
    def get_format_name(self) -> str:
        """Return human-readable format name."""
        pass


class NullPreprocessor(BasePreprocessor):
    """Null preprocessor that passes data through unchanged."""

    def preprocess(
        self,
        converted_data: Any,
        **kwargs
    ) -> PreprocessedData:
        """Pass data through unchanged. clean_content = converted_data."""
        return PreprocessedData(
            raw_content=converted_data,
            clean_content=converted_data,  # TRUE SOURCE
            encoding=kwargs.get("encoding", "utf-8"),
        )

    def get_format_name(self) -> str:
        return "Null Preprocessor (pass-through)"


__all__ = [
    'BasePreprocessor',
    'NullPreprocessor',
    'PreprocessedData',
]

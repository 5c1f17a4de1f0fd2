# xgen_pptx2text/core/functions/__init__.py
"""
Functions - Shared building blocks for handlers

Module Structure:
- file_converter: BaseFileConverter (binary -> workable object)
- preprocessor: BasePreprocessor, PreprocessedData
- page_tag_processor: SlideTagProcessor (slide marker formatting)
- utils: Output cap resolution and truncation
"""
from xgen_pptx2text.core.functions.file_converter import (
    BaseFileConverter,
    NullFileConverter,
)
from xgen_pptx2text.core.functions.preprocessor import (
    BasePreprocessor,
    NullPreprocessor,
    PreprocessedData,
)
from xgen_pptx2text.core.functions.page_tag_processor import (
    SlideTagConfig,
    SlideTagProcessor,
)
from xgen_pptx2text.core.functions.utils import (
    DEFAULT_MAX_CHARS,
    MAX_OUTPUT_CHARS,
    TRUNCATION_SUFFIX,
    clamp_max_chars,
    truncate_text,
)

__all__ = [
    "BaseFileConverter",
    "NullFileConverter",
    "BasePreprocessor",
    "NullPreprocessor",
    "PreprocessedData",
    "SlideTagConfig",
    "SlideTagProcessor",
    "DEFAULT_MAX_CHARS",
    "MAX_OUTPUT_CHARS",
    "TRUNCATION_SUFFIX",
    "clamp_max_chars",
    "truncate_text",
]

"""
PPTX Helper module

Functional building blocks used by pptx_handler.py.

Module structure:
- pptx_constants: slide naming, recognized tags, entity table, SlideEntry
- pptx_file_converter: ZIP container access (PptxFileConverter, PptxArchive)
- pptx_preprocessor: slide selection and ordering (PptxPreprocessor)
- pptx_text_scanner: tolerant run-text scanner for slide XML
- pptx_slide: per-slide text collection with slide markers
"""

# Constants
from xgen_pptx2text.core.processor.pptx_helper.pptx_constants import (
    SlideEntry,
    XML_ENTITIES,
)

# Archive access
from xgen_pptx2text.core.processor.pptx_helper.pptx_file_converter import (
    PptxArchive,
    PptxFileConverter,
)

# Slide selection
from xgen_pptx2text.core.processor.pptx_helper.pptx_preprocessor import (
    PptxPreprocessor,
    is_slide_part,
    parse_slide_ordinal,
    select_slide_entries,
)

# Text scanning
from xgen_pptx2text.core.processor.pptx_helper.pptx_text_scanner import (
    decode_xml_entities,
    scan_slide_xml,
)

# Slide collection
from xgen_pptx2text.core.processor.pptx_helper.pptx_slide import (
    collect_slide_text,
    read_slide_xml,
)

__all__ = [
    # Constants
    "SlideEntry",
    "XML_ENTITIES",
    # Archive access
    "PptxArchive",
    "PptxFileConverter",
    # Slide selection
    "PptxPreprocessor",
    "is_slide_part",
    "parse_slide_ordinal",
    "select_slide_entries",
    # Text scanning
    "decode_xml_entities",
    "scan_slide_xml",
    # Slide collection
    "collect_slide_text",
    "read_slide_xml",
]

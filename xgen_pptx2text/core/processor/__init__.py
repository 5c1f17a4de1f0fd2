# xgen_pptx2text/core/processor/__init__.py
"""
Processor - Document type handlers

Module Structure:
- base_handler: BaseHandler abstract class
- pptx_handler: PPTX slide text extraction
- pptx_helper/: PPTX building blocks (archive, ordering, scanner, collector)
"""
from xgen_pptx2text.core.processor.base_handler import BaseHandler
from xgen_pptx2text.core.processor.pptx_handler import PptxHandler

__all__ = [
    "BaseHandler",
    "PptxHandler",
]

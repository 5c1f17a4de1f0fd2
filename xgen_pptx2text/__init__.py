# xgen_pptx2text/__init__.py
"""
xgen_pptx2text Library

Sandboxed PPTX text extraction for LLM tool use.

Package Structure:
- core: Extraction core module
    - PptxReader: The access-controlled pptx_read tool
    - processor: PPTX handler (archive, slide ordering, XML text scanner)
    - functions: Shared utilities

Usage:
    from xgen_pptx2text import PptxReader, WorkspaceSecurityPolicy

    reader = PptxReader(WorkspaceSecurityPolicy("/srv/workspace"))
    result = await reader.execute({"path": "deck.pptx"})
    print(result.output)
"""

__version__ = "0.1.0"

# Expose core classes at top level
from xgen_pptx2text.core import (
    ExtractionRequest,
    ExtractionResult,
    PptxReader,
    PptxReaderConfig,
    SecurityPolicy,
    WorkspaceSecurityPolicy,
)

# Explicit subpackages
from xgen_pptx2text import core

__all__ = [
    "__version__",
    # Core classes
    "PptxReader",
    "PptxReaderConfig",
    "ExtractionRequest",
    "ExtractionResult",
    "SecurityPolicy",
    "WorkspaceSecurityPolicy",
    # Subpackages
    "core",
]

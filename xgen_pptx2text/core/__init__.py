# xgen_pptx2text/core/__init__.py
"""
Core - PPTX Text Extraction Core Module

Module Structure:
- pptx_reader: PptxReader (access-controlled pptx_read tool)
- security: SecurityPolicy interface, WorkspaceSecurityPolicy
- models: ExtractionRequest, ExtractionResult, ResolvedTarget, ToolSpec
- errors: Typed error taxonomy
- processor/: PPTX handler and helpers
- functions/: Shared converters, preprocessors, slide tags, output limits

Usage:
    from xgen_pptx2text import PptxReader
    from xgen_pptx2text.core.processor import PptxHandler
    from xgen_pptx2text.core.functions import truncate_text
"""

# === Main Class ===
from xgen_pptx2text.core.pptx_reader import (
    EMPTY_TEXT_MESSAGE,
    MAX_PPTX_BYTES,
    CurrentFile,
    PptxReader,
    PptxReaderConfig,
)

# === Models ===
from xgen_pptx2text.core.models import (
    ExtractionRequest,
    ExtractionResult,
    ResolvedTarget,
    ToolSpec,
)

# === Security ===
from xgen_pptx2text.core.security import (
    ActionTracker,
    SecurityPolicy,
    WorkspaceSecurityPolicy,
)

# === Errors ===
from xgen_pptx2text.core.errors import PptxReadError

# === Explicit Subpackage Imports ===
from xgen_pptx2text.core import processor
from xgen_pptx2text.core import functions

__all__ = [
    # Main Class
    "PptxReader",
    "PptxReaderConfig",
    "CurrentFile",
    "EMPTY_TEXT_MESSAGE",
    "MAX_PPTX_BYTES",
    # Models
    "ExtractionRequest",
    "ExtractionResult",
    "ResolvedTarget",
    "ToolSpec",
    # Security
    "ActionTracker",
    "SecurityPolicy",
    "WorkspaceSecurityPolicy",
    # Errors
    "PptxReadError",
    # Subpackages
    "processor",
    "functions",
]

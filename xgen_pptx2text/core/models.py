# xgen_pptx2text/core/models.py
"""
Request/response models for the pptx_read tool.

All models are request-scoped: built per call and dropped once the result
is returned.
"""
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from xgen_pptx2text.core.errors import PptxReadError
from xgen_pptx2text.core.functions.utils import MAX_OUTPUT_CHARS


class ExtractionRequest(BaseModel):
    """Tool invocation payload."""

    model_config = ConfigDict(extra='ignore')

    path: str = Field(description='Workspace-relative or absolute path to the PPTX file')
    max_chars: Optional[int] = Field(
        default=None,
        description=f'Maximum characters to return (clamped to {MAX_OUTPUT_CHARS})',
    )

    @field_validator('max_chars', mode='before')
    @classmethod
    def _clamp_max_chars(cls, value: Any) -> Optional[int]:
        # Unusable values fall back to the default instead of failing the call
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            return None
        return min(value, MAX_OUTPUT_CHARS)


class ResolvedTarget(BaseModel):
    """A path that passed both allow-list checks, with its size on disk."""

    model_config = ConfigDict(frozen=True)

    canonical_path: Path
    byte_size: int = Field(ge=0)


class ExtractionResult(BaseModel):
    """
    Outcome of a pptx_read call.

    success=True carries the text in ``output``; success=False carries a
    message in ``error`` and leaves ``output`` empty.
    """

    model_config = ConfigDict(frozen=True)

    success: bool
    output: str = ''
    error: Optional[str] = None
    error_code: Optional[str] = None

    @model_validator(mode='after')
    def _check_exclusive(self) -> 'ExtractionResult':
        if self.success and self.error is not None:
            raise ValueError('successful result cannot carry an error')
        if not self.success and (self.error is None or self.output):
            raise ValueError('failed result needs an error and no output')
        return self

    @classmethod
    def ok(cls, output: str) -> 'ExtractionResult':
        return cls(success=True, output=output)

    @classmethod
    def failure(cls, error: PptxReadError) -> 'ExtractionResult':
        return cls(success=False, error=error.message, error_code=error.code)

    def to_response(self) -> Dict[str, Any]:
        """Wire shape: {success, output, error}."""
        return self.model_dump(include={'success', 'output', 'error'})


class ToolSpec(BaseModel):
    """Name, description and JSON parameter schema advertised to the model."""

    name: str
    description: str
    parameters: Dict[str, Any]


__all__ = [
    'ExtractionRequest',
    'ResolvedTarget',
    'ExtractionResult',
    'ToolSpec',
]

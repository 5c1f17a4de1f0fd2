# xgen_pptx2text/core/errors.py
"""
Typed errors for the PPTX read pipeline.

Every failure a request can hit maps to exactly one subclass with a stable
code. PptxReader catches these at its boundary and turns them into a
failed ExtractionResult, so callers never see them raised.
"""
from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class PptxReadError(Exception):
    """Base typed exception with stable error code and metadata."""

    code: str
    message: str
    details: Dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class InvalidArgumentsError(PptxReadError):
    """Tool payload is missing required fields."""

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(code="INVALID_ARGUMENTS", message=message, details=details)


class RateLimitedError(PptxReadError):
    """Too many actions in the policy's trailing window."""

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(code="RATE_LIMITED", message=message, details=details)


class PathDeniedError(PptxReadError):
    """Raw or resolved path rejected by the security policy."""

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(code="PATH_DENIED", message=message, details=details)


class BudgetExhaustedError(PptxReadError):
    """Per-session action budget used up."""

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(code="BUDGET_EXHAUSTED", message=message, details=details)


class PathResolutionError(PptxReadError):
    """Path could not be canonicalized (missing, broken link, permissions)."""

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(code="PATH_RESOLUTION", message=message, details=details)


class FileTooLargeError(PptxReadError):
    """File exceeds the configured byte ceiling."""

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(code="FILE_TOO_LARGE", message=message, details=details)


class FileReadError(PptxReadError):
    """Metadata or body of the file could not be read."""

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(code="READ_ERROR", message=message, details=details)


class InvalidArchiveError(PptxReadError):
    """Bytes are not a readable ZIP container."""

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(code="INVALID_ARCHIVE", message=message, details=details)


class EntryReadError(PptxReadError):
    """A named archive entry could not be decompressed or decoded."""

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(code="ENTRY_READ", message=message, details=details)


class ExtractionTaskFailed(PptxReadError):
    """The isolated extraction worker crashed or was cancelled."""

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(code="EXTRACTION_TASK_FAILED", message=message, details=details)


__all__ = [
    "PptxReadError",
    "InvalidArgumentsError",
    "RateLimitedError",
    "PathDeniedError",
    "BudgetExhaustedError",
    "PathResolutionError",
    "FileTooLargeError",
    "FileReadError",
    "InvalidArchiveError",
    "EntryReadError",
    "ExtractionTaskFailed",
]

# xgen_pptx2text/core/pptx_reader.py
"""PptxReader - Access-controlled PPTX text extraction

Entry point of the library. Exposes the ``pptx_read`` tool: given a path to
a PPTX file inside the workspace, run the security checks, bound the input
size, extract slide text on a worker thread and bound the output size.

Check sequence (first failure wins):
    1. rate limit                     -> RATE_LIMITED
    2. allow-list on the raw path     -> PATH_DENIED
    3. consume one action             -> BUDGET_EXHAUSTED
    4. canonicalize against workspace -> PATH_RESOLUTION
    5. allow-list on canonical path   -> PATH_DENIED
    6. size from metadata             -> FILE_TOO_LARGE / READ_ERROR
    7. read bytes                     -> READ_ERROR
    8. extract on a worker thread     -> INVALID_ARCHIVE / ENTRY_READ /
                                         EXTRACTION_TASK_FAILED
    9. empty text sentinel or truncation

Steps 1-3 update the policy's shared counters whatever happens later.

Usage Example:
    from xgen_pptx2text import PptxReader, WorkspaceSecurityPolicy

    policy = WorkspaceSecurityPolicy("/srv/workspace", max_actions_per_hour=100)
    reader = PptxReader(policy)

    result = await reader.extract(ExtractionRequest(path="decks/q3.pptx"))
    result = await reader.execute({"path": "decks/q3.pptx", "max_chars": 10000})
"""

import io
import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Optional, TypedDict, Union

import anyio
import anyio.to_thread

from xgen_pptx2text.core.errors import (
    BudgetExhaustedError,
    EntryReadError,
    ExtractionTaskFailed,
    FileReadError,
    FileTooLargeError,
    InvalidArchiveError,
    InvalidArgumentsError,
    PathDeniedError,
    PathResolutionError,
    PptxReadError,
    RateLimitedError,
)
from xgen_pptx2text.core.functions.page_tag_processor import SlideTagProcessor
from xgen_pptx2text.core.functions.utils import (
    DEFAULT_MAX_CHARS,
    MAX_OUTPUT_CHARS,
    TRUNCATION_SUFFIX,
    clamp_max_chars,
    truncate_text,
)
from xgen_pptx2text.core.models import (
    ExtractionRequest,
    ExtractionResult,
    ResolvedTarget,
    ToolSpec,
)
from xgen_pptx2text.core.processor.pptx_handler import PptxHandler
from xgen_pptx2text.core.security import SecurityPolicy

logger = logging.getLogger("xgen_pptx2text")

MAX_PPTX_BYTES = 50 * 1024 * 1024
EMPTY_TEXT_MESSAGE = "PPTX contains no extractable text (may be image-only)"


class CurrentFile(TypedDict, total=False):
    """
    TypedDict containing file information passed to handlers.

    Attributes:
        file_path: Canonical path of the file
        file_name: File name (including extension)
        file_extension: File extension (lowercase, without dot)
        file_data: Binary data of the file
        file_stream: BytesIO stream (reusable)
        file_size: File size in bytes
    """
    file_path: str
    file_name: str
    file_extension: str
    file_data: bytes
    file_stream: io.BytesIO
    file_size: int


@dataclass
class PptxReaderConfig:
    """
    PptxReader configuration.

    Attributes:
        workspace_dir: Root for relative paths (None: use the policy's workspace_dir)
        max_file_bytes: Largest file that will be read
        default_max_chars: Output cap when the caller gives none
        max_output_chars: Hard output cap regardless of the request
        truncation_suffix: Appended when output is cut
        empty_text_message: Successful output when no slide has text
    """
    workspace_dir: Optional[Path] = None
    max_file_bytes: int = MAX_PPTX_BYTES
    default_max_chars: int = DEFAULT_MAX_CHARS
    max_output_chars: int = MAX_OUTPUT_CHARS
    truncation_suffix: str = TRUNCATION_SUFFIX
    empty_text_message: str = EMPTY_TEXT_MESSAGE


class PptxReader:
    """
    The ``pptx_read`` tool.

    Args:
        security: Host security policy (see SecurityPolicy)
        config: PptxReaderConfig instance
        workspace_dir: Override config.workspace_dir
        slide_tag_processor: Custom slide marker formatter
        **kwargs: Any other PptxReaderConfig field as an override

    Example:
        >>> reader = PptxReader(policy, max_file_bytes=10 * 1024 * 1024)
        >>> result = await reader.execute({"path": "deck.pptx"})
        >>> result.success, result.output[:15]
        (True, '--- Slide 1 ---')
    """

    name = "pptx_read"
    description = (
        "Extract plain text from a PowerPoint (PPTX) file in the workspace. "
        "Returns all readable text from all slides, separated by slide markers. "
        "Useful for analyzing presentations without manual copy-paste."
    )

    def __init__(
        self,
        security: SecurityPolicy,
        config: Optional[PptxReaderConfig] = None,
        *,
        workspace_dir: Optional[Union[str, Path]] = None,
        slide_tag_processor: Optional[SlideTagProcessor] = None,
        **kwargs
    ):
        self._security = security

        config = config or PptxReaderConfig()
        if workspace_dir is not None:
            kwargs["workspace_dir"] = Path(workspace_dir)
        if kwargs:
            config = replace(config, **kwargs)
        if config.workspace_dir is None:
            config = replace(config, workspace_dir=Path(security.workspace_dir))
        self._config = config

        self._slide_tag_processor = slide_tag_processor or SlideTagProcessor()
        self._handler = PptxHandler(
            config={"slide_tag_processor": self._slide_tag_processor},
            slide_tag_processor=self._slide_tag_processor,
        )
        self._logger = logging.getLogger(f"xgen_pptx2text.{self.__class__.__name__}")

    # =========================================================================
    # Public Properties
    # =========================================================================

    @property
    def config(self) -> PptxReaderConfig:
        """Current configuration."""
        return self._config

    @property
    def security(self) -> SecurityPolicy:
        return self._security

    @property
    def handler(self) -> PptxHandler:
        return self._handler

    # =========================================================================
    # Public Methods - Tool Surface
    # =========================================================================

    def parameters_schema(self) -> Dict[str, Any]:
        """JSON schema of the tool arguments."""
        return {
            "type": "object",
            "properties": {
                "path": {
                    "type": "string",
                    "description": (
                        "Path to the PPTX file. Relative paths resolve from workspace; "
                        "outside paths require policy allowlist."
                    ),
                },
                "max_chars": {
                    "type": "integer",
                    "description": (
                        f"Maximum characters to return (default: {self._config.default_max_chars}, "
                        f"max: {self._config.max_output_chars})"
                    ),
                    "minimum": 1,
                    "maximum": self._config.max_output_chars,
                },
            },
            "required": ["path"],
        }

    def spec(self) -> ToolSpec:
        return ToolSpec(
            name=self.name,
            description=self.description,
            parameters=self.parameters_schema(),
        )

    async def execute(self, args: Dict[str, Any]) -> ExtractionResult:
        """
        Run the tool from a raw JSON payload.

        Args:
            args: {"path": str, "max_chars": int (optional)}

        Returns:
            ExtractionResult (never raises for bad input)
        """
        path = args.get("path") if isinstance(args, dict) else None
        if not isinstance(path, str):
            error = InvalidArgumentsError("Missing 'path' parameter")
            self._logger.warning(f"pptx_read rejected: {error.message}")
            return ExtractionResult.failure(error)

        request = ExtractionRequest(path=path, max_chars=args.get("max_chars"))
        return await self.extract(request)

    # =========================================================================
    # Public Methods - Extraction
    # =========================================================================

    async def extract(self, request: ExtractionRequest) -> ExtractionResult:
        """
        Extract slide text for one request.

        Args:
            request: Validated request

        Returns:
            ExtractionResult; failures are reported, never raised
        """
        max_chars = clamp_max_chars(
            request.max_chars,
            default=self._config.default_max_chars,
            ceiling=self._config.max_output_chars,
        )

        try:
            text = await self._run(request.path)
        except PptxReadError as e:
            self._logger.warning(f"pptx_read failed [{e.code}]: {e.message}")
            return ExtractionResult.failure(e)

        if not text.strip():
            return ExtractionResult.ok(self._config.empty_text_message)

        output = truncate_text(text, max_chars, self._config.truncation_suffix)
        if len(output) != len(text):
            self._logger.debug(f"Truncated output from {len(text)} to {max_chars} chars")
        return ExtractionResult.ok(output)

    # =========================================================================
    # Private Methods
    # =========================================================================

    async def _run(self, path: str) -> str:
        self._check_access(path)
        target = await self._resolve_target(path)
        data = await self._read_bytes(target)
        return await self._extract_isolated(target, data)

    def _check_access(self, path: str) -> None:
        if self._security.is_rate_limited():
            raise RateLimitedError("Rate limit exceeded: too many actions in the last hour")

        if not self._security.is_path_allowed(path):
            raise PathDeniedError(f"Path not allowed by security policy: {path}", path=path)

        if not self._security.record_action():
            raise BudgetExhaustedError("Rate limit exceeded: action budget exhausted")

    async def _resolve_target(self, path: str) -> ResolvedTarget:
        full_path = anyio.Path(self._config.workspace_dir) / path

        try:
            resolved = Path(await full_path.resolve(strict=True))
        except (OSError, RuntimeError, ValueError) as e:
            raise PathResolutionError(f"Failed to resolve file path: {e}", path=path)

        if not self._security.is_resolved_path_allowed(resolved):
            raise PathDeniedError(
                self._security.resolved_path_violation_message(resolved),
                path=path,
                resolved=str(resolved),
            )

        self._logger.debug(f"Reading PPTX: {resolved}")

        try:
            stat = await anyio.Path(resolved).stat()
        except OSError as e:
            raise FileReadError(f"Failed to read file metadata: {e}", path=str(resolved))

        limit = self._config.max_file_bytes
        if stat.st_size > limit:
            raise FileTooLargeError(
                f"PPTX too large: {stat.st_size} bytes (limit: {limit} bytes)",
                size=stat.st_size,
                limit=limit,
            )

        return ResolvedTarget(canonical_path=resolved, byte_size=stat.st_size)

    async def _read_bytes(self, target: ResolvedTarget) -> bytes:
        try:
            return await anyio.Path(target.canonical_path).read_bytes()
        except OSError as e:
            raise FileReadError(f"Failed to read PPTX file: {e}", path=str(target.canonical_path))

    async def _extract_isolated(self, target: ResolvedTarget, data: bytes) -> str:
        canonical = target.canonical_path
        current_file: CurrentFile = {
            "file_path": str(canonical),
            "file_name": canonical.name,
            "file_extension": canonical.suffix.lstrip('.').lower(),
            "file_data": data,
            "file_stream": io.BytesIO(data),
            "file_size": len(data),
        }

        # Parsing is CPU-bound; keep it off the event loop
        try:
            return await anyio.to_thread.run_sync(self._handler.extract_text, current_file)
        except (InvalidArchiveError, EntryReadError) as e:
            raise type(e)(f"PPTX extraction failed: {e.message}", **e.details) from e
        except Exception as e:  # noqa: BLE001
            self._logger.exception("PPTX extraction worker crashed")
            raise ExtractionTaskFailed(f"PPTX extraction task panicked: {e}", path=str(canonical))


__all__ = [
    "CurrentFile",
    "EMPTY_TEXT_MESSAGE",
    "MAX_PPTX_BYTES",
    "PptxReader",
    "PptxReaderConfig",
]

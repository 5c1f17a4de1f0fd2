# xgen_pptx2text/core/security.py
"""
Security policy collaborator.

PptxReader consumes the policy as an opaque capability: three yes/no checks,
one budget counter and a message formatter. It applies no allow-listing
logic of its own.

WorkspaceSecurityPolicy is a reference implementation for standalone use.
Hosts with their own policy engine only need to satisfy SecurityPolicy.
"""
import logging
import threading
import time
from collections import deque
from pathlib import Path, PurePath
from typing import Callable, Deque, Iterable, List, Optional, Protocol, Union, runtime_checkable

logger = logging.getLogger("xgen_pptx2text.security")

RATE_WINDOW_SECONDS = 3600.0


@runtime_checkable
class SecurityPolicy(Protocol):
    """Capability interface the reader needs from the host's policy engine."""

    workspace_dir: Path

    def is_rate_limited(self) -> bool:
        ...

    def is_path_allowed(self, path: str) -> bool:
        ...

    def record_action(self) -> bool:
        """Consume one action; False once the budget is exhausted."""
        ...

    def is_resolved_path_allowed(self, path: Path) -> bool:
        ...

    def resolved_path_violation_message(self, path: Path) -> str:
        ...


class ActionTracker:
    """Sliding-window action counter. Timestamps older than the window drop out."""

    def __init__(self, window_seconds: float = RATE_WINDOW_SECONDS, clock: Callable[[], float] = time.monotonic):
        self._window = window_seconds
        self._clock = clock
        self._actions: Deque[float] = deque()
        self._lock = threading.Lock()

    def _prune(self, now: float) -> None:
        cutoff = now - self._window
        while self._actions and self._actions[0] <= cutoff:
            self._actions.popleft()

    def record(self) -> int:
        """Record one action and return the count inside the window."""
        with self._lock:
            now = self._clock()
            self._prune(now)
            self._actions.append(now)
            return len(self._actions)

    def count(self) -> int:
        with self._lock:
            self._prune(self._clock())
            return len(self._actions)


class WorkspaceSecurityPolicy:
    """
    Workspace confinement plus an hourly action budget.

    Args:
        workspace_dir: Root that relative paths resolve against
        allowed_roots: Extra directories readable besides the workspace
        forbidden_paths: Path prefixes that are always denied
        workspace_only: Reject absolute paths outside the workspace/allowed roots
        max_actions_per_hour: Action budget; None disables rate limiting
        tracker: ActionTracker to share counters between policies
    """

    def __init__(
        self,
        workspace_dir: Union[str, Path],
        *,
        allowed_roots: Iterable[Union[str, Path]] = (),
        forbidden_paths: Iterable[Union[str, Path]] = (),
        workspace_only: bool = True,
        max_actions_per_hour: Optional[int] = None,
        tracker: Optional[ActionTracker] = None,
    ):
        self.workspace_dir = Path(workspace_dir)
        self.allowed_roots: List[Path] = [Path(p).expanduser() for p in allowed_roots]
        self.forbidden_paths: List[Path] = [Path(p).expanduser() for p in forbidden_paths]
        self.workspace_only = workspace_only
        self.max_actions_per_hour = max_actions_per_hour
        self.tracker = tracker or ActionTracker()

        # Canonical forms for checks on already-resolved paths
        self._canonical_roots: List[Path] = [root.resolve() for root in [self.workspace_dir, *self.allowed_roots]]
        self._canonical_forbidden: List[Path] = [p.resolve() for p in self.forbidden_paths]

    @staticmethod
    def _is_under(path: PurePath, base: PurePath) -> bool:
        return path == base or base in path.parents

    def is_rate_limited(self) -> bool:
        if self.max_actions_per_hour is None:
            return False
        return self.tracker.count() >= self.max_actions_per_hour

    def record_action(self) -> bool:
        count = self.tracker.record()
        if self.max_actions_per_hour is None:
            return True
        return count <= self.max_actions_per_hour

    def is_path_allowed(self, path: str) -> bool:
        if not path or "\0" in path:
            return False

        candidate = Path(path).expanduser()
        if ".." in candidate.parts:
            logger.debug("Rejecting path with parent traversal: %s", path)
            return False

        if any(self._is_under(candidate, forbidden) for forbidden in self.forbidden_paths):
            return False

        if not candidate.is_absolute():
            return True

        if not self.workspace_only:
            return True
        roots = [self.workspace_dir, *self.allowed_roots]
        return any(self._is_under(candidate, root) for root in roots)

    def is_resolved_path_allowed(self, path: Path) -> bool:
        if any(self._is_under(path, forbidden) for forbidden in self._canonical_forbidden):
            return False
        return any(self._is_under(path, root) for root in self._canonical_roots)

    def resolved_path_violation_message(self, path: Path) -> str:
        return f"Resolved path escapes workspace allowlist: {path}"


__all__ = [
    "RATE_WINDOW_SECONDS",
    "SecurityPolicy",
    "ActionTracker",
    "WorkspaceSecurityPolicy",
]

"""Shared fixtures: an in-memory PPTX builder and a scriptable security policy."""

import io
import zipfile
from pathlib import Path

import pytest

from xgen_pptx2text import PptxReader


def slide_xml(*paragraphs: str) -> str:
    """Minimal slide part with one <a:p> per paragraph, one <a:t> run each."""
    body = ''.join(f'<a:p><a:r><a:rPr lang="en-US"/><a:t>{text}</a:t></a:r></a:p>' for text in paragraphs)
    return (
        '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
        '<p:sld xmlns:a="http://schemas.openxmlformats.org/drawingml/2006/main" '
        'xmlns:p="http://schemas.openxmlformats.org/presentationml/2006/main">'
        f'<p:cSld><p:spTree><p:sp><p:txBody>{body}</p:txBody></p:sp></p:spTree></p:cSld>'
        '</p:sld>'
    )


def build_pptx(entries: dict[str, str | bytes]) -> bytes:
    """Zip the given entries (in insertion order) into PPTX-shaped bytes."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, 'w', zipfile.ZIP_DEFLATED) as zf:
        zf.writestr('[Content_Types].xml', '<Types/>')
        for name, content in entries.items():
            zf.writestr(name, content)
    return buffer.getvalue()


class FakeSecurityPolicy:
    """Policy double that records every call and answers from flags."""

    def __init__(self, workspace_dir: Path):
        self.workspace_dir = workspace_dir
        self.rate_limited = False
        self.path_allowed = True
        self.budget_left = True
        self.resolved_allowed = None
        self.calls: list[str] = []

    def is_rate_limited(self) -> bool:
        self.calls.append('is_rate_limited')
        return self.rate_limited

    def is_path_allowed(self, path: str) -> bool:
        self.calls.append('is_path_allowed')
        return self.path_allowed

    def record_action(self) -> bool:
        self.calls.append('record_action')
        return self.budget_left

    def is_resolved_path_allowed(self, path: Path) -> bool:
        self.calls.append('is_resolved_path_allowed')
        if self.resolved_allowed is not None:
            return self.resolved_allowed
        root = self.workspace_dir.resolve()
        return path == root or root in path.parents

    def resolved_path_violation_message(self, path: Path) -> str:
        return f'Resolved path escapes workspace allowlist: {path}'


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    root = tmp_path / 'workspace'
    root.mkdir()
    return root


@pytest.fixture
def policy(workspace: Path) -> FakeSecurityPolicy:
    return FakeSecurityPolicy(workspace)


@pytest.fixture
def reader(policy: FakeSecurityPolicy) -> PptxReader:
    return PptxReader(policy)

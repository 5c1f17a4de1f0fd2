"""
PPTX slide XML text scanner

Pulls human-readable text out of slide XML without an XML parser. Only the
DrawingML text vocabulary is recognized:

    <a:t>...</a:t>   text run; its content is kept
    </a:p>           paragraph end -> newline
    <a:br> <a:br/>   line break    -> newline

Everything else is skipped. The scanner never raises on malformed markup:
an unterminated tag at end of input is dropped, an unclosed run contributes
nothing, and a run opened inside another run discards the earlier one.
"""
import logging
import re
from typing import Dict, List

from xgen_pptx2text.core.processor.pptx_helper.pptx_constants import (
    LINE_BREAK_TAGS,
    TEXT_RUN_CLOSE,
    TEXT_RUN_OPEN,
    XML_ENTITIES,
)

logger = logging.getLogger("xgen_pptx2text.pptx.scanner")

_ENTITY_MAP: Dict[str, str] = dict(XML_ENTITIES)
_ENTITY_PATTERN = re.compile("|".join(re.escape(entity) for entity, _ in XML_ENTITIES))


def decode_xml_entities(text: str) -> str:
    """
    Decode the fixed entity set in one pass.

    Replacement text is never rescanned, so "&amp;lt;" becomes "&lt;",
    not "<".
    """
    return _ENTITY_PATTERN.sub(lambda m: _ENTITY_MAP[m.group(0)], text)


def _is_text_run_open(tag: str) -> bool:
    return tag == TEXT_RUN_OPEN or tag.startswith(TEXT_RUN_OPEN + " ")


def scan_slide_xml(xml_text: str) -> str:
    """
    Extract run text from one slide's XML.

    Each closed, non-empty run is emitted followed by a single space.
    Paragraph ends and line breaks add a newline unless the output is
    empty or already ends with one.

    Args:
        xml_text: Decoded slide XML

    Returns:
        Plain text with entities decoded
    """
    parts: List[str] = []
    pending: List[str] = []
    in_run = False

    pos = 0
    length = len(xml_text)

    while pos < length:
        if xml_text[pos] != "<":
            next_tag = xml_text.find("<", pos)
            if next_tag == -1:
                next_tag = length
            if in_run:
                pending.append(xml_text[pos:next_tag])
            pos = next_tag
            continue

        tag_end = xml_text.find(">", pos + 1)
        if tag_end == -1:
            # Unterminated tag at end of input
            break
        tag = xml_text[pos + 1:tag_end]
        pos = tag_end + 1

        if _is_text_run_open(tag):
            in_run = True
            pending = []
        elif tag == TEXT_RUN_CLOSE:
            if in_run and pending:
                parts.append("".join(pending))
                parts.append(" ")
            in_run = False
        elif tag in LINE_BREAK_TAGS:
            if parts and not parts[-1].endswith("\n"):
                parts.append("\n")

    return decode_xml_entities("".join(parts))


__all__ = [
    "decode_xml_entities",
    "scan_slide_xml",
]

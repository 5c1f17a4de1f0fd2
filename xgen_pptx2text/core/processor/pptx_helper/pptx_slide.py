"""
PPTX slide text collection

Reads the ordered slide parts one at a time, scans each for run text and
joins the non-blank results under slide markers:

    --- Slide 1 ---
    <slide text>

    --- Slide 2 ---
    ...

Marker numbers count emitted slides, so blank slides leave no gaps.
"""
import logging
from typing import List, Optional, Sequence

from xgen_pptx2text.core.errors import EntryReadError
from xgen_pptx2text.core.functions.page_tag_processor import SlideTagProcessor
from xgen_pptx2text.core.processor.pptx_helper.pptx_constants import SlideEntry
from xgen_pptx2text.core.processor.pptx_helper.pptx_file_converter import PptxArchive
from xgen_pptx2text.core.processor.pptx_helper.pptx_text_scanner import scan_slide_xml

logger = logging.getLogger("xgen_pptx2text.pptx.slide")


def read_slide_xml(archive: PptxArchive, entry: SlideEntry, encoding: str = "utf-8") -> str:
    """
    Read and decode one slide part.

    Raises:
        EntryReadError: Entry cannot be read or is not valid text
    """
    data = archive.read_entry(entry.name)
    try:
        return data.decode(encoding)
    except UnicodeDecodeError as e:
        raise EntryReadError(f"slide entry {entry.name} is not valid {encoding}: {e}", entry=entry.name) from e


def collect_slide_text(
    archive: PptxArchive,
    entries: Sequence[SlideEntry],
    slide_tag_processor: Optional[SlideTagProcessor] = None,
    encoding: str = "utf-8",
) -> str:
    """
    Build the slide-tagged text for an archive.

    Args:
        archive: Opened PPTX archive
        entries: Slide entries in output order
        slide_tag_processor: Marker formatter (default markers if None)
        encoding: Encoding of the slide XML parts

    Returns:
        Concatenated slide blocks, or "" when no slide has text

    Raises:
        EntryReadError: Any slide entry cannot be read or decoded
    """
    tagger = slide_tag_processor or SlideTagProcessor()
    blocks: List[str] = []

    for entry in entries:
        slide_text = scan_slide_xml(read_slide_xml(archive, entry, encoding))
        if not slide_text.strip():
            logger.debug("Skipping blank slide: %s", entry.name)
            continue
        blocks.append(f"{tagger.create_slide_tag(len(blocks) + 1)}\n{slide_text}\n\n")

    logger.debug("Collected text from %d of %d slides", len(blocks), len(entries))
    return "".join(blocks)


__all__ = [
    "collect_slide_text",
    "read_slide_xml",
]

# xgen_pptx2text/core/processor/pptx_helper/pptx_preprocessor.py
"""
PPTX Preprocessor - Select and order slide parts after conversion.

Processing Pipeline Position:
    1. PptxFileConverter.convert() -> PptxArchive
    2. PptxPreprocessor.preprocess() -> ordered SlideEntry list (THIS STEP)
    3. collect_slide_text() -> slide-tagged text

Ordering rules:
    - Only ppt/slides/slide*.xml parts take part (exact folder match).
    - Slides sort by the number in "slideN.xml", so slide2 precedes slide10.
    - A name whose number does not parse sorts as 0.
    - Equal keys keep the archive's enumeration order.
"""
import logging
from typing import Any, Dict, Iterable, List, Optional

from xgen_pptx2text.core.functions.preprocessor import (
    BasePreprocessor,
    PreprocessedData,
)
from xgen_pptx2text.core.processor.pptx_helper.pptx_constants import (
    SLIDE_FILE_PREFIX,
    SLIDE_FILE_SUFFIX,
    SLIDE_ORDINAL_PATTERN,
    SLIDE_PART_PATTERN,
    SlideEntry,
)

logger = logging.getLogger("xgen_pptx2text.pptx.preprocessor")


def is_slide_part(name: str) -> bool:
    """True for ppt/slides/slide*.xml entries (case-sensitive)."""
    return SLIDE_PART_PATTERN.fullmatch(name) is not None


def parse_slide_ordinal(name: str) -> Optional[int]:
    """
    Parse N from the final path segment "slideN.xml".

    Returns:
        The slide number, or None if the segment is not slide<digits>.xml
    """
    file_name = name.rsplit("/", 1)[-1]
    if not (file_name.startswith(SLIDE_FILE_PREFIX) and file_name.endswith(SLIDE_FILE_SUFFIX)):
        return None
    number = file_name[len(SLIDE_FILE_PREFIX):len(file_name) - len(SLIDE_FILE_SUFFIX)]
    if SLIDE_ORDINAL_PATTERN.fullmatch(number) is None:
        return None
    return int(number)


def select_slide_entries(names: Iterable[str]) -> List[SlideEntry]:
    """
    Filter entry names to slide parts and order them for output.

    Args:
        names: Archive entry names in enumeration order

    Returns:
        SlideEntry list sorted by (ordinal or 0, enumeration position)
    """
    entries = [
        SlideEntry(name=name, ordinal=parse_slide_ordinal(name), position=position)
        for position, name in enumerate(names)
        if is_slide_part(name)
    ]
    entries.sort(key=lambda e: e.sort_key)
    return entries


class PptxPreprocessor(BasePreprocessor):
    """
    PPTX archive preprocessor.

    clean_content is the ordered SlideEntry list; raw_content keeps the
    archive the entries came from.
    """

    def preprocess(
        self,
        converted_data: Any,
        **kwargs
    ) -> PreprocessedData:
        """
        Select slide parts from a PptxArchive.

        Args:
            converted_data: PptxArchive from PptxFileConverter
            **kwargs: Additional options

        Returns:
            PreprocessedData with the ordered slide entries
        """
        names = converted_data.names()
        entries = select_slide_entries(names)

        metadata: Dict[str, Any] = {
            'entry_count': len(names),
            'slide_count': len(entries),
            'unnumbered_slides': sum(1 for e in entries if e.ordinal is None),
        }
        logger.debug("PPTX preprocessor: metadata=%s", metadata)

        return PreprocessedData(
            raw_content=converted_data,
            clean_content=entries,  # TRUE SOURCE - ordered slide entries
            encoding="utf-8",
            metadata=metadata,
        )

    def get_format_name(self) -> str:
        return "PPTX Preprocessor"


__all__ = [
    'PptxPreprocessor',
    'is_slide_part',
    'parse_slide_ordinal',
    'select_slide_entries',
]

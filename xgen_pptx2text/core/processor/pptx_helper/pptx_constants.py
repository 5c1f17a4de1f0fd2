"""
PPTX constants and type definitions

Contents:
- Slide part naming inside the OOXML package
- DrawingML tags recognized by the text scanner
- XML entity table
- SlideEntry dataclass
"""
import re
from dataclasses import dataclass
from typing import Optional, Tuple

# === Slide part naming ===
# Slides live at ppt/slides/slideN.xml. Notes (ppt/notesSlides/) and layouts
# (ppt/slideLayouts/) share the "slide" fragment but sit in other folders.
SLIDE_DIR = "ppt/slides/"
SLIDE_FILE_PREFIX = "slide"
SLIDE_FILE_SUFFIX = ".xml"

SLIDE_PART_PATTERN = re.compile(
    re.escape(SLIDE_DIR + SLIDE_FILE_PREFIX) + r"[^/]*" + re.escape(SLIDE_FILE_SUFFIX)
)
SLIDE_ORDINAL_PATTERN = re.compile(r"[0-9]+")

# === DrawingML tags ===
TEXT_RUN_OPEN = "a:t"
TEXT_RUN_CLOSE = "/a:t"
LINE_BREAK_TAGS = frozenset(["/a:p", "a:br", "a:br/"])

# === XML entities (decoded in a single left-to-right pass) ===
XML_ENTITIES: Tuple[Tuple[str, str], ...] = (
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&apos;", "'"),
    ("&#39;", "'"),
)


@dataclass(frozen=True)
class SlideEntry:
    """
    A slide part selected from the archive.

    Attributes:
        name: Full entry name inside the archive
        ordinal: Number parsed from "slideN.xml", None when it does not parse
        position: Index in the archive's enumeration order
    """
    name: str
    ordinal: Optional[int]
    position: int = 0

    @property
    def sort_key(self) -> Tuple[int, int]:
        """Unparsed ordinals sort as 0; enumeration order breaks ties."""
        return (self.ordinal if self.ordinal is not None else 0, self.position)

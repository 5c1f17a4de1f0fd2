# xgen_pptx2text/core/functions/page_tag_processor.py
"""
Slide Tag Processor Module

Generates the slide markers that separate per-slide text in the
extracted output. The marker text is what a downstream language model sees,
so the default format is fixed:

    --- Slide 1 ---
    Title text
    Body text

    --- Slide 2 ---
    ...

=== Usage Examples ===

    from xgen_pptx2text.core.functions.page_tag_processor import SlideTagProcessor

    tagger = SlideTagProcessor()
    tagger.create_slide_tag(1)            # "--- Slide 1 ---"

    # Custom markers (e.g., for XML consumers)
    tagger = SlideTagProcessor(slide_prefix="<slide>", slide_suffix="</slide>")
"""
import logging
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger("xgen_pptx2text")


@dataclass
class SlideTagConfig:
    """
    SlideTagProcessor configuration.

    Attributes:
        slide_prefix: Text placed before the slide number
        slide_suffix: Text placed after the slide number
    """
    slide_prefix: str = "--- Slide "
    slide_suffix: str = " ---"


class SlideTagProcessor:
    """
    Slide Tag Processor Class

    Args:
        slide_prefix: Slide tag prefix (default: "--- Slide ")
        slide_suffix: Slide tag suffix (default: " ---")
        config: SlideTagConfig instance (overrides individual parameters)
    """

    def __init__(
        self,
        slide_prefix: Optional[str] = None,
        slide_suffix: Optional[str] = None,
        config: Optional[SlideTagConfig] = None
    ):
        if config is not None:
            self._config = config
        else:
            self._config = SlideTagConfig(
                slide_prefix=slide_prefix if slide_prefix is not None else SlideTagConfig.slide_prefix,
                slide_suffix=slide_suffix if slide_suffix is not None else SlideTagConfig.slide_suffix,
            )

    @property
    def config(self) -> SlideTagConfig:
        """Current configuration."""
        return self._config

    def create_slide_tag(self, slide_number: int) -> str:
        """
        Create a slide tag.

        Example:
            >>> SlideTagProcessor().create_slide_tag(3)
            '--- Slide 3 ---'
        """
        return f"{self._config.slide_prefix}{slide_number}{self._config.slide_suffix}"

    def __repr__(self) -> str:
        return (
            f"SlideTagProcessor(slide_prefix={self._config.slide_prefix!r}, "
            f"slide_suffix={self._config.slide_suffix!r})"
        )


__all__ = [
    "SlideTagConfig",
    "SlideTagProcessor",
]

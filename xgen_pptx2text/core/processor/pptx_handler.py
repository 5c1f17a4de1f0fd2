# xgen_pptx2text/core/processor/pptx_handler.py
"""
PPTX Handler - PPTX Document Processor

Class-based handler for PPTX files inheriting from BaseHandler. Runs the
CPU-bound part of a read: open the archive, select slides, scan their XML.
"""
import logging
from typing import TYPE_CHECKING

from xgen_pptx2text.core.processor.base_handler import BaseHandler
from xgen_pptx2text.core.processor.pptx_helper import collect_slide_text

if TYPE_CHECKING:
    from xgen_pptx2text.core.pptx_reader import CurrentFile

logger = logging.getLogger("xgen_pptx2text")


class PptxHandler(BaseHandler):
    """PPTX File Processing Handler Class"""

    def _create_file_converter(self):
        """Create PPTX-specific file converter."""
        from xgen_pptx2text.core.processor.pptx_helper.pptx_file_converter import PptxFileConverter
        return PptxFileConverter()

    def _create_preprocessor(self):
        """Create PPTX-specific preprocessor."""
        from xgen_pptx2text.core.processor.pptx_helper.pptx_preprocessor import PptxPreprocessor
        return PptxPreprocessor()

    def extract_text(self, current_file: "CurrentFile", **kwargs) -> str:
        """
        Extract slide text from a PPTX file.

        Args:
            current_file: CurrentFile dict containing file info and binary data
            **kwargs: Additional options

        Returns:
            Slide-tagged text, "" when no slide has text

        Raises:
            InvalidArchiveError: Data is not a readable ZIP container
            EntryReadError: A slide part cannot be read or decoded
        """
        file_path = current_file.get("file_path", "unknown")
        self.logger.debug(f"PPTX processing: {file_path}")

        # Step 1: Convert binary to PptxArchive using file_converter
        archive = self.convert_file(current_file)
        try:
            # Step 2: Preprocess - clean_content is the ordered slide list
            preprocessed = self.preprocess(archive)
            entries = preprocessed.clean_content

            # Step 3: Scan slides in order
            text = collect_slide_text(
                archive,
                entries,
                self.slide_tag_processor,
                encoding=preprocessed.encoding,
            )
        finally:
            self.file_converter.close(archive)

        self.logger.info(
            f"PPTX: {preprocessed.metadata.get('slide_count', 0)} slides, "
            f"{len(text)} chars extracted from {file_path}"
        )
        return text


__all__ = [
    "PptxHandler",
]

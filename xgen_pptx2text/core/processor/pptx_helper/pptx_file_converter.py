# xgen_pptx2text/core/processor/pptx_helper/pptx_file_converter.py
"""
PptxFileConverter - PPTX file format converter

Opens binary PPTX data as an in-memory ZIP container. Nothing is written to
disk and entry bodies are only decompressed on request, one at a time.
"""
import logging
import zipfile
import zlib
from io import BytesIO
from typing import Any, BinaryIO, List, Optional

from xgen_pptx2text.core.errors import EntryReadError, InvalidArchiveError
from xgen_pptx2text.core.functions.file_converter import BaseFileConverter

logger = logging.getLogger("xgen_pptx2text.pptx.converter")


class PptxArchive:
    """
    Read-only view over an opened PPTX ZIP container.

    Listing names reads only the central directory; read_entry()
    decompresses a single entry.
    """

    def __init__(self, zf: zipfile.ZipFile):
        self._zf = zf

    def names(self) -> List[str]:
        """All entry names in the archive's enumeration order."""
        return self._zf.namelist()

    def read_entry(self, name: str) -> bytes:
        """
        Decompress one entry.

        Raises:
            EntryReadError: Entry is missing, encrypted, corrupt or uses an
                unsupported compression method
        """
        try:
            return self._zf.read(name)
        except KeyError:
            raise EntryReadError(f"archive entry not found: {name}", entry=name)
        except (zipfile.BadZipFile, zlib.error, NotImplementedError, RuntimeError, ValueError, EOFError, OSError) as e:
            raise EntryReadError(f"failed to read archive entry {name}: {e}", entry=name)

    def close(self) -> None:
        self._zf.close()

    def __enter__(self) -> "PptxArchive":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __len__(self) -> int:
        return len(self._zf.infolist())

    def __repr__(self) -> str:
        return f"PptxArchive(entries={len(self)})"


class PptxFileConverter(BaseFileConverter):
    """
    PPTX file converter.

    Converts binary PPTX (ZIP format) data to a PptxArchive.
    """

    def convert(
        self,
        file_data: bytes,
        file_stream: Optional[BinaryIO] = None,
        **kwargs
    ) -> PptxArchive:
        """
        Open binary PPTX data as an archive.

        Args:
            file_data: Raw binary PPTX data
            file_stream: Optional file stream over the same data
            **kwargs: Additional options

        Returns:
            PptxArchive

        Raises:
            InvalidArchiveError: Data is not a readable ZIP container or
                needs a newer ZIP version than zipfile supports
        """
        stream = file_stream if file_stream is not None else BytesIO(file_data)
        stream.seek(0)
        try:
            zf = zipfile.ZipFile(stream, 'r')
        except (zipfile.BadZipFile, zipfile.LargeZipFile, NotImplementedError, ValueError, EOFError, OSError) as e:
            raise InvalidArchiveError(f"invalid Zip archive: {e}")
        logger.debug("Opened PPTX archive with %d entries", len(zf.infolist()))
        return PptxArchive(zf)

    def get_format_name(self) -> str:
        return "PPTX Presentation (ZIP/XML)"

    def close(self, converted_object: Any) -> None:
        """Close the archive."""
        if converted_object is not None and hasattr(converted_object, 'close'):
            converted_object.close()


__all__ = [
    'PptxArchive',
    'PptxFileConverter',
]

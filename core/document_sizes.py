from __future__ import annotations
from pathlib import Path
import threading
import logging

import fitz

from utils.geometry import Rotation, Size

logger = logging.getLogger(__name__)


class FitzPageSizes:
    """
    Page size lookup backed by a PyMuPDF document.

    Sizes come from the crop box, which PyMuPDF reports independently of
    the page's /Rotate entry, and are read on every lookup. Indexes outside
    ``0 <= page < page_count`` raise IndexError; PyMuPDF would otherwise
    count negative indexes back from the last page.
    """

    def __init__(self, document: fitz.Document, owns_document: bool = False):
        self._document = document
        self._owns_document = owns_document
        self._lock = threading.RLock()

    @classmethod
    def from_path(cls, file_path: Path) -> FitzPageSizes:
        """Open a PDF file and take ownership of the document."""
        document = fitz.open(str(file_path))
        logger.info(f"Opened document for page sizes: {file_path} ({document.page_count} pages)")
        return cls(document, owns_document=True)

    @property
    def page_count(self) -> int:
        return self._document.page_count

    def _load_page(self, page: int) -> fitz.Page:
        if not 0 <= page < self._document.page_count:
            raise IndexError(f"page {page} not in document ({self._document.page_count} pages)")
        return self._document[page]

    def page_size(self, page: int) -> Size:
        with self._lock:
            crop_box = self._load_page(page).cropbox
            return Size(crop_box.width, crop_box.height)

    def native_rotation(self, page: int) -> Rotation:
        """Rotation stored in the page's /Rotate entry."""
        with self._lock:
            return Rotation.from_degrees(self._load_page(page).rotation)

    def close(self) -> None:
        with self._lock:
            if self._owns_document and not self._document.is_closed:
                self._document.close()
                logger.info("Closed page size document")

    def __enter__(self) -> FitzPageSizes:
        return self

    def __exit__(self, exc_type, exc_value, exc_traceback) -> None:
        self.close()

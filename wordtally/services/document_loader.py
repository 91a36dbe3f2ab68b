"""Document loading service for PDF text extraction."""
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, Union

import fitz  # PyMuPDF

from ..config import SORT_TEXT_BLOCKS
from ..errors import (
    DOCUMENT_ENCRYPTED,
    DOCUMENT_UNREADABLE,
    PAGE_RANGE_INVALID,
    InputError,
    InputFileError,
)
from ..models.document import CropBox, Document, Page

logger = logging.getLogger(__name__)


class DocumentLoader:
    """Opens a PDF file and extracts the text of a range of pages."""
    
    def __init__(self, sort_blocks: bool = SORT_TEXT_BLOCKS):
        """
        Initialize DocumentLoader.
        
        Args:
            sort_blocks: Re-sort text blocks top-to-bottom, left-to-right
        """
        self.sort_blocks = sort_blocks
    
    @contextmanager
    def open_document(
        self,
        filepath: Union[str, Path],
        start_page: Optional[int] = None,
        pages_count: Optional[int] = None,
        crop: Optional[CropBox] = None
    ) -> Iterator[Document]:
        """
        Open a PDF file for page-by-page text extraction.

        The file, its encryption and the page range are checked on entry.
        The document stays open until the block exits, and each page's
        text is extracted only when iteration over `Document.pages` reaches it.

        Args:
            filepath: Path to the PDF file
            start_page: First page, 0-indexed (defaults to the first page)
            pages_count: Number of pages (defaults to the rest of the document)
            crop: Page region to read (defaults to the whole page)

        Yields:
            Document whose pages are produced lazily

        Raises:
            InputFileError: If the file cannot be opened, is encrypted, or
                the page range is outside the document
        """
        path = Path(filepath).expanduser()
        
        try:
            pdf_document = fitz.open(str(path))
        except Exception as e:
            raise InputFileError(InputError(
                code=DOCUMENT_UNREADABLE,
                message=f"Failed to load document {path}",
                details={"path": str(path), "reason": str(e)}
            )) from e
        
        try:
            if pdf_document.needs_pass:
                raise InputFileError(InputError(
                    code=DOCUMENT_ENCRYPTED,
                    message=f"Encrypted document {path}",
                    details={"path": str(path)}
                ))
            
            total_pages = pdf_document.page_count
            if total_pages == 0:
                raise InputFileError(InputError(
                    code=DOCUMENT_UNREADABLE,
                    message=f"Document {path} has no pages",
                    details={"path": str(path)}
                ))

            start, end = self._page_range(total_pages, start_page, pages_count)
            logger.info(f"Opened {path.name}: {total_pages} pages, reading {start + 1}-{end}")
            
            yield Document(
                filename=path.name,
                pages=self._iter_pages(pdf_document, start, end, crop),
                total_pages=total_pages
            )
        finally:
            pdf_document.close()

    def _iter_pages(self, pdf_document, start: int, end: int, crop: Optional[CropBox]) -> Iterator[Page]:
        """Extract the text of pages [start, end) one page at a time."""
        for page_num in range(start, end):
            page = pdf_document[page_num]
            text = page.get_text("text", clip=self._clip_rect(page.rect, crop), sort=self.sort_blocks)
            yield Page(
                page_number=page_num + 1,  # 1-indexed
                text=text
            )

    @staticmethod
    def _page_range(total_pages: int, start_page: Optional[int], pages_count: Optional[int]):
        """Resolve the requested range to [start, end) page indices."""
        start = 0 if start_page is None else start_page
        count = total_pages - start if pages_count is None else pages_count
        
        if start < 0 or start >= total_pages or count <= 0:
            raise InputFileError(InputError(
                code=PAGE_RANGE_INVALID,
                message=f"Page range start={start} count={count} is outside a {total_pages}-page document",
                details={"start_page": start, "pages_count": count, "total_pages": total_pages}
            ))
        
        end = start + count
        if end > total_pages:
            logger.warning(f"Page range ends past the last page, stopping at page {total_pages}")
            end = total_pages
        return start, end
    
    @staticmethod
    def _clip_rect(page_rect: fitz.Rect, crop: Optional[CropBox]) -> Optional[fitz.Rect]:
        """Build the clip rectangle; each missing crop field falls back to the page's own value."""
        if crop is None or crop.is_empty():
            return None
        
        x = page_rect.x0 if crop.x is None else crop.x
        y = page_rect.y0 if crop.y is None else crop.y
        width = page_rect.width if crop.width is None else crop.width
        height = page_rect.height if crop.height is None else crop.height
        return fitz.Rect(x, y, x + width, y + height)

"""Document data models."""
from dataclasses import dataclass
from typing import Iterable, Optional

@dataclass
class Page:
    """Text extracted from a single page."""
    page_number: int  # 1-indexed
    text: str

@dataclass
class Document:
    """Represents a loaded PDF document."""
    filename: str
    pages: Iterable[Page]  # produced lazily while the file is open
    total_pages: int

@dataclass
class CropBox:
    """Region of a page to extract text from; unset fields fall back to the page rectangle."""
    x: Optional[float] = None
    y: Optional[float] = None
    width: Optional[float] = None
    height: Optional[float] = None
    
    def is_empty(self) -> bool:
        return all(v is None for v in (self.x, self.y, self.width, self.height))

"""Error types raised by the wordtally loaders."""
from dataclasses import dataclass, field
from typing import Any, Dict

# Error codes
DOCUMENT_UNREADABLE = "document_unreadable"
DOCUMENT_ENCRYPTED = "document_encrypted"
PAGE_RANGE_INVALID = "page_range_invalid"
FILTER_UNREADABLE = "filter_unreadable"
MERGE_UNREADABLE = "merge_unreadable"
DUMP_UNWRITABLE = "dump_unwritable"


@dataclass
class InputError:
    """Structured description of a fatal input problem."""
    code: str
    message: str
    details: Dict[str, Any] = field(default_factory=dict)


class InputFileError(Exception):
    """Raised when a document, word list or output file cannot be used."""
    
    def __init__(self, error: InputError):
        self.error = error
        super().__init__(error.message)
    
    @property
    def code(self) -> str:
        return self.error.code

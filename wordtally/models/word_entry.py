"""Word count data models."""
from dataclasses import dataclass, field
from typing import Dict, Optional

@dataclass
class WordEntry:
    """One row of the frequency report."""
    word: str
    count: int
    annotation: Optional[str] = None

@dataclass
class MergeTable:
    """Counts and annotations loaded from a previous report."""
    counts: Dict[str, int] = field(default_factory=dict)
    annotations: Dict[str, str] = field(default_factory=dict)
    
    def __len__(self) -> int:
        return len(self.counts)

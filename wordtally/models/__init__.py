"""Data models for wordtally."""
from .document import CropBox, Document, Page
from .word_entry import MergeTable, WordEntry

__all__ = [
    "CropBox",
    "Document",
    "Page",
    "MergeTable",
    "WordEntry",
]

"""Loaders for the exclusion list and merge files."""
import logging
import re
from pathlib import Path
from typing import FrozenSet, List, Optional, Union

from ..config import TEXT_ENCODING
from ..errors import FILTER_UNREADABLE, MERGE_UNREADABLE, InputError, InputFileError
from ..models.word_entry import MergeTable
from .word_counter import normalize_word

logger = logging.getLogger(__name__)

# <word> <count> [<annotation>]
MERGE_LINE_PATTERN = re.compile(r"(\S+)\s+(\d+)(?:\s+(.*))?")

PathLike = Union[str, Path]


def load_filter(path: Optional[PathLike]) -> FrozenSet[str]:
    """
    Load the exclusion list, one word per line.
    
    Entries are normalized the same way scanned words are, so the file
    does not have to be lowercase. Blank lines are ignored.
    
    Args:
        path: Filter file, or None for an empty list
        
    Returns:
        Normalized words to exclude
        
    Raises:
        InputFileError: If the file cannot be read
    """
    if path is None:
        return frozenset()
    
    lines = _read_lines(path, FILTER_UNREADABLE, "filter")
    words = frozenset(normalize_word(line.strip()) for line in lines if line.strip())
    
    logger.info(f"Loaded {len(words)} excluded words from {path}")
    return words


def load_merge(path: Optional[PathLike], keep_count: bool = False) -> MergeTable:
    """
    Load a previous report to merge with this run.
    
    Every line is "<word> <count> <annotation>"; the annotation may be
    missing. Lines that do not fit are skipped with a warning.
    
    Args:
        path: Merge file, or None for an empty table
        keep_count: Keep the stored counts instead of resetting them to 0
        
    Returns:
        MergeTable with counts and annotations
        
    Raises:
        InputFileError: If the file cannot be read
    """
    table = MergeTable()
    if path is None:
        return table
    
    lines = _read_lines(path, MERGE_UNREADABLE, "merge")
    skipped = 0
    
    for line_number, line in enumerate(lines, start=1):
        stripped = line.strip()
        if not stripped:
            continue
        
        match = MERGE_LINE_PATTERN.fullmatch(stripped)
        if not match:
            logger.warning(f"Skipping malformed line {line_number} in merge file {path}: {stripped!r}")
            skipped += 1
            continue
        
        word = normalize_word(match.group(1))
        table.counts[word] = int(match.group(2)) if keep_count else 0
        
        annotation = match.group(3)
        if annotation:
            table.annotations[word] = annotation
        else:
            table.annotations.pop(word, None)
    
    logger.info(
        f"Loaded {len(table)} words from merge file {path} "
        f"(keep_count={keep_count}, skipped={skipped})"
    )
    return table


def _read_lines(path: PathLike, code: str, kind: str) -> List[str]:
    """Read a whole text file, turning I/O and decoding failures into InputFileError."""
    try:
        with open(Path(path).expanduser(), "r", encoding=TEXT_ENCODING) as f:
            return f.read().split("\n")
    except (OSError, UnicodeDecodeError) as e:
        raise InputFileError(InputError(
            code=code,
            message=f"Failed to open {kind} file {path}",
            details={"path": str(path), "reason": str(e)}
        )) from e

"""Frequency report building and output."""
import sys
from typing import Iterable, List, Mapping, Optional, TextIO

from ..config import REPORT_COUNT_WIDTH, REPORT_WORD_WIDTH
from ..models.word_entry import WordEntry


def build_report(counts: Mapping[str, int], annotations: Mapping[str, str]) -> List[WordEntry]:
    """
    Order the aggregation table by count, highest first.
    
    Words with the same count are listed alphabetically.
    
    Args:
        counts: Normalized word to count
        annotations: Normalized word to annotation text
        
    Returns:
        Report rows
    """
    ordered = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return [WordEntry(word=word, count=count, annotation=annotations.get(word)) for word, count in ordered]


def format_entry(
    entry: WordEntry,
    word_width: int = REPORT_WORD_WIDTH,
    count_width: int = REPORT_COUNT_WIDTH
) -> str:
    """Format a report row; the result can be read back as a merge file line."""
    line = f"{entry.word:<{word_width}} {entry.count:<{count_width}}"
    if entry.annotation:
        line = f"{line} {entry.annotation}"
    return line.rstrip()


def write_report(entries: Iterable[WordEntry], stream: Optional[TextIO] = None) -> int:
    """
    Write report rows, one per line.
    
    Args:
        entries: Rows to write
        stream: Destination (defaults to stdout)
        
    Returns:
        Number of rows written
    """
    stream = stream or sys.stdout
    written = 0
    for entry in entries:
        stream.write(format_entry(entry))
        stream.write("\n")
        written += 1
    return written

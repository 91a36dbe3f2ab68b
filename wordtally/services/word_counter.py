"""Word normalization, filtering and the aggregation table."""
import logging
from collections import Counter
from typing import AbstractSet, Iterable, List, Mapping, Optional, TextIO

from ..config import MIN_WORD_LENGTH
from ..models.document import Page
from ..models.word_entry import WordEntry
from .char_classes import is_roman_numeral
from .report_writer import build_report
from .word_scanner import WordScanner

logger = logging.getLogger(__name__)


def normalize_word(word: str) -> str:
    """
    Lowercase a word one code point at a time.
    
    Characters whose lowercase form is longer than one code point are kept
    as they are, so the result always has the same length as the input and
    normalizing twice changes nothing.
    """
    return "".join(_lower_char(ch) for ch in word)


def _lower_char(ch: str) -> str:
    lowered = ch.lower()
    return lowered if len(lowered) == 1 else ch


class WordCounter:
    """Counts the words of a document, optionally on top of a previous report."""
    
    def __init__(
        self,
        exclusions: AbstractSet[str] = frozenset(),
        initial_counts: Optional[Mapping[str, int]] = None,
        annotations: Optional[Mapping[str, str]] = None,
        min_word_length: int = MIN_WORD_LENGTH
    ):
        """
        Initialize WordCounter.
        
        Args:
            exclusions: Normalized words that are never counted
            initial_counts: Seed counts, usually from a merge file
            annotations: Per-word notes shown next to the count in the report
            min_word_length: Tokens shorter than this are discarded
        """
        self.exclusions = frozenset(exclusions)
        self.word_count: Counter = Counter(initial_counts or {})
        self.annotations = dict(annotations or {})
        self.min_word_length = min_word_length
        self.scanner = WordScanner()
    
    def collect_word_if_suitable(self, word: str) -> bool:
        """
        Count a raw token unless it is too short, excluded or a Roman numeral.
        
        Args:
            word: Token as produced by the scanner
            
        Returns:
            True if the token was counted
        """
        if len(word) < self.min_word_length:
            return False
        
        lowered = normalize_word(word)
        if lowered in self.exclusions or is_roman_numeral(lowered):
            return False
        
        self.word_count[lowered] += 1
        return True
    
    def count_text(self, text: str) -> int:
        """
        Count the words of one page of text.
        
        Returns:
            Number of tokens that were counted
        """
        counted = 0
        for token in self.scanner.scan(text):
            if self.collect_word_if_suitable(token):
                counted += 1
        return counted
    
    def count_pages(self, pages: Iterable[Page], text_sink: Optional[TextIO] = None) -> int:
        """
        Count the words of every page, in order.
        
        Args:
            pages: Pages with extracted text
            text_sink: If given, each page's text is written here verbatim
            
        Returns:
            Number of tokens counted across all pages
        """
        total = 0
        for page in pages:
            if text_sink is not None:
                text_sink.write(page.text)
                text_sink.write("\n")
            
            counted = self.count_text(page.text)
            logger.debug(f"Page {page.page_number}: counted {counted} words")
            total += counted
        
        logger.info(f"Counted {total} words, {len(self.word_count)} distinct")
        return total
    
    def report(self) -> List[WordEntry]:
        """Return the table ordered by count, most frequent first."""
        return build_report(self.word_count, self.annotations)

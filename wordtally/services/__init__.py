"""Services for wordtally."""
from .char_classes import is_apostrophe, is_hyphen, is_letter, is_roman_numeral
from .word_scanner import ScanState, WordScanner, split_words
from .word_counter import WordCounter, normalize_word
from .word_lists import load_filter, load_merge
from .report_writer import build_report, format_entry, write_report
from .document_loader import DocumentLoader

__all__ = ['is_apostrophe', 'is_hyphen', 'is_letter', 'is_roman_numeral', 'ScanState', 'WordScanner', 'split_words', 'WordCounter', 'normalize_word', 'load_filter', 'load_merge', 'build_report', 'format_entry', 'write_report', 'DocumentLoader']

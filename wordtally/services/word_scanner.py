"""
Word boundary scanner.

Turns the text of a page into word tokens in a single pass. Hyphens and
apostrophes seen after a letter are held back for one character: a letter
next makes them part of the word, a newline after a hyphen marks a
line-wrap hyphenation (the hyphen is dropped and the word continues on the
next line), anything else ends the word without them.
"""
from dataclasses import dataclass
import logging
from typing import Iterable, Iterator, List, Optional

from .char_classes import APOSTROPHE, HYPHEN, is_apostrophe, is_hyphen, is_letter

logger = logging.getLogger(__name__)


@dataclass
class ScanState:
    """
    Scanner flags. All False is the blank state.
    
    Attributes:
        in_word: At least one letter is in the buffer
        pending_hyphen: A hyphen followed the last letter, undecided
        pending_apostrophe: An apostrophe followed the last letter, undecided
    """
    in_word: bool = False
    pending_hyphen: bool = False
    pending_apostrophe: bool = False
    
    def reset(self) -> None:
        self.in_word = False
        self.pending_hyphen = False
        self.pending_apostrophe = False
    
    @property
    def is_blank(self) -> bool:
        return not (self.in_word or self.pending_hyphen or self.pending_apostrophe)
    
    @property
    def has_pending(self) -> bool:
        return self.pending_hyphen or self.pending_apostrophe


class WordScanner:
    """Stateful scanner that emits word tokens from a stream of characters."""
    
    def __init__(self):
        self.state = ScanState()
        self._buffer: List[str] = []
    
    def reset(self) -> None:
        """Drop the current buffer and return to the blank state."""
        self.state.reset()
        self._buffer.clear()
    
    def scan(self, text: Iterable[str]) -> Iterator[str]:
        """
        Scan the text of one page.
        
        The scanner is reset before the first character, so nothing carries
        over from a previous page.
        
        Args:
            text: Page text, or any iterable of single characters
            
        Yields:
            Word tokens in reading order, with their original case
        """
        self.reset()
        for ch in text:
            token = self.feed(ch)
            if token is not None:
                yield token
        token = self.finish()
        if token is not None:
            yield token
    
    def feed(self, ch: str) -> Optional[str]:
        """
        Process one character.
        
        Returns:
            A completed token if this character ended a word, else None
        """
        state = self.state
        
        if is_letter(ch):
            state.in_word = True
            if state.pending_hyphen:
                # structural hyphen, as in "well-known"
                self._buffer.append(HYPHEN)
                state.pending_hyphen = False
            if state.pending_apostrophe:
                # structural apostrophe, as in "don't"
                self._buffer.append(APOSTROPHE)
                state.pending_apostrophe = False
            self._buffer.append(ch)
        elif is_hyphen(ch) and state.in_word:
            state.pending_hyphen = True
        elif is_apostrophe(ch) and state.in_word:
            state.pending_apostrophe = True
        elif ch == "\n" and state.pending_hyphen:
            # line-wrap hyphenation, the word goes on after the newline
            state.pending_hyphen = False
        elif state.in_word:
            # space, digit, punctuation or control-character garbage
            # from the text extractor
            return self._take_token()
        return None
    
    def finish(self) -> Optional[str]:
        """
        Close the page.
        
        A word still waiting on a hyphen or apostrophe is dropped.
        
        Returns:
            The last token of the page, if it is complete
        """
        token = None
        if self.state.in_word and not self.state.has_pending:
            token = self._take_token()
        elif self._buffer:
            logger.debug(f"Dropping dangling word at end of page: {''.join(self._buffer)!r}")
        self.reset()
        return token
    
    def _take_token(self) -> str:
        token = "".join(self._buffer)
        self.reset()
        return token


def split_words(text: Iterable[str]) -> List[str]:
    """Return every raw token of a single page of text."""
    return list(WordScanner().scan(text))

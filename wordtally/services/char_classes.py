"""
Character classification for the word scanner.

Every predicate looks at a single code point, except is_roman_numeral which
checks an already lowercased word.
"""
import re

HYPHEN = "-"
APOSTROPHE = "'"
RIGHT_SINGLE_QUOTATION_MARK = "’"

ROMAN_NUMERAL_PATTERN = re.compile(
    r"m{0,4}(cm|cd|d?c{0,3})(xc|xl|l?x{0,3})(ix|iv|v?i{0,3})"
)


def is_letter(ch: str) -> bool:
    """True for any code point Unicode classifies as alphabetic."""
    return ch.isalpha()


def is_hyphen(ch: str) -> bool:
    return ch == HYPHEN


def is_apostrophe(ch: str) -> bool:
    """Both the ASCII apostrophe and the typographic one count."""
    return ch == APOSTROPHE or ch == RIGHT_SINGLE_QUOTATION_MARK


def is_roman_numeral(word: str) -> bool:
    """
    Check whether a lowercased word is a Roman numeral (up to mmmmcmxcix).
    
    The grammar also accepts some real words made only of m, c, d, x, l,
    v and i, such as "mix". Those are filtered out too.
    
    Args:
        word: Normalized (lowercase) word
        
    Returns:
        True if the whole word matches the numeral grammar
    """
    if not word:
        return False
    return ROMAN_NUMERAL_PATTERN.fullmatch(word) is not None

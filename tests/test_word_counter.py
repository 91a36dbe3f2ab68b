"""Unit tests for WordCounter and word normalization."""
import io

import pytest

from wordtally.models.document import Page
from wordtally.models.word_entry import WordEntry
from wordtally.services.word_counter import WordCounter, normalize_word


class TestNormalizeWord:
    """Test suite for normalize_word."""
    
    def test_lowercases(self):
        """Test plain lowercasing."""
        assert normalize_word("Well-Known") == "well-known"
        assert normalize_word("ÉCOLE") == "école"
    
    def test_idempotent(self):
        """Test that normalizing twice gives the same result."""
        for word in ["Apple", "DON'T", "İstanbul", "ΣΟΦΙΑ"]:
            once = normalize_word(word)
            assert normalize_word(once) == once
    
    def test_keeps_length(self):
        """Test that characters with multi-character lowercase forms are left alone."""
        assert len(normalize_word("İstanbul")) == len("İstanbul")


class TestWordCounter:
    """Test suite for WordCounter."""
    
    @pytest.fixture
    def counter(self):
        """Create a WordCounter with a small exclusion list."""
        return WordCounter(exclusions=frozenset({"common", "the"}))
    
    def test_short_words_discarded(self, counter):
        """Test that tokens of two characters or fewer are never counted."""
        assert counter.collect_word_if_suitable("an") is False
        assert counter.collect_word_if_suitable("a") is False
        assert counter.collect_word_if_suitable("ant") is True
        assert dict(counter.word_count) == {"ant": 1}
    
    def test_case_folding(self, counter):
        """Test that 'Word' and 'word' share one entry."""
        counter.count_text("Word word")
        assert counter.word_count["word"] == 2
        assert "Word" not in counter.word_count
    
    def test_exclusion_filter(self, counter):
        """Test that excluded words are never counted, whatever their case."""
        counter.count_text("common Common COMMON uncommon")
        assert "common" not in counter.word_count
        assert counter.word_count["uncommon"] == 1
    
    def test_roman_numerals_excluded(self, counter):
        """Test that numerals and numeral-shaped words are dropped."""
        counter.count_text("Chapter XIV iii mcm mix mixer")
        assert set(counter.word_count) == {"chapter", "mixer"}
    
    def test_count_text_returns_counted_tokens(self, counter):
        """Test the number of tokens actually counted."""
        assert counter.count_text("the well-known fox isn't on it") == 3
        assert set(counter.word_count) == {"well-known", "fox", "isn't"}
    
    def test_seeded_counts_kept(self):
        """Test that counts from a merge file are incremented."""
        counter = WordCounter(initial_counts={"apple": 5})
        counter.count_text("apple")
        assert counter.word_count["apple"] == 6
    
    def test_seeded_counts_reset(self):
        """Test the reset-to-zero merge mode."""
        counter = WordCounter(initial_counts={"apple": 0})
        counter.count_text("apple")
        assert counter.word_count["apple"] == 1
    
    def test_exclusions_are_immutable(self):
        """Test that the exclusion set cannot be changed mid-scan."""
        words = {"skip"}
        counter = WordCounter(exclusions=words)
        words.add("later")
        assert isinstance(counter.exclusions, frozenset)
        assert "later" not in counter.exclusions


class TestCountPages:
    """Test suite for multi-page counting and reporting."""
    
    def test_pages_counted_in_order(self):
        """Test that every page contributes to one table."""
        counter = WordCounter()
        pages = [Page(page_number=1, text="alpha beta\n"), Page(page_number=2, text="beta gamma\n")]
        
        total = counter.count_pages(pages)
        
        assert total == 4
        assert counter.word_count == {"alpha": 1, "beta": 2, "gamma": 1}
    
    def test_word_does_not_span_pages(self):
        """Test that a hyphen at a page end drops the word instead of joining pages."""
        counter = WordCounter()
        counter.count_pages([Page(1, "intro hyphen-"), Page(2, "ated words")])
        assert set(counter.word_count) == {"intro", "ated", "words"}
    
    def test_text_sink_receives_raw_text(self):
        """Test that page text is dumped verbatim, one page after another."""
        counter = WordCounter()
        sink = io.StringIO()
        counter.count_pages([Page(1, "First page"), Page(2, "Second page")], text_sink=sink)
        assert sink.getvalue() == "First page\nSecond page\n"
    
    def test_report_includes_annotations_and_seeds(self):
        """Test the report built from counts, seeds and annotations."""
        counter = WordCounter(
            initial_counts={"apple": 5, "unused": 0},
            annotations={"apple": "a fruit"}
        )
        counter.count_text("apple pear pear")
        
        assert counter.report() == [
            WordEntry(word="apple", count=6, annotation="a fruit"),
            WordEntry(word="pear", count=2),
            WordEntry(word="unused", count=0),
        ]

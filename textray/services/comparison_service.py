"""
Comparison service module for TextRay.

This module coordinates tokenization, frequency counting and similarity
accounting to compare two texts, and derives the statistics and highlight
positions that presentation layers display. Every function is pure: each
call builds its own frequency maps and returns a fresh result.
"""
import logging
from typing import AbstractSet, List, Optional

from ..models.comparison import ComparisonResult, ComparisonStats, TextCoverage, WordSpan
from ..utils.similarity import calculate_jaccard_percentage, calculate_multiset_overlap
from ..utils.stopwords import STOP_WORDS
from ..utils.text_processing import (
    build_frequency_map,
    count_words,
    iter_token_spans,
    tokenize_text
)

# Setup logging
logger = logging.getLogger(__name__)


def compare_texts(text1: Optional[str], text2: Optional[str]) -> ComparisonResult:
    """
    Compare two texts and find the words they share.

    Identical strings short-circuit to a similarity of 100, even when they
    contain no countable words. Otherwise similarity is the multiset Jaccard
    coefficient over non-stop-word tokens.

    Args:
        text1: First text
        text2: Second text

    Returns:
        ComparisonResult: Shared words, similarity percentage and word count
    """
    if text1 == text2:
        common_words = {word for word in tokenize_text(text1) if word not in STOP_WORDS}
        logger.debug(f"Identical texts, {len(common_words)} distinct non-stop words")
        return ComparisonResult(
            common_words=common_words,
            similarity=100,
            count=len(common_words)
        )

    freq1 = build_frequency_map(tokenize_text(text1))
    freq2 = build_frequency_map(tokenize_text(text2))
    logger.debug(f"Comparing texts with {len(freq1)} and {len(freq2)} distinct tokens")

    common_words, intersection, union = calculate_multiset_overlap(freq1, freq2)
    similarity = calculate_jaccard_percentage(intersection, union)

    return ComparisonResult(
        common_words=common_words,
        similarity=similarity,
        count=len(common_words)
    )


def find_common_word_spans(text: Optional[str], common_words: AbstractSet[str]) -> List[WordSpan]:
    """
    Locate every occurrence of the common words in a text.

    Args:
        text: Text to scan
        common_words: Lower-cased words to look for, usually
            ComparisonResult.common_words

    Returns:
        List[WordSpan]: Character spans in text order
    """
    if not common_words:
        return []

    return [
        WordSpan(start=start, end=end, word=word)
        for start, end, word in iter_token_spans(text)
        if word in common_words
    ]


def compute_text_coverage(text: Optional[str], common_words: AbstractSet[str]) -> TextCoverage:
    """
    Count how many words of a text are common words.

    A whitespace-separated word counts as common when any token inside it
    is a common word, so ``"hello,"`` matches ``"hello"``.

    Args:
        text: Text to measure
        common_words: Lower-cased common words

    Returns:
        TextCoverage: Word count, common word count and match percentage
    """
    if not text or not text.strip():
        return TextCoverage()

    chunks = text.split()
    common_count = sum(
        1 for chunk in chunks
        if any(token in common_words for token in tokenize_text(chunk))
    )
    # Tenths of a percent, halves rounded up
    percentage = (2000 * common_count + len(chunks)) // (2 * len(chunks)) / 10

    return TextCoverage(
        word_count=len(chunks),
        common_word_count=common_count,
        match_percentage=percentage
    )


def compute_comparison_stats(text1: Optional[str], text2: Optional[str]) -> ComparisonStats:
    """Summarize a comparison for display.

    Args:
        text1: First text
        text2: Second text

    Returns:
        ComparisonStats: Word counts per text, common and unique counts and similarity
    """
    result = compare_texts(text1, text2)
    text1_words = count_words(text1)
    text2_words = count_words(text2)

    return ComparisonStats(
        text1_words=text1_words,
        text2_words=text2_words,
        common_count=result.count,
        unique_words1=max(text1_words - result.count, 0),
        unique_words2=max(text2_words - result.count, 0),
        similarity=result.similarity
    )

"""
Similarity calculation utilities for the TextRay comparison core.

This module provides the multiset Jaccard accounting used to score two
texts. Stop words are excluded from both the intersection and the union,
so two unrelated English passages do not look similar just because they
share "the" and "and".
"""
import logging
from typing import Mapping, Set, Tuple

from .stopwords import STOP_WORDS

# Setup logging
logger = logging.getLogger(__name__)


def calculate_multiset_overlap(
    freq1: Mapping[str, int],
    freq2: Mapping[str, int]
) -> Tuple[Set[str], int, int]:
    """
    Calculate the shared tokens and multiset intersection/union sizes.

    For each token outside the stop-word table, the intersection grows by
    the smaller of its two counts and the union by the larger. Tokens that
    only occur in one text contribute their full count to the union.

    Args:
        freq1: Token frequencies of the first text
        freq2: Token frequencies of the second text

    Returns:
        Tuple[Set[str], int, int]: shared non-stop tokens, intersection size,
        union size
    """
    common_words: Set[str] = set()
    intersection = 0
    union = 0

    for word, count1 in freq1.items():
        if word in STOP_WORDS:
            continue
        count2 = freq2.get(word, 0)
        intersection += min(count1, count2)
        union += max(count1, count2)
        if count2 > 0:
            common_words.add(word)

    # Tokens unique to the second text
    for word, count2 in freq2.items():
        if word not in STOP_WORDS and word not in freq1:
            union += count2

    logger.debug(
        f"Multiset overlap: {len(common_words)} shared tokens, "
        f"intersection={intersection}, union={union}"
    )
    return common_words, intersection, union


def calculate_jaccard_percentage(intersection: int, union: int) -> int:
    """
    Convert multiset intersection and union sizes into a whole percentage.

    Halves round up (12.5 -> 13), unlike Python's built-in round.

    Args:
        intersection: Multiset intersection size
        union: Multiset union size

    Returns:
        int: Similarity in the range [0, 100], 0 when the union is empty
    """
    if union <= 0:
        return 0
    # Integer half-up rounding of 100 * intersection / union
    return (200 * intersection + union) // (2 * union)

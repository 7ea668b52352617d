"""
Stop-word table for the TextRay comparison core.

Common English function words that are ignored when collecting common words
and when computing similarity.
"""
from typing import FrozenSet

STOP_WORDS: FrozenSet[str] = frozenset([
    'a', 'an', 'and', 'are', 'as', 'at', 'be', 'by', 'for', 'from',
    'has', 'he', 'in', 'is', 'it', 'its', 'of', 'on', 'that', 'the',
    'to', 'was', 'were', 'will', 'with', 'this', 'but', 'they',
    'have', 'had', 'what', 'when', 'where', 'who', 'which', 'why', 'how'
])


def is_stop_word(word: str) -> bool:
    """
    Check whether a word is a stop word, ignoring case.

    Args:
        word: Word to check

    Returns:
        bool: True if the lower-cased word is in the stop-word table
    """
    if not word:
        return False
    return word.lower() in STOP_WORDS

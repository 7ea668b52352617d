"""
Text processing utilities for the TextRay comparison core.

This module provides the tokenizer used by every comparison, together with
frequency counting and whitespace word counting. Tokens are maximal runs of
word characters (Unicode letters, digits and underscore) together with any
combining marks attached to them, lower-cased. Hyphens and other
punctuation split tokens, underscores do not, and tokens made only of ASCII
digits are dropped.
"""
import re
import logging
import unicodedata
from collections import Counter
from typing import Iterable, Iterator, List, Optional, Tuple

# Setup logging
logger = logging.getLogger(__name__)

# \w does not cover combining marks (Mn/Mc/Me), so non-word characters are
# matched one at a time and marks are glued onto the adjacent word run.
_SEGMENT_PATTERN = re.compile(r'(?P<word>\w+)|(?P<other>[^\w\s])')
_NUMERIC_PATTERN = re.compile(r'[0-9]+')


def _is_combining_mark(char: str) -> bool:
    return unicodedata.category(char).startswith('M')


def iter_token_spans(text: Optional[str]) -> Iterator[Tuple[int, int, str]]:
    """
    Yield the position and normalized form of every token in a text.

    Tokens are located in the original text before lower-casing so that the
    offsets always index into ``text``. A combining mark directly after a
    word character belongs to the token, so Devanagari vowel signs and
    decomposed accents (``"cafe\\u0301"``) do not split a word.

    Args:
        text: Text to scan

    Yields:
        Tuple[int, int, str]: start offset, end offset and lower-cased token
    """
    if not text:
        return

    start = end = None
    for match in _SEGMENT_PATTERN.finditer(text):
        contiguous = start is not None and match.start() == end
        if match.lastgroup == 'word' and contiguous:
            end = match.end()
            continue
        if match.lastgroup == 'other' and contiguous and _is_combining_mark(match.group()):
            end = match.end()
            continue

        if start is not None:
            raw = text[start:end]
            if not _NUMERIC_PATTERN.fullmatch(raw):
                yield start, end, raw.lower()
        if match.lastgroup == 'word':
            start, end = match.start(), match.end()
        else:
            start = end = None

    if start is not None:
        raw = text[start:end]
        if not _NUMERIC_PATTERN.fullmatch(raw):
            yield start, end, raw.lower()


def tokenize_text(text: Optional[str]) -> List[str]:
    """
    Split text into lower-cased word tokens.

    Any run of whitespace or punctuation separates tokens, so
    ``"hello-world"`` gives ``["hello", "world"]`` while ``"test_case"``
    stays a single token. Purely numeric tokens such as ``"123"`` are
    discarded; mixed tokens such as ``"world2"`` are kept.

    Args:
        text: Text string to tokenize

    Returns:
        List[str]: Tokens in the order they appear
    """
    return [token for _, _, token in iter_token_spans(text)]


def build_frequency_map(tokens: Iterable[str]) -> Counter:
    """
    Count occurrences of each token.

    Every occurrence is counted, including stop words and duplicates.

    Args:
        tokens: Tokens produced by tokenize_text

    Returns:
        Counter: Mapping of token to occurrence count
    """
    return Counter(tokens)


def count_words(text: Optional[str]) -> int:
    """
    Count whitespace-separated words in a text.

    This is the raw word count shown next to each text; unlike
    tokenize_text it does not split on punctuation or drop numbers.

    Args:
        text: Text string to count

    Returns:
        int: Number of whitespace-separated chunks, 0 for blank text
    """
    if not text:
        return 0
    return len(text.split())

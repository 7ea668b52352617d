"""
TextRay comparison core.

Finds the words two texts have in common and scores their similarity.
"""
from .models.comparison import ComparisonResult, ComparisonStats, TextCoverage, WordSpan
from .services.comparison_service import (
    compare_texts,
    compute_comparison_stats,
    compute_text_coverage,
    find_common_word_spans
)
from .utils.stopwords import STOP_WORDS, is_stop_word
from .utils.text_processing import build_frequency_map, count_words, tokenize_text

__all__ = [
    "ComparisonResult",
    "ComparisonStats",
    "TextCoverage",
    "WordSpan",
    "compare_texts",
    "compute_comparison_stats",
    "compute_text_coverage",
    "find_common_word_spans",
    "is_stop_word",
    "STOP_WORDS",
    "build_frequency_map",
    "count_words",
    "tokenize_text"
]

"""
Data models for TextRay.
"""
from .comparison import ComparisonResult, ComparisonStats, TextCoverage, WordSpan

__all__ = [
    "ComparisonResult",
    "ComparisonStats",
    "TextCoverage",
    "WordSpan"
]

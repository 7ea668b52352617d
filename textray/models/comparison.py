"""
Data models for TextRay comparison results.

This module contains Pydantic models for the structures returned by the
comparison service to presentation layers.
"""
from typing import Set

from pydantic import BaseModel, Field, model_validator


class ComparisonResult(BaseModel):
    """
    Model representing the outcome of comparing two texts.

    Attributes:
        common_words: Lower-cased non-stop-word tokens found in both texts
        similarity: Multiset Jaccard similarity as a whole percentage
        count: Number of common words
    """
    common_words: Set[str] = Field(default_factory=set)
    similarity: int = Field(default=0, ge=0, le=100)
    count: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def check_count(self) -> "ComparisonResult":
        if self.count != len(self.common_words):
            raise ValueError(
                f"count ({self.count}) must equal the number of common words ({len(self.common_words)})"
            )
        return self


class WordSpan(BaseModel):
    """
    Model representing one occurrence of a common word inside a text.

    Attributes:
        start: Offset of the first character
        end: Offset one past the last character
        word: Lower-cased token at this position
    """
    start: int = Field(ge=0)
    end: int = Field(ge=0)
    word: str

    @model_validator(mode="after")
    def check_bounds(self) -> "WordSpan":
        if self.end < self.start:
            raise ValueError(f"end ({self.end}) must not precede start ({self.start})")
        return self


class TextCoverage(BaseModel):
    """Word counts for a single text against a set of common words.

    Attributes:
        word_count: Whitespace-separated words in the text
        common_word_count: Words of the text containing at least one common
            token; "hello," counts for "hello", unlike an exact match of the
            whole lower-cased word
        match_percentage: common_word_count / word_count * 100, one decimal,
            halves rounded up
    """
    word_count: int = Field(default=0, ge=0)
    common_word_count: int = Field(default=0, ge=0)
    match_percentage: float = Field(default=0.0, ge=0.0, le=100.0)


class ComparisonStats(BaseModel):
    """
    Model representing the summary statistics for a pair of texts.

    Attributes:
        text1_words: Whitespace-separated words in the first text
        text2_words: Whitespace-separated words in the second text
        common_count: Number of common words
        unique_words1: Words of the first text not accounted for by common words
        unique_words2: Words of the second text not accounted for by common words
        similarity: Multiset Jaccard similarity as a whole percentage
    """
    text1_words: int = Field(default=0, ge=0)
    text2_words: int = Field(default=0, ge=0)
    common_count: int = Field(default=0, ge=0)
    unique_words1: int = Field(default=0, ge=0)
    unique_words2: int = Field(default=0, ge=0)
    similarity: int = Field(default=0, ge=0, le=100)

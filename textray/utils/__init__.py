"""
Utility modules for TextRay.

This package contains the building blocks of the comparison core:
tokenization, the stop-word table and similarity accounting.
"""

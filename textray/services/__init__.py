"""
Services package for TextRay.

This package contains the service modules that implement the comparison
logic called by presentation layers.
"""
from . import comparison_service

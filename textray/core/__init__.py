"""
Core configuration for TextRay.

Settings loaded from the environment, and helpers for .env loading and
logging setup.
"""

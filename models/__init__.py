"""
Shared pydantic models for the arcade demos.

Usage:
    >>> from models import Rectangle, Resolution
"""

from .primitives import (
    Rectangle,
    Resolution,
)

__all__ = [
    'Rectangle',
    'Resolution',
]

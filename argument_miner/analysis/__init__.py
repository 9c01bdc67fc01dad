"""
Analysis module exports.

Provides the heuristic TextAnalyzer.
"""

from .text_analyzer import TextAnalyzer

__all__ = ["TextAnalyzer"]

"""Fake News Detection System: heuristic credibility scoring for text."""

__version__ = "0.1.0"

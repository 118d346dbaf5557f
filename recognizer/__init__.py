"""Recognizer for one-line polynomial equations."""

from recognizer.engine import classify_equation, format_verdict
from recognizer.scanner import tokenize

__all__ = ["classify_equation", "format_verdict", "tokenize"]

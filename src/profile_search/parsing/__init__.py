"""Completion parsing: classification, extraction, and content generation."""

from profile_search.parsing.classifier import CONTENT_MARKERS, classify
from profile_search.parsing.parser import parse_ai_response
from profile_search.parsing.structured import extract_structured_data
from profile_search.parsing.suggestions import (
    MAX_SUGGESTED_QUESTIONS,
    extract_suggested_questions,
)

__all__ = [
    "CONTENT_MARKERS",
    "MAX_SUGGESTED_QUESTIONS",
    "classify",
    "extract_structured_data",
    "extract_suggested_questions",
    "parse_ai_response",
]

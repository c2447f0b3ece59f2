"""Extract follow-up questions from the end of a completion."""

import re

from profile_search.utils.logging import get_logger


logger = get_logger(__name__)


MAX_SUGGESTED_QUESTIONS = 4

# Section headers, tried in order. Each captures up to a blank line or the end.
SUGGESTION_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"suggested questions?:?\s*([\s\S]*?)(?:\n\n|\n\Z|\Z)", re.IGNORECASE),
    re.compile(r"follow-?up questions?:?\s*([\s\S]*?)(?:\n\n|\n\Z|\Z)", re.IGNORECASE),
    re.compile(r"you might also ask:?\s*([\s\S]*?)(?:\n\n|\n\Z|\Z)", re.IGNORECASE),
)

_BULLET = re.compile(r"^[-*]\s*")


def extract_suggested_questions(text: str) -> list[str]:
    """Return up to four suggested questions, or an empty list."""
    for pattern in SUGGESTION_PATTERNS:
        match = pattern.search(text)
        if not match:
            continue

        questions = [
            _BULLET.sub("", line.strip()).strip()
            for line in match.group(1).split("\n")
        ]
        questions = [q for q in questions if q][:MAX_SUGGESTED_QUESTIONS]

        if questions:
            return questions

    logger.debug("No suggested questions section found")
    return []

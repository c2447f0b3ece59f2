"""Content type detection for completion text.

Explicit marker tokens always win so a prompt can force a layout; otherwise
keyword heuristics are tried in a fixed order. The order decides overlaps
("portfolio" and "gallery" in one answer is cards) and existing prompts rely
on it, so it must not be reshuffled.
"""

from profile_search.data.content import ContentType


# Marker tokens, checked in this order
CONTENT_MARKERS: dict[ContentType, str] = {
    ContentType.CARDS: "[CARDS]",
    ContentType.CAROUSEL: "[CAROUSEL]",
    ContentType.ACCORDION: "[ACCORDION]",
    ContentType.TABS: "[TABS]",
    ContentType.CONTACT: "[CONTACT]",
}

# Keyword heuristics, first match wins
KEYWORD_HEURISTICS: tuple[tuple[ContentType, tuple[str, ...]], ...] = (
    (ContentType.CONTACT, ("contact", "email", "reach me", "get in touch")),
    (ContentType.CARDS, ("services", "products", "offerings", "portfolio")),
    (ContentType.CAROUSEL, ("gallery", "showcase", "images", "videos", "media")),
    (ContentType.ACCORDION, ("frequently asked", "questions", "faq")),
)

# More question marks than this reads as a Q&A answer
ACCORDION_QUESTION_MARK_THRESHOLD = 2


def classify(text: str) -> ContentType:
    """Return the content type for a completion. Never raises."""
    upper = text.upper()
    for content_type, marker in CONTENT_MARKERS.items():
        if marker in upper:
            return content_type

    lower = text.lower()
    for content_type, keywords in KEYWORD_HEURISTICS:
        if any(keyword in lower for keyword in keywords):
            return content_type

    if text.count("?") > ACCORDION_QUESTION_MARK_THRESHOLD:
        return ContentType.ACCORDION

    return ContentType.TEXT

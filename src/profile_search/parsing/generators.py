"""Content generators: one per non-text content type.

Each generator takes the raw completion and the optional structured payload
and returns a fully populated data model. Structured items are used when they
validate; anything missing or malformed degrades to a fallback derived from
the text. Generators never raise.
"""

import re
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from profile_search.data.content import (
    AccordionData,
    AccordionItem,
    CardItem,
    CardsData,
    CarouselData,
    CarouselItem,
    ContactData,
    ContactMethod,
    TabItem,
    TabsData,
)
from profile_search.data.context import UserContext
from profile_search.utils.logging import get_logger


logger = get_logger(__name__)

ItemT = TypeVar("ItemT", bound=BaseModel)

PLACEHOLDER_IMAGE = "https://via.placeholder.com/300x200"

# Contact cards list at most this many profile links as websites
MAX_WEBSITE_METHODS = 2

_LEADING_NUMBER = re.compile(r"^\d+\.\s*")


# =============================================================================
# HELPERS
# =============================================================================


def _first_line(text: str) -> str:
    return text.split("\n")[0]


def _text_field(structured_data: dict[str, Any] | None, key: str) -> str | None:
    """Non-empty string value of a structured key, else None."""
    if not structured_data:
        return None
    value = structured_data.get(key)
    if isinstance(value, str) and value:
        return value
    return None


def _structured_items(
    structured_data: dict[str, Any] | None,
    key: str,
    model: type[ItemT],
) -> list[ItemT] | None:
    """
    Validate the list under ``key`` into item models.

    Items without an id get their 1-based position. Returns None when the
    key is absent or any item fails validation, so callers fall back.
    """
    if not structured_data or structured_data.get(key) is None:
        return None

    raw_items = structured_data[key]
    if not isinstance(raw_items, list):
        logger.warning(
            "Structured items are not a list, using fallback",
            key=key,
            kind=type(raw_items).__name__,
        )
        return None

    items: list[ItemT] = []
    for index, raw in enumerate(raw_items):
        if not isinstance(raw, dict):
            logger.warning("Structured item is not an object, using fallback", key=key, index=index)
            return None
        item = dict(raw)
        item_id = item.get("id")
        item["id"] = str(item_id if item_id is not None else index + 1)
        try:
            items.append(model.model_validate(item))
        except ValidationError as e:
            logger.warning(
                "Structured item failed validation, using fallback",
                key=key,
                index=index,
                errors=e.error_count(),
            )
            return None
    return items


# =============================================================================
# GENERATORS
# =============================================================================


def generate_cards_content(
    text: str,
    structured_data: dict[str, Any] | None = None,
) -> CardsData:
    """Cards for services, products, or links."""
    cards = _structured_items(structured_data, "cards", CardItem)
    if cards is None:
        cards = [
            CardItem(
                id="1",
                title="Learn More",
                description="Get more information about this topic",
                url="#",
                badge="Info",
            )
        ]

    return CardsData(
        title=_text_field(structured_data, "title") or "Related Information",
        description=_text_field(structured_data, "description") or _first_line(text),
        cards=cards,
    )


def generate_carousel_content(
    text: str,
    structured_data: dict[str, Any] | None = None,
) -> CarouselData:
    """Media gallery items."""
    items = _structured_items(structured_data, "items", CarouselItem)
    if items is None:
        items = [
            CarouselItem(
                id="1",
                title="Featured Content",
                description="Placeholder media content",
                image=PLACEHOLDER_IMAGE,
                type="image",
            )
        ]

    return CarouselData(
        title=_text_field(structured_data, "title") or "Media Gallery",
        description=_text_field(structured_data, "description") or _first_line(text),
        items=items,
    )


def generate_accordion_content(
    text: str,
    structured_data: dict[str, Any] | None = None,
) -> AccordionData:
    """FAQ-style question and answer pairs."""
    items = _structured_items(structured_data, "items", AccordionItem)
    if items is None:
        items = parse_qa_from_text(text)

    return AccordionData(
        title=_text_field(structured_data, "title") or "Frequently Asked Questions",
        description=_text_field(structured_data, "description"),
        items=items,
    )


def generate_tabs_content(
    text: str,
    structured_data: dict[str, Any] | None = None,
) -> TabsData:
    """Multi-topic answer split into tabs."""
    tabs = _structured_items(structured_data, "tabs", TabItem)
    if tabs is None:
        tabs = [TabItem(id="1", label="Overview", content=text)]

    return TabsData(
        title=_text_field(structured_data, "title") or "Information",
        description=_text_field(structured_data, "description"),
        tabs=tabs,
    )


def generate_contact_content(
    text: str,
    structured_data: dict[str, Any] | None = None,
    user_context: UserContext | None = None,
) -> ContactData:
    """Ways to reach the profile owner."""
    methods = _structured_items(structured_data, "methods", ContactMethod)
    if methods is None:
        methods = generate_contact_methods(user_context)

    return ContactData(
        title=_text_field(structured_data, "title") or "Get In Touch",
        description=_text_field(structured_data, "description") or _first_line(text),
        methods=methods,
    )


# =============================================================================
# FALLBACKS
# =============================================================================


def parse_qa_from_text(text: str) -> list[AccordionItem]:
    """
    Naive Q&A parse of plain text.

    A non-blank line containing ``?`` is a question and the next non-blank
    line is its answer. The last line never starts a pair. With no pairs the
    whole text answers a generic question.
    """
    lines = [line for line in text.split("\n") if line.strip()]
    items: list[AccordionItem] = []

    for i in range(len(lines) - 1):
        line = lines[i].strip()
        if "?" in line:
            items.append(
                AccordionItem(
                    id=f"qa-{i}",
                    question=_LEADING_NUMBER.sub("", line),
                    answer=lines[i + 1].strip() or "More information coming soon.",
                )
            )

    if not items:
        items.append(
            AccordionItem(
                id="default",
                question="What can you tell me?",
                answer=text,
            )
        )

    return items


def generate_contact_methods(user_context: UserContext | None) -> list[ContactMethod]:
    """Social profiles first (the first one preferred), then up to two links."""
    if user_context is None:
        return []

    methods = [
        ContactMethod(
            id=f"social-{index}",
            type="social",
            label=social.display_name,
            value=social.platform,
            url=social.url,
            icon=social.platform,
            preferred=index == 0,
        )
        for index, social in enumerate(user_context.social_links)
    ]

    methods.extend(
        ContactMethod(
            id=f"link-{index}",
            type="website",
            label=link.title,
            value=link.url,
            url=link.url,
        )
        for index, link in enumerate(user_context.links[:MAX_WEBSITE_METHODS])
    )

    return methods

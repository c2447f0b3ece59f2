"""Assemble a completion into GenerativeContent."""

from typing import assert_never

from profile_search.data.content import (
    AccordionContent,
    CardsContent,
    CarouselContent,
    ContactContent,
    ContentType,
    GenerativeContent,
    TabsContent,
    TextContent,
    TextData,
)
from profile_search.data.context import UserContext
from profile_search.parsing.classifier import classify
from profile_search.parsing.generators import (
    generate_accordion_content,
    generate_cards_content,
    generate_carousel_content,
    generate_contact_content,
    generate_tabs_content,
)
from profile_search.parsing.structured import extract_structured_data


def parse_ai_response(
    text: str,
    user_context: UserContext | None = None,
) -> GenerativeContent:
    """
    Turn completion text into one typed, renderable content value.

    Pure and total: identical inputs give equal outputs and nothing raises.
    Plain text skips the generators; every other type carries the original
    text, the structured payload, and the context it was built from.
    """
    content_type = classify(text)
    structured_data = extract_structured_data(text)

    if content_type is ContentType.TEXT:
        return TextContent(
            data=TextData(content=text),
            metadata={"structured_data": structured_data},
        )

    metadata = {
        "original_content": text,
        "structured_data": structured_data,
        "user_context": user_context.model_dump() if user_context else None,
    }

    if content_type is ContentType.CARDS:
        return CardsContent(
            data=generate_cards_content(text, structured_data),
            metadata=metadata,
        )
    elif content_type is ContentType.CAROUSEL:
        return CarouselContent(
            data=generate_carousel_content(text, structured_data),
            metadata=metadata,
        )
    elif content_type is ContentType.ACCORDION:
        return AccordionContent(
            data=generate_accordion_content(text, structured_data),
            metadata=metadata,
        )
    elif content_type is ContentType.TABS:
        return TabsContent(
            data=generate_tabs_content(text, structured_data),
            metadata=metadata,
        )
    elif content_type is ContentType.CONTACT:
        return ContactContent(
            data=generate_contact_content(text, structured_data, user_context),
            metadata=metadata,
        )
    else:
        assert_never(content_type)

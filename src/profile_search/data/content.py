"""Generative content types - the renderable result of one search.

GenerativeContent is a closed tagged union: the ``type`` discriminator fixes
the model of ``data``, and pydantic enforces that pairing both when the
pipeline builds a value and when a renderer validates one from JSON.

Design Principles:
- Immutable (frozen models, created fresh per response)
- Self-describing (``type`` discriminator)
- Serializable (model_dump / GENERATIVE_CONTENT_ADAPTER)

Usage:
    content = parse_ai_response(text, user_context)

    if content.type == ContentType.CARDS:
        for card in content.data.cards:
            ...
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class ContentType(str, Enum):
    """Renderable content shapes."""

    TEXT = "text"
    CARDS = "cards"
    CAROUSEL = "carousel"
    ACCORDION = "accordion"
    TABS = "tabs"
    CONTACT = "contact"


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# =============================================================================
# ITEMS
# =============================================================================


class CardItem(_Frozen):
    """A single card (service, product, link)."""

    id: str
    title: str
    description: str = ""
    url: str | None = None
    badge: str | None = None
    image: str | None = None


class CarouselItem(_Frozen):
    """A single media item in a carousel."""

    id: str
    title: str
    description: str | None = None
    image: str
    url: str | None = None
    type: Literal["image", "video", "link"] = "image"


class AccordionItem(_Frozen):
    """A question and its answer."""

    id: str
    question: str
    answer: str


class TabItem(_Frozen):
    """One tab of a multi-topic answer."""

    id: str
    label: str
    content: str


class ContactMethod(_Frozen):
    """One way to reach the profile owner."""

    id: str
    type: Literal["email", "social", "website", "phone"]
    label: str
    value: str
    url: str
    icon: str | None = None
    preferred: bool | None = None


# =============================================================================
# DATA SHAPES
# =============================================================================


class TextData(_Frozen):
    content: str


class CardsData(_Frozen):
    title: str | None = None
    description: str | None = None
    cards: list[CardItem]


class CarouselData(_Frozen):
    title: str | None = None
    description: str | None = None
    items: list[CarouselItem]


class AccordionData(_Frozen):
    title: str | None = None
    description: str | None = None
    items: list[AccordionItem]


class TabsData(_Frozen):
    title: str | None = None
    description: str | None = None
    tabs: list[TabItem]


class ContactData(_Frozen):
    title: str | None = None
    description: str | None = None
    methods: list[ContactMethod]


# =============================================================================
# TAGGED UNION
# =============================================================================


class _ContentBase(_Frozen):
    metadata: dict[str, Any] = Field(default_factory=dict)


class TextContent(_ContentBase):
    type: Literal[ContentType.TEXT] = ContentType.TEXT
    data: TextData


class CardsContent(_ContentBase):
    type: Literal[ContentType.CARDS] = ContentType.CARDS
    data: CardsData


class CarouselContent(_ContentBase):
    type: Literal[ContentType.CAROUSEL] = ContentType.CAROUSEL
    data: CarouselData


class AccordionContent(_ContentBase):
    type: Literal[ContentType.ACCORDION] = ContentType.ACCORDION
    data: AccordionData


class TabsContent(_ContentBase):
    type: Literal[ContentType.TABS] = ContentType.TABS
    data: TabsData


class ContactContent(_ContentBase):
    type: Literal[ContentType.CONTACT] = ContentType.CONTACT
    data: ContactData


GenerativeContent = Annotated[
    Union[
        TextContent,
        CardsContent,
        CarouselContent,
        AccordionContent,
        TabsContent,
        ContactContent,
    ],
    Field(discriminator="type"),
]

# Validates renderer-supplied JSON back into the matching content model
GENERATIVE_CONTENT_ADAPTER: TypeAdapter[GenerativeContent] = TypeAdapter(GenerativeContent)

"""Read-only profile snapshot handed to the search pipeline."""

from __future__ import annotations

from typing import Iterable

from pydantic import BaseModel, ConfigDict, Field

from profile_search.utils.social import separate_social_links


class ProfileInfo(BaseModel):
    """Public profile fields."""

    model_config = ConfigDict(frozen=True)

    display_name: str | None = None
    bio: str | None = None
    avatar: str | None = None


class ContextLink(BaseModel):
    """An active link shown on the profile."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    url: str
    platform: str | None = None


class SocialLink(BaseModel):
    """A link recognised as a social profile."""

    model_config = ConfigDict(frozen=True)

    platform: str
    url: str
    display_name: str


class ProfileLink(BaseModel):
    """A stored profile link as the links store returns it."""

    id: str
    title: str
    url: str
    active: bool = True


class UserContext(BaseModel):
    """
    Profile, links, and social links for one profile.

    Built per request by the caller and never mutated by the pipeline.
    """

    model_config = ConfigDict(frozen=True)

    user: ProfileInfo = Field(default_factory=ProfileInfo)
    links: list[ContextLink] = Field(default_factory=list)
    social_links: list[SocialLink] = Field(default_factory=list)

    @classmethod
    def from_profile(
        cls,
        display_name: str | None,
        bio: str | None,
        avatar: str | None,
        links: Iterable[ProfileLink],
    ) -> UserContext:
        """
        Build a context from stored profile fields and links.

        Inactive links are dropped; social links are detected from the
        active ones and listed in addition to them.
        """
        active = [link for link in links if link.active]
        social, _ = separate_social_links(active)

        return cls(
            user=ProfileInfo(display_name=display_name, bio=bio, avatar=avatar),
            links=[
                ContextLink(id=link.id, title=link.title, url=link.url)
                for link in active
            ],
            social_links=[
                SocialLink(
                    platform=platform.platform,
                    url=platform.url,
                    display_name=platform.display_name,
                )
                for _, platform in social
            ],
        )

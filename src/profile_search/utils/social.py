"""Social platform detection for profile links.

Recognises the handful of platforms a profile header shows icons for and
splits a profile's links into social and regular links.
"""

from dataclasses import dataclass
from typing import Any, Iterable, Literal
from urllib.parse import urlparse


SocialPlatformName = Literal["twitter", "linkedin", "github", "instagram", "youtube", "tiktok"]

# Profile headers show at most this many social icons
MAX_SOCIAL_LINKS = 6


@dataclass(frozen=True)
class SocialPlatform:
    """A link recognised as a social profile."""

    name: str
    platform: SocialPlatformName
    url: str
    display_name: str


# (platform, name, display name, exact hosts, host suffix or None)
_PLATFORMS: tuple[tuple[SocialPlatformName, str, str, tuple[str, ...], str | None], ...] = (
    ("twitter", "Twitter", "Twitter/X", ("twitter.com", "x.com"), None),
    ("linkedin", "LinkedIn", "LinkedIn", ("linkedin.com",), "linkedin.com"),
    ("github", "GitHub", "GitHub", ("github.com",), None),
    ("instagram", "Instagram", "Instagram", ("instagram.com",), "instagram.com"),
    ("youtube", "YouTube", "YouTube", ("youtube.com", "youtu.be"), "youtube.com"),
    ("tiktok", "TikTok", "TikTok", ("tiktok.com",), "tiktok.com"),
)


def detect_social_platform(url: str) -> SocialPlatform | None:
    """
    Detect the social platform a URL points at.

    Returns None for unparseable URLs and for hosts that are not a
    recognised platform.
    """
    try:
        parsed = urlparse(url)
    except ValueError:
        return None

    if not parsed.scheme or not parsed.hostname:
        return None

    hostname = parsed.hostname.lower().replace("www.", "", 1)

    for platform, name, display_name, hosts, suffix in _PLATFORMS:
        if hostname in hosts or (suffix is not None and suffix in hostname):
            return SocialPlatform(
                name=name,
                platform=platform,
                url=url,
                display_name=display_name,
            )
    return None


def separate_social_links(
    links: Iterable[Any],
) -> tuple[list[tuple[Any, SocialPlatform]], list[Any]]:
    """
    Split links into social and regular links.

    Each link must expose a ``url`` attribute. Social links are returned
    paired with their detected platform and capped at MAX_SOCIAL_LINKS;
    regular links keep their original order.
    """
    social: list[tuple[Any, SocialPlatform]] = []
    regular: list[Any] = []

    for link in links:
        platform = detect_social_platform(link.url)
        if platform:
            social.append((link, platform))
        else:
            regular.append(link)

    return social[:MAX_SOCIAL_LINKS], regular

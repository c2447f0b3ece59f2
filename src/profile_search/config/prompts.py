"""Prompt templates for profile search completions."""

from profile_search.data.context import UserContext

# =============================================================================
# SEARCH PROMPTS
# =============================================================================

SEARCH_FORMAT_INSTRUCTIONS = """IMPORTANT: Format your responses for dynamic UI generation. You can use these content type markers:

- [CARDS] for showcasing services, products, or links as cards
- [CAROUSEL] for image galleries, video playlists, or media showcases
- [ACCORDION] for FAQs, detailed explanations, or Q&A format
- [TABS] for multi-topic responses or categorized information
- [CONTACT] for contact information and ways to reach them

You can also include structured JSON data in markdown code blocks like this:
```json
{
  "title": "Services",
  "cards": [
    {"title": "Service 1", "description": "Description", "url": "link"}
  ]
}
```

Always end your response with 2-4 suggested follow-up questions that users might ask, formatted as:

Suggested questions:
- Question 1
- Question 2
- Question 3
- Question 4

Be helpful, conversational, and provide accurate information based on their profile. If asked about something not in their profile, politely redirect to what you do know about them."""


# =============================================================================
# SUGGESTED QUESTION PROMPTS
# =============================================================================

SUGGESTION_SYSTEM_PROMPT = """Generate 4 relevant questions someone might ask about {name} based on their profile.

{profile_lines}

Return only the questions, one per line, without numbers or bullets."""

SUGGESTION_USER_PROMPT = "List the questions."


def build_search_system_prompt(username: str, context: UserContext | None) -> str:
    """System prompt describing the profile and the response format."""
    name = (context.user.display_name if context else None) or username
    parts = [f"You are an AI assistant representing {name}'s profile page."]

    if context:
        if context.user.bio:
            parts.append(f'Their bio states: "{context.user.bio}".')
        if context.links:
            links = ", ".join(f"{link.title} ({link.url})" for link in context.links)
            parts.append(f"They have the following links: {links}.")
        if context.social_links:
            socials = ", ".join(
                f"{social.display_name} ({social.url})" for social in context.social_links
            )
            parts.append(f"Their social media profiles include: {socials}.")

    return " ".join(parts) + "\n\n" + SEARCH_FORMAT_INSTRUCTIONS


def build_suggestion_system_prompt(username: str, context: UserContext | None) -> str:
    """System prompt asking for four starter questions about the profile."""
    name = (context.user.display_name if context else None) or username
    profile_lines: list[str] = []

    if context:
        if context.user.bio:
            profile_lines.append(f"Bio: {context.user.bio}")
        if context.links:
            profile_lines.append("Links: " + ", ".join(link.title for link in context.links))
        if context.social_links:
            profile_lines.append(
                "Social: " + ", ".join(social.display_name for social in context.social_links)
            )

    return SUGGESTION_SYSTEM_PROMPT.format(
        name=name,
        profile_lines="\n".join(profile_lines),
    ).replace("\n\n\n", "\n\n")

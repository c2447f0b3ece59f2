"""Extract the optional JSON payload from a completion."""

import json
import re
from typing import Any

from profile_search.utils.logging import get_logger


logger = get_logger(__name__)


# Keys the content generators know how to use
STRUCTURED_KEYS = frozenset({"title", "description", "cards", "items", "tabs", "methods"})

_JSON_FENCE = re.compile(r"```json\s*([\s\S]*?)\s*```")
_JSON_OBJECT = re.compile(r"\{[\s\S]*\}")


def extract_structured_data(text: str) -> dict[str, Any] | None:
    """
    Pull a JSON object out of a completion.

    A ```json fenced block is preferred; otherwise the span from the first
    ``{`` to the last ``}`` is tried. Returns None when nothing parses.
    """
    fence = _JSON_FENCE.search(text)
    if fence:
        candidate = fence.group(1)
    else:
        braces = _JSON_OBJECT.search(text)
        if not braces:
            return None
        candidate = braces.group(0)

    try:
        data = json.loads(candidate)
    except json.JSONDecodeError as e:
        logger.warning(
            "Failed to parse structured data from AI response",
            error=f"{e.msg} at position {e.pos}",
            fenced=fence is not None,
        )
        return None

    if not isinstance(data, dict):
        logger.debug(
            "Structured data is not a JSON object",
            kind=type(data).__name__,
        )
        return None

    if not STRUCTURED_KEYS & data.keys():
        logger.debug("Structured data has no recognised keys", keys=sorted(data))

    return data

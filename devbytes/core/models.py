"""Domain models for the DevBytes video cache."""

from dataclasses import asdict, dataclass
from typing import Any

SHORT_DESCRIPTION_LENGTH = 200

_TRAILING_PUNCTUATION = (", ", "; ", ": ", " ")


def smart_truncate(text: str, length: int) -> str:
    """Shorten text to roughly ``length`` characters on a word boundary.

    Whole words are kept until the result grows past ``length``. Trailing
    separators are stripped, and "..." is appended only if words were dropped.

    Args:
        text: Text to truncate
        length: Soft character limit

    Returns:
        Truncated text
    """
    result = ""
    has_more = False
    for word in text.split(" "):
        if len(result) > length:
            has_more = True
            break
        result += word + " "

    for suffix in _TRAILING_PUNCTUATION:
        if result.endswith(suffix):
            result = result[: -len(suffix)]

    if has_more:
        result += "..."
    return result


@dataclass(frozen=True)
class Video:
    """A DevByte video as shown to the user.

    Pure projection of a cached record; it has no lifecycle of its own.
    """

    title: str
    description: str
    url: str
    updated: str
    thumbnail: str

    @property
    def short_description(self) -> str:
        """Description cut to a length suitable for list rows."""
        return smart_truncate(self.description, SHORT_DESCRIPTION_LENGTH)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)

"""
Storage models for learned term dictionaries.
"""

from pydantic import BaseModel, Field


PLACEHOLDER_PREFIX = "<<<"
PLACEHOLDER_SUFFIX = ">>>"


def wrap_placeholder(term: str) -> str:
    """Wrap a term in the unresolved marker (e.g. ``<<<Jayamalla>>>``)."""
    return f"{PLACEHOLDER_PREFIX}{term}{PLACEHOLDER_SUFFIX}"


def is_placeholder(value: str) -> bool:
    """Return True if a stored translation is still an unresolved placeholder."""
    return value.startswith(PLACEHOLDER_PREFIX)


class DictionaryFile(BaseModel):
    """On-disk record of a term dictionary.

    The whole file is a single mapping from source term to translation:

        {"map": {"Govisetha": "ගොවිසෙත", "Jayamalla": "<<<Jayamalla>>>"}}

    Attributes:
        map: Source term to translated term. Values wrapped in ``<<<``/``>>>``
             are placeholders still waiting for a human translation.
    """
    map: dict[str, str] = Field(default_factory=dict, description="Source term to translation")

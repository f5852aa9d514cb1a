"""
Display hints for chemical categories.

Clients use these to label filter chips and colour the record avatars.
Unknown categories fall back to their own name and the default colour.
"""

from typing import Dict

CATEGORY_LABELS: Dict[str, str] = {
    "acid": "Acid",
    "base": "Base",
    "solvent": "Solvent",
    "salt": "Salt",
}

CATEGORY_COLORS: Dict[str, str] = {
    "acid": "red",
    "base": "blue",
    "solvent": "orange",
}

DEFAULT_COLOR = "teal"

LIST_AVATAR_LENGTH = 3
HEADER_AVATAR_LENGTH = 4


def category_label(category: str) -> str:
    return CATEGORY_LABELS.get(category.lower(), category)


def category_color(category: str) -> str:
    return CATEGORY_COLORS.get(category.lower(), DEFAULT_COLOR)


def avatar_text(symbol: str, max_length: int = LIST_AVATAR_LENGTH) -> str:
    """Symbol shortened to fit in a round avatar."""
    return symbol[:max_length]

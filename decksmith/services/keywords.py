"""
Keyword extraction from card effect text.

Pulls the terms used to relate cards to each other: known game mechanics,
plus any long word (longer words tend to be meaningful game terms).
"""

import re

# Common mechanics in the game's effect text
GAME_KEYWORDS: frozenset[str] = frozenset(
    {
        "draw",
        "discard",
        "destroy",
        "sacrifice",
        "summon",
        "equip",
        "heal",
        "damage",
        "power",
        "energy",
        "mana",
        "attack",
        "defend",
        "protect",
        "immune",
        "resistant",
        "echo",
        "recall",
        "search",
        "find",
        "ocean",
        "forest",
        "mountain",
        "ritual",
        "magic",
        "spell",
        "transform",
        "convert",
        "reduce",
        "increase",
        "double",
        "create",
        "token",
    }
)

# Words longer than this are kept even if not in GAME_KEYWORDS
MIN_LONG_WORD_LENGTH = 7

_WORD_PATTERN = re.compile(r"\b\w+\b")


def extract_keywords(text: str | None) -> set[str]:
    """
    Extract significant terms from effect text.

    Args:
        text: Effect text; None or empty yields no keywords

    Returns:
        Lower-cased terms that are game keywords or longer than 7 characters
    """
    if not text:
        return set()

    words = _WORD_PATTERN.findall(text.lower())
    return {word for word in words if word in GAME_KEYWORDS or len(word) > MIN_LONG_WORD_LENGTH}


def card_keywords(main_effect: str | None, echo_effect: str | None) -> set[str]:
    """Union of keywords from a card's main and echo effects."""
    return extract_keywords(main_effect) | extract_keywords(echo_effect)

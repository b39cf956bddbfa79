"""
Card synergy finder.

Identifies cards that work well with a given card. Candidates come from
the same faction (any faction when the focus card is Neutral), and are
picked by four heuristics in priority order:

1. Name mention: the candidate's effects mention the focus card by name
2. Keyword overlap: both cards' effects share a game keyword
3. Subtype overlap: a candidate subtype appears in the focus subtypes
4. Shared power track: both cards have ocean, forest or mountain power

Cards picked by an earlier heuristic keep their position; later heuristics
only append new cards. Cards sharing the focus card's name are versions,
not synergies, and are never returned.
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from decksmith.models.card import NEUTRAL_FACTION, Card
from decksmith.services.card_sorter import parse_number
from decksmith.services.keywords import card_keywords

logger = logging.getLogger(__name__)

MAX_SYNERGIES = 12

SUBTYPE_SEPARATOR = ", "

# Power track attribute -> label used in match reasons
POWER_TRACKS: list[tuple[str, str]] = [
    ("ocean_power", "ocean"),
    ("forest_power", "forest"),
    ("mountain_power", "mountain"),
]


@dataclass(frozen=True, slots=True)
class SynergyMatch:
    """A card related to the focus card, with why it was picked."""

    card: Card
    reason: str


def find_synergies(focus: Card, catalog: Sequence[Card]) -> list[Card]:
    """
    Find up to 12 cards that synergize with a focus card.

    Args:
        focus: Card being inspected
        catalog: All cards to pick from

    Returns:
        Distinct cards in heuristic priority order, then catalog order
    """
    return [match.card for match in find_synergy_matches(focus, catalog)]


def find_synergy_matches(
    focus: Card,
    catalog: Sequence[Card],
    max_results: int = MAX_SYNERGIES,
) -> list[SynergyMatch]:
    """
    Find cards that synergize with a focus card, with match reasons.

    Deduplicates by card reference: the first heuristic to pick a card
    decides its position and reason.

    Args:
        focus: Card being inspected
        catalog: All cards to pick from
        max_results: Maximum matches to return

    Returns:
        Matches in heuristic priority order, then catalog order
    """
    candidates = _candidate_pool(focus, catalog)

    matches: list[SynergyMatch] = []
    seen: set[str] = set()

    def add_matches(predicate: Callable[[Card], bool], reason: str) -> None:
        added = 0
        for candidate in candidates:
            if candidate.reference in seen:
                continue
            if predicate(candidate):
                seen.add(candidate.reference)
                matches.append(SynergyMatch(card=candidate, reason=reason))
                added += 1
        logger.debug("Synergy pass '%s' for %s added %d cards", reason, focus.reference, added)

    # 1. Cards that mention this card by name
    focus_name = focus.name.lower()
    add_matches(
        lambda c: focus_name in (c.main_effect or "").lower()
        or focus_name in (c.echo_effect or "").lower(),
        f"Mentions {focus.name}",
    )

    # 2. Cards sharing a keyword from the effect text
    focus_keywords = card_keywords(focus.main_effect, focus.echo_effect)
    if focus_keywords:
        add_matches(
            lambda c: not focus_keywords.isdisjoint(card_keywords(c.main_effect, c.echo_effect)),
            "Shares effect keywords",
        )

    # 3. Cards with a subtype found in the focus subtypes string.
    # Substring containment, so short subtypes can over-match.
    focus_subtypes = focus.card_sub_types
    if focus_subtypes:
        add_matches(
            lambda c: bool(c.card_sub_types)
            and any(
                subtype in focus_subtypes
                for subtype in (c.card_sub_types or "").split(SUBTYPE_SEPARATOR)
            ),
            "Shares a subtype",
        )

    # 4. Cards with power on the same track
    for attribute, track in POWER_TRACKS:
        if _has_power(getattr(focus, attribute)):
            add_matches(
                lambda c, attribute=attribute: _has_power(getattr(c, attribute)),
                f"Has {track} power",
            )

    return matches[:max_results]


def _candidate_pool(focus: Card, catalog: Sequence[Card]) -> list[Card]:
    """Other cards with a different name, in the focus card's faction unless it is Neutral."""
    any_faction = focus.main_faction == NEUTRAL_FACTION
    return [
        card
        for card in catalog
        if card.reference != focus.reference
        and card.name != focus.name
        and (any_faction or card.main_faction == focus.main_faction)
    ]


def _has_power(value: str | None) -> bool:
    """True if a power value is a number greater than zero."""
    if not value:
        return False
    number = parse_number(value.replace("#", ""))
    return number is not None and number > 0


def format_synergy_results(focus: Card, matches: list[SynergyMatch]) -> str:
    """Format synergy results for display."""
    if not matches:
        return f"No synergistic cards found for {focus.name}."

    lines = [f"## Cards that synergize with {focus.name}\n"]
    for match in matches:
        lines.append(f"- **{match.card.name}** ({match.card.reference}) - {match.reason}")

    return "\n".join(lines)

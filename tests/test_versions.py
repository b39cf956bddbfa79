"""Tests for card version grouping."""

from decksmith.models.card import Card
from decksmith.services.versions import find_versions


class TestFindVersions:
    def test_finds_other_prints(self, sample_catalog: list[Card]) -> None:
        focus = sample_catalog[1]

        result = find_versions(focus, sample_catalog)

        assert [c.reference for c in result] == ["ALT_CORE_B_AX_04_R1"]

    def test_is_symmetric(self, sample_catalog: list[Card]) -> None:
        rare = sample_catalog[2]

        result = find_versions(rare, sample_catalog)

        assert [c.reference for c in result] == ["ALT_CORE_B_AX_04_C"]

    def test_unique_card_has_no_versions(self, sample_catalog: list[Card]) -> None:
        assert find_versions(sample_catalog[0], sample_catalog) == []

    def test_keeps_catalog_order(self) -> None:
        focus = Card(reference="B", name="Echo")
        catalog = [
            Card(reference="C", name="Echo"),
            focus,
            Card(reference="X", name="Other"),
            Card(reference="A", name="Echo"),
        ]

        assert [c.reference for c in find_versions(focus, catalog)] == ["C", "A"]

    def test_name_match_is_exact(self) -> None:
        """Names differing only by case are different cards."""
        focus = Card(reference="A", name="Echo")
        catalog = [focus, Card(reference="B", name="echo")]

        assert find_versions(focus, catalog) == []

    def test_focus_outside_catalog(self) -> None:
        focus = Card(reference="NEW", name="Echo")
        catalog = [Card(reference="A", name="Echo")]

        assert [c.reference for c in find_versions(focus, catalog)] == ["A"]

"""Tests for effect keyword extraction."""

from decksmith.services.keywords import GAME_KEYWORDS, card_keywords, extract_keywords


class TestExtractKeywords:
    def test_keeps_game_keywords(self) -> None:
        """Known mechanics are kept, filler words dropped."""
        assert extract_keywords("Draw a card, then discard one") == {"draw", "discard"}

    def test_lowercases_tokens(self) -> None:
        assert extract_keywords("DESTROY target Spell") == {"destroy", "spell"}

    def test_keeps_words_longer_than_seven(self) -> None:
        """Long words are kept even when not in the vocabulary."""
        assert extract_keywords("Expedition") == {"expedition"}
        assert extract_keywords("Reserves") == {"reserves"}

    def test_drops_seven_letter_words(self) -> None:
        """Exactly seven characters is not long enough."""
        assert extract_keywords("Reserve") == set()

    def test_splits_on_punctuation(self) -> None:
        assert extract_keywords("Sacrifice: draw.") == {"sacrifice", "draw"}

    def test_collapses_duplicates(self) -> None:
        assert extract_keywords("draw, draw and draw") == {"draw"}

    def test_empty_text(self) -> None:
        assert extract_keywords("") == set()

    def test_none_text(self) -> None:
        """Absent effect text yields no keywords instead of failing."""
        assert extract_keywords(None) == set()

    def test_vocabulary_is_lowercase(self) -> None:
        assert all(keyword == keyword.lower() for keyword in GAME_KEYWORDS)


class TestCardKeywords:
    def test_unions_main_and_echo(self) -> None:
        assert card_keywords("Create a token.", "Draw a card.") == {"create", "token", "draw"}

    def test_missing_effects(self) -> None:
        assert card_keywords(None, None) == set()
        assert card_keywords(None, "Heal 1.") == {"heal"}

"""Tests for the crossword generator and the crossword script.

Tests cover:
- Row count, hand size and distinct cards across rows
- Each row's strength is one of the requested targets
- Reproducibility with a seed
- Falling back to another target when one cannot be rigged
- Rendering format
- Script helpers: strength parsing and rich table rendering
"""

import random

import pytest
from rich.console import Console

from poker_rig.rules import Hand, HandStrength, make_cards_from_string
from poker_rig.engine import (
    Crossword,
    CrosswordError,
    Deck,
    REASONABLY_STRONG_HANDS,
    rig_row,
)
from poker_rig.scripts.crossword import (
    CrosswordConfig,
    parse_strengths,
    render_rich_table,
    run,
)


class TestCrosswordGeneration:
    """Tests for Crossword.generate."""

    def test_default_crossword(self):
        crossword = Crossword.generate(seed=42)
        assert len(crossword) == 5
        for hand in crossword:
            assert len(hand) == 5
            assert hand.strength in REASONABLY_STRONG_HANDS

    def test_cards_are_distinct(self):
        crossword = Crossword.generate(rows=8, seed=1)
        cards = [card for row in crossword.rows for card in row]
        assert len(cards) == 40
        assert len(set(cards)) == 40

    def test_deterministic_with_seed(self):
        assert Crossword.generate(seed=9).render() == Crossword.generate(seed=9).render()

    def test_single_target(self):
        crossword = Crossword.generate(rows=3, seed=5, strengths=[HandStrength.FLUSH])
        assert crossword.strengths == [HandStrength.FLUSH] * 3

    @pytest.mark.parametrize("rows", [0, -1, 11])
    def test_invalid_row_count(self, rows):
        with pytest.raises(ValueError):
            Crossword.generate(rows=rows, seed=1)

    def test_empty_strengths(self):
        with pytest.raises(ValueError):
            Crossword.generate(rows=1, seed=1, strengths=[])

    def test_row_strength_matches_classification(self):
        crossword = Crossword.generate(rows=6, seed=21)
        for cards, strength in zip(crossword.rows, crossword.strengths):
            assert Hand(cards).strength == strength


class TestRigRow:
    """Tests for rigging a single row."""

    def test_falls_back_to_another_target(self):
        deck = Deck.from_cards(make_cards_from_string("2h 2s 5d 7c 9h Kd"), seed=0)
        hand = rig_row(deck, [HandStrength.FLUSH, HandStrength.PAIR], random.Random(0))
        assert hand.strength == HandStrength.PAIR
        assert len(deck) == 1

    def test_raises_when_nothing_can_be_rigged(self):
        deck = Deck.from_cards(make_cards_from_string("2h 4s 6d 8c Kh"), seed=0)
        before = deck.cards
        with pytest.raises(CrosswordError):
            rig_row(deck, [HandStrength.FLUSH, HandStrength.PAIR], random.Random(0))
        assert deck.cards == before

    def test_crossword_error_is_runtime_error(self):
        assert issubclass(CrosswordError, RuntimeError)


class TestRendering:
    """Tests for the text layout."""

    def test_render_format(self):
        crossword = Crossword(
            hands=[
                Hand.from_string("Ah Kh Qh Jh 10h"),
                Hand.from_string("9c 9d 9s 9h 2c"),
            ]
        )
        assert crossword.render() == (
            "Ah  Kh  Qh  Jh  10h  <-- Straight Flush\n"
            "9c  9d  9s  9h  2c   <-- Four of a Kind"
        )
        assert str(crossword) == crossword.render()

    def test_render_one_line_per_row(self):
        crossword = Crossword.generate(rows=4, seed=3)
        assert len(crossword.render().splitlines()) == 4


class TestCrosswordScript:
    """Tests for the crossword script helpers."""

    def test_parse_strengths(self):
        assert parse_strengths("flush, full_house") == [
            HandStrength.FLUSH,
            HandStrength.FULL_HOUSE,
        ]

    def test_parse_strengths_invalid(self):
        with pytest.raises(ValueError):
            parse_strengths("flush,royal")
        with pytest.raises(ValueError):
            parse_strengths(" , ")

    def test_rich_table(self):
        crossword = Crossword.generate(rows=2, seed=4)
        table = render_rich_table(crossword)
        assert table.row_count == 2
        assert len(table.columns) == 6

    def test_run_plain(self, capsys):
        crossword = run(CrosswordConfig(rows=2, seed=4))
        out = capsys.readouterr().out
        assert out.strip() == crossword.render()

    def test_run_rich(self):
        console = Console(record=True, width=120)
        crossword = run(CrosswordConfig(rows=2, seed=4, use_rich=True), console=console)
        text = console.export_text()
        for hand in crossword:
            assert hand.strength.label in text

"""Poker crossword: a grid of rigged five-card rows.

A crossword is built from a single deck. For each row a target strength is
picked at random, the deck is rigged for it and five cards are drawn. When a
target cannot be rigged from what is left of the deck, another target is
picked, never retrying one that already failed for that row.

Rendered form (one row per line):

    Ah  Kh  Qh  Jh  10h  <-- Straight Flush
    9c  9d  9s  9h  2c   <-- Four of a Kind
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence

from poker_rig.rules import (
    Card,
    DECK_SIZE,
    HAND_SIZE,
    Hand,
    HandStrength,
)
from poker_rig.engine.deck import Deck

logger = logging.getLogger(__name__)

# Targets used when none are given
REASONABLY_STRONG_HANDS = (
    HandStrength.STRAIGHT_FLUSH,
    HandStrength.FOUR_OF_A_KIND,
    HandStrength.FLUSH,
    HandStrength.FULL_HOUSE,
    HandStrength.STRAIGHT,
)

DEFAULT_ROWS = 5

# Rendered width of one card cell ("10h" plus one space)
CELL_WIDTH = 4


class CrosswordError(RuntimeError):
    """Raised when no candidate strength can be rigged for a row."""

    pass


def pick_random_strength(
    strengths: Sequence[HandStrength], rng: random.Random
) -> HandStrength:
    """Pick one of strengths uniformly at random."""
    return strengths[rng.randrange(len(strengths))]


def rig_row(
    deck: Deck, strengths: Sequence[HandStrength], rng: random.Random
) -> Hand:
    """Rig the deck for a random strength and draw the resulting hand.

    Args:
        deck: Deck to rig and draw from
        strengths: Candidate target strengths
        rng: Generator used to pick targets

    Returns:
        The drawn hand

    Raises:
        CrosswordError: If none of the strengths can be rigged
    """
    candidates = list(dict.fromkeys(strengths))
    while candidates:
        target = pick_random_strength(candidates, rng)
        if deck.rig(target):
            return Hand(deck.draw(HAND_SIZE))
        logger.debug("Cannot rig %s from %d cards, picking again", target.name, len(deck))
        candidates.remove(target)

    raise CrosswordError(
        f"None of {[s.name for s in strengths]} can be rigged from {len(deck)} cards"
    )


@dataclass
class Crossword:
    """A stack of rigged hands drawn from one deck.

    Attributes:
        hands: The rows, top first
    """

    hands: List[Hand] = field(default_factory=list)

    @classmethod
    def generate(
        cls,
        rows: int = DEFAULT_ROWS,
        seed: Optional[int] = None,
        strengths: Sequence[HandStrength] = REASONABLY_STRONG_HANDS,
    ) -> "Crossword":
        """Build a crossword.

        Args:
            rows: Number of five-card rows
            seed: Random seed for reproducibility
            strengths: Candidate strengths for each row

        Returns:
            New Crossword with rows hands

        Raises:
            ValueError: If rows do not fit in one deck or strengths is empty
            CrosswordError: If a row cannot be rigged for any strength
        """
        if rows < 1 or rows * HAND_SIZE > DECK_SIZE:
            raise ValueError(
                f"rows must be between 1 and {DECK_SIZE // HAND_SIZE}, got {rows}"
            )
        if not strengths:
            raise ValueError("At least one target strength is required")

        rng = random.Random(seed)
        deck = Deck(rng=rng)
        hands = []
        for row in range(rows):
            hand = rig_row(deck, strengths, rng)
            logger.debug("Row %d: %s (%s)", row, hand, hand.strength.name)
            hands.append(hand)

        return cls(hands=hands)

    @property
    def rows(self) -> List[List[Card]]:
        """Cards of each row."""
        return [list(hand.cards) for hand in self.hands]

    @property
    def strengths(self) -> List[HandStrength]:
        return [hand.strength for hand in self.hands]

    def __len__(self) -> int:
        return len(self.hands)

    def __iter__(self) -> Iterator[Hand]:
        return iter(self.hands)

    def render(self) -> str:
        lines = []
        for hand in self.hands:
            cells = "".join(str(card).ljust(CELL_WIDTH) for card in hand.cards)
            lines.append(f"{cells} <-- {hand.strength.label}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()

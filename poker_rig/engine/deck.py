"""Card pool with shuffling, drawing and rigging.

This module provides:
- Deck: an ordered pool of distinct cards, front = next card to draw
- find_rigged_combination: search a card sequence for five cards of a
  given strength

Rigging flow:
1. The deck is shuffled when created
2. rig(target) scans every 5-card index combination a<b<c<d<e of the
   current order and stops at the first one classified as target
3. On a match the five cards move to the front and the rest of the deck
   is reshuffled behind them; otherwise the deck is left untouched
4. The next five draws yield a hand of the target strength

The search itself is deterministic. Which hand gets picked depends on the
order left by earlier shuffles, so shuffle before rigging.
"""

import itertools
import logging
import random
from typing import Iterable, List, Optional, Sequence, Tuple

from poker_rig.rules import (
    Card,
    HAND_SIZE,
    HandStrength,
    classify_cards,
    create_standard_deck,
)

logger = logging.getLogger(__name__)


def find_rigged_combination(
    cards: Sequence[Card], target: HandStrength
) -> Optional[Tuple[int, ...]]:
    """Find the first five cards whose strength is exactly target.

    Combinations are visited as increasing index tuples over the given
    order, so the result is fully determined by that order.

    Args:
        cards: Cards to search, in their current order
        target: Desired hand strength

    Returns:
        Sorted indices of the matching cards, or None if no five cards
        in the sequence make the target strength
    """
    examined = 0
    for indices in itertools.combinations(range(len(cards)), HAND_SIZE):
        examined += 1
        if classify_cards([cards[i] for i in indices]).strength == target:
            logger.debug(
                "Found %s after %d combinations of %d cards",
                target.name,
                examined,
                len(cards),
            )
            return indices

    logger.debug(
        "No %s among %d combinations of %d cards", target.name, examined, len(cards)
    )
    return None


class Deck:
    """An ordered pool of distinct playing cards.

    The deck owns its random number generator, so two decks never share
    random state and a seeded deck replays the same shuffles and rigs.

    Attributes:
        rng: Random number generator used for every shuffle
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        cards: Optional[Iterable[Card]] = None,
    ):
        """Create a deck.

        Args:
            seed: Seed for a new generator (ignored when rng is given)
            rng: Generator to use for shuffling
            cards: Initial cards in draw order. When omitted the deck holds
                all 52 standard cards, shuffled.

        Raises:
            ValueError: If cards contains duplicates
        """
        self.rng = rng if rng is not None else random.Random(seed)

        if cards is None:
            self._cards: List[Card] = create_standard_deck()
            self.shuffle()
        else:
            self._cards = list(cards)
            if len(set(self._cards)) != len(self._cards):
                raise ValueError("A deck cannot contain the same card twice")

    @classmethod
    def new(cls, seed: Optional[int] = None) -> "Deck":
        """Create a full, shuffled 52-card deck.

        Args:
            seed: Random seed for reproducibility

        Returns:
            New Deck ready to rig and draw
        """
        return cls(seed=seed)

    @classmethod
    def from_cards(cls, cards: Iterable[Card], seed: Optional[int] = None) -> "Deck":
        """Create a deck holding exactly the given cards in the given order (for testing).

        Args:
            cards: Cards in draw order
            seed: Random seed for later shuffles

        Returns:
            New Deck, not shuffled
        """
        return cls(seed=seed, cards=cards)

    @property
    def cards(self) -> Tuple[Card, ...]:
        """Snapshot of the current order, front first."""
        return tuple(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __contains__(self, card: Card) -> bool:
        return card in self._cards

    def __repr__(self) -> str:
        return f"Deck({len(self._cards)} cards)"

    def is_empty(self) -> bool:
        return not self._cards

    def shuffle(self) -> None:
        """Randomize the order of the cards currently in the deck."""
        self.rng.shuffle(self._cards)

    def draw_one(self) -> Optional[Card]:
        """Remove and return the front card, or None if the deck is empty."""
        if not self._cards:
            return None
        return self._cards.pop(0)

    def draw(self, count: int = HAND_SIZE) -> List[Card]:
        """Draw up to count cards from the front.

        Args:
            count: Number of cards wanted

        Returns:
            The drawn cards in draw order; fewer than count if the deck runs out
        """
        if count < 0:
            raise ValueError(f"Cannot draw a negative number of cards: {count}")
        drawn = self._cards[:count]
        del self._cards[:count]
        return drawn

    def rig(self, target: HandStrength) -> bool:
        """Reorder the deck so the next five cards make target.

        Args:
            target: Desired strength of the next drawn hand

        Returns:
            True if the deck was rigged, False if no five cards in the deck
            make target (the deck is then left exactly as it was)
        """
        indices = find_rigged_combination(self._cards, target)
        if indices is None:
            logger.debug("Could not rig %s from %d cards", target.name, len(self._cards))
            return False

        chosen = set(indices)
        front = [self._cards[i] for i in indices]
        rest = [card for i, card in enumerate(self._cards) if i not in chosen]
        self.rng.shuffle(rest)
        self._cards = front + rest

        logger.debug("Rigged %s: %s", target.name, " ".join(str(c) for c in front))
        return True

"""Card rank and suit definitions and utilities.

Rank order (high to low): A > K > Q > J > 10 > 9 > 8 > 7 > 6 > 5 > 4 > 3 > 2

The Ace only plays low inside the wheel straight (A-2-3-4-5); that case is
handled by the hand classifier, not by the Rank ordering.

This module provides:
- Rank and suit enumerations
- Card representation and parsing
- Standard deck creation
- Rank counting helpers
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Iterable, List


class Rank(IntEnum):
    """Card ranks. The integer value is the comparison key (Ace = 14)."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14  # Highest rank, except in the wheel


class Suit(IntEnum):
    """Card suits. Values identify a suit only; suits carry no strength."""

    HEARTS = 0
    SPADES = 1
    DIAMONDS = 2
    CLUBS = 3


# Value the Ace takes when it plays below the Two
ACE_LOW_VALUE = 1

# Rank symbols for display
RANK_SYMBOLS = {
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}

# Suit symbols for display: lowercase first letter of the suit name
SUIT_SYMBOLS = {suit: suit.name[0].lower() for suit in Suit}

# Symbol to rank/suit mapping (for parsing)
SYMBOL_TO_RANK = {v: k for k, v in RANK_SYMBOLS.items()}
SYMBOL_TO_RANK["T"] = Rank.TEN
SYMBOL_TO_SUIT = {v: k for k, v in SUIT_SYMBOLS.items()}

DECK_SIZE = len(Rank) * len(Suit)


@dataclass(frozen=True)
class Card:
    """A playing card with suit and rank.

    Immutable and hashable for use in sets. Two cards are equal iff
    both their suit and rank are equal.
    """

    suit: Suit
    rank: Rank

    def __str__(self) -> str:
        return f"{RANK_SYMBOLS[self.rank]}{SUIT_SYMBOLS[self.suit]}"

    def __repr__(self) -> str:
        return f"Card({self})"

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse a card from a string like 'Ah', '10c' or 'TD'.

        Args:
            s: Card string in format "RANK+SUIT"

        Returns:
            Card object

        Raises:
            ValueError: If string cannot be parsed
        """
        s = s.strip()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s!r}")

        suit_char = s[-1].lower()
        rank_str = s[:-1].upper()

        if suit_char not in SYMBOL_TO_SUIT:
            raise ValueError(f"Invalid suit character: {s[-1]}")
        if rank_str not in SYMBOL_TO_RANK:
            raise ValueError(f"Invalid rank: {s[:-1]}")

        return cls(suit=SYMBOL_TO_SUIT[suit_char], rank=SYMBOL_TO_RANK[rank_str])


def get_rank_counts(cards: Iterable[Card]) -> Dict[Rank, int]:
    """Count occurrences of each rank in a collection of cards.

    Args:
        cards: Card objects

    Returns:
        Dict mapping Rank to count
    """
    counts: Dict[Rank, int] = {}
    for card in cards:
        counts[card.rank] = counts.get(card.rank, 0) + 1
    return counts


def create_standard_deck() -> List[Card]:
    """Create a standard 52-card deck, unshuffled.

    Returns:
        List of 52 Card objects (4 suits × 13 ranks), grouped by suit
    """
    return [Card(suit=suit, rank=rank) for suit in Suit for rank in Rank]


def sort_cards(cards: Iterable[Card], descending: bool = False) -> List[Card]:
    """Sort cards by rank, then by suit.

    Args:
        cards: Card objects
        descending: Highest rank first when True

    Returns:
        New sorted list of cards
    """
    return sorted(cards, key=lambda c: (c.rank, c.suit), reverse=descending)


def make_cards_from_string(s: str) -> List[Card]:
    """Parse cards from a string like "Ah 2s 3d 4c 5h".

    Args:
        s: Whitespace-separated card strings

    Returns:
        List of Card objects
    """
    return [Card.from_string(cs) for cs in s.split()]

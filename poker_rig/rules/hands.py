"""Five-card hand classification and comparison.

Hand strengths (weakest to strongest):
- Nothing: no other category applies
- Pair: two cards of the same rank
- Two pair: two different pairs
- Three of a kind: three cards of the same rank
- Straight: five consecutive ranks (A-2-3-4-5 counts, Ace playing low)
- Flush: five cards of the same suit
- Full house: three of a kind plus a pair
- Four of a kind: four cards of the same rank
- Straight flush: a straight whose cards share a suit

Comparison rules:
- Higher strength wins
- Equal strengths compare their significant ranks positionally
  (e.g. pair rank, then kickers from highest to lowest)
"""

from dataclasses import dataclass
from enum import IntEnum
from functools import cached_property
from typing import Dict, Iterable, List, NamedTuple, Optional, Sequence, Tuple

from .ranks import (
    ACE_LOW_VALUE,
    Card,
    Rank,
    make_cards_from_string,
)

HAND_SIZE = 5


class HandStrength(IntEnum):
    """Hand categories. The integer value is the comparison key."""

    NOTHING = 0
    PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8

    @property
    def label(self) -> str:
        """Human readable name, e.g. 'Full House'."""
        return HAND_STRENGTH_LABELS[self]

    @classmethod
    def from_name(cls, name: str) -> "HandStrength":
        """Look up a strength by member name or label, ignoring case.

        Accepts 'full_house', 'FULL_HOUSE', 'Full House' or 'fullhouse'.

        Raises:
            ValueError: If the name matches no strength
        """
        key = name.strip().upper().replace(" ", "_").replace("-", "_")
        if key in cls.__members__:
            return cls[key]
        compact = key.replace("_", "")
        for member in cls:
            if member.name.replace("_", "") == compact:
                return member
        raise ValueError(f"Unknown hand strength: {name!r}")


HAND_STRENGTH_LABELS = {
    HandStrength.NOTHING: "Nothing",
    HandStrength.PAIR: "Pair",
    HandStrength.TWO_PAIR: "Two Pair",
    HandStrength.THREE_OF_A_KIND: "Three of a Kind",
    HandStrength.STRAIGHT: "Straight",
    HandStrength.FLUSH: "Flush",
    HandStrength.FULL_HOUSE: "Full House",
    HandStrength.FOUR_OF_A_KIND: "Four of a Kind",
    HandStrength.STRAIGHT_FLUSH: "Straight Flush",
}


class HandSizeError(ValueError):
    """Raised when a hand is built from a card count other than five."""

    pass


class HandRanking(NamedTuple):
    """Classification result for a hand.

    Attributes:
        strength: The hand category
        ranks: Significant ranks used to break ties within a category,
            most significant first
    """

    strength: HandStrength
    ranks: Tuple[Rank, ...]


@dataclass(frozen=True, eq=False)
class Hand:
    """Exactly five cards.

    Hands compare by poker value, not by card identity: two hands with the
    same strength and significant ranks are equal even if their suits differ.

    Attributes:
        cards: The five cards, in the order given
    """

    cards: Tuple[Card, ...]

    def __post_init__(self):
        cards = tuple(self.cards)
        if len(cards) != HAND_SIZE:
            raise HandSizeError(
                f"A hand requires {HAND_SIZE} cards but {len(cards)} were given"
            )
        object.__setattr__(self, "cards", cards)

    @classmethod
    def from_string(cls, s: str) -> "Hand":
        """Build a hand from a string like "10h Jh Qh Kh Ah"."""
        return cls(make_cards_from_string(s))

    @cached_property
    def ranking(self) -> HandRanking:
        """Classification of this hand (computed once)."""
        return classify(self)

    @property
    def strength(self) -> HandStrength:
        return self.ranking.strength

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self):
        return iter(self.cards)

    def __str__(self) -> str:
        return "".join(str(c) for c in self.cards)

    def __repr__(self) -> str:
        return f"Hand({' '.join(str(c) for c in self.cards)})"

    def __eq__(self, other):
        if not isinstance(other, Hand):
            return NotImplemented
        return compare_hands(self, other) == 0

    def __hash__(self):
        return hash(self.ranking)

    def __lt__(self, other: "Hand") -> bool:
        return compare_hands(self, other) < 0

    def __le__(self, other: "Hand") -> bool:
        return compare_hands(self, other) <= 0

    def __gt__(self, other: "Hand") -> bool:
        return compare_hands(self, other) > 0

    def __ge__(self, other: "Hand") -> bool:
        return compare_hands(self, other) >= 0


def is_flush(cards: Sequence[Card]) -> bool:
    """Check whether all cards share the suit of the first card."""
    return all(card.suit == cards[0].suit for card in cards)


def _descend_by_one(values: Sequence[int]) -> bool:
    # Each value exactly one above the next
    return all(current == following + 1 for current, following in zip(values, values[1:]))


def get_straight_high_rank(ranks: Sequence[Rank]) -> Optional[Rank]:
    """Return the top rank of the straight formed by ranks, or None.

    Args:
        ranks: Five ranks sorted descending

    Returns:
        Highest rank of the straight. For the wheel (A-2-3-4-5) the Ace
        plays low, so the straight is five-high and FIVE is returned.
    """
    values = [int(r) for r in ranks]
    if _descend_by_one(values):
        return ranks[0]

    if ranks[0] == Rank.ACE and _descend_by_one(values[1:] + [ACE_LOW_VALUE]):
        return ranks[1]

    return None


def is_straight(cards: Sequence[Card]) -> bool:
    """Check whether the cards form a straight, wheel included."""
    ranks = sorted((c.rank for c in cards), reverse=True)
    return get_straight_high_rank(ranks) is not None


def group_ranks_by_count(ranks: Iterable[Rank]) -> Dict[int, List[Rank]]:
    """Group ranks by how often they occur.

    Args:
        ranks: Ranks of a hand, in any order

    Returns:
        Dict mapping multiplicity (1-4) to the ranks with that multiplicity,
        each list sorted descending. Multiplicities that do not occur are
        absent.

    Example:
        >>> group_ranks_by_count([Rank.KING, Rank.TWO, Rank.KING, Rank.NINE, Rank.TWO])
        {2: [<Rank.KING: 13>, <Rank.TWO: 2>], 1: [<Rank.NINE: 9>]}
    """
    rank_counts: Dict[Rank, int] = {}
    for rank in ranks:
        rank_counts[rank] = rank_counts.get(rank, 0) + 1

    by_count: Dict[int, List[Rank]] = {}
    for rank in sorted(rank_counts, reverse=True):
        by_count.setdefault(rank_counts[rank], []).append(rank)
    return by_count


def classify_cards(cards: Sequence[Card]) -> HandRanking:
    """Classify five cards without wrapping them in a Hand.

    The caller guarantees there are exactly five cards.
    """
    flush = is_flush(cards)
    ranks = sorted((c.rank for c in cards), reverse=True)

    straight_high = get_straight_high_rank(ranks)
    if straight_high is not None:
        strength = HandStrength.STRAIGHT_FLUSH if flush else HandStrength.STRAIGHT
        return HandRanking(strength, (straight_high,))

    if flush:
        return HandRanking(HandStrength.FLUSH, tuple(ranks))

    by_count = group_ranks_by_count(ranks)
    quads = by_count.get(4, [])
    trips = by_count.get(3, [])
    pairs = by_count.get(2, [])
    singles = by_count.get(1, [])

    if quads:
        return HandRanking(HandStrength.FOUR_OF_A_KIND, (quads[0], singles[0]))

    if trips and pairs:
        return HandRanking(HandStrength.FULL_HOUSE, (trips[0], pairs[0]))

    if trips:
        return HandRanking(HandStrength.THREE_OF_A_KIND, tuple(trips + singles))

    if len(pairs) == 2:
        return HandRanking(HandStrength.TWO_PAIR, tuple(pairs + singles))

    if pairs:
        return HandRanking(HandStrength.PAIR, tuple(pairs + singles))

    return HandRanking(HandStrength.NOTHING, tuple(ranks))


def classify(hand: Hand) -> HandRanking:
    """Compute the strength and significant ranks of a hand.

    Args:
        hand: A five-card hand

    Returns:
        HandRanking with the strength and the tie-break ranks
    """
    return classify_cards(hand.cards)


def compare_rankings(ranking1: HandRanking, ranking2: HandRanking) -> int:
    """Compare two classification results.

    Returns:
        Positive if ranking1 is stronger, negative if weaker, zero if equal
    """
    if ranking1.strength != ranking2.strength:
        return 1 if ranking1.strength > ranking2.strength else -1

    for rank1, rank2 in zip(ranking1.ranks, ranking2.ranks):
        if rank1 != rank2:
            return 1 if rank1 > rank2 else -1

    return 0


def compare_hands(hand1: Hand, hand2: Hand) -> int:
    """Compare two hands.

    Args:
        hand1: First hand
        hand2: Second hand

    Returns:
        Positive if hand1 > hand2
        Negative if hand1 < hand2
        Zero if both have the same strength and significant ranks
    """
    return compare_rankings(hand1.ranking, hand2.ranking)


def get_hand_strength(cards: Sequence[Card]) -> HandStrength:
    """Strength of exactly five cards.

    Raises:
        HandSizeError: If the card count is not five
    """
    return Hand(cards).strength


def describe_hand_strengths() -> Dict[HandStrength, str]:
    """Get a description of what makes each hand strength.

    Returns:
        Dict mapping HandStrength to description string
    """
    return {
        HandStrength.NOTHING: "No pair, no straight, no flush",
        HandStrength.PAIR: "Two cards of the same rank",
        HandStrength.TWO_PAIR: "Two different pairs",
        HandStrength.THREE_OF_A_KIND: "Three cards of the same rank",
        HandStrength.STRAIGHT: "Five consecutive ranks (Ace may play low in A-2-3-4-5)",
        HandStrength.FLUSH: "Five cards of the same suit",
        HandStrength.FULL_HOUSE: "Three of a kind plus a pair",
        HandStrength.FOUR_OF_A_KIND: "Four cards of the same rank",
        HandStrength.STRAIGHT_FLUSH: "A straight with all cards of the same suit",
    }

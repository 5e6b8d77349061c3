"""Poker rules implementations.

This module provides:
- Card, rank and suit definitions (ranks.py)
- Hand classification and comparison (hands.py)
"""

from .ranks import (
    Rank,
    Suit,
    Card,
    RANK_SYMBOLS,
    SUIT_SYMBOLS,
    ACE_LOW_VALUE,
    DECK_SIZE,
    get_rank_counts,
    create_standard_deck,
    sort_cards,
    make_cards_from_string,
)

from .hands import (
    HAND_SIZE,
    HandStrength,
    HandRanking,
    Hand,
    HandSizeError,
    is_flush,
    is_straight,
    get_straight_high_rank,
    group_ranks_by_count,
    classify,
    classify_cards,
    compare_rankings,
    compare_hands,
    get_hand_strength,
    describe_hand_strengths,
)

__all__ = [
    # Ranks
    "Rank",
    "Suit",
    "Card",
    "RANK_SYMBOLS",
    "SUIT_SYMBOLS",
    "ACE_LOW_VALUE",
    "DECK_SIZE",
    "get_rank_counts",
    "create_standard_deck",
    "sort_cards",
    "make_cards_from_string",
    # Hands
    "HAND_SIZE",
    "HandStrength",
    "HandRanking",
    "Hand",
    "HandSizeError",
    "is_flush",
    "is_straight",
    "get_straight_high_rank",
    "group_ranks_by_count",
    "classify",
    "classify_cards",
    "compare_rankings",
    "compare_hands",
    "get_hand_strength",
    "describe_hand_strengths",
]

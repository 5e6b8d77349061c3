"""Deck and crossword implementations.

This module provides:
- Deck: shuffled card pool with draw and rig operations
- find_rigged_combination: pure search for five cards of a given strength
- Crossword: rows of rigged hands drawn from one deck
- CrosswordError: raised when a row cannot be rigged
"""

from .deck import Deck, find_rigged_combination
from .crossword import (
    Crossword,
    CrosswordError,
    REASONABLY_STRONG_HANDS,
    DEFAULT_ROWS,
    pick_random_strength,
    rig_row,
)

__all__ = [
    "Deck",
    "find_rigged_combination",
    "Crossword",
    "CrosswordError",
    "REASONABLY_STRONG_HANDS",
    "DEFAULT_ROWS",
    "pick_random_strength",
    "rig_row",
]

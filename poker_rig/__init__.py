"""Poker Rig - five-card hand ranking and deck rigging.

A small library that classifies and orders five-card poker hands and
reorders a deck so that the next hand drawn has a chosen strength.
"""

__version__ = "0.1.0"
__author__ = "Poker Rig Team"

from poker_rig.utils.seeding import set_seed

__all__ = ["__version__", "set_seed"]

#!/usr/bin/env python3
"""Survey hand strength frequencies over random five-card draws.

Draws N hands from a fresh 52-card deck each time, classifies them and
compares the observed frequency of every strength with the exact
probability over all C(52, 5) hands. Large deviations point at a
classifier bug.

Usage:
    python -m poker_rig.scripts.survey --hands 100000
    python -m poker_rig.scripts.survey --hands 20000 --seed 42
"""

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import Optional

import numpy as np

from poker_rig.rules import (
    DECK_SIZE,
    HAND_SIZE,
    HandStrength,
    classify_cards,
    create_standard_deck,
)
from poker_rig.utils.seeding import set_seed

logger = logging.getLogger(__name__)

# Number of distinct five-card hands per strength
EXACT_COMBINATIONS = {
    HandStrength.NOTHING: 1_302_540,
    HandStrength.PAIR: 1_098_240,
    HandStrength.TWO_PAIR: 123_552,
    HandStrength.THREE_OF_A_KIND: 54_912,
    HandStrength.STRAIGHT: 10_200,
    HandStrength.FLUSH: 5_108,
    HandStrength.FULL_HOUSE: 3_744,
    HandStrength.FOUR_OF_A_KIND: 624,
    HandStrength.STRAIGHT_FLUSH: 40,
}

TOTAL_COMBINATIONS = sum(EXACT_COMBINATIONS.values())  # C(52, 5)


@dataclass
class SurveyConfig:
    """Survey script configuration."""

    hands: int = 10_000
    seed: Optional[int] = None
    verbose: bool = False


@dataclass
class SurveyResult:
    """Observed counts per strength.

    Attributes:
        counts: Array of length len(HandStrength), indexed by strength value
        seed: Seed that was used
    """

    counts: np.ndarray
    seed: int

    @property
    def total(self) -> int:
        return int(self.counts.sum())

    @property
    def frequencies(self) -> np.ndarray:
        if self.total == 0:
            return np.zeros_like(self.counts, dtype=float)
        return self.counts / self.total

    def summary(self) -> str:
        lines = [f"{'Strength':<16}{'Count':>10}{'Observed':>11}{'Exact':>11}"]
        for strength in HandStrength:
            expected = EXACT_COMBINATIONS[strength] / TOTAL_COMBINATIONS
            lines.append(
                f"{strength.label:<16}{int(self.counts[strength]):>10}"
                f"{self.frequencies[strength]:>11.5%}{expected:>11.5%}"
            )
        lines.append(f"{'Total':<16}{self.total:>10}")
        return "\n".join(lines)


def exact_probabilities() -> np.ndarray:
    """Exact probability of each strength, indexed by strength value."""
    return np.array(
        [EXACT_COMBINATIONS[s] for s in HandStrength], dtype=float
    ) / TOTAL_COMBINATIONS


def run_survey(hands: int, seed: Optional[int] = None) -> SurveyResult:
    """Classify random hands and count strengths.

    Args:
        hands: Number of hands to draw
        seed: Random seed for reproducibility

    Returns:
        SurveyResult with per-strength counts
    """
    if hands < 0:
        raise ValueError(f"hands must be non-negative, got {hands}")

    seed = set_seed(seed)
    rng = np.random.default_rng(seed)
    deck = create_standard_deck()

    strengths = np.empty(hands, dtype=np.int64)
    for i in range(hands):
        picks = rng.choice(DECK_SIZE, size=HAND_SIZE, replace=False)
        strengths[i] = classify_cards([deck[j] for j in picks]).strength

    counts = np.bincount(strengths, minlength=len(HandStrength))
    logger.info("Surveyed %d hands (seed=%d)", hands, seed)
    return SurveyResult(counts=counts, seed=seed)


def main():
    """Main entry point for the survey script."""
    parser = argparse.ArgumentParser(
        description="Estimate hand strength frequencies from random draws",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m poker_rig.scripts.survey --hands 100000
  python -m poker_rig.scripts.survey --hands 20000 --seed 42
        """,
    )

    parser.add_argument(
        "--hands",
        "-n",
        type=int,
        default=SurveyConfig.hands,
        help=f"Number of random hands to classify (default: {SurveyConfig.hands})",
    )

    parser.add_argument(
        "--seed", "-s", type=int, default=None, help="Random seed for reproducibility"
    )

    parser.add_argument("--verbose", "-v", action="store_true", help="Enable info logging")

    args = parser.parse_args()
    config = SurveyConfig(hands=args.hands, seed=args.seed, verbose=args.verbose)

    logging.basicConfig(
        level=logging.INFO if config.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        result = run_survey(config.hands, seed=config.seed)
    except KeyboardInterrupt:
        print("\nSurvey interrupted by user.")
        sys.exit(0)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    print(f"Seed: {result.seed}")
    print(result.summary())


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""Print a poker crossword: rows of rigged five-card hands.

Every row is drawn from the same deck after rigging it for a randomly
chosen strength. The strength of each row is printed next to it.

Usage:
    python -m poker_rig.scripts.crossword
    python -m poker_rig.scripts.crossword --rows 8 --seed 42
    python -m poker_rig.scripts.crossword --strengths flush,full_house --rich
"""

import argparse
import logging
import sys
from dataclasses import dataclass, field
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from poker_rig.engine import Crossword, DEFAULT_ROWS, REASONABLY_STRONG_HANDS
from poker_rig.rules import Card, HAND_SIZE, HandStrength, Suit

logger = logging.getLogger(__name__)

SUIT_STYLES = {
    Suit.HEARTS: "bold red",
    Suit.DIAMONDS: "bold red",
    Suit.CLUBS: "bold white",
    Suit.SPADES: "bold white",
}


@dataclass
class CrosswordConfig:
    """Crossword script configuration."""

    rows: int = DEFAULT_ROWS
    seed: Optional[int] = None
    strengths: List[HandStrength] = field(default_factory=lambda: list(REASONABLY_STRONG_HANDS))
    use_rich: bool = False
    verbose: bool = False


def parse_strengths(value: str) -> List[HandStrength]:
    """Parse a comma-separated list of strength names.

    Raises:
        ValueError: If a name is unknown or the list is empty
    """
    strengths = [HandStrength.from_name(s) for s in value.split(",") if s.strip()]
    if not strengths:
        raise ValueError("No hand strengths given")
    return strengths


def get_card_rich_text(card: Card) -> Text:
    """Return a Rich Text object for a card, colored by suit."""
    return Text(str(card), style=SUIT_STYLES[card.suit])


def render_rich_table(crossword: Crossword) -> Table:
    """Render the crossword as a Rich table, one row per hand."""
    table = Table(box=box.SIMPLE, show_header=True, header_style="bold")
    for i in range(HAND_SIZE):
        table.add_column(f"#{i + 1}", justify="left")
    table.add_column("Hand", style="cyan")

    for hand in crossword:
        cells = [get_card_rich_text(card) for card in hand.cards]
        table.add_row(*cells, hand.strength.label)
    return table


def run(config: CrosswordConfig, console: Optional[Console] = None) -> Crossword:
    """Generate and print a crossword.

    Args:
        config: Script configuration
        console: Console to print to (a new one when omitted)

    Returns:
        The generated crossword
    """
    console = console or Console()
    crossword = Crossword.generate(
        rows=config.rows, seed=config.seed, strengths=config.strengths
    )
    logger.info("Generated %d rows (seed=%s)", len(crossword), config.seed)

    if config.use_rich:
        console.print(render_rich_table(crossword))
    else:
        print(crossword.render())
    return crossword


def main():
    """Main entry point for the crossword script."""
    parser = argparse.ArgumentParser(
        description="Print rows of rigged poker hands",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m poker_rig.scripts.crossword --rows 5
  python -m poker_rig.scripts.crossword --rows 10 --seed 7 --rich
  python -m poker_rig.scripts.crossword --strengths straight,flush,pair
        """,
    )

    parser.add_argument(
        "--rows",
        "-r",
        type=int,
        default=DEFAULT_ROWS,
        help=f"Number of five-card rows (default: {DEFAULT_ROWS})",
    )

    parser.add_argument(
        "--seed", "-s", type=int, default=None, help="Random seed for reproducibility"
    )

    parser.add_argument(
        "--strengths",
        type=str,
        default=",".join(s.name.lower() for s in REASONABLY_STRONG_HANDS),
        help="Comma-separated target strengths (default: the five strongest categories)",
    )

    parser.add_argument("--rich", action="store_true", help="Render a colored table")

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Log every rig attempt"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        strengths = parse_strengths(args.strengths)
    except ValueError as e:
        print(f"Error: {e}. Valid strengths: {', '.join(s.name.lower() for s in HandStrength)}")
        sys.exit(1)

    config = CrosswordConfig(
        rows=args.rows,
        seed=args.seed,
        strengths=strengths,
        use_rich=args.rich,
        verbose=args.verbose,
    )

    try:
        run(config)
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        sys.exit(0)
    except (ValueError, RuntimeError) as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()

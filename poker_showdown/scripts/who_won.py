#!/usr/bin/env python3
"""Determine the winner(s) of a five-card showdown from player records.

Each record is "<name>, <card>, <card>, <card>, <card>, <card>" where a card
is a rank (2-10, J, Q, K, A) followed by a suit (C, D, H, S).

Usage:
    python -m poker_showdown.scripts.who_won "Joe, 3H, 4H, 5H, 6H, 8H" "Bob, 3C, 3D, 3S, 8C, 10D"
    python -m poker_showdown.scripts.who_won --file table.txt --verbose
    python -m poker_showdown.scripts.who_won --demo --strategies flush,one_pair
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from poker_showdown.engine import (
    DECIDED_BY_HIGH_CARD,
    ShowdownConfig,
    ShowdownResult,
    WinnerResolver,
)
from poker_showdown.rules import MalformedRecordError
from poker_showdown.rules.categories import DEFAULT_STRATEGY_NAMES, STRATEGIES_BY_NAME
from poker_showdown.rules.ranks import SUIT_NAMES, SUIT_SYMBOLS, Suit

# Three-player sample table
DEMO_RECORDS = [
    "Joe, 3H, 4H, 5H, 6H, 8H",
    "Bob, 3C, 3D, 3S, 8C, 10D",
    "Sally, AC, 10C, 5C, 2S, 2C",
]

SUIT_HELP = ", ".join(f"{SUIT_SYMBOLS[s]}={SUIT_NAMES[s]}" for s in Suit)

SUIT_STYLES = {
    Suit.HEART: "bold red1",
    Suit.DIAMOND: "bold red1",
    Suit.CLUB: "bold green1",
    Suit.SPADE: "bold cyan1",
}

console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger(__name__)


def read_records(path: Path) -> List[str]:
    """Read one record per line, skipping blank lines and # comments."""
    records = []
    with path.open(encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith("#"):
                records.append(line)
    return records


def render_result(result: ShowdownResult, resolver: WinnerResolver) -> Table:
    """Build a table of every hand, winners highlighted."""
    table = Table(title="Showdown", box=box.ROUNDED)
    table.add_column("Player", style="bold")
    table.add_column("Cards")
    table.add_column("Category")
    table.add_column("High Card", justify="right")

    winners = set(id(h) for h in result.winners)
    for hand in reversed(result.hands):
        cards = Text()
        for i, card in enumerate(hand.cards):
            if i:
                cards.append(" ")
            cards.append(str(card), style=SUIT_STYLES[card.suit])
        name = f"* {hand.player_name}" if id(hand) in winners else hand.player_name
        table.add_row(
            Text(name),
            cards,
            resolver.evaluator.category_label(hand.category_rank),
            str(hand.high_card),
        )
    return table


def describe_winners(result: ShowdownResult, resolver: WinnerResolver) -> str:
    if not result.winners:
        return "No players"
    names = ", ".join(result.winner_names)
    if result.decided_by == DECIDED_BY_HIGH_CARD:
        how = f"high card {result.winning_value}"
    else:
        how = resolver.evaluator.category_label(result.winning_value)
    verb = "tie with" if result.is_tie else "wins with"
    return f"{names} {verb} {how}"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Rank five-card poker hands and report the winner(s)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Suits: {SUIT_HELP}
Strategies: {", ".join(STRATEGIES_BY_NAME)}

Examples:
  python -m poker_showdown.scripts.who_won "A, 2H,3H,4H,5H,7H" "B, 2C,3C,4C,5C,7C"
  python -m poker_showdown.scripts.who_won --file table.txt --names-only
        """,
    )
    parser.add_argument("records", nargs="*", help="Player records")
    parser.add_argument("--file", "-f", type=Path, default=None, help="File with one record per line")
    parser.add_argument("--demo", action="store_true", help="Use the built-in three-player table")
    parser.add_argument(
        "--strategies",
        type=str,
        default=DEFAULT_STRATEGY_NAMES,
        help=f"Comma-separated strategy order, last match wins (default: {DEFAULT_STRATEGY_NAMES})",
    )
    parser.add_argument("--names-only", action="store_true", help="Print winner names only")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    records = list(args.records)
    if args.file is not None:
        try:
            records.extend(read_records(args.file))
        except OSError as exc:
            err_console.print(f"[red]Cannot read {args.file}: {escape(str(exc))}[/red]")
            return 1
    if args.demo:
        records.extend(DEMO_RECORDS)
    if not records:
        parser.error("no player records given (pass records, --file or --demo)")

    try:
        resolver = WinnerResolver.from_config(ShowdownConfig(strategies=args.strategies))
        result = resolver.resolve(records)
    except MalformedRecordError as exc:
        logger.debug("Rejected input", exc_info=True)
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        return 1
    except ValueError as exc:
        err_console.print(f"[red]Configuration error:[/red] {escape(str(exc))}")
        return 1

    if args.names_only:
        for name in result.winner_names:
            console.print(name, markup=False, highlight=False)
        return 0

    console.print(render_result(result, resolver))
    console.print(Panel(Text(describe_winners(result, resolver), style="bold green"), box=box.HEAVY))
    return 0


if __name__ == "__main__":
    sys.exit(main())

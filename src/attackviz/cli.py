"""Command-line coverage map for a piece placement.

Usage:
    attackviz [--pieces STR | --fen FEN] [--depth {1,2,3}]
        [--format {json,text}] [--select ID ...] [--color COLOR ...]

Without --pieces or --fen the standard starting position is used.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from attackviz.board import Board
from attackviz.config import Settings
from attackviz.coverage import compute_with_depth, filter_colors, filter_pieces
from attackviz.notation import board_from_fen, parse_placement, starting_board
from attackviz.report import coverage_report, render_heatmap

logger = logging.getLogger(__name__)


def _load_board(args: argparse.Namespace) -> Board:
    if args.pieces is not None:
        return parse_placement(args.pieces)
    if args.fen is not None:
        return board_from_fen(args.fen)
    return starting_board()


def _run(args: argparse.Namespace) -> str:
    board = _load_board(args)
    grid = compute_with_depth(board, args.depth)
    if args.select:
        grid = filter_pieces(grid, args.select)
    if args.color:
        grid = filter_colors(grid, args.color)
    logger.info("Computed depth-%d coverage for %d pieces", args.depth, len(board))

    if args.format == "text":
        return render_heatmap(board, grid)
    return json.dumps(coverage_report(board, grid), indent=2)


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="attackviz",
        description="Attack, defense and speculative coverage for a chess placement",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--pieces", metavar="STR",
        help='Placement string, e.g. "Ke1,Qd1,ke8" (uppercase = white)',
    )
    source.add_argument("--fen", help="Read piece placement from a FEN")
    parser.add_argument(
        "--depth", type=int, choices=(1, 2, 3), default=settings.default_depth,
        help=f"Coverage depth (default: {settings.default_depth})",
    )
    parser.add_argument(
        "--format", choices=("json", "text"), default="json",
        help="Output format (default: json)",
    )
    parser.add_argument(
        "--select", metavar="ID", type=int, action="append",
        help="Only show coverage from this piece identity (repeatable)",
    )
    parser.add_argument(
        "--color", choices=("white", "black"), action="append",
        help="Only show coverage from this side (repeatable)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    settings = Settings()
    logging.basicConfig(level=settings.log_level, stream=sys.stderr)
    args = build_parser(settings).parse_args(argv)

    try:
        output = _run(args)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)
    print(output)


if __name__ == "__main__":
    main()

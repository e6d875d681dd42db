"""CLI entry point: python -m ladder_sim {run,chart}."""

from __future__ import annotations

import argparse
import sys

from ladder_sim.board import FINAL_SQUARE, SNAKES_AND_LADDERS, Board, make_board
from ladder_sim.chart import make_trace_chart
from ladder_sim.export import write_simulation
from ladder_sim.game import (
    DEFAULT_MAX_ROLLS,
    GAME_OVER_MESSAGE,
    PRE_CHECK,
    STRATEGIES,
    MoveEntry,
    MoveObserver,
    SimulationResult,
    SimulationRunner,
)


class PrintObserver:
    """Prints one line per move as the simulation runs."""

    def on_move(self, entry: MoveEntry) -> None:
        line = (
            f"  roll {entry.roll_number:3d}: rolled {entry.die_face}, "
            f"{entry.start_position} → {entry.landing}"
        )
        if entry.took_ladder:
            line += f", ladder up to {entry.end_position}"
        elif entry.took_snake:
            line += f", snake down to {entry.end_position}"
        print(line)


def _parse_offset(text: str) -> tuple[int, int]:
    """Parse ``SQUARE:OFFSET`` (e.g. ``3:8`` or ``14:-10``)."""
    try:
        square, offset = text.split(":")
        return int(square), int(offset)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"Expected SQUARE:OFFSET, got {text!r}"
        ) from None


def _build_board(args: argparse.Namespace) -> Board:
    offsets = dict(args.offset) if args.offset else SNAKES_AND_LADDERS
    return make_board(args.final_square, offsets)


def _simulate(
    args: argparse.Namespace,
    observer: MoveObserver | None = None,
) -> tuple[Board, SimulationResult]:
    """Build the board and run one simulation, exiting 1 on bad configuration."""
    try:
        board = _build_board(args)
        runner = SimulationRunner(
            board=board,
            strategy=args.strategy,
            max_rolls=args.max_rolls,
            observer=observer,
        )
    except ValueError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        sys.exit(1)
    return board, runner.play()


def _require_finished(board: Board, result: SimulationResult) -> None:
    """Exit 1 when the pawn never reached the final square."""
    if not result.finished:
        print(
            f"Stopped after {result.rolls} rolls on square {result.final_position} "
            f"without reaching square {board.final_square}.",
            file=sys.stderr,
        )
        sys.exit(1)


# ── run ──────────────────────────────────────────────────────────────

def cmd_run(args: argparse.Namespace) -> None:
    """Play one game and report where the pawn ended up."""
    observer = PrintObserver() if args.verbose else None
    board, result = _simulate(args, observer)

    if args.json:
        path = write_simulation(board, result, args.json)
        print(f"Move log saved to {path}")

    _require_finished(board, result)

    print(GAME_OVER_MESSAGE)
    print(f"Reached square {result.final_position} in {result.rolls} rolls ({result.strategy}).")


# ── chart ────────────────────────────────────────────────────────────

def cmd_chart(args: argparse.Namespace) -> None:
    """Play one game and plot its position trace."""
    board, result = _simulate(args)
    _require_finished(board, result)
    out = args.output or "position_trace.png"
    make_trace_chart(board, result, output_path=out)
    print(f"Chart saved to {out}")


# ── main ─────────────────────────────────────────────────────────────

def _add_board_args(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--strategy", choices=STRATEGIES, default=PRE_CHECK,
        help=f"Where the bounds check happens (default {PRE_CHECK})",
    )
    p.add_argument(
        "--final-square", type=int, default=FINAL_SQUARE,
        help=f"Target square (default {FINAL_SQUARE})",
    )
    p.add_argument(
        "--offset", type=_parse_offset, action="append", metavar="SQUARE:OFFSET",
        help="Snake or ladder offset; repeat to build a custom board",
    )
    p.add_argument(
        "--max-rolls", type=int, default=DEFAULT_MAX_ROLLS,
        help=f"Give up after this many rolls (default {DEFAULT_MAX_ROLLS})",
    )


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="ladder_sim",
        description="Deterministic Snakes & Ladders simulation",
    )
    sub = parser.add_subparsers(dest="command")

    p_run = sub.add_parser("run", help="Play one game")
    _add_board_args(p_run)
    p_run.add_argument("--verbose", "-v", action="store_true", help="Print every move")
    p_run.add_argument("--json", help="Write the move log to this JSON file")

    p_chart = sub.add_parser("chart", help="Generate position trace chart")
    _add_board_args(p_chart)
    p_chart.add_argument("--output", "-o", help="Output PNG path")

    args = parser.parse_args()
    if args.command == "run":
        cmd_run(args)
    elif args.command == "chart":
        cmd_chart(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()

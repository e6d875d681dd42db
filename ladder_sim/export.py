"""Export simulation runs to JSON."""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path

from ladder_sim.board import Board
from ladder_sim.game import SimulationResult


def export_board(board: Board) -> dict:
    # JSON object keys must be strings
    return {
        "final_square": board.final_square,
        "offsets": {str(sq): off for sq, off in board.offsets.items()},
    }


def export_simulation(board: Board, result: SimulationResult) -> dict:
    """Return the board, outcome and full move log as a structured dict."""
    return {
        "board": export_board(board),
        "result": {
            "strategy": result.strategy,
            "final_position": result.final_position,
            "rolls": result.rolls,
            "reason": result.reason,
        },
        "moves": [asdict(m) for m in result.moves],
    }


def write_simulation(board: Board, result: SimulationResult, output_path: Path | str) -> Path:
    """Write :func:`export_simulation` output to *output_path*, creating parents."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(export_simulation(board, result), indent=2))
    return path

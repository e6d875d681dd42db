"""Tests for simulation JSON export."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from ladder_sim.board import make_board
from ladder_sim.export import export_board, export_simulation, write_simulation
from ladder_sim.game import POST_CHECK, SimulationResult, SimulationRunner


@pytest.fixture
def finished_game() -> tuple:
    board = make_board()
    result = SimulationRunner(board=board, strategy=POST_CHECK).play()
    return board, result


def test_export_board_uses_string_keys():
    data = export_board(make_board(10, {2: 5, 8: -6}))
    assert data == {"final_square": 10, "offsets": {"2": 5, "8": -6}}


def test_export_simulation_result_block(finished_game) -> None:
    board, result = finished_game
    data = export_simulation(board, result)

    assert data["result"] == {
        "strategy": "post-check",
        "final_position": 27,
        "rolls": 10,
        "reason": "finished",
    }
    assert data["board"]["final_square"] == 25
    assert data["board"]["offsets"]["14"] == -10


def test_export_simulation_moves(finished_game) -> None:
    board, result = finished_game
    moves = export_simulation(board, result)["moves"]

    assert len(moves) == 10
    assert moves[1] == {
        "roll_number": 2,
        "die_face": 2,
        "start_position": 1,
        "landing": 3,
        "offset": 8,
        "end_position": 11,
    }


def test_export_unfinished_simulation() -> None:
    board = make_board()
    result = SimulationRunner(board=board, max_rolls=2).play()
    data = export_simulation(board, result)
    assert data["result"]["reason"] == "max_rolls"
    assert len(data["moves"]) == 2


def test_export_empty_result() -> None:
    board = make_board()
    result = SimulationResult(final_position=0, rolls=0, reason="max_rolls")
    assert export_simulation(board, result)["moves"] == []


def test_write_simulation_round_trips_json(tmp_path: Path, finished_game) -> None:
    board, result = finished_game
    out = tmp_path / "nested" / "game.json"

    path = write_simulation(board, result, out)

    assert path == out
    assert out.exists()
    assert json.loads(out.read_text()) == export_simulation(board, result)

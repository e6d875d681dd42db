"""Tests for the position trace chart."""

from pathlib import Path

from ladder_sim.board import make_board
from ladder_sim.chart import make_trace_chart
from ladder_sim.game import SimulationRunner


def test_chart_written_as_png(tmp_path: Path):
    board = make_board()
    result = SimulationRunner(board=board).play()
    out = tmp_path / "trace.png"

    returned = make_trace_chart(board, result, output_path=str(out))

    assert returned == str(out)
    assert out.exists()
    assert out.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


def test_chart_for_board_without_jumps(tmp_path: Path):
    board = make_board(10, {})
    result = SimulationRunner(board=board).play()
    out = tmp_path / "plain.png"

    make_trace_chart(board, result, output_path=str(out))

    assert out.stat().st_size > 0

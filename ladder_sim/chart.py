"""Plot the pawn's position after every roll."""

from __future__ import annotations

import matplotlib
matplotlib.use("Agg")  # non-interactive backend

import matplotlib.pyplot as plt

from ladder_sim.board import Board
from ladder_sim.game import SimulationResult


def make_trace_chart(
    board: Board,
    result: SimulationResult,
    output_path: str = "position_trace.png",
    title: str = "Snakes & Ladders Position Trace",
) -> str:
    """Create a step plot of position per roll, marking snakes and ladders.

    Returns the path to the saved PNG.
    """
    rolls = [0] + [m.roll_number for m in result.moves]
    positions = [0] + [m.end_position for m in result.moves]

    fig, ax = plt.subplots(figsize=(10, 5))
    ax.step(rolls, positions, where="post", color="#4A90D9", linewidth=2)
    ax.axhline(board.final_square, color="gray", linestyle="--", linewidth=1)

    for m in result.moves:
        if m.offset == 0:
            continue
        color = "#2E9E4F" if m.took_ladder else "#D9534F"
        ax.annotate(
            "",
            xy=(m.roll_number, m.end_position),
            xytext=(m.roll_number, m.landing),
            arrowprops={"arrowstyle": "->", "color": color, "lw": 1.5},
        )

    ax.set_xlabel("Roll")
    ax.set_ylabel("Square")
    ax.set_title(f"{title} ({result.strategy}, {result.rolls} rolls)", fontsize=14, fontweight="bold")
    ax.set_ylim(bottom=0, top=max(positions + [board.final_square]) + 2)

    plt.tight_layout()
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
    return output_path

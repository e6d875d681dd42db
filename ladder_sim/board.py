"""Board layout and pawn state for the snakes & ladders simulation."""

from __future__ import annotations

from dataclasses import dataclass

FINAL_SQUARE = 25

# fmt: off
SNAKES_AND_LADDERS: dict[int, int] = {
    # Ladders (jump UP)
     3: +8,   6: +11,   9: +9,  10: +2,
    # Snakes (slide DOWN)
    14: -10, 19: -11,  22: -2,  24: -8,
}
# fmt: on


@dataclass(frozen=True)
class Board:
    """Immutable board of ``final_square + 1`` squares, indexed 0..N.

    ``squares[i]`` is the jump offset applied when the pawn lands on
    square *i*; most squares hold 0.
    """

    final_square: int
    squares: tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "squares", tuple(self.squares))
        n = self.final_square
        if n < 1:
            raise ValueError(f"Final square must be at least 1, got {n}.")
        if len(self.squares) != n + 1:
            raise ValueError(
                f"Board with final square {n} needs {n + 1} squares, got {len(self.squares)}."
            )
        for index, offset in enumerate(self.squares):
            if not offset:
                continue
            if index in (0, n):
                raise ValueError(f"Offset on square {index} is outside 1..{n - 1}.")
            dest = index + offset
            # A jump may not finish the game; only a roll can.
            if not 0 <= dest < n:
                raise ValueError(
                    f"Offset {offset:+d} on square {index} leads to {dest}, "
                    f"outside 0..{n - 1}."
                )

    def __len__(self) -> int:
        return len(self.squares)

    def offset_at(self, index: int) -> int:
        """Offset for *index*, or 0 when the index is off the board."""
        if 0 <= index < len(self.squares):
            return self.squares[index]
        return 0

    def is_ladder(self, index: int) -> bool:
        return self.offset_at(index) > 0

    def is_snake(self, index: int) -> bool:
        return self.offset_at(index) < 0

    @property
    def offsets(self) -> dict[int, int]:
        """Sparse view: only the squares holding a nonzero offset."""
        return {i: off for i, off in enumerate(self.squares) if off}


def make_board(
    final_square: int = FINAL_SQUARE,
    offsets: dict[int, int] | None = None,
) -> Board:
    """Build a board from a sparse ``{square: offset}`` mapping.

    Offsets may not sit on the start square or the final square, and must
    land strictly before the final square; :class:`Board` enforces both.
    """
    if offsets is None:
        offsets = SNAKES_AND_LADDERS
    squares = [0] * max(final_square + 1, 0)
    for index, offset in sorted(offsets.items()):
        if not 0 <= index < len(squares):
            raise ValueError(
                f"Offset on square {index} is outside 1..{final_square - 1}."
            )
        squares[index] = offset

    return Board(final_square=final_square, squares=tuple(squares))


@dataclass
class SimulationState:
    """Mutable state owned by a single simulation run."""

    position: int = 0
    die_face: int = 0

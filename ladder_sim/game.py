"""Simulation runner — moves a single pawn until it reaches the final square."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from ladder_sim.board import Board, SimulationState, make_board
from ladder_sim.die import roll_die

PRE_CHECK = "pre-check"
POST_CHECK = "post-check"
STRATEGIES = (PRE_CHECK, POST_CHECK)

DEFAULT_MAX_ROLLS = 200  # safety valve against boards that never finish
GAME_OVER_MESSAGE = "Game over!"


# ── Structured types ────────────────────────────────────────────────

@dataclass
class MoveEntry:
    """Record of a single die roll and where it left the pawn."""

    roll_number: int
    die_face: int
    start_position: int
    landing: int
    offset: int = 0
    end_position: int = 0

    @property
    def took_ladder(self) -> bool:
        return self.offset > 0

    @property
    def took_snake(self) -> bool:
        return self.offset < 0


@dataclass
class SimulationResult:
    final_position: int
    rolls: int
    reason: str  # "finished" | "max_rolls"
    strategy: str = PRE_CHECK
    moves: list[MoveEntry] = field(default_factory=list)

    @property
    def finished(self) -> bool:
        return self.reason == "finished"


# ── Observer ────────────────────────────────────────────────────────

class MoveObserver(Protocol):
    """Receives each completed move as the simulation runs."""

    def on_move(self, entry: MoveEntry) -> None: ...


@dataclass
class ListObserver:
    """Default observer — collects entries into a list."""

    entries: list[MoveEntry] = field(default_factory=list)

    def on_move(self, entry: MoveEntry) -> None:
        self.entries.append(entry)


# ── Runner ───────────────────────────────────────────────────────────

class SimulationRunner:
    """Play one full game on *board*.

    ``strategy`` picks where the bounds check sits:

    * ``"pre-check"`` tests ``position < final_square`` before each roll and
      guards the offset lookup, since a roll can carry the pawn off the end.
    * ``"post-check"`` applies the offset of the current square at the top of
      the loop body and tests the exit condition at the bottom. Any square
      looked up there already passed the bottom test, so no guard is needed.

    Both produce the same moves for the same board.
    """

    def __init__(
        self,
        board: Board | None = None,
        strategy: str = PRE_CHECK,
        max_rolls: int = DEFAULT_MAX_ROLLS,
        observer: MoveObserver | None = None,
    ):
        if strategy not in STRATEGIES:
            raise ValueError(
                f"Unknown strategy {strategy!r}; expected one of {', '.join(STRATEGIES)}."
            )
        if max_rolls < 1:
            raise ValueError(f"max_rolls must be at least 1, got {max_rolls}.")
        self.board = board if board is not None else make_board()
        self.strategy = strategy
        self.max_rolls = max_rolls
        # A caller-supplied observer sees every game; the default one only the latest.
        self._owns_observer = observer is None
        self.observer = observer or ListObserver()
        self.moves: list[MoveEntry] = []

    def play(self) -> SimulationResult:
        self.moves = []
        if self._owns_observer:
            self.observer = ListObserver()
        state = SimulationState()
        if self.strategy == POST_CHECK:
            reason = self._play_post_check(state)
        else:
            reason = self._play_pre_check(state)
        return SimulationResult(
            final_position=state.position,
            rolls=len(self.moves),
            reason=reason,
            strategy=self.strategy,
            moves=list(self.moves),
        )

    def _play_pre_check(self, state: SimulationState) -> str:
        while state.position < self.board.final_square:
            if len(self.moves) >= self.max_rolls:
                return "max_rolls"

            entry = self._roll(state)
            # Still on the board? Then take any snake or ladder.
            if state.position < len(self.board):
                entry.offset = self.board.offset_at(state.position)
                state.position += entry.offset
            entry.end_position = state.position
            self._record(entry)

        return "finished"

    def _play_post_check(self, state: SimulationState) -> str:
        pending: MoveEntry | None = None

        while True:
            # Position is 0 or a square the exit test below let through.
            offset = self.board.squares[state.position]
            state.position += offset
            if pending is not None:
                pending.offset = offset
                pending.end_position = state.position
                self._record(pending)

            if len(self.moves) >= self.max_rolls:
                return "max_rolls"

            pending = self._roll(state)
            pending.end_position = state.position
            if state.position >= self.board.final_square:
                break

        self._record(pending)
        return "finished"

    def _roll(self, state: SimulationState) -> MoveEntry:
        """Roll the die and move by the face value. Offset not applied yet."""
        start = state.position
        face = roll_die(state)
        state.position += face
        return MoveEntry(
            roll_number=len(self.moves) + 1,
            die_face=face,
            start_position=start,
            landing=state.position,
        )

    def _record(self, entry: MoveEntry) -> None:
        self.moves.append(entry)
        self.observer.on_move(entry)

"""Tests for the deterministic die."""

from ladder_sim.board import SimulationState
from ladder_sim.die import DIE_FACES, roll_die


def test_first_roll_is_one():
    assert roll_die(SimulationState()) == 1


def test_die_cycles_one_to_six():
    state = SimulationState()
    faces = [roll_die(state) for _ in range(15)]
    assert faces == [1, 2, 3, 4, 5, 6, 1, 2, 3, 4, 5, 6, 1, 2, 3]


def test_roll_updates_state():
    state = SimulationState()
    roll_die(state)
    roll_die(state)
    assert state.die_face == 2


def test_die_ignores_position():
    """The cycle does not depend on where the pawn is."""
    a = SimulationState(position=0)
    b = SimulationState(position=17)
    assert [roll_die(a) for _ in range(8)] == [roll_die(b) for _ in range(8)]


def test_wraps_after_six():
    state = SimulationState(die_face=DIE_FACES)
    assert roll_die(state) == 1

"""Deterministic die: 1..6 repeating, so every run is reproducible."""

from __future__ import annotations

from ladder_sim.board import SimulationState

DIE_FACES = 6


def roll_die(state: SimulationState) -> int:
    """Advance *state*'s die to its next face and return it."""
    state.die_face += 1
    if state.die_face > DIE_FACES:
        state.die_face = 1
    return state.die_face

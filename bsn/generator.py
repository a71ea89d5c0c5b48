"""Markov-chain driven generation of simulated vital-sign values."""

from __future__ import annotations

import copy
import random
from dataclasses import dataclass, field

from bsn.ranges import Range

STATE_COUNT = 5

# Default seed of a Mersenne Twister engine that was never explicitly seeded.
_DEFAULT_SEED = 5489


def _default_transitions() -> list[float]:
    return [0.0] * (STATE_COUNT * STATE_COUNT)


def _default_states() -> list[Range]:
    return [Range() for _ in range(STATE_COUNT)]


@dataclass
class Markov:
    """A five-state Markov chain.

    ``transitions`` holds one row of five thresholds per state; ``states``
    holds the value interval of each state.
    """

    transitions: list[float] = field(default_factory=_default_transitions)
    states: list[Range] = field(default_factory=_default_states)
    current_state: int = 0

    def __str__(self) -> str:
        return "Markov \n"


class DataGenerator:
    """Draws values from the interval of a Markov chain's current state."""

    def __init__(self, markov: Markov | None = None) -> None:
        self.markov = copy.deepcopy(markov) if markov is not None else Markov()
        self._rng = random.Random(_DEFAULT_SEED)

    def set_seed(self, seed: int | None = None) -> None:
        """Reseed the random source; with no seed, use system entropy."""
        self._rng = random.Random(seed)

    def _check_state(self) -> int:
        state = self.markov.current_state
        if not 0 <= state < STATE_COUNT:
            raise IndexError("current state is out of bounds")
        return state

    def next_state(self) -> None:
        """Move the chain to its next state using the transition thresholds."""
        roll = self._rng.randint(1, 100)
        offset = self._check_state() * STATE_COUNT
        row = self.markov.transitions[offset:offset + STATE_COUNT]
        for state, threshold in enumerate(row):
            if roll <= threshold:
                self.markov.current_state = state
                return

    def get_value(self) -> float:
        """Return a random value inside the current state's interval."""
        value_range = self.markov.states[self._check_state()]
        return self._rng.uniform(value_range.lower_bound, value_range.upper_bound)
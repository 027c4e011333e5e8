"""Monte Carlo estimate of the win rate of a fixed Monty Hall strategy.

Each trial draws the car position and the player's first pick uniformly and
independently. The reveal never changes the outcome of a fixed strategy:
switching wins exactly when the first pick was wrong, keeping wins exactly
when it was right. ``simulate_with_reveal`` plays the full three-door game
instead and exists to check that shortcut.
"""

from __future__ import annotations

import logging
import numbers
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

import numpy as np

from monty_hall.config import DOOR_COUNT
from monty_hall.errors import InvalidInput
from monty_hall.stats import wilson_interval

logger = logging.getLogger(__name__)


class Strategy(Enum):
    SWITCH = "switch"
    KEEP = "keep"

    @classmethod
    def parse(cls, value) -> "Strategy":
        """Accept a Strategy, its name ("switch"/"keep") or a bool (True = switch)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            return cls.SWITCH if value else cls.KEEP
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidInput(f"unknown strategy {value!r}")

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True)
class SimulationResult:
    trials: int
    strategy: Strategy
    wins: int
    win_percentage: float

    def confidence_interval(self, z=1.96):
        """Wilson interval for the win rate, in percent."""
        _, low, high = wilson_interval(self.wins, self.trials, z=z)
        return round(low * 100, 1), round(high * 100, 1)


def _check_trial_count(trial_count) -> int:
    if isinstance(trial_count, bool) or not isinstance(trial_count, numbers.Integral):
        raise InvalidInput(f"trial count must be an integer, got {trial_count!r}")
    if trial_count < 1:
        raise InvalidInput(f"trial count must be at least 1, got {trial_count}")
    return int(trial_count)


def win_percentage(wins, trials) -> float:
    """Percentage to one decimal place, exact ties rounded up (6.25 -> 6.3)."""
    return float(Decimal(wins / trials * 100).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def _result(trials, strategy, wins) -> SimulationResult:
    pct = win_percentage(wins, trials)
    logger.info(
        "Simulated %d trials with %s strategy: %.1f%% wins",
        trials, strategy.value, pct,
    )
    return SimulationResult(
        trials=trials, strategy=strategy, wins=wins, win_percentage=pct,
    )


class StrategySimulator:
    def __init__(self, rng=None):
        self._rng = rng if rng is not None else np.random.default_rng()

    def simulate(self, trial_count, strategy) -> SimulationResult:
        trials = _check_trial_count(trial_count)
        strategy = Strategy.parse(strategy)

        car = self._rng.integers(DOOR_COUNT, size=trials)
        initial_pick = self._rng.integers(DOOR_COUNT, size=trials)
        if strategy is Strategy.SWITCH:
            wins = int(np.count_nonzero(initial_pick != car))
        else:
            wins = int(np.count_nonzero(initial_pick == car))
        return _result(trials, strategy, wins)

    def simulate_with_reveal(self, trial_count, strategy) -> SimulationResult:
        """Play every trial as a full game: pick, goat reveal, then keep or switch."""
        trials = _check_trial_count(trial_count)
        strategy = Strategy.parse(strategy)

        doors = np.arange(DOOR_COUNT)
        wins = 0
        for _ in range(trials):
            car = int(self._rng.integers(DOOR_COUNT))
            pick = int(self._rng.integers(DOOR_COUNT))
            goats = doors[(doors != car) & (doors != pick)]
            opened = int(self._rng.choice(goats))
            if strategy is Strategy.SWITCH:
                pick = int(doors[(doors != pick) & (doors != opened)][0])
            wins += pick == car
        return _result(trials, strategy, wins)


def simulate(trial_count, strategy, rng=None) -> SimulationResult:
    return StrategySimulator(rng).simulate(trial_count, strategy)

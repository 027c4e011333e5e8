"""Pytest fixtures for the Monty Hall tests."""

import numpy as np
import pytest


class FixedCarRng:
    """Stands in for a numpy Generator: car always behind ``car``.

    ``choice`` returns the option at ``reveal_index`` (clamped), so tests can
    steer which goat door the host opens.
    """

    def __init__(self, car, reveal_index=0):
        self.car = car
        self.reveal_index = reveal_index
        self.choice_calls = 0

    def integers(self, high, size=None):
        return self.car

    def choice(self, options):
        self.choice_calls += 1
        return options[min(self.reveal_index, len(options) - 1)]


@pytest.fixture
def seeded_rng():
    """Provide a deterministic numpy Generator for tests."""
    return np.random.default_rng(42)


@pytest.fixture
def car_at_two():
    return FixedCarRng(car=2)

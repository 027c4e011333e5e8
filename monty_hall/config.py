"""Settings shared by the core and the Streamlit host."""

import os

import numpy as np

DOOR_COUNT = 3

# Host policies, not enforced by the core
HISTORY_SIZE = 10
MAX_SIMULATION_TRIALS = 1000
DEFAULT_SIMULATION_TRIALS = 100
REVEAL_DELAY_SECONDS = 0.5

LOG_LEVEL_ENV = "MONTY_LOG_LEVEL"
SEED_ENV = "MONTY_SEED"


def session_seed():
    raw = os.getenv(SEED_ENV)
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{SEED_ENV} must be an integer, got {raw!r}") from exc


def make_rngs(count, seed=None):
    """Return ``count`` independent Generators spawned from one seed.

    Each component gets its own stream, and MONTY_SEED still replays all of them.
    """
    if seed is None:
        seed = session_seed()
    return [np.random.default_rng(child) for child in np.random.SeedSequence(seed).spawn(count)]

import logging

import pytest

from monty_hall import config
from monty_hall.logging_config import configure_logging


def test_make_rngs_is_reproducible_with_seed():
    a = config.make_rngs(1, seed=5)[0].integers(3, size=20)
    b = config.make_rngs(1, seed=5)[0].integers(3, size=20)
    assert (a == b).all()


def test_session_seed_from_env(monkeypatch):
    monkeypatch.setenv(config.SEED_ENV, "123")
    assert config.session_seed() == 123


@pytest.mark.parametrize("raw", [None, ""])
def test_session_seed_unset(monkeypatch, raw):
    if raw is None:
        monkeypatch.delenv(config.SEED_ENV, raising=False)
    else:
        monkeypatch.setenv(config.SEED_ENV, raw)
    assert config.session_seed() is None


def test_configure_logging_explicit_level():
    logger = configure_logging(level="debug")
    assert logger.name == "monty_hall"
    assert logger.level == logging.DEBUG


def test_configure_logging_from_env(monkeypatch):
    monkeypatch.setenv(config.LOG_LEVEL_ENV, "warning")
    assert configure_logging().level == logging.WARNING


def test_session_seed_rejects_non_integer(monkeypatch):
    monkeypatch.setenv(config.SEED_ENV, "abc")
    with pytest.raises(ValueError, match=config.SEED_ENV):
        config.session_seed()


def test_make_rngs_are_independent_and_reproducible():
    first = config.make_rngs(2, seed=9)
    second = config.make_rngs(2, seed=9)
    a, b = (rng.integers(1000, size=20) for rng in first)
    assert not (a == b).all()
    assert first[0] is not first[1]

    # advancing one stream leaves the other untouched
    second[1].integers(1000, size=500)
    assert (second[0].integers(1000, size=20) == a).all()


def test_make_rngs_use_session_seed(monkeypatch):
    monkeypatch.setenv(config.SEED_ENV, "4")
    a = [rng.integers(1000, size=10) for rng in config.make_rngs(2)]
    b = [rng.integers(1000, size=10) for rng in config.make_rngs(2, seed=4)]
    assert all((x == y).all() for x, y in zip(a, b))

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from monty_hall.engine import Phase, RoundEngine
from tests.conftest import FixedCarRng

APP = str(Path(__file__).resolve().parent.parent / "monty-hall.py")


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setenv("MONTY_SEED", "1")
    at = AppTest.from_file(APP, default_timeout=10)
    at.run()
    assert not at.exception
    return at


def test_engine_and_simulator_get_separate_generators(app):
    engine_rng = app.session_state["engine"]._rng
    simulator_rng = app.session_state["simulator"]._rng
    assert engine_rng is not simulator_rng


def test_simulation_does_not_move_engine_stream(app):
    engine_rng = app.session_state["engine"]._rng
    before = engine_rng.bit_generator.state
    app.button(key="run_simulation").click().run()
    assert len(app.session_state["sim_history"]) == 1
    assert engine_rng.bit_generator.state == before


def test_pick_reveals_a_door(app):
    app.button(key="door_0").click().run()
    rnd = app.session_state["round"]
    assert rnd.phase is Phase.PICKED
    assert rnd.revealed_door_id is not None
    assert app.session_state["just_revealed"] is False


def test_rejected_pick_does_not_flag_a_reveal(app):
    app.button(key="door_0").click().run()
    # the page still shows a fresh round while the engine is mid-round
    app.session_state["round"] = RoundEngine(FixedCarRng(car=2)).snapshot()
    app.run()
    app.button(key="door_1").click().run()

    assert app.session_state["just_revealed"] is False
    assert app.session_state["error"]
    assert len(app.warning) == 1

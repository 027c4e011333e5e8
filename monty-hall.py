# app.py
import time

import altair as alt
import streamlit as st

from monty_hall.config import (
    DEFAULT_SIMULATION_TRIALS,
    MAX_SIMULATION_TRIALS,
    REVEAL_DELAY_SECONDS,
    make_rngs,
)
from monty_hall.engine import Phase, RoundEngine
from monty_hall.errors import MontyHallError
from monty_hall.history import PlayLog, SimulationHistory
from monty_hall.logging_config import configure_logging
from monty_hall.simulator import Strategy, StrategySimulator
from monty_hall.stats import running_win_rates, strategy_summary

logger = configure_logging()

###############################################################################
# App state init
###############################################################################
st.set_page_config(page_title="Monty Hall Simulator", page_icon="🚪", layout="wide")

# CSS: color primary (green) vs secondary (light gray) buttons
st.markdown("""
<style>
/* Green primary button */
div.stButton > button[kind="primary"] {
    background-color: #22c55e !important; /* green */
    color: #ffffff !important;
}
/* Light gray secondary button */
div.stButton > button[kind="secondary"] {
    background-color: #e5e7eb !important; /* light gray */
    color: #111827 !important;
    border: 1px solid #d1d5db !important;
}
</style>
""", unsafe_allow_html=True)

if "engine" not in st.session_state:
    # Separate streams per component; MONTY_SEED replays both
    engine_rng, simulator_rng = make_rngs(2)
    st.session_state.engine = RoundEngine(engine_rng)
    st.session_state.simulator = StrategySimulator(simulator_rng)
    st.session_state.sim_history = SimulationHistory()
    st.session_state.play_log = PlayLog()
    st.session_state.round = st.session_state.engine.snapshot()
    st.session_state.just_revealed = False
    st.session_state.error = None

engine = st.session_state.engine

###############################################################################
# Actions (run as button callbacks, before the page re-renders)
###############################################################################
def run_action(action, *args):
    st.session_state.error = None
    try:
        st.session_state.round = action(*args)
    except MontyHallError as exc:
        logger.warning("Rejected %s%r: %s", action.__name__, args, exc)
        st.session_state.error = str(exc)
        return False
    if st.session_state.round.phase is Phase.RESOLVED:
        st.session_state.play_log.record(st.session_state.round)
    return True


def on_door_click(door_id):
    phase = st.session_state.round.phase
    if phase is Phase.INITIAL:
        if run_action(engine.pick, door_id):
            st.session_state.just_revealed = True
    elif phase is Phase.PICKED:
        run_action(engine.switch_to, door_id)


def on_reset():
    st.session_state.error = None
    st.session_state.round = engine.reset()


def on_simulate():
    st.session_state.error = None
    try:
        result = st.session_state.simulator.simulate(
            st.session_state.sim_count,
            Strategy.parse(st.session_state.switch_strategy),
        )
    except MontyHallError as exc:
        st.session_state.error = str(exc)
        return
    st.session_state.sim_history.add(result)


###############################################################################
# Title
###############################################################################
st.title("🚪 Monty Hall Simulator")
st.write("Pick a door, watch Monty reveal a goat, then keep or switch. "
         "Run batch simulations to see how each strategy fares over many games.")

if st.session_state.error:
    st.warning(st.session_state.error)

left, right = st.columns([1.1, 1])

###############################################################################
# Left: Game interface
###############################################################################
with left:
    st.subheader("Game")
    st.caption("1) Pick a door → 2) Monty reveals a goat → 3) Keep or switch → 4) Reveal outcome")

    rnd = st.session_state.round

    if st.session_state.just_revealed and rnd.phase is Phase.PICKED:
        with st.spinner("Monty is opening a door..."):
            time.sleep(REVEAL_DELAY_SECONDS)
        st.session_state.just_revealed = False

    dcols = st.columns(3)
    for door in rnd.doors:
        with dcols[door.id]:
            label = f"Door {door.id + 1}"
            if door.is_selected:
                label += " ⭐"
            st.markdown(f"**{label}**")
            if door.is_open:
                st.markdown(
                    f"<div style='font-size:64px; text-align:center;'>{'🚗' if door.has_car else '🐐'}</div>",
                    unsafe_allow_html=True,
                )
            else:
                st.markdown("<div style='font-size:64px; text-align:center;'>🚪</div>", unsafe_allow_html=True)

            if rnd.phase is Phase.INITIAL:
                clickable = True
            elif rnd.phase is Phase.PICKED:
                clickable = door.id == rnd.other_closed_door_id
            else:
                clickable = False
            st.button(
                "Pick" if rnd.phase is Phase.INITIAL else "Switch here",
                key=f"door_{door.id}",
                disabled=not clickable,
                on_click=on_door_click,
                args=(door.id,),
                use_container_width=True,
            )

    if rnd.phase is Phase.PICKED:
        st.markdown("#### Monty reveals a goat behind:")
        st.info(f"Door {rnd.revealed_door_id + 1}")
        st.write("Would you like to switch your choice?")
        c1, c2 = st.columns(2)
        with c1:
            st.button("Switch", on_click=on_door_click, args=(rnd.other_closed_door_id,),
                      use_container_width=True, type="primary")
        with c2:
            st.button("Keep", on_click=run_action, args=(engine.keep,), use_container_width=True)

    if rnd.phase is Phase.RESOLVED:
        if rnd.won:
            st.success("Congratulations! You won the car! 🎉")
        else:
            st.error("Sorry! Better luck next time! 🐐")
        st.write(f"Car was behind **Door {rnd.car_door_id + 1}**. "
                 f"You ended on **Door {rnd.selected_door_id + 1}** "
                 f"({'switched' if rnd.switched else 'kept'}).")

    btn_type = "primary" if rnd.phase is Phase.RESOLVED else "secondary"
    st.button("Play Again" if rnd.phase is Phase.RESOLVED else "Start / Reset Round",
              on_click=on_reset, use_container_width=True, type=btn_type)

###############################################################################
# Right: Simulation + session statistics
###############################################################################
with right:
    st.subheader("Run Simulation")
    c1, c2 = st.columns([1, 1])
    with c1:
        st.number_input("Trials", min_value=1, max_value=MAX_SIMULATION_TRIALS,
                        value=DEFAULT_SIMULATION_TRIALS, step=1, key="sim_count")
    with c2:
        st.toggle("Switch (off = Keep)", value=True, key="switch_strategy")
    st.button("Run Simulation", key="run_simulation", on_click=on_simulate, use_container_width=True)

    history = st.session_state.sim_history
    if len(history):
        st.dataframe(history.to_frame(), use_container_width=True, hide_index=True)
        latest = next(iter(history))
        low, high = latest.confidence_interval()
        st.caption(f"Latest run: {latest.win_percentage}% wins (95% CI {low}% to {high}%).")

    st.subheader("Your Games")
    plays = st.session_state.play_log.to_frame()
    if plays.empty:
        st.info("No games played yet. Play a round to populate statistics.")
    else:
        c1, c2, c3 = st.columns(3)
        with c1:
            st.metric("Total games", f"{len(plays):,}")
        with c2:
            st.metric("Times switched", f"{int(plays['switched'].sum()):,}")
        with c3:
            st.metric("Total wins", f"{int(plays['won'].sum()):,}")

        st.dataframe(strategy_summary(plays), use_container_width=True, hide_index=True)

        st.markdown("#### Running win rate over time (by strategy)")
        line = alt.Chart(running_win_rates(plays)).mark_line().encode(
            x=alt.X("idx:Q", title="Game count"),
            y=alt.Y("rate:Q", title="Running win rate", scale=alt.Scale(domain=[0, 1])),
            color=alt.Color("series:N", title="Series"),
            tooltip=["series", "idx", "rate"]
        )
        st.altair_chart(line, use_container_width=True)

###############################################################################
# Footer / Help
###############################################################################
st.markdown("---")
st.markdown(
"""
**How it works (conditional probability view):** Initially your door has a 1/3 chance of hiding the car.
Monty—who knows where the car is—*must* open a different door with a goat. That action concentrates the remaining
2/3 probability mass onto the other unopened door, so switching wins with probability ~2/3 in the long run.
"""
)

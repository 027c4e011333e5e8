"""Single-round Monty Hall state machine.

A round moves strictly forward: INITIAL -> PICKED -> RESOLVED. Picking a door
immediately opens one goat door the player did not pick; the player then keeps
or switches to the one remaining closed door, and every door opens.

The engine performs no I/O. Each action returns a read-only ``Round`` snapshot
which the host renders however it likes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

import numpy as np

from monty_hall.config import DOOR_COUNT
from monty_hall.errors import InvalidMove, WrongPhase

logger = logging.getLogger(__name__)

DOOR_IDS = tuple(range(DOOR_COUNT))


class Phase(Enum):
    INITIAL = "initial"
    PICKED = "picked"
    RESOLVED = "resolved"


@dataclass(frozen=True)
class Door:
    id: int
    has_car: bool
    is_open: bool = False
    is_selected: bool = False


@dataclass(frozen=True)
class Round:
    doors: Tuple[Door, ...]
    phase: Phase
    selected_door_id: Optional[int] = None
    revealed_door_id: Optional[int] = None
    first_pick: Optional[int] = None
    won: bool = False

    @property
    def car_door_id(self) -> int:
        return next(d.id for d in self.doors if d.has_car)

    @property
    def switched(self) -> bool:
        return (
            self.first_pick is not None
            and self.selected_door_id is not None
            and self.selected_door_id != self.first_pick
        )

    @property
    def other_closed_door_id(self) -> Optional[int]:
        """The only legal switch target, once a goat door has been revealed."""
        if self.phase is not Phase.PICKED:
            return None
        return other_closed(self.selected_door_id, self.revealed_door_id)


###############################################################################
# Game mechanics
###############################################################################
def place_car(rng) -> int:
    return int(rng.integers(DOOR_COUNT))


def monty_opens(chosen, car, rng) -> int:
    # Monty opens a goat door that is not the player's chosen door
    options = [d for d in DOOR_IDS if d != car and d != chosen]
    return int(rng.choice(options))


def other_closed(chosen, monty_open) -> int:
    return [d for d in DOOR_IDS if d not in (chosen, monty_open)][0]


class RoundEngine:
    """Enforces the legal sequence of actions in one round and scores it."""

    def __init__(self, rng=None):
        self._rng = rng if rng is not None else np.random.default_rng()
        self._new_round()

    def _new_round(self):
        self._car_door = place_car(self._rng)
        self._phase = Phase.INITIAL
        self._first_pick = None
        self._selected = None
        self._revealed = None
        self._won = False

    @property
    def phase(self) -> Phase:
        return self._phase

    def snapshot(self) -> Round:
        resolved = self._phase is Phase.RESOLVED
        doors = tuple(
            Door(
                id=i,
                has_car=i == self._car_door,
                is_open=resolved or i == self._revealed,
                is_selected=i == self._selected,
            )
            for i in DOOR_IDS
        )
        return Round(
            doors=doors,
            phase=self._phase,
            selected_door_id=self._selected,
            revealed_door_id=self._revealed,
            first_pick=self._first_pick,
            won=self._won,
        )

    def _require_phase(self, action, phase):
        if self._phase is not phase:
            raise WrongPhase(action, self._phase)

    @staticmethod
    def _check_door_id(door_id):
        # bool is an int subclass; True is not a door
        if isinstance(door_id, bool) or not isinstance(door_id, (int, np.integer)):
            raise InvalidMove(f"door id must be an integer, got {door_id!r}")
        if door_id not in DOOR_IDS:
            raise InvalidMove(f"door id {door_id} is out of range 0..{DOOR_COUNT - 1}")
        return int(door_id)

    def pick(self, door_id) -> Round:
        self._require_phase("pick", Phase.INITIAL)
        door_id = self._check_door_id(door_id)

        revealed = monty_opens(door_id, self._car_door, self._rng)
        self._first_pick = door_id
        self._selected = door_id
        self._revealed = revealed
        self._phase = Phase.PICKED
        logger.debug("Picked door %d, host opened door %d", door_id, revealed)
        return self.snapshot()

    def keep(self) -> Round:
        self._require_phase("keep", Phase.PICKED)
        return self._resolve()

    def switch_to(self, door_id) -> Round:
        self._require_phase("switch", Phase.PICKED)
        door_id = self._check_door_id(door_id)
        if door_id == self._selected:
            raise InvalidMove(f"door {door_id} is already selected")
        if door_id == self._revealed:
            raise InvalidMove(f"door {door_id} is already open")

        self._selected = door_id
        return self._resolve()

    def _resolve(self) -> Round:
        self._won = self._selected == self._car_door
        self._phase = Phase.RESOLVED
        logger.debug(
            "Round resolved on door %d (car behind %d): %s",
            self._selected,
            self._car_door,
            "win" if self._won else "loss",
        )
        return self.snapshot()

    def reset(self) -> Round:
        self._new_round()
        logger.debug("Round reset")
        return self.snapshot()

"""In-process records kept by the host: simulation runs and played rounds."""

from collections import deque
from datetime import datetime, timezone

import pandas as pd

from monty_hall.config import HISTORY_SIZE
from monty_hall.engine import Phase
from monty_hall.errors import WrongPhase

PLAY_COLUMNS = ["ts", "first_pick", "car_door", "monty_open", "switched", "final_pick", "won"]


class SimulationHistory:
    """Most-recent-first list of simulation results, capped at ``maxlen``."""

    def __init__(self, maxlen=HISTORY_SIZE):
        self._results = deque(maxlen=maxlen)

    def add(self, result):
        self._results.appendleft(result)
        return result

    def clear(self):
        self._results.clear()

    def __iter__(self):
        return iter(self._results)

    def __len__(self):
        return len(self._results)

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            [
                {
                    "Runs": r.trials,
                    "Strategy": r.strategy.label,
                    "Win %": r.win_percentage,
                }
                for r in self._results
            ],
            columns=["Runs", "Strategy", "Win %"],
        )


class PlayLog:
    """Resolved rounds played in this session. Nothing is written to disk."""

    def __init__(self):
        self._rows = []

    def record(self, round_):
        if round_.phase is not Phase.RESOLVED:
            raise WrongPhase("record", round_.phase)
        row = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "first_pick": round_.first_pick,
            "car_door": round_.car_door_id,
            "monty_open": round_.revealed_door_id,
            "switched": int(round_.switched),
            "final_pick": round_.selected_door_id,
            "won": int(round_.won),
        }
        self._rows.append(row)
        return row

    def __len__(self):
        return len(self._rows)

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(self._rows, columns=PLAY_COLUMNS)

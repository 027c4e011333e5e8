"""Monty Hall round engine and strategy simulator."""

from monty_hall.engine import Door, Phase, Round, RoundEngine
from monty_hall.errors import InvalidInput, InvalidMove, MontyHallError, WrongPhase
from monty_hall.simulator import SimulationResult, Strategy, StrategySimulator, simulate

__all__ = [
    "Door",
    "InvalidInput",
    "InvalidMove",
    "MontyHallError",
    "Phase",
    "Round",
    "RoundEngine",
    "SimulationResult",
    "Strategy",
    "StrategySimulator",
    "WrongPhase",
    "simulate",
]

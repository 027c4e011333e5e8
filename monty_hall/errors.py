"""Errors raised by the round engine and the strategy simulator."""


class MontyHallError(Exception):
    """Base class for rejected operations."""


class InvalidMove(MontyHallError):
    """The door target is not legal right now."""


class WrongPhase(MontyHallError):
    """The action is not legal in the round's current phase."""

    def __init__(self, action, phase):
        self.action = action
        self.phase = phase
        super().__init__(f"cannot {action} while round is {phase.value}")


class InvalidInput(MontyHallError, ValueError):
    """Simulator input outside its domain."""

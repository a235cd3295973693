"""Exceptions raised by the poker engine."""


class PokerError(Exception):
    """Base class for all engine errors."""


class RangeError(PokerError, ValueError):
    """An argument is outside its allowed range."""


class StateError(PokerError, RuntimeError):
    """An operation was called in a state that does not allow it."""

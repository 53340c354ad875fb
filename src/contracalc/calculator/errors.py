"""
Exceptions raised by the belt calculator.

All of them derive from ValueError so callers that already guard
numeric input with ``except ValueError`` keep working.
"""


class BeltCalcError(ValueError):
    """Base class for calculator failures."""
    pass


class InvalidInputError(BeltCalcError):
    """Raised when an input lies outside the documented domain.

    Negative tooth counts, non-positive pitch, non-finite values and
    zero/negative desired spacing all end up here.
    """
    pass


class NoPhysicalSolutionError(BeltCalcError):
    """Raised when no real pulley spacing exists for the given belt.

    The belt is too short to span both pulleys (the solver's
    discriminant is negative).
    """
    pass

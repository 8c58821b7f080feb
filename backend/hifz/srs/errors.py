"""Errors raised by the scheduling core."""


class InvalidArgumentError(ValueError):
    """Raised when a scheduling function receives a value it cannot work with.

    Covers unknown quality ratings, unknown schedule profiles and schedule
    states that violate their bounds (negative interval, strength factor
    outside [1.3, 3.0], ...).
    """

    pass

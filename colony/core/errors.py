# core/errors.py — fatal simulation errors


class InvariantViolation(RuntimeError):
    """
    Raised when an ownership or protocol invariant is broken: a stale registry
    id, a work entry finished twice, a pop on an empty state stack.

    Never caught inside the simulation. Continuing after one would risk
    corrupting another robot's state.
    """

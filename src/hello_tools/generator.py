"""
Bounded random number generator.

Draws one integer uniformly from a closed range. A simulated transient
failure can be injected through a predicate, by default one that fires when
the wall clock in seconds is a multiple of ``SIMULATED_FAILURE_PERIOD``.
"""

import random
import time
from collections.abc import Callable

from .models import GenerationResult, MinMaxRange
from .settings import FailureMode

SIMULATED_FAILURE_MESSAGE = "Random error occurred (simulated)"
SIMULATED_FAILURE_PERIOD = 10

FailurePolicy = Callable[[], bool]


class SimulatedTransientFailure(RuntimeError):
    """Raised when the generator simulates an intermittent failure."""

    def __init__(self, message: str = SIMULATED_FAILURE_MESSAGE) -> None:
        super().__init__(message)
        self.message = message


class InvalidRangeError(ValueError):
    """Raised when a range has ``min > max``."""


def clock_failure(now: Callable[[], float] | None = None) -> bool:
    """Return True when the current second is a multiple of the failure period."""
    seconds = (now or time.time)()
    return int(seconds) % SIMULATED_FAILURE_PERIOD == 0


def never_fail() -> bool:
    return False


def always_fail() -> bool:
    return True


_POLICIES: dict[FailureMode, FailurePolicy] = {
    FailureMode.CLOCK: clock_failure,
    FailureMode.NEVER: never_fail,
    FailureMode.ALWAYS: always_fail,
}


def failure_policy(mode: FailureMode | str) -> FailurePolicy:
    """Return the failure predicate configured for `mode`."""
    return _POLICIES[FailureMode(mode)]


def generate(
    value_range: MinMaxRange,
    *,
    should_fail: FailurePolicy = clock_failure,
) -> GenerationResult:
    """Return a random integer between range min and max (inclusive), or a failure."""
    if value_range.min > value_range.max:
        raise InvalidRangeError(
            f"Invalid range: min={value_range.min} is greater than max={value_range.max}"
        )
    try:
        value = _draw(value_range, should_fail)
    except SimulatedTransientFailure as exc:
        return GenerationResult.failure(exc.message)
    return GenerationResult.success(value)


def _draw(value_range: MinMaxRange, should_fail: FailurePolicy) -> int:
    if should_fail():
        raise SimulatedTransientFailure()
    return random.randint(value_range.min, value_range.max)

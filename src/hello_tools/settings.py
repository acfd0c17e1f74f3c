"""Settings helpers for the hello tools."""

from enum import Enum

from hopeit.dataobjects import dataclass, dataobject

from .models import MAX_NUMBER, MIN_NUMBER

SETTINGS_KEY = "generator"


class FailureMode(str, Enum):
    """When the generator reports a simulated transient failure."""

    CLOCK = "clock"
    NEVER = "never"
    ALWAYS = "always"


@dataobject
@dataclass
class GeneratorSettings:
    """Configurable defaults for the random number generator."""

    minimum: int = MIN_NUMBER
    maximum: int = MAX_NUMBER
    failure_mode: FailureMode = FailureMode.CLOCK


"""Data objects for the hello tools."""

from enum import Enum

from hopeit.dataobjects import dataclass, dataobject, field

MIN_NUMBER = 1
MAX_NUMBER = 100


class GenerationStatus(str, Enum):
    """Outcome of a random number generation."""

    SUCCESS = "success"
    FAILURE = "failure"


@dataobject
@dataclass
class MinMaxRange:
    """Specify a minimum and maximum integer, both inclusive"""

    min: int = MIN_NUMBER
    max: int = MAX_NUMBER


@dataobject
@dataclass
class RandomNumberRequest:
    """Request payload for the random number event."""

    range: MinMaxRange = field(default_factory=MinMaxRange)


@dataobject
@dataclass
class GenerationResult:
    """Generated value, or the reason generation failed."""

    status: GenerationStatus
    value: int | None = None
    error_message: str | None = None

    @classmethod
    def success(cls, value: int) -> "GenerationResult":
        return cls(status=GenerationStatus.SUCCESS, value=value)

    @classmethod
    def failure(cls, message: str) -> "GenerationResult":
        return cls(status=GenerationStatus.FAILURE, error_message=message)

    @property
    def ok(self) -> bool:
        return self.status is GenerationStatus.SUCCESS


@dataobject
@dataclass
class SumNumbersRequest:
    """Request payload for the sum numbers event."""

    numbers: list[int] = field(default_factory=lambda: [1, 2, 3, 4, 5])


@dataobject
@dataclass
class SumNumbersResponse:
    """Response for the sum numbers event."""

    result: int

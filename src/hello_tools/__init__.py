"""Hello-world demonstration tools: bounded random numbers and list sums."""

from .calculator import calculate_sum
from .generator import SimulatedTransientFailure, generate
from .models import GenerationResult, MinMaxRange

__all__ = [
    "GenerationResult",
    "MinMaxRange",
    "SimulatedTransientFailure",
    "calculate_sum",
    "generate",
]

import argparse
import sys
from collections.abc import Sequence

from hello_tools.calculator import calculate_sum
from hello_tools.generator import failure_policy, generate
from hello_tools.models import MinMaxRange
from hello_tools.settings import GeneratorSettings

DEFAULT_NUMBERS = [1, 2, 3, 4, 5]


def parse_hello_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="hello",
        description="Print a greeting with a random number between 1 and 100.",
    )
    return parser.parse_args(argv)


def parse_sum_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="sum-calc", description="Sum a list of integers.")
    parser.add_argument(
        "numbers",
        nargs="*",
        type=int,
        default=DEFAULT_NUMBERS,
        help="Integers to add up. Defaults to 1 2 3 4 5.",
    )
    return parser.parse_args(argv)


def hello_main(
    argv: Sequence[str] | None = None,
    *,
    settings: GeneratorSettings | None = None,
) -> int:
    """Print `Hello, world! <n>` and return the process exit code."""
    parse_hello_args(argv)
    settings = settings or GeneratorSettings()
    result = generate(
        MinMaxRange(min=settings.minimum, max=settings.maximum),
        should_fail=failure_policy(settings.failure_mode),
    )
    if not result.ok:
        print(f"Error generating random number: {result.error_message}", file=sys.stderr)
        return 1
    print(f"Hello, world! {result.value}")
    return 0


def sum_main(argv: Sequence[str] | None = None) -> int:
    """Print `Sum: <total>` for the given numbers and return the process exit code."""
    args = parse_sum_args(argv)
    print(f"Sum: {calculate_sum(args.numbers)}")
    return 0


def main() -> None:
    sys.exit(hello_main())


def sum_calc() -> None:
    sys.exit(sum_main())

"""Random number generator event."""

from hopeit.app.api import event_api
from hopeit.app.context import EventContext
from hopeit.app.logger import app_extra_logger

from hello_tools.generator import failure_policy, generate
from hello_tools.models import GenerationResult, MinMaxRange, RandomNumberRequest
from hello_tools.settings import SETTINGS_KEY, GeneratorSettings

__steps__ = ["generate_random"]

__api__ = event_api(
    summary="hello-tools: generate random number",
    payload=(RandomNumberRequest, "Random number request"),
    responses={
        200: (GenerationResult, "Generated value or simulated failure"),
    },
)

logger, extra = app_extra_logger()


async def generate_random(
    payload: RandomNumberRequest,
    context: EventContext,
) -> GenerationResult:
    """Return a random integer between range min and max (inclusive)."""
    settings = context.settings(key=SETTINGS_KEY, datatype=GeneratorSettings)
    minimum, maximum = payload.range.min, payload.range.max
    if minimum > maximum:
        minimum, maximum = maximum, minimum
        logger.warning(
            context, "random_bounds_swapped", extra=extra(minimum=minimum, maximum=maximum)
        )

    result = generate(
        MinMaxRange(min=minimum, max=maximum),
        should_fail=failure_policy(settings.failure_mode),
    )
    if result.ok:
        logger.info(
            context,
            "random_generated",
            extra=extra(value=result.value, minimum=minimum, maximum=maximum),
        )
    else:
        logger.warning(
            context, "random_generation_failed", extra=extra(error=result.error_message)
        )
    return result

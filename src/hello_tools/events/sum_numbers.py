"""Sum a list of numbers event."""

from hopeit.app.api import event_api
from hopeit.app.context import EventContext
from hopeit.app.logger import app_extra_logger

from hello_tools.calculator import calculate_sum
from hello_tools.models import SumNumbersRequest, SumNumbersResponse

__steps__ = ["sum_numbers"]

__api__ = event_api(
    summary="hello-tools: sum numbers",
    payload=(SumNumbersRequest, "Sum numbers request"),
    responses={
        200: (SumNumbersResponse, "Sum numbers response"),
    },
)

logger, extra = app_extra_logger()


async def sum_numbers(
    payload: SumNumbersRequest,
    context: EventContext,
) -> SumNumbersResponse:
    """Return the sum of a list of integer numbers."""
    value = calculate_sum(payload.numbers)
    logger.info(context, "sum_calculated", extra=extra(count=len(payload.numbers), result=value))
    return SumNumbersResponse(result=value)

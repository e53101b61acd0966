# figure_service/adapters/api/routers/figure.py
from typing import Tuple

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse

from figure_service.adapters.api.dependencies import (
    get_classify_point_use_case,
    get_coordinate_tokens,
)
from figure_service.core.use_cases.classify_point import ClassifyPoint, format_result

router = APIRouter(tags=["Figure"])


@router.get(
    "/figure",
    response_class=PlainTextResponse,
    status_code=status.HTTP_200_OK,
    summary="Locate a point relative to the figure",
    responses={
        status.HTTP_400_BAD_REQUEST: {
            "description": "Rejected coordinates, e.g. `error: out of range`",
            "content": {"text/plain": {}},
        },
    },
)
async def locate_point(
    tokens: Tuple[str, str] = Depends(get_coordinate_tokens),
    use_case: ClassifyPoint = Depends(get_classify_point_use_case),
) -> PlainTextResponse:
    """
    Classifies the point given by the `x` and `y` query parameters.

    **Query Parameters** (both required, no others allowed):
    * `x`, `y`: base-10 integers in [-100, 100].

    **Returns:**
    * `inside`, `border` or `outside` as plain text.

    Rejected input is answered with `400` and an `error: ...` body by the
    application's coordinate error handler.
    """
    x_token, y_token = tokens
    relation = use_case.execute_pair(x_token, y_token)
    return PlainTextResponse(format_result(relation))

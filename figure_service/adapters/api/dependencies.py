# figure_service/adapters/api/dependencies.py
from typing import FrozenSet, Tuple

from dependency_injector.wiring import Provide, inject
from fastapi import Depends, Request

from figure_service.core.domain.exceptions import (
    BadFormatError,
    EmptyStringError,
    OneCoordError,
)
from figure_service.core.use_cases.classify_point import ClassifyPoint
from figure_service.shared.container import Container

# -----------------------------------------------------------------------------
# Query string: closed field set
# -----------------------------------------------------------------------------
# FastAPI's Query() silently drops parameters it was not told about, so the
# raw query string is checked against this allow-list instead.
ALLOWED_QUERY_FIELDS: FrozenSet[str] = frozenset({"x", "y"})


def get_coordinate_tokens(request: Request) -> Tuple[str, str]:
    """
    Extracts the raw ``x`` and ``y`` tokens from the query string.

    - Unknown or repeated fields are a format error.
    - No coordinates at all is an empty request; only one of them is a
      single-coordinate request.

    Token contents are not inspected here; the use case validates them.
    """
    params = request.query_params
    names = list(params.keys())

    unknown = [name for name in names if name not in ALLOWED_QUERY_FIELDS]
    if unknown:
        raise BadFormatError(unknown[0])

    for name in ALLOWED_QUERY_FIELDS:
        if len(params.getlist(name)) > 1:
            raise BadFormatError(name)

    present = ALLOWED_QUERY_FIELDS.intersection(names)
    if not present:
        raise EmptyStringError()
    if len(present) == 1:
        raise OneCoordError()

    return params["x"], params["y"]


# -----------------------------------------------------------------------------
# Use case injection
# -----------------------------------------------------------------------------
@inject
def get_classify_point_use_case(
    use_case: ClassifyPoint = Depends(Provide[Container.classify_point_use_case]),
) -> ClassifyPoint:
    """Dependency to inject the ClassifyPoint interactor (container-managed)."""
    return use_case

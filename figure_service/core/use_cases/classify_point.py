# figure_service/core/use_cases/classify_point.py
from typing import Union

import structlog

from figure_service.core.domain.exceptions import CoordinateError
from figure_service.core.domain.geometry import classify_point
from figure_service.core.domain.models import Point, Relation
from figure_service.core.domain.validation import parse_line, parse_pair
from figure_service.shared.telemetry import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)


class ClassifyPoint:
    """
    Use Case: Tells whether a point is inside, on the border of, or outside the figure.

    Responsibilities:
    1. Turns raw coordinate text into a validated Point (fail fast).
    2. Runs the pure geometric classification.
    3. Traces and logs each classification for observability.

    Holds no state; a single instance may serve any number of requests.
    """

    def execute(self, point: Point) -> Relation:
        with tracer.start_as_current_span("use_case.classify_point") as span:
            span.set_attribute("figure.x", point.x)
            span.set_attribute("figure.y", point.y)

            relation = classify_point(point)

            span.set_attribute("figure.relation", relation.value)
            logger.debug(
                "figure_classified",
                x=point.x,
                y=point.y,
                quadrant=point.quadrant.value,
                relation=relation.value,
            )
            return relation

    def execute_pair(self, x_token: str, y_token: str) -> Relation:
        """
        Validates two separately supplied tokens, then classifies.

        Raises:
            CoordinateError: on a malformed or out-of-range token.
        """
        try:
            point = parse_pair(x_token, y_token)
        except CoordinateError as e:
            logger.info("coordinate_rejected", reason=e.reason, token=e.token)
            raise
        return self.execute(point)

    def execute_line(self, line: str) -> Relation:
        """
        Validates a whitespace-separated ``"<x> <y>"`` line, then classifies.

        Raises:
            CoordinateError: on missing, extra, malformed or out-of-range tokens.
        """
        try:
            point = parse_line(line)
        except CoordinateError as e:
            logger.info("coordinate_rejected", reason=e.reason, token=e.token)
            raise
        return self.execute(point)


def format_result(result: Union[Relation, CoordinateError]) -> str:
    """Render a classification outcome as the literal text sent to clients."""
    if isinstance(result, CoordinateError):
        return result.message
    return result.value

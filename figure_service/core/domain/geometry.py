# figure_service/core/domain/geometry.py
"""
Pure geometry of the figure.

The figure is an annulus-like shape whose hole and outer edge are drawn with
different norms in each quadrant (see ``QUADRANT_METRICS``). Everything here
is exact integer arithmetic with no I/O, so every function is safe to call
from any number of concurrent requests.
"""

from figure_service.core.domain.models import (
    INNER_RADIUS,
    OUTER_RADIUS,
    QUADRANT_METRICS,
    Metric,
    Point,
    Quadrant,
    Relation,
)

# --- Distance Metrics ---

def box_distance(x: int, y: int) -> int:
    """Chebyshev norm, compared directly against a radius."""
    return max(abs(x), abs(y))


def radial_distance(x: int, y: int) -> int:
    """Squared Euclidean norm, compared against the square of a radius."""
    return x * x + y * y


def distance_relation(distance: int, threshold: int) -> Relation:
    if distance == threshold:
        return Relation.BORDER
    if distance < threshold:
        return Relation.INSIDE
    return Relation.OUTSIDE


def evaluate_metric(metric: Metric, x: int, y: int, radius: int) -> Relation:
    """Relation of (x, y) to the level set of ``metric`` at ``radius``."""
    if metric is Metric.BOX:
        return distance_relation(box_distance(x, y), radius)
    return distance_relation(radial_distance(x, y), radius * radius)

# --- Quadrant Partitioner ---

def partition(inner: Metric, outer: Metric, x: int, y: int) -> Relation:
    """
    Two-stage test: the inner boundary cuts a hole, the outer one bounds the figure.

    Points strictly inside the inner boundary are in the hole and therefore
    outside the figure. Beyond it, the outer relation is returned as is.
    """
    first = evaluate_metric(inner, x, y, INNER_RADIUS)
    if first is Relation.BORDER:
        return Relation.BORDER
    if first is Relation.INSIDE:
        return Relation.OUTSIDE
    return evaluate_metric(outer, x, y, OUTER_RADIUS)


def classify(x: int, y: int) -> Relation:
    """Classify already-validated integer coordinates against the figure."""
    inner, outer = QUADRANT_METRICS[Quadrant.of(x, y)]
    return partition(inner, outer, x, y)


def classify_point(point: Point) -> Relation:
    return classify(point.x, point.y)

# figure_service/core/domain/models.py
from enum import Enum
from typing import Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field

# --- Constants ---

COORD_MIN = -100
COORD_MAX = 100

INNER_RADIUS = 10  # hole boundary
OUTER_RADIUS = 20  # outer edge of the figure

# --- Enums ---

class Relation(str, Enum):
    """Where a point lies relative to the figure. Values are the rendered responses."""
    INSIDE = "inside"
    BORDER = "border"
    OUTSIDE = "outside"

class Metric(str, Enum):
    """Distance norm used to test a point against a radius."""
    BOX = "box"         # Chebyshev: max(|x|, |y|)
    RADIAL = "radial"   # squared Euclidean: x^2 + y^2

class Quadrant(str, Enum):
    """
    Sign-based region of the plane.

    A zero coordinate belongs to the non-positive side of its axis, so the
    origin and both negative half-axes fall in NEG_X_NEG_Y.
    """
    POS_X_POS_Y = "x>0,y>0"
    POS_X_NEG_Y = "x>0,y<=0"
    NEG_X_POS_Y = "x<=0,y>0"
    NEG_X_NEG_Y = "x<=0,y<=0"

    @classmethod
    def of(cls, x: int, y: int) -> "Quadrant":
        if x > 0:
            return cls.POS_X_POS_Y if y > 0 else cls.POS_X_NEG_Y
        return cls.NEG_X_POS_Y if y > 0 else cls.NEG_X_NEG_Y

# (inner metric at INNER_RADIUS, outer metric at OUTER_RADIUS)
QUADRANT_METRICS: Dict[Quadrant, Tuple[Metric, Metric]] = {
    Quadrant.POS_X_POS_Y: (Metric.BOX, Metric.RADIAL),
    Quadrant.POS_X_NEG_Y: (Metric.RADIAL, Metric.RADIAL),
    Quadrant.NEG_X_POS_Y: (Metric.RADIAL, Metric.BOX),
    Quadrant.NEG_X_NEG_Y: (Metric.BOX, Metric.BOX),
}

# --- Value Objects ---

class Point(BaseModel):
    """
    An immutable integer point with both coordinates in [COORD_MIN, COORD_MAX].
    Created per request and discarded after classification.
    """
    model_config = ConfigDict(frozen=True, strict=True)

    x: int = Field(..., ge=COORD_MIN, le=COORD_MAX)
    y: int = Field(..., ge=COORD_MIN, le=COORD_MAX)

    @property
    def quadrant(self) -> Quadrant:
        return Quadrant.of(self.x, self.y)

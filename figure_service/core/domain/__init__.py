from figure_service.core.domain.geometry import classify
from figure_service.core.domain.models import Point, Relation

__all__ = ["classify", "Point", "Relation"]

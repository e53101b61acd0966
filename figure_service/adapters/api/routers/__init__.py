"""
API Route Definitions.

- `figure`: Point classification against the figure (Core Value).
- `health`: System health checks.
"""

from .figure import router as figure_router
from .health import router as health_router

__all__ = [
    "figure_router",
    "health_router",
]

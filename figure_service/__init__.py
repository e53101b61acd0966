"""
figure_service
--------------

Classifies integer points against a fixed composite figure and serves the
answer over HTTP (``GET /figure?x=..&y=..``) and on the command line.

The ASGI application lives in ``figure_service.main`` and is suitable for
``uvicorn figure_service.main:app``.
"""

from importlib import metadata as _metadata

try:
    __version__: str = _metadata.version("figure-service")
except _metadata.PackageNotFoundError:  # When running from source tree
    __version__ = "0.0.0"


__all__ = ["__version__"]

# figure_service/shared/container.py
from dependency_injector import containers, providers

from figure_service.core.use_cases.classify_point import ClassifyPoint


class Container(containers.DeclarativeContainer):
    """Wires the classification use case into the HTTP routes."""

    # Factory: a fresh interactor per request; it holds no state.
    classify_point_use_case = providers.Factory(ClassifyPoint)


container = Container()

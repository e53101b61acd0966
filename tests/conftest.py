# tests/conftest.py
import pytest
from fastapi.testclient import TestClient
from unittest.mock import MagicMock

from figure_service.core.domain.models import Relation
from figure_service.core.use_cases.classify_point import ClassifyPoint
from figure_service.main import app
from figure_service.shared.container import container as app_container


@pytest.fixture
def use_case():
    """A real, stateless ClassifyPoint interactor."""
    return ClassifyPoint()


@pytest.fixture
def client():
    """
    Returns a FastAPI TestClient bound to the application instance.
    """
    with TestClient(app) as c:
        yield c


@pytest.fixture
def mock_use_case():
    """A ClassifyPoint stand-in that always answers 'inside'."""
    mock = MagicMock(spec=ClassifyPoint)
    mock.execute_pair.return_value = Relation.INSIDE
    return mock


@pytest.fixture
def container(mock_use_case):
    """
    Overrides the container-managed use case with the mock for the duration of a test.
    """
    with app_container.classify_point_use_case.override(mock_use_case):
        yield app_container

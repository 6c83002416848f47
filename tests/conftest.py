import os
from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

os.environ["ENVIRONMENT"] = "development"

from app.api.deps import get_tree
from app.data.categories import CATEGORY_HIERARCHY
from app.main import app
from app.services.category_tree import CategoryTree


@pytest.fixture()
def tree() -> CategoryTree:
    return CategoryTree.from_hierarchy(CATEGORY_HIERARCHY)


@pytest.fixture()
def small_forest() -> list:
    """Two roots, one inactive branch, siblings supplied out of order."""
    return [
        {
            "id": "b",
            "slug": "beta",
            "name": {"en": "Beta", "he": "בטא"},
            "sort_order": 2,
            "children": [],
        },
        {
            "id": "a",
            "slug": "alpha",
            "name": "Alpha",
            "sort_order": 1,
            "children": [
                {"id": "a-2", "slug": "alpha-two", "name": "Alpha Two", "sort_order": 2, "children": []},
                {
                    "id": "a-1",
                    "slug": "alpha-one",
                    "name": "Alpha One",
                    "sort_order": 1,
                    "is_active": False,
                    "children": [
                        {"id": "a-1-1", "slug": "alpha-one-one", "name": "Alpha One One", "children": []},
                    ],
                },
                {"id": "a-3", "slug": "alpha-three", "name": "Alpha Three", "sort_order": 2, "children": []},
            ],
        },
    ]


@pytest.fixture()
def client() -> Generator[TestClient, None, None]:
    app.state.limiter.reset()
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture()
def small_client(small_forest) -> Generator[TestClient, None, None]:
    small_tree = CategoryTree.from_hierarchy(small_forest)
    app.dependency_overrides[get_tree] = lambda: small_tree
    app.state.limiter.reset()
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()

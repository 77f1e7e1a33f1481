"""Shared test configuration, markers and catalog fixtures."""

import pytest

from services import skill_catalog
from services.skill_catalog import SkillCatalog


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: exercises the HTTP API end to end"
    )


@pytest.fixture
def small_catalog() -> SkillCatalog:
    """A tiny vocabulary so tests don't depend on the built-in catalog."""
    return SkillCatalog.build(
        ["python", "go", "aws", "kubernetes", "github actions", "node.js", "c++", "python"],
        {
            "Languages": ["python", "go"],
            "Cloud": ["aws", "kubernetes"],
            "Testing": ["pytest"],
        },
    )


@pytest.fixture(autouse=True)
def reset_catalog_cache():
    skill_catalog.clear()
    yield
    skill_catalog.clear()

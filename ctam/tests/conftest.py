"""
Shared fixtures for the test suite.

Provides the standard 17-category set, default scoring services and a test
settings instance that never reads a local ``.env`` file.
"""

import pytest

from ctam.core.config.settings import Settings
from ctam.domain.entities import Category
from ctam.domain.services import CategoryPassEvaluator, CompositeScoreCalculator
from ctam.tests.factories import build_categories


@pytest.fixture
def categories() -> list[Category]:
    """The 17 CTAM+ categories in display order."""
    return build_categories(17)


@pytest.fixture
def evaluator() -> CategoryPassEvaluator:
    return CategoryPassEvaluator()


@pytest.fixture
def calculator() -> CompositeScoreCalculator:
    return CompositeScoreCalculator()


@pytest.fixture
def test_settings() -> Settings:
    """Settings with library defaults, isolated from the environment file."""
    return Settings(_env_file=None, ENVIRONMENT="test", TESTING=True)

"""
Pytest configuration and fixtures for bean-validator tests

Provides isolated validator tables, rule registries and engines so tests
never depend on, or leak into, the process-wide defaults.
"""
import os

import pytest

from bean_validator.core.rules import RuleRegistry, ValidationEngine
from bean_validator.core.validators import ValidatorTable


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests of a single component"
    )
    config.addinivalue_line(
        "markers", "integration: Tests spanning the service entry points, YAML rules and CLI"
    )


# =======================
# ENGINE FIXTURES
# =======================

@pytest.fixture
def table() -> ValidatorTable:
    """Fresh validator table seeded with the built-in catalog"""
    return ValidatorTable.with_builtins()


@pytest.fixture
def registry() -> RuleRegistry:
    """Empty rule registry"""
    return RuleRegistry()


@pytest.fixture
def engine(registry, table) -> ValidationEngine:
    """Engine over the isolated registry and table, without metrics"""
    return ValidationEngine(registry, table, record_metrics=False)


# =======================
# FILE FIXTURES
# =======================

@pytest.fixture(scope="session")
def test_data_dir() -> str:
    """Path to the tests/fixtures directory"""
    return os.path.join(os.path.dirname(__file__), "fixtures")


@pytest.fixture
def user_rules_path(test_data_dir) -> str:
    return os.path.join(test_data_dir, "user_rules.yaml")

"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import pytest
import sys
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


SAMPLE_LESSON = """Title: Capitals
Author: Fred

(i) Welcome to meta:title.
(?) What is the capital of France?
(=) Paris
(x) London
(x) Berlin
(+) Paris is the capital.
(?) Pick the even numbers.
(=) 2
(=) 4
(x) 3
(#)
(?) The sky is ...blue.
"""


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")
    config.addinivalue_line("markers", "slow: Slow tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def sample_lesson_text():
    """Provide a lesson with metadata and three problems."""
    return SAMPLE_LESSON


@pytest.fixture
def lesson_file(tmp_path, sample_lesson_text):
    """Write the sample lesson to a file."""
    path = tmp_path / "lesson.txt"
    path.write_text(sample_lesson_text, encoding="utf-8")
    return path

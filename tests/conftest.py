"""Pytest configuration.

Run pytest from this project's root. pythonpath in pyproject.toml puts src/
and the project root on sys.path so ``parameter_number`` and ``tests.*``
helpers import without installation.
"""

import pytest

from parameter_number.infrastructure.di.container import ParameterNumberContainer


@pytest.fixture(autouse=True)
def _fresh_container():
    """Each test builds its own container singleton."""
    ParameterNumberContainer._instance = None
    yield
    ParameterNumberContainer._instance = None

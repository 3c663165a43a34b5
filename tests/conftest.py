"""Pytest fixtures shared by the datekit tests."""

import pytest

from datekit.core.validators import DateValidator
from datekit.services.formatter import DateFormatter


@pytest.fixture
def validator():
    """Create a DateValidator."""
    return DateValidator()


@pytest.fixture
def dates(validator):
    """Create a DateFormatter using the default pattern."""
    return DateFormatter(validator)

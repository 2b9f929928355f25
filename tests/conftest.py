"""
Shared test config
"""
# Third Party
import pytest

# Local
from tlsbuilder.test_helpers.helpers import RecordingSink, configure_logging

configure_logging()


@pytest.fixture
def sink():
    """A fresh diagnostic sink for each test"""
    return RecordingSink()

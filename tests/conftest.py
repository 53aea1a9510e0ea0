import pytest

from sexpa.types.environment import Environment


@pytest.fixture
def env():
    return Environment()


@pytest.fixture
def emitted():
    """Collects trace lines in place of print."""
    return []

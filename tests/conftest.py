import pytest

from helpers import FakeLoader


@pytest.fixture
def fake_loader():
    return FakeLoader()

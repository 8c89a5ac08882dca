import pytest
from scripts.helpful_scripts import get_account


@pytest.fixture
def account():
    return get_account()

from brownie import network
from scripts.helpful_scripts import LOCAL_BLOCKCHAIN_DEVELOPMENT, get_lottery
import pytest


@pytest.fixture(scope="module")
def lottery():
    if network.show_active() in LOCAL_BLOCKCHAIN_DEVELOPMENT:
        pytest.skip("staging tests run against a live network")
    try:
        return get_lottery()
    except LookupError as e:
        pytest.skip(str(e))


@pytest.fixture(scope="module")
def entrance_fee(lottery):
    return lottery.getEntranceFee()

from brownie import network
from scripts.helpful_scripts import LOCAL_BLOCKCHAIN_DEVELOPMENT, get_contract
from scripts.deploy_lottery import deploy_lottery
import pytest


@pytest.fixture(scope="function", autouse=True)
def isolate_func(fn_isolation):
    # perform a chain rewind after completing each test, to ensure proper isolation
    pass


@pytest.fixture(scope="module")
def lottery():
    if network.show_active() not in LOCAL_BLOCKCHAIN_DEVELOPMENT:
        pytest.skip("unit tests run on development networks only")
    try:
        return deploy_lottery()
    except LookupError as e:
        pytest.skip(str(e))


@pytest.fixture(scope="module")
def vrf_coordinator(lottery):
    return get_contract("vrf_coordinator")


@pytest.fixture(scope="module")
def entrance_fee(lottery):
    return lottery.getEntranceFee()


@pytest.fixture(scope="module")
def interval(lottery):
    return lottery.getInterval()


@pytest.fixture
def fresh_lottery(lottery):
    # deployed inside the test, so fn_isolation drops it afterwards
    return deploy_lottery()

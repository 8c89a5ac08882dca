from brownie import network, accounts, config, project, Contract
from web3 import Web3
import asyncio
import os

LOCAL_BLOCKCHAIN_DEVELOPMENT = {"development", "ganache-local"}
FORKED_LOCAL_ENVIRONMENT = {"mainnet-fork", "mainnet-fork-dev"}

# getLotteryStatus() values
OPEN = 0
CALCULATING = 1

# Events carrying the requestId of an upkeep, the lottery's own event first
REQUEST_EVENTS = ("RequestedLotteryWinner", "RandomWordsRequested")
WINNER_EVENT = "WinnerPicked"

DEFAULT_EVENT_TIMEOUT = 300


def get_account(index=None, id=None):
    """
    Return account based on the current active network deploying the contract.
    @para: index - for specific index from brownie accounts list
       id - for pre-loaded brownie accounts
       not provided and not on a testnet - brownie account[0]
       default - from config file based on network
    """
    if index is not None:
        return accounts[index]
    if id:
        return accounts.load(id)
    if network.show_active() in LOCAL_BLOCKCHAIN_DEVELOPMENT or network.show_active() in FORKED_LOCAL_ENVIRONMENT:
        return accounts[0]
    return accounts.add(config["wallets"]["from_key"])


def is_development_network(network_name=None):
    return (network_name or network.show_active()) in LOCAL_BLOCKCHAIN_DEVELOPMENT


def get_network_config(network_name=None):
    """
    Per-network parameters from the brownie config file.

        Args:
            network_name (string) - defaults to the active network

        Returns:
            dict with name, chain_id, interval, is_development, entrance_fee
            and event_timeout keys.
    """
    network_name = network_name or network.show_active()
    networks = config["networks"]
    if network_name not in networks:
        raise KeyError(f"No configuration for network '{network_name}' in brownie-config.yaml")
    network_config = networks[network_name]
    return {
        "name": network_name,
        "chain_id": network_config.get("chain_id"),
        "interval": network_config.get("interval"),
        "is_development": is_development_network(network_name),
        "entrance_fee": network_config.get("entrance_fee"),
        "event_timeout": network_config.get("event_timeout", DEFAULT_EVENT_TIMEOUT),
    }


def get_contract_container(contract_name):
    # Contract sources live in the contract repo, they are only compiled here
    for loaded_project in project.get_loaded_projects():
        if contract_name in loaded_project:
            return loaded_project[contract_name]
    raise LookupError(f"{contract_name} is not part of the loaded brownie project")


# Contract to name dictionery
contract_to_mock = {"vrf_coordinator": "VRFCoordinatorV2Mock"}


def get_contract(contract_name):
    """
    This function will grab the contract address from brownie config file if defined,
    otherwise, it will deploy a mock version of that contract and will return that
    contract.

        Args:
            contract_name (string)

        Returns:
            brownie.network.contract.ProjectContract - the most recently deployed version
            of that contract.
    """
    contract_type = get_contract_container(contract_to_mock[contract_name])
    if not is_development_network():  # working on testnet/forked net -> no need mocks
        contract_address = config["networks"][network.show_active()][contract_name]
        contract = Contract.from_abi(contract_type._name, contract_address, contract_type.abi)
    else:  # working on development network -> need to deploy mocks
        if len(contract_type) <= 0:  # if no previous mock deployed
            deploy_mocks()
        contract = contract_type[-1]
    return contract


def get_lottery():
    """
    Return the most recently deployed Lottery, or the one at the address
    configured for the active network.
    """
    lottery_type = get_contract_container("Lottery")
    if len(lottery_type) > 0:
        return lottery_type[-1]
    lottery_address = config["networks"][network.show_active()].get("lottery")
    if not lottery_address:
        raise LookupError(f"No Lottery deployed on {network.show_active()}")
    return Contract.from_abi(lottery_type._name, lottery_address, lottery_type.abi)


BASE_FEE = Web3.to_wei(0.25, "ether")
GAS_PRICE_LINK = 10**9


def deploy_mocks():
    account = get_account()
    print("Deploying Mock!")
    get_contract_container("VRFCoordinatorV2Mock").deploy(BASE_FEE, GAS_PRICE_LINK, {"from": account})
    print("Deployed!")
    print("--------------------------------")


VRF_SUB_FUND_AMOUNT = Web3.to_wei(30, "ether")


def create_subscription(vrf_coordinator):
    # If working on testnet, pull subscription id from config file
    if (
        network.show_active() not in LOCAL_BLOCKCHAIN_DEVELOPMENT
        and network.show_active() not in FORKED_LOCAL_ENVIRONMENT
    ):
        return config["networks"][network.show_active()]["subscription_id"]
    account = get_account()
    tx = vrf_coordinator.createSubscription({"from": account})
    tx.wait(1)
    subscription_id = tx.events["SubscriptionCreated"]["subId"]
    # The coordinator mock funds subscriptions without a LINK transfer
    tx = vrf_coordinator.fundSubscription(subscription_id, VRF_SUB_FUND_AMOUNT, {"from": account})
    tx.wait(1)
    return subscription_id


def get_publish_source():
    if is_development_network() or not os.getenv("ETHERSCAN_TOKEN"):
        return False
    return bool(config["networks"][network.show_active()].get("verify", False))


def get_request_id(tx, event_names=REQUEST_EVENTS):
    """
    Pull the upkeep requestId out of a transaction's events, matched by
    event name rather than by position in the receipt.
    """
    for event_name in event_names:
        if event_name in tx.events:
            return tx.events[event_name]["requestId"]
    raise ValueError(f"Transaction {tx.txid} emitted none of {', '.join(event_names)}")


class EventTimeout(Exception):
    pass


class EventListener:
    """
    One-shot subscription to a contract event. The subscription is live as
    soon as the listener is created, so create it before sending the
    transaction that fires the event.

    wait() can be called once. Use the listener as a context manager so a
    test failing before wait() still closes the pending listen coroutine.
    """

    def __init__(self, contract, event_name, timeout):
        self.event_name = event_name
        self.timeout = timeout
        self._listening = contract.events.listen(event_name, timeout=timeout)

    def wait(self):
        if self._listening is None:
            raise RuntimeError(f"Listener for {self.event_name} was already waited on or closed")
        listening, self._listening = self._listening, None
        result = asyncio.run(listening)
        if result["timed_out"]:
            raise EventTimeout(f"{self.event_name} not emitted within {self.timeout} seconds")
        return result["event_data"]

    def close(self):
        # brownie drops its one-shot callback once the event fires
        if self._listening is not None:
            self._listening.close()
            self._listening = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
        return False


def listen_for_event(contract, event_name, timeout=None):
    if timeout is None:
        timeout = get_network_config()["event_timeout"]
    print(f"Listening for {event_name}...")
    return EventListener(contract, event_name, timeout)

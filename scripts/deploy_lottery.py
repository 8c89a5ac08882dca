from brownie import network, config
from scripts.helpful_scripts import (
    is_development_network,
    get_account,
    get_contract,
    get_contract_container,
    create_subscription,
    get_publish_source,
)
from scripts.verify import verify


def deploy_lottery():
    account = get_account()
    network_config = config["networks"][network.show_active()]
    vrf_coordinator = get_contract("vrf_coordinator")
    subscription_id = create_subscription(vrf_coordinator)
    args = [
        vrf_coordinator.address,
        network_config["entrance_fee"],
        network_config["gas_lane"],
        subscription_id,
        network_config["callback_gas_limit"],
        network_config["interval"],
    ]
    lottery_type = get_contract_container("Lottery")
    lottery = lottery_type.deploy(*args, {"from": account})
    print(f"SUCCESS! Contract deployed at {lottery.address}")
    if is_development_network():
        # The coordinator mock only fulfils requests of registered consumers
        tx = vrf_coordinator.addConsumer(subscription_id, lottery.address, {"from": account})
        tx.wait(1)
    if get_publish_source():
        verify(lottery_type, lottery.address, args)
    return lottery


def main():
    deploy_lottery()

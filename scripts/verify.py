from brownie import network, config
import json
import os
import requests


def is_verified(address, explorer_api=None):
    """
    Ask the explorer (Etherscan style `getsourcecode`) whether source code
    is already published for `address`.
    """
    explorer_api = explorer_api or config["networks"][network.show_active()]["explorer_api"]
    response = requests.get(
        explorer_api,
        params={
            "module": "contract",
            "action": "getsourcecode",
            "address": address,
            "apikey": os.getenv("ETHERSCAN_TOKEN"),
        },
        timeout=30,
    )
    response.raise_for_status()
    result = response.json().get("result")
    if not isinstance(result, list) or not result:
        return False
    return bool(result[0].get("SourceCode"))


def verify(contract_container, address, args):
    """
    Publish the source of the contract deployed at `address` on the block
    explorer of the active network.

    Verification never blocks a deployment: an already verified contract
    counts as a success and any other failure is only reported.

        Args:
            contract_container - brownie ContractContainer of the deployed contract
            address (string) - address of the deployed contract
            args (list) - constructor arguments, in order

        Returns:
            bool - True if the source is verified on the explorer
    """
    print("Verifying...")
    print("Contract arguments: " + json.dumps([str(arg) for arg in args]))
    try:
        # publish_source only prints an "Already Verified" result and returns False
        if is_verified(address):
            print("Contract already verified")
            return True
        contract = contract_container.at(address)
        verified = contract_container.publish_source(contract)
    except Exception as e:
        if "already verified" in str(e).lower():
            print("Contract already verified")
            return True
        print(f"Verification failed: {e!r}")
        return False
    if verified:
        print(f"Verified {address}")
    else:
        print(f"Verification of {address} was not confirmed by the explorer")
    return bool(verified)

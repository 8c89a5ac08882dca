from scripts.helpful_scripts import (
    is_development_network,
    get_account,
    get_contract,
    get_lottery,
    get_request_id,
)
from web3 import Web3
import sys
import traceback

CHECK_DATA = Web3.keccak(text="")


def mock_keepers():
    """
    Act as the Keepers network: run the upkeep if the lottery asks for it,
    then on a local network act as the VRF node as well.
    """
    account = get_account()
    lottery = get_lottery()
    upkeep_needed, _ = lottery.checkUpkeep.call(CHECK_DATA, {"from": account})
    if not upkeep_needed:
        print("No upkeep needed!")
        return None
    tx = lottery.triggerUpKeep({"from": account})
    tx.wait(1)
    request_id = get_request_id(tx)
    print(f"Triggered upkeep with RequestId: {request_id}")
    if is_development_network():
        mock_vrf(request_id, lottery)
    return request_id


def mock_vrf(request_id, lottery):
    print("We on a local network? Ok let's pretend...")
    account = get_account()
    vrf_coordinator = get_contract("vrf_coordinator")
    tx = vrf_coordinator.fulfillRandomWords(request_id, lottery.address, {"from": account})
    tx.wait(1)
    recent_winner = lottery.getRecentWinner()
    print(f"The winner is: {recent_winner}")
    return recent_winner


def main():
    try:
        mock_keepers()
    except Exception:
        traceback.print_exc(file=sys.stderr)
        sys.exit(1)

import time

from brownie import Contract, accounts, chain, network
from brownie.exceptions import VirtualMachineError
from brownie.test.managers.runner import RevertContextManager as reverts

from vault_lifecycle import log
from vault_lifecycle.abis import get_abi

# deployer, keeper and a second depositor
NUM_ACTORS = 3


class BrownieBackend:
    """Contract handles, actors and time on whatever network brownie is connected to."""

    # brownie turns every reverted eth_call into a VM error; anything else is a real failure
    call_errors = (VirtualMachineError,)

    def __init__(self, impersonate_keeper=True):
        self.impersonate_keeper = impersonate_keeper

    @property
    def is_fork(self):
        active = network.show_active()
        return active == "development" or "fork" in active

    def contract_at(self, name, address):
        return Contract.from_abi(name, address, get_abi(name))

    def actors(self, config):
        if len(accounts) < NUM_ACTORS:
            raise ValueError(
                f"Need {NUM_ACTORS} unlocked accounts on {network.show_active()} "
                f"(deployer, keeper, other), brownie has {len(accounts)}. "
                "Load them with accounts.load() or accounts.add() first."
            )
        deployer, keeper, other = accounts[0], accounts[1], accounts[2]
        # keeper-only calls need the real keeper, which we can only act as on a fork
        if self.is_fork and self.impersonate_keeper:
            keeper = accounts.at(config.keeper, force=True)
        return deployer, keeper, other

    def reverts(self, reason=None):
        return reverts(reason)

    def sleep(self, seconds):
        if self.is_fork:
            chain.sleep(seconds)
            chain.mine(1)
        else:
            log.h3(f"Live network, sleeping {seconds}s of wall-clock time")
            time.sleep(seconds)

    # snapshots only exist on a local rpc; on a live network these do nothing
    def snapshot(self):
        if self.is_fork:
            chain.snapshot()

    def revert(self):
        if self.is_fork:
            chain.revert()

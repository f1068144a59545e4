from dataclasses import dataclass
from typing import Any

from vault_lifecycle import log
from vault_lifecycle.config import LifecycleConfig
from vault_lifecycle.helpers import get_unirouter_data, get_vault_want, zap_native_to_token


@dataclass
class LifecycleContext:
    config: LifecycleConfig
    backend: Any
    vault: Any
    strategy: Any
    unirouter: Any
    want: Any
    deployer: Any
    keeper: Any
    other: Any


def setup_lifecycle(backend, config):
    """
    Connect to the configured vault and fund the deployer with its want.

    ``backend`` supplies contract handles, actors, revert checking and time; see
    ``vault_lifecycle.brownie_backend.BrownieBackend`` for the network-backed one.
    """
    deployer, keeper, other = backend.actors(config)

    vault = backend.contract_at(config.vault_contract, config.vault)
    strategy = backend.contract_at(config.strategy_contract, vault.strategy())

    unirouter_address = strategy.unirouter()
    unirouter_data = get_unirouter_data(unirouter_address)
    unirouter = backend.contract_at(unirouter_data.interface, unirouter_address)
    want = get_vault_want(backend, vault, config.wnative)

    log.h3(f"Vault {vault.address}, strategy {strategy.address}, want {want.address}")

    zap_native_to_token(
        backend,
        amount=config.test_amount,
        want=want,
        native_token_address=config.wnative,
        unirouter=unirouter,
        swap_signature=unirouter_data.swap_signature,
        recipient=deployer,
    )
    log.value("Deployer want balance", want.balanceOf(deployer))

    return LifecycleContext(
        config=config,
        backend=backend,
        vault=vault,
        strategy=strategy,
        unirouter=unirouter,
        want=want,
        deployer=deployer,
        keeper=keeper,
        other=other,
    )

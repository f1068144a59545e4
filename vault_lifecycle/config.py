import os
from dataclasses import dataclass
from typing import Optional

from eth_utils import to_checksum_address

from vault_lifecycle import address_book

DEFAULT_CHAIN = "moonriver"
DEFAULT_VAULT = "0x36f2f0e069C9Aa9b7B02fa4Fd98Bb54129AD2F6c"
DEFAULT_CALL_FEE_RECIPIENT = "0xf50225a84382c74cbdea10b0c176f71fc3de0c4d"

# which wrapped native the vault's router trades against, if not the chain's default WNATIVE
WNATIVE_SYMBOLS = {
    "moonriver": "WNATIVE_SUSHI",
}

ADDRESS_FIELDS = ("vault", "wnative", "keeper", "strategy_owner", "vault_owner", "call_fee_recipient")


@dataclass(frozen=True)
class LifecycleConfig:
    chain_name: str
    vault: str
    wnative: str
    keeper: str
    strategy_owner: Optional[str] = None
    vault_owner: Optional[str] = None
    vault_contract: str = "BeefyVaultV6"
    strategy_contract: str = "StrategyMrSushiLP"
    test_amount: int = 5_000 * 10**18
    call_fee_recipient: str = to_checksum_address(DEFAULT_CALL_FEE_RECIPIENT)
    # seconds to let rewards accrue before harvesting
    harvest_delay: int = 20
    panic_deposit_revert: str = "TransferHelper: TRANSFER_FROM_FAILED"
    unpause_first: bool = False
    check_call_reward: bool = False
    max_route_hops: int = 10


def load_config(chain_name=DEFAULT_CHAIN, vault=DEFAULT_VAULT, wnative_symbol=None, **overrides):
    """
    Build the run config for a vault from the address book.

    Anything in ``overrides`` replaces the address-book value, so a config for a local or
    simulated deployment is just ``load_config(vault=..., wnative=..., keeper=...)``. The address
    book has no owner addresses, so ``vault_owner`` and ``strategy_owner`` stay None unless passed.
    """
    roles = address_book.platform_roles(chain_name)
    if wnative_symbol is None:
        wnative_symbol = WNATIVE_SYMBOLS.get(chain_name, "WNATIVE")

    values = {
        "chain_name": chain_name,
        "vault": vault,
        "keeper": roles.get("keeper"),
        "strategy_owner": roles.get("strategyOwner"),
        "vault_owner": roles.get("vaultOwner"),
    }
    if "wnative" not in overrides:
        values["wnative"] = address_book.token_address(chain_name, wnative_symbol)
    values.update(overrides)

    for field in ADDRESS_FIELDS:
        if values.get(field):
            values[field] = to_checksum_address(values[field])

    if not values.get("keeper"):
        raise ValueError(f"No keeper configured for {chain_name}.")
    return LifecycleConfig(**values)


def config_from_env(environ=None):
    # fork runs are configured through the environment, same as our tenderly settings
    environ = os.environ if environ is None else environ
    overrides = {}
    if environ.get("LIFECYCLE_TEST_AMOUNT"):
        overrides["test_amount"] = int(environ["LIFECYCLE_TEST_AMOUNT"]) * 10**18
    for env_key, field in (
        ("VAULT_OWNER", "vault_owner"),
        ("STRATEGY_OWNER", "strategy_owner"),
        ("KEEPER", "keeper"),
    ):
        if environ.get(env_key):
            overrides[field] = environ[env_key]

    return load_config(
        chain_name=environ.get("LIFECYCLE_CHAIN", DEFAULT_CHAIN),
        vault=environ.get("LIFECYCLE_VAULT", DEFAULT_VAULT),
        **overrides,
    )

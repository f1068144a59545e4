from collections import namedtuple

from eth_utils import to_checksum_address

from vault_lifecycle import log

# far enough in the future that no fork will ever be past it
SWAP_DEADLINE = 5_000_000_000

UnirouterData = namedtuple("UnirouterData", ["interface", "swap_signature"])

DEFAULT_UNIROUTER = UnirouterData("IUniswapRouterETH", "swapExactETHForTokens")

# routers that name their native swap after AVAX instead of ETH
_AVAX_ROUTER = UnirouterData("IUniswapRouterAVAX", "swapExactAVAXForTokens")
UNIROUTERS = {
    to_checksum_address(address): data
    for address, data in (
        ("0xe54ca86531e17ef3616d22ca28b0d458b6c89106", _AVAX_ROUTER),  # pangolin
        ("0x60ae616a2155ee3d9a68541ba4544862310933d4", _AVAX_ROUTER),  # traderjoe
    )
}


def same_address(a, b):
    return to_checksum_address(str(a)) == to_checksum_address(str(b))


def get_unirouter_data(address):
    return UNIROUTERS.get(to_checksum_address(str(address)), DEFAULT_UNIROUTER)


def get_vault_want(backend, vault, default_token_address):
    # newer vaults expose token(), V6 exposes want(); otherwise assume the vault takes native
    for getter in ("token", "want"):
        read = getattr(vault, getter, None)
        if read is None:
            continue
        try:
            want_address = read()
        except backend.call_errors:
            continue
        return backend.contract_at("ERC20", want_address)
    return backend.contract_at("ERC20", default_token_address)


def unpause_if_paused(strategy, keeper):
    if strategy.paused():
        log.h3("Strategy is paused, unpausing with keeper")
        strategy.unpause({"from": keeper})


def delay(backend, seconds):
    log.h3(f"Waiting {seconds}s")
    backend.sleep(seconds)


def is_lp(backend, token):
    pair = backend.contract_at("IUniswapV2Pair", token.address)
    try:
        pair.token0()
    except backend.call_errors:
        return False
    return True


def swap_native_for_token(
    backend, unirouter, amount, native_token_address, token, recipient, swap_signature
):
    if same_address(token.address, native_token_address):
        wrapped = backend.contract_at("IWrappedNative", native_token_address)
        wrapped.deposit({"from": recipient, "value": amount})
        return

    swap = getattr(unirouter, swap_signature)
    swap(
        0,
        [native_token_address, token.address],
        recipient,
        SWAP_DEADLINE,
        {"from": recipient, "value": amount},
    )


def zap_native_to_token(
    backend, amount, want, native_token_address, unirouter, swap_signature, recipient
):
    """
    Turn ``amount`` of native currency into ``want`` for ``recipient``.

    LP wants get half the native swapped into each side, and the two balances are then
    added as liquidity through the same router. Single-asset wants are a straight swap.
    """
    if not is_lp(backend, want):
        swap_native_for_token(
            backend, unirouter, amount, native_token_address, want, recipient, swap_signature
        )
        return

    pair = backend.contract_at("IUniswapV2Pair", want.address)
    lp0 = backend.contract_at("ERC20", pair.token0())
    lp1 = backend.contract_at("ERC20", pair.token1())
    half = amount // 2
    for token in (lp0, lp1):
        swap_native_for_token(
            backend, unirouter, half, native_token_address, token, recipient, swap_signature
        )

    lp0_bal = lp0.balanceOf(recipient)
    lp1_bal = lp1.balanceOf(recipient)
    lp0.approve(unirouter.address, lp0_bal, {"from": recipient})
    lp1.approve(unirouter.address, lp1_bal, {"from": recipient})
    unirouter.addLiquidity(
        lp0.address,
        lp1.address,
        lp0_bal,
        lp1_bal,
        1,
        1,
        recipient,
        SWAP_DEADLINE,
        {"from": recipient},
    )


# print out where the vault and strategy stand
def print_status(vault, strategy, want):
    vault_balance = vault.balance()
    share_price = vault.getPricePerFullShare()
    pool_balance = strategy.balanceOfPool()
    want_balance = strategy.balanceOfWant()
    decimals = 10 ** want.decimals()

    log.value("Vault Balance", vault_balance)
    log.value("Vault Share Price", share_price)
    log.value("Strategy Pool Balance", pool_balance)
    log.value("Strategy Idle Balance", want_balance)

    # print simplified versions if we have something more than dust
    if vault_balance > 10:
        log.value("Decimal-Corrected Vault Balance", vault_balance / decimals)
    if share_price > 10:
        log.value("Decimal-Corrected Share Price", share_price / 1e18)
    if pool_balance > 10:
        log.value("Decimal-Corrected Pool Balance", pool_balance / decimals)
    if want_balance > 10:
        log.value("Decimal-Corrected Idle Balance", want_balance / decimals)

    return {
        "vault_balance": vault_balance,
        "share_price": share_price,
        "pool_balance": pool_balance,
        "want_balance": want_balance,
    }

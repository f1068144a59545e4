from collections import namedtuple

from vault_lifecycle import address_book, log
from vault_lifecycle.call_fees import expected_call_fee
from vault_lifecycle.helpers import delay, print_status, same_address, unpause_if_paused


def _maybe_unpause(ctx):
    if ctx.config.unpause_first:
        unpause_if_paused(ctx.strategy, ctx.keeper)


def _deposit_all(ctx, account):
    balance = ctx.want.balanceOf(account)
    ctx.want.approve(ctx.vault.address, balance, {"from": account})
    ctx.vault.depositAll({"from": account})
    return balance


def deposit_and_withdraw(ctx):
    log.h2("User can deposit and withdraw from the vault")
    _maybe_unpause(ctx)

    want_bal_start = _deposit_all(ctx, ctx.deployer)
    ctx.vault.withdrawAll({"from": ctx.deployer})
    want_bal_final = ctx.want.balanceOf(ctx.deployer)
    log.value("Want before", want_bal_start)
    log.value("Want after", want_bal_final)

    assert want_bal_final <= want_bal_start
    assert want_bal_final > want_bal_start * 99 // 100


def harvest(ctx):
    log.h2("Harvests work as expected")
    _maybe_unpause(ctx)
    vault, strategy = ctx.vault, ctx.strategy

    want_bal_start = _deposit_all(ctx, ctx.deployer)
    vault_bal = vault.balance()
    price_per_share = vault.getPricePerFullShare()

    delay(ctx.backend, ctx.config.harvest_delay)

    if ctx.config.check_call_reward:
        call_reward_before = strategy.callReward()
        assert call_reward_before > 0

    strategy.harvestWithCallFeeRecipient(ctx.config.call_fee_recipient, {"from": ctx.deployer})
    vault_bal_after_harvest = vault.balance()
    price_per_share_after_harvest = vault.getPricePerFullShare()
    print_status(vault, strategy, ctx.want)

    if ctx.config.check_call_reward:
        assert call_reward_before > strategy.callReward()

    vault.withdrawAll({"from": ctx.deployer})
    want_bal_final = ctx.want.balanceOf(ctx.deployer)

    assert vault_bal_after_harvest > vault_bal
    assert price_per_share_after_harvest > price_per_share
    assert want_bal_final > want_bal_start * 99 // 100
    assert strategy.lastHarvest() > 0


def panic(ctx):
    log.h2("Manager can panic")
    _maybe_unpause(ctx)
    vault, strategy = ctx.vault, ctx.strategy

    want_bal_start = _deposit_all(ctx, ctx.deployer)
    vault_bal = vault.balance()
    bal_of_pool = strategy.balanceOfPool()
    bal_of_want = strategy.balanceOfWant()

    strategy.panic({"from": ctx.keeper})
    vault_bal_after_panic = vault.balance()
    bal_of_pool_after_panic = strategy.balanceOfPool()
    bal_of_want_after_panic = strategy.balanceOfWant()
    print_status(vault, strategy, ctx.want)

    assert vault_bal_after_panic > vault_bal * 99 // 100
    assert bal_of_pool > bal_of_want
    assert bal_of_want_after_panic > bal_of_pool_after_panic

    # users can't deposit
    with ctx.backend.reverts(ctx.config.panic_deposit_revert):
        vault.depositAll({"from": ctx.deployer})

    # users can still withdraw
    vault.withdrawAll({"from": ctx.deployer})
    want_bal_final = ctx.want.balanceOf(ctx.deployer)
    assert want_bal_final > want_bal_start * 99 // 100


def multi_user(ctx):
    log.h2("New user deposit/withdrawals don't lower other users balances")
    unpause_if_paused(ctx.strategy, ctx.keeper)
    vault, want = ctx.vault, ctx.want

    # give our second user half of the zapped funds
    want.transfer(ctx.other, want.balanceOf(ctx.deployer) // 2, {"from": ctx.deployer})

    want_bal_start = _deposit_all(ctx, ctx.deployer)
    price_per_share = vault.getPricePerFullShare()

    _deposit_all(ctx, ctx.other)
    price_per_share_after_other_deposit = vault.getPricePerFullShare()

    vault.withdrawAll({"from": ctx.deployer})
    want_bal_final = want.balanceOf(ctx.deployer)
    price_per_share_after_withdraw = vault.getPricePerFullShare()

    assert price_per_share_after_other_deposit >= price_per_share
    assert price_per_share_after_withdraw >= price_per_share_after_other_deposit
    assert want_bal_final > want_bal_start * 99 // 100


def _expected(ctx, field):
    expected = getattr(ctx.config, field)
    if not expected:
        raise ValueError(
            f"No expected {field} for {ctx.config.chain_name}; pass {field}= to load_config "
            f"or set {field.upper()} in the environment."
        )
    return expected


def owners_and_keeper(ctx):
    log.h2("It has the correct owners and keeper")
    vault_owner = ctx.vault.owner()
    strat_owner = ctx.strategy.owner()
    strat_keeper = ctx.strategy.keeper()
    log.value("Vault owner", vault_owner)
    log.value("Strategy owner", strat_owner)
    log.value("Strategy keeper", strat_keeper)

    assert same_address(vault_owner, _expected(ctx, "vault_owner"))
    assert same_address(strat_owner, _expected(ctx, "strategy_owner"))
    assert same_address(strat_keeper, _expected(ctx, "keeper"))


def references(ctx):
    log.h2("Vault and strat references are correct")
    strat_reference = ctx.vault.strategy()
    vault_reference = ctx.strategy.vault()

    assert same_address(strat_reference, ctx.strategy.address)
    assert same_address(vault_reference, ctx.vault.address)


def _read_route(ctx, route_name):
    read = getattr(ctx.strategy, route_name, None)
    hops = []
    if read is None:
        return hops
    for i in range(ctx.config.max_route_hops):
        try:
            hops.append(read(i))
        except ctx.backend.call_errors:
            # reached the end of the route
            break
    return hops


def display_routing(ctx):
    log.h2("Displays routing correctly")
    token_map = address_book.token_address_map(ctx.config.chain_name)
    routes = {}

    for route_name, side in (("outputToLp0Route", "lp0"), ("outputToLp1Route", "lp1")):
        log.info(f"{route_name}:")
        hops = _read_route(ctx, route_name)
        if not hops:
            log.h3(f"No routing, output must be {side}")
        for hop in hops:
            token = token_map.get(str(hop))
            log.h3(token["symbol"] if token else hop)
        routes[route_name] = hops

    return routes


def call_fee(ctx):
    log.h2("Has correct call fee")
    expected = expected_call_fee(ctx.config.chain_name)
    actual = int(ctx.strategy.callFee())
    log.value("Call fee", actual)

    assert actual == expected


def withdrawal_fee(ctx):
    log.h2("Has withdraw fee of 0 if harvest on deposit is true")
    harvest_on_deposit = ctx.strategy.harvestOnDeposit()
    actual = int(ctx.strategy.withdrawalFee())
    log.value("Withdrawal fee", actual)

    if harvest_on_deposit:
        assert actual == 0
    else:
        assert actual != 0


Scenario = namedtuple("Scenario", ["description", "run", "enabled"])

# disabled scenarios are only run on request; see --all-scenarios in the fork suite
SCENARIOS = {
    "deposit_and_withdraw": Scenario(
        "User can deposit and withdraw from the vault.", deposit_and_withdraw, True
    ),
    "harvest": Scenario("Harvests work as expected.", harvest, True),
    "panic": Scenario("Manager can panic.", panic, False),
    "multi_user": Scenario(
        "New user deposit/withdrawals don't lower other users balances.", multi_user, False
    ),
    "owners_and_keeper": Scenario(
        "It has the correct owners and keeper.", owners_and_keeper, False
    ),
    "references": Scenario("Vault and strat references are correct", references, False),
    "display_routing": Scenario("Displays routing correctly", display_routing, False),
    "call_fee": Scenario("Has correct call fee", call_fee, False),
    "withdrawal_fee": Scenario(
        "has withdraw fee of 0 if harvest on deposit is true", withdrawal_fee, False
    ),
}

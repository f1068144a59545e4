import pytest

# scenario checks are plain asserts; have pytest explain them when they fail
pytest.register_assert_rewrite("vault_lifecycle.scenarios")

from utils import SimBackend, SimChain, deploy_vault  # noqa: E402
from vault_lifecycle.config import load_config  # noqa: E402
from vault_lifecycle.context import setup_lifecycle  # noqa: E402

# brownie test tests/fork --network moonriver-main-fork isn't available outside a brownie project, so:
# pytest tests                                               (simulated chain only)
# LIFECYCLE_NETWORK=moonriver-main-fork pytest tests/fork -s  (enabled scenarios against a fork)
# LIFECYCLE_NETWORK=moonriver-main-fork pytest tests/fork -s --all-scenarios


def pytest_addoption(parser):
    parser.addoption(
        "--all-scenarios",
        action="store_true",
        default=False,
        help="also run the lifecycle scenarios that are disabled for live runs",
    )


def pytest_collection_modifyitems(config, items):
    if config.getoption("--all-scenarios"):
        return
    skip_disabled = pytest.mark.skip(reason="disabled for live runs; pass --all-scenarios to include")
    for item in items:
        if "disabled_scenario" in item.keywords:
            item.add_marker(skip_disabled)


################################################ UPDATE THINGS BELOW HERE ################################################


# what our simulated vault holds: an LP ("lp"), a single token ("token") or wrapped native ("native")
@pytest.fixture
def want_kind():
    yield "lp"


# the simulated strategy reverts deposits with this once it has panicked
@pytest.fixture
def paused_revert():
    yield "Pausable: paused"


@pytest.fixture
def amount():
    yield 5_000 * 10**18


####### GENERALLY SHOULDN'T HAVE TO CHANGE ANYTHING BELOW HERE


@pytest.fixture
def sim():
    yield SimChain()


@pytest.fixture
def backend(sim):
    yield SimBackend(sim)


@pytest.fixture
def deployment(sim, want_kind, paused_revert):
    yield deploy_vault(sim, want_kind=want_kind, paused_revert=paused_revert)


@pytest.fixture
def config(deployment, amount, paused_revert):
    yield load_config(
        "moonriver",
        vault=deployment.vault.address,
        wnative=deployment.wnative.address,
        keeper=deployment.keeper.address,
        vault_owner=deployment.vault_owner.address,
        strategy_owner=deployment.strategy_owner.address,
        panic_deposit_revert=paused_revert,
        test_amount=amount,
    )


@pytest.fixture
def lifecycle(backend, config):
    yield setup_lifecycle(backend, config)

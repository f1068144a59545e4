import os
from collections import namedtuple

import requests

TENDERLY_API = "https://api.tenderly.co/api/v1"
TENDERLY_RPC = "https://rpc.tenderly.co/fork"
TENDERLY_ENV_KEYS = ("TENDERLY_ACCESS_KEY", "TENDERLY_USER", "TENDERLY_PROJECT")

TenderlyFork = namedtuple("TenderlyFork", ["fork_id", "rpc_url", "dashboard_url"])


def create_fork(chain_id, environ=None, timeout=60):
    """
    Ask Tenderly for a fresh fork of ``chain_id``.

    Brownie can then be pointed at ``rpc_url`` to get traces of every scenario call in the
    Tenderly dashboard, which helps when a revert reason is unclear.
    """
    environ = os.environ if environ is None else environ
    missing = [key for key in TENDERLY_ENV_KEYS if not environ.get(key)]
    if missing:
        raise ValueError(f"Tenderly fork needs {', '.join(missing)} in the environment.")

    user, project = environ["TENDERLY_USER"], environ["TENDERLY_PROJECT"]
    response = requests.post(
        f"{TENDERLY_API}/account/{user}/project/{project}/fork",
        json={"network_id": str(chain_id)},
        headers={"X-Access-Key": environ["TENDERLY_ACCESS_KEY"]},
        timeout=timeout,
    )
    response.raise_for_status()

    fork_id = response.json()["simulation_fork"]["id"]
    return TenderlyFork(
        fork_id,
        f"{TENDERLY_RPC}/{fork_id}",
        f"https://dashboard.tenderly.co/{user}/{project}/fork/{fork_id}",
    )

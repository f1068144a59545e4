from eth_utils import to_checksum_address

# per-network token and platform addresses. only the keeper is listed for beefyfinance: the
# vault and strategy owners differ per deployment, so the owner check needs them passed in
# through load_config(vault_owner=..., strategy_owner=...) or the VAULT_OWNER / STRATEGY_OWNER
# env vars.
BEEFY_KEEPER = "0x10aee6b5594942433e7fc2783598c979b030ef3d"

ADDRESS_BOOK = {
    "moonriver": {
        "platforms": {
            "beefyfinance": {
                "keeper": BEEFY_KEEPER,
            },
        },
        "tokens": {
            "WNATIVE": {
                "address": "0x98878b06940ae243284ca214f92bb71a2b032b8a",
                "symbol": "WMOVR",
                "decimals": 18,
            },
            "WNATIVE_SUSHI": {
                "address": "0xf50225a84382c74cbdea10b0c176f71fc3de0c4d",
                "symbol": "WMOVR",
                "decimals": 18,
            },
            "SUSHI": {
                "address": "0xf390830df829cf22c53c8840554b98eafc5dcbc2",
                "symbol": "SUSHI",
                "decimals": 18,
            },
            "USDC": {
                "address": "0xe3f5a90f9cb311505cd691a46596599aa1a0ad7d",
                "symbol": "USDC",
                "decimals": 6,
            },
        },
    },
    "bsc": {
        "platforms": {"beefyfinance": {"keeper": BEEFY_KEEPER}},
        "tokens": {
            "WNATIVE": {
                "address": "0xbb4cdb9cbd36b01bd8cbaebf2de08d9173bc095c",
                "symbol": "WBNB",
                "decimals": 18,
            },
        },
    },
    "polygon": {
        "platforms": {"beefyfinance": {"keeper": BEEFY_KEEPER}},
        "tokens": {
            "WNATIVE": {
                "address": "0x0d500b1d8e8ef31e21c99d1db9a6444d3adf1270",
                "symbol": "WMATIC",
                "decimals": 18,
            },
        },
    },
    "avax": {
        "platforms": {"beefyfinance": {"keeper": BEEFY_KEEPER}},
        "tokens": {
            "WNATIVE": {
                "address": "0xb31f66aa3c1e785363f0875a1b74e27b85fd66c7",
                "symbol": "WAVAX",
                "decimals": 18,
            },
        },
    },
}


def get_chain(chain_name):
    if chain_name not in ADDRESS_BOOK:
        raise ValueError(
            f"Network '{chain_name}' is not in the address book. Known: {sorted(ADDRESS_BOOK)}"
        )
    return ADDRESS_BOOK[chain_name]


def platform_roles(chain_name, platform="beefyfinance"):
    return get_chain(chain_name)["platforms"][platform]


def token_address(chain_name, symbol):
    tokens = get_chain(chain_name)["tokens"]
    if symbol not in tokens:
        raise ValueError(f"Token '{symbol}' is not in the {chain_name} address book.")
    return to_checksum_address(tokens[symbol]["address"])


def token_address_map(chain_name):
    """Checksummed address -> token entry, for turning route hops back into symbols."""
    return {
        to_checksum_address(token["address"]): token
        for token in get_chain(chain_name)["tokens"].values()
    }

# expected strategy callFee (out of MAX_FEE = 1000) for each network we run against
CHAIN_CALL_FEE_MAP = {
    "bsc": 11,
    "avax": 11,
    "polygon": 11,
    "fantom": 11,
    "heco": 11,
    "one": 11,
    "arbitrum": 11,
    "moonriver": 111,
    "celo": 111,
    "cronos": 111,
    "aurora": 111,
    "fuse": 111,
    "metis": 111,
}


def expected_call_fee(chain_name):
    if chain_name not in CHAIN_CALL_FEE_MAP:
        raise ValueError(f"No expected call fee for network '{chain_name}'.")
    return CHAIN_CALL_FEE_MAP[chain_name]

# minimal ABIs: only the functions the lifecycle checks actually touch


def _fn(name, inputs=(), outputs=(), mutability="view"):
    return {
        "type": "function",
        "name": name,
        "inputs": [{"name": arg, "type": kind} for arg, kind in inputs],
        "outputs": [{"name": "", "type": kind} for kind in outputs],
        "stateMutability": mutability,
    }


erc20_abi = [
    _fn("name", outputs=["string"]),
    _fn("symbol", outputs=["string"]),
    _fn("decimals", outputs=["uint8"]),
    _fn("totalSupply", outputs=["uint256"]),
    _fn("balanceOf", [("account", "address")], ["uint256"]),
    _fn("allowance", [("owner", "address"), ("spender", "address")], ["uint256"]),
    _fn("approve", [("spender", "address"), ("amount", "uint256")], ["bool"], "nonpayable"),
    _fn("transfer", [("to", "address"), ("amount", "uint256")], ["bool"], "nonpayable"),
    _fn(
        "transferFrom",
        [("from", "address"), ("to", "address"), ("amount", "uint256")],
        ["bool"],
        "nonpayable",
    ),
]

wrapped_native_abi = erc20_abi + [
    _fn("deposit", mutability="payable"),
    _fn("withdraw", [("wad", "uint256")], mutability="nonpayable"),
]

uniswap_v2_pair_abi = erc20_abi + [
    _fn("token0", outputs=["address"]),
    _fn("token1", outputs=["address"]),
    _fn("getReserves", outputs=["uint112", "uint112", "uint32"]),
]

_add_liquidity = _fn(
    "addLiquidity",
    [
        ("tokenA", "address"),
        ("tokenB", "address"),
        ("amountADesired", "uint256"),
        ("amountBDesired", "uint256"),
        ("amountAMin", "uint256"),
        ("amountBMin", "uint256"),
        ("to", "address"),
        ("deadline", "uint256"),
    ],
    ["uint256", "uint256", "uint256"],
    "nonpayable",
)

_get_amounts_out = _fn(
    "getAmountsOut", [("amountIn", "uint256"), ("path", "address[]")], ["uint256[]"]
)


def _swap_native(name):
    return _fn(
        name,
        [
            ("amountOutMin", "uint256"),
            ("path", "address[]"),
            ("to", "address"),
            ("deadline", "uint256"),
        ],
        ["uint256[]"],
        "payable",
    )


uniswap_router_eth_abi = [
    _swap_native("swapExactETHForTokens"),
    _add_liquidity,
    _get_amounts_out,
]

uniswap_router_avax_abi = [
    _swap_native("swapExactAVAXForTokens"),
    _add_liquidity,
    _get_amounts_out,
]

beefy_vault_abi = erc20_abi + [
    _fn("want", outputs=["address"]),
    _fn("strategy", outputs=["address"]),
    _fn("owner", outputs=["address"]),
    _fn("balance", outputs=["uint256"]),
    _fn("available", outputs=["uint256"]),
    _fn("getPricePerFullShare", outputs=["uint256"]),
    _fn("earn", mutability="nonpayable"),
    _fn("deposit", [("_amount", "uint256")], mutability="nonpayable"),
    _fn("depositAll", mutability="nonpayable"),
    _fn("withdraw", [("_shares", "uint256")], mutability="nonpayable"),
    _fn("withdrawAll", mutability="nonpayable"),
]

beefy_strategy_abi = [
    _fn("vault", outputs=["address"]),
    _fn("want", outputs=["address"]),
    _fn("unirouter", outputs=["address"]),
    _fn("owner", outputs=["address"]),
    _fn("keeper", outputs=["address"]),
    _fn("paused", outputs=["bool"]),
    _fn("balanceOf", outputs=["uint256"]),
    _fn("balanceOfPool", outputs=["uint256"]),
    _fn("balanceOfWant", outputs=["uint256"]),
    _fn("lastHarvest", outputs=["uint256"]),
    _fn("callReward", outputs=["uint256"]),
    _fn("callFee", outputs=["uint256"]),
    _fn("withdrawalFee", outputs=["uint256"]),
    _fn("harvestOnDeposit", outputs=["bool"]),
    _fn("lpToken0", outputs=["address"]),
    _fn("lpToken1", outputs=["address"]),
    _fn("outputToLp0Route", [("", "uint256")], ["address"]),
    _fn("outputToLp1Route", [("", "uint256")], ["address"]),
    _fn("harvest", mutability="nonpayable"),
    _fn("harvestWithCallFeeRecipient", [("callFeeRecipient", "address")], mutability="nonpayable"),
    _fn("panic", mutability="nonpayable"),
    _fn("pause", mutability="nonpayable"),
    _fn("unpause", mutability="nonpayable"),
]

ABIS = {
    "ERC20": erc20_abi,
    "IWrappedNative": wrapped_native_abi,
    "IUniswapV2Pair": uniswap_v2_pair_abi,
    "IUniswapRouterETH": uniswap_router_eth_abi,
    "IUniswapRouterAVAX": uniswap_router_avax_abi,
    "BeefyVaultV6": beefy_vault_abi,
    "StrategyMrSushiLP": beefy_strategy_abi,
    "StrategyCommonChefLP": beefy_strategy_abi,
}


def get_abi(name):
    if name not in ABIS:
        raise ValueError(f"No ABI bundled for '{name}'. Known: {sorted(ABIS)}")
    return ABIS[name]

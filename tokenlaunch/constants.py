MAINNET_CHAIN_ID: int = 1
RINKEBY_CHAIN_ID: int = 4
GNOSIS_CHAIN_ID: int = 100

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"
ZERO_HASH = "0x" + "00" * 32

REAL_TOKEN_DECIMALS = 18

# one billion tokens
TOTAL_SUPPLY = 10 ** (3 * 3 + REAL_TOKEN_DECIMALS)

# 0.15 USDC for 1 COW, USDC has six decimals
USDC_PRICE = 150000

# the amount of tokens to relay to the omni bridge at deployment time
AMOUNT_TO_RELAY = 10**18

# max value is 2M on the ETH->xDAI bridge, enough for a Safe deployment
SAFE_RELAY_GAS_LIMIT = 1500000

# enough for the virtual token deployment on gnosis chain
BRIDGED_TOKEN_DEPLOYER_GAS_LIMIT = 3000000

# 0.15 xDAI for 1 COW, price of the bridged virtual token in the native token of gnosis chain
BRIDGED_NATIVE_TOKEN_PRICE = 15 * 10**16

DEFAULT_TOKENS: dict[str, dict[int, str]] = {
    "usdc": {
        1: "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48",
        100: "0xDDAfbb505ad214D7b80b1f830fcCc89B60fb7A83",
        4: "0x4DBCdF9B62e891a7cec5A2568C3F4FAF9E8Abe2b",
    },
    # WETH / wXDAI
    "weth": {
        1: "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2",
        100: "0xe91D153E0b41518A2Ce8Dd3D7944Fa863463a97d",
        4: "0xc778417E063141139Fce010982780140Aa0cD5Ab",
    },
    "gno": {
        1: "0x6810e776880C02933D47DB1b9fc05908e5386b96",
        100: "0x9C58BAcC331c9aa871AFD802DB6379a98e80CEdb",
        4: "0xd0Dab4E640D95E9E8A47545598c33e31bDb53C7c",
    },
}

# canonical Safe v1.3.0 deployments, identical on every supported chain
SAFE_V130_SINGLETON = "0xd9Db270c1B5E3Bd161E8c8503c55cEABeE709552"
SAFE_V130_PROXY_FACTORY = "0xa6B71E26C5e0845f74c812102Ca7114b6a896AB2"
SAFE_V130_FALLBACK_HANDLER = "0xf48f2B2d2a534e402487b3ee7C18c33Aec0Fe5e4"
SAFE_V130_CREATE_CALL = "0x7cbB62EaA69F79e6873cD1ecB2392971036cFAa4"
SAFE_V130_MULTISEND_CALL_ONLY = "0x40A2aCCbd92BCA938b02010E17A5b8929b49130D"

SAFE_SUPPORTED_CHAINS: tuple[int, ...] = (
    MAINNET_CHAIN_ID,
    RINKEBY_CHAIN_ID,
    GNOSIS_CHAIN_ID,
)

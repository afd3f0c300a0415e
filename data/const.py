from models.network import Network

# Mainnets

ethereum = Network(
    name="ethereum",
    rpc_url="https://rpc.ankr.com/eth",
    chain_id=1,
    explorer="https://etherscan.io",
    native_token="ETH",
)

linea = Network(
    name="linea",
    rpc_url="https://rpc.linea.build",
    chain_id=59144,
    explorer="https://lineascan.build",
    native_token="ETH",
)

arbitrum = Network(
    name="arbitrum",
    rpc_url="https://rpc.ankr.com/arbitrum",
    chain_id=42161,
    explorer="https://arbiscan.io",
    native_token="ETH",
)

optimism = Network(
    name="optimism",
    rpc_url="https://rpc.ankr.com/optimism",
    chain_id=10,
    explorer="https://optimistic.etherscan.io",
    native_token="ETH",
)

base = Network(
    name="base",
    rpc_url="https://mainnet.base.org",
    chain_id=8453,
    explorer="https://basescan.org",
    native_token="ETH",
)

polygon = Network(
    name="polygon",
    rpc_url="https://polygon-rpc.com",
    chain_id=137,
    explorer="https://polygonscan.com",
    native_token="POL",
)

bsc = Network(
    name="bsc",
    rpc_url="https://rpc.ankr.com/bsc",
    chain_id=56,
    explorer="https://bscscan.com",
    native_token="BNB",
)

opbnb = Network(
    name="opbnb",
    rpc_url="https://opbnb-mainnet-rpc.bnbchain.org",
    chain_id=204,
    explorer="https://opbnbscan.com",
    native_token="BNB",
)

# Testnets

sepolia = Network(
    name="sepolia",
    rpc_url="https://rpc.ankr.com/eth_sepolia",
    chain_id=11155111,
    explorer="https://sepolia.etherscan.io",
    native_token="ETH",
)

holesky = Network(
    name="holesky",
    rpc_url="https://ethereum-holesky-rpc.publicnode.com",
    chain_id=17000,
    explorer="https://holesky.etherscan.io",
    native_token="ETH",
)

base_sepolia = Network(
    name="base-sepolia",
    rpc_url="https://sepolia.base.org",
    chain_id=84532,
    explorer="https://sepolia.basescan.org",
    native_token="ETH",
)

arbitrum_sepolia = Network(
    name="arbitrum-sepolia",
    rpc_url="https://sepolia-rollup.arbitrum.io/rpc",
    chain_id=421614,
    explorer="https://sepolia.arbiscan.io",
    native_token="ETH",
)

bsc_testnet = Network(
    name="bsc-testnet",
    rpc_url="https://data-seed-prebsc-1-s1.bnbchain.org:8545",
    chain_id=97,
    explorer="https://testnet.bscscan.com",
    native_token="tBNB",
)

CHAINS = {
    "mainnet": {
        "ethereum": ethereum,
        "linea": linea,
        "arbitrum": arbitrum,
        "optimism": optimism,
        "base": base,
        "polygon": polygon,
        "bsc": bsc,
        "opbnb": opbnb,
    },
    "testnet": {
        "sepolia": sepolia,
        "holesky": holesky,
        "base-sepolia": base_sepolia,
        "arbitrum-sepolia": arbitrum_sepolia,
        "bsc-testnet": bsc_testnet,
    },
}

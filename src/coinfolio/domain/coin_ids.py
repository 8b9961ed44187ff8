"""Ticker symbol to CoinGecko coin id table.

CoinGecko addresses assets by its own ids ("bitcoin"), not by ticker
("BTC"). Keys are lowercase tickers; order is the listing order returned by
the supported-symbols endpoint.
"""

SYMBOL_TO_COINGECKO_ID: dict[str, str] = {
    "btc": "bitcoin",
    "eth": "ethereum",
    "sol": "solana",
    "ada": "cardano",
    "xrp": "ripple",
    "dot": "polkadot",
    "doge": "dogecoin",
    "shib": "shiba-inu",
    "avax": "avalanche-2",
    "matic": "matic-network",
    "link": "chainlink",
    "uni": "uniswap",
    "atom": "cosmos",
    "ltc": "litecoin",
    "etc": "ethereum-classic",
    "xlm": "stellar",
    "algo": "algorand",
    "vet": "vechain",
    "fil": "filecoin",
    "trx": "tron",
    "bnb": "binancecoin",
    "usdt": "tether",
    "usdc": "usd-coin",
    "busd": "binance-usd",
    "dai": "dai",
    "aave": "aave",
    "mkr": "maker",
    "comp": "compound-governance-token",
    "snx": "havven",
    "crv": "curve-dao-token",
    "sushi": "sushi",
    "yfi": "yearn-finance",
    "near": "near",
    "ftm": "fantom",
    "sand": "the-sandbox",
    "mana": "decentraland",
    "axs": "axie-infinity",
    "gala": "gala",
    "ape": "apecoin",
    "ldo": "lido-dao",
    "arb": "arbitrum",
    "op": "optimism",
    "sui": "sui",
    "apt": "aptos",
    "inj": "injective-protocol",
    "sei": "sei-network",
    "tia": "celestia",
    "jup": "jupiter-exchange-solana",
    "wif": "dogwifcoin",
    "pepe": "pepe",
    "bonk": "bonk",
}

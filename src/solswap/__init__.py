"""solswap - Jupiter token swaps on Solana.

Quotes a swap with the Jupiter API, fetches the pre-built transaction,
signs it with a local wallet and submits it to a Solana RPC node.
"""

from solswap.config import Settings, get_settings
from solswap.constants import SOL_MINT, TOKENS, USDC_MINT
from solswap.errors import SwapFailure, SwapStage
from solswap.swap import SwapExecutor, SwapRequest, trade
from solswap.wallet import SolanaWallet

__version__ = "0.1.0"

__all__ = [
    "Settings",
    "get_settings",
    "SOL_MINT",
    "USDC_MINT",
    "TOKENS",
    "SwapFailure",
    "SwapStage",
    "SwapExecutor",
    "SwapRequest",
    "SolanaWallet",
    "trade",
]

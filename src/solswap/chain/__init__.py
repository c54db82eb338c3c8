"""Ledger access: mint metadata, transaction decoding and submission."""

from solswap.chain.base import LedgerClient
from solswap.chain.solana_rpc import SolanaRpcLedger, parse_mint_decimals
from solswap.chain.transaction import decode_swap_transaction, transaction_signature

__all__ = [
    "LedgerClient",
    "SolanaRpcLedger",
    "decode_swap_transaction",
    "parse_mint_decimals",
    "transaction_signature",
]

"""Jupiter routing: quote and swap-transaction requests, referral fee accounts."""

from solswap.routing.jupiter import JupiterClient, build_quote_params, build_swap_payload
from solswap.routing.referral import derive_fee_account, resolve_fee_account

__all__ = [
    "JupiterClient",
    "build_quote_params",
    "build_swap_payload",
    "derive_fee_account",
    "resolve_fee_account",
]

"""Swap execution.

Provides:
- SwapExecutor: quote, build, sign and submit a Jupiter swap
- trade: one-shot helper wiring the executor from settings
"""

from solswap.swap.executor import SwapExecutor, SwapRequest, trade

__all__ = [
    "SwapExecutor",
    "SwapRequest",
    "trade",
]

"""Swap transaction decoding.

Jupiter returns versioned transactions as base64 with the fee payer's
signature slot zero-filled.
"""

import base64
import binascii

from solders.transaction import VersionedTransaction

from solswap.errors import TransactionDecodeError


def decode_swap_transaction(swap_transaction: str) -> VersionedTransaction:
    """Decode a base64 swap transaction into a ``VersionedTransaction``."""
    try:
        tx_bytes = base64.b64decode(swap_transaction, validate=True)
    except (binascii.Error, ValueError) as e:
        raise TransactionDecodeError(f"Invalid base64 transaction: {e}") from e

    try:
        return VersionedTransaction.from_bytes(tx_bytes)
    except ValueError as e:
        raise TransactionDecodeError(f"Invalid versioned transaction: {e}") from e


def transaction_signature(transaction: VersionedTransaction) -> str:
    """Fee payer signature, which is also the transaction id."""
    return str(transaction.signatures[0])

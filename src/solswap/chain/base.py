"""Base interface for ledger access.

The swap executor needs exactly two things from the chain:
1. Decimal precision of the input token mint
2. Submission of a signed transaction
"""

from abc import ABC, abstractmethod

from solders.pubkey import Pubkey
from solders.transaction import VersionedTransaction


class LedgerClient(ABC):
    """Abstract base class for ledger access backends."""

    @abstractmethod
    async def get_mint_decimals(self, mint: Pubkey) -> int:
        """Get decimal precision of a token mint.

        Raises:
            MintLookupError: If the address is not a readable token mint
        """
        pass

    @abstractmethod
    async def send_transaction(self, transaction: VersionedTransaction) -> str:
        """Submit a signed transaction.

        Returns:
            Transaction signature (base58)

        Raises:
            SubmissionError: If the node rejects the transaction
        """
        pass

    async def close(self) -> None:
        """Release network resources."""
        return None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

"""Solana JSON-RPC ledger backend built on solana-py."""

import logging
from typing import Optional

from solana.exceptions import SolanaRpcException
from solana.rpc.async_api import AsyncClient
from solana.rpc.commitment import Commitment
from solana.rpc.core import RPCException
from solana.rpc.types import TxOpts
from solders.pubkey import Pubkey
from solders.transaction import VersionedTransaction

from solswap.chain.base import LedgerClient
from solswap.config import Settings
from solswap.constants import (
    MINT_ACCOUNT_SIZE,
    MINT_DECIMALS_OFFSET,
    TOKEN_2022_PROGRAM_ID,
    TOKEN_PROGRAM_ID,
)
from solswap.errors import MintLookupError, SubmissionError

logger = logging.getLogger(__name__)

TOKEN_PROGRAMS = (TOKEN_PROGRAM_ID, TOKEN_2022_PROGRAM_ID)


def parse_mint_decimals(owner: Pubkey, data: bytes, mint: Pubkey) -> int:
    """Read decimals from raw SPL mint account data."""
    if owner not in TOKEN_PROGRAMS:
        raise MintLookupError(f"Account {mint} is not owned by a token program (owner {owner})")
    if len(data) < MINT_ACCOUNT_SIZE:
        raise MintLookupError(f"Account {mint} is not a token mint (size {len(data)})")
    return data[MINT_DECIMALS_OFFSET]


class SolanaRpcLedger(LedgerClient):
    """Ledger backend talking to a Solana RPC node."""

    def __init__(
        self,
        rpc_url: str,
        commitment: str = "confirmed",
        skip_preflight: bool = False,
        client: Optional[AsyncClient] = None,
    ):
        self.rpc_url = rpc_url
        self.commitment = Commitment(commitment)
        self.skip_preflight = skip_preflight
        self._client = client or AsyncClient(rpc_url, commitment=self.commitment)

    @classmethod
    def from_settings(cls, settings: Settings) -> "SolanaRpcLedger":
        return cls(settings.solana_rpc_url, commitment=settings.solana_commitment)

    async def close(self) -> None:
        await self._client.close()

    async def get_mint_decimals(self, mint: Pubkey) -> int:
        try:
            response = await self._client.get_account_info(mint)
        except (RPCException, SolanaRpcException) as e:
            raise MintLookupError(f"Failed to fetch mint {mint}: {e}") from e

        account = response.value
        if account is None:
            raise MintLookupError(f"Mint account not found: {mint}")

        decimals = parse_mint_decimals(account.owner, bytes(account.data), mint)
        logger.debug(f"Mint {mint} has {decimals} decimals")
        return decimals

    async def send_transaction(self, transaction: VersionedTransaction) -> str:
        opts = TxOpts(
            skip_preflight=self.skip_preflight,
            preflight_commitment=self.commitment,
        )
        try:
            response = await self._client.send_transaction(transaction, opts=opts)
        except (RPCException, SolanaRpcException) as e:
            raise SubmissionError(f"Transaction rejected by {self.rpc_url}: {e}") from e

        signature = str(response.value)
        logger.info(f"Solana tx broadcast via {self.rpc_url}: {signature}")
        return signature

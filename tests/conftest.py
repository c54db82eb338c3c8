"""Pytest configuration and fixtures."""

import base64
import json
import os
from typing import Optional
from unittest.mock import AsyncMock

import httpx
import pytest
from solders.hash import Hash
from solders.keypair import Keypair
from solders.message import MessageV0
from solders.pubkey import Pubkey
from solders.signature import Signature
from solders.system_program import TransferParams, transfer
from solders.transaction import VersionedTransaction

# Set test environment
os.environ["ENVIRONMENT"] = "test"
os.environ["DEBUG"] = "true"

from solswap.chain.base import LedgerClient
from solswap.config import Settings
from solswap.routing.jupiter import JupiterClient
from solswap.wallet import SolanaWallet

TEST_API_URL = "https://jupiter.test/v6"

BONK_MINT = Pubkey.from_string("DezXAZ8z7PnrnRJjz3wXBoRgixCa6xjnB7YaB1pPB263")


def build_unsigned_swap_transaction(payer: Pubkey) -> str:
    """Build a base64 v0 transaction shaped like Jupiter's swap response.

    The fee payer signature slot is zero-filled.
    """
    instruction = transfer(
        TransferParams(from_pubkey=payer, to_pubkey=Pubkey.new_unique(), lamports=1_000)
    )
    message = MessageV0.try_compile(payer, [instruction], [], Hash.new_unique())
    transaction = VersionedTransaction.populate(message, [Signature.default()])
    return base64.b64encode(bytes(transaction)).decode()


class FakeJupiterAPI:
    """Records requests and serves canned Jupiter quote/swap responses."""

    def __init__(
        self,
        swap_transaction: Optional[str],
        quote: Optional[dict] = None,
        quote_response: Optional[httpx.Response] = None,
        swap_response: Optional[httpx.Response] = None,
    ):
        self.quote = quote or {
            "inputMint": "So11111111111111111111111111111111111111112",
            "inAmount": "1500000000",
            "outAmount": "215000000",
            "priceImpactPct": "0.001",
            "routePlan": [{"swapInfo": {"label": "Raydium"}, "percent": 100}],
        }
        self.swap_transaction = swap_transaction
        self.quote_response = quote_response
        self.swap_response = swap_response
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path.endswith("/quote"):
            return self.quote_response or httpx.Response(200, json=self.quote)
        if request.url.path.endswith("/swap"):
            return self.swap_response or httpx.Response(
                200,
                json={"swapTransaction": self.swap_transaction, "lastValidBlockHeight": 1},
            )
        return httpx.Response(404, json={"error": "not found"})

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def client(self, api_key: Optional[str] = None) -> JupiterClient:
        return JupiterClient(TEST_API_URL, api_key=api_key, transport=self.transport)

    @property
    def quote_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path.endswith("/quote")]

    @property
    def swap_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path.endswith("/swap")]

    def swap_body(self) -> dict:
        return json.loads(self.swap_requests[-1].content)


@pytest.fixture
def settings() -> Settings:
    """Settings without platform fee or referral account."""
    return Settings(
        _env_file=None,
        jupiter_api_url=TEST_API_URL,
        jup_fee_bps=None,
        jup_referral_account=None,
    )


@pytest.fixture
def wallet() -> SolanaWallet:
    return SolanaWallet(Keypair())


@pytest.fixture
def swap_transaction(wallet: SolanaWallet) -> str:
    return build_unsigned_swap_transaction(wallet.pubkey)


@pytest.fixture
def jupiter_api(swap_transaction: str) -> FakeJupiterAPI:
    return FakeJupiterAPI(swap_transaction)


@pytest.fixture
def ledger() -> AsyncMock:
    ledger = AsyncMock(spec=LedgerClient)
    ledger.get_mint_decimals.return_value = 6
    ledger.send_transaction.return_value = "5VERv8NMvzbJMEkV8xnrLkEaWRtSz9CosKDYjCJjBRnbJLgp8uirBgmQpjKhoR4tjF3ZpRzrFmBV6UjKdiSZkQUW"
    return ledger

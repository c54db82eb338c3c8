"""Jupiter DEX aggregator client.

Uses Jupiter Swap API v6 for quotes and pre-built swap transactions.
API docs: https://station.jup.ag/docs/apis/swap-api
"""

import logging
from typing import Any, Optional

import httpx
from solders.pubkey import Pubkey

from solswap.config import Settings
from solswap.constants import MAX_ACCOUNTS, ONLY_DIRECT_ROUTES
from solswap.errors import JupiterAPIError

logger = logging.getLogger(__name__)


def _flag(value: bool) -> str:
    return "true" if value else "false"


def build_quote_params(
    input_mint: Pubkey,
    output_mint: Pubkey,
    amount: int,
    slippage_bps: int,
    platform_fee_bps: Optional[int] = None,
) -> dict[str, str]:
    """Build query parameters for GET /quote.

    ``platformFeeBps`` is only sent when a non-zero platform fee is set.
    """
    params = {
        "inputMint": str(input_mint),
        "outputMint": str(output_mint),
        "amount": str(amount),
        "slippageBps": str(slippage_bps),
        "onlyDirectRoutes": _flag(ONLY_DIRECT_ROUTES),
        "maxAccounts": str(MAX_ACCOUNTS),
    }
    if platform_fee_bps:
        params["platformFeeBps"] = str(platform_fee_bps)
    return params


def build_swap_payload(
    quote_response: dict,
    user_public_key: Pubkey,
    fee_account: Optional[Pubkey] = None,
) -> dict[str, Any]:
    """Build JSON body for POST /swap.

    The quote is forwarded exactly as Jupiter returned it.
    """
    return {
        "quoteResponse": quote_response,
        "userPublicKey": str(user_public_key),
        "wrapAndUnwrapSol": True,
        "dynamicComputeUnitLimit": True,
        "prioritizationFeeLamports": "auto",
        "feeAccount": str(fee_account) if fee_account else None,
    }


class JupiterClient:
    """HTTP client for the Jupiter quote and swap endpoints."""

    def __init__(
        self,
        base_url: str,
        api_key: Optional[str] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize Jupiter client.

        Args:
            base_url: API base, e.g. https://quote-api.jup.ag/v6
            api_key: Optional API key for higher rate limits
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "JupiterClient":
        return cls(
            base_url=settings.jupiter_api_url,
            api_key=settings.jupiter_api_key,
            timeout=settings.http_timeout,
        )

    def _get_headers(self) -> dict:
        """Get API headers."""
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["x-api-key"] = self.api_key
        return headers

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self._transport)

    @staticmethod
    def _parse(response: httpx.Response, what: str) -> dict:
        """Decode a Jupiter response, raising on HTTP or API errors."""
        if response.status_code != 200:
            raise JupiterAPIError(
                f"Jupiter {what} error: {response.status_code} - {response.text}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise JupiterAPIError(f"Jupiter {what} returned invalid JSON: {e}") from e

        if not isinstance(data, dict):
            raise JupiterAPIError(f"Jupiter {what} returned unexpected payload: {data!r}")

        if "error" in data:
            raise JupiterAPIError(f"Jupiter {what} error: {data['error']}")

        return data

    async def get_quote(self, params: dict[str, str]) -> dict:
        """Get a swap quote.

        Args:
            params: Query parameters from ``build_quote_params``

        Returns:
            Raw quote response
        """
        async with self._client() as client:
            response = await client.get(
                f"{self.base_url}/quote",
                headers=self._get_headers(),
                params=params,
            )

        quote = self._parse(response, "quote")
        logger.debug(
            f"Jupiter quote: {quote.get('inAmount')} {params.get('inputMint')} -> "
            f"{quote.get('outAmount')} {params.get('outputMint')} "
            f"(price impact {quote.get('priceImpactPct')})"
        )
        return quote

    async def get_swap_transaction(self, payload: dict[str, Any]) -> str:
        """Request a serialized swap transaction.

        Args:
            payload: JSON body from ``build_swap_payload``

        Returns:
            Base64 encoded versioned transaction, ready to sign
        """
        async with self._client() as client:
            response = await client.post(
                f"{self.base_url}/swap",
                headers=self._get_headers(),
                json=payload,
            )

        data = self._parse(response, "swap")
        swap_transaction = data.get("swapTransaction")
        if not swap_transaction:
            raise JupiterAPIError("No swap transaction returned")

        logger.debug(f"Jupiter swap transaction received (lastValidBlockHeight={data.get('lastValidBlockHeight')})")
        return swap_transaction

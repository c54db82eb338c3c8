"""Swap execution via Jupiter.

Flow for one swap:
1. Resolve input token decimals (SOL is always 9)
2. Scale the human amount to base units
3. Get a quote from Jupiter
4. Derive the referral fee account if one is configured
5. Get a serialized swap transaction embedding the quote
6. Decode, sign and submit it

Any failure is raised as ``SwapFailure``.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Union

from solders.pubkey import Pubkey

from solswap.chain.base import LedgerClient
from solswap.chain.solana_rpc import SolanaRpcLedger
from solswap.chain.transaction import decode_swap_transaction, transaction_signature
from solswap.config import Settings, get_settings
from solswap.constants import DEFAULT_SLIPPAGE_BPS, MAX_BPS, SOL_DECIMALS, SOL_MINT, USDC_MINT
from solswap.errors import SwapFailure, SwapStage
from solswap.routing.jupiter import JupiterClient, build_quote_params, build_swap_payload
from solswap.routing.referral import resolve_fee_account
from solswap.utils.units import Number, to_base_units, to_decimal
from solswap.wallet import SolanaWallet

logger = logging.getLogger(__name__)

Address = Union[str, Pubkey]


def _to_pubkey(address: Address) -> Pubkey:
    if isinstance(address, Pubkey):
        return address
    return Pubkey.from_string(address.strip())


@dataclass
class SwapRequest:
    """A single swap to execute."""
    output_mint: Pubkey
    input_amount: Decimal
    input_mint: Pubkey = USDC_MINT
    slippage_bps: int = DEFAULT_SLIPPAGE_BPS

    @classmethod
    def create(
        cls,
        output_mint: Address,
        input_amount: Number,
        input_mint: Address = USDC_MINT,
        slippage_bps: int = DEFAULT_SLIPPAGE_BPS,
    ) -> "SwapRequest":
        """Normalize user input and validate it."""
        request = cls(
            output_mint=_to_pubkey(output_mint),
            input_amount=to_decimal(input_amount),
            input_mint=_to_pubkey(input_mint),
            slippage_bps=slippage_bps,
        )
        request.validate()
        return request

    def validate(self) -> None:
        if not self.input_amount.is_finite() or self.input_amount <= 0:
            raise ValueError(f"Input amount must be positive, got {self.input_amount}")
        if isinstance(self.slippage_bps, bool) or not isinstance(self.slippage_bps, int):
            raise ValueError(f"Slippage must be an integer number of basis points, got {self.slippage_bps!r}")
        if not 0 <= self.slippage_bps <= MAX_BPS:
            raise ValueError(f"Slippage must be within 0..{MAX_BPS} bps, got {self.slippage_bps}")

    @property
    def is_native_sol(self) -> bool:
        return self.input_mint == SOL_MINT


class SwapExecutor:
    """Executes Jupiter swaps for a wallet.

    Stateless apart from its collaborators, so one instance can serve
    concurrent swaps.
    """

    def __init__(
        self,
        settings: Settings,
        ledger: LedgerClient,
        jupiter: Optional[JupiterClient] = None,
    ):
        self.settings = settings
        self.ledger = ledger
        self.jupiter = jupiter or JupiterClient.from_settings(settings)

    async def get_input_decimals(self, request: SwapRequest) -> int:
        if request.is_native_sol:
            return SOL_DECIMALS
        return await self.ledger.get_mint_decimals(request.input_mint)

    async def execute(
        self,
        wallet: SolanaWallet,
        output_mint: Address,
        input_amount: Number,
        input_mint: Address = USDC_MINT,
        slippage_bps: Optional[int] = None,
    ) -> str:
        """Swap tokens using Jupiter.

        Args:
            wallet: Wallet paying for and signing the swap
            output_mint: Target token mint address
            input_amount: Amount to swap in human units (e.g. 1.5)
            input_mint: Source token mint address (defaults to USDC)
            slippage_bps: Slippage tolerance in basis points
                (defaults to settings, 300 = 3%)

        Returns:
            Transaction signature

        Raises:
            SwapFailure: On any error, with the originating message
        """
        if slippage_bps is None:
            slippage_bps = self.settings.default_slippage_bps

        stage = SwapStage.VALIDATION
        signature = None
        try:
            request = SwapRequest.create(output_mint, input_amount, input_mint, slippage_bps)

            stage = SwapStage.DECIMALS
            decimals = await self.get_input_decimals(request)
            scaled_amount = to_base_units(request.input_amount, decimals)
            if scaled_amount <= 0:
                raise ValueError(
                    f"Amount {request.input_amount} is below the smallest unit (decimals={decimals})"
                )

            logger.info(
                f"Executing Jupiter swap: {request.input_amount} {request.input_mint} "
                f"({scaled_amount} base units) -> {request.output_mint} "
                f"for {wallet.address}, slippage {request.slippage_bps} bps"
            )

            stage = SwapStage.QUOTE
            params = build_quote_params(
                request.input_mint,
                request.output_mint,
                scaled_amount,
                request.slippage_bps,
                platform_fee_bps=self.settings.jup_fee_bps,
            )
            quote = await self.jupiter.get_quote(params)

            stage = SwapStage.FEE_ACCOUNT
            fee_account = resolve_fee_account(self.settings.jup_referral_account)
            if fee_account:
                logger.debug(f"Using referral fee account {fee_account}")

            stage = SwapStage.BUILD
            payload = build_swap_payload(quote, wallet.pubkey, fee_account)
            swap_transaction = await self.jupiter.get_swap_transaction(payload)

            stage = SwapStage.DECODE
            transaction = decode_swap_transaction(swap_transaction)

            stage = SwapStage.SIGN
            signed = wallet.sign_transaction(transaction)
            signature = transaction_signature(signed)

            stage = SwapStage.SUBMIT
            logger.debug(f"Submitting signed swap transaction {signature}")
            result = await self.ledger.send_transaction(signed)

        except Exception as e:
            logger.error(f"Jupiter swap failed at {stage.value}: {e}")
            raise SwapFailure(
                str(e),
                stage=stage,
                signature=signature if stage == SwapStage.SUBMIT else None,
            ) from e

        logger.info(f"Jupiter swap submitted: {result}")
        return result


async def trade(
    wallet: SolanaWallet,
    output_mint: Address,
    input_amount: Number,
    input_mint: Address = USDC_MINT,
    slippage_bps: Optional[int] = None,
    settings: Optional[Settings] = None,
) -> str:
    """Execute one swap with a ledger built from settings.

    The RPC connection is closed when the swap finishes.
    """
    settings = settings or get_settings()
    async with SolanaRpcLedger.from_settings(settings) as ledger:
        executor = SwapExecutor(settings, ledger)
        return await executor.execute(
            wallet,
            output_mint,
            input_amount,
            input_mint=input_mint,
            slippage_bps=slippage_bps,
        )

"""Exceptions raised while executing a swap.

Step-level errors describe where something went wrong. The public
``SwapExecutor.execute`` call never lets them escape directly: it wraps any
failure into a single ``SwapFailure`` carrying the originating message.
"""

from enum import Enum
from typing import Optional


class SwapStage(str, Enum):
    """Step of the swap flow an error originated from."""
    VALIDATION = "validation"
    DECIMALS = "decimals"
    QUOTE = "quote"
    FEE_ACCOUNT = "fee_account"
    BUILD = "build"
    DECODE = "decode"
    SIGN = "sign"
    SUBMIT = "submit"


class SwapError(Exception):
    """Base class for swap step errors."""
    pass


class MintLookupError(SwapError):
    """Raised when token decimals cannot be read from the mint account."""
    pass


class JupiterAPIError(SwapError):
    """Raised when the Jupiter API returns an error or a malformed response."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class TransactionDecodeError(SwapError):
    """Raised when the swap transaction payload cannot be decoded."""
    pass


class WalletError(SwapError):
    """Raised when the wallet key is unavailable or signing fails."""
    pass


class SubmissionError(SwapError):
    """Raised when the RPC node rejects or fails to accept a transaction."""
    pass


class SwapFailure(Exception):
    """Raised by the swap executor for any failure during a swap.

    Attributes:
        stage: Step that failed
        signature: Signature of the signed transaction, set only when the
            failure happened while submitting. The transaction may still have
            landed; callers can query its status with this signature.
    """

    def __init__(
        self,
        message: str,
        stage: Optional[SwapStage] = None,
        signature: Optional[str] = None,
    ):
        self.stage = stage
        self.signature = signature
        super().__init__(f"Swap failed: {message}")

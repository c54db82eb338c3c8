"""Application configuration using pydantic-settings.

Settings are read once from the environment (and an optional .env file) and
passed explicitly into the swap executor.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from solders.pubkey import Pubkey

from solswap.constants import DEFAULT_SLIPPAGE_BPS, JUPITER_API_V6, MAX_BPS


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ======================
    # Environment
    # ======================
    environment: str = Field(default="development", description="Runtime environment")
    debug: bool = Field(default=False, description="Enable debug logging")

    # ======================
    # Jupiter API
    # ======================
    jupiter_api_url: str = Field(
        default=JUPITER_API_V6, description="Jupiter API base URL (quote and swap)"
    )
    jupiter_api_key: Optional[str] = Field(
        default=None, description="Optional Jupiter API key for higher rate limits"
    )
    http_timeout: float = Field(default=30.0, description="HTTP timeout in seconds")

    # ======================
    # Solana RPC
    # ======================
    solana_rpc_url: str = Field(
        default="https://api.mainnet-beta.solana.com", description="Solana RPC URL"
    )
    solana_commitment: str = Field(
        default="confirmed", description="Commitment used for reads and preflight"
    )

    # ======================
    # Platform fee / referral
    # ======================
    jup_fee_bps: Optional[int] = Field(
        default=None, description="Platform fee in basis points sent with quotes"
    )
    jup_referral_account: Optional[str] = Field(
        default=None, description="Jupiter referral account collecting platform fees"
    )
    default_slippage_bps: int = Field(
        default=DEFAULT_SLIPPAGE_BPS, description="Default slippage tolerance (3%)"
    )

    # ======================
    # Wallet
    # ======================
    wallet_private_key: Optional[str] = Field(
        default=None, description="Base58 encoded 64-byte Solana secret key"
    )
    wallet_seed_phrase: Optional[str] = Field(
        default=None, description="BIP39 seed phrase for m/44'/501'/0'/0' derivation"
    )

    @field_validator(
        "jup_fee_bps",
        "jup_referral_account",
        "jupiter_api_key",
        "wallet_private_key",
        "wallet_seed_phrase",
        mode="before",
    )
    @classmethod
    def _blank_to_none(cls, value):
        """Treat empty environment values as unset."""
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("jup_fee_bps", "default_slippage_bps")
    @classmethod
    def _check_bps(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and not 0 <= value <= MAX_BPS:
            raise ValueError(f"basis points must be within 0..{MAX_BPS}, got {value}")
        return value

    @field_validator("jup_referral_account")
    @classmethod
    def _check_referral_account(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        value = value.strip()
        try:
            Pubkey.from_string(value)
        except ValueError as e:
            raise ValueError(f"Invalid referral account address: {value}") from e
        return value

    @field_validator("jupiter_api_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    @property
    def has_wallet(self) -> bool:
        """Check if a wallet key or seed phrase is configured."""
        if self.wallet_private_key:
            return True
        return bool(self.wallet_seed_phrase and len(self.wallet_seed_phrase.split()) >= 12)

    @property
    def quote_url(self) -> str:
        return f"{self.jupiter_api_url}/quote"

    @property
    def swap_url(self) -> str:
        return f"{self.jupiter_api_url}/swap"

    def get_safe_dict(self) -> dict:
        """Return settings dict with secrets redacted."""
        return {
            "environment": self.environment,
            "debug": self.debug,
            "jupiter": {
                "api_url": self.jupiter_api_url,
                "api_key": "***" if self.jupiter_api_key else "(not set)",
                "timeout": self.http_timeout,
            },
            "solana": {
                "rpc": self.solana_rpc_url,
                "commitment": self.solana_commitment,
            },
            "fees": {
                "platform_fee_bps": self.jup_fee_bps,
                "referral_account": self.jup_referral_account or "(not set)",
                "default_slippage_bps": self.default_slippage_bps,
            },
            "wallet_configured": self.has_wallet,
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

"""Solana wallet used to sign swap transactions.

Keys come either from a base58 secret key or from a BIP39 seed phrase using
the standard Solana path m/44'/501'/index'/0' (Phantom/Trust Wallet layout).
"""

import logging

import base58
from solders.keypair import Keypair
from solders.pubkey import Pubkey
from solders.transaction import VersionedTransaction

from solswap.config import Settings
from solswap.errors import WalletError

logger = logging.getLogger(__name__)


class SolanaWallet:
    """In-memory Solana keypair."""

    def __init__(self, keypair: Keypair):
        self._keypair = keypair

    @classmethod
    def from_base58(cls, secret_key: str) -> "SolanaWallet":
        """Load a wallet from a base58 encoded 64-byte secret key."""
        try:
            return cls(Keypair.from_bytes(base58.b58decode(secret_key.strip())))
        except ValueError as e:
            raise WalletError(f"Invalid Solana secret key: {e}") from e

    @classmethod
    def from_seed_phrase(cls, seed_phrase: str, index: int = 0) -> "SolanaWallet":
        """Derive a wallet from a BIP39 seed phrase."""
        from bip_utils import Bip39SeedGenerator, Bip44, Bip44Changes, Bip44Coins

        try:
            seed = Bip39SeedGenerator(seed_phrase).Generate()
            bip44 = Bip44.FromSeed(seed, Bip44Coins.SOLANA)
            account = bip44.Purpose().Coin().Account(index).Change(Bip44Changes.CHAIN_EXT)
            private_key = account.PrivateKey().Raw().ToBytes()
        except Exception as e:
            raise WalletError(f"Failed to derive Solana key: {e}") from e

        # Solana keypair from 32-byte seed
        return cls(Keypair.from_seed(private_key[:32]))

    @classmethod
    def from_settings(cls, settings: Settings) -> "SolanaWallet":
        """Load the configured wallet, preferring an explicit private key."""
        if settings.wallet_private_key:
            wallet = cls.from_base58(settings.wallet_private_key)
        elif settings.wallet_seed_phrase:
            wallet = cls.from_seed_phrase(settings.wallet_seed_phrase)
        else:
            raise WalletError("No wallet configured (set WALLET_PRIVATE_KEY or WALLET_SEED_PHRASE)")

        logger.info(f"Loaded Solana wallet {wallet.address}")
        return wallet

    @property
    def pubkey(self) -> Pubkey:
        return self._keypair.pubkey()

    @property
    def address(self) -> str:
        return str(self._keypair.pubkey())

    def sign_transaction(self, transaction: VersionedTransaction) -> VersionedTransaction:
        """Sign a transaction as its fee payer.

        Returns a new transaction carrying this wallet's signature over the
        original message.
        """
        message = transaction.message
        payer = message.account_keys[0] if message.account_keys else None
        if payer != self.pubkey:
            raise WalletError(f"Transaction fee payer {payer} does not match wallet {self.address}")

        try:
            return VersionedTransaction(message, [self._keypair])
        except Exception as e:
            raise WalletError(f"Failed to sign transaction: {e}") from e

    def __repr__(self) -> str:
        return f"SolanaWallet(address={self.address})"

"""Solana and Jupiter constants."""

from solders.pubkey import Pubkey

# Jupiter API endpoints
JUPITER_API_V6 = "https://quote-api.jup.ag/v6"

# Jupiter referral program
JUPITER_REFERRAL_PROGRAM = Pubkey.from_string("REFER4ZgmyYx9c6He5XfaTMiGfdLwRnkV4RPp9t9iF3")
REFERRAL_ATA_SEED = b"referral_ata"

# Token mint addresses on Solana mainnet
SOL_MINT = Pubkey.from_string("So11111111111111111111111111111111111111112")  # Wrapped SOL
USDC_MINT = Pubkey.from_string("EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v")

TOKENS = {
    "SOL": SOL_MINT,
    "USDC": USDC_MINT,
}

# SOL always has 9 decimals (lamports)
SOL_DECIMALS = 9

# SPL token programs that own mint accounts
TOKEN_PROGRAM_ID = Pubkey.from_string("TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA")
TOKEN_2022_PROGRAM_ID = Pubkey.from_string("TokenzQdBNbLqP5VEhdkAS6EPFLC1PHnBqCXEpPxuEb")

# Mint account layout: mint_authority (36) + supply (8) + decimals (1) + ...
MINT_ACCOUNT_SIZE = 82
MINT_DECIMALS_OFFSET = 44

DEFAULT_SLIPPAGE_BPS = 300  # 3%
MAX_BPS = 10_000

# Quote request options
ONLY_DIRECT_ROUTES = True
MAX_ACCOUNTS = 20

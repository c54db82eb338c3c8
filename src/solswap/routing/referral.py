"""Jupiter referral fee account derivation."""

from typing import Optional, Union

from solders.pubkey import Pubkey

from solswap.constants import JUPITER_REFERRAL_PROGRAM, REFERRAL_ATA_SEED, SOL_MINT


def derive_fee_account(
    referral_account: Union[str, Pubkey],
    mint: Pubkey = SOL_MINT,
    referral_program: Pubkey = JUPITER_REFERRAL_PROGRAM,
) -> Pubkey:
    """Derive the referral token account that collects platform fees.

    PDA seeds: ["referral_ata", referral account, mint] under the referral
    program. Pure function of its inputs.
    """
    if isinstance(referral_account, str):
        referral_account = Pubkey.from_string(referral_account)

    fee_account, _bump = Pubkey.find_program_address(
        [REFERRAL_ATA_SEED, bytes(referral_account), bytes(mint)],
        referral_program,
    )
    return fee_account


def resolve_fee_account(referral_account: Optional[str]) -> Optional[Pubkey]:
    """Fee account for a configured referral account, or None when unset."""
    if not referral_account:
        return None
    return derive_fee_account(referral_account)

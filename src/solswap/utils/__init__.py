"""Utility modules for solswap."""

from solswap.utils.log import configure_logging
from solswap.utils.units import to_base_units, to_decimal

__all__ = ["configure_logging", "to_base_units", "to_decimal"]

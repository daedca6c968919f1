"""
Address validation and normalization.

validate_address() is the gate in front of every outbound call: it accepts
all-lowercase, all-uppercase or correctly EIP-55 checksummed hex addresses
and returns the checksummed form, which is the canonical key for lookups.
"""

from __future__ import annotations

from typing import Any

from web3 import Web3

from backend_reputation.core.exceptions import InvalidAddress

__all__ = ["InvalidAddress", "validate_address", "is_valid_address"]


def validate_address(value: Any) -> str:
    """
    Return the checksummed form of value or raise InvalidAddress.

    Surrounding whitespace is ignored. Mixed-case input must carry a valid
    checksum; a single flipped letter case is rejected.
    """
    if value is None or not isinstance(value, str):
        raise InvalidAddress()
    candidate = value.strip()
    if not candidate or not candidate.startswith(("0x", "0X")):
        raise InvalidAddress()
    candidate = "0x" + candidate[2:]
    if not Web3.is_address(candidate):
        raise InvalidAddress()
    digits = candidate[2:]
    # is_address only checks hex structure; mixed case must pass EIP-55
    if digits not in (digits.lower(), digits.upper()) and not Web3.is_checksum_address(candidate):
        raise InvalidAddress()
    return Web3.to_checksum_address(candidate)


def is_valid_address(value: Any) -> bool:
    try:
        validate_address(value)
    except InvalidAddress:
        return False
    return True

"""Random identifiers for signature-mint vouchers."""

import secrets

UID_BYTES = 32


def generate_uid() -> str:
    """Return a fresh 32-byte uid as a 0x-prefixed hex string.

    Contracts reject a uid that was already minted, so every payload gets one.
    """
    return "0x" + secrets.token_hex(UID_BYTES)

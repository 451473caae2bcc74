"""Chain-wide address sentinels."""

ADDRESS_ZERO = "0x0000000000000000000000000000000000000000"

# Sentinel used by drop contracts for the chain's native currency
NATIVE_TOKEN_ADDRESS = "0xEeeeeEeeeEeEeeEeEeEeeEEEeeeeEeeeeeeeEEeE"


def is_native_token(address: str) -> bool:
    return address.lower() == NATIVE_TOKEN_ADDRESS.lower()


def is_zero_address(address: str | None) -> bool:
    return not address or address.lower() == ADDRESS_ZERO

"""Native-currency payable value for claims and signature mints."""

from src.tg_common.constants import is_native_token
from src.tg_common.units import WEI_DECIMALS


def payable_value(quantity_wei: int, price_per_token: int, currency_address: str) -> int:
    """quantity (whole tokens, given in wei) × price per token, in currency base units.

    Exact integer arithmetic; a fractional quantity truncates the last base
    unit. Zero unless the sale currency is the native token.
    """
    if not is_native_token(currency_address):
        return 0
    return quantity_wei * price_per_token // 10**WEI_DECIMALS

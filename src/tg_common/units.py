"""Integer arithmetic utilities for token amounts.

Human amounts are decimal strings ("1.5"); on-chain amounts are Python int
base units. No float, no Decimal: precision is exact for any supply size.
Intermediate representation is wei (18 decimals), rescaled to the token's
own decimal count.
"""

import re

from src.tg_common.errors import ParseError

WEI_DECIMALS = 18
MAX_UINT256 = 2**256 - 1
# len(str(MAX_UINT256))
MAX_WHOLE_DIGITS = 78

_AMOUNT_RE = re.compile(r"([0-9]*)(?:\.([0-9]*))?", re.ASCII)


def _check_decimals(decimals: int) -> None:
    if decimals < 0:
        raise ParseError(f"decimal count must be >= 0, got {decimals}")


def parse_units(amount: str | int, decimals: int) -> int:
    """Parse a non-negative decimal string into base units at `decimals`.

    Fractional digits past `decimals` are truncated. Only ASCII digits are
    accepted, and the whole part may not be longer than a uint256.
    """
    _check_decimals(decimals)
    text = str(amount).strip()
    if text.startswith("-"):
        raise ParseError(f"amount must not be negative, got {amount!r}")
    match = _AMOUNT_RE.fullmatch(text)
    if match is None or not (match.group(1) or match.group(2)):
        raise ParseError(f"not a decimal number: {amount!r}")
    if len(match.group(1).lstrip("0")) > MAX_WHOLE_DIGITS:
        raise ParseError(f"amount exceeds {MAX_WHOLE_DIGITS} whole digits")

    whole = int(match.group(1) or "0")
    fraction = (match.group(2) or "")[:decimals].ljust(decimals, "0")
    return whole * 10**decimals + int(fraction or "0")


def to_wei(amount: str | int) -> int:
    """'1.5' -> 1500000000000000000."""
    return parse_units(amount, WEI_DECIMALS)


def rescale(value: int, from_decimals: int, to_decimals: int) -> int:
    """Move a base-unit integer between decimal counts.

    Up-scaling is exact. Down-scaling truncates toward zero.
    """
    _check_decimals(from_decimals)
    _check_decimals(to_decimals)
    if to_decimals >= from_decimals:
        return value * 10 ** (to_decimals - from_decimals)
    factor = 10 ** (from_decimals - to_decimals)
    if value < 0:
        return -(-value // factor)
    return value // factor


def to_base_units(amount: str | int, decimals: int) -> int:
    """Human amount -> token base units, via the 18-decimal wei representation."""
    return rescale(to_wei(amount), WEI_DECIMALS, decimals)


def format_units(
    raw_value: int | str,
    decimals: int,
    display_decimals: int = 4,
    include_commas: bool = True,
) -> str:
    """Render base units as a human string, truncated (never rounded).

    12345678900000000000, 18 -> '12.3456'
    Never shows more fractional digits than `decimals` provides.
    """
    _check_decimals(decimals)
    if display_decimals < 0:
        raise ParseError(f"display decimals must be >= 0, got {display_decimals}")
    try:
        value = int(raw_value)
    except (TypeError, ValueError):
        raise ParseError(f"not an integer: {str(raw_value)[:80]!r}") from None
    if abs(value) > MAX_UINT256:
        raise ParseError("raw value out of uint256 range")

    sign = "-" if value < 0 else ""
    whole, fraction = divmod(abs(value), 10**decimals)
    whole_str = f"{whole:,}" if include_commas else str(whole)

    digits = min(display_decimals, decimals)
    if digits == 0:
        return f"{sign}{whole_str}"
    fraction_str = str(fraction).rjust(decimals, "0")[:digits]
    return f"{sign}{whole_str}.{fraction_str}"

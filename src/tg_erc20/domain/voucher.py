"""Signature-mint voucher codec: MintPayload <-> MintRequest <-> SignedPayload.

Vouchers always carry wei amounts (18 decimals) regardless of the token's own
decimals; the TokenERC20 contract interprets quantity that way. Pure
functions, no I/O.
"""

import binascii

from eth_utils import decode_hex, encode_hex, is_address

from src.tg_common.errors import ParseError
from src.tg_common.units import to_wei
from src.tg_erc20.domain.models import (
    MintPayload,
    MintRequest,
    SignedPayload,
    SignedPayloadOutput,
)

UID_LENGTH = 32
MAX_UINT128 = 2**128 - 1


def decode_uid(uid: str) -> bytes:
    """Hex uid -> bytes32 (shorter values are right-padded, like Solidity)."""
    try:
        raw = decode_hex(uid)
    except (binascii.Error, ValueError, TypeError):
        raise ParseError(f"uid is not hex: {uid!r}") from None
    if len(raw) > UID_LENGTH:
        raise ParseError(f"uid longer than {UID_LENGTH} bytes: {len(raw)}")
    return raw.ljust(UID_LENGTH, b"\x00")


def _check_address(field: str, value: str) -> str:
    if not is_address(value):
        raise ParseError(f"{field} is not an address: {value!r}")
    return value


def _check_timestamp(field: str, value: int) -> int:
    if not 0 <= value <= MAX_UINT128:
        raise ParseError(f"{field} out of uint128 range: {value}")
    return value


def _parse_int(field: str, value: str) -> int:
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        raise ParseError(f"{field} is not an integer: {value!r}") from None
    if parsed < 0:
        raise ParseError(f"{field} must not be negative: {value!r}")
    return parsed


def build_mint_request(payload: MintPayload, primary_sale_recipient: str) -> MintRequest:
    return MintRequest(
        to=_check_address("to", payload.to),
        primary_sale_recipient=_check_address(
            "primarySaleRecipient", primary_sale_recipient
        ),
        quantity=to_wei(payload.quantity),
        price=to_wei(payload.price),
        currency=_check_address("currencyAddress", payload.currency_address),
        validity_start_timestamp=_check_timestamp("mintStartTime", payload.mint_start_time),
        validity_end_timestamp=_check_timestamp("mintEndTime", payload.mint_end_time),
        uid=decode_uid(payload.uid),
    )


def request_from_signed(signed: SignedPayload) -> MintRequest:
    """Rebuild the exact struct that was signed from a SignedPayload."""
    p = signed.payload
    return MintRequest(
        to=_check_address("to", p.to),
        primary_sale_recipient=_check_address(
            "primarySaleRecipient", p.primary_sale_recipient
        ),
        quantity=_parse_int("quantity", p.quantity),
        price=_parse_int("price", p.price),
        currency=_check_address("currencyAddress", p.currency_address),
        validity_start_timestamp=_check_timestamp("mintStartTime", p.mint_start_time),
        validity_end_timestamp=_check_timestamp("mintEndTime", p.mint_end_time),
        uid=decode_uid(p.uid),
    )


def to_signed_output(req: MintRequest) -> SignedPayloadOutput:
    return SignedPayloadOutput(
        to=req.to,
        quantity=str(req.quantity),
        price=str(req.price),
        currency_address=req.currency,
        primary_sale_recipient=req.primary_sale_recipient,
        uid=encode_hex(req.uid),
        mint_start_time=req.validity_start_timestamp,
        mint_end_time=req.validity_end_timestamp,
    )


def decode_signature(signature: str) -> bytes:
    try:
        raw = decode_hex(signature)
    except (binascii.Error, ValueError, TypeError):
        raise ParseError("signature is not hex") from None
    if len(raw) != 65:
        raise ParseError(f"signature must be 65 bytes, got {len(raw)}")
    return raw

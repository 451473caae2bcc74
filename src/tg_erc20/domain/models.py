"""ERC20 domain models.

Wire models (WireModel subclasses) are what crosses the bridge, with
lower-camel-case keys. MintRequest is the on-chain struct mirror and never
leaves the process as JSON.
"""

from dataclasses import dataclass

from pydantic import Field

from src.tg_common.constants import ADDRESS_ZERO
from src.tg_common.datetime_utils import unix_in_years, unix_now
from src.tg_common.id_generator import generate_uid
from src.tg_common.wire import WireModel

DEFAULT_DECIMALS = 18
MINT_VALIDITY_YEARS = 10


class Currency(WireModel):
    name: str = ""
    symbol: str = ""
    decimals: int = Field(default=DEFAULT_DECIMALS, ge=0)


class CurrencyValue(Currency):
    raw_value: str = "0"        # exact base-unit integer
    display_value: str = "0"    # raw_value / 10^decimals, truncated


class ClaimCondition(WireModel):
    available_supply: str
    current_mint_supply: str
    max_claimable_supply: str
    max_claimable_per_wallet: str
    currency_address: str
    currency_metadata: CurrencyValue

    @property
    def price_per_token(self) -> int:
        return int(self.currency_metadata.raw_value)


class MintPayload(WireModel):
    """Request to sign: human-readable quantity and price."""

    to: str
    quantity: str
    price: str = "0"
    currency_address: str = ADDRESS_ZERO
    primary_sale_recipient: str = ADDRESS_ZERO
    uid: str = Field(default_factory=generate_uid)
    mint_start_time: int = Field(default_factory=unix_now)
    mint_end_time: int = Field(
        default_factory=lambda: unix_in_years(MINT_VALIDITY_YEARS)
    )


class SignedPayloadOutput(WireModel):
    """MintPayload as signed: quantity and price are wei integer strings."""

    to: str
    quantity: str
    price: str
    currency_address: str
    primary_sale_recipient: str
    uid: str
    mint_start_time: int
    mint_end_time: int


class SignedPayload(WireModel):
    signature: str
    payload: SignedPayloadOutput


@dataclass(frozen=True)
class MintRequest:
    """TokenERC20.MintRequest: field order is the EIP-712 / ABI order."""

    to: str
    primary_sale_recipient: str
    quantity: int
    price: int
    currency: str
    validity_start_timestamp: int
    validity_end_timestamp: int
    uid: bytes

    def as_abi_tuple(self) -> tuple:
        return (
            self.to,
            self.primary_sale_recipient,
            self.quantity,
            self.price,
            self.currency,
            self.validity_start_timestamp,
            self.validity_end_timestamp,
            self.uid,
        )

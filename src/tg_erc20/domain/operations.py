"""ERC20 operation Protocols.

Two implementations satisfy each Protocol: the local one in
src.tg_erc20.application (contract reader/writer) and the bridge one in
src.tg_erc20.infrastructure.bridge. Which one a caller gets is decided once,
by src.tg_erc20.application.factory.create_erc20.
"""

from typing import Protocol

from src.tg_contract.domain.models import TransactionResult
from src.tg_erc20.domain.models import (
    ClaimCondition,
    Currency,
    CurrencyValue,
    MintPayload,
    SignedPayload,
)


class ClaimConditionsOperations(Protocol):
    async def get_active(self) -> ClaimCondition: ...

    async def can_claim(self, quantity: str, address: str | None = None) -> bool: ...

    async def get_ineligibility_reasons(
        self, quantity: str, address: str | None = None
    ) -> list[str]: ...

    async def get_claimer_proofs(self, claimer_address: str) -> bool: ...


class SignatureOperations(Protocol):
    async def generate(
        self, payload: MintPayload, private_key: str | None = None
    ) -> SignedPayload: ...

    async def verify(self, signed: SignedPayload) -> bool: ...

    async def mint(self, signed: SignedPayload) -> TransactionResult: ...


class Erc20Operations(Protocol):
    address: str
    signature: SignatureOperations
    claim_conditions: ClaimConditionsOperations

    # Reads
    async def get(self) -> Currency: ...

    async def balance(self) -> CurrencyValue: ...

    async def balance_of(self, address: str) -> CurrencyValue: ...

    async def allowance(self, spender: str) -> CurrencyValue: ...

    async def allowance_of(self, owner: str, spender: str) -> CurrencyValue: ...

    async def total_supply(self) -> CurrencyValue: ...

    # Writes
    async def set_allowance(self, spender: str, amount: str) -> TransactionResult: ...

    async def transfer(self, to: str, amount: str) -> TransactionResult: ...

    async def transfer_from(
        self, from_address: str, to: str, amount: str
    ) -> TransactionResult: ...

    async def burn(self, amount: str) -> TransactionResult: ...

    async def claim(self, amount: str) -> TransactionResult: ...

    async def claim_to(self, address: str, amount: str) -> TransactionResult: ...

    async def mint(self, amount: str) -> TransactionResult: ...

    async def mint_to(self, address: str, amount: str) -> TransactionResult: ...

"""Bridge-backed ERC20 implementations for restricted runtimes.

Every operation becomes BridgeTransport.invoke calls; the bridge host runs
the local implementation out of process. Routes:

    contract.<address>.erc20.<method>
    contract.<address>.erc20.signature.<method>
    contract.<address>.erc20.claimConditions.<method>
    contract.<address>.call                  (raw read, args[0] = function)

Args are sent as a list of JSON documents, one per positional argument.
"""

import json
from typing import Any

from eth_utils import encode_hex
from pydantic import BaseModel

from src.tg_common.constants import is_zero_address
from src.tg_common.errors import UnsupportedOperationError
from src.tg_contract.context import SdkContext
from src.tg_contract.domain.models import TransactionResult
from src.tg_contract.domain.protocols import BridgeTransportProtocol
from src.tg_erc20.domain.eip712 import EIP712_DOMAIN_VERSION, SigningDomain, sign_mint_request
from src.tg_erc20.domain.models import (
    ClaimCondition,
    Currency,
    CurrencyValue,
    MintPayload,
    SignedPayload,
)
from src.tg_erc20.domain.voucher import build_mint_request, to_signed_output


def contract_route(address: str) -> str:
    return f"contract.{address}"


def erc20_route(address: str) -> str:
    return f"{contract_route(address)}.erc20"


def to_json_args(*values: Any) -> list[str]:
    return [
        value.model_dump_json(by_alias=True) if isinstance(value, BaseModel) else json.dumps(value)
        for value in values
    ]


class _BridgeRoutable:
    def __init__(self, bridge: BridgeTransportProtocol, base_route: str) -> None:
        self._bridge = bridge
        self._base_route = base_route

    async def _invoke(self, method: str, *args: Any) -> Any:
        return await self._bridge.invoke(f"{self._base_route}.{method}", to_json_args(*args))


class BridgeClaimConditions(_BridgeRoutable):
    async def get_active(self) -> ClaimCondition:
        return ClaimCondition.model_validate(await self._invoke("getActive"))

    async def can_claim(self, quantity: str, address: str | None = None) -> bool:
        return bool(await self._invoke("canClaim", quantity, address))

    async def get_ineligibility_reasons(
        self, quantity: str, address: str | None = None
    ) -> list[str]:
        return list(await self._invoke("getClaimIneligibilityReasons", quantity, address))

    async def get_claimer_proofs(self, claimer_address: str) -> bool:
        raise UnsupportedOperationError("claimConditions.getClaimerProofs")


class BridgeErc20Signature(_BridgeRoutable):
    def __init__(self, context: SdkContext, contract_address: str) -> None:
        super().__init__(context.bridge, f"{erc20_route(contract_address)}.signature")
        self._wallet = context.wallet
        self._address = contract_address

    async def generate(
        self, payload: MintPayload, private_key: str | None = None
    ) -> SignedPayload:
        """Sign on the bridge side, or locally when an explicit key is given.

        The ambient signer key is never used here: without an explicit key the
        bridge's signer is the only one available. With one, only the contract
        state the voucher needs is read through the bridge.
        """
        if not private_key:
            return SignedPayload.model_validate(await self._invoke("generate", payload))

        recipient = payload.primary_sale_recipient
        if is_zero_address(recipient):
            recipient = await self._call("primarySaleRecipient")
        req = build_mint_request(payload, recipient)
        domain = SigningDomain(
            name=await self._call("name"),
            version=EIP712_DOMAIN_VERSION,
            chain_id=await self._wallet.get_chain_id(),
            verifying_contract=self._address,
        )
        signature = sign_mint_request(domain, req, private_key)
        return SignedPayload(signature=encode_hex(signature), payload=to_signed_output(req))

    async def verify(self, signed: SignedPayload) -> bool:
        return bool(await self._invoke("verify", signed))

    async def mint(self, signed: SignedPayload) -> TransactionResult:
        return TransactionResult.model_validate(await self._invoke("mint", signed))

    async def _call(self, function: str) -> Any:
        """Raw contract read through the bridge."""
        return await self._bridge.invoke(
            f"{contract_route(self._address)}.call", to_json_args(function)
        )


class BridgeErc20(_BridgeRoutable):
    def __init__(self, context: SdkContext, contract_address: str) -> None:
        super().__init__(context.bridge, erc20_route(contract_address))
        self.address = contract_address
        self.signature = BridgeErc20Signature(context, contract_address)
        self.claim_conditions = BridgeClaimConditions(
            context.bridge, f"{erc20_route(contract_address)}.claimConditions"
        )

    async def get(self) -> Currency:
        return Currency.model_validate(await self._invoke("get"))

    async def balance(self) -> CurrencyValue:
        return await self._value("balance")

    async def balance_of(self, address: str) -> CurrencyValue:
        return await self._value("balanceOf", address)

    async def allowance(self, spender: str) -> CurrencyValue:
        return await self._value("allowance", spender)

    async def allowance_of(self, owner: str, spender: str) -> CurrencyValue:
        return await self._value("allowanceOf", owner, spender)

    async def total_supply(self) -> CurrencyValue:
        return await self._value("totalSupply")

    async def set_allowance(self, spender: str, amount: str) -> TransactionResult:
        return await self._tx("setAllowance", spender, amount)

    async def transfer(self, to: str, amount: str) -> TransactionResult:
        return await self._tx("transfer", to, amount)

    async def transfer_from(
        self, from_address: str, to: str, amount: str
    ) -> TransactionResult:
        return await self._tx("transferFrom", from_address, to, amount)

    async def burn(self, amount: str) -> TransactionResult:
        return await self._tx("burn", amount)

    async def claim(self, amount: str) -> TransactionResult:
        return await self._tx("claim", amount)

    async def claim_to(self, address: str, amount: str) -> TransactionResult:
        return await self._tx("claimTo", address, amount)

    async def mint(self, amount: str) -> TransactionResult:
        return await self._tx("mint", amount)

    async def mint_to(self, address: str, amount: str) -> TransactionResult:
        return await self._tx("mintTo", address, amount)

    async def _value(self, method: str, *args: Any) -> CurrencyValue:
        return CurrencyValue.model_validate(await self._invoke(method, *args))

    async def _tx(self, method: str, *args: Any) -> TransactionResult:
        return TransactionResult.model_validate(await self._invoke(method, *args))

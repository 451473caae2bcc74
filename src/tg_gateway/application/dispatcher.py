"""BridgeRouteDispatcher: resolves bridge routes onto the local Erc20.

Route grammar (same as src.tg_erc20.infrastructure.bridge):

    contract.<address>.erc20.<method>
    contract.<address>.erc20.signature.<method>
    contract.<address>.erc20.claimConditions.<method>
    contract.<address>.call                          args = [function, *args]

Each arg is decoded from JSON with the method's declared parameter type;
trailing optional parameters may be omitted. Results are encoded as
camelCase JSON-compatible data.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, TypeAdapter, ValidationError

from src.tg_common.errors import ParseError, UnsupportedOperationError
from src.tg_contract.context import SdkContext
from src.tg_contract.domain.models import ContractCall
from src.tg_erc20.application.service import Erc20
from src.tg_erc20.domain.models import MintPayload, SignedPayload

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Method:
    attr: str
    params: tuple[Any, ...] = ()
    required: int | None = None  # None: all params required

    @property
    def min_args(self) -> int:
        return len(self.params) if self.required is None else self.required


_ERC20_METHODS: dict[str, _Method] = {
    "get": _Method("get"),
    "balance": _Method("balance"),
    "balanceOf": _Method("balance_of", (str,)),
    "allowance": _Method("allowance", (str,)),
    "allowanceOf": _Method("allowance_of", (str, str)),
    "totalSupply": _Method("total_supply"),
    "setAllowance": _Method("set_allowance", (str, str)),
    "transfer": _Method("transfer", (str, str)),
    "transferFrom": _Method("transfer_from", (str, str, str)),
    "burn": _Method("burn", (str,)),
    "claim": _Method("claim", (str,)),
    "claimTo": _Method("claim_to", (str, str)),
    "mint": _Method("mint", (str,)),
    "mintTo": _Method("mint_to", (str, str)),
}

_SIGNATURE_METHODS: dict[str, _Method] = {
    "generate": _Method("generate", (MintPayload,)),
    "verify": _Method("verify", (SignedPayload,)),
    "mint": _Method("mint", (SignedPayload,)),
}

_CLAIM_CONDITION_METHODS: dict[str, _Method] = {
    "getActive": _Method("get_active"),
    "canClaim": _Method("can_claim", (str, str | None), required=1),
    "getClaimIneligibilityReasons": _Method(
        "get_ineligibility_reasons", (str, str | None), required=1
    ),
    "getClaimerProofs": _Method("get_claimer_proofs", (str,)),
}

_SUB_ROUTES: dict[str, tuple[str | None, dict[str, _Method]]] = {
    "": (None, _ERC20_METHODS),
    "signature": ("signature", _SIGNATURE_METHODS),
    "claimConditions": ("claim_conditions", _CLAIM_CONDITION_METHODS),
}


def encode_result(result: Any) -> Any:
    if isinstance(result, BaseModel):
        return result.model_dump(mode="json", by_alias=True)
    if isinstance(result, list):
        return [encode_result(item) for item in result]
    return result


def _decode_args(route: str, method: _Method, args: list[str]) -> list[Any]:
    if not method.min_args <= len(args) <= len(method.params):
        raise ParseError(
            f"{route} takes {method.min_args}-{len(method.params)} args, got {len(args)}"
        )
    decoded = []
    for param, raw in zip(method.params, args):
        try:
            decoded.append(TypeAdapter(param).validate_json(raw))
        except ValidationError as exc:
            raise ParseError(f"{route}: {exc.errors()[0]['msg']}") from None
    return decoded


class BridgeRouteDispatcher:
    def __init__(self, context: SdkContext) -> None:
        if context.restricted_runtime:
            raise ValueError("bridge host must run with a local (non-restricted) context")
        self._context = context

    async def dispatch(self, route: str, args: list[str]) -> Any:
        parts = route.split(".")
        if len(parts) < 3 or parts[0] != "contract":
            raise UnsupportedOperationError(route)
        address, rest = parts[1], parts[2:]

        if rest == ["call"]:
            return encode_result(await self._raw_read(route, address, args))
        if rest[0] != "erc20" or len(rest) not in (2, 3):
            raise UnsupportedOperationError(route)

        sub_route = rest[1] if len(rest) == 3 else ""
        if sub_route not in _SUB_ROUTES:
            raise UnsupportedOperationError(route)
        target_attr, methods = _SUB_ROUTES[sub_route]
        method = methods.get(rest[-1])
        if method is None:
            raise UnsupportedOperationError(route)

        erc20 = Erc20(self._context, address)
        target = getattr(erc20, target_attr) if target_attr else erc20
        call_args = _decode_args(route, method, args)
        logger.debug("dispatch %s → %s", route, method.attr)
        return encode_result(await getattr(target, method.attr)(*call_args))

    async def _raw_read(self, route: str, address: str, args: list[str]) -> Any:
        if not args:
            raise ParseError(f"{route} needs the function name as first arg")
        try:
            function, *call_args = [json.loads(raw) for raw in args]
        except json.JSONDecodeError as exc:
            raise ParseError(f"{route}: {exc.msg}") from None
        if not isinstance(function, str):
            raise ParseError(f"{route}: function name must be a string")
        return await self._context.reader.read(address, ContractCall(function, tuple(call_args)))

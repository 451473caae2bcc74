"""Unit tests for the bridge-backed ERC20 implementation and runtime selection."""

import json
from unittest.mock import AsyncMock

import pytest

from src.tg_common.errors import UnsupportedOperationError
from src.tg_contract.context import SdkContext
from src.tg_erc20.application.factory import create_erc20
from src.tg_erc20.application.service import Erc20
from src.tg_erc20.domain.eip712 import SigningDomain, recover_signer
from src.tg_erc20.domain.models import MintPayload, SignedPayload
from src.tg_erc20.domain.voucher import decode_signature, request_from_signed
from src.tg_erc20.infrastructure.bridge import BridgeErc20, to_json_args
from tests.fakes import (
    CHAIN_ID,
    RECEIVER,
    SALE_RECIPIENT,
    SIGNER_ADDRESS,
    SIGNER_KEY,
    TOKEN,
    WALLET,
    FakeReader,
    FakeWallet,
    make_writer,
)

ROUTE = f"contract.{TOKEN}.erc20"

_VALUE = {"name": "Gold", "symbol": "GLD", "decimals": 18, "rawValue": "5", "displayValue": "0.0000"}
_TX = {"status": "CONFIRMED", "hash": "0x" + "cd" * 32, "receipt": None}


def _bridge(result=None) -> AsyncMock:
    bridge = AsyncMock()
    bridge.invoke.return_value = result
    return bridge


def _bridge_context(bridge: AsyncMock) -> SdkContext:
    return SdkContext(wallet=FakeWallet(), bridge=bridge, restricted_runtime=True)


class TestRuntimeSelection:
    def test_restricted_runtime_gets_bridge(self) -> None:
        erc20 = create_erc20(_bridge_context(_bridge()), TOKEN)
        assert isinstance(erc20, BridgeErc20)

    def test_local_runtime_gets_local(self) -> None:
        ctx = SdkContext(
            wallet=FakeWallet(), reader=FakeReader(), writer=make_writer(), restricted_runtime=False
        )
        assert isinstance(create_erc20(ctx, TOKEN), Erc20)

    def test_restricted_without_bridge_rejected(self) -> None:
        with pytest.raises(ValueError, match="bridge"):
            SdkContext(wallet=FakeWallet(), restricted_runtime=True)

    def test_local_without_writer_rejected(self) -> None:
        with pytest.raises(ValueError, match="reader and writer"):
            SdkContext(wallet=FakeWallet(), reader=FakeReader(), restricted_runtime=False)


class TestJsonArgs:
    def test_plain_values(self) -> None:
        assert to_json_args(RECEIVER, "1.5", None) == [f'"{RECEIVER}"', '"1.5"', "null"]

    def test_models_use_wire_keys(self) -> None:
        payload = MintPayload(to=RECEIVER, quantity="1", uid="0x01", mint_start_time=1, mint_end_time=2)
        [arg] = to_json_args(payload)
        decoded = json.loads(arg)
        assert decoded["currencyAddress"] == payload.currency_address
        assert decoded["mintStartTime"] == 1


class TestBridgeErc20:
    @pytest.mark.asyncio
    async def test_balance_of(self) -> None:
        bridge = _bridge(_VALUE)
        value = await BridgeErc20(_bridge_context(bridge), TOKEN).balance_of(WALLET)
        bridge.invoke.assert_awaited_once_with(f"{ROUTE}.balanceOf", [f'"{WALLET}"'])
        assert value.raw_value == "5"

    @pytest.mark.asyncio
    async def test_get(self) -> None:
        bridge = _bridge({"name": "Gold", "symbol": "GLD", "decimals": 6})
        currency = await BridgeErc20(_bridge_context(bridge), TOKEN).get()
        bridge.invoke.assert_awaited_once_with(f"{ROUTE}.get", [])
        assert currency.decimals == 6

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method, args, route",
        [
            ("set_allowance", (RECEIVER, "1"), "setAllowance"),
            ("transfer", (RECEIVER, "1"), "transfer"),
            ("transfer_from", (WALLET, RECEIVER, "1"), "transferFrom"),
            ("burn", ("1",), "burn"),
            ("claim", ("1",), "claim"),
            ("claim_to", (RECEIVER, "1"), "claimTo"),
            ("mint", ("1",), "mint"),
            ("mint_to", (RECEIVER, "1"), "mintTo"),
        ],
    )
    async def test_writes_map_to_camel_case_routes(self, method, args, route) -> None:
        bridge = _bridge(_TX)
        result = await getattr(BridgeErc20(_bridge_context(bridge), TOKEN), method)(*args)
        bridge.invoke.assert_awaited_once_with(
            f"{ROUTE}.{route}", [json.dumps(a) for a in args]
        )
        assert result.is_success

    @pytest.mark.asyncio
    async def test_claim_conditions_routes(self) -> None:
        bridge = _bridge(["not enough supply"])
        erc20 = BridgeErc20(_bridge_context(bridge), TOKEN)
        reasons = await erc20.claim_conditions.get_ineligibility_reasons("5")
        bridge.invoke.assert_awaited_once_with(
            f"{ROUTE}.claimConditions.getClaimIneligibilityReasons", ['"5"', "null"]
        )
        assert reasons == ["not enough supply"]

    @pytest.mark.asyncio
    async def test_claimer_proofs_unsupported(self) -> None:
        bridge = _bridge()
        erc20 = BridgeErc20(_bridge_context(bridge), TOKEN)
        with pytest.raises(UnsupportedOperationError):
            await erc20.claim_conditions.get_claimer_proofs(WALLET)
        bridge.invoke.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_bridge_errors_propagate(self) -> None:
        bridge = _bridge()
        bridge.invoke.side_effect = UnsupportedOperationError("x")
        with pytest.raises(UnsupportedOperationError):
            await BridgeErc20(_bridge_context(bridge), TOKEN).total_supply()


class TestBridgeSignature:
    def _remote_signed(self, payload: MintPayload) -> dict:
        return {
            "signature": "0x" + "00" * 65,
            "payload": {
                "to": payload.to,
                "quantity": str(10**18),
                "price": "0",
                "currencyAddress": payload.currency_address,
                "primarySaleRecipient": SALE_RECIPIENT,
                "uid": payload.uid,
                "mintStartTime": payload.mint_start_time,
                "mintEndTime": payload.mint_end_time,
            },
        }

    @pytest.mark.asyncio
    async def test_generate_without_key_returns_bridge_result(self) -> None:
        payload = MintPayload(to=RECEIVER, quantity="1")
        bridge = _bridge(self._remote_signed(payload))
        erc20 = BridgeErc20(_bridge_context(bridge), TOKEN)

        signed = await erc20.signature.generate(payload)

        assert signed.signature == "0x" + "00" * 65
        bridge.invoke.assert_awaited_once()
        assert bridge.invoke.await_args.args[0] == f"{ROUTE}.signature.generate"

    @pytest.mark.asyncio
    async def test_generate_with_key_signs_locally(self) -> None:
        payload = MintPayload(to=RECEIVER, quantity="1")
        bridge = AsyncMock()
        bridge.invoke.side_effect = [SALE_RECIPIENT, "Gold"]
        erc20 = BridgeErc20(_bridge_context(bridge), TOKEN)

        signed = await erc20.signature.generate(payload, private_key=SIGNER_KEY)

        routes = [call.args for call in bridge.invoke.await_args_list]
        assert routes == [
            (f"contract.{TOKEN}.call", ['"primarySaleRecipient"']),
            (f"contract.{TOKEN}.call", ['"name"']),
        ]
        assert signed.payload.primary_sale_recipient == SALE_RECIPIENT
        assert signed.payload.quantity == str(10**18)
        assert signed.payload.uid == payload.uid
        domain = SigningDomain("Gold", "1", CHAIN_ID, TOKEN)
        recovered = recover_signer(
            domain, request_from_signed(signed), decode_signature(signed.signature)
        )
        assert recovered == SIGNER_ADDRESS

    @pytest.mark.asyncio
    async def test_generate_with_key_and_recipient_reads_only_name(self) -> None:
        payload = MintPayload(to=RECEIVER, quantity="1", primary_sale_recipient=WALLET)
        bridge = _bridge("Gold")
        erc20 = BridgeErc20(_bridge_context(bridge), TOKEN)

        signed = await erc20.signature.generate(payload, private_key=SIGNER_KEY)

        bridge.invoke.assert_awaited_once_with(f"contract.{TOKEN}.call", ['"name"'])
        assert signed.payload.primary_sale_recipient == WALLET

    @pytest.mark.asyncio
    async def test_verify_and_mint_routes(self) -> None:
        payload = MintPayload(to=RECEIVER, quantity="1")
        signed = SignedPayload.model_validate(self._remote_signed(payload))
        bridge = _bridge(True)
        erc20 = BridgeErc20(_bridge_context(bridge), TOKEN)

        assert await erc20.signature.verify(signed) is True
        route, args = bridge.invoke.await_args.args
        assert route == f"{ROUTE}.signature.verify"
        assert json.loads(args[0])["payload"]["primarySaleRecipient"] == SALE_RECIPIENT

        bridge.invoke.return_value = _TX
        result = await erc20.signature.mint(signed)
        assert bridge.invoke.await_args.args[0] == f"{ROUTE}.signature.mint"
        assert result.hash == _TX["hash"]

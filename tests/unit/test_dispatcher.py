"""Unit tests for BridgeRouteDispatcher: route resolution and argument decoding."""

import json

import pytest

from src.tg_common.errors import ParseError, UnsupportedOperationError
from src.tg_contract.context import SdkContext
from src.tg_gateway.application.dispatcher import BridgeRouteDispatcher, encode_result
from src.tg_erc20.domain.models import Currency
from tests.fakes import (
    RECEIVER,
    SALE_RECIPIENT,
    SIGNER_KEY,
    TOKEN,
    WALLET,
    FakeReader,
    FakeWallet,
    make_context,
    make_writer,
    token_responses,
)

ROUTE = f"contract.{TOKEN}.erc20"


def _dispatcher(reader: FakeReader | None = None, writer=None, key=None) -> BridgeRouteDispatcher:
    reader = reader or FakeReader(
        token_responses(
            balanceOf=lambda address, owner: 7 * 10**18,
            totalSupply=10**21,
            primarySaleRecipient=SALE_RECIPIENT,
        )
    )
    return BridgeRouteDispatcher(make_context(reader, writer, signer_private_key=key))


class TestConstruction:
    def test_restricted_context_rejected(self) -> None:
        ctx = SdkContext(wallet=FakeWallet(), bridge=object(), restricted_runtime=True)
        with pytest.raises(ValueError):
            BridgeRouteDispatcher(ctx)


class TestRoutes:
    @pytest.mark.asyncio
    async def test_read_returns_wire_json(self) -> None:
        result = await _dispatcher().dispatch(f"{ROUTE}.balanceOf", [json.dumps(WALLET)])
        assert result["rawValue"] == str(7 * 10**18)
        assert result["displayValue"] == "7.0000"
        assert result["symbol"] == "GLD"

    @pytest.mark.asyncio
    async def test_no_arg_read(self) -> None:
        result = await _dispatcher().dispatch(f"{ROUTE}.totalSupply", [])
        assert result["displayValue"] == "1,000.0000"

    @pytest.mark.asyncio
    async def test_write(self) -> None:
        writer = make_writer()
        result = await _dispatcher(writer=writer).dispatch(
            f"{ROUTE}.transfer", [json.dumps(RECEIVER), json.dumps("2")]
        )
        assert result["status"] == "CONFIRMED"
        _, call, _ = writer.write.await_args.args
        assert call.function == "transfer"
        assert call.args == (RECEIVER, 2 * 10**18)

    @pytest.mark.asyncio
    async def test_signature_sub_route(self) -> None:
        payload = {"to": RECEIVER, "quantity": "3", "uid": "0x01", "mintStartTime": 1, "mintEndTime": 2}
        result = await _dispatcher(key=SIGNER_KEY).dispatch(
            f"{ROUTE}.signature.generate", [json.dumps(payload)]
        )
        assert result["payload"]["quantity"] == str(3 * 10**18)
        assert result["payload"]["primarySaleRecipient"] == SALE_RECIPIENT
        assert result["signature"].startswith("0x")

    @pytest.mark.asyncio
    async def test_optional_trailing_arg_may_be_omitted(self) -> None:
        # Local claim-eligibility checks are not available; the route still
        # resolves and decodes before the operation reports that.
        with pytest.raises(UnsupportedOperationError):
            await _dispatcher().dispatch(f"{ROUTE}.claimConditions.canClaim", ['"1"'])

    @pytest.mark.asyncio
    async def test_raw_call(self) -> None:
        result = await _dispatcher().dispatch(f"contract.{TOKEN}.call", ['"name"'])
        assert result == "Gold"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "route",
        [
            "erc20.balance",
            f"wallet.{TOKEN}.erc20.balance",
            f"contract.{TOKEN}.erc721.balance",
            f"{ROUTE}.selfDestruct",
            f"{ROUTE}.nested.deeper.balance",
            f"{ROUTE}.unknownSub.get",
            f"{ROUTE}.signature.balance",
        ],
    )
    async def test_unknown_routes_unsupported(self, route: str) -> None:
        with pytest.raises(UnsupportedOperationError):
            await _dispatcher().dispatch(route, [])


class TestArgDecoding:
    @pytest.mark.asyncio
    async def test_wrong_arg_count(self) -> None:
        with pytest.raises(ParseError, match="takes 1-1 args, got 0"):
            await _dispatcher().dispatch(f"{ROUTE}.balanceOf", [])

    @pytest.mark.asyncio
    async def test_invalid_json(self) -> None:
        with pytest.raises(ParseError):
            await _dispatcher().dispatch(f"{ROUTE}.balanceOf", ["not json"])

    @pytest.mark.asyncio
    async def test_wrong_type(self) -> None:
        with pytest.raises(ParseError):
            await _dispatcher().dispatch(f"{ROUTE}.balanceOf", ["42"])

    @pytest.mark.asyncio
    async def test_raw_call_needs_function(self) -> None:
        with pytest.raises(ParseError):
            await _dispatcher().dispatch(f"contract.{TOKEN}.call", [])

    @pytest.mark.asyncio
    async def test_raw_call_function_must_be_string(self) -> None:
        with pytest.raises(ParseError):
            await _dispatcher().dispatch(f"contract.{TOKEN}.call", ["1"])


class TestEncodeResult:
    def test_models_and_lists(self) -> None:
        currency = Currency(name="Gold", symbol="GLD", decimals=6)
        assert encode_result([currency, "x"]) == [
            {"name": "Gold", "symbol": "GLD", "decimals": 6},
            "x",
        ]

    def test_plain_values_pass_through(self) -> None:
        assert encode_result(True) is True
        assert encode_result(None) is None

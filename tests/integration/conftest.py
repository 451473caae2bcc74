"""Integration-test fixtures.

The bridge host app runs in process over httpx's ASGITransport, backed by a
local SdkContext built from the in-memory fakes. HttpBridgeTransport talks to
it exactly as it would to a remote host.
"""

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.main import create_app
from src.tg_contract.context import SdkContext
from src.tg_contract.infrastructure.http_bridge import HttpBridgeTransport
from tests.fakes import (
    SALE_RECIPIENT,
    SIGNER_KEY,
    FakeReader,
    FakeWallet,
    make_context,
    make_writer,
    token_responses,
)

INVOKE_PATH = "/api/v1/bridge/invoke"


@pytest_asyncio.fixture
async def host_reader() -> FakeReader:
    return FakeReader(
        token_responses(
            decimals=6,
            balanceOf=lambda address, owner: 2_500_000,
            totalSupply=10**12,
            primarySaleRecipient=SALE_RECIPIENT,
        )
    )


@pytest_asyncio.fixture
async def host_writer():
    return make_writer()


@pytest_asyncio.fixture
async def client(host_reader: FakeReader, host_writer) -> AsyncClient:
    app = create_app(make_context(host_reader, host_writer, signer_private_key=SIGNER_KEY))
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def bridge_context(client: AsyncClient) -> SdkContext:
    """Restricted-runtime context whose bridge is the in-process host."""
    return SdkContext(
        wallet=FakeWallet(),
        bridge=HttpBridgeTransport(url=INVOKE_PATH, client=client),
        restricted_runtime=True,
        signer_private_key=None,
    )


@pytest_asyncio.fixture
async def keyless_client(host_reader: FakeReader, host_writer) -> AsyncClient:
    """Bridge host configured without an ambient signer key."""
    app = create_app(make_context(host_reader, host_writer, signer_private_key=None))
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def keyless_bridge_context(keyless_client: AsyncClient) -> SdkContext:
    return SdkContext(
        wallet=FakeWallet(),
        bridge=HttpBridgeTransport(url=INVOKE_PATH, client=keyless_client),
        restricted_runtime=True,
        signer_private_key=None,
    )

"""Collaborator Protocols: dependency inversion for testability.

Unit tests inject mocks that conform to these Protocols.
The host application provides the real chain-backed implementations;
RPC transport and key management live outside this package.
"""

from typing import Any, Protocol

from src.tg_contract.domain.models import ContractCall, TransactionResult


class ContractReaderProtocol(Protocol):
    async def read(self, address: str, call: ContractCall) -> Any: ...


class ContractWriterProtocol(Protocol):
    async def write(
        self,
        address: str,
        call: ContractCall,
        native_value: int = 0,
    ) -> TransactionResult:
        """Submit a transaction. Raises TransactionFailedError; never retried here."""
        ...


class WalletContextProtocol(Protocol):
    async def get_address(self) -> str: ...

    async def get_chain_id(self) -> int: ...


class BridgeTransportProtocol(Protocol):
    async def invoke(self, route: str, args: list[str]) -> Any:
        """Call `route` out of process. Each arg is a JSON document."""
        ...

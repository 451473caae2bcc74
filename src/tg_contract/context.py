"""SdkContext: the explicitly passed "connected wallet / chain" handle.

Built once at startup by the host. Read-only from this package's side.
`restricted_runtime` picks the bridge-backed implementations; reader and
writer are unused in that mode, bridge is unused otherwise.
"""

from dataclasses import dataclass

from config.settings import settings
from src.tg_contract.domain.protocols import (
    BridgeTransportProtocol,
    ContractReaderProtocol,
    ContractWriterProtocol,
    WalletContextProtocol,
)


@dataclass(frozen=True)
class SdkContext:
    wallet: WalletContextProtocol
    reader: ContractReaderProtocol | None = None
    writer: ContractWriterProtocol | None = None
    bridge: BridgeTransportProtocol | None = None
    restricted_runtime: bool = settings.RESTRICTED_RUNTIME
    signer_private_key: str | None = settings.SIGNER_PRIVATE_KEY

    def __post_init__(self) -> None:
        if self.restricted_runtime and self.bridge is None:
            raise ValueError("restricted runtime requires a bridge transport")
        if not self.restricted_runtime and (self.reader is None or self.writer is None):
            raise ValueError("local runtime requires a contract reader and writer")

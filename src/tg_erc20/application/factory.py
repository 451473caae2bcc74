"""Pick the ERC20 implementation for the runtime, once, at construction."""

from src.tg_contract.context import SdkContext
from src.tg_erc20.application.service import Erc20
from src.tg_erc20.domain.operations import Erc20Operations
from src.tg_erc20.infrastructure.bridge import BridgeErc20


def create_erc20(context: SdkContext, contract_address: str) -> Erc20Operations:
    if context.restricted_runtime:
        return BridgeErc20(context, contract_address)
    return Erc20(context, contract_address)

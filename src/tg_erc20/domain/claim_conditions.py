"""ClaimConditionResolver: active drop claim condition, currency-aware.

Currency metadata is best effort: a failed lookup (non-ERC20 currency such
as the native token, RPC hiccup) is logged and replaced by an empty Currency
so the claim price stays usable. Every other read error propagates.
"""

import logging

from src.tg_common.errors import MetadataUnavailableError, UnsupportedOperationError
from src.tg_contract.domain.models import ContractCall
from src.tg_contract.domain.protocols import ContractReaderProtocol
from src.tg_erc20.domain.currency import currency_value, read_currency
from src.tg_erc20.domain.models import ClaimCondition, Currency

logger = logging.getLogger(__name__)


class ClaimConditionResolver:
    def __init__(self, reader: ContractReaderProtocol, contract_address: str) -> None:
        self._reader = reader
        self._address = contract_address

    async def get_active(self) -> ClaimCondition:
        condition_id = await self._reader.read(
            self._address, ContractCall("getActiveClaimConditionId")
        )
        data = await self._reader.read(
            self._address, ContractCall("getClaimConditionById", (condition_id,))
        )

        currency_address = data["currency"]
        currency = await self._currency_or_empty(currency_address)

        max_supply = int(data["maxClaimableSupply"])
        claimed = int(data["supplyClaimed"])
        return ClaimCondition(
            available_supply=str(max_supply - claimed),
            current_mint_supply=str(claimed),
            max_claimable_supply=str(max_supply),
            max_claimable_per_wallet=str(int(data["quantityLimitPerWallet"])),
            currency_address=currency_address,
            currency_metadata=currency_value(currency, int(data["pricePerToken"])),
        )

    async def can_claim(self, quantity: str, address: str | None = None) -> bool:
        raise UnsupportedOperationError("claimConditions.canClaim")

    async def get_ineligibility_reasons(
        self, quantity: str, address: str | None = None
    ) -> list[str]:
        raise UnsupportedOperationError("claimConditions.getClaimIneligibilityReasons")

    async def get_claimer_proofs(self, claimer_address: str) -> bool:
        # Merkle allowlists are not supported in any runtime
        raise UnsupportedOperationError("claimConditions.getClaimerProofs")

    async def _currency_or_empty(self, currency_address: str) -> Currency:
        try:
            return await read_currency(self._reader, currency_address)
        except Exception as exc:
            err = MetadataUnavailableError(currency_address, str(exc))
            logger.warning("%s; proceeding without it", err.message)
            return Currency()

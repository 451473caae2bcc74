"""Erc20: local ERC20 / DropERC20 / TokenERC20 operations.

Reads return CurrencyValue snapshots (metadata is re-read on every call).
Writes convert the human amount to base units at the token's own decimals,
read once per call, then go through submit_write. Signature vouchers are the
exception: they always use 18 decimals (see src.tg_erc20.domain.voucher).
"""

from config.settings import settings
from src.tg_common.units import to_base_units, to_wei
from src.tg_contract.application.writes import submit_write
from src.tg_contract.context import SdkContext
from src.tg_contract.domain.models import ContractCall, TransactionResult
from src.tg_erc20.application.signature import Erc20Signature
from src.tg_erc20.domain.claim_conditions import ClaimConditionResolver
from src.tg_erc20.domain.currency import currency_value, read_currency
from src.tg_erc20.domain.models import Currency, CurrencyValue
from src.tg_erc20.domain.pricing import payable_value


class Erc20:
    def __init__(self, context: SdkContext, contract_address: str) -> None:
        self.address = contract_address
        self._reader = context.reader
        self._writer = context.writer
        self._wallet = context.wallet
        self.signature = Erc20Signature(context, contract_address)
        self.claim_conditions = ClaimConditionResolver(context.reader, contract_address)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def get(self) -> Currency:
        return await read_currency(self._reader, self.address)

    async def balance(self) -> CurrencyValue:
        return await self.balance_of(await self._wallet.get_address())

    async def balance_of(self, address: str) -> CurrencyValue:
        return await self._read_value(ContractCall("balanceOf", (address,)))

    async def allowance(self, spender: str) -> CurrencyValue:
        return await self.allowance_of(await self._wallet.get_address(), spender)

    async def allowance_of(self, owner: str, spender: str) -> CurrencyValue:
        return await self._read_value(ContractCall("allowance", (owner, spender)))

    async def total_supply(self) -> CurrencyValue:
        return await self._read_value(ContractCall("totalSupply"))

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    async def set_allowance(self, spender: str, amount: str) -> TransactionResult:
        raw = await self._to_raw(amount)
        return await self._write(ContractCall("approve", (spender, raw)))

    async def transfer(self, to: str, amount: str) -> TransactionResult:
        raw = await self._to_raw(amount)
        return await self._write(ContractCall("transfer", (to, raw)))

    async def transfer_from(
        self, from_address: str, to: str, amount: str
    ) -> TransactionResult:
        raw = await self._to_raw(amount)
        return await self._write(ContractCall("transferFrom", (from_address, to, raw)))

    async def burn(self, amount: str) -> TransactionResult:
        raw = await self._to_raw(amount)
        return await self._write(ContractCall("burn", (raw,)))

    async def claim(self, amount: str) -> TransactionResult:
        return await self.claim_to(await self._wallet.get_address(), amount)

    async def claim_to(self, address: str, amount: str) -> TransactionResult:
        """Claim from a DropERC20 at the active condition's price.

        Allowlist proof is always empty: only public claim phases succeed.
        """
        condition = await self.claim_conditions.get_active()
        quantity = await self._to_raw(amount)
        price = condition.price_per_token
        allowlist_proof = (
            [],
            int(condition.max_claimable_per_wallet),
            price,
            condition.currency_address,
        )
        call = ContractCall(
            "claim",
            (address, quantity, condition.currency_address, price, allowlist_proof, b""),
        )
        value = payable_value(to_wei(amount), price, condition.currency_address)
        return await self._write(call, value)

    async def mint(self, amount: str) -> TransactionResult:
        return await self.mint_to(await self._wallet.get_address(), amount)

    async def mint_to(self, address: str, amount: str) -> TransactionResult:
        raw = await self._to_raw(amount)
        return await self._write(ContractCall("mintTo", (address, raw)))

    # ------------------------------------------------------------------

    async def _decimals(self) -> int:
        return int(await self._reader.read(self.address, ContractCall("decimals")))

    async def _to_raw(self, amount: str) -> int:
        return to_base_units(amount, await self._decimals())

    async def _read_value(self, call: ContractCall) -> CurrencyValue:
        currency = await self.get()
        raw = await self._reader.read(self.address, call)
        return currency_value(currency, int(raw), settings.DISPLAY_DECIMALS)

    async def _write(self, call: ContractCall, native_value: int = 0) -> TransactionResult:
        return await submit_write(self._writer, self.address, call, native_value)

"""Currency metadata reads and CurrencyValue construction."""

from config.settings import settings
from src.tg_common.units import format_units
from src.tg_contract.domain.models import ContractCall
from src.tg_contract.domain.protocols import ContractReaderProtocol
from src.tg_erc20.domain.models import Currency, CurrencyValue


async def read_currency(reader: ContractReaderProtocol, address: str) -> Currency:
    """Fresh name/symbol/decimals snapshot; nothing is cached between calls."""
    decimals = await reader.read(address, ContractCall("decimals"))
    name = await reader.read(address, ContractCall("name"))
    symbol = await reader.read(address, ContractCall("symbol"))
    return Currency(name=name, symbol=symbol, decimals=int(decimals))


def currency_value(
    currency: Currency,
    raw_value: int,
    display_decimals: int = settings.DISPLAY_DECIMALS,
) -> CurrencyValue:
    return CurrencyValue(
        name=currency.name,
        symbol=currency.symbol,
        decimals=currency.decimals,
        raw_value=str(raw_value),
        display_value=format_units(raw_value, currency.decimals, display_decimals, True),
    )

"""Contract call and transaction models shared by readers, writers and the bridge."""

from dataclasses import dataclass, field
from typing import Any

from src.tg_common.enums import TransactionStatus
from src.tg_common.wire import WireModel


@dataclass(frozen=True)
class ContractCall:
    """A contract function invocation: ABI function name + positional args."""

    function: str
    args: tuple[Any, ...] = field(default_factory=tuple)

    def __str__(self) -> str:
        return f"{self.function}({len(self.args)} args)"


class TransactionResult(WireModel):
    status: TransactionStatus
    hash: str | None = None
    receipt: dict[str, Any] | None = None

    @property
    def is_success(self) -> bool:
        return self.status == TransactionStatus.CONFIRMED

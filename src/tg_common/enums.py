"""Global enums: values are part of the bridge JSON contract."""

from enum import Enum


class TransactionStatus(str, Enum):
    """Write lifecycle: PENDING → SUBMITTED → CONFIRMED | REVERTED | FAILED.

    FAILED is also reachable straight from PENDING (rejected before broadcast).
    """

    PENDING = "PENDING"
    SUBMITTED = "SUBMITTED"
    CONFIRMED = "CONFIRMED"
    REVERTED = "REVERTED"
    FAILED = "FAILED"

    @property
    def is_final(self) -> bool:
        return self in (
            TransactionStatus.CONFIRMED,
            TransactionStatus.REVERTED,
            TransactionStatus.FAILED,
        )

    def can_transition_to(self, target: "TransactionStatus") -> bool:
        return target in _TRANSITIONS[self]


_TRANSITIONS: dict[TransactionStatus, frozenset[TransactionStatus]] = {
    TransactionStatus.PENDING: frozenset(
        {TransactionStatus.SUBMITTED, TransactionStatus.FAILED}
    ),
    TransactionStatus.SUBMITTED: frozenset(
        {TransactionStatus.CONFIRMED, TransactionStatus.REVERTED, TransactionStatus.FAILED}
    ),
    TransactionStatus.CONFIRMED: frozenset(),
    TransactionStatus.REVERTED: frozenset(),
    TransactionStatus.FAILED: frozenset(),
}

"""Write submission with lifecycle logging.

Lifecycle: PENDING (built here) → SUBMITTED → CONFIRMED | REVERTED | FAILED
(reported by the writer). Writes are not idempotent: nothing is retried,
and errors from the writer propagate unmodified.
"""

import logging

from src.tg_common.enums import TransactionStatus
from src.tg_common.errors import InternalError
from src.tg_contract.domain.models import ContractCall, TransactionResult
from src.tg_contract.domain.protocols import ContractWriterProtocol

logger = logging.getLogger(__name__)


async def submit_write(
    writer: ContractWriterProtocol,
    address: str,
    call: ContractCall,
    native_value: int = 0,
) -> TransactionResult:
    logger.info(
        "tx %s %s value=%d: %s", address, call, native_value, TransactionStatus.PENDING.value
    )
    try:
        result = await writer.write(address, call, native_value)
    except Exception as exc:
        logger.warning("tx %s %s: %s (%s)", address, call, TransactionStatus.FAILED.value, exc)
        raise

    reachable = TransactionStatus.PENDING.can_transition_to(
        result.status
    ) or TransactionStatus.SUBMITTED.can_transition_to(result.status)
    if not reachable:
        raise InternalError(f"writer returned unreachable status {result.status.value}")
    logger.info("tx %s %s: %s hash=%s", address, call, result.status.value, result.hash)
    return result

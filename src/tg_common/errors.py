"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: Input parsing
  2xxx: Runtime capability
  3xxx: Signature
  4xxx: Contract / metadata
  9xxx: System / bridge
"""


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


# --- 1xxx: Input ---

class ParseError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(1001, f"Parse error: {detail}", 422)


# --- 2xxx: Capability ---

class UnsupportedOperationError(AppError):
    def __init__(self, operation: str) -> None:
        super().__init__(
            2001,
            f"Operation not available on the current runtime: {operation}",
            501,
        )


# --- 3xxx: Signature ---

class SignatureMismatchError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(3001, f"Signature mismatch: {detail}", 422)


# --- 4xxx: Contract / metadata ---

class MetadataUnavailableError(AppError):
    def __init__(self, address: str, detail: str = "") -> None:
        message = f"Currency metadata unavailable for {address}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(4001, message, 502)


class TransactionFailedError(AppError):
    tx_hash: str | None = None

    def __init__(self, detail: str, tx_hash: str | None = None) -> None:
        self.tx_hash = tx_hash
        super().__init__(4002, f"Transaction failed: {detail}", 502)


# --- 9xxx: System ---

class BridgeError(AppError):
    def __init__(self, route: str, detail: str) -> None:
        super().__init__(9001, f"Bridge call {route} failed: {detail}", 502)


class InternalError(AppError):
    def __init__(self, detail: str = "Internal server error") -> None:
        super().__init__(9002, detail, 500)


_ERRORS_BY_CODE: dict[int, type[AppError]] = {
    1001: ParseError,
    2001: UnsupportedOperationError,
    3001: SignatureMismatchError,
    4001: MetadataUnavailableError,
    4002: TransactionFailedError,
    9001: BridgeError,
    9002: InternalError,
}


def error_from_code(code: int, message: str, http_status: int = 500) -> AppError:
    """Rebuild an error received over the bridge as its original subclass.

    The message is kept verbatim; subclass constructors are bypassed so the
    remote text is not re-prefixed.
    """
    cls = _ERRORS_BY_CODE.get(code, AppError)
    err = cls.__new__(cls)
    AppError.__init__(err, code, message, http_status)
    return err

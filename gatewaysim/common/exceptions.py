"""Usage faults raised by the simulator.

Business outcomes (validation failures, processor declines) are returned as
results and never raised. Everything here signals a caller bug.
"""


class GatewaySimError(Exception):
    """Base class for simulator usage faults."""


class InvalidTransitionError(GatewaySimError, ValueError):
    """A status change not permitted by the transaction state machine."""

    def __init__(self, current: str | None, new: str) -> None:
        self.current = current
        self.new = new
        super().__init__(f"Invalid transition: {current} -> {new}")


class TransactionNotAuthorizedError(GatewaySimError):
    """Settlement requested for a transaction that is not authorized."""

    def __init__(self, transaction_id: str | None = None, status: str | None = None) -> None:
        self.transaction_id = transaction_id
        self.status = status
        super().__init__("Transaction not authorized")


class UnknownRedirectError(GatewaySimError, KeyError):
    """No transparent redirect callback is registered for the token."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(token)

    def __str__(self) -> str:
        return f"No transparent redirect registered for {self.token!r}"


class QueryStringConflictError(GatewaySimError):
    """A request's redirect query string was about to be overwritten."""

    def __init__(self, current: str, incoming: str) -> None:
        self.current = current
        self.incoming = incoming
        super().__init__(
            f"Gateway simulator set up query string {current!r}, "
            f"but it was about to get overwritten with {incoming!r}"
        )

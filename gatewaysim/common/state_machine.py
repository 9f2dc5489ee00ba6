"""Transaction status values and the transitions the simulator allows."""

from gatewaysim.common.exceptions import InvalidTransitionError


class TransactionStatus:
    """Gateway status strings as reported on a transaction."""

    AUTHORIZING = "authorizing"
    AUTHORIZED = "authorized"
    PROCESSOR_DECLINED = "processor_declined"
    SUBMITTED_FOR_SETTLEMENT = "submitted_for_settlement"
    SETTLEMENT_FAILED = "settlement_failed"
    GATEWAY_REJECTED = "gateway_rejected"
    VOIDED = "voided"
    SETTLED = "settled"
    UNKNOWN = "unknown"
    FAILED = "failed"

    ALL = (
        SETTLEMENT_FAILED,
        GATEWAY_REJECTED,
        VOIDED,
        SETTLED,
        AUTHORIZED,
        UNKNOWN,
        PROCESSOR_DECLINED,
        AUTHORIZING,
        SUBMITTED_FOR_SETTLEMENT,
        FAILED,
    )


# Only authorizing -> authorized/processor_declined and
# authorized -> submitted_for_settlement are driven by the simulator; the rest
# mirror the real gateway lifecycle.
ALLOWED_TRANSITIONS: dict[str, set[str]] = {
    TransactionStatus.AUTHORIZING: {
        TransactionStatus.AUTHORIZED,
        TransactionStatus.PROCESSOR_DECLINED,
        TransactionStatus.GATEWAY_REJECTED,
        TransactionStatus.FAILED,
    },
    TransactionStatus.AUTHORIZED: {
        TransactionStatus.SUBMITTED_FOR_SETTLEMENT,
        TransactionStatus.VOIDED,
    },
    TransactionStatus.SUBMITTED_FOR_SETTLEMENT: {
        TransactionStatus.SETTLED,
        TransactionStatus.SETTLEMENT_FAILED,
        TransactionStatus.VOIDED,
    },
    TransactionStatus.PROCESSOR_DECLINED: set(),
    TransactionStatus.GATEWAY_REJECTED: set(),
    TransactionStatus.SETTLED: set(),
    TransactionStatus.SETTLEMENT_FAILED: set(),
    TransactionStatus.VOIDED: set(),
    TransactionStatus.UNKNOWN: set(),
    TransactionStatus.FAILED: set(),
}


def validate_transition(current: str | None, new: str) -> None:
    """Raise when a transition is not allowed by the state machine.

    A transaction without a status yet is still authorizing.
    """

    effective = current or TransactionStatus.AUTHORIZING
    if new not in ALLOWED_TRANSITIONS.get(effective, set()):
        raise InvalidTransitionError(current, new)

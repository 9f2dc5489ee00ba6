"""Gateway facade that runs sales against in-memory registries.

Each `Gateway` owns its own transaction and redirect registries so tests can
use an isolated instance. `get_gateway()` returns the process default used by
the `Transaction` class methods.
"""

import threading
from typing import Any, Callable

from gatewaysim.common.config import settings
from gatewaysim.common.logging import logger, transaction_id_ctx
from gatewaysim.common.metrics import gateway_redirects_total, gateway_sales_total
from gatewaysim.common.state_machine import TransactionStatus
from gatewaysim.gateway.redirect import attach_token
from gatewaysim.gateway.registry import RedirectRegistry, TransactionRegistry
from gatewaysim.gateway.results import ErrorResult, SuccessResult
from gatewaysim.gateway.transaction import Transaction
from gatewaysim.gateway.validation import Errors


class Gateway:
    """In-process stand-in for a payment gateway client."""

    def __init__(
        self,
        transactions: TransactionRegistry | None = None,
        redirects: RedirectRegistry | None = None,
        service_name: str | None = None,
    ) -> None:
        self.transactions = transactions if transactions is not None else TransactionRegistry()
        self.redirects = redirects if redirects is not None else RedirectRegistry()
        self.service_name = service_name or settings.service_name

    def new_transaction(self, attributes: dict[str, Any]) -> Transaction:
        """Build a transaction and register it before anything else runs."""

        transaction = Transaction.model_validate(attributes or {})
        self.transactions.register(transaction)
        return transaction

    def sale(self, attributes: dict[str, Any]) -> SuccessResult | ErrorResult:
        """Validate and authorize a sale.

        Invalid input returns its errors without the transaction, although the
        transaction stays registered. A processor decline returns an empty
        error list with the declined transaction.
        """

        transaction = self.new_transaction(attributes)
        token = transaction_id_ctx.set(transaction.id)
        try:
            errors = transaction.errors
            if len(errors) > 0:
                gateway_sales_total.labels(service=self.service_name, outcome="validation_failed").inc()
                logger.info("sale rejected errors=%s", errors.messages)
                return ErrorResult(errors=errors)

            status = transaction._decide_sale()
            gateway_sales_total.labels(service=self.service_name, outcome=status).inc()
            logger.info(
                "sale decided status=%s processor_response_code=%s",
                status,
                transaction.processor_response_code,
            )
            if status == TransactionStatus.AUTHORIZED:
                return SuccessResult(transaction=transaction)
            return ErrorResult(errors=Errors(), transaction=transaction)
        finally:
            transaction_id_ctx.reset(token)

    def find(self, transaction_id) -> Transaction | None:
        return self.transactions.find(transaction_id)

    def setup_transparent_redirect(self, callback: Callable[[], Any], request=None) -> str:
        """Register a deferred callback and return its opaque token.

        When a request is given its environ QUERY_STRING carries the token and
        is protected against being overwritten.
        """

        token = self.redirects.register(callback)
        if request is not None:
            attach_token(request, token)
        gateway_redirects_total.labels(service=self.service_name, action="registered").inc()
        logger.debug("transparent redirect registered token=%s", token)
        return token

    def create_from_transparent_redirect(self, token) -> Any:
        result = self.redirects.invoke(token)
        gateway_redirects_total.labels(service=self.service_name, action="invoked").inc()
        return result

    def reset(self) -> None:
        self.transactions.clear()
        self.redirects.clear()


_default_lock = threading.Lock()
_default_gateway: Gateway | None = None


def get_gateway() -> Gateway:
    """Process-wide gateway, created on first use."""

    global _default_gateway
    with _default_lock:
        if _default_gateway is None:
            _default_gateway = Gateway()
        return _default_gateway


def reset_gateway() -> None:
    """Clear the default gateway's registries."""

    get_gateway().reset()

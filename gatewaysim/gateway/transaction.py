"""Simulated gateway transaction.

A transaction holds the caller's sale attributes, derives the coded
responses a real processor would attach, and owns its status. Status and
type change only through the sale decision and `submit_for_settlement`.
"""

from typing import Any, Callable
from uuid import uuid4

from pydantic import PrivateAttr

from gatewaysim.common.config import settings
from gatewaysim.common.exceptions import TransactionNotAuthorizedError
from gatewaysim.common.logging import logger
from gatewaysim.common.metrics import gateway_settlements_total
from gatewaysim.common.state_machine import TransactionStatus, validate_transition
from gatewaysim.gateway import responses
from gatewaysim.gateway.records import Address, CreditCard, Customer, GatewayRecord
from gatewaysim.gateway.validation import Errors, validate_transaction

SALE = "sale"


def _default_gateway(gateway):
    if gateway is not None:
        return gateway
    from gatewaysim.gateway.client import get_gateway

    return get_gateway()


class Transaction(GatewayRecord):
    """One sale attempt and its simulated gateway responses.

    Building a Transaction directly does not store it anywhere;
    `Gateway.new_transaction` (used by `sale`) is the constructor that
    registers it for `find`.
    """

    amount: str | None = None
    order_id: str | None = None
    merchant_account_id: str | None = None
    options: dict[str, Any] | None = None
    credit_card: CreditCard | None = None
    customer: Customer | None = None
    billing: Address | None = None
    shipping: Address | None = None

    _id: str = PrivateAttr(default_factory=lambda: str(uuid4()))
    _status: str | None = PrivateAttr(default=None)
    _type: str | None = PrivateAttr(default=None)

    @property
    def id(self) -> str:
        return self._id

    @property
    def status(self) -> str | None:
        return self._status

    @property
    def type(self) -> str | None:
        return self._type

    @property
    def errors(self) -> Errors:
        return validate_transaction(self)

    @property
    def credit_card_details(self) -> CreditCard | None:
        return self.credit_card

    @property
    def billing_details(self) -> Address | None:
        return self.billing

    @property
    def shipping_details(self) -> Address | None:
        return self.shipping

    @property
    def processor_response_code(self) -> str:
        return responses.processor_response_code(self.amount)

    @property
    def processor_response_text(self) -> str | None:
        return responses.processor_response_text(self.processor_response_code)

    @property
    def processor_authorization_code(self) -> str:
        return responses.processor_authorization_code()

    @property
    def avs_error_response_code(self) -> str:
        return responses.avs_error_response_code(self._billing_field("postal_code"))

    @property
    def avs_postal_code_response_code(self) -> str:
        return responses.avs_postal_code_response_code(self._billing_field("postal_code"))

    @property
    def avs_street_address_response_code(self) -> str:
        return responses.avs_street_address_response_code(self._billing_field("street_address"))

    @property
    def cvv_response_code(self) -> str:
        cvv = self.credit_card.cvv if self.credit_card is not None else None
        return responses.cvv_response_code(cvv)

    def _billing_field(self, name: str) -> str | None:
        if self.billing is None:
            return None
        return getattr(self.billing, name)

    def _transition(self, new_status: str) -> None:
        validate_transition(self._status, new_status)
        self._status = new_status

    def _decide_sale(self) -> str:
        """Authorize or decline a validated sale from its processor response code."""

        if self.processor_response_code in responses.APPROVED_RESPONSE_CODES:
            self._transition(TransactionStatus.AUTHORIZED)
        else:
            self._transition(TransactionStatus.PROCESSOR_DECLINED)
        self._type = SALE
        return self._status

    def submit_for_settlement(self) -> None:
        """Queue an authorized transaction for settlement.

        Raises TransactionNotAuthorizedError from any other status, including a
        second call on the same transaction.
        """

        if self._status != TransactionStatus.AUTHORIZED:
            raise TransactionNotAuthorizedError(self._id, self._status)
        self._transition(TransactionStatus.SUBMITTED_FOR_SETTLEMENT)
        gateway_settlements_total.labels(service=settings.service_name).inc()
        logger.info("transaction submitted for settlement transaction_id=%s", self._id)

    @classmethod
    def sale(cls, attributes: dict[str, Any], gateway=None):
        return _default_gateway(gateway).sale(attributes)

    @classmethod
    def find(cls, transaction_id, gateway=None) -> "Transaction | None":
        return _default_gateway(gateway).find(transaction_id)

    @classmethod
    def setup_transparent_redirect(cls, callback: Callable[[], Any], request=None, gateway=None) -> str:
        return _default_gateway(gateway).setup_transparent_redirect(callback, request)

    @classmethod
    def create_from_transparent_redirect(cls, token, gateway=None) -> Any:
        return _default_gateway(gateway).create_from_transparent_redirect(token)

    @classmethod
    def create_transaction_url(cls) -> str:
        return settings.create_transaction_url

    def __repr__(self) -> str:
        return (
            f"Transaction(id={self._id!r}, amount={self.amount!r}, "
            f"status={self._status!r}, type={self._type!r})"
        )

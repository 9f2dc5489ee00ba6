"""Gateway-side validation of a proposed transaction.

Produces the same ordered messages a real gateway would return. An empty
collection means the transaction may go on to authorization.
"""

import re
from decimal import Decimal
from typing import Iterator

from pydantic import BaseModel, Field

MAX_AMOUNT = Decimal("9999999.99")
MAX_ORDER_ID_LENGTH = 255

AMOUNT_REQUIRED = "Amount is required"
AMOUNT_INVALID_FORMAT = "Amount is an invalid format"
AMOUNT_NEGATIVE = "Amount cannot be negative"
AMOUNT_TOO_LARGE = "Amount is too large"
ORDER_ID_TOO_LONG = "Order id is too long"
BILLING_WITHOUT_CARD = "Cannot provide a billing address unless also providing a credit card"
PAYMENT_METHOD_REQUIRED = "Need a customer_id, payment_method_token, credit_card, or subscription_id."

# Signed amounts, zero included, pass the format check and report as negative.
_AMOUNT_FORMAT = re.compile(r"-?\d+(\.\d\d)?", re.ASCII)


def is_blank(value) -> bool:
    return value is None or not str(value).strip()


class ValidationError(BaseModel):
    """One gateway validation message."""

    message: str = Field(min_length=1)


class Errors:
    """Ordered collection of validation errors."""

    def __init__(self) -> None:
        self._errors: list[ValidationError] = []

    def add_unless_blank(self, message: str | None) -> None:
        if is_blank(message):
            return
        self._errors.append(ValidationError(message=message))

    @property
    def messages(self) -> list[str]:
        return [error.message for error in self._errors]

    def __iter__(self) -> Iterator[ValidationError]:
        return iter(self._errors)

    def __len__(self) -> int:
        return len(self._errors)

    def __repr__(self) -> str:
        return f"Errors({self.messages!r})"


def amount_error(amount) -> str | None:
    """First failing amount rule, or None when the amount is acceptable.

    The checks form one exclusive chain, so at most one amount message is
    ever reported.
    """

    if is_blank(amount):
        return AMOUNT_REQUIRED
    text = str(amount)
    if _AMOUNT_FORMAT.fullmatch(text) is None:
        return AMOUNT_INVALID_FORMAT
    if text.startswith("-"):
        return AMOUNT_NEGATIVE
    value = Decimal(text)
    if value > MAX_AMOUNT:
        return AMOUNT_TOO_LARGE
    return None


def validate_transaction(transaction) -> Errors:
    """Collect every validation message for a transaction, in gateway order."""

    errors = Errors()
    errors.add_unless_blank(amount_error(transaction.amount))

    if transaction.order_id is not None and len(transaction.order_id) > MAX_ORDER_ID_LENGTH:
        errors.add_unless_blank(ORDER_ID_TOO_LONG)

    if transaction.billing is not None and transaction.credit_card is None:
        errors.add_unless_blank(BILLING_WITHOUT_CARD)

    if transaction.credit_card is None:
        errors.add_unless_blank(PAYMENT_METHOD_REQUIRED)

    return errors

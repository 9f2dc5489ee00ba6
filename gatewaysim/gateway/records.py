"""Attribute records nested inside a transaction request."""

from pydantic import BaseModel, ConfigDict


class GatewayRecord(BaseModel):
    """Base for attribute holders built from request mappings.

    Numbers are accepted wherever the gateway expects text and unknown keys
    are ignored, matching what a client library tolerates.
    """

    model_config = ConfigDict(coerce_numbers_to_str=True, extra="ignore")


class CreditCard(GatewayRecord):
    """Card details supplied with a sale."""

    number: str | None = None
    expiration_date: str | None = None
    cardholder_name: str | None = None
    cvv: str | None = None

    @property
    def bin(self) -> str | None:
        if self.number is None:
            return None
        return self.number[:6]

    @property
    def last_4(self) -> str | None:
        if self.number is None or len(self.number) < 4:
            return None
        return self.number[-4:]

    @property
    def token(self) -> str:
        return "AAAA"


class Customer(GatewayRecord):
    first_name: str | None = None
    last_name: str | None = None
    company: str | None = None
    phone: str | None = None
    fax: str | None = None
    website: str | None = None
    email: str | None = None


class Address(GatewayRecord):
    """Billing or shipping address."""

    first_name: str | None = None
    street_address: str | None = None
    extended_address: str | None = None
    locality: str | None = None
    region: str | None = None
    postal_code: str | None = None

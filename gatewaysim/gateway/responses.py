"""Deterministic coded responses a real gateway would attach to a transaction.

Every function here is pure: the same input always yields the same code.
Inputs are stringified (None becomes "") and checked in a fixed order so the
literal test values win over the "not provided" catch-all.
"""

import re
from decimal import Decimal

FAKE_PROCESSOR_RESPONSES: dict[str, str] = {
    "1000": "Approved",
    "1001": "Approved, check customer ID",
    "1002": "Processed (Successful Credit)",
    "2000": "Do Not Honor",
    "2001": "Insufficient Funds",
    "2002": "Limit Exceeded",
    "2003": "Cardholder's Activity Limit Exceeded",
    "2004": "Expired Card",
    "2005": "Invalid Credit Card Number",
    "2006": "Invalid Date",
    "2007": "No Account",
    "2008": "Card Account Length Error",
    "2009": "No Such Issuer",
    "2010": "Card Issuer Declined CVV",
    "2011": "Voice Authorization Required",
    "2012": "Voice Authorization Required. Possible Lost Card",
    "2013": "Voice Authorization Required. Possible stolen card",
    "2014": "Voice Authorization Required. Fraud Suspected.",
    "2015": "Transaction Not Allowed",
    "2016": "Duplicate Transaction",
    "2017": "Cardholder Stopped Billing",
    "2018": "Cardholder Stopped All Billing",
    "2019": "Declined by Issuer- Invalid Transaction",
    "2020": "Violation",
    "2021": "Security Violation",
    "2022": "Declined- Updated cardholder available",
    "2023": "Processor does not support this feature",
    "2024": "Card Type not enabled",
    "2025": "Set up error- Merchant",
    "2026": "Invalid Merchant ID",
    "2027": "Set up error - Amount",
    "2028": "Set Up Error - Hierarchy",
    "2029": "Set up error- Card",
    "2030": "Set up error- Terminal",
    "2031": "Encryption Error",
    "2032": "Surcharge Not Permitted",
    "2033": "Inconsistent Data",
    "2034": "No Action Taken",
    "2035": "Partial Approval for amount in Group III version",
    "2036": "Unsolicited Reversal",
    "2037": "Already Reversed",
    "2038": "Processor Declined",
    "2039": "Invalid Authorization Code",
    "2040": "Invalid Store",
    "2041": "Declined Call for Approval",
    "2043": "Error. Do not retry, call issuer",
    "2044": "Declined. Call issuer",
    "2045": "Invalid Merchant Number",
    "2046": "Declined",
    "2047": "Call Issuer. Pick Up Card",
    "3000": "Processor network unavailable.Try Again",
}

APPROVED_RESPONSE_CODES = frozenset({"1000", "1001", "1002"})
APPROVED_RESPONSE_CODE = "1000"
DECLINED_RESPONSE_CODE = "2046"
DECLINE_RANGE = (Decimal("2047.00"), Decimal("2099.00"))
PROCESSOR_AUTHORIZATION_CODE = "03589B"

_LEADING_INTEGER = re.compile(r"\s*([-+]?\d+)", re.ASCII)
_LEADING_DECIMAL = re.compile(r"\s*([-+]?\d+(?:\.\d+)?)", re.ASCII)
_NOT_PROVIDED = re.compile(r"\S*")


def _text(value) -> str:
    return "" if value is None else str(value)


def integer_part(amount) -> str:
    """Integer prefix of an amount string, "0" when there is none."""

    match = _LEADING_INTEGER.match(_text(amount))
    return str(int(match.group(1))) if match else "0"


def numeric_value(amount) -> Decimal:
    """Leading numeric value of an amount string, zero when unparsable."""

    match = _LEADING_DECIMAL.match(_text(amount))
    return Decimal(match.group(1)) if match else Decimal(0)


def _not_provided(value: str) -> bool:
    return _NOT_PROVIDED.fullmatch(value) is not None


def processor_response_code(amount) -> str:
    """Map an amount to a processor response code.

    Whole-dollar amounts that are table keys return themselves, amounts in
    the 2047.00-2099.00 range decline with 2046, everything else approves.
    """

    key = integer_part(amount)
    if key in FAKE_PROCESSOR_RESPONSES:
        return key
    low, high = DECLINE_RANGE
    if low <= numeric_value(amount) <= high:
        return DECLINED_RESPONSE_CODE
    return APPROVED_RESPONSE_CODE


def processor_response_text(code: str | None) -> str | None:
    return FAKE_PROCESSOR_RESPONSES.get(_text(code))


def processor_authorization_code() -> str:
    return PROCESSOR_AUTHORIZATION_CODE


def avs_error_response_code(postal_code) -> str:
    value = _text(postal_code)
    if value == "30000":
        return "E"  # AVS system error
    if value == "30001":
        return "S"  # issuing bank does not support AVS
    return ""


def avs_postal_code_response_code(postal_code) -> str:
    value = _text(postal_code)
    if value == "20000":
        return "N"  # does not match
    if value == "20001":
        return "U"  # not verified
    if _not_provided(value):
        return "I"
    return "M"


def avs_street_address_response_code(street_address) -> str:
    value = _text(street_address)
    if value.startswith("200"):
        return "N"
    if value.startswith("201"):
        return "U"
    if _not_provided(value):
        return "I"
    return "M"


def cvv_response_code(cvv) -> str:
    value = _text(cvv)
    if value == "200":
        return "N"
    if value == "201":
        return "U"
    if value == "301":
        return "S"  # issuer does not participate
    if _not_provided(value):
        return "I"
    return "M"

"""Sale flow, settlement and lookup through the Transaction API."""

import pytest

from gatewaysim.common.exceptions import TransactionNotAuthorizedError
from gatewaysim.common.state_machine import TransactionStatus
from gatewaysim.gateway.records import CreditCard
from gatewaysim.gateway.results import ErrorResult, SuccessResult
from gatewaysim.gateway.transaction import Transaction
from gatewaysim.gateway.validation import PAYMENT_METHOD_REQUIRED


def test_approved_sale(gateway, card):
    result = Transaction.sale({"amount": "1000.00", "credit_card": card}, gateway=gateway)

    assert isinstance(result, SuccessResult)
    assert result.is_success
    assert len(result.errors) == 0
    transaction = result.transaction
    assert transaction.status == TransactionStatus.AUTHORIZED
    assert transaction.type == "sale"
    assert transaction.processor_response_code == "1000"
    assert transaction.processor_response_text == "Approved"
    assert transaction.processor_authorization_code == "03589B"


@pytest.mark.parametrize("amount", ["1001.00", "1002.00"])
def test_other_approval_codes_authorize(gateway, card, amount):
    result = gateway.sale({"amount": amount, "credit_card": card})
    assert result.is_success
    assert result.transaction.status == TransactionStatus.AUTHORIZED


def test_declined_sale_is_a_result_not_a_fault(gateway, card):
    """Good input, declining processor: empty errors plus the transaction."""

    result = gateway.sale({"amount": "2000.00", "credit_card": card})

    assert isinstance(result, ErrorResult)
    assert not result.is_success
    assert len(result.errors) == 0
    assert result.transaction.status == TransactionStatus.PROCESSOR_DECLINED
    assert result.transaction.type == "sale"
    assert result.transaction.processor_response_code == "2000"
    assert result.transaction.processor_response_text == "Do Not Honor"


def test_decline_range(gateway, card):
    result = gateway.sale({"amount": "2070.00", "credit_card": card})

    assert result.transaction.status == TransactionStatus.PROCESSOR_DECLINED
    assert result.transaction.processor_response_code == "2046"
    assert result.transaction.processor_response_text == "Declined"


def test_invalid_sale_returns_errors_without_transaction(gateway):
    result = gateway.sale({"amount": "10.00"})

    assert isinstance(result, ErrorResult)
    assert result.transaction is None
    assert result.errors.messages == [PAYMENT_METHOD_REQUIRED]


def test_invalid_sale_is_still_registered(gateway):
    """Transactions are stored at construction, before validation runs."""

    gateway.sale({"amount": "abc"})

    assert len(gateway.transactions) == 1


def test_find_returns_same_transaction(gateway, card):
    result = gateway.sale({"amount": "10.00", "credit_card": card})

    found = Transaction.find(result.transaction.id, gateway=gateway)
    assert found is result.transaction
    assert Transaction.find("no-such-id", gateway=gateway) is None


def test_ids_are_unique(gateway, card):
    ids = {gateway.sale({"amount": "10.00", "credit_card": card}).transaction.id for _ in range(20)}
    assert len(ids) == 20


def test_submit_for_settlement(gateway, card):
    transaction = gateway.sale({"amount": "10.00", "credit_card": card}).transaction

    transaction.submit_for_settlement()
    assert transaction.status == TransactionStatus.SUBMITTED_FOR_SETTLEMENT

    with pytest.raises(TransactionNotAuthorizedError, match="Transaction not authorized"):
        transaction.submit_for_settlement()
    assert transaction.status == TransactionStatus.SUBMITTED_FOR_SETTLEMENT


def test_settling_declined_transaction_raises(gateway, card):
    transaction = gateway.sale({"amount": "2000.00", "credit_card": card}).transaction

    with pytest.raises(TransactionNotAuthorizedError):
        transaction.submit_for_settlement()
    assert transaction.status == TransactionStatus.PROCESSOR_DECLINED


def test_settling_undecided_transaction_raises(gateway):
    transaction = gateway.new_transaction({"amount": "10.00"})

    assert transaction.status is None
    with pytest.raises(TransactionNotAuthorizedError):
        transaction.submit_for_settlement()


def test_status_and_type_are_read_only(gateway, card):
    transaction = gateway.sale({"amount": "10.00", "credit_card": card}).transaction

    with pytest.raises((AttributeError, ValueError)):
        transaction.status = TransactionStatus.SETTLED
    with pytest.raises((AttributeError, ValueError)):
        transaction.type = "credit"


def test_coded_responses_from_transaction_fields(gateway):
    result = gateway.sale(
        {
            "amount": "10.00",
            "credit_card": {"number": "4111111111111111", "cvv": "200"},
            "billing": {"postal_code": 20000, "street_address": "201 Elm St"},
        }
    )
    transaction = result.transaction

    assert transaction.cvv_response_code == "N"
    assert transaction.avs_postal_code_response_code == "N"
    assert transaction.avs_street_address_response_code == "U"
    assert transaction.avs_error_response_code == ""
    assert transaction.billing_details.postal_code == "20000"


def test_coded_responses_without_billing_or_cvv(gateway):
    transaction = gateway.sale({"amount": "10.00", "credit_card": {"number": "4111111111111111"}}).transaction

    assert transaction.cvv_response_code == "I"
    assert transaction.avs_postal_code_response_code == "I"
    assert transaction.avs_street_address_response_code == "I"
    assert transaction.avs_error_response_code == ""
    assert transaction.shipping_details is None


def test_avs_error_codes(gateway, card):
    transaction = gateway.sale({"amount": "10.00", "credit_card": card, "billing": {"postal_code": "30001"}}).transaction
    assert transaction.avs_error_response_code == "S"


def test_credit_card_derived_fields():
    card = CreditCard(number="4111111111111234")
    assert card.bin == "411111"
    assert card.last_4 == "1234"
    assert card.token == "AAAA"

    empty = CreditCard()
    assert empty.bin is None
    assert empty.last_4 is None


def test_nested_records_and_unknown_keys(gateway, card):
    transaction = gateway.sale(
        {
            "amount": "10.00",
            "credit_card": card,
            "customer": {"first_name": "Jane", "email": "jane@example.com"},
            "shipping": {"locality": "Chicago"},
            "options": {"submit_for_settlement": False},
            "merchant_account_id": "sandbox",
            "unexpected": "ignored",
        }
    ).transaction

    assert transaction.customer.email == "jane@example.com"
    assert transaction.shipping_details.locality == "Chicago"
    assert transaction.credit_card_details.last_4 == "1111"
    assert transaction.options == {"submit_for_settlement": False}
    assert transaction.merchant_account_id == "sandbox"


def test_default_gateway_class_methods(default_gateway, card):
    result = Transaction.sale({"amount": "10.00", "credit_card": card})

    assert Transaction.find(result.transaction.id) is result.transaction


def test_create_transaction_url():
    assert Transaction.create_transaction_url() == "http://braintree.example.com/transactions"

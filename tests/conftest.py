"""Shared fixtures: an isolated gateway per test and a clean default gateway."""

import pytest

from gatewaysim.gateway.client import Gateway, reset_gateway

CARD = {
    "number": "4111111111111111",
    "expiration_date": "05/2030",
    "cardholder_name": "Jane Doe",
    "cvv": "123",
}


@pytest.fixture
def gateway() -> Gateway:
    return Gateway(service_name="gateway-sim-test")


@pytest.fixture
def default_gateway():
    reset_gateway()
    yield
    reset_gateway()


@pytest.fixture
def card() -> dict:
    return dict(CARD)

"""Run one simulated sale from the command line and print the outcome as JSON.

Useful for checking which processor, AVS and CVV codes a given set of test
values produces.
"""

import argparse
import json
import sys

from gatewaysim.common.exceptions import GatewaySimError
from gatewaysim.common.logging import configure_logging, logger
from gatewaysim.common.metrics import metrics_text
from gatewaysim.gateway.client import Gateway


def build_attributes(args: argparse.Namespace) -> dict:
    """Translate CLI flags into sale attributes."""

    attributes: dict = {"amount": args.amount}
    if args.order_id is not None:
        attributes["order_id"] = args.order_id
    if args.card_number is not None or args.cvv is not None:
        attributes["credit_card"] = {
            "number": args.card_number,
            "expiration_date": args.expiration_date,
            "cvv": args.cvv,
        }
    if args.postal_code is not None or args.street_address is not None:
        attributes["billing"] = {
            "postal_code": args.postal_code,
            "street_address": args.street_address,
        }
    return attributes


def summarize(result) -> dict:
    """Flatten a sale result into JSON-friendly fields."""

    summary: dict = {
        "success": result.is_success,
        "errors": result.errors.messages,
        "transaction": None,
    }
    transaction = result.transaction
    if transaction is not None:
        summary["transaction"] = {
            "id": transaction.id,
            "status": transaction.status,
            "type": transaction.type,
            "processor_response_code": transaction.processor_response_code,
            "processor_response_text": transaction.processor_response_text,
            "processor_authorization_code": transaction.processor_authorization_code,
            "avs_error_response_code": transaction.avs_error_response_code,
            "avs_postal_code_response_code": transaction.avs_postal_code_response_code,
            "avs_street_address_response_code": transaction.avs_street_address_response_code,
            "cvv_response_code": transaction.cvv_response_code,
        }
    return summary


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run a simulated gateway sale.")
    parser.add_argument("--amount", default=None, help="Sale amount, e.g. 10.00")
    parser.add_argument("--order-id", default=None)
    parser.add_argument("--card-number", default=None)
    parser.add_argument("--expiration-date", default="05/2030")
    parser.add_argument("--cvv", default=None)
    parser.add_argument("--postal-code", default=None)
    parser.add_argument("--street-address", default=None)
    parser.add_argument("--settle", action="store_true", help="Submit an authorized sale for settlement")
    parser.add_argument("--metrics", action="store_true", help="Print Prometheus metrics afterwards")
    parser.add_argument("--log-level", default=None)
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Parse CLI args, run one sale and print its JSON summary."""

    args = parse_args(argv)
    # stdout carries only the JSON summary.
    configure_logging(args.log_level, stream=sys.stderr)
    gateway = Gateway()

    result = gateway.sale(build_attributes(args))
    if args.settle:
        if result.transaction is None:
            raise SystemExit("Cannot settle: sale failed validation")
        try:
            result.transaction.submit_for_settlement()
        except GatewaySimError as exc:
            logger.error("settlement refused: %s", exc)
            raise SystemExit(str(exc)) from exc

    print(json.dumps(summarize(result), indent=2))
    if args.metrics:
        print(metrics_text())
    return 0 if result.is_success else 1


if __name__ == "__main__":
    raise SystemExit(main())

"""Prometheus counters for simulated gateway activity."""

from prometheus_client import Counter, generate_latest


gateway_sales_total = Counter(
    "gateway_sales_total",
    "Sale submissions by outcome",
    ["service", "outcome"],
)
gateway_settlements_total = Counter(
    "gateway_settlements_total",
    "Transactions submitted for settlement",
    ["service"],
)
gateway_redirects_total = Counter(
    "gateway_redirects_total",
    "Transparent redirect callbacks registered or invoked",
    ["service", "action"],
)


def metrics_text() -> str:
    """Render all registered Prometheus metrics in text exposition format."""

    return generate_latest().decode("utf-8")

"""Structured JSON logging with transaction context fields."""

import logging
import sys
from contextvars import ContextVar
from typing import TextIO

from pythonjsonlogger.json import JsonFormatter

from gatewaysim.common.config import settings


transaction_id_ctx: ContextVar[str] = ContextVar("transaction_id", default="")


class ContextFilter(logging.Filter):
    """Inject service name and current transaction id into every log record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.service_name = settings.service_name
        record.transaction_id = transaction_id_ctx.get()
        return True


def configure_logging(level: str | None = None, stream: TextIO | None = None) -> None:
    """Configure root logger once per process (CLI entrypoint only).

    Records go to stdout unless another stream is given.
    """

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    context_filter = ContextFilter()
    handler.addFilter(context_filter)
    formatter = JsonFormatter(
        "%(asctime)s %(levelname)s %(service_name)s %(transaction_id)s %(message)s"
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level or settings.log_level)
    root.addFilter(context_filter)


logger = logging.getLogger("gatewaysim")

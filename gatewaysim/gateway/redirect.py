"""Transparent-redirect helpers: request data encoding and query-string guard."""

import json
from collections.abc import MutableMapping
from typing import Any, Iterator

from gatewaysim.common.exceptions import QueryStringConflictError

QUERY_STRING = "QUERY_STRING"


def transaction_data(attributes: dict[str, Any]) -> str:
    """Encode transparent-redirect transaction data as JSON."""

    return json.dumps(attributes)


class GuardedEnviron(MutableMapping):
    """Request environ wrapper that protects a redirect token in QUERY_STRING.

    Blank writes to QUERY_STRING are ignored; non-blank writes raise so a test
    notices when something else tries to replace the simulated redirect.
    """

    def __init__(self, environ: MutableMapping, token: str) -> None:
        self._environ = environ
        self._environ[QUERY_STRING] = token

    def __getitem__(self, key: str) -> Any:
        return self._environ[key]

    def __setitem__(self, key: str, value: Any) -> None:
        if key == QUERY_STRING:
            if value is not None and str(value).strip():
                raise QueryStringConflictError(self._environ[QUERY_STRING], value)
            return
        self._environ[key] = value

    def __delitem__(self, key: str) -> None:
        del self._environ[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._environ)

    def __len__(self) -> int:
        return len(self._environ)


def attach_token(request, token: str) -> None:
    """Stamp a redirect token onto a request's environ and guard it."""

    request.environ = GuardedEnviron(request.environ, token)

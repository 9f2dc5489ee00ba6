"""Process state owned by a gateway: stored transactions and redirect callbacks."""

import base64
import threading
from typing import Any, Callable
from uuid import uuid4

from gatewaysim.common.exceptions import UnknownRedirectError


class TransactionRegistry:
    """Append-only id -> transaction store, safe to share across threads."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._transactions: dict[str, Any] = {}

    def register(self, transaction) -> None:
        with self._lock:
            self._transactions[str(transaction.id)] = transaction

    def find(self, transaction_id) -> Any | None:
        with self._lock:
            return self._transactions.get(str(transaction_id))

    def clear(self) -> None:
        """Drop every stored transaction. Intended for test isolation."""

        with self._lock:
            self._transactions.clear()

    def __contains__(self, transaction_id) -> bool:
        with self._lock:
            return str(transaction_id) in self._transactions

    def __len__(self) -> int:
        with self._lock:
            return len(self._transactions)


class RedirectRegistry:
    """Opaque token -> deferred callback store for transparent redirects."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._callbacks: dict[str, Callable[[], Any]] = {}

    def register(self, callback: Callable[[], Any]) -> str:
        token = base64.b64encode(uuid4().hex.encode("ascii")).decode("ascii")
        with self._lock:
            self._callbacks[token] = callback
        return token

    def invoke(self, token) -> Any:
        with self._lock:
            callback = self._callbacks.get(str(token))
        if callback is None:
            raise UnknownRedirectError(str(token))
        return callback()

    def clear(self) -> None:
        with self._lock:
            self._callbacks.clear()

    def __contains__(self, token) -> bool:
        with self._lock:
            return str(token) in self._callbacks

    def __len__(self) -> int:
        with self._lock:
            return len(self._callbacks)

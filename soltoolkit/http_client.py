"""Polled HTTP JSON-RPC clients that run one request at a time per connection."""

from __future__ import annotations

import http.client
import json
import logging
from collections import deque
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Callable

__all__ = [
    "RpcRequestError",
    "HttpRequest",
    "http_transport",
    "RpcHttpRequestClient",
    "RpcMultiHttpRequestClient",
]

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 20.0

ResponseCallback = Callable[[dict], Any]


class RpcRequestError(RuntimeError):
    """Raised when a request fails, times out or gets an unusable response."""


@dataclass(frozen=True)
class HttpRequest:
    """A POST request ready to be sent by a transport."""

    scheme: str
    host: str
    port: int | None
    path: str
    headers: dict[str, str]
    body: bytes
    timeout: float


def http_transport(request: HttpRequest) -> bytes:
    """Send ``request`` with the standard library and return the response body."""
    connection_class = (
        http.client.HTTPSConnection if request.scheme == "https" else http.client.HTTPConnection
    )
    connection = connection_class(request.host, request.port, timeout=request.timeout)
    try:
        connection.request("POST", request.path, body=request.body, headers=request.headers)
        return connection.getresponse().read()
    finally:
        connection.close()


@dataclass
class _PendingRequest:
    request: dict
    parsed_url: dict
    timeout: float
    identifier: Any
    callback: ResponseCallback | None = field(default=None)


class RpcHttpRequestClient:
    """Sends queued JSON-RPC requests one after another, advanced by :meth:`process`.

    Each response is handed to the request's callback; a failed request hands
    it an empty dictionary and :meth:`process` raises :class:`RpcRequestError`.
    """

    def __init__(
        self,
        *,
        skip_id: bool = False,
        transport: Callable[[HttpRequest], bytes] | None = None,
        executor: Executor | None = None,
    ) -> None:
        self.skip_id = skip_id
        self._transport = transport or http_transport
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(max_workers=1)
        self._queue: deque[_PendingRequest] = deque()
        self._future: Future | None = None

    def close(self) -> None:
        if self._owns_executor:
            self._executor.shutdown(wait=False)

    def asynchronous_request(
        self,
        request_body: dict,
        parsed_url: dict,
        callback: ResponseCallback | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Queue a request; ``request_body`` must carry an ``id`` unless ids are skipped."""
        identifier = 0 if self.skip_id else request_body["id"]
        self._queue.append(
            _PendingRequest(request_body, dict(parsed_url), timeout, identifier, callback)
        )

    def is_pending(self) -> bool:
        return self._future is not None

    def has_request(self) -> bool:
        return bool(self._queue)

    def is_completed(self) -> bool:
        return not self.is_pending() and not self.has_request()

    def is_response_valid(self, response: dict) -> bool:
        """Tell whether ``response`` answers the request at the front of the queue."""
        if self.skip_id:
            return True
        if not self._queue or "id" not in response:
            return False
        return response["id"] == self._queue[0].identifier

    def process(self, delta: float) -> None:
        """Advance the front request by one step; ``delta`` is elapsed seconds."""
        if self.is_completed():
            return

        front = self._queue[0]
        if self._future is None:
            try:
                self._future = self._executor.submit(self._transport, self._build_request(front))
            except (KeyError, RuntimeError) as exc:
                self._finalize({})
                raise RpcRequestError("Failed to connect to RPC node.") from exc
        else:
            front.timeout -= delta
            if front.timeout < 0.0:
                self._finalize({})
                raise RpcRequestError("Request timed out.")

        if not self._future.done():
            return

        future, self._future = self._future, None
        try:
            body = future.result()
        except (OSError, http.client.HTTPException, ValueError) as exc:
            self._finalize({})
            raise RpcRequestError("Error sending request.") from exc

        try:
            data = json.loads(bytes(body).decode("utf-8"))
        except ValueError:
            data = None
        if not isinstance(data, dict):
            self._finalize({})
            raise RpcRequestError("Error getting response data.")

        if not self.is_response_valid(data):
            # The answer belongs to someone else; the request is sent again.
            return

        self._finalize(data)

    @staticmethod
    def _build_request(pending: _PendingRequest) -> HttpRequest:
        url = pending.parsed_url
        path = url.get("path", "/")
        if "query" in url:
            path += f"?{url['query']}"
        if "fragment" in url:
            path += f"#{url['fragment']}"
        return HttpRequest(
            scheme=url.get("scheme", "https"),
            host=url["host"],
            port=url.get("port"),
            path=path,
            headers={"Content-Type": "application/json", "Accept-Encoding": "json"},
            body=json.dumps(pending.request).encode("utf-8"),
            timeout=max(pending.timeout, 0.0) or None,
        )

    def _finalize(self, response: dict) -> None:
        if self._future is not None:
            self._future.cancel()
            self._future = None
        pending = self._queue.popleft()
        if callable(pending.callback):
            pending.callback(response)


class RpcMultiHttpRequestClient:
    """Runs every request on its own connection so that requests proceed in parallel."""

    def __init__(
        self,
        *,
        transport: Callable[[HttpRequest], bytes] | None = None,
        executor: Executor | None = None,
    ) -> None:
        self._transport = transport
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(max_workers=4)
        self._clients: list[RpcHttpRequestClient] = []

    @property
    def requests(self) -> tuple[RpcHttpRequestClient, ...]:
        """The connections that still have work to do."""
        return tuple(self._clients)

    def close(self) -> None:
        if self._owns_executor:
            self._executor.shutdown(wait=False)

    def asynchronous_request(
        self,
        request_body: dict,
        parsed_url: dict,
        callback: ResponseCallback | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        client = RpcHttpRequestClient(transport=self._transport, executor=self._executor)
        self._clients.append(client)
        client.asynchronous_request(request_body, parsed_url, callback, timeout)

    def process(self, delta: float) -> None:
        """Advance every connection and drop those that are done.

        Failures of single requests are logged; their callbacks have already
        received an empty dictionary.
        """
        for client in list(self._clients):
            try:
                client.process(delta)
            except RpcRequestError as exc:
                logger.warning("RPC request failed: %s", exc)
            if client.is_completed():
                self._clients.remove(client)
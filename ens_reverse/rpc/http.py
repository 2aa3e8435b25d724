from __future__ import annotations

"""
HTTP JSON-RPC client (sync).

- Uses httpx for the transport.
- Retries on transient transport failures and 429/502/503/504; JSON-RPC
  error objects are never retried.

Example:
    from ens_reverse.rpc.http import RpcClient
    with RpcClient("http://localhost:8545") as rpc:
        print(rpc.request("eth_chainId"))
"""

import json
import logging
import random
import time
from dataclasses import dataclass, field
from itertools import count
from typing import Any, Dict, Iterator, Mapping, Optional, Sequence, Union

import httpx

from ..errors import JsonRpcCode, RpcError
from ..version import __version__

log = logging.getLogger(__name__)

JSON = Union[dict, list, str, int, float, bool, None]
Params = Union[Sequence[Any], Mapping[str, Any], None]


class _Retriable(Exception):
    """Transient failure worth another attempt."""


def _is_retriable_http(status: int) -> bool:
    return status in (429, 502, 503, 504)


def _jitter_backoff(base: float, factor: float, attempt: int, jitter: float) -> float:
    # Exponential backoff with jitter in [0, jitter]
    return base * (factor ** max(attempt - 1, 0)) + random.random() * jitter


def _error_from_reply(method: str, err: Any) -> RpcError:
    """Build RpcError from a JSON-RPC `error` member, tolerating non-conforming nodes."""
    if not isinstance(err, Mapping):
        return RpcError(message=str(err), method=method, code=JsonRpcCode.SERVER_ERROR, data=err)
    try:
        code = int(err.get("code", JsonRpcCode.SERVER_ERROR))
    except (TypeError, ValueError):
        code = JsonRpcCode.SERVER_ERROR
    return RpcError(
        message=str(err.get("message", "Unknown error")),
        method=method,
        code=code,
        data=err.get("data"),
    )


@dataclass
class RpcClient:
    """Synchronous JSON-RPC 2.0 client over HTTP."""

    url: str
    timeout: float = 10.0
    max_retries: int = 3
    backoff_base: float = 0.15
    backoff_factor: float = 1.8
    backoff_jitter: float = 0.2
    headers: Optional[Mapping[str, str]] = None
    user_agent: str = f"ens-reverse/{__version__}"
    _id_counter: Iterator[int] = field(default_factory=lambda: count(start=1))
    _client: Any = field(init=False, default=None)

    def __post_init__(self) -> None:
        merged_headers: Dict[str, str] = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": self.user_agent,
        }
        if self.headers:
            merged_headers.update(dict(self.headers))

        self._client = httpx.Client(timeout=self.timeout, headers=merged_headers)

    # --- context manager -------------------------------------------------

    def __enter__(self) -> "RpcClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        self.close()

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    # --- public API ------------------------------------------------------

    def request(self, method: str, params: Params = None) -> JSON:
        """Perform a single JSON-RPC request and return `result` or raise RpcError."""
        payload = self._make_payload(method, params)
        return self._send_with_retries(method, payload)

    # --- internals -------------------------------------------------------

    def _make_payload(self, method: str, params: Params) -> Dict[str, Any]:
        if params is None:
            params = []
        elif isinstance(params, Mapping):
            params = dict(params)
        elif isinstance(params, Sequence) and not isinstance(params, (str, bytes, bytearray)):
            params = list(params)
        else:
            params = [params]  # type: ignore[list-item]
        return {"jsonrpc": "2.0", "id": next(self._id_counter), "method": method, "params": params}

    def _send_with_retries(self, method: str, payload: Dict[str, Any]) -> JSON:
        last_exc: Optional[Exception] = None
        for attempt in range(1, self.max_retries + 2):  # N retries -> N+1 attempts
            try:
                return self._send_once(method, payload)
            except _Retriable as e:
                last_exc = e
                if attempt > self.max_retries:
                    break
                delay = _jitter_backoff(self.backoff_base, self.backoff_factor, attempt, self.backoff_jitter)
                log.debug("rpc %s attempt %d failed (%s); retrying in %.2fs", method, attempt, e, delay)
                time.sleep(delay)
        raise RpcError(
            message="RPC transport failed",
            method=method,
            code=JsonRpcCode.TRANSPORT_ERROR,
            data=str(last_exc),
        )

    def _post(self, body: str) -> httpx.Response:
        try:
            return self._client.post(self.url, content=body)
        except httpx.RequestError as e:
            raise _Retriable(f"network error: {e}") from e

    def _send_once(self, method: str, payload: Dict[str, Any]) -> JSON:
        body = json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
        r = self._post(body)
        if _is_retriable_http(r.status_code):
            raise _Retriable(f"HTTP {r.status_code}")
        try:
            resp = r.json()
        except ValueError as e:
            raise RpcError(
                message="Non-JSON response from RPC",
                method=method,
                code=JsonRpcCode.INTERNAL_ERROR,
                data=f"HTTP {r.status_code}: {r.text[:256]}",
            ) from e

        if not isinstance(resp, dict):
            raise RpcError(
                message="Invalid JSON-RPC response type",
                method=method,
                code=JsonRpcCode.INTERNAL_ERROR,
                data=type(resp).__name__,
            )
        if resp.get("error") is not None:
            raise _error_from_reply(method, resp["error"])
        if "result" not in resp:
            raise RpcError(
                message="Malformed JSON-RPC response",
                method=method,
                code=JsonRpcCode.INTERNAL_ERROR,
                data=resp,
            )
        return resp["result"]


__all__ = ["RpcClient"]

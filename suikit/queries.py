"""Read-only JSON-RPC queries against a Sui full node."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

import requests

_HEADERS = {"Content-Type": "application/json"}


class RpcError(Exception):
    """A Sui JSON-RPC call failed."""

    def __init__(self, message: str, *, body: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.body = body
        self.status_code = status_code


def _post(rpc_url: str, method: str, params: list[Any]) -> requests.Response:
    payload = {"jsonrpc": "2.0", "id": 1, "method": method, "params": params}
    try:
        return requests.post(rpc_url, json=payload, headers=_HEADERS)
    except requests.RequestException as exc:
        raise RpcError(f"request failed: {exc}") from exc


def _decode(content: bytes) -> dict[str, Any]:
    try:
        data = json.loads(content)
    except ValueError as exc:
        raise RpcError(f"json unmarshal failed: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise RpcError("json unmarshal failed: response is not an object")
    return data


def _result_object(data: dict[str, Any]) -> dict[str, Any]:
    result = data.get("result")
    if result is None:
        return {}
    if not isinstance(result, dict):
        raise RpcError("json unmarshal failed: result is not an object")
    return result


def _typed(obj: dict[str, Any], key: str, kind: type) -> Any:
    value = obj.get(key)
    if value is None:
        return kind()
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise RpcError(
            f"json unmarshal failed: field {key!r} should be {kind.__name__}, "
            f"got {type(value).__name__}"
        )
    return value


def _status(resp: requests.Response) -> str:
    return f"{resp.status_code} {resp.reason}".strip()


def _text(resp: requests.Response) -> str:
    return resp.content.decode("utf-8", errors="replace")


@dataclass(frozen=True)
class SuiBalanceParams:
    """Owner address and coin type to query a balance for."""

    address: str
    coin_type: str


@dataclass(frozen=True)
class SuiBalanceResult:
    """Balance of one coin type held by an address."""

    coin_type: str = ""
    coin_object_count: int = 0
    total_balance: str = ""
    locked_balance: Any = None

    @classmethod
    def _from_json(cls, obj: dict[str, Any]) -> SuiBalanceResult:
        return cls(
            coin_type=_typed(obj, "coinType", str),
            coin_object_count=_typed(obj, "coinObjectCount", int),
            total_balance=_typed(obj, "totalBalance", str),
            locked_balance=obj.get("lockedBalance"),
        )


@dataclass(frozen=True)
class TransactionBlock:
    """A transaction block as reported by the node."""

    digest: str = ""
    transaction: Any = None
    effects: Any = None
    events: Any = None
    timestamp_ms: str = ""
    checkpoint: str = ""

    @classmethod
    def _from_json(cls, obj: dict[str, Any]) -> TransactionBlock:
        return cls(
            digest=_typed(obj, "digest", str),
            transaction=obj.get("transaction"),
            effects=obj.get("effects"),
            events=obj.get("events"),
            timestamp_ms=_typed(obj, "timestampMs", str),
            checkpoint=_typed(obj, "checkpoint", str),
        )


@dataclass(frozen=True)
class Checkpoint:
    """A checkpoint summary with the digests of its transactions."""

    epoch: str = ""
    sequence_number: str = ""
    digest: str = ""
    network_total_transactions: str = ""
    previous_digest: str = ""
    timestamp_ms: str = ""
    transactions: list[str] = field(default_factory=list)

    @classmethod
    def _from_json(cls, obj: dict[str, Any]) -> Checkpoint:
        transactions = _typed(obj, "transactions", list)
        if not all(isinstance(item, str) for item in transactions):
            raise RpcError("json unmarshal failed: transactions must be strings")
        return cls(
            epoch=_typed(obj, "epoch", str),
            sequence_number=_typed(obj, "sequenceNumber", str),
            digest=_typed(obj, "digest", str),
            network_total_transactions=_typed(obj, "networkTotalTransactions", str),
            previous_digest=_typed(obj, "previousDigest", str),
            timestamp_ms=_typed(obj, "timestampMs", str),
            transactions=list(transactions),
        )


def get_sui_balance(params: SuiBalanceParams, rpc_url: str) -> SuiBalanceResult:
    """Fetch the balance of ``params.coin_type`` owned by ``params.address``."""
    resp = _post(rpc_url, "suix_getBalance", [params.address, params.coin_type])
    if resp.status_code > 399:
        raise RpcError(f"HTTP error: {_status(resp)}", body=_text(resp), status_code=resp.status_code)
    return SuiBalanceResult._from_json(_result_object(_decode(resp.content)))


def get_latest_sui_block_number(rpc_url: str) -> str:
    """Return the latest checkpoint sequence number as a decimal string."""
    resp = _post(rpc_url, "sui_getLatestCheckpointSequenceNumber", [])
    return _typed(_decode(resp.content), "result", str)


def get_sui_transaction_block(tx_hash: str, rpc_url: str) -> TransactionBlock:
    """Fetch a transaction block with its input, effects and events."""
    options = {
        "showInput": True,
        "showRawInput": False,
        "showEffects": True,
        "showEvents": True,
        "showObjectChanges": False,
        "showBalanceChanges": False,
        "showRawEffects": False,
    }
    resp = _post(rpc_url, "sui_getTransactionBlock", [tx_hash, options])
    if resp.status_code > 399:
        raise RpcError(
            f"Sui RPC error: {_status(resp)}", body=_text(resp), status_code=resp.status_code
        )
    return TransactionBlock._from_json(_result_object(_decode(resp.content)))


def get_checkpoint_transactions(rpc_url: str, checkpoint_number: str) -> tuple[Checkpoint, str]:
    """Fetch a checkpoint; returns it together with the raw response body.

    On failure the raised :class:`RpcError` carries the raw body, if any.
    """
    resp = _post(rpc_url, "sui_getCheckpoint", [checkpoint_number])
    body = _text(resp)
    if resp.status_code != 200:
        raise RpcError(
            f"unexpected http status code: {resp.status_code}",
            body=body,
            status_code=resp.status_code,
        )
    try:
        checkpoint = Checkpoint._from_json(_result_object(_decode(resp.content)))
    except RpcError as exc:
        raise RpcError(str(exc), body=body, status_code=resp.status_code) from exc
    return checkpoint, body
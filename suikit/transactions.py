"""Building, signing and submitting SUI transfers over JSON-RPC."""

from __future__ import annotations

import base64
import binascii
import re
from dataclasses import dataclass, field
from typing import Any

import requests

from .queries import RpcError
from .signing import Signature, signer_from_hex
from .types import SUI_COIN_TYPE, TxParams

DEFAULT_GAS_BUDGET = 10_000_000
COIN_PAGE_LIMIT = 3

_HEX_ADDRESS = re.compile(r"(?:0[xX])?([0-9a-fA-F]{0,64})")


class TransactionFailedError(Exception):
    """The node executed a transaction but reported that it failed."""

    def __init__(self, message: str, *, digest: str = ""):
        super().__init__(message)
        self.digest = digest


@dataclass(frozen=True)
class TransactionBytes:
    """Unsigned transaction data returned by the node."""

    tx_bytes: bytes
    gas: list[Any] = field(default_factory=list)
    input_objects: list[Any] = field(default_factory=list)


def _parse_address(value: str) -> str:
    match = _HEX_ADDRESS.fullmatch(value)
    if not match:
        raise ValueError(f"invalid address {value!r}")
    return "0x" + match.group(1).lower().rjust(64, "0")


def _rpc_call(rpc_url: str, method: str, params: list[Any]) -> Any:
    payload = {"jsonrpc": "2.0", "id": 1, "method": method, "params": params}
    try:
        resp = requests.post(rpc_url, json=payload, headers={"Content-Type": "application/json"})
    except requests.RequestException as exc:
        raise RpcError(f"request failed: {exc}") from exc
    body = resp.content.decode("utf-8", errors="replace")
    if resp.status_code > 399:
        raise RpcError(
            f"HTTP error: {resp.status_code} {resp.reason}", body=body, status_code=resp.status_code
        )
    try:
        data = resp.json()
    except ValueError as exc:
        raise RpcError(f"json unmarshal failed: {exc}", body=body) from exc
    if not isinstance(data, dict):
        raise RpcError("json unmarshal failed: response is not an object", body=body)
    error = data.get("error")
    if error:
        detail = f"{error.get('code')}: {error.get('message', '')}" if isinstance(error, dict) else error
        raise RpcError(f"rpc error {detail}", body=body, status_code=resp.status_code)
    return data.get("result")


def _first_coin_id(rpc_url: str, owner: str) -> str:
    page = _rpc_call(rpc_url, "suix_getCoins", [owner, SUI_COIN_TYPE, None, COIN_PAGE_LIMIT])
    coins = page.get("data") if isinstance(page, dict) else None
    if not coins:
        raise RpcError("no coins found")
    coin_id = coins[0].get("coinObjectId") if isinstance(coins[0], dict) else None
    if not isinstance(coin_id, str):
        raise RpcError("json unmarshal failed: coin has no coinObjectId")
    return coin_id


def _transfer(rpc_url: str, signer: str, recipient: str, amount: int) -> TransactionBytes:
    coin_id = _first_coin_id(rpc_url, signer)
    result = _rpc_call(
        rpc_url,
        "unsafe_transferSui",
        [signer, coin_id, str(DEFAULT_GAS_BUDGET), recipient, str(amount)],
    )
    encoded = result.get("txBytes") if isinstance(result, dict) else None
    if not isinstance(encoded, str):
        raise RpcError("json unmarshal failed: txBytes missing or not a string")
    try:
        tx_bytes = base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise RpcError(f"json unmarshal failed: invalid txBytes: {exc}") from exc
    return TransactionBytes(tx_bytes, list(result.get("gas") or []), list(result.get("inputObjects") or []))


def build_unsigned_tx(params: TxParams) -> TransactionBytes:
    """Build an unsigned transfer of ``params.amount`` MIST from owner to recipient."""
    recipient = _parse_address(params.recipient)
    owner = _parse_address(params.owner)
    return _transfer(params.rpc_url, owner, recipient, params.amount)


def submit_tx(params: TxParams, tx: TransactionBytes, signature: Signature) -> str:
    """Execute a signed transaction and return its digest."""
    result = _rpc_call(
        params.rpc_url,
        "sui_executeTransactionBlock",
        [
            base64.b64encode(tx.tx_bytes).decode("ascii"),
            [signature.to_base64()],
            {"showEffects": True},
            "WaitForLocalExecution",
        ],
    )
    effects = result.get("effects") if isinstance(result, dict) else None
    if not isinstance(effects, dict):
        raise RpcError("response carries no transaction effects")
    digest = result.get("digest") or ""
    status = effects.get("status") or {}
    if status.get("status") == "success":
        return digest
    raise TransactionFailedError(str(status.get("error") or ""), digest=digest)


def transfer_sui(params: TxParams) -> str:
    """Build, sign and execute a SUI transfer from the key in ``params.pk_hex``."""
    signer = signer_from_hex(params.pk_hex)
    tx = _transfer(params.rpc_url, signer.address, _parse_address(params.recipient), params.amount)
    return submit_tx(params, tx, signer.sign_transaction(tx.tx_bytes))
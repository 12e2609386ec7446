# suikit

A small Python library for talking to a Sui full node over its JSON-RPC API.

It can:

- read the balance an address holds in a given coin type,
- fetch the latest checkpoint sequence number,
- fetch a transaction block by digest, with its input, effects and events,
- fetch a checkpoint together with the digests of its transactions,
- generate Ed25519 key pairs and derive their Sui addresses,
- sign transaction bytes,
- build, sign and execute SUI transfers.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `suikit.types`: the constants `TESTNET_ENDPOINT_URL`, `SUI_COIN_TYPE` and
  `USD_COIN_TYPE`, and the `TxParams` dataclass (`rpc_url`, `pk_hex`, `owner`,
  `recipient`, `amount`).
- `suikit.queries`: read-only queries and the `RpcError` exception.
- `suikit.keys`: `generate_key_pair()` and `address_from_public_key()`.
- `suikit.signing`: `Signer`, `Signature`, `signer_from_hex()` and `sign_tx()`.
- `suikit.transactions`: `build_unsigned_tx()`, `submit_tx()`, `transfer_sui()`,
  `TransactionBytes` and `TransactionFailedError`.

## Queries

```python
from suikit.queries import (
    SuiBalanceParams,
    get_checkpoint_transactions,
    get_latest_sui_block_number,
    get_sui_balance,
    get_sui_transaction_block,
)
from suikit.types import SUI_COIN_TYPE, TESTNET_ENDPOINT_URL

balance = get_sui_balance(
    SuiBalanceParams(address="0x" + "ab" * 32, coin_type=SUI_COIN_TYPE),
    TESTNET_ENDPOINT_URL,
)
print(balance.coin_type, balance.total_balance, balance.coin_object_count)

print(get_latest_sui_block_number(TESTNET_ENDPOINT_URL))  # a decimal string

block = get_sui_transaction_block("<digest>", TESTNET_ENDPOINT_URL)
print(block.digest, block.timestamp_ms, block.checkpoint)

checkpoint, body = get_checkpoint_transactions(TESTNET_ENDPOINT_URL, "1000")
print(checkpoint.sequence_number, len(checkpoint.transactions))
```

`get_sui_balance` returns a `SuiBalanceResult`, `get_sui_transaction_block` a
`TransactionBlock`, and `get_checkpoint_transactions` a `Checkpoint` together
with the raw response body.

Failures raise `RpcError`: a failed request, an HTTP error status (for
`get_checkpoint_transactions`, any status other than 200), or a response that
cannot be decoded into the expected shape. Where a response was received, the
exception carries it in `body` and its HTTP status in `status_code`.

## Keys and signing

```python
from suikit.keys import address_from_public_key, generate_key_pair
from suikit.signing import signer_from_hex

private_key, public_key, address = generate_key_pair()
# private_key is the 32-byte seed followed by the 32-byte public key
assert address == address_from_public_key(public_key)
```

An address is `0x` followed by the hex BLAKE2b-256 digest of the Ed25519 flag
byte `0x00` and the public key.

`signer_from_hex(pk_hex)` decodes a hex seed and derives an Ed25519 key from it
along the hardened path `m/44'/784'/0'/0'/0'`. The resulting `Signer` has
`public_key` and `address` attributes; note that its address is that of the
derived key, not of a key whose raw seed is `pk_hex`.

```python
import os

signer = signer_from_hex(os.environ["SUI_PRIVATE_KEY_HEX"])
signature = signer.sign_transaction(b"...transaction bytes...")
print(signer.address, signature.to_base64())
```

`sign_transaction` signs the BLAKE2b-256 digest of the default intent prefix
followed by the transaction bytes. `Signature.to_base64()` gives the serialized
form the node expects: flag byte, signature and public key, base64-encoded.
`sign_tx(params, tx_bytes)` does the same with the seed in `params.pk_hex`.

## Transfers

```python
import os

from suikit.signing import sign_tx
from suikit.transactions import build_unsigned_tx, submit_tx, transfer_sui
from suikit.types import TESTNET_ENDPOINT_URL, TxParams

params = TxParams(
    rpc_url=TESTNET_ENDPOINT_URL,
    pk_hex=os.environ["SUI_PRIVATE_KEY_HEX"],
    owner=os.environ["SUI_OWNER_ADDRESS"],
    recipient=os.environ["SUI_RECIPIENT_ADDRESS"],
    amount=1_000_000,  # in MIST: 0.001 SUI
)

# Step by step
tx = build_unsigned_tx(params)
signature = sign_tx(params, tx.tx_bytes)
digest = submit_tx(params, tx, signature)

# Or all at once, sending from the signer's own address
digest = transfer_sui(params)
```

A transfer takes the first SUI coin among the first three the sender owns and
uses a gas budget of 10,000,000 MIST. Addresses may be given with or without
`0x` and are left-padded to 32 bytes; anything else raises `ValueError`.
Transactions are executed with `WaitForLocalExecution`.

`RpcError` is raised for request, HTTP and JSON-RPC errors, and when the sender
owns no SUI coins ("no coins found"). If the node executes the transaction but
reports failure, `TransactionFailedError` is raised with the node's error
message and the transaction `digest`.

## What it does not do

suikit is a library only: it has no command-line tool and stores no keys or
wallet state. Transfers move SUI only; other coin types can be queried for
their balance but not transferred.
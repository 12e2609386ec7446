"""Transaction signing."""

import base64
import hashlib
import hmac
from dataclasses import dataclass

from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from .keys import ED25519_FLAG, address_from_public_key
from .types import TxParams

DEFAULT_INTENT = bytes((0, 0, 0))


def _derive_key(seed: bytes, index: int) -> bytes:
    # SLIP-10 hardened path m/44'/784'/index'/0'/0'
    digest = hmac.new(b"ed25519 seed", seed, hashlib.sha512).digest()
    for step in (44, 784, index, 0, 0):
        data = b"\x00" + digest[:32] + (step | 0x80000000).to_bytes(4, "big")
        digest = hmac.new(digest[32:], data, hashlib.sha512).digest()
    return digest[:32]


@dataclass(frozen=True)
class Signature:
    signature: bytes
    public_key: bytes
    scheme_flag: int = ED25519_FLAG

    def to_base64(self) -> str:
        raw = bytes([self.scheme_flag]) + self.signature + self.public_key
        return base64.b64encode(raw).decode("ascii")


class Signer:
    def __init__(self, key_seed: bytes):
        self._key = Ed25519PrivateKey.from_private_bytes(bytes(key_seed))
        self.public_key = self._key.public_key().public_bytes(Encoding.Raw, PublicFormat.Raw)
        self.address = address_from_public_key(self.public_key)

    def sign_transaction(self, tx_bytes: bytes) -> Signature:
        digest = hashlib.blake2b(DEFAULT_INTENT + bytes(tx_bytes), digest_size=32).digest()
        return Signature(self._key.sign(digest), self.public_key)


def signer_from_hex(pk_hex: str) -> Signer:
    return Signer(_derive_key(bytes.fromhex(pk_hex), 0))


def sign_tx(params: TxParams, tx_bytes: bytes) -> Signature:
    return signer_from_hex(params.pk_hex).sign_transaction(tx_bytes)
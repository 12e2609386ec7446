"""Ed25519 key pairs and Sui addresses."""

import hashlib

from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey
from cryptography.hazmat.primitives.serialization import Encoding, NoEncryption, PrivateFormat, PublicFormat

ED25519_FLAG = 0x00


def address_from_public_key(public_key: bytes) -> str:
    """Return the 0x-prefixed Sui address of an Ed25519 public key."""
    data = bytes([ED25519_FLAG]) + bytes(public_key)
    return "0x" + hashlib.blake2b(data, digest_size=32).hexdigest()


def generate_key_pair() -> tuple[bytes, bytes, str]:
    """Return a new private key (seed followed by public key), public key and address."""
    key = Ed25519PrivateKey.generate()
    seed = key.private_bytes(Encoding.Raw, PrivateFormat.Raw, NoEncryption())
    public_key = key.public_key().public_bytes(Encoding.Raw, PublicFormat.Raw)
    return seed + public_key, public_key, address_from_public_key(public_key)
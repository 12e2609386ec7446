import base64
import hashlib

import pytest
from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey

from suikit.keys import address_from_public_key
from suikit.signing import DEFAULT_INTENT, Signer, sign_tx, signer_from_hex
from suikit.types import TxParams

SEED_HEX = "11" * 64
OTHER_SEED_HEX = "22" * 64
TX = b"transaction payload bytes"


def intent_digest(tx_bytes):
    return hashlib.blake2b(DEFAULT_INTENT + tx_bytes, digest_size=32).digest()


def test_signature_verifies_against_intent_digest():
    signer = signer_from_hex(SEED_HEX)
    signature = signer.sign_transaction(TX)
    Ed25519PublicKey.from_public_bytes(signature.public_key).verify(
        signature.signature, intent_digest(TX)
    )
    assert signature.public_key == signer.public_key


def test_signature_does_not_verify_other_payload():
    signature = signer_from_hex(SEED_HEX).sign_transaction(TX)
    with pytest.raises(InvalidSignature):
        Ed25519PublicKey.from_public_bytes(signature.public_key).verify(
            signature.signature, intent_digest(TX + b"x")
        )


def test_to_base64_layout():
    signature = signer_from_hex(SEED_HEX).sign_transaction(TX)
    raw = base64.b64decode(signature.to_base64())
    assert raw[0] == 0
    assert raw[1:65] == signature.signature
    assert raw[65:] == signature.public_key


def test_signer_address_matches_public_key():
    signer = signer_from_hex(SEED_HEX)
    assert signer.address == address_from_public_key(signer.public_key)


def test_signing_is_deterministic():
    first = signer_from_hex(SEED_HEX).sign_transaction(TX)
    second = signer_from_hex(SEED_HEX).sign_transaction(TX)
    assert first == second
    assert first.to_base64() == second.to_base64()


def test_different_seeds_give_different_keys():
    first = signer_from_hex(SEED_HEX)
    second = signer_from_hex(OTHER_SEED_HEX)
    assert len(first.public_key) == len(second.public_key)
    assert first.address != second.address


def test_sign_tx_uses_params_key():
    params = TxParams(pk_hex=SEED_HEX, amount=1_000_000)
    assert sign_tx(params, TX) == signer_from_hex(SEED_HEX).sign_transaction(TX)


@pytest.mark.parametrize("bad_hex", ["zz", "abc", "0x11"])
def test_invalid_hex_is_rejected(bad_hex):
    with pytest.raises(ValueError):
        signer_from_hex(bad_hex)


def test_sign_tx_with_invalid_hex_raises():
    with pytest.raises(ValueError):
        sign_tx(TxParams(pk_hex="not hex"), TX)


@pytest.mark.parametrize("size", [0, 31, 33, 64])
def test_signer_rejects_wrong_seed_length(size):
    with pytest.raises(ValueError):
        Signer(b"\x05" * size)


def test_direct_signer_signature_verifies():
    signer = Signer(bytes(range(32)))
    signature = signer.sign_transaction(TX)
    Ed25519PublicKey.from_public_bytes(signer.public_key).verify(
        signature.signature, intent_digest(TX)
    )
    assert signature.public_key == signer.public_key
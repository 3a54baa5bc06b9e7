import hashlib

import pytest

from quip_protocol.txcrypto import (
    ACCOUNT_ID_DOMAIN,
    DecodeError,
    HybridTxPublic,
    HybridTxSignature,
    account_id_from_public,
)

PUBLIC_LEN = 48
SIGNATURE_LEN = 32

ALICE = bytes(range(1, PUBLIC_LEN + 1))
BOB = bytes(range(101, 101 + PUBLIC_LEN))


def _toy_sign(public: bytes, message: bytes) -> bytes:
    return hashlib.sha256(b"toy-sig" + public + message).digest()


def _toy_verifier(signature: bytes, message: bytes, public: bytes) -> bool:
    return signature == _toy_sign(public, message)


def _sign(public: bytes, message: bytes) -> HybridTxSignature:
    return HybridTxSignature(public, _toy_sign(public, message))


def _flip(data: bytes, index: int) -> bytes:
    mutable = bytearray(data)
    mutable[index] ^= 0xFF
    return bytes(mutable)


def test_same_public_key_derives_same_account_id():
    assert account_id_from_public(ALICE) == account_id_from_public(bytearray(ALICE))
    assert len(account_id_from_public(ALICE)) == 32


def test_different_public_keys_derive_different_account_ids():
    assert account_id_from_public(ALICE) != account_id_from_public(BOB)


def test_account_id_depends_on_domain_prefix():
    assert ACCOUNT_ID_DOMAIN == b"quip-account-v1"
    plain = hashlib.blake2b(ALICE, digest_size=32).digest()
    assert account_id_from_public(ALICE) != plain


def test_signature_verifies_for_matching_account():
    signature = _sign(ALICE, b"quip-message")
    account = account_id_from_public(ALICE)
    assert signature.verify(b"quip-message", account, _toy_verifier) is True


def test_signature_rejects_wrong_account():
    signature = _sign(ALICE, b"quip-message")
    assert signature.verify(b"quip-message", account_id_from_public(BOB), _toy_verifier) is False


def test_signature_rejects_wrong_message():
    signature = _sign(ALICE, b"quip-message")
    account = account_id_from_public(ALICE)
    assert signature.verify(b"wrong-message", account, _toy_verifier) is False


def test_signature_rejects_tampered_signature_bytes():
    signature = _sign(ALICE, b"quip-message")
    tampered = HybridTxSignature(signature.public, _flip(signature.signature, SIGNATURE_LEN // 2))
    account = account_id_from_public(ALICE)
    assert tampered.verify(b"quip-message", account, _toy_verifier) is False


def test_signature_rejects_tampered_public_bytes_before_crypto_check():
    calls = []

    def recording_verifier(sig, msg, pub):
        calls.append((sig, msg, pub))
        return True

    signature = _sign(ALICE, b"quip-message")
    tampered = HybridTxSignature(_flip(signature.public, 0), signature.signature)
    original_account = account_id_from_public(ALICE)
    assert tampered.verify(b"quip-message", original_account, recording_verifier) is False
    assert calls == []


def test_signature_round_trips_through_encoding():
    signature = _sign(ALICE, b"quip-message")
    encoded = signature.encode()
    assert len(encoded) == PUBLIC_LEN + SIGNATURE_LEN
    decoded = HybridTxSignature.decode(encoded, PUBLIC_LEN, SIGNATURE_LEN)
    assert decoded == signature
    assert decoded.verify(b"quip-message", account_id_from_public(ALICE), _toy_verifier)


def test_decode_rejects_empty_bytes():
    with pytest.raises(DecodeError):
        HybridTxSignature.decode(b"", PUBLIC_LEN, SIGNATURE_LEN)


def test_decode_rejects_truncated_bytes():
    encoded = _sign(ALICE, b"quip-message").encode()
    with pytest.raises(DecodeError):
        HybridTxSignature.decode(encoded[: len(encoded) // 2], PUBLIC_LEN, SIGNATURE_LEN)


def test_decode_rejects_trailing_bytes():
    encoded = _sign(ALICE, b"quip-message").encode() + b"\x00"
    with pytest.raises(DecodeError):
        HybridTxSignature.decode(encoded, PUBLIC_LEN, SIGNATURE_LEN)


def test_account_id_helper_matches_into_account():
    assert HybridTxPublic(ALICE).into_account() == account_id_from_public(ALICE)


def test_derived_account_id_matches_helper():
    signature = _sign(BOB, b"x")
    assert signature.derived_account_id() == account_id_from_public(BOB)


def test_signature_rejects_same_length_different_content():
    signature = _sign(ALICE, b"AAAA-message")
    account = account_id_from_public(ALICE)
    assert signature.verify(b"BBBB-message", account, _toy_verifier) is False


def test_verify_is_idempotent():
    signature = _sign(ALICE, b"quip-message")
    account = account_id_from_public(ALICE)
    first = signature.verify(b"quip-message", account, _toy_verifier)
    second = signature.verify(b"quip-message", account, _toy_verifier)
    assert first is True
    assert second is True


def test_verify_handles_empty_message():
    signature = _sign(ALICE, b"")
    assert signature.verify(b"", account_id_from_public(ALICE), _toy_verifier) is True


def test_verify_accepts_lazy_message():
    signature = _sign(ALICE, b"quip-message")
    account = account_id_from_public(ALICE)
    assert signature.verify(lambda: b"quip-message", account, _toy_verifier) is True


def test_public_wrappers_order_by_bytes():
    assert sorted([HybridTxPublic(BOB), HybridTxPublic(ALICE)]) == [
        HybridTxPublic(ALICE),
        HybridTxPublic(BOB),
    ]
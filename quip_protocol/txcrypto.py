"""Account identity and signature envelopes for hybrid transaction signers.

An account id is ``blake2_256(ACCOUNT_ID_DOMAIN || public_key_bytes)``. The
domain is not length-prefixed. That is unambiguous only because hybrid public
keys have a fixed serialized length, so the full key bytes must always feed
the hash.
"""

from __future__ import annotations

import hashlib
import logging
from collections.abc import Callable
from dataclasses import dataclass

ACCOUNT_ID_DOMAIN = b"quip-account-v1"
"""Domain separator for account-id derivation; changing it re-keys every account."""

ACCOUNT_ID_LEN = 32

Verifier = Callable[[bytes, bytes, bytes], bool]
"""Checks ``(signature, message, public)`` and returns True if the signature holds."""

_log = logging.getLogger("quip.tx_verify")


class DecodeError(ValueError):
    """Raised when bytes cannot be decoded into a signature envelope."""


def account_id_from_public(public: bytes | bytearray | memoryview) -> bytes:
    """Derive the 32-byte account id of a hybrid public key."""
    return hashlib.blake2b(
        ACCOUNT_ID_DOMAIN + bytes(public), digest_size=ACCOUNT_ID_LEN
    ).digest()


@dataclass(frozen=True, order=True)
class HybridTxPublic:
    """Signer identity wrapping the raw bytes of a hybrid public key."""

    public: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "public", bytes(self.public))

    def __bytes__(self) -> bytes:
        return self.public

    def into_account(self) -> bytes:
        """Return the account id this public key controls."""
        return account_id_from_public(self.public)


@dataclass(frozen=True)
class HybridTxSignature:
    """Transaction signature envelope: the signer's public key plus signature bytes.

    The two parts are not checked against each other when the envelope is
    built or decoded; only ``verify`` establishes that they belong together.
    """

    public: bytes
    signature: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "public", bytes(self.public))
        object.__setattr__(self, "signature", bytes(self.signature))

    def derived_account_id(self) -> bytes:
        """Return the account id derived from the embedded public key."""
        return account_id_from_public(self.public)

    def verify(
        self,
        message: bytes | bytearray | memoryview | Callable[[], bytes],
        signer: bytes,
        verifier: Verifier,
    ) -> bool:
        """Return True if the embedded key belongs to ``signer`` and signs ``message``.

        ``message`` may be a zero-argument callable; it is only called once the
        account check has passed.
        """
        derived = self.derived_account_id()
        if derived != bytes(signer):
            _log.debug(
                "account-id mismatch: claimed=%s derived=%s",
                bytes(signer).hex(),
                derived.hex(),
            )
            return False

        payload = bytes(message()) if callable(message) else bytes(message)
        ok = bool(verifier(self.signature, payload, self.public))
        if not ok:
            _log.debug("crypto verify failed for signer=%s", bytes(signer).hex())
        return ok

    def encode(self) -> bytes:
        """Serialize as the public key bytes followed by the signature bytes."""
        return self.public + self.signature

    @classmethod
    def decode(
        cls, data: bytes | bytearray | memoryview, public_len: int, signature_len: int
    ) -> HybridTxSignature:
        """Parse an envelope whose parts have the given fixed lengths."""
        if public_len < 0 or signature_len < 0:
            raise ValueError("lengths must not be negative")
        raw = bytes(data)
        expected = public_len + signature_len
        if len(raw) < expected:
            raise DecodeError(f"not enough data: need {expected} bytes, got {len(raw)}")
        if len(raw) > expected:
            raise DecodeError(f"trailing data: need {expected} bytes, got {len(raw)}")
        return cls(raw[:public_len], raw[public_len:])
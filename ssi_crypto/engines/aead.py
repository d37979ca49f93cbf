"""
ssi_crypto.engines.aead
-----------------------
ChaCha20-Poly1305 (IETF) with a detached authentication tag.

Nonces come from a per-instance counter seeded with random bytes and advanced
with sodium_increment on every call, so one engine instance never hands out
the same nonce twice.
"""

from __future__ import annotations
from typing import Optional, Tuple
import threading
import nacl.utils
from nacl.bindings import sodium_increment
from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import ChaCha20Poly1305
from ..errors import AuthenticationFailed, MalformedKey

KEY_SIZE = 32
NONCE_SIZE = 12
TAG_SIZE = 16


def increment_nonce(buf: bytes) -> bytes:
    """Little-endian increment, wrapping like libsodium's sodium_increment."""
    return sodium_increment(buf)


class AeadEngine:
    key_size = KEY_SIZE

    def __init__(self, initial_nonce: Optional[bytes] = None):
        if initial_nonce is not None and len(initial_nonce) != NONCE_SIZE:
            raise ValueError(f"initial_nonce must be {NONCE_SIZE} bytes")
        self._counter = initial_nonce if initial_nonce is not None else nacl.utils.random(NONCE_SIZE)
        self._lock = threading.Lock()

    def next_nonce(self) -> bytes:
        with self._lock:
            self._counter = increment_nonce(self._counter)
            return self._counter

    def encrypt_detached(self, data: bytes, aad: bytes, nonce: bytes, key: bytes) -> Tuple[bytes, bytes]:
        sealed = self._cipher(key).encrypt(nonce, data, aad)
        return sealed[:-TAG_SIZE], sealed[-TAG_SIZE:]

    def decrypt_detached(self, cipher: bytes, tag: bytes, aad: bytes, nonce: bytes, key: bytes) -> bytes:
        chacha = self._cipher(key)
        if len(tag) != TAG_SIZE or len(nonce) != NONCE_SIZE:
            raise AuthenticationFailed("Malformed AEAD tag or nonce")
        try:
            return chacha.decrypt(nonce, cipher + tag, aad)
        except InvalidTag as e:
            raise AuthenticationFailed("Unable to decrypt data") from e

    @staticmethod
    def _cipher(key: bytes) -> ChaCha20Poly1305:
        if len(key) != KEY_SIZE:
            raise MalformedKey(f"AEAD key must be {KEY_SIZE} bytes, got {len(key)}")
        return ChaCha20Poly1305(key)

"""
ssi_crypto.engines.engine_ed25519
---------------------------------
Default engine: Ed25519 keys via libsodium (PyNaCl).

- Verkey: 32-byte Ed25519 public key
- Signkey: 64-byte libsodium secret key (seed || public key)
- Box / sealed box: keys converted to curve25519, then crypto_box (XSalsa20-Poly1305)
- Signatures: detached Ed25519
"""

from __future__ import annotations
from typing import Optional, Tuple
import nacl.utils
from nacl import bindings
from nacl.exceptions import BadSignatureError, CryptoError as NaclCryptoError
from nacl.signing import VerifyKey
from ..errors import AuthenticationFailed, InvalidSeedLength, MalformedKey
from .engine_base import CryptoEngine

PUBLIC_KEY_SIZE = bindings.crypto_sign_PUBLICKEYBYTES
SECRET_KEY_SIZE = bindings.crypto_sign_SECRETKEYBYTES
SIGNATURE_SIZE = bindings.crypto_sign_BYTES


class Ed25519Engine(CryptoEngine):
    name = "ed25519"
    seed_size = bindings.crypto_sign_SEEDBYTES
    nonce_size = bindings.crypto_box_NONCEBYTES

    # --------- keys ----------
    def create_keys(self, seed: Optional[bytes] = None) -> Tuple[bytes, bytes]:
        if seed is None:
            return bindings.crypto_sign_keypair()
        if len(seed) != self.seed_size:
            raise InvalidSeedLength(
                f"Invalid seed length: expected {self.seed_size} bytes, got {len(seed)}"
            )
        return bindings.crypto_sign_seed_keypair(seed)

    def gen_nonce(self) -> bytes:
        return nacl.utils.random(self.nonce_size)

    def validate_key(self, pk: bytes) -> None:
        self._curve_pk(pk)

    # --------- box (authenticated) ----------
    def crypto_box(self, data: bytes, nonce: bytes, pk: bytes, sk: bytes) -> bytes:
        return bindings.crypto_box(data, nonce, self._curve_pk(pk), self._curve_sk(sk))

    def crypto_box_open(self, cipher: bytes, nonce: bytes, pk: bytes, sk: bytes) -> bytes:
        curve_pk, curve_sk = self._curve_pk(pk), self._curve_sk(sk)
        try:
            return bindings.crypto_box_open(cipher, nonce, curve_pk, curve_sk)
        except NaclCryptoError as e:
            raise AuthenticationFailed("Unable to open crypto box") from e

    # --------- sealed box (anonymous sender) ----------
    def crypto_box_seal(self, data: bytes, pk: bytes) -> bytes:
        return bindings.crypto_box_seal(data, self._curve_pk(pk))

    def crypto_box_seal_open(self, cipher: bytes, pk: bytes, sk: bytes) -> bytes:
        curve_pk, curve_sk = self._curve_pk(pk), self._curve_sk(sk)
        try:
            return bindings.crypto_box_seal_open(cipher, curve_pk, curve_sk)
        except NaclCryptoError as e:
            raise AuthenticationFailed("Unable to open sealed box") from e

    # --------- signatures ----------
    def sign(self, data: bytes, sk: bytes) -> bytes:
        self._check_sk(sk)
        return bindings.crypto_sign(data, sk)[:SIGNATURE_SIZE]

    def verify(self, data: bytes, signature: bytes, pk: bytes) -> bool:
        self._check_pk(pk)
        if len(signature) != SIGNATURE_SIZE:
            return False
        try:
            VerifyKey(pk).verify(data, signature)
            return True
        except BadSignatureError:
            return False

    # --------- helpers ----------
    def _check_pk(self, pk: bytes) -> None:
        if len(pk) != PUBLIC_KEY_SIZE:
            raise MalformedKey(
                f"Invalid ed25519 public key length: expected {PUBLIC_KEY_SIZE}, got {len(pk)}"
            )

    def _check_sk(self, sk: bytes) -> None:
        if len(sk) != SECRET_KEY_SIZE:
            raise MalformedKey(
                f"Invalid ed25519 secret key length: expected {SECRET_KEY_SIZE}, got {len(sk)}"
            )

    def _curve_pk(self, pk: bytes) -> bytes:
        self._check_pk(pk)
        try:
            return bindings.crypto_sign_ed25519_pk_to_curve25519(pk)
        except NaclCryptoError as e:
            raise MalformedKey("Public key is not a valid ed25519 point") from e

    def _curve_sk(self, sk: bytes) -> bytes:
        self._check_sk(sk)
        return bindings.crypto_sign_ed25519_sk_to_curve25519(sk)

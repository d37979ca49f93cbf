from __future__ import annotations
from typing import Optional, Tuple


class CryptoEngine:
    """
    Primitive crypto capability behind one engine type name.

    All key material crossing this boundary is raw bytes; tagging and
    Base58 live in the service layer. Implementations translate their
    library's exceptions into ssi_crypto.errors types.
    """
    name: str = "base"
    seed_size: int = 0
    nonce_size: int = 0

    @property
    def type_name(self) -> str:
        return self.name

    def create_keys(self, seed: Optional[bytes] = None) -> Tuple[bytes, bytes]:
        """Return (public_key, secret_key); random when seed is None."""
        raise NotImplementedError

    def gen_nonce(self) -> bytes:
        raise NotImplementedError

    def crypto_box(self, data: bytes, nonce: bytes, pk: bytes, sk: bytes) -> bytes:
        raise NotImplementedError

    def crypto_box_open(self, cipher: bytes, nonce: bytes, pk: bytes, sk: bytes) -> bytes:
        raise NotImplementedError

    def crypto_box_seal(self, data: bytes, pk: bytes) -> bytes:
        raise NotImplementedError

    def crypto_box_seal_open(self, cipher: bytes, pk: bytes, sk: bytes) -> bytes:
        raise NotImplementedError

    def sign(self, data: bytes, sk: bytes) -> bytes:
        raise NotImplementedError

    def verify(self, data: bytes, signature: bytes, pk: bytes) -> bool:
        raise NotImplementedError

    def validate_key(self, pk: bytes) -> None:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"

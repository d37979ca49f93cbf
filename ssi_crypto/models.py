# ssi_crypto/models.py

"""
ssi_crypto.models
-----------------
Value objects exchanged with callers. Each is built fresh per call and owned
by the caller; the services keep no reference to them.

Byte fields (CryptoBox) stay raw; wire forms (ComboBox, CryptoDetached) carry
Base64 text so they can be dropped into any JSON envelope.
"""

from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


@dataclass
class KeyPair:
    verkey: str                    # base58 public key, optionally ":<type>"
    signkey: Optional[str] = None  # base58 secret key; None for a peer's key

    def __repr__(self) -> str:
        return f"KeyPair(verkey={self.verkey!r}, signkey={'***' if self.signkey else None})"


@dataclass
class KeyInfo:
    seed: Optional[str] = None
    crypto_type: Optional[str] = None  # None -> registry default

    def __repr__(self) -> str:
        return f"KeyInfo(seed={'***' if self.seed else None}, crypto_type={self.crypto_type!r})"


@dataclass
class Did:
    did: str
    verkey: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class MyDidInfo:
    did: Optional[str] = None
    seed: Optional[str] = None
    crypto_type: Optional[str] = None
    cid: bool = False  # use the full verkey as the DID

    def __repr__(self) -> str:
        return (
            f"MyDidInfo(did={self.did!r}, seed={'***' if self.seed else None}, "
            f"crypto_type={self.crypto_type!r}, cid={self.cid})"
        )


@dataclass
class TheirDidInfo:
    did: str
    verkey: Optional[str] = None  # full, "~abbreviated", or None (did is the key)


@dataclass
class TheirDid:
    did: str
    verkey: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class CryptoBox:
    cipher: bytes
    nonce: bytes


@dataclass
class ComboBox:
    cipher: str          # base64
    sender_verkey: str   # tagged verkey of the sender
    nonce: str           # base64

    def to_dict(self) -> Dict[str, str]:
        return {"msg": self.cipher, "sender": self.sender_verkey, "nonce": self.nonce}

    @classmethod
    def from_dict(cls, data: Dict[str, str]) -> "ComboBox":
        return cls(cipher=data["msg"], sender_verkey=data["sender"], nonce=data["nonce"])


@dataclass
class CryptoDetached:
    cipher: str  # base64
    nonce: str   # base64
    tag: str     # base64

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, str]) -> "CryptoDetached":
        return cls(cipher=data["cipher"], nonce=data["nonce"], tag=data["tag"])

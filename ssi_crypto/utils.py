"""
ssi_crypto.utils
----------------
Textual codecs shared by every layer: Base58 for keys and DIDs, Base64 for
ciphertexts on the wire, and hex for seeds.
Codec failures surface as typed errors from ssi_crypto.errors.
"""

from __future__ import annotations
import base64, binascii
import base58
from .errors import MalformedBase58, MalformedBase64, MalformedSeed

def b58e(b: bytes) -> str:
    return base58.b58encode(b).decode("ascii")

def b58d(s: str) -> bytes:
    try:
        return base58.b58decode(s)
    except ValueError as e:
        raise MalformedBase58(f"Invalid base58 string: {s!r}") from e

def b64e(b: bytes) -> str:
    return base64.b64encode(b).decode("ascii")

def b64d(s: str) -> bytes:
    try:
        return base64.b64decode(s.encode("ascii"), validate=True)
    except (binascii.Error, UnicodeEncodeError) as e:
        raise MalformedBase64(f"Invalid base64 string: {e}") from e

def hex_to_bytes(s: str) -> bytes:
    try:
        return bytes.fromhex(s)
    except ValueError as e:
        raise MalformedSeed("Can't deserialize seed from hex") from e

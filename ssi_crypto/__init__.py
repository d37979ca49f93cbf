"""
ssi_crypto
==========
Key addressing and encryption protocols for self-sovereign identity agents.

Provides:
- Type-tagged verkeys ("<key>:<engine type>") resolved through an immutable engine registry
- DID derivation and peer verkey expansion
- Authenticated box, sealed box, detached signatures and ChaCha20-Poly1305 AEAD
"""

from .crypto import CryptoService
from .did import DidService, build_full_verkey, abbreviate_verkey
from .engines import TypeRegistry, load_registry
from .models import (
    ComboBox, CryptoBox, CryptoDetached, Did, KeyInfo, KeyPair,
    MyDidInfo, TheirDid, TheirDidInfo,
)
from .tags import TaggedKey, parse_tag, compose_tag

__version__ = "0.1.0"
__all__ = [
    "CryptoService",
    "DidService",
    "build_full_verkey",
    "abbreviate_verkey",
    "TypeRegistry",
    "load_registry",
    "ComboBox",
    "CryptoBox",
    "CryptoDetached",
    "Did",
    "KeyInfo",
    "KeyPair",
    "MyDidInfo",
    "TheirDid",
    "TheirDidInfo",
    "TaggedKey",
    "parse_tag",
    "compose_tag",
]

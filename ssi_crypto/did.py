"""
ssi_crypto.did
--------------
DIDs derived from engine keypairs.

A DID is the Base58 form of a 16- or 32-byte value. Our own DIDs are either
given explicitly, the full verkey ("cid"), or the first 16 bytes of the verkey
(the abridged form). A peer's verkey may be abbreviated as "~<rest>", meaning
"the DID bytes followed by <rest>".
"""

from __future__ import annotations
from typing import Optional, Tuple
from .crypto import CryptoService
from .engines import TypeRegistry
from .errors import InvalidIdentifierLength, MalformedBase58
from .logger import get_logger
from .models import Did, KeyInfo, KeyPair, MyDidInfo, TheirDid, TheirDidInfo
from .tags import compose_tag, parse_tag
from .utils import b58d, b58e

DID_SIZES = (16, 32)
ABRIDGED_DID_SIZE = 16
ABBREVIATION_MARKER = "~"

log = get_logger("ssi_crypto.did")


def build_full_verkey(did: str, verkey: Optional[str], registry: TypeRegistry) -> str:
    """Expand a possibly abbreviated peer verkey; None means the DID is the key."""
    if verkey is None:
        return did
    tagged = parse_tag(verkey, registry)
    if not tagged.is_abbreviated:
        return verkey
    full = b58d(did) + b58d(tagged.raw_key[len(ABBREVIATION_MARKER):])
    return compose_tag(b58e(full), tagged.engine_type, registry)


def abbreviate_verkey(did: str, verkey: str, registry: TypeRegistry) -> str:
    """Inverse of build_full_verkey; returns verkey unchanged when it doesn't start with the DID."""
    tagged = parse_tag(verkey, registry)
    did_bytes = b58d(did)
    key_bytes = b58d(tagged.raw_key)
    if len(did_bytes) != ABRIDGED_DID_SIZE or key_bytes[:ABRIDGED_DID_SIZE] != did_bytes:
        return verkey
    abbreviated = ABBREVIATION_MARKER + b58e(key_bytes[ABRIDGED_DID_SIZE:])
    return compose_tag(abbreviated, tagged.engine_type, registry)


class DidService:
    def __init__(self, crypto: Optional[CryptoService] = None):
        self.crypto = crypto or CryptoService()

    @property
    def registry(self) -> TypeRegistry:
        return self.crypto.registry

    def create_my_did(self, info: MyDidInfo) -> Tuple[Did, KeyPair]:
        log.debug("Create my did: %s", info)

        if info.did is not None:
            self.check_did(info.did)

        keys = self.crypto.create_keys(KeyInfo(seed=info.seed, crypto_type=info.crypto_type))
        raw_verkey = parse_tag(keys.verkey, self.registry).raw_key

        if info.did is not None:
            did = info.did
        elif info.cid:
            did = raw_verkey
        else:
            did = b58e(b58d(raw_verkey)[:ABRIDGED_DID_SIZE])

        return Did(did=did, verkey=keys.verkey), keys

    def create_their_did(self, info: TheirDidInfo) -> TheirDid:
        log.debug("Create their did: %s", info)

        self.check_did(info.did)
        verkey = build_full_verkey(info.did, info.verkey, self.registry)
        self.crypto.validate_key(verkey)
        return TheirDid(did=info.did, verkey=verkey)

    def check_did(self, did: Optional[str]) -> None:
        size = len(b58d(did or ""))
        if size not in DID_SIZES:
            raise InvalidIdentifierLength(size)

    def validate_did(self, did: Optional[str]) -> bool:
        log.debug("Validate did: %s", did)

        try:
            self.check_did(did)
        except (InvalidIdentifierLength, MalformedBase58) as e:
            log.error("%s", e)
            return False
        return True

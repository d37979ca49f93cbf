"""
ssi_crypto.crypto
-----------------
Protocol layer over the registered primitive engines:

- Key generation with seed normalization (base64 / hex / raw)
- Authenticated box between two parties, plus its Base64 "combo box" wire form
- Sealed box for anonymous senders
- Detached signatures
- ChaCha20-Poly1305 AEAD with a separated tag

Every operation parses the type tag of the keys it receives, rejects unknown
or mismatched engine types before any cryptographic work, and only then
delegates to the engine.

Box key roles: encryption uses the receiver's public key with the sender's
secret key; opening uses the sender's public key with the receiver's secret
key. Neither side ever needs the other's secret.
"""

from __future__ import annotations
from typing import Optional, Tuple
from .engines import AeadEngine, CryptoEngine, TypeRegistry, load_registry
from .errors import IncompatibleKeyTypes, MalformedKey
from .logger import get_logger
from .models import ComboBox, CryptoBox, CryptoDetached, KeyInfo, KeyPair
from .tags import TaggedKey, compose_tag, parse_tag
from .utils import b58d, b58e, b64d, b64e, hex_to_bytes

ABBREVIATED_KEY_SIZE = 16

log = get_logger("ssi_crypto.crypto")


class CryptoService:
    def __init__(self, registry: Optional[TypeRegistry] = None, aead: Optional[AeadEngine] = None):
        self.registry = registry or load_registry()
        self.aead = aead or AeadEngine()

    # --------- keys ----------
    def create_keys(self, info: Optional[KeyInfo] = None) -> KeyPair:
        info = info or KeyInfo()
        log.debug("Create keys: %s", info)

        engine = self.registry.resolve(info.crypto_type or self.registry.default_type)
        seed = self.convert_seed(info.seed, engine.seed_size)
        pk, sk = engine.create_keys(seed)
        return KeyPair(
            verkey=compose_tag(b58e(pk), engine.type_name, self.registry),
            signkey=b58e(sk),
        )

    @staticmethod
    def convert_seed(seed: Optional[str], seed_size: int) -> Optional[bytes]:
        """
        Normalize a textual seed to raw bytes.

        - None                      -> None (engine picks a random keypair)
        - ends with "="             -> standard base64
        - exactly 2 * seed_size len -> hex
        - anything else             -> the UTF-8 bytes of the text itself

        Length is enforced by the engine, not here.
        """
        if seed is None:
            return None
        if seed.endswith("="):
            return b64d(seed)
        if len(seed) == seed_size * 2:
            return hex_to_bytes(seed)
        return seed.encode("utf-8")

    def validate_key(self, verkey: str) -> None:
        log.debug("Validate key: %s", verkey)

        tagged = parse_tag(verkey, self.registry)
        if tagged.is_abbreviated:
            size = len(b58d(tagged.raw_key[1:]))
            if size != ABBREVIATED_KEY_SIZE:
                raise MalformedKey(
                    f"Abbreviated verkey must decode to {ABBREVIATED_KEY_SIZE} bytes, got {size}"
                )
            return
        self.registry.resolve(tagged.engine_type).validate_key(b58d(tagged.raw_key))

    # --------- authenticated box ----------
    def crypto_box(self, data: bytes, sender: KeyPair, receiver: KeyPair) -> CryptoBox:
        log.debug("Crypto box encrypt: my pk: %s their pk: %s", sender.verkey, receiver.verkey)

        engine, _, their_key = self._resolve_pair(sender, receiver)
        pk, sk = self._public(their_key), self._secret(sender)
        nonce = engine.gen_nonce()
        cipher = engine.crypto_box(data, nonce, pk, sk)
        return CryptoBox(cipher=cipher, nonce=nonce)

    def crypto_box_open(self, cipher: bytes, nonce: bytes, sender: KeyPair, receiver: KeyPair) -> bytes:
        log.debug("Crypto box decrypt: their pk: %s my pk: %s", sender.verkey, receiver.verkey)

        engine, their_key, _ = self._resolve_pair(sender, receiver)
        pk, sk = self._public(their_key), self._secret(receiver)
        return engine.crypto_box_open(cipher, nonce, pk, sk)

    def combo_box(self, sender: KeyPair, receiver: KeyPair, data: bytes) -> ComboBox:
        box = self.crypto_box(data, sender, receiver)
        return ComboBox(
            cipher=b64e(box.cipher),
            sender_verkey=sender.verkey,
            nonce=b64e(box.nonce),
        )

    def combo_box_open(self, combo: ComboBox, receiver: KeyPair) -> bytes:
        sender = KeyPair(verkey=combo.sender_verkey)
        return self.crypto_box_open(b64d(combo.cipher), b64d(combo.nonce), sender, receiver)

    # --------- sealed box ----------
    def crypto_box_seal(self, data: bytes, keys: KeyPair) -> bytes:
        log.debug("Crypto box seal encrypt pk: %s", keys.verkey)

        tagged = parse_tag(keys.verkey, self.registry)
        engine = self.registry.resolve(tagged.engine_type)
        return engine.crypto_box_seal(data, self._public(tagged))

    def crypto_box_seal_open(self, cipher: bytes, keys: KeyPair) -> bytes:
        log.debug("Crypto box seal decrypt pk: %s", keys.verkey)

        tagged = parse_tag(keys.verkey, self.registry)
        engine = self.registry.resolve(tagged.engine_type)
        return engine.crypto_box_seal_open(cipher, self._public(tagged), self._secret(keys))

    # --------- signatures ----------
    def sign(self, data: bytes, keys: KeyPair) -> bytes:
        log.debug("Sign with pk: %s", keys.verkey)

        tagged = parse_tag(keys.verkey, self.registry)
        return self.registry.resolve(tagged.engine_type).sign(data, self._secret(keys))

    def verify(self, data: bytes, signature: bytes, keys: KeyPair) -> bool:
        log.debug("Verify with pk: %s", keys.verkey)

        tagged = parse_tag(keys.verkey, self.registry)
        engine = self.registry.resolve(tagged.engine_type)
        return engine.verify(data, signature, self._public(tagged))

    # --------- AEAD (detached tag) ----------
    def encrypt_plaintext(self, data: bytes, aad: Optional[bytes], keys: KeyPair) -> CryptoDetached:
        key = self._aead_key(keys)
        nonce = self.aead.next_nonce()
        cipher, tag = self.aead.encrypt_detached(data, aad or b"", nonce, key)
        return CryptoDetached(cipher=b64e(cipher), nonce=b64e(nonce), tag=b64e(tag))

    def decrypt_plaintext(self, box: CryptoDetached, aad: Optional[bytes], keys: KeyPair) -> bytes:
        key = self._aead_key(keys)
        return self.aead.decrypt_detached(
            b64d(box.cipher), b64d(box.tag), aad or b"", b64d(box.nonce), key
        )

    # --------- helpers ----------
    def _resolve_pair(self, sender: KeyPair, receiver: KeyPair) -> Tuple[CryptoEngine, TaggedKey, TaggedKey]:
        sender_key = parse_tag(sender.verkey, self.registry)
        receiver_key = parse_tag(receiver.verkey, self.registry)
        if sender_key.engine_type != receiver_key.engine_type:
            log.error(
                "My key crypto type is incompatible with their key crypto type: %s %s",
                sender_key.engine_type, receiver_key.engine_type,
            )
            raise IncompatibleKeyTypes(sender_key.engine_type, receiver_key.engine_type)
        return self.registry.resolve(sender_key.engine_type), sender_key, receiver_key

    @staticmethod
    def _public(tagged: TaggedKey) -> bytes:
        if tagged.is_abbreviated:
            raise MalformedKey("Abbreviated verkey must be expanded before use")
        return b58d(tagged.raw_key)

    @staticmethod
    def _secret(keys: KeyPair) -> bytes:
        if not keys.signkey:
            raise MalformedKey(f"No secret key for verkey {keys.verkey}")
        return b58d(keys.signkey)

    def _aead_key(self, keys: KeyPair) -> bytes:
        parse_tag(keys.verkey, self.registry)
        secret = self._secret(keys)
        if len(secret) < self.aead.key_size:
            raise MalformedKey(
                f"Secret key too short for AEAD: need {self.aead.key_size} bytes, got {len(secret)}"
            )
        return secret[: self.aead.key_size]

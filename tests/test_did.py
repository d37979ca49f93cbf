import pytest
from ssi_crypto.crypto import CryptoService
from ssi_crypto.did import DidService, abbreviate_verkey, build_full_verkey
from ssi_crypto.engines import CryptoEngine, Ed25519Engine, TypeRegistry
from ssi_crypto.errors import InvalidIdentifierLength, MalformedKey
from ssi_crypto.models import MyDidInfo, TheirDidInfo
from ssi_crypto.utils import b58d, b58e

TRUSTEE_SEED = "000000000000000000000000Trustee1"
TRUSTEE_PK = "e33aaf381fffa6109ad591fdc38717945f8fabf7abf02086ae401c63e9913097"


class FixedKeyEngine(CryptoEngine):
    name = "fake"
    seed_size = 32

    def create_keys(self, seed=None):
        return b"\x01" * 16 + b"\x02" * 16, b"\x03" * 64


def test_create_my_did_abridged():
    dids = DidService()
    did, keys = dids.create_my_did(MyDidInfo(seed=TRUSTEE_SEED))

    assert did.verkey == keys.verkey
    assert b58d(did.verkey).hex() == TRUSTEE_PK
    assert did.did == b58e(bytes.fromhex(TRUSTEE_PK)[:16])
    assert dids.validate_did(did.did)


def test_create_my_did_full_key():
    dids = DidService()
    did, keys = dids.create_my_did(MyDidInfo(seed=TRUSTEE_SEED, cid=True))
    assert did.did == keys.verkey
    assert len(b58d(did.did)) == 32


def test_create_my_did_explicit():
    dids = DidService()
    explicit = b58e(bytes(range(1, 17)))
    did, _ = dids.create_my_did(MyDidInfo(did=explicit))
    assert did.did == explicit

    with pytest.raises(InvalidIdentifierLength):
        dids.create_my_did(MyDidInfo(did=b58e(bytes(range(1, 18)))))


@pytest.mark.parametrize("size,expected", [
    (15, False), (16, True), (17, False), (31, False), (32, True), (33, False),
])
def test_validate_did_lengths(size, expected):
    dids = DidService()
    assert dids.validate_did(b58e(bytes(range(1, size + 1)))) is expected


def test_validate_did_reports_failure_in_log(caplog):
    dids = DidService()
    assert not dids.validate_did("")
    assert not dids.validate_did(None)
    assert not dids.validate_did("0OIl")
    assert "unexpected length" in caplog.text


def test_their_did_with_full_and_abbreviated_verkey():
    dids = DidService()
    mine, _ = dids.create_my_did(MyDidInfo())

    full = dids.create_their_did(TheirDidInfo(did=mine.did, verkey=mine.verkey))
    assert full.verkey == mine.verkey

    abbr = abbreviate_verkey(mine.did, mine.verkey, dids.registry)
    assert abbr.startswith("~")
    assert build_full_verkey(mine.did, abbr, dids.registry) == mine.verkey

    their = dids.create_their_did(TheirDidInfo(did=mine.did, verkey=abbr))
    assert their.verkey == mine.verkey
    assert their.to_dict() == {"did": mine.did, "verkey": mine.verkey}


def test_their_did_without_verkey_uses_did():
    dids = DidService()
    mine, _ = dids.create_my_did(MyDidInfo(cid=True))
    assert abbreviate_verkey(mine.did, mine.verkey, dids.registry) == mine.verkey

    their = dids.create_their_did(TheirDidInfo(did=mine.did))
    assert their.verkey == mine.did


def test_their_did_rejects_bad_input():
    dids = DidService()
    mine, _ = dids.create_my_did(MyDidInfo())

    with pytest.raises(MalformedKey):
        dids.create_their_did(TheirDidInfo(did=mine.did, verkey=b58e(bytes(range(1, 20)))))
    with pytest.raises(MalformedKey):
        dids.create_their_did(TheirDidInfo(did=mine.did))
    with pytest.raises(InvalidIdentifierLength):
        dids.create_their_did(TheirDidInfo(did=b58e(bytes(range(1, 10))), verkey=mine.verkey))


def test_create_my_did_tags_non_default_verkey():
    registry = TypeRegistry({"ed25519": Ed25519Engine(), "fake": FixedKeyEngine()}, default_type="ed25519")
    dids = DidService(CryptoService(registry=registry))
    raw_verkey = b58e(b"\x01" * 16 + b"\x02" * 16)

    did, keys = dids.create_my_did(MyDidInfo(crypto_type="fake"))
    assert did.verkey == keys.verkey == raw_verkey + ":fake"
    assert did.did == b58e(b"\x01" * 16)
    assert ":" not in did.did

    did, _ = dids.create_my_did(MyDidInfo(crypto_type="fake", cid=True))
    assert did.did == raw_verkey
    assert did.verkey.endswith(":fake")

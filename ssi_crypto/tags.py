"""
ssi_crypto.tags
---------------
Type-tagged key strings: "<base58 key>:<engine type>".

Keys of the registry's default type are stored untagged. Everything inside
the package works on TaggedKey; the string form only exists at the edges.
"""

from __future__ import annotations
from dataclasses import dataclass
from .engines.registry import TAG_SEPARATOR, TypeRegistry
from .errors import UnknownEngineType


@dataclass(frozen=True)
class TaggedKey:
    raw_key: str
    engine_type: str

    @property
    def is_abbreviated(self) -> bool:
        return self.raw_key.startswith("~")

    def compose(self, registry: TypeRegistry) -> str:
        return compose_tag(self.raw_key, self.engine_type, registry)


def parse_tag(key: str, registry: TypeRegistry) -> TaggedKey:
    if TAG_SEPARATOR in key:
        raw_key, engine_type = key.split(TAG_SEPARATOR, 1)
    else:
        raw_key, engine_type = key, registry.default_type
    if not registry.is_registered(engine_type):
        raise UnknownEngineType(engine_type)
    return TaggedKey(raw_key, engine_type)


def compose_tag(raw_key: str, engine_type: str, registry: TypeRegistry) -> str:
    if not registry.is_registered(engine_type):
        raise UnknownEngineType(engine_type)
    if engine_type == registry.default_type:
        return raw_key
    return f"{raw_key}{TAG_SEPARATOR}{engine_type}"

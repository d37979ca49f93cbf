from __future__ import annotations
from types import MappingProxyType
from typing import Mapping, Tuple
from ..errors import UnknownEngineType
from .engine_base import CryptoEngine

TAG_SEPARATOR = ":"


class TypeRegistry:
    """
    Immutable table of engine type name -> engine instance, plus the default.

    Built once (see ssi_crypto.engines.load_registry) and shared read-only
    by every service.
    """

    def __init__(self, engines: Mapping[str, CryptoEngine], default_type: str):
        for name, engine in engines.items():
            if not name or TAG_SEPARATOR in name:
                raise ValueError(f"Invalid engine type name: {name!r}")
            if engine.type_name != name:
                raise ValueError(f"Engine {engine!r} registered under mismatched name {name!r}")
        if default_type not in engines:
            raise UnknownEngineType(default_type)
        self._engines = MappingProxyType(dict(engines))
        self._default_type = default_type

    @property
    def default_type(self) -> str:
        return self._default_type

    @property
    def types(self) -> Tuple[str, ...]:
        return tuple(self._engines)

    def is_registered(self, type_name: str) -> bool:
        return type_name in self._engines

    def resolve(self, type_name: str) -> CryptoEngine:
        try:
            return self._engines[type_name]
        except KeyError:
            raise UnknownEngineType(type_name) from None

    def __contains__(self, type_name: object) -> bool:
        return type_name in self._engines

    def __repr__(self) -> str:
        return f"TypeRegistry(types={list(self._engines)}, default={self._default_type!r})"

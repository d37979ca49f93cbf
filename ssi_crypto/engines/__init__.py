# ssi_crypto/engines/__init__.py

from .engine_base import CryptoEngine
from .engine_ed25519 import Ed25519Engine
from .aead import AeadEngine
from .registry import TypeRegistry
from ..errors import UnknownEngineType
import os

BUILTIN_ENGINES = {
    Ed25519Engine.name: Ed25519Engine,
}


def load_registry(config: dict | None = None) -> TypeRegistry:
    """
    Factory resolver for the engine type registry.

    Precedence: config dict, then environment, then defaults.
        - default_type / SSI_CRYPTO_DEFAULT_TYPE   (default: ed25519)
        - engines      / SSI_CRYPTO_ENGINES        (comma list, default: all built-ins)
        - instances                                (name -> pre-built engine, config only)
    """
    config = config or {}
    default_type = config.get("default_type") or os.getenv("SSI_CRYPTO_DEFAULT_TYPE", Ed25519Engine.name)

    names = config.get("engines")
    if names is None:
        raw = os.getenv("SSI_CRYPTO_ENGINES", "")
        names = [n.strip() for n in raw.split(",") if n.strip()] or list(BUILTIN_ENGINES)

    engines = {}
    for name in names:
        engine_cls = BUILTIN_ENGINES.get(name)
        if engine_cls is None:
            raise UnknownEngineType(name)
        engines[name] = engine_cls()

    engines.update(config.get("instances") or {})
    return TypeRegistry(engines, default_type)


__all__ = [
    "CryptoEngine",
    "Ed25519Engine",
    "AeadEngine",
    "TypeRegistry",
    "BUILTIN_ENGINES",
    "load_registry",
]

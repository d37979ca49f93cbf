from __future__ import annotations


class CryptoError(Exception):
    pass


class UnknownEngineType(CryptoError):
    def __init__(self, type_name: str):
        super().__init__(f"Trying to use key with unknown crypto: {type_name}")
        self.type_name = type_name


class IncompatibleKeyTypes(CryptoError):
    def __init__(self, sender_type: str, receiver_type: str):
        super().__init__(
            f"My key crypto type is incompatible with their key crypto type: "
            f"{sender_type} must be {receiver_type}"
        )
        self.sender_type = sender_type
        self.receiver_type = receiver_type


class InvalidIdentifierLength(CryptoError):
    def __init__(self, length: int):
        super().__init__(
            f"Trying to use DID with unexpected length: {length}. "
            "The 16- or 32-byte number upon which a DID is based should be "
            "22/23 or 44/45 bytes when encoded as base58"
        )
        self.length = length


class MalformedKey(CryptoError):
    pass


class InvalidSeedLength(CryptoError):
    pass


class MalformedSeed(InvalidSeedLength):
    pass


class AuthenticationFailed(CryptoError):
    pass


class CodecError(CryptoError):
    pass


class MalformedBase58(CodecError):
    pass


class MalformedBase64(CodecError):
    pass

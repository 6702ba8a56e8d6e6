"""Seeds, private and public keys, signatures and Nano addresses."""

from __future__ import annotations

import re
import secrets
from dataclasses import dataclass
from typing import ClassVar

from feeless import ed25519
from feeless.encoding import (
    ALPHABET,
    HexBytes,
    blake2b,
    decode_nano_base_32,
    encode_nano_base_32,
)
from feeless.errors import (
    BadPublicKeyError,
    InvalidAddressError,
    InvalidChecksumError,
    SignatureError,
)


def _bits_of(data: bytes) -> list[int]:
    return [(byte >> (7 - i)) & 1 for byte in data for i in range(8)]


class Signature(HexBytes):
    """An Ed25519/BLAKE2b signature."""

    __slots__ = ()
    LEN = 64
    DESCRIPTION = "signature"

    @classmethod
    def zero(cls) -> Signature:
        return cls(bytes(cls.LEN))


class Public(HexBytes):
    """256 bit public key, convertible to an address and able to verify signatures."""

    __slots__ = ()
    LEN = 32
    DESCRIPTION = "public key"
    ADDRESS_CHECKSUM_LEN: ClassVar[int] = 5

    def to_address(self) -> Address:
        return Address.from_public(self)

    def checksum(self) -> str:
        """Address checksum: BLAKE2b(5) of the key, byte-reversed, in Nano base-32."""
        digest = blake2b(self.ADDRESS_CHECKSUM_LEN, self.data)[::-1]
        return encode_nano_base_32(_bits_of(digest))

    def verify(self, message: bytes, signature: Signature) -> None:
        """Raise unless ``signature`` is valid for ``message`` under this key."""
        try:
            valid = ed25519.verify(self.data, message, signature.data)
        except ValueError as exc:
            raise BadPublicKeyError() from exc
        if not valid:
            raise SignatureError(
                f"Public verification failed: sig: {signature!r} "
                f"message: {bytes(message)!r} key: {self!r}"
            )


_ADDRESS_RE = re.compile(f"nano_[13][{ALPHABET}]{{59}}")


@dataclass(frozen=True)
class Address:
    """A validated Nano address such as ``nano_3o3nkaqbgx...``."""

    text: str

    LEN: ClassVar[int] = 65
    PREFIX: ClassVar[str] = "nano_"
    PREFIX_LEN: ClassVar[int] = 5
    ENCODED_PUBLIC_KEY_LEN: ClassVar[int] = 52
    ENCODED_PADDED_BITS: ClassVar[int] = 4

    def __post_init__(self) -> None:
        if not isinstance(self.text, str) or not _ADDRESS_RE.fullmatch(self.text):
            raise InvalidAddressError()
        public = self.to_public()
        if public.checksum() != self.text[self.PREFIX_LEN + self.ENCODED_PUBLIC_KEY_LEN :]:
            raise InvalidChecksumError()

    @classmethod
    def parse(cls, s: str) -> Address:
        """Validate ``s`` and return it as an address."""
        return cls(s)

    @classmethod
    def from_public(cls, public: Public) -> Address:
        bits = [0] * cls.ENCODED_PADDED_BITS + _bits_of(public.data)
        text = cls.PREFIX + encode_nano_base_32(bits) + public.checksum()
        return cls(text)

    def to_public(self) -> Public:
        encoded = self.text[self.PREFIX_LEN : self.PREFIX_LEN + self.ENCODED_PUBLIC_KEY_LEN]
        bits = decode_nano_base_32(encoded)[self.ENCODED_PADDED_BITS :]
        value = int("".join(map(str, bits)), 2)
        return Public(value.to_bytes(Public.LEN, "big"))

    def __str__(self) -> str:
        return self.text


class Private(HexBytes):
    """256 bit private key."""

    __slots__ = ()
    LEN = 32
    DESCRIPTION = "private key"

    @classmethod
    def random(cls) -> Private:
        return cls(secrets.token_bytes(cls.LEN))

    def to_public(self) -> Public:
        return Public(ed25519.public_from_secret(self.data))

    def to_address(self) -> Address:
        return self.to_public().to_address()

    def sign(self, message: bytes) -> Signature:
        return Signature(ed25519.sign(self.data, message))


class Seed(HexBytes):
    """256 bit seed from which private keys are derived by index."""

    __slots__ = ()
    LEN = 32
    DESCRIPTION = "seed"

    @classmethod
    def zero(cls) -> Seed:
        return cls(bytes(cls.LEN))

    @classmethod
    def random(cls) -> Seed:
        return cls(secrets.token_bytes(cls.LEN))

    def derive(self, index: int) -> Private:
        """Private key number ``index`` (an unsigned 32 bit integer)."""
        if not 0 <= index <= 0xFFFFFFFF:
            raise ValueError(f"Index out of range for u32: {index}")
        return Private(blake2b(self.LEN, self.data + index.to_bytes(4, "big")))
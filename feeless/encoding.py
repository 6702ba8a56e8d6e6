"""Hex, BLAKE2b and Nano base-32 encodings, plus a base for fixed-size byte values."""

from __future__ import annotations

import hashlib
import re
from collections.abc import Iterable
from typing import ClassVar

from feeless.errors import DecodingError, FromHexError, WrongLengthError

ALPHABET = "13456789abcdefghijkmnopqrstuwxyz"
ENCODING_BITS = 5

_HEX_RE = re.compile(r"[0-9a-fA-F]*")


def to_hex(data: bytes) -> str:
    """Upper case hexadecimal representation of ``data``."""
    return bytes(data).hex().upper()


def to_hex_lower(data: bytes) -> str:
    """Lower case hexadecimal representation of ``data``."""
    return bytes(data).hex()


def blake2b(size: int, data: bytes) -> bytes:
    """BLAKE2b digest of ``data`` with an output of ``size`` bytes."""
    if size <= 0:
        raise ValueError("Output size was zero")
    return hashlib.blake2b(bytes(data), digest_size=size).digest()


def encode_nano_base_32(bits: Iterable[int]) -> str:
    """Encode a most-significant-first bit sequence; its length must be a multiple of 5."""
    bit_list = [1 if b else 0 for b in bits]
    if len(bit_list) % ENCODING_BITS:
        raise ValueError("Bit sequence length must be divisible by 5")
    chunks = zip(*[iter(bit_list)] * ENCODING_BITS)
    return "".join(
        ALPHABET[int("".join(str(b) for b in chunk), 2)] for chunk in chunks
    )


def decode_nano_base_32(s: str) -> list[int]:
    """Decode Nano base-32 text into a list of bits, most significant first."""
    bits: list[int] = []
    for char in s:
        value = ALPHABET.find(char)
        if value < 0:
            raise DecodingError(char)
        bits.extend(int(b) for b in format(value, "05b"))
    return bits


def expect_len(got_len: int, expected_len: int, msg: str) -> None:
    """Raise :class:`WrongLengthError` unless the lengths agree."""
    if got_len != expected_len:
        raise WrongLengthError(msg, expected_len, got_len)


def len_err_msg(got_len: int, expected_len: int, msg: str) -> str:
    """Human readable description of a length mismatch."""
    return f"{msg} is the wrong length: got: {got_len} expected: {expected_len}"


class HexBytes:
    """Immutable fixed-length byte value shown as upper case hex.

    Subclasses set ``LEN`` (number of bytes) and ``DESCRIPTION``.
    """

    __slots__ = ("_data",)

    LEN: ClassVar[int] = 0
    DESCRIPTION: ClassVar[str] = "bytes"

    def __init__(self, data: bytes) -> None:
        data = bytes(data)
        expect_len(len(data), self.LEN, self.DESCRIPTION)
        self._data = data

    @classmethod
    def from_hex(cls, s: str):
        """Parse exactly ``2 * LEN`` hexadecimal digits."""
        expect_len(len(s), cls.LEN * 2, cls.DESCRIPTION)
        if not _HEX_RE.fullmatch(s):
            raise FromHexError(cls.DESCRIPTION, "Invalid character in hex string")
        return cls(bytes.fromhex(s))

    @classmethod
    def from_bytes(cls, data: bytes):
        """Build from exactly ``LEN`` bytes."""
        return cls(data)

    @property
    def data(self) -> bytes:
        return self._data

    def as_hex(self) -> str:
        return to_hex(self._data)

    def as_hex_lower(self) -> str:
        return to_hex_lower(self._data)

    def __bytes__(self) -> bytes:
        return self._data

    def __len__(self) -> int:
        return len(self._data)

    def __str__(self) -> str:
        return self.as_hex()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.as_hex()})"

    def __format__(self, spec: str) -> str:
        if spec.endswith("X"):
            return self.as_hex()
        if spec.endswith("x"):
            return self.as_hex_lower()
        return format(self.as_hex(), spec)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._data == other._data

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._data))
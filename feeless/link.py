"""Block hashes, block links and previous-block references."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from feeless.encoding import HexBytes, expect_len
from feeless.errors import FromHexError
from feeless.keys import Public

_HEX_RE = re.compile(r"[0-9a-fA-F]*")


class BlockHash(HexBytes):
    """32 byte BLAKE2b hash of a block."""

    __slots__ = ()
    LEN = 32
    DESCRIPTION = "block hash"

    @classmethod
    def zero(cls) -> BlockHash:
        return cls(bytes(cls.LEN))


class UnsureLink(HexBytes):
    """Link bytes whose meaning is not known yet."""

    __slots__ = ()
    LEN = 32
    DESCRIPTION = "link"

    def is_all_zeros(self) -> bool:
        return not any(self.data)


class LinkKind(Enum):
    NOTHING = "nothing"
    UNSURE = "unsure"
    SOURCE = "source"
    DESTINATION_ACCOUNT = "destination_account"


@dataclass(frozen=True)
class Link:
    """A state block's link: nothing, a source block, a destination account or unknown."""

    kind: LinkKind
    value: BlockHash | Public | UnsureLink | None = None

    LEN = 32

    @classmethod
    def nothing(cls) -> Link:
        return cls(LinkKind.NOTHING)

    @classmethod
    def unsure_from_str(cls, s: str) -> Link:
        """Parse 64 hex digits into a link of unknown meaning."""
        expect_len(len(s), cls.LEN * 2, "Link")
        if not _HEX_RE.fullmatch(s):
            raise FromHexError("Decoding link hex", "Invalid character in hex string")
        return cls(LinkKind.UNSURE, UnsureLink(bytes.fromhex(s)))

    @classmethod
    def source(cls, block_hash: BlockHash) -> Link:
        return cls(LinkKind.SOURCE, block_hash)

    @classmethod
    def destination(cls, public: Public) -> Link:
        return cls(LinkKind.DESTINATION_ACCOUNT, public)

    def as_bytes(self) -> bytes:
        if self.value is None:
            return bytes(self.LEN)
        return self.value.data


class Subtype(Enum):
    SEND = "send"
    RECEIVE = "receive"
    OPEN = "open"
    CHANGE = "change"
    EPOCH = "epoch"


@dataclass(frozen=True)
class Previous:
    """The previous block of an account, or none for an opening block."""

    block_hash: BlockHash | None = None

    @classmethod
    def open(cls) -> Previous:
        return cls(None)

    @classmethod
    def block(cls, block_hash: BlockHash) -> Previous:
        return cls(block_hash)

    @property
    def is_open(self) -> bool:
        return self.block_hash is None

    def to_bytes(self) -> bytes:
        if self.block_hash is None:
            return BlockHash.zero().data
        return self.block_hash.data

    @classmethod
    def from_bytes(cls, data: bytes) -> Previous:
        data = bytes(data)
        if not any(data):
            return cls.open()
        return cls.block(BlockHash(data))

    @classmethod
    def parse(cls, s: str) -> Previous:
        if s == "0" * 64:
            return cls.open()
        return cls.block(BlockHash.from_hex(s))
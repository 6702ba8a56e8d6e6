"""Block types, block hashing and conversion between the block formats."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from feeless.encoding import HexBytes, blake2b
from feeless.errors import FeelessError
from feeless.keys import Address, Private, Public, Signature
from feeless.link import BlockHash, Link, LinkKind, Previous, UnsureLink
from feeless.reader import ByteReader

_log = logging.getLogger(__name__)

RAW_LEN = 16
RAW_MAX = 2**128 - 1


class Work(HexBytes):
    """Proof of work attached to a block."""

    __slots__ = ()
    LEN = 8
    DESCRIPTION = "work"


class BlockType(Enum):
    INVALID = 0
    NOT_A_BLOCK = 1
    SEND = 2
    RECEIVE = 3
    OPEN = 4
    CHANGE = 5
    STATE = 6

    def as_u8(self) -> int:
        return self.value

    @classmethod
    def from_u8(cls, value: int) -> BlockType:
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Invalid block type: {value}") from None

    @property
    def label(self) -> str:
        """Snake case name, as used in JSON."""
        return self.name.lower()


class ValidationState(Enum):
    PUBLISHED = "Published"
    PRESUMED_VALID = "PresumedValid"
    VALID = "Valid"
    SIGNATURE_FAILED = "SignatureFailed"
    WORK_FAILED = "WorkFailed"


def hash_block(parts) -> BlockHash:
    """BLAKE2b-256 of the concatenated parts."""
    return BlockHash(blake2b(BlockHash.LEN, b"".join(bytes(p) for p in parts)))


def _balance_bytes(balance: int) -> bytes:
    if not 0 <= balance <= RAW_MAX:
        raise ValueError(f"Balance out of range: {balance}")
    return balance.to_bytes(RAW_LEN, "big")


def _state_hash(
    account: Public, previous: Previous, representative: Public, balance: int, link: Link
) -> BlockHash:
    preamble = bytes(31) + bytes([BlockType.STATE.as_u8()])
    return hash_block(
        [
            preamble,
            account.data,
            previous.to_bytes(),
            representative.data,
            _balance_bytes(balance),
            link.as_bytes(),
        ]
    )


def _optional(cls, value):
    return None if value is None else cls.from_hex(value)


def _hex_or_none(value: HexBytes | None) -> str | None:
    return None if value is None else value.as_hex()


@dataclass
class OpenBlock:
    """The first block of an account."""

    source: BlockHash
    representative: Public
    account: Public
    work: Work | None = None
    signature: Signature | None = None

    @classmethod
    def from_json(cls, data: str | bytes | Mapping[str, Any]) -> OpenBlock:
        """Build from a JSON document or an already decoded mapping."""
        if isinstance(data, (str, bytes)):
            data = json.loads(data)
        try:
            return cls(
                source=BlockHash.from_hex(data["source"]),
                representative=Address.parse(data["representative"]).to_public(),
                account=Address.parse(data["account"]).to_public(),
                work=_optional(Work, data.get("work")),
                signature=_optional(Signature, data.get("signature")),
            )
        except KeyError as exc:
            raise ValueError(f"Missing field in open block: {exc.args[0]}") from None

    def to_json(self) -> dict[str, Any]:
        return {
            "source": self.source.as_hex(),
            "representative": str(self.representative.to_address()),
            "account": str(self.account.to_address()),
            "work": _hex_or_none(self.work),
            "signature": _hex_or_none(self.signature),
        }


@dataclass
class SendBlock:
    """A legacy send block."""

    previous: BlockHash
    destination: Public
    balance: int
    work: Work | None = None
    signature: Signature | None = None

    LEN = 152

    @classmethod
    def from_wire(cls, data: bytes) -> SendBlock:
        reader = ByteReader(data)
        previous = BlockHash(reader.slice(BlockHash.LEN))
        destination = Public(reader.slice(Public.LEN))
        balance = int.from_bytes(reader.slice(RAW_LEN), "big")
        work = Work(reader.slice(Work.LEN))
        signature = Signature(reader.slice(Signature.LEN))
        return cls(previous, destination, balance, work, signature)


@dataclass
class ChangeBlock:
    """A legacy change-representative block."""

    previous: BlockHash
    representative: Public
    work: Work | None = None
    signature: Signature | None = None


@dataclass
class ReceiveBlock:
    """A legacy receive block."""

    previous: BlockHash
    source: Public
    work: Work | None = None
    signature: Signature | None = None


@dataclass
class StateBlock:
    """A universal state block."""

    account: Public
    previous: Previous
    representative: Public
    balance: int
    link: Link
    work: Work | None = None
    signature: Signature | None = None
    hash: BlockHash = field(init=False)
    amount: int | None = field(init=False, default=None)

    LEN = 216

    def __post_init__(self) -> None:
        self.hash = _state_hash(
            self.account, self.previous, self.representative, self.balance, self.link
        )

    def set_link_type(self, is_send: bool, amount: int) -> None:
        """Resolve an unsure link once it is known whether the block sends."""
        if self.link.kind is not LinkKind.UNSURE:
            _log.debug("set_link_type likely called twice by mistake.")
            return
        unsure: UnsureLink = self.link.value  # type: ignore[assignment]
        if is_send:
            self.link = Link.destination(Public(unsure.data))
            self.amount = amount
        elif not unsure.is_all_zeros():
            self.link = Link.source(BlockHash(unsure.data))
            self.amount = amount
        else:
            self.link = Link.nothing()

    def verify_self_signature(self) -> None:
        if self.signature is None:
            raise FeelessError("Signature missing")
        self.account.verify(self.hash.data, self.signature)

    @classmethod
    def from_block(cls, block: Block) -> StateBlock:
        return cls(
            block.account, block.previous, block.representative, block.balance, block.link
        )

    @classmethod
    def from_wire(cls, data: bytes) -> StateBlock:
        reader = ByteReader(data)
        account = Public(reader.slice(Public.LEN))
        previous = Previous.from_bytes(reader.slice(BlockHash.LEN))
        representative = Public(reader.slice(Public.LEN))
        balance = int.from_bytes(reader.slice(RAW_LEN), "big")
        # The link's meaning depends on the account's previous balance.
        link = Link(LinkKind.UNSURE, UnsureLink(reader.slice(Link.LEN)))
        signature = Signature(reader.slice(Signature.LEN))
        work = Work(reader.slice(Work.LEN))
        return cls(account, previous, representative, balance, link, work, signature)

    def __str__(self) -> str:
        work = str(self.work) if self.work is not None else "No work"
        signature = str(self.signature) if self.signature is not None else "No signature"
        return (
            f"Block(Account: {self.account}, Previous: {self.previous!r}, "
            f"Balance: {self.balance}, Link: {self.link!r}, Work: {work}, "
            f"Signature: {signature})"
        )


@dataclass
class Block:
    """Any block type, held with the fields of a state block."""

    block_type: BlockType
    account: Public
    previous: Previous
    representative: Public
    balance: int
    link: Link
    state: ValidationState
    signature: Signature | None = None
    work: Work | None = None
    _hash: BlockHash | None = field(init=False, default=None, repr=False)

    def __post_init__(self) -> None:
        self._hash = self._calc_hash()

    @classmethod
    def from_open_block(
        cls, open_block: OpenBlock, previous: Previous, balance: int
    ) -> Block:
        return cls(
            BlockType.OPEN,
            open_block.account,
            previous,
            open_block.representative,
            balance,
            Link.source(open_block.source),
            ValidationState.VALID,
            signature=open_block.signature,
            work=open_block.work,
        )

    @classmethod
    def from_send_block(
        cls, send_block: SendBlock, account: Public, representative: Public
    ) -> Block:
        return cls(
            BlockType.SEND,
            account,
            Previous.block(send_block.previous),
            representative,
            send_block.balance,
            Link.destination(send_block.destination),
            ValidationState.VALID,
            signature=send_block.signature,
            work=send_block.work,
        )

    @classmethod
    def from_state_block(cls, state_block: StateBlock) -> Block:
        return cls(
            BlockType.STATE,
            state_block.account,
            state_block.previous,
            state_block.representative,
            state_block.balance,
            state_block.link,
            ValidationState.VALID,
            signature=state_block.signature,
            work=state_block.work,
        )

    def _calc_hash(self) -> BlockHash:
        kind = self.block_type
        if kind is BlockType.OPEN:
            return hash_block(
                [self.source().data, self.representative.data, self.account.data]
            )
        if kind is BlockType.SEND:
            return hash_block(
                [
                    self.previous.to_bytes(),
                    self.destination().data,
                    _balance_bytes(self.balance),
                ]
            )
        if kind is BlockType.CHANGE:
            return hash_block([self.previous.to_bytes(), self.representative.data])
        if kind is BlockType.RECEIVE:
            return hash_block([self.previous.to_bytes(), self.source().data])
        if kind is BlockType.STATE:
            return _state_hash(
                self.account, self.previous, self.representative, self.balance, self.link
            )
        raise FeelessError("Block not hashable")

    def hash(self) -> BlockHash:
        if self._hash is None:
            raise FeelessError("Block not hashable!")
        return self._hash

    def source(self) -> BlockHash:
        """The sender's block hash, for an open block."""
        if self.block_type is not BlockType.OPEN:
            raise FeelessError(f"Source requested for a {self.block_type.name} block")
        if self.link.kind is not LinkKind.SOURCE:
            raise FeelessError(f"source requested for {self!r} but the link is incorrect")
        return self.link.value  # type: ignore[return-value]

    def destination(self) -> Public:
        """The account being sent to, for a send block."""
        if self.block_type is not BlockType.SEND:
            raise FeelessError(
                f"Destination requested for a {self.block_type.name} block: {self!r}"
            )
        if self.link.kind is not LinkKind.DESTINATION_ACCOUNT:
            raise FeelessError(
                f"destination requested for {self!r} but the link is incorrect"
            )
        return self.link.value  # type: ignore[return-value]

    def is_genesis(self, network) -> bool:
        return network.genesis_hash() == self.hash()

    def verify_signature(self, account: Public) -> None:
        """Raise unless the block's signature was made by ``account``."""
        block_hash = self.hash()
        if self.signature is None:
            raise FeelessError("Signature missing")
        account.verify(block_hash.data, self.signature)

    def sign(self, private: Private) -> None:
        self.signature = private.sign(self.hash().data)

    def to_json(self) -> dict[str, Any]:
        previous: Any = (
            "Open" if self.previous.is_open else {"Block": self.previous.block_hash.as_hex()}
        )
        link = None if self.link.kind is LinkKind.NOTHING else self.link.value.as_hex()
        return {
            "type": self.block_type.label,
            "hash": _hex_or_none(self._hash),
            "account": str(self.account.to_address()),
            "previous": previous,
            "representative": str(self.representative.to_address()),
            "balance": str(self.balance),
            "link": link,
            "signature": _hex_or_none(self.signature),
            "work": _hex_or_none(self.work),
            "state": self.state.value,
        }
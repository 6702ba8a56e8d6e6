"""Nano networks and their genesis data."""

from __future__ import annotations

from enum import Enum

from feeless.blocks import RAW_MAX, Block, OpenBlock
from feeless.errors import FeelessError
from feeless.link import BlockHash, Previous

DEFAULT_PORT = 7075
"""The default TCP port that Nano nodes use."""

_LIVE_GENESIS_BLOCK = {
    "type": "open",
    "source": "E89208DD038FBB269987689621D52292AE9C35941A7484756ECCED92A65093BA",
    "representative": "nano_3t6k35gi95xu6tergt6p69ck76ogmitsa8mnijtpxm9fkcm736xtoncuohr3",
    "account": "nano_3t6k35gi95xu6tergt6p69ck76ogmitsa8mnijtpxm9fkcm736xtoncuohr3",
    "work": "62F05417DD3FB691",
    "signature": (
        "9F0C933C8ADE004D808EA1985FA746A7E95BA2A38F867640F53EC8F180BDFE9E"
        "2C1268DEAD7C2664F356E37ABA362BC58E46DBA03E523A7B5A19E4B6EB12BB02"
    ),
}

_LIVE_GENESIS_HASH = "991CF190094C00F0B68E2E5F75F6BEE95A2E0BD93CEAA4A6734DB9F19B728948"
_LIVE_PEERING_HOST = "peering.nano.org:7075"


class Network(Enum):
    """The network to use: test, beta or live."""

    TEST = 0x41
    BETA = 0x42
    LIVE = 0x43

    @classmethod
    def from_u8(cls, value: int) -> Network:
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Unknown network: {value} ({value:X})") from None

    @classmethod
    def parse(cls, s: str) -> Network:
        """Parse a snake case network name such as ``live``."""
        for network in cls:
            if str(network) == s:
                return network
        raise ValueError(f"Unknown network: {s}")

    def _require_live(self, what: str) -> None:
        if self is not Network.LIVE:
            raise FeelessError(f"The {what} is only known for the live network, not {self}")

    def genesis_block(self) -> Block:
        """The network's first block, holding the maximum balance."""
        self._require_live("genesis block")
        open_block = OpenBlock.from_json(_LIVE_GENESIS_BLOCK)
        return Block.from_open_block(open_block, Previous.open(), RAW_MAX)

    def genesis_hash(self) -> BlockHash:
        self._require_live("genesis hash")
        return BlockHash.from_hex(_LIVE_GENESIS_HASH)

    def peering_host(self) -> str:
        self._require_live("peering host")
        return _LIVE_PEERING_HOST

    def __str__(self) -> str:
        return self.name.lower()
"""Armored signed messages: a message, its signer's address and the signature."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import ClassVar

from feeless.errors import InvalidArmorError
from feeless.keys import Address, Signature


@dataclass(frozen=True)
class Armor:
    """A message signed by the private key behind ``address``."""

    message: str
    address: Address
    signature: Signature

    BEGIN_MESSAGE: ClassVar[str] = "-----BEGIN NANO SIGNED MESSAGE-----"
    BEGIN_ADDRESS: ClassVar[str] = "-----BEGIN NANO ADDRESS-----"
    BEGIN_SIGNATURE: ClassVar[str] = "-----BEGIN NANO SIGNATURE-----"
    END_SIGNATURE: ClassVar[str] = "-----END NANO SIGNATURE-----"

    def verify(self) -> None:
        """Raise unless the signature matches the message and address."""
        self.address.to_public().verify(self.message.encode("utf-8"), self.signature)

    @classmethod
    def parse(cls, s: str) -> Armor:
        """Parse the text produced by ``str(armor)``."""
        lines = iter(s.split("\n"))

        _expect_line(cls.BEGIN_MESSAGE, lines, "begin message")
        message = _next_part(lines, "Missing message")

        _expect_line(cls.BEGIN_ADDRESS, lines, "begin address")
        address = Address.parse(_next_part(lines, "Missing address"))

        _expect_line(cls.BEGIN_SIGNATURE, lines, "begin signature")
        signature = Signature.from_hex(_next_part(lines, "Missing signature"))

        _expect_line(cls.END_SIGNATURE, lines, "end signature")
        return cls(message, address, signature)

    def __str__(self) -> str:
        return "\n".join(
            [
                self.BEGIN_MESSAGE,
                self.message,
                self.BEGIN_ADDRESS,
                str(self.address),
                self.BEGIN_SIGNATURE,
                str(self.signature),
                self.END_SIGNATURE,
            ]
        )


def _expect_line(expected: str, lines: Iterator[str], what: str) -> None:
    got = next(lines, None)
    if got is None:
        raise InvalidArmorError(f"Missing {what}")
    got = got.strip()
    if got != expected:
        raise InvalidArmorError(f"Incorrect {what}: Expecting: {expected} Got: {got}")


def _next_part(lines: Iterator[str], what: str) -> str:
    line = next(lines, None)
    if line is None:
        raise InvalidArmorError(what)
    return line.strip()
"""Exceptions raised by the feeless package."""

from __future__ import annotations


class FeelessError(Exception):
    """Base class for every error raised by this package."""


class InvalidAddressError(FeelessError):
    """The text is not a well-formed Nano address."""

    def __init__(self) -> None:
        super().__init__("Invalid Nano address")


class DecodingError(FeelessError):
    """A character outside the Nano base-32 alphabet was found."""

    def __init__(self, char: str) -> None:
        self.char = char
        super().__init__(f"Unknown character found while decoding: {char}")


class InvalidChecksumError(FeelessError):
    """The checksum part of an address does not match its public key."""

    def __init__(self) -> None:
        super().__init__("Invalid checksum")


class BadPublicKeyError(FeelessError):
    """The public key is not a valid curve point, so nothing can be verified."""

    def __init__(self) -> None:
        super().__init__("Bad public key, can not verify")


class SignatureError(FeelessError):
    """Signing or signature verification failed."""

    def __init__(self, msg: str, source: object = None) -> None:
        self.msg = msg
        self.source = source
        super().__init__("Signature error")


class WrongLengthError(FeelessError):
    """A value had a different length than the one required."""

    def __init__(self, msg: str, expected: int, found: int) -> None:
        self.msg = msg
        self.expected = expected
        self.found = found
        super().__init__(f"Wrong length for {msg} (expected {expected}, found {found})")


class FromHexError(FeelessError):
    """Text could not be decoded as hexadecimal."""

    def __init__(self, msg: str, source: object) -> None:
        self.msg = msg
        self.source = source
        super().__init__(f"From hex error: {msg} {source}")


class InvalidArmorError(FeelessError):
    """An armored signed message is malformed."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Invalid armor content: {detail}")
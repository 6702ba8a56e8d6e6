import pytest

from feeless.errors import (
    BadPublicKeyError,
    DecodingError,
    FeelessError,
    FromHexError,
    InvalidAddressError,
    InvalidArmorError,
    InvalidChecksumError,
    SignatureError,
    WrongLengthError,
)


def test_invalid_address_message():
    assert str(InvalidAddressError()) == "Invalid Nano address"


def test_invalid_checksum_message():
    assert str(InvalidChecksumError()) == "Invalid checksum"


def test_bad_public_key_message():
    assert str(BadPublicKeyError()) == "Bad public key, can not verify"


def test_decoding_error_keeps_character():
    err = DecodingError("!")
    assert err.char == "!"
    assert str(err).endswith("!")
    assert str(err).startswith("Unknown character found while decoding")


def test_wrong_length_fields_and_message():
    err = WrongLengthError("seed", 64, 3)
    assert (err.msg, err.expected, err.found) == ("seed", 64, 3)
    assert str(err) == "Wrong length for seed (expected 64, found 3)"


def test_from_hex_error_includes_msg_and_source():
    err = FromHexError("block hash", "bad digit")
    assert err.msg == "block hash"
    assert "block hash" in str(err)
    assert "bad digit" in str(err)
    assert str(err).startswith("From hex error:")


def test_signature_error_keeps_detail():
    err = SignatureError("Converting to PublicKey", source="cause")
    assert str(err) == "Signature error"
    assert err.msg == "Converting to PublicKey"
    assert err.source == "cause"


def test_invalid_armor_message():
    err = InvalidArmorError("Missing address")
    assert err.detail == "Missing address"
    assert str(err).startswith("Invalid armor content:")
    assert "Missing address" in str(err)


@pytest.mark.parametrize(
    "err",
    [
        InvalidAddressError(),
        InvalidChecksumError(),
        BadPublicKeyError(),
        DecodingError("x"),
        WrongLengthError("a", 1, 2),
        FromHexError("a", "b"),
        SignatureError("a"),
        InvalidArmorError("a"),
    ],
)
def test_all_errors_caught_by_base(err):
    with pytest.raises(FeelessError) as info:
        raise err
    assert info.value is err
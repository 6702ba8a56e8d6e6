import pytest

from feeless.armor import Armor
from feeless.errors import InvalidAddressError, InvalidArmorError, SignatureError
from feeless.keys import Seed


@pytest.fixture(scope="module")
def signed():
    private = Seed.zero().derive(0)
    message = "secret message"
    return Armor(message, private.to_address(), private.sign(message.encode()))


def test_address_of_known_seed(signed):
    assert (
        str(signed.address)
        == "nano_3i1aq1cchnmbn9x5rsbap8b15akfh7wj7pwskuzi7ahz8oq6cobd99d4r3b7"
    )


def test_text_layout(signed):
    lines = str(signed).split("\n")
    assert lines[0] == "-----BEGIN NANO SIGNED MESSAGE-----"
    assert lines[1] == "secret message"
    assert lines[2] == "-----BEGIN NANO ADDRESS-----"
    assert lines[4] == "-----BEGIN NANO SIGNATURE-----"
    assert lines[5] == signed.signature.as_hex()
    assert lines[6] == "-----END NANO SIGNATURE-----"
    assert len(lines) == 7


def test_round_trip(signed):
    parsed = Armor.parse(str(signed))
    assert parsed == signed


def test_verify_parsed(signed):
    parsed = Armor.parse(str(signed))
    parsed.verify()
    assert parsed.message == "secret message"


def test_parse_tolerates_carriage_returns(signed):
    text = str(signed).replace("\n", "\r\n")
    assert Armor.parse(text) == signed


def test_tampered_message_fails(signed):
    tampered = Armor("another message", signed.address, signed.signature)
    with pytest.raises(SignatureError):
        tampered.verify()


def test_wrong_header():
    text = "-----BEGIN SOMETHING-----\nhello"
    with pytest.raises(InvalidArmorError) as info:
        Armor.parse(text)
    assert "begin message" in str(info.value)


def test_missing_message():
    with pytest.raises(InvalidArmorError) as info:
        Armor.parse(Armor.BEGIN_MESSAGE)
    assert "Missing message" in str(info.value)


def test_missing_end(signed):
    text = "\n".join(str(signed).split("\n")[:-1])
    with pytest.raises(InvalidArmorError) as info:
        Armor.parse(text)
    assert "Missing end signature" in str(info.value)


def test_bad_address(signed):
    lines = str(signed).split("\n")
    lines[3] = "nano_invalid"
    with pytest.raises(InvalidAddressError):
        Armor.parse("\n".join(lines))
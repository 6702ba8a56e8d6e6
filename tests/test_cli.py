import io

import pytest

from feeless.armor import Armor
from feeless.cli import main
from feeless.keys import Address, Private, Seed

ZERO = "0" * 64


def run(capsys, argv, stdin=None, monkeypatch=None):
    if stdin is not None:
        monkeypatch.setattr("sys.stdin", io.StringIO(stdin))
    code = main(argv)
    captured = capsys.readouterr()
    return code, captured.out.strip(), captured.err


def test_seed_to_private(capsys):
    code, out, _ = run(capsys, ["seed", "to-private", ZERO])
    assert code == 0
    assert out == "9F0E444C69F77A49BD0BE89DB92C38FE713E0963165CCA12FAF5712D7657120F"


def test_seed_to_public_with_index(capsys):
    code, out, _ = run(capsys, ["seed", "to-public", ZERO, "--index", "987654321"])
    assert code == 0
    assert out == "93F2893AB61DD7D76B0C9AD081B73946014E382EA87699EC15982A9E468F740A"


def test_seed_to_address(capsys):
    code, out, _ = run(capsys, ["seed", "to-address", ZERO])
    assert out == "nano_3i1aq1cchnmbn9x5rsbap8b15akfh7wj7pwskuzi7ahz8oq6cobd99d4r3b7"


def test_seed_to_address_from_stdin(capsys, monkeypatch):
    seed = "1BC5FB0ECB41B07AE3272FE2CB037864382167ECE9ECEFB31237EE555627B891"
    code, out, _ = run(
        capsys, ["seed", "to-address", "-"], stdin=seed + "\n", monkeypatch=monkeypatch
    )
    assert code == 0
    assert out == "nano_1gaki4rjgawxdx7338dsd81f6rebao5qefaonu61jjks6rm1zdrium1f994m"


def test_seed_new_is_parseable(capsys):
    code, out, _ = run(capsys, ["seed", "new"])
    assert code == 0
    assert Seed.from_hex(out).as_hex() == out


def test_bad_seed_is_rejected():
    with pytest.raises(SystemExit):
        main(["seed", "to-private", "XYZ"])


def test_bad_stdin_seed(capsys, monkeypatch):
    code, _, err = run(
        capsys, ["seed", "to-private", "-"], stdin="nope", monkeypatch=monkeypatch
    )
    assert code == 1
    assert "Conversion from string failed" in err


def test_private_to_public(capsys):
    code, out, _ = run(capsys, ["private", "to-public", ZERO])
    assert out == "19D3D919475DEED4696B5D13018151D1AF88B2BD3BCFF048B45031C1F36D1858"


def test_private_to_address_matches_public(capsys):
    _, address, _ = run(capsys, ["private", "to-address", ZERO])
    _, public, _ = run(capsys, ["address", "to-public", address])
    assert public == "19D3D919475DEED4696B5D13018151D1AF88B2BD3BCFF048B45031C1F36D1858"


def test_private_new_round_trip(capsys):
    _, out, _ = run(capsys, ["private", "new"])
    assert Private.from_hex(out).as_hex() == out


def test_public_to_address(capsys):
    public = "C008B814A7D269A1FA3C6528B19201A24D797912DB9996FF02A1FF356E45552B"
    code, out, _ = run(capsys, ["public", "to-address", public])
    assert code == 0
    assert out == "nano_3i1aq1cchnmbn9x5rsbap8b15akfh7wj7pwskuzi7ahz8oq6cobd99d4r3b7"


def test_address_to_public_from_stdin(capsys, monkeypatch):
    address = "nano_36zkj6xde9gqtxois8pii8umkji3brw4xc5pm9p3d83cms5ayx1ciugosdhd"
    code, out, _ = run(
        capsys, ["address", "to-public", "-"], stdin=address, monkeypatch=monkeypatch
    )
    assert out == "93F2893AB61DD7D76B0C9AD081B73946014E382EA87699EC15982A9E468F740A"


def test_bad_address_is_rejected():
    with pytest.raises(SystemExit):
        main(["address", "to-public", "nano_012345678901234567890123456789"])


@pytest.fixture(scope="module")
def signed():
    private = Seed.zero().derive(0)
    signature = private.sign(b"secret message")
    return private, signature


def test_verify_with_address(capsys, signed):
    private, signature = signed
    argv = [
        "verify",
        "--message",
        "secret message",
        "--address",
        str(private.to_address()),
        "--signature",
        str(signature),
    ]
    code, out, _ = run(capsys, argv)
    assert code == 0
    assert out == "OK"


def test_verify_with_public(capsys, signed):
    private, signature = signed
    argv = ["verify", "-m", "secret message", "-p", str(private.to_public()), "-s", str(signature)]
    code, out, _ = run(capsys, argv)
    assert (code, out) == (0, "OK")


def test_verify_wrong_message_fails(capsys, signed):
    private, signature = signed
    argv = ["verify", "-m", "other", "-p", str(private.to_public()), "-s", str(signature)]
    code, out, _ = run(capsys, argv)
    assert code == 1
    assert out == ""


def test_verify_missing_message(capsys, signed):
    _, signature = signed
    code, _, err = run(capsys, ["verify", "-s", str(signature)])
    assert code == 1
    assert "Please specify a message." in err


def test_verify_missing_signature(capsys):
    code, _, err = run(capsys, ["verify", "-m", "hello"])
    assert code == 1
    assert "Please specify a signature." in err


def test_verify_missing_key(capsys, signed):
    _, signature = signed
    code, _, err = run(capsys, ["verify", "-m", "secret message", "-s", str(signature)])
    assert code == 1
    assert "Please specify an address or public key." in err


def test_verify_address_and_public_exclusive(signed):
    private, signature = signed
    with pytest.raises(SystemExit):
        main(
            [
                "verify",
                "-a",
                str(private.to_address()),
                "-p",
                str(private.to_public()),
            ]
        )


def test_verify_armor(capsys, monkeypatch, signed):
    private, signature = signed
    armor = Armor("secret message", Address.from_public(private.to_public()), signature)
    code, out, _ = run(capsys, ["verify", "--armor"], stdin=str(armor), monkeypatch=monkeypatch)
    assert (code, out) == (0, "OK")


def test_verify_bad_armor(capsys, monkeypatch):
    code, _, err = run(capsys, ["verify", "--armor"], stdin="garbage", monkeypatch=monkeypatch)
    assert code == 1
    assert "Invalid armor content" in err


def test_missing_command():
    with pytest.raises(SystemExit):
        main([])
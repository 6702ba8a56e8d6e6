"""Command line tool for Nano seeds, keys, addresses and signatures."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable
from typing import Any

from feeless.armor import Armor
from feeless.errors import FeelessError
from feeless.keys import Address, Private, Public, Seed, Signature

_log = logging.getLogger("feeless")

_LOG_LEVELS = {
    "trace": logging.DEBUG,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


class _Stdin:
    """Marks an argument given as ``-``, to be read from standard input."""


_STDIN = _Stdin()


class _CommandError(Exception):
    pass


def _string_or_stdin(parse: Callable[[str], Any]) -> Callable[[str], Any]:
    def convert(s: str) -> Any:
        if s == "-":
            return _STDIN
        try:
            return parse(s)
        except (FeelessError, ValueError) as exc:
            raise argparse.ArgumentTypeError(f"Could not parse string: {exc}") from None

    return convert


def _resolve(value: Any, parse: Callable[[str], Any]) -> Any:
    if value is _STDIN:
        try:
            return parse(sys.stdin.read().strip())
        except (FeelessError, ValueError) as exc:
            raise _CommandError(f"Conversion from string failed: {exc}") from None
    return value


def _typed(parse: Callable[[str], Any]) -> Callable[[str], Any]:
    def convert(s: str) -> Any:
        try:
            return parse(s)
        except (FeelessError, ValueError) as exc:
            raise argparse.ArgumentTypeError(str(exc)) from None

    return convert


def _handle_seed(args: argparse.Namespace) -> None:
    if args.action == "new":
        print(Seed.random())
        return
    private = _resolve(args.seed, Seed.from_hex).derive(args.index)
    if args.action == "to-private":
        print(private)
    elif args.action == "to-public":
        print(private.to_public())
    else:
        print(private.to_address())


def _handle_private(args: argparse.Namespace) -> None:
    if args.action == "new":
        print(Private.random())
        return
    private = _resolve(args.private, Private.from_hex)
    if args.action == "to-public":
        print(private.to_public())
    else:
        print(private.to_address())


def _handle_public(args: argparse.Namespace) -> None:
    print(_resolve(args.public, Public.from_hex).to_address())


def _handle_address(args: argparse.Namespace) -> None:
    print(_resolve(args.address, Address.parse).to_public())


def _handle_verify(args: argparse.Namespace) -> None:
    if args.armor:
        Armor.parse(sys.stdin.read()).verify()
    else:
        if args.message is None:
            raise _CommandError("Please specify a message.")
        if args.signature is None:
            raise _CommandError("Please specify a signature.")
        if args.address is not None:
            public = args.address.to_public()
        elif args.public is not None:
            public = args.public
        else:
            raise _CommandError("Please specify an address or public key.")
        public.verify(args.message.encode("utf-8"), args.signature)
    print("OK")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="feeless", description="A set of tools for the Nano cryptocurrency."
    )
    parser.add_argument(
        "--no-color", action="store_true", help="Don't use ANSI color codes when logging."
    )
    parser.add_argument(
        "-l",
        "--log-level",
        choices=sorted(_LOG_LEVELS),
        help="Maximum level of logging to be displayed.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    seed = commands.add_parser("seed", help="64 bit seed generation and conversion.")
    seed_actions = seed.add_subparsers(dest="action", required=True)
    seed_actions.add_parser("new")
    for name in ("to-private", "to-public", "to-address"):
        sub = seed_actions.add_parser(name)
        sub.add_argument("seed", type=_string_or_stdin(Seed.from_hex))
        sub.add_argument("-i", "--index", type=int, default=0)
    seed.set_defaults(handler=_handle_seed)

    private = commands.add_parser("private", help="Private key generation and conversion.")
    private_actions = private.add_subparsers(dest="action", required=True)
    private_actions.add_parser("new")
    for name in ("to-public", "to-address"):
        sub = private_actions.add_parser(name)
        sub.add_argument("private", type=_string_or_stdin(Private.from_hex))
    private.set_defaults(handler=_handle_private)

    public = commands.add_parser("public", help="Public key conversion.")
    public_actions = public.add_subparsers(dest="action", required=True)
    sub = public_actions.add_parser("to-address")
    sub.add_argument("public", type=_string_or_stdin(Public.from_hex))
    public.set_defaults(handler=_handle_public)

    address = commands.add_parser("address", help="Address conversion.")
    address_actions = address.add_subparsers(dest="action", required=True)
    sub = address_actions.add_parser("to-public")
    sub.add_argument("address", type=_string_or_stdin(Address.parse))
    address.set_defaults(handler=_handle_address)

    verify = commands.add_parser("verify", help="Verify Nano signed messages.")
    key_group = verify.add_mutually_exclusive_group()
    key_group.add_argument("-a", "--address", type=_typed(Address.parse))
    key_group.add_argument("-p", "--public", type=_typed(Public.from_hex))
    verify.add_argument("-s", "--signature", type=_typed(Signature.from_hex))
    verify.add_argument("-m", "--message")
    verify.add_argument("--armor", action="store_true")
    verify.set_defaults(handler=_handle_verify)

    return parser


def _configure_logging(level_name: str | None) -> None:
    level = _LOG_LEVELS[level_name] if level_name else logging.INFO
    _log.setLevel(level)
    if not _log.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        _log.addHandler(handler)


def main(argv: list[str] | None = None) -> int:
    """Run the command line tool; returns the process exit status."""
    args = _build_parser().parse_args(argv)
    _configure_logging(args.log_level)
    try:
        args.handler(args)
    except (_CommandError, FeelessError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
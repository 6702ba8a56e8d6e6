"""Nano cryptocurrency keys, addresses, signatures, blocks and a command line tool."""

__version__ = "0.1.0"

__all__ = [
    "armor",
    "blocks",
    "cli",
    "ed25519",
    "encoding",
    "errors",
    "keys",
    "link",
    "network",
    "reader",
]
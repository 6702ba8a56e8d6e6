# feeless

Tools for the Nano cryptocurrency in pure Python, with no third-party
dependencies.

- `feeless.keys`: `Seed`, `Private`, `Public`, `Signature` and `Address`, with
  conversion between them. A seed derives private keys by index. Keys convert
  to `nano_` addresses.
- `feeless.ed25519`: Ed25519 signing and verification, with BLAKE2b-512 as the
  hash.
- `feeless.armor`: `Armor`, a signed message that holds the message, the
  signer's address and the signature in a text block.
- `feeless.link`: `BlockHash`, `Link`, `UnsureLink`, `Previous` and `Subtype`.
- `feeless.blocks`: `OpenBlock`, `SendBlock`, `ChangeBlock`, `ReceiveBlock`,
  `StateBlock` and the general `Block`, with block hashing, signing and
  signature checks. `SendBlock.from_wire` and `StateBlock.from_wire` read the
  binary block layouts.
- `feeless.network`: `Network` (`TEST`, `BETA`, `LIVE`) and the live network's
  genesis block, genesis hash and peering host.
- `feeless.encoding`: hex, BLAKE2b and Nano base-32 helpers.
- `feeless.reader`: `ByteReader`, which reads a byte buffer front to back.
- `feeless.errors`: every error is a subclass of `FeelessError`, for example
  `InvalidAddressError`, `InvalidChecksumError`, `BadPublicKeyError`,
  `SignatureError`, `WrongLengthError`, `FromHexError` and
  `InvalidArmorError`.

## Installation

```
pip install .
```

## Library use

```python
from feeless.keys import Address, Seed

seed = Seed.zero()
private = seed.derive(0)
public = private.to_public()
address = public.to_address()
print(address)   # nano_3i1aq1cchnmbn9x5rsbap8b15akfh7wj7pwskuzi7ahz8oq6cobd99d4r3b7

signature = private.sign(b"hello")
public.verify(b"hello", signature)       # raises SignatureError on a bad signature

assert Address.parse(str(address)).to_public() == public
```

Armored messages:

```python
from feeless.armor import Armor

armor = Armor("hello", address, private.sign(b"hello"))
text = str(armor)
Armor.parse(text).verify()
```

Hashing a block:

```python
from feeless.network import Network

genesis = Network.LIVE.genesis_block()
assert genesis.hash() == Network.LIVE.genesis_hash()
```

Only the live network has genesis data and a peering host. Asking for them on
`TEST` or `BETA` raises `FeelessError`.

## Command line

The `feeless` command converts between keys and checks signed messages.
A positional value given as `-` is read from standard input.

```
feeless seed new
feeless seed to-private <SEED> --index 0
feeless seed to-public <SEED> --index 0
feeless seed to-address <SEED> --index 0
feeless private new
feeless private to-public <PRIVATE>
feeless private to-address <PRIVATE>
feeless public to-address <PUBLIC>
feeless address to-public <ADDRESS>
feeless verify --message "text" --address <ADDRESS> --signature <SIGNATURE>
feeless verify --message "text" --public <PUBLIC> --signature <SIGNATURE>
feeless verify --armor < signed.txt
```

`verify` prints `OK` when the signature is valid. On any error the command
prints `Error: ...` to standard error and exits with status 1.

The global option `-l`/`--log-level` takes `trace`, `debug`, `info`, `warn` or
`error`. `--no-color` is accepted, but logging output has no colors anyway.

## What this package does not do

- No wallet files: keys are not stored anywhere. The command line has no
  command to sign a message. Messages are signed with `Private.sign` in the
  library.
- No mnemonic word phrases. Only seeds and private keys are supported.
- No conversion between amount units. Balances are plain integers in raw.
- No proof-of-work generation or checking. `Work` only holds the bytes.
- No vanity address search, no node, no network connections, no RPC client
  and no packet capture analysis.

## Tests

```
pip install .[test]
pytest
```
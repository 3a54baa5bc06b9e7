# quip-protocol

Building blocks for the Quip protocol, in pure Python:

- `quip_protocol.blake3`: BLAKE3 hashing (default, unkeyed mode) with
  extendable output
- `quip_protocol.chacha`: a deterministic ChaCha8 random number generator
- `quip_protocol.txcrypto`: account-id derivation and signature envelopes
  for hybrid transaction signers
- `quip_protocol.chain_spec`: chain specifications for the known networks
- `quip_protocol.command`: the `quip-node` command line, which writes chain
  specifications as JSON

There are no runtime dependencies beyond the standard library. Python 3.10
or later is required.

## Installation

```
pip install quip-protocol
```

To run the test suite:

```
pip install "quip-protocol[test]"
pytest
```

## BLAKE3

```python
from quip_protocol.blake3 import Blake3, blake3_digest

hasher = Blake3(b"hello ")
hasher.update(b"world")
hasher.digest()        # 32 bytes
hasher.hexdigest(64)   # 64 bytes of extended output, as hex

blake3_digest(b"hello world", 8)
```

`digest` may be called any number of times and more input may be fed
afterwards. A negative length raises `ValueError`.

## ChaCha8

```python
from quip_protocol.chacha import ChaCha8Rng

rng = ChaCha8Rng.seed_from_u64(42)
rng.next_u32()
rng.next_u64()   # two 32-bit words, low word first

ChaCha8Rng.from_seed(bytes(32))
```

`from_seed` takes the 32-byte key directly and raises `ValueError` for any
other length. `seed_from_u64` expands a 64-bit integer into a key with PCG32
and raises `ValueError` for values outside the unsigned 64-bit range. The
block counter and stream id both start at zero, so the same seed always
gives the same sequence.

## Transaction identity

An account id is `blake2_256(ACCOUNT_ID_DOMAIN || public_key_bytes)` with
`ACCOUNT_ID_DOMAIN = b"quip-account-v1"`.

```python
from quip_protocol.txcrypto import (
    HybridTxPublic,
    HybridTxSignature,
    account_id_from_public,
)

public_key = bytes(64)          # raw public key bytes
account = account_id_from_public(public_key)
HybridTxPublic(public_key).into_account() == account   # True

envelope = HybridTxSignature(public_key, b"\x01" * 96)
envelope.derived_account_id() == account                # True

wire = envelope.encode()        # public key bytes, then signature bytes
HybridTxSignature.decode(wire, 64, 96) == envelope      # True
```

`decode` raises `DecodeError` (a `ValueError`) when the data is shorter or
longer than the two given lengths together.

`HybridTxSignature.verify(message, signer, verifier)` returns `False` at
once if the embedded public key does not derive `signer`. Otherwise it calls
`verifier(signature, message, public)` and returns its result. `message` may
be bytes or a zero-argument callable that returns bytes; the callable is only
called after the account check has passed.

The package does not create keys or signatures itself: the hybrid signature
scheme is supplied by the caller through `verifier`.

## Chain specifications

```python
from quip_protocol.chain_spec import (
    ChainSpec,
    ChainType,
    development_chain_spec,
    local_chain_spec,
    local_three_validator_chain_spec,
)

spec = local_chain_spec()
spec.name          # "Local Testnet"
spec.chain_type    # ChainType.LOCAL
print(spec.to_json())

ChainSpec.from_json_file("my-chain.json")
```

`from_json_file` reads `name`, `id`, `chainType`, `bootNodes`, `properties`
and the genesis preset under `genesis.runtimeGenesis.preset`, and raises
`ValueError` when the file cannot be opened or parsed.

`quip_protocol.command.load_spec` picks a specification by id: `dev`,
`local` (also the empty id), and `local3` / `local-3` /
`local_three_validator`. Any other value is read as a path to a JSON chain
specification file.

## Command line

```
quip-node --help
quip-node export-chain-spec --chain dev
quip-node export-chain-spec --chain local3 -o local3.json
quip-node build-spec --chain local
```

`export-chain-spec` writes the chosen specification as JSON to standard
output, or to the file given with `-o` / `--output`; `--chain` defaults to
`local`. `build-spec` is deprecated: it prints a warning to standard error
and then writes the specification to standard output; its `--chain`
defaults to the empty id, which selects the local testnet. On an error the
command prints `Error: ...` to standard error and exits with status 1.

## What this package does not do

`quip-node` only produces chain specifications. It does not run a node: it
does not author or import blocks, take part in consensus, connect to peers,
serve RPC, keep a transaction pool or store a chain database. The other
subcommands a node would offer (key management, block import and export,
state export, chain purge and revert, benchmarking) are not provided.
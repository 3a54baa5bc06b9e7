"""BLAKE3 and ChaCha8 primitives, hybrid transaction identity helpers and chain-spec tools for Quip."""

__version__ = "0.1.0"
"""ChaCha random number generator with eight rounds, seeded like ``rand_core``."""

from __future__ import annotations

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF
_CONSTANTS = (0x61707865, 0x3320646E, 0x79622D32, 0x6B206574)
_DOUBLE_ROUNDS = 4
_SEED_LEN = 32

_PCG_MUL = 6364136223846793005
_PCG_INC = 11634580456548626227


def _rotl(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (32 - shift))) & _MASK32


def _quarter_round(state: list[int], a: int, b: int, c: int, d: int) -> None:
    state[a] = (state[a] + state[b]) & _MASK32
    state[d] = _rotl(state[d] ^ state[a], 16)
    state[c] = (state[c] + state[d]) & _MASK32
    state[b] = _rotl(state[b] ^ state[c], 12)
    state[a] = (state[a] + state[b]) & _MASK32
    state[d] = _rotl(state[d] ^ state[a], 8)
    state[c] = (state[c] + state[d]) & _MASK32
    state[b] = _rotl(state[b] ^ state[c], 7)


def _pcg32(state: int) -> tuple[int, bytes]:
    state = (state * _PCG_MUL + _PCG_INC) & _MASK64
    xorshifted = (((state >> 18) ^ state) >> 27) & _MASK32
    rot = state >> 59
    value = ((xorshifted >> rot) | (xorshifted << ((32 - rot) % 32))) & _MASK32
    return state, value.to_bytes(4, "little")


class ChaCha8Rng:
    """Deterministic generator producing the ChaCha8 keystream as 32-bit words.

    The seed is the 256-bit key; the block counter starts at zero and the
    stream id is zero.
    """

    def __init__(self, seed: bytes | bytearray) -> None:
        seed = bytes(seed)
        if len(seed) != _SEED_LEN:
            raise ValueError(f"seed must be {_SEED_LEN} bytes, got {len(seed)}")
        self._key = [int.from_bytes(seed[i : i + 4], "little") for i in range(0, 32, 4)]
        self._counter = 0
        self._buffer: list[int] = []
        self._index = 0

    @classmethod
    def from_seed(cls, seed: bytes | bytearray) -> ChaCha8Rng:
        """Create a generator keyed directly with a 32-byte seed."""
        return cls(seed)

    @classmethod
    def seed_from_u64(cls, state: int) -> ChaCha8Rng:
        """Create a generator from a 64-bit integer, expanded to a seed with PCG32."""
        if not 0 <= state <= _MASK64:
            raise ValueError("state must fit in an unsigned 64-bit integer")
        seed = bytearray()
        for _ in range(_SEED_LEN // 4):
            state, chunk = _pcg32(state)
            seed += chunk
        return cls(seed)

    def _refill(self) -> None:
        initial = [
            *_CONSTANTS,
            *self._key,
            self._counter & _MASK32,
            (self._counter >> 32) & _MASK32,
            0,
            0,
        ]
        state = list(initial)
        for _ in range(_DOUBLE_ROUNDS):
            _quarter_round(state, 0, 4, 8, 12)
            _quarter_round(state, 1, 5, 9, 13)
            _quarter_round(state, 2, 6, 10, 14)
            _quarter_round(state, 3, 7, 11, 15)
            _quarter_round(state, 0, 5, 10, 15)
            _quarter_round(state, 1, 6, 11, 12)
            _quarter_round(state, 2, 7, 8, 13)
            _quarter_round(state, 3, 4, 9, 14)
        self._buffer = [(word + start) & _MASK32 for word, start in zip(state, initial)]
        self._index = 0
        self._counter = (self._counter + 1) & _MASK64

    def next_u32(self) -> int:
        """Return the next 32-bit word of the keystream."""
        if self._index >= len(self._buffer):
            self._refill()
        word = self._buffer[self._index]
        self._index += 1
        return word

    def next_u64(self) -> int:
        """Return the next two words as a 64-bit integer, low word first."""
        low = self.next_u32()
        high = self.next_u32()
        return (high << 32) | low
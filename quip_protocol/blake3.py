"""BLAKE3 hashing in its default (unkeyed) mode, with extendable output."""

from __future__ import annotations

import struct

_IV = (
    0x6A09E667,
    0xBB67AE85,
    0x3C6EF372,
    0xA54FF53A,
    0x510E527F,
    0x9B05688C,
    0x1F83D9AB,
    0x5BE0CD19,
)
_MSG_PERMUTATION = (2, 6, 3, 10, 7, 0, 4, 13, 1, 11, 12, 5, 9, 14, 15, 8)
_MASK32 = 0xFFFFFFFF

_BLOCK_LEN = 64
_CHUNK_LEN = 1024
_OUT_LEN = 32

_CHUNK_START = 1 << 0
_CHUNK_END = 1 << 1
_PARENT = 1 << 2
_ROOT = 1 << 3

_BLOCK_WORDS = struct.Struct("<16I")


def _rotr(value: int, shift: int) -> int:
    return ((value >> shift) | (value << (32 - shift))) & _MASK32


def _g(state: list[int], a: int, b: int, c: int, d: int, mx: int, my: int) -> None:
    state[a] = (state[a] + state[b] + mx) & _MASK32
    state[d] = _rotr(state[d] ^ state[a], 16)
    state[c] = (state[c] + state[d]) & _MASK32
    state[b] = _rotr(state[b] ^ state[c], 12)
    state[a] = (state[a] + state[b] + my) & _MASK32
    state[d] = _rotr(state[d] ^ state[a], 8)
    state[c] = (state[c] + state[d]) & _MASK32
    state[b] = _rotr(state[b] ^ state[c], 7)


def _round(state: list[int], m: list[int]) -> None:
    _g(state, 0, 4, 8, 12, m[0], m[1])
    _g(state, 1, 5, 9, 13, m[2], m[3])
    _g(state, 2, 6, 10, 14, m[4], m[5])
    _g(state, 3, 7, 11, 15, m[6], m[7])
    _g(state, 0, 5, 10, 15, m[8], m[9])
    _g(state, 1, 6, 11, 12, m[10], m[11])
    _g(state, 2, 7, 8, 13, m[12], m[13])
    _g(state, 3, 4, 9, 14, m[14], m[15])


def _compress(
    chaining_value: tuple[int, ...] | list[int],
    block_words: tuple[int, ...] | list[int],
    counter: int,
    block_len: int,
    flags: int,
) -> list[int]:
    state = [
        *chaining_value[:8],
        *_IV[:4],
        counter & _MASK32,
        (counter >> 32) & _MASK32,
        block_len,
        flags,
    ]
    block = list(block_words)
    for round_index in range(7):
        _round(state, block)
        if round_index < 6:
            block = [block[i] for i in _MSG_PERMUTATION]
    for i in range(8):
        state[i] ^= state[i + 8]
        state[i + 8] ^= chaining_value[i]
    return state


def _words_from_block(block: bytes) -> tuple[int, ...]:
    return _BLOCK_WORDS.unpack(block.ljust(_BLOCK_LEN, b"\0"))


class _Output:
    __slots__ = ("input_cv", "block_words", "counter", "block_len", "flags")

    def __init__(
        self,
        input_cv: tuple[int, ...] | list[int],
        block_words: tuple[int, ...] | list[int],
        counter: int,
        block_len: int,
        flags: int,
    ) -> None:
        self.input_cv = tuple(input_cv)
        self.block_words = tuple(block_words)
        self.counter = counter
        self.block_len = block_len
        self.flags = flags

    def chaining_value(self) -> tuple[int, ...]:
        words = _compress(
            self.input_cv, self.block_words, self.counter, self.block_len, self.flags
        )
        return tuple(words[:8])

    def root_output_bytes(self, length: int) -> bytes:
        out = bytearray()
        block_counter = 0
        while len(out) < length:
            words = _compress(
                self.input_cv,
                self.block_words,
                block_counter,
                self.block_len,
                self.flags | _ROOT,
            )
            out += _BLOCK_WORDS.pack(*words)
            block_counter += 1
        return bytes(out[:length])


def _parent_output(
    left: tuple[int, ...], right: tuple[int, ...], key: tuple[int, ...], flags: int
) -> _Output:
    return _Output(key, left + right, 0, _BLOCK_LEN, _PARENT | flags)


class _ChunkState:
    __slots__ = ("chaining_value", "chunk_counter", "block", "blocks_compressed", "flags")

    def __init__(self, key: tuple[int, ...], chunk_counter: int, flags: int) -> None:
        self.chaining_value = tuple(key)
        self.chunk_counter = chunk_counter
        self.block = bytearray()
        self.blocks_compressed = 0
        self.flags = flags

    def __len__(self) -> int:
        return _BLOCK_LEN * self.blocks_compressed + len(self.block)

    def _start_flag(self) -> int:
        return _CHUNK_START if self.blocks_compressed == 0 else 0

    def update(self, data: memoryview) -> None:
        while data:
            if len(self.block) == _BLOCK_LEN:
                words = _compress(
                    self.chaining_value,
                    _words_from_block(bytes(self.block)),
                    self.chunk_counter,
                    _BLOCK_LEN,
                    self.flags | self._start_flag(),
                )
                self.chaining_value = tuple(words[:8])
                self.blocks_compressed += 1
                self.block = bytearray()
            take = min(_BLOCK_LEN - len(self.block), len(data))
            self.block += data[:take]
            data = data[take:]

    def output(self) -> _Output:
        return _Output(
            self.chaining_value,
            _words_from_block(bytes(self.block)),
            self.chunk_counter,
            len(self.block),
            self.flags | self._start_flag() | _CHUNK_END,
        )


class Blake3:
    """Incremental BLAKE3 hasher; ``digest`` may be called any number of times."""

    def __init__(self, data: bytes | bytearray | memoryview = b"") -> None:
        self._key = _IV
        self._flags = 0
        self._chunk_state = _ChunkState(self._key, 0, self._flags)
        self._cv_stack: list[tuple[int, ...]] = []
        if data:
            self.update(data)

    def _add_chunk_chaining_value(self, new_cv: tuple[int, ...], total_chunks: int) -> None:
        while total_chunks & 1 == 0:
            new_cv = _parent_output(
                self._cv_stack.pop(), new_cv, self._key, self._flags
            ).chaining_value()
            total_chunks >>= 1
        self._cv_stack.append(new_cv)

    def update(self, data: bytes | bytearray | memoryview) -> None:
        """Feed more input into the hash."""
        view = memoryview(bytes(data))
        while view:
            if len(self._chunk_state) == _CHUNK_LEN:
                chunk_cv = self._chunk_state.output().chaining_value()
                total_chunks = self._chunk_state.chunk_counter + 1
                self._add_chunk_chaining_value(chunk_cv, total_chunks)
                self._chunk_state = _ChunkState(self._key, total_chunks, self._flags)
            take = min(_CHUNK_LEN - len(self._chunk_state), len(view))
            self._chunk_state.update(view[:take])
            view = view[take:]

    def digest(self, length: int = _OUT_LEN) -> bytes:
        """Return ``length`` bytes of output for the input seen so far."""
        if length < 0:
            raise ValueError("digest length must not be negative")
        output = self._chunk_state.output()
        for left in reversed(self._cv_stack):
            output = _parent_output(left, output.chaining_value(), self._key, self._flags)
        return output.root_output_bytes(length)

    def hexdigest(self, length: int = _OUT_LEN) -> str:
        """Return the digest as lower-case hexadecimal."""
        return self.digest(length).hex()


def blake3_digest(data: bytes | bytearray | memoryview, length: int = _OUT_LEN) -> bytes:
    """Hash ``data`` in one call and return ``length`` bytes."""
    return Blake3(data).digest(length)
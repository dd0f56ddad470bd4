import hashlib
import struct
import sys
from abc import ABC, abstractmethod


# Width of a native pointer, in bytes
USIZE_BYTES = struct.calcsize('P')


class Hasher(ABC):
    """
    A hash accumulator. Values are fed in with `write`/`write_usize` and the
    final hash is read with `finish`.
    """

    @abstractmethod
    def write(self, data: bytes):
        pass

    @abstractmethod
    def finish(self) -> int:
        pass

    def write_usize(self, n: int):
        # id() is non-negative, but keep within the native width regardless
        self.write((n & ((1 << (8 * USIZE_BYTES)) - 1)).to_bytes(USIZE_BYTES, sys.byteorder))


class DefaultHasher(Hasher):
    __slots__ = ('_buffer',)

    def __init__(self):
        self._buffer = bytearray()

    def write(self, data: bytes):
        self._buffer += data

    def finish(self) -> int:
        return hash(bytes(self._buffer))

    def __repr__(self) -> str:
        return f"DefaultHasher({bytes(self._buffer)!r})"


class HashlibHasher(Hasher):
    """Adapts a `hashlib` digest object to the `Hasher` interface."""

    __slots__ = ('_digest',)

    def __init__(self, algorithm: str = 'blake2b'):
        self._digest = hashlib.new(algorithm)

    def write(self, data: bytes):
        self._digest.update(data)

    def finish(self) -> int:
        return int.from_bytes(self._digest.digest()[:8], 'little')

    def hexdigest(self) -> str:
        return self._digest.hexdigest()

    def __repr__(self) -> str:
        return f"HashlibHasher({self._digest.name!r})"

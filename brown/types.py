"""Identifiers, name hashing and the component signature bitset."""

from __future__ import annotations

import enum

MAX_ENTITIES = 5000
MAX_COMPONENTS = 32

_FNV_OFFSET = 2166136261
_FNV_PRIME = 16777619
_WORD_BITS = 32
_WORD = (1 << _WORD_BITS) - 1


def fnv1a_32(text: str | bytes) -> int:
    """Return the 32-bit FNV-1a hash of ``text`` (bytes treated as signed chars)."""
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    value = _FNV_OFFSET
    for byte in data:
        if byte >= 0x80:
            byte = (byte - 0x100) & _WORD
        value = ((value ^ byte) * _FNV_PRIME) & _WORD
    return value


WINDOW_QUIT = fnv1a_32("Events::Window::QUIT")
WINDOW_INPUT = fnv1a_32("Events::Window::INPUT")
WINDOW_INPUT_PARAM = fnv1a_32("Events::Window::Input::INPUT")


class InputButton(enum.Enum):
    """Buttons the game reacts to."""

    W = 0
    A = 1
    S = 2
    D = 3
    H = 4
    J = 5
    K = 6
    U = 7


class Signature:
    """A fixed-size bitset backed by a 32-bit word."""

    __slots__ = ("_bits", "_size")

    def __init__(self, bits: int = 0, size: int = MAX_COMPONENTS) -> None:
        if not 0 < size <= _WORD_BITS:
            raise ValueError(f"signature size must be between 1 and {_WORD_BITS}")
        self._bits = bits & _WORD
        self._size = size

    @property
    def bits(self) -> int:
        return self._bits

    @property
    def size(self) -> int:
        return self._size

    def _mask(self, index: int) -> int:
        if not 0 <= index < self._size:
            raise IndexError(f"bit index {index} out of range")
        return 1 << index

    def get(self, index: int) -> bool:
        return bool(self._bits & self._mask(index))

    def __getitem__(self, index: int) -> bool:
        return self.get(index)

    def set(self, index: int, value: bool = True) -> None:
        mask = self._mask(index)
        if value:
            self._bits |= mask
        else:
            self._bits &= ~mask & _WORD

    def clear(self, index: int) -> None:
        self._bits &= ~self._mask(index) & _WORD

    def reset(self) -> None:
        self._bits = 0

    def flip(self, index: int) -> None:
        self._bits ^= self._mask(index)

    def copy(self) -> Signature:
        return Signature(self._bits, self._size)

    def __or__(self, other: object) -> Signature:
        if not isinstance(other, Signature):
            return NotImplemented
        return Signature(self._bits | other._bits, self._size)

    def __and__(self, other: object) -> Signature:
        if not isinstance(other, Signature):
            return NotImplemented
        return Signature(self._bits & other._bits, self._size)

    def __xor__(self, other: object) -> Signature:
        if not isinstance(other, Signature):
            return NotImplemented
        return Signature(self._bits ^ other._bits, self._size)

    def __invert__(self) -> Signature:
        return Signature(~self._bits & _WORD, self._size)

    def __ior__(self, other: Signature) -> Signature:
        self._bits |= other._bits
        return self

    def __iand__(self, other: Signature) -> Signature:
        self._bits &= other._bits
        return self

    def __ixor__(self, other: Signature) -> Signature:
        self._bits ^= other._bits
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Signature):
            return NotImplemented
        return self._bits == other._bits

    __hash__ = None  # type: ignore[assignment]

    def __int__(self) -> int:
        return self._bits

    def to_string(self) -> str:
        """Bits from index 0 upwards as '0' and '1' characters."""
        return "".join("1" if self._bits >> i & 1 else "0" for i in range(self._size))

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Signature({self._bits:#x}, size={self._size})"
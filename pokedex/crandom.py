"""A pseudo-random generator reproducing the classic C library rand()."""

from __future__ import annotations

from collections import deque

__all__ = ["CRandom"]

_MASK32 = 0xFFFFFFFF
_STATE_SIZE = 34
_DISCARD = 310


def _to_int32(value: int) -> int:
    value &= _MASK32
    return value - (1 << 32) if value & 0x80000000 else value


def _c_divmod(a: int, b: int) -> tuple[int, int]:
    """Division truncating toward zero, as C does."""
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return q, a - q * b


class CRandom:
    """Additive-feedback generator matching srand()/rand() sequences.

    Numbers are in the range 0 to 2**31 - 1. A fresh generator behaves as
    if seeded with 1.
    """

    RAND_MAX = 0x7FFFFFFF

    def __init__(self, seed: int = 1) -> None:
        self._state: deque[int] = deque(maxlen=_STATE_SIZE)
        self.seed(seed)

    def seed(self, seed: int) -> None:
        """Restart the sequence from the given seed."""
        seed &= _MASK32
        if seed == 0:
            seed = 1
        word = _to_int32(seed)
        values = [word]
        for _ in range(1, 31):
            hi, lo = _c_divmod(word, 127773)
            word = 16807 * lo - 2836 * hi
            if word < 0:
                word += 2147483647
            values.append(word)
        values.extend(values[:3])
        self._state.clear()
        self._state.extend(v & _MASK32 for v in values)
        for _ in range(_DISCARD):
            self._step()

    def _step(self) -> int:
        value = (self._state[-31] + self._state[-3]) & _MASK32
        self._state.append(value)
        return value

    def rand(self) -> int:
        """Return the next number of the sequence."""
        return self._step() >> 1
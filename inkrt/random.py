"""Linear congruential pseudo random number generator."""

from __future__ import annotations

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


class Prng:
    """Deterministic LCG so that seeded stories replay identically."""

    C = 12345
    A = 1103515245
    M = 1 << 31

    def __init__(self) -> None:
        self._x = 1337

    def srand(self, seed: int) -> None:
        """Reset the generator state to ``seed``."""
        self._x = seed & _MASK32

    def rand(self, maximum: int | None = None) -> int:
        """Return the next raw value, or a value in ``[0, maximum)`` if given."""
        self._x = ((self.A * self._x + self.C) & _MASK32) % self.M
        if maximum is None:
            return self._x
        prod = (self._x * (maximum & _MASK64)) & _MASK64
        result = (prod // self.M) & _MASK32
        return result - (1 << 32) if result >= (1 << 31) else result
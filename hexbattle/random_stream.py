"""Seeded linear congruential random stream."""

from __future__ import annotations

import struct

_MASK32 = 0xFFFFFFFF
_MULTIPLIER = 196314165
_INCREMENT = 907633515


def _float32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


class RandomStream:
    """Deterministic random numbers reproducible from a seed."""

    def __init__(self, seed: int) -> None:
        self.initial_seed = seed
        self.seed = seed & _MASK32

    def reset(self) -> None:
        """Return to the state right after construction."""
        self.seed = self.initial_seed & _MASK32

    def _mutate(self) -> None:
        self.seed = (self.seed * _MULTIPLIER + _INCREMENT) & _MASK32

    def fraction(self) -> float:
        """A number in [0, 1) with 23 bits of precision."""
        self._mutate()
        return (self.seed >> 9) / float(1 << 23)

    def _helper(self, count: int) -> int:
        if count <= 0:
            return 0
        return min(int(_float32(self.fraction() * float(count))), count - 1)

    def rand_range(self, low: int, high: int) -> int:
        """An integer in [low, high]; ``low`` when the range is empty."""
        return low + self._helper(high - low + 1)
"""Axial hexagon grid coordinates."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class HexCoord:
    """A tile position on an axial (q, r) hexagon grid."""

    q: int = 0
    r: int = 0

    @property
    def s(self) -> int:
        """The implicit third cube coordinate."""
        return -self.q - self.r

    def distance_to(self, other: HexCoord) -> int:
        """Number of hex steps between this tile and ``other``."""
        return max(
            abs(self.q - other.q),
            abs(self.r - other.r),
            abs(self.s - other.s),
        )

    def step_to(self, target: HexCoord) -> HexCoord:
        """One step toward ``target``, clamping each axis to at most one."""
        dq = max(-1, min(1, target.q - self.q))
        dr = max(-1, min(1, target.r - self.r))
        return HexCoord(self.q + dq, self.r + dr)

    def neighbors(self) -> tuple[HexCoord, ...]:
        """The six adjacent tiles, in the order of ``HEX_DIRECTIONS``."""
        return tuple(HexCoord(self.q + d.q, self.r + d.r) for d in HEX_DIRECTIONS)


HEX_DIRECTIONS: tuple[HexCoord, ...] = (
    HexCoord(1, 0),
    HexCoord(1, -1),
    HexCoord(0, -1),
    HexCoord(-1, 0),
    HexCoord(-1, 1),
    HexCoord(0, 1),
)


def hex_range(radius: int) -> list[HexCoord]:
    """All tiles within ``radius`` of the origin, ordered by q then r."""
    return [
        HexCoord(q, r)
        for q in range(-radius, radius + 1)
        for r in range(max(-radius, -q - radius), min(radius, -q + radius) + 1)
    ]
"""Simulated battle units."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from .hexcoord import HexCoord


class Team(enum.Enum):
    """Side a unit fights on."""

    RED = "red"
    BLUE = "blue"


@dataclass(slots=True)
class SimUnit:
    """A unit's state inside the battle simulation."""

    id: int
    team: Team
    hp: int
    grid_pos: HexCoord = field(default_factory=HexCoord)
    max_hp: int | None = None
    target_pos: HexCoord = field(default_factory=HexCoord)
    attacker_pos: HexCoord = field(default_factory=HexCoord)
    attack_cooldown: int = 0
    is_alive: bool = True

    def __post_init__(self) -> None:
        if self.max_hp is None:
            self.max_hp = self.hp

    def tick(self) -> None:
        """Advance the unit by one step, cooling its attack down."""
        if not self.is_alive:
            return
        if self.attack_cooldown > 0:
            self.attack_cooldown -= 1

    def is_in_range(self, other_pos: HexCoord, attack_range: int) -> bool:
        """Whether ``other_pos`` lies within ``attack_range`` tiles."""
        return self.grid_pos.distance_to(other_pos) <= attack_range
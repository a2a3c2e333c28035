"""Actions recorded by the simulation for playback."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from .hexcoord import HexCoord


class ActionType(enum.Enum):
    """What a unit does in an action."""

    MOVE = "move"
    ATTACK = "attack"
    HIT = "hit"
    DIE = "die"


@dataclass(frozen=True, slots=True)
class Action:
    """A single unit action; actions in one step play together."""

    unit_id: int
    kind: ActionType
    target_pos: HexCoord = field(default_factory=HexCoord)
    attacker_pos: HexCoord = field(default_factory=HexCoord)


Step = list[Action]
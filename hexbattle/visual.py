"""Animated presentation of a simulated unit."""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable

from .hexcoord import HexCoord
from .mapgen import hex_to_world
from .unit import SimUnit, Team
from .vector import ONE, ZERO, Vec3, interp_constant_to, interp_to

log = logging.getLogger(__name__)

ARRIVAL_TOLERANCE = 0.2
VANISH_SCALE = 0.03

RED = (1.0, 0.0, 0.0, 1.0)
BLUE = (0.0, 0.0, 1.0, 1.0)

OnFinished = Callable[[], None]


class AnimState(enum.Enum):
    """Phase of the animation a visual unit is playing."""

    NONE = "none"
    MOVE = "move"
    ATTACK_FORWARD = "attack_forward"
    ATTACK_BACK = "attack_back"
    HIT_BACK = "hit_back"
    HIT_RETURN = "hit_return"
    DEATH = "death"


class VisualUnit:
    """Plays movement, attack, hit and death animations for one unit."""

    def __init__(
        self,
        unit: SimUnit,
        hex_size: float = 100.0,
        speed: float = 0.5,
        nudge: float = 50.0,
    ) -> None:
        self.unit_id = unit.id
        self.team = unit.team
        self.hex_size = hex_size
        self.speed = speed
        self.nudge = nudge
        self.color = RED if unit.team is Team.RED else BLUE
        self.location = hex_to_world(unit.grid_pos, hex_size)
        self.scale = ONE
        self.state = AnimState.NONE
        self.animating = False
        self.destroyed = False
        self.start_pos = self.location
        self.mid_pos = self.location
        self.end_pos = self.location
        self._on_finished: OnFinished | None = None

    def _to_world(self, coord: HexCoord) -> Vec3:
        return hex_to_world(coord, self.hex_size)

    def play_move_to(self, target: HexCoord, on_finished: OnFinished | None = None) -> None:
        """Start walking to ``target`` at constant speed."""
        self._on_finished = on_finished
        self.start_pos = self.location
        self.end_pos = self._to_world(target)
        self.state = AnimState.MOVE
        self.animating = True
        log.debug("play move to, unit %d", self.unit_id)

    def play_attack_towards(self, enemy_pos: HexCoord, on_finished: OnFinished | None = None) -> None:
        """Lunge toward ``enemy_pos`` and return."""
        self._on_finished = on_finished
        self.start_pos = self.location
        direction = (self._to_world(enemy_pos) - self.start_pos).safe_normal()
        self.mid_pos = self.start_pos + direction * self.nudge
        self.end_pos = self.start_pos
        self.state = AnimState.ATTACK_FORWARD
        self.animating = True
        log.debug("play attack towards, unit %d", self.unit_id)

    def play_hit_from(self, enemy_pos: HexCoord, on_finished: OnFinished | None = None) -> None:
        """Recoil away from ``enemy_pos`` and return."""
        self._on_finished = on_finished
        self.start_pos = self.location
        direction = (self.start_pos - self._to_world(enemy_pos)).safe_normal()
        self.mid_pos = self.start_pos + direction * self.nudge
        self.end_pos = self.start_pos
        self.state = AnimState.HIT_BACK
        self.animating = True
        log.debug("play hit from, unit %d", self.unit_id)

    def play_death(self, on_finished: OnFinished | None = None) -> None:
        """Shrink away and be destroyed."""
        self._on_finished = on_finished
        self.state = AnimState.DEATH
        self.animating = True
        log.debug("play death, unit %d", self.unit_id)

    def _finish(self) -> None:
        self.animating = False
        self.state = AnimState.NONE
        if self._on_finished is not None:
            self._on_finished()

    def _approach(self, target: Vec3, delta_time: float) -> bool:
        self.location = interp_to(self.location, target, delta_time, self.speed / 10)
        return self.location.dist_squared(target) < ARRIVAL_TOLERANCE

    def tick(self, delta_time: float) -> None:
        """Advance the current animation by ``delta_time`` seconds."""
        if self.destroyed or not self.animating:
            return

        state = self.state
        if state is AnimState.MOVE:
            self.location = interp_constant_to(self.location, self.end_pos, delta_time, self.speed)
            if self.location.dist_squared(self.end_pos) < ARRIVAL_TOLERANCE:
                self._finish()
        elif state is AnimState.ATTACK_FORWARD:
            if self._approach(self.mid_pos, delta_time):
                self.state = AnimState.ATTACK_BACK
        elif state is AnimState.ATTACK_BACK:
            if self._approach(self.end_pos, delta_time):
                self._finish()
        elif state is AnimState.HIT_BACK:
            if self._approach(self.mid_pos, delta_time):
                self.state = AnimState.HIT_RETURN
        elif state is AnimState.HIT_RETURN:
            if self._approach(self.end_pos, delta_time):
                self._finish()
        elif state is AnimState.DEATH:
            self.scale = interp_to(self.scale, ZERO, delta_time, self.speed / 10)
            if self.scale.min_component() < VANISH_SCALE:
                self.destroyed = True
                self._finish()
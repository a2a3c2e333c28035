"""Turn-based battle simulation on a hexagon board."""

from __future__ import annotations

import logging

from .actions import Action, ActionType, Step
from .hexcoord import HexCoord, hex_range
from .random_stream import RandomStream
from .unit import SimUnit, Team

log = logging.getLogger(__name__)


class BattleSimulator:
    """Places two teams on a hex board and lets them fight step by step."""

    def __init__(self, attack_range: int = 1, attack_rate: int = 1) -> None:
        self.attack_range = attack_range
        self.attack_rate = attack_rate
        self.units: list[SimUnit] = []
        self.steps: list[Step] = []
        self.step_count = 0
        self.free_tiles: list[HexCoord] = []
        self.board: set[HexCoord] = set()
        self.occupied: set[HexCoord] = set()

    def initialize(self, seed: int, red_units: int, blue_units: int, map_radius: int) -> None:
        """Build the board and place units of both teams at random tiles."""
        if red_units < 0 or blue_units < 0:
            raise ValueError("unit counts must not be negative")
        tiles = hex_range(map_radius)
        if red_units + blue_units > len(tiles):
            raise ValueError(
                f"{red_units + blue_units} units do not fit on a board of {len(tiles)} tiles"
            )

        rng = RandomStream(seed)
        self.step_count = 0
        self.units = []
        self.steps = []
        self.occupied = set()
        self.board = set(tiles)
        self.free_tiles = list(tiles)

        for team, count in ((Team.RED, red_units), (Team.BLUE, blue_units)):
            for _ in range(count):
                pos = self.free_tiles.pop(rng.rand_range(0, len(self.free_tiles) - 1))
                hp = rng.rand_range(2, 5)
                self.units.append(SimUnit(id=len(self.units), team=team, hp=hp, grid_pos=pos))

    def tick(self) -> None:
        """Run one simulation step, recording the resulting actions."""
        self.occupied.update(u.grid_pos for u in self.units if u.is_alive)

        for unit in self.units:
            if not unit.is_alive:
                continue

            enemy = self.find_closest_enemy(unit)
            if enemy is not None:
                unit.target_pos = enemy.grid_pos
                if unit.is_in_range(enemy.grid_pos, self.attack_range):
                    if unit.attack_cooldown == 0:
                        self._attack(unit, enemy)
                else:
                    self._advance(unit, enemy.grid_pos)

            unit.tick()

        self.step_count += 1

    def _attack(self, unit: SimUnit, enemy: SimUnit) -> None:
        enemy.attacker_pos = unit.grid_pos
        enemy.hp -= 1
        self.steps.append([
            Action(unit.id, ActionType.ATTACK, unit.target_pos),
            Action(enemy.id, ActionType.HIT, HexCoord(), enemy.attacker_pos),
        ])
        log.debug("%d was attacked by %d", enemy.id, unit.id)

        if enemy.hp <= 0:
            enemy.is_alive = False
            self.steps.append([Action(enemy.id, ActionType.DIE)])
            log.debug("%d is dead", enemy.id)

        unit.attack_cooldown = self.attack_rate

    def _advance(self, unit: SimUnit, target: HexCoord) -> None:
        next_pos = self.choose_best_pos_toward(unit.grid_pos, target)
        if next_pos == unit.grid_pos:
            return
        self.occupied.discard(unit.grid_pos)
        self.occupied.add(next_pos)
        unit.grid_pos = next_pos
        self.steps.append([Action(unit.id, ActionType.MOVE, unit.grid_pos)])
        log.debug("%d moved", unit.id)

    def is_over(self) -> bool:
        """True once either team has no living units."""
        alive = {Team.RED: 0, Team.BLUE: 0}
        for unit in self.units:
            if unit.is_alive:
                alive[unit.team] += 1
        return alive[Team.RED] == 0 or alive[Team.BLUE] == 0

    def find_closest_enemy(self, unit: SimUnit) -> SimUnit | None:
        """The nearest living unit of the other team; earliest wins ties."""
        best: SimUnit | None = None
        best_dist = None
        for other in self.units:
            if not other.is_alive or other.team == unit.team:
                continue
            dist = unit.grid_pos.distance_to(other.grid_pos)
            if best_dist is None or dist < best_dist:
                best_dist = dist
                best = other
        return best

    def choose_best_pos_toward(self, from_pos: HexCoord, target_pos: HexCoord) -> HexCoord:
        """The free board tile to move to next, or ``from_pos`` if blocked."""
        step = from_pos.step_to(target_pos)
        if step != from_pos and step not in self.occupied and step in self.board:
            return step

        best_pos = from_pos
        best_dist = None
        for pos in from_pos.neighbors():
            if pos not in self.board or pos in self.occupied:
                continue
            dist = pos.distance_to(target_pos)
            if best_dist is None or dist < best_dist:
                best_dist = dist
                best_pos = pos
        return best_pos
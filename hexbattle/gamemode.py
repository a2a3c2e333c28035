"""Runs the battle simulation on a clock and plays its steps back."""

from __future__ import annotations

import argparse
import logging
import sys

from .actions import ActionType, Step
from .simulator import BattleSimulator
from .unit import Team
from .visual import VisualUnit

log = logging.getLogger(__name__)


class GameMode:
    """Advances the simulation at fixed time steps and animates the results."""

    def __init__(
        self,
        seed: int = 1337,
        red_units: int = 3,
        blue_units: int = 3,
        time_step: float = 0.1,
        map_radius: int = 10,
        hex_size: float = 100.0,
    ) -> None:
        if time_step <= 0:
            raise ValueError("time_step must be positive")
        self.seed = seed
        self.red_units = red_units
        self.blue_units = blue_units
        self.time_step = time_step
        self.map_radius = int(map_radius)
        self.hex_size = hex_size
        self.simulator = BattleSimulator()
        self.visuals: dict[int, VisualUnit] = {}
        self.steps: list[Step] = []
        self.current_step = -1
        self.running_actions = 0
        self.time_since_last_step = 0.0

    def start(self) -> None:
        """Set up the simulation and create a visual for every unit."""
        self.simulator.initialize(self.seed, self.red_units, self.blue_units, self.map_radius)
        self.visuals = {
            unit.id: VisualUnit(unit, hex_size=self.hex_size) for unit in self.simulator.units
        }
        self.steps = []
        self.current_step = -1
        self.running_actions = 0
        self.time_since_last_step = 0.0

    def tick(self, delta_seconds: float) -> None:
        """Advance the clock, running due simulation steps and animations."""
        self.time_since_last_step += delta_seconds
        while self.time_since_last_step >= self.time_step:
            self._do_simulation_step()
            self.time_since_last_step -= self.time_step

        for visual in list(self.visuals.values()):
            visual.tick(delta_seconds)

    def _do_simulation_step(self) -> None:
        if self.simulator.is_over():
            return
        self.simulator.tick()
        self.steps = list(self.simulator.steps)
        if self.current_step < 0 and self.steps:
            self._play_step(0)

    def _visual_for(self, unit_id: int) -> VisualUnit | None:
        visual = self.visuals.get(unit_id)
        if visual is None or visual.destroyed:
            return None
        return visual

    def _play_step(self, index: int) -> None:
        while True:
            self.current_step = index
            log.debug("play step %d of %d", index, len(self.steps))
            if not 0 <= index < len(self.steps):
                self.steps = []
                self.current_step = -1
                return

            step = self.steps[index]
            self.running_actions = len(step)
            for action in step:
                visual = self._visual_for(action.unit_id)
                if visual is None:
                    self.running_actions -= 1
                    continue
                if action.kind is ActionType.MOVE:
                    visual.play_move_to(action.target_pos, self._action_finished)
                elif action.kind is ActionType.ATTACK:
                    visual.play_attack_towards(action.target_pos, self._action_finished)
                elif action.kind is ActionType.HIT:
                    visual.play_hit_from(action.attacker_pos, self._action_finished)
                elif action.kind is ActionType.DIE:
                    visual.play_death(self._action_finished)

            if self.running_actions > 0:
                return
            index += 1

    def _action_finished(self) -> None:
        self.running_actions -= 1
        if self.running_actions == 0:
            self._play_step(self.current_step + 1)


def _winner(simulator: BattleSimulator) -> str:
    alive = {unit.team for unit in simulator.units if unit.is_alive}
    if not simulator.is_over():
        return "none"
    if alive == {Team.RED}:
        return Team.RED.value
    if alive == {Team.BLUE}:
        return Team.BLUE.value
    return "none"


def main(argv: list[str] | None = None) -> int:
    """Run a battle to its end and print the recorded actions."""
    parser = argparse.ArgumentParser(prog="hexbattle", description="Simulate a hex board battle.")
    parser.add_argument("--seed", type=int, default=1337)
    parser.add_argument("--red", type=int, default=3)
    parser.add_argument("--blue", type=int, default=3)
    parser.add_argument("--radius", type=int, default=10)
    parser.add_argument("--time-step", type=float, default=0.1)
    parser.add_argument("--hex-size", type=float, default=100.0)
    parser.add_argument("--max-steps", type=int, default=10000)
    args = parser.parse_args(argv)

    try:
        game = GameMode(
            seed=args.seed,
            red_units=args.red,
            blue_units=args.blue,
            time_step=args.time_step,
            map_radius=args.radius,
            hex_size=args.hex_size,
        )
        game.start()
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    for _ in range(args.max_steps):
        if game.simulator.is_over():
            break
        game.tick(game.time_step)

    for number, step in enumerate(game.simulator.steps):
        described = ", ".join(
            f"{a.unit_id} {a.kind.value}"
            + (f" ({a.target_pos.q},{a.target_pos.r})" if a.kind in (ActionType.MOVE, ActionType.ATTACK) else "")
            for a in step
        )
        print(f"{number}: {described}")
    print(f"simulation steps: {game.simulator.step_count}")
    print(f"winner: {_winner(game.simulator)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
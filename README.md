# hexbattle

A small, deterministic battle simulation on a hexagonal grid. Red and blue
units are placed at random tiles (from a seed) on a hex-shaped board. On each
simulation tick every living unit finds its closest living enemy and either
attacks it, when it is within range and its attack has cooled down, or steps
one tile towards it. The battle is over when one team has no living units.

Each tick records *steps*. A step is a list of actions (move, attack, hit,
die) that belong together; an attack and the matching hit form one step, a
death is a step of its own. The steps can be played back in order by the
animation layer in `hexbattle.visual` and `hexbattle.gamemode`.

The package has no runtime dependencies.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
hexbattle
```

This runs a battle with the default settings (seed 1337, three red and three
blue units, a board of radius 10, a simulation step every 0.1 seconds of play
time) until one team is wiped out or `--max-steps` clock ticks have passed.
It then prints every recorded step, one per line, as the actions it holds
(unit id, action kind, and the target tile for moves and attacks), followed
by the number of simulation steps and the winner (`red`, `blue` or `none`).

Options:

- `--seed` (default 1337)
- `--red`, `--blue`: number of units per team (default 3 each)
- `--radius`: board radius (default 10)
- `--time-step`: play time between simulation steps, in seconds (default 0.1)
- `--hex-size`: tile size in world units (default 100.0)
- `--max-steps`: upper bound on clock ticks (default 10000)

Invalid settings, such as more units than there are tiles, a negative unit
count or a non-positive time step, print an error and exit with status 2.

## Using the library

### Hex coordinates

`hexbattle.hexcoord.HexCoord` is an immutable axial coordinate `(q, r)`:

```python
from hexbattle.hexcoord import HexCoord, hex_range

a = HexCoord(0, 0)
b = HexCoord(2, -1)
a.distance_to(b)   # hex distance
a.step_to(b)       # one step towards b, each axis clamped to -1..1
a.neighbors()      # tuple of the six adjacent tiles
tiles = hex_range(3)  # list of every tile within radius 3 of the origin
```

### Running a simulation

```python
from hexbattle.simulator import BattleSimulator

sim = BattleSimulator(attack_range=1, attack_rate=1)
sim.initialize(seed=1337, red_units=3, blue_units=3, map_radius=10)

while not sim.is_over():
    sim.tick()

for unit in sim.units:
    print(unit.id, unit.team, unit.hp, unit.is_alive)

for step in sim.steps:
    for action in step:
        print(action.unit_id, action.kind, action.target_pos)

print(sim.step_count)
```

`initialize` raises `ValueError` if a unit count is negative or the units do
not fit on the board. Unit hit points are drawn between 2 and 5. The same
seed and settings always produce the same battle; the random numbers come
from `hexbattle.random_stream.RandomStream`, a seeded linear congruential
generator with `fraction()` and `rand_range(low, high)`.

`find_closest_enemy(unit)` and `choose_best_pos_toward(from_pos, target_pos)`
are also available for inspecting the movement and targeting rules.

### Units and actions

`hexbattle.unit` defines `Team` (`RED`, `BLUE`) and `SimUnit`, which holds a
unit's hit points, grid position, target, last attacker position and attack
cooldown. `hexbattle.actions` defines `ActionType` (`MOVE`, `ATTACK`, `HIT`,
`DIE`) and the frozen `Action` records (`unit_id`, `kind`, `target_pos`,
`attacker_pos`) that make up each step.

### Playback

`hexbattle.visual.VisualUnit` turns actions into motion in world space. It
moves at a constant speed between tiles, lunges towards an enemy to attack,
is pushed back when hit, and shrinks away on death. After each animation it
calls the callback it was given. Its `location`, `scale`, `color`, `state`
(an `AnimState`) and `destroyed` attributes describe what should be drawn.

`hexbattle.gamemode.GameMode` runs the simulator on a fixed time step and
plays the recorded steps back through one `VisualUnit` per unit, starting
the next step when every action of the current one has finished:

```python
from hexbattle.gamemode import GameMode

game = GameMode(seed=42, red_units=2, blue_units=2, time_step=0.1,
                map_radius=6, hex_size=100.0)
game.start()
for _ in range(1000):
    game.tick(1 / 60)
```

`hexbattle.mapgen.hex_to_world(coord, hex_size)` gives the world-space
centre of a tile, and `generate_map(radius, hex_size)` returns the centres of
every tile on a board of the given radius. `hexbattle.vector` provides the
`Vec3` type and the `interp_to` / `interp_constant_to` helpers used by the
animations.

## What it does not do

hexbattle does not draw anything. There is no window, renderer or player
input; the playback classes only compute positions, scales and colours for
some other program to display.
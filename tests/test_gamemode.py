import pytest

from hexbattle.gamemode import GameMode, main
from hexbattle.mapgen import hex_to_world


def started(**kwargs):
    game = GameMode(**kwargs)
    game.start()
    return game


def test_non_positive_time_step_is_rejected():
    with pytest.raises(ValueError):
        GameMode(time_step=0.0)
    with pytest.raises(ValueError):
        GameMode(time_step=-1.0)


def test_start_creates_one_visual_per_unit():
    game = started(seed=1337, red_units=3, blue_units=2)
    assert sorted(game.visuals) == [u.id for u in game.simulator.units]
    assert len(game.visuals) == 3 + 2


def test_visuals_placed_at_unit_positions():
    game = started(hex_size=60.0)
    for unit in game.simulator.units:
        assert game.visuals[unit.id].location == hex_to_world(unit.grid_pos, 60.0)


def test_short_tick_runs_no_simulation_step():
    game = started(time_step=0.5)
    game.tick(0.2)
    assert game.simulator.step_count == 0
    assert game.current_step == -1


def test_tick_runs_one_step_per_elapsed_interval():
    game = started(time_step=0.5)
    game.tick(1.5)
    assert game.simulator.step_count == 3


def test_playback_starts_with_first_recorded_step():
    game = started(time_step=0.5)
    game.tick(1.5)
    assert game.steps == game.simulator.steps
    assert game.current_step == 0
    assert game.running_actions == len(game.steps[0])


def test_simulation_ends_with_one_team_left():
    game = started(seed=42, red_units=2, blue_units=2, map_radius=5, time_step=0.5)
    for _ in range(5000):
        if game.simulator.is_over():
            break
        game.tick(0.5)
    assert game.simulator.is_over()
    teams_alive = {u.team for u in game.simulator.units if u.is_alive}
    assert len(teams_alive) == 1


def test_playback_runs_to_completion():
    game = started(seed=7, red_units=2, blue_units=2, map_radius=4)
    game.tick(1000.0)
    assert game.simulator.is_over()
    seen = {game.current_step}
    for _ in range(5000):
        if game.current_step == -1:
            break
        game.tick(1000.0)
        seen.add(game.current_step)
    assert game.current_step == -1
    assert game.steps == []
    assert len(seen) > 2


def test_dead_units_visuals_are_destroyed_after_playback():
    game = started(seed=7, red_units=2, blue_units=2, map_radius=4)
    game.tick(1000.0)
    for _ in range(5000):
        if game.current_step == -1:
            break
        game.tick(1000.0)
    for unit in game.simulator.units:
        assert game.visuals[unit.id].destroyed == (not unit.is_alive)


def test_main_prints_winner(capsys):
    assert main(["--seed", "7", "--red", "2", "--blue", "2", "--radius", "4"]) == 0
    out = capsys.readouterr().out
    assert "winner: red" in out or "winner: blue" in out


def test_main_rejects_overfull_board(capsys):
    assert main(["--red", "5", "--blue", "5", "--radius", "1"]) == 2
    assert "error" in capsys.readouterr().err
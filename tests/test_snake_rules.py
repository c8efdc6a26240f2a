# tests/test_snake_rules.py
import pytest

from gridsnake.core.interfaces import GameState, Reason
from gridsnake.core.spawn import SpawnError

FAR_FOODS = [(-10, -10), (-12, 8), (9, -13)]

def test_reset_shape(sim_factory):
    sim = sim_factory()
    snap = sim.reset()
    assert snap.snake == ((0, 0),)
    assert snap.dir == (1, 0)
    assert snap.score == 0
    assert snap.state is GameState.RUNNING and snap.reason is None
    assert len(snap.foods) == sim.cfg.food_count
    assert len(snap.obstacles) == sim.cfg.obstacle_count
    assert all(len(fp) == 4 for fp in snap.obstacles)

def test_reset_entities_do_not_overlap(sim_factory):
    sim = sim_factory(food_count=10, obstacle_count=12)
    for _ in range(20):
        snap = sim.reset()
        cells = list(snap.snake) + list(snap.foods) + [c for fp in snap.obstacles for c in fp]
        assert len(cells) == len(set(cells))

def test_move_without_food(sim_factory, make_state):
    # scenario A
    sim = sim_factory(grid_half=15)
    sim.set_state(make_state([(0, 0)], foods=FAR_FOODS))
    snap = sim.step()
    assert snap.snake == ((1, 0),)
    assert snap.score == 0
    assert snap.state is GameState.RUNNING

def test_hit_wall(sim_factory, make_state):
    # scenario B
    sim = sim_factory(grid_half=15)
    sim.set_state(make_state([(15, 0)], foods=FAR_FOODS))
    snap = sim.step()
    assert snap.state is GameState.GAME_OVER
    assert snap.reason is Reason.HIT_WALL
    assert snap.snake == ((15, 0),)

def test_hit_wall_on_negative_edge(sim_factory, make_state):
    sim = sim_factory(grid_half=15)
    sim.set_state(make_state([(0, -15)], dir=(0, -1), foods=FAR_FOODS))
    assert sim.step().reason is Reason.HIT_WALL

def test_hit_self(sim_factory, make_state):
    # scenario C
    sim = sim_factory()
    sim.set_state(make_state([(2, 0), (1, 0), (0, 0)], dir=(-1, 0), foods=FAR_FOODS))
    snap = sim.step()
    assert snap.state is GameState.GAME_OVER
    assert snap.reason is Reason.HIT_SELF

def test_moving_into_vacating_tail_is_fatal(sim_factory, make_state):
    # 2x2 loop: head (0,0) moving down onto the tail at (0,1)
    sim = sim_factory()
    body = [(0, 0), (1, 0), (1, 1), (0, 1)]
    sim.set_state(make_state(body, dir=(0, 1), foods=FAR_FOODS))
    snap = sim.step()
    assert snap.reason is Reason.HIT_SELF
    assert list(snap.snake) == body

def test_eat_food_grows_and_respawns(sim_factory, make_state):
    # scenario D
    sim = sim_factory(food_count=3)
    sim.set_state(make_state([(0, 0)], foods=[(1, 0), (-10, -10), (-12, 8)]))
    snap = sim.step()
    assert snap.snake == ((1, 0), (0, 0))
    assert snap.score == 1
    assert len(snap.foods) == 3
    assert (1, 0) not in snap.foods
    assert not set(snap.foods) & set(snap.snake)

def test_hit_obstacle(sim_factory, make_state):
    # scenario E
    sim = sim_factory()
    sim.set_state(make_state([(6, 7)], dir=(0, -1), foods=FAR_FOODS, obstacle_bases=[(5, 5)]))
    snap = sim.step()
    assert snap.state is GameState.GAME_OVER
    assert snap.reason is Reason.HIT_OBSTACLE

def test_wall_beats_food(sim_factory, make_state):
    # nothing is eaten on a fatal step
    sim = sim_factory(grid_half=3)
    sim.set_state(make_state([(3, 0)], foods=[(-3, -3), (-3, 3), (0, 3)]))
    snap = sim.step()
    assert snap.reason is Reason.HIT_WALL
    assert snap.score == 0

def test_step_is_noop_after_game_over(sim_factory, make_state):
    sim = sim_factory(grid_half=15)
    sim.set_state(make_state([(15, 0)], foods=FAR_FOODS))
    first = sim.step()
    again = sim.step()
    assert again == first

def test_direction_latched_at_step(sim_factory, make_state):
    sim = sim_factory()
    sim.set_state(make_state([(0, 0)], foods=FAR_FOODS))
    sim.queue_direction((0, 1))
    assert sim.dir == (1, 0)
    snap = sim.step()
    assert snap.dir == (0, 1)
    assert snap.snake == ((0, 1),)

def test_state_roundtrip_restores_rng(sim_factory):
    sim = sim_factory()
    for _ in range(3):
        sim.step()
    saved = sim.get_state()
    a = [sim.spawner.rng.random() for _ in range(3)]
    sim.set_state(saved)
    b = [sim.spawner.rng.random() for _ in range(3)]
    assert a == b

def test_seed_makes_reset_reproducible(sim_factory):
    a, b = sim_factory(), sim_factory()
    a.seed(7); b.seed(7)
    assert a.reset() == b.reset()

def test_eating_onto_a_full_board_changes_nothing(sim_factory, make_state):
    # 3x3 board, snake fills all but (1,1) and is about to eat there
    sim = sim_factory(grid_half=1, food_count=1, obstacle_count=0, max_spawn_attempts=20)
    body = [(1, 0), (1, -1), (0, -1), (-1, -1), (-1, 0), (-1, 1), (0, 1), (0, 0)]
    sim.set_state(make_state(body, dir=(0, 1), foods=[(1, 1)]))
    before = sim.snapshot()
    with pytest.raises(SpawnError):
        sim.step()
    assert sim.snapshot() == before
    assert sim.state is GameState.RUNNING
    assert len(sim.foods) == 1

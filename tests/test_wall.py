import numpy as np

from wall import Wall, FLASHING, SOLID, generate_wall_blocks


def test_wall_flashes_then_turns_solid():
    wall = Wall([(1, 1), (1, 2)], flash_duration=3, lifetime=10)
    assert wall.state == FLASHING
    assert not wall.is_solid

    assert not wall.tick()
    assert not wall.tick()
    assert wall.state == FLASHING
    assert not wall.tick()
    assert wall.state == SOLID


def test_wall_expires_after_lifetime():
    wall = Wall([(0, 0)], flash_duration=1, lifetime=2)
    wall.tick()
    assert not wall.tick()
    assert wall.tick()


def test_wall_without_lifetime_never_expires():
    wall = Wall([(0, 0)], flash_duration=1, lifetime=None)
    wall.tick()
    assert not any(wall.tick() for _ in range(1000))


def test_wall_contains():
    wall = Wall([(3, 4), (3, 5)])
    assert (3, 5) in wall
    assert [3, 4] in wall
    assert (4, 4) not in wall


def test_generated_blocks_are_connected_and_in_bounds():
    rng = np.random.default_rng(42)
    for _ in range(100):
        count = int(rng.integers(3, 9))
        blocks = generate_wall_blocks(10, 8, count, rng)
        assert 1 <= len(blocks) <= count
        assert len(set(blocks)) == len(blocks)
        for (ax, ay), (bx, by) in zip(blocks, blocks[1:]):
            assert abs(ax - bx) + abs(ay - by) == 1
        for x, y in blocks:
            assert 0 <= x < 10 and 0 <= y < 8


def test_generated_chain_stops_when_boxed_in():
    rng = np.random.default_rng(0)
    assert generate_wall_blocks(1, 1, 8, rng) == [(0, 0)]
    assert len(generate_wall_blocks(2, 1, 8, rng)) == 2

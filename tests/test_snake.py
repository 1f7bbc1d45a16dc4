import random

import pytest

from pixeltoys.snake import DEFAULT_GRID_SIZE, Board, Direction, GridCoords, Snake


def test_new_snake_body_is_head():
    snake = Snake(GridCoords(3, 4))
    assert snake.body == [GridCoords(3, 4)]
    assert snake.head == GridCoords(3, 4)


@pytest.mark.parametrize(
    "direction, dx, dy",
    [
        (Direction.NORTH, 0, -1),
        (Direction.EAST, 1, 0),
        (Direction.SOUTH, 0, 1),
        (Direction.WEST, -1, 0),
    ],
)
def test_next_head(direction, dx, dy):
    start = GridCoords(5, 5)
    snake = Snake(start, direction)
    nxt = snake.next_head()
    assert (nxt.x - start.x, nxt.y - start.y) == (dx, dy)
    assert snake.head == start


def test_move_keeps_length_without_food():
    snake = Snake(GridCoords(5, 5), Direction.EAST)
    expected = snake.next_head()
    snake.move()
    assert snake.body == [expected]
    assert snake.head == expected


def test_move_grows_with_food():
    snake = Snake(GridCoords(5, 5), Direction.EAST)
    snake.move(True)
    assert len(snake.body) == 2
    assert snake.body[-1] == snake.head
    snake.move(True)
    assert len(snake.body) == 3
    snake.move()
    assert len(snake.body) == 3
    assert snake.body[-1] == snake.head


def test_occupies():
    snake = Snake(GridCoords(2, 2), Direction.SOUTH)
    snake.move(True)
    assert snake.occupies(GridCoords(2, 2))
    assert snake.occupies(snake.head)
    assert not snake.occupies(GridCoords(7, 7))


@pytest.mark.parametrize(
    "loc",
    [
        GridCoords(0, 5),
        GridCoords(5, 0),
        GridCoords(DEFAULT_GRID_SIZE, 5),
        GridCoords(5, DEFAULT_GRID_SIZE),
        GridCoords(-1, 5),
    ],
)
def test_walls_collide(loc):
    board = Board(DEFAULT_GRID_SIZE, GridCoords(5, 5), rng=random.Random(0))
    assert board.is_collision(loc)


def test_interior_and_body_collisions():
    board = Board(DEFAULT_GRID_SIZE, GridCoords(5, 5), rng=random.Random(0))
    assert board.is_collision(GridCoords(5, 5))
    assert not board.is_collision(GridCoords(3, 3))


@pytest.mark.parametrize("seed", range(30))
def test_food_never_spawns_on_collision(seed):
    board = Board(DEFAULT_GRID_SIZE, GridCoords(5, 5), rng=random.Random(seed))
    assert not board.is_collision(board.food)


def test_update_into_wall_fails():
    board = Board(DEFAULT_GRID_SIZE, GridCoords(1, 1), rng=random.Random(0))
    board.set_direction(Direction.NORTH)
    assert board.update() is False
    assert board.snake.head == GridCoords(1, 1)


def test_update_eats_food():
    board = Board(DEFAULT_GRID_SIZE, GridCoords(5, 5), rng=random.Random(2))
    board.food = GridCoords(6, 5)
    board.set_direction(Direction.EAST)
    assert board.update() is True
    assert len(board.snake.body) == 2
    assert board.snake.head == GridCoords(6, 5)
    assert board.food != GridCoords(6, 5) or not board.snake.occupies(board.food)


def test_reset_restores_snake():
    board = Board(DEFAULT_GRID_SIZE, GridCoords(5, 5), rng=random.Random(4))
    board.set_direction(Direction.SOUTH)
    board.update()
    board.reset()
    assert board.snake.body == [GridCoords(5, 5)]
    assert not board.is_collision(board.food)


def test_same_seed_same_food():
    a = Board(rng=random.Random(7))
    b = Board(rng=random.Random(7))
    assert a.food == b.food


def test_board_without_free_cells_raises():
    with pytest.raises(RuntimeError):
        Board(grid_size=1)
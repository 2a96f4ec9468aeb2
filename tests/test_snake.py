"""Tests for snake.py - movement, wraparound and growth."""

from collections import deque

from console_snake import config
from console_snake.snake import BodySegment, Snake
from console_snake.vec2 import Vector2


class TestVector2:
    def test_add_mutates_in_place(self):
        v = Vector2(2, 3)
        v.add(Vector2(-1, 4))
        assert v == Vector2(1, 7)

    def test_equality_is_by_component(self):
        assert Vector2(1, 2) == Vector2(1, 2)
        assert Vector2(1, 2) != Vector2(2, 1)

    def test_clone_is_independent(self):
        v = Vector2(4, 4)
        c = v.clone()
        c.add(Vector2(1, 0))
        assert v == Vector2(4, 4)


class TestSnakeUpdate:
    def test_new_snake_is_stationary(self):
        snake = Snake(0, 1)
        assert snake.velocity == Vector2(0, 0)
        assert snake.previous_location is None
        assert isinstance(snake.body, deque) and len(snake.body) == 0

    def test_zero_velocity_does_not_move(self):
        snake = Snake(3, 3)
        snake.update()
        assert snake.location == Vector2(3, 3)
        assert snake.previous_location is None

    def test_segment_follows_head(self):
        """Head (5,5) moving right with one segment at (4,5)."""
        snake = Snake(5, 5)
        snake.velocity = Vector2(1, 0)
        snake.body.append(BodySegment(4, 5))
        snake.update()
        assert snake.location == Vector2(6, 5)
        assert snake.body[0].location == Vector2(5, 5)

    def test_tail_jumps_to_front(self):
        snake = Snake(5, 5)
        snake.velocity = Vector2(0, 1)
        snake.body.extend([BodySegment(5, 4), BodySegment(5, 3), BodySegment(5, 2)])
        tail = snake.body[-1]
        snake.update()
        assert snake.body[0] is tail
        assert [s.location.to_tuple() for s in snake.body] == [(5, 5), (5, 4), (5, 3)]


class TestWraparound:
    def test_past_right_edge_wraps_to_zero(self):
        snake = Snake(config.BOARD_WIDTH, 5)
        snake.velocity = Vector2(1, 0)
        snake.update()
        assert snake.location.x == 0

    def test_reaching_right_edge_does_not_wrap(self):
        snake = Snake(config.BOARD_WIDTH - 1, 5)
        snake.velocity = Vector2(1, 0)
        snake.update()
        assert snake.location.x == config.BOARD_WIDTH

    def test_past_left_edge_wraps_to_width(self):
        snake = Snake(0, 5)
        snake.velocity = Vector2(-1, 0)
        snake.update()
        assert snake.location.x == 80

    def test_vertical_wrap(self):
        snake = Snake(5, config.BOARD_HEIGHT)
        snake.velocity = Vector2(0, 1)
        snake.update()
        assert snake.location.y == 0

        snake = Snake(5, 0)
        snake.velocity = Vector2(0, -1)
        snake.update()
        assert snake.location.y == config.BOARD_HEIGHT


class TestGrow:
    def test_grow_before_moving_is_noop(self):
        snake = Snake(0, 1)
        snake.grow()
        assert len(snake.body) == 0

    def test_grow_adds_segment_at_previous_head(self):
        snake = Snake(5, 5)
        snake.velocity = Vector2(1, 0)
        snake.update()
        snake.grow()
        assert len(snake.body) == 1
        assert snake.body[0].location == Vector2(5, 5)

    def test_grow_inserts_at_front(self):
        snake = Snake(5, 5)
        snake.velocity = Vector2(1, 0)
        snake.update()
        snake.grow()
        snake.update()
        snake.grow()
        assert [s.location.to_tuple() for s in snake.body] == [(6, 5), (6, 5)]
        snake.update()
        assert [s.location.to_tuple() for s in snake.body] == [(7, 5), (6, 5)]

    def test_collides_with_body(self):
        snake = Snake(5, 5)
        snake.body.append(BodySegment(9, 9))
        assert not snake.collides_with_body()
        snake.body.append(BodySegment(5, 5))
        assert snake.collides_with_body()

"""
Tests for the Apple game object.
"""
import random

from config import APPLE_GLYPH, GAME_AREA_HEIGHT, GAME_AREA_WIDTH
from core import actions
from core.geometry import Position
from snake_game.actions import SnakeSceneAction
from snake_game.objects.apple import Apple, random_position

from conftest import FakeTerminal


class TestRandomPosition:
    """Tests for apple placement."""

    def test_inside_play_area(self):
        rng = random.Random(7)
        for _ in range(500):
            x, y = random_position(rng).screen_coordinates()
            assert 1 <= x < GAME_AREA_WIDTH
            assert 1 <= y < GAME_AREA_HEIGHT

    def test_positions_are_whole_cells(self):
        p = random_position(random.Random(1))
        assert p.x == int(p.x)
        assert p.y == int(p.y)


class TestApple:
    """Tests for Apple reactions."""

    def test_explicit_position(self):
        apple = Apple(Position(4, 6))
        assert apple.get_position().screen_coordinates() == (4, 6)

    def test_relocates_on_eat(self):
        rng = random.Random(3)
        expected = random_position(random.Random(3))
        apple = Apple(Position(4, 6), rng=rng)
        apple.react_to_scene_action(SnakeSceneAction.EAT_APPLE)
        assert apple.get_position() == expected

    def test_ignores_other_events(self):
        apple = Apple(Position(4, 6))
        apple.react_to_scene_action(SnakeSceneAction.HIT_WALL)
        apple.react_to_scene_action(SnakeSceneAction.RESTART)
        apple.react_to_action(actions.MOVE_UP)
        apple.update(1.0)
        assert apple.get_position().screen_coordinates() == (4, 6)

    def test_draw(self):
        screen = FakeTerminal()
        Apple(Position(4, 6)).draw(screen)
        assert screen.points == [(APPLE_GLYPH, 4, 6)]

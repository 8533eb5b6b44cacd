"""Tests for FruitCatchMode: scoring, levels, bombs, pause and restart."""

import pygame
import pytest

from arcade_rt.assets import AssetLoadError, ImageLoader
from arcade_rt.games import GameState
from arcade_rt.keyboard import NO_KEYS, Key, StaticKeyState
from games.FruitCatch import config
from games.FruitCatch.fruit import Fruit, FruitKind
from games.FruitCatch.game_mode import FruitCatchMode

WIDTH, HEIGHT = 1024, 768

# Basket is 120x60 centered on the bottom edge: x 452..572, top at y 708
CATCH_X = 480.0
CATCH_Y = 706.0

LEFT = StaticKeyState({Key.LEFT})
RIGHT = StaticKeyState({Key.RIGHT})
PAUSE = StaticKeyState({Key.PAUSE})
CONFIRM = StaticKeyState({Key.CONFIRM})


@pytest.fixture
def game(image_loader):
    game = FruitCatchMode(width=WIDTH, height=HEIGHT, images=image_loader, seed=1)
    game.layout(WIDTH, HEIGHT)
    return game


@pytest.fixture
def started(game):
    """Game after one idle frame, so the basket is in place."""
    game.update(NO_KEYS)
    return game


def make_fruit(game, kind=FruitKind.APPLE, x=CATCH_X, y=CATCH_Y, gravity=3.0):
    image = pygame.Surface((40, 40))
    fruit = Fruit(image=image, kind=kind, x=x, y=y, gravity=gravity)
    game.add_fruit(fruit)
    return fruit


class TestStart:

    def test_initial_state(self, started):
        assert started.state == GameState.PLAYING
        assert started.get_score() == 0
        assert started.level == 0
        assert started.fruits == []
        assert (started.basket.x, started.basket.y) == (452.0, 708)

    def test_missing_basket_image_is_fatal(self, tmp_path):
        game = FruitCatchMode(images=ImageLoader(tmp_path))
        with pytest.raises(AssetLoadError):
            game.update(NO_KEYS)


class TestSpawning:

    def test_one_fruit_per_interval(self, game, monkeypatch):
        spawned = []
        original = game.spawner.spawn

        def counting_spawn(window_width, level):
            fruit = original(window_width, level)
            fruit.x = 0.0   # out of the basket's reach
            spawned.append(game.frame)
            return fruit

        monkeypatch.setattr(game.spawner, 'spawn', counting_spawn)
        for _ in range(360):
            game.update(NO_KEYS)
        assert spawned == [120, 240, 360]

    def test_first_fruit_appears_on_frame_120(self, game):
        for _ in range(119):
            game.update(NO_KEYS)
        assert game.fruits == []
        game.update(NO_KEYS)
        assert len(game.fruits) == 1

    def test_custom_interval(self, image_loader):
        game = FruitCatchMode(images=image_loader, spawn_interval=10, seed=2)
        for _ in range(10):
            game.update(NO_KEYS)
        assert len(game.fruits) == 1


class TestCatching:

    def test_caught_fruit_scores_and_is_removed(self, started):
        make_fruit(started)
        started.update(NO_KEYS)
        assert started.get_score() == 1
        assert started.fruits == []

    def test_fruit_touching_basket_edge_is_not_caught(self, started):
        fruit = make_fruit(started, x=452.0)
        started.update(NO_KEYS)
        assert started.get_score() == 0
        assert started.fruits == [fruit]

    def test_fruit_below_window_is_dropped_without_scoring(self, started):
        make_fruit(started, x=10.0, y=770.0)
        started.update(NO_KEYS)
        assert started.get_score() == 0
        assert started.fruits == []

    def test_removals_keep_order_of_survivors(self, started):
        make_fruit(started)                               # caught
        first = make_fruit(started, x=10.0, y=100.0)
        make_fruit(started, x=900.0, y=770.0)             # expired
        second = make_fruit(started, x=800.0, y=200.0)
        started.update(NO_KEYS)
        assert started.fruits == [first, second]
        assert started.get_score() == 1

    def test_every_fruit_falls_each_frame(self, started):
        fruit = make_fruit(started, kind=FruitKind.GRAPE, x=10.0, y=0.0, gravity=3.0)
        started.update(NO_KEYS)
        assert fruit.y == pytest.approx(3.12)


class TestLevels:

    @pytest.mark.parametrize("caught,level", [(9, 0), (10, 1), (19, 1), (20, 2)])
    def test_level_is_score_div_ten(self, started, caught, level):
        for _ in range(caught):
            make_fruit(started)
        started.update(NO_KEYS)
        assert started.get_score() == caught
        assert started.level == level

    def test_basket_speed_grows_with_level(self, started):
        started.update(RIGHT)
        assert started.basket.x == 452.0 + 7
        for _ in range(10):
            make_fruit(started, x=started.basket.x + 20)
        started.update(NO_KEYS)
        assert started.level == 1
        started.update(LEFT)
        assert started.basket.x == 452.0 + 7 - 8

    def test_basket_stops_at_wall(self, started):
        for _ in range(100):
            started.update(LEFT)
        assert started.basket.x >= 0
        assert started.basket.x < 7


class TestBomb:

    def test_bomb_ends_game(self, started):
        make_fruit(started, kind=FruitKind.BOMB)
        started.update(NO_KEYS)
        assert started.state == GameState.GAME_OVER
        assert started.fruits == []

    def test_world_is_frozen_after_game_over(self, started):
        make_fruit(started)
        started.update(NO_KEYS)
        make_fruit(started, kind=FruitKind.BOMB)
        other = make_fruit(started, x=10.0, y=100.0)
        started.update(NO_KEYS)

        frame, basket_x, other_y = started.frame, started.basket.x, other.y
        for _ in range(200):
            started.update(LEFT)
        assert started.frame == frame
        assert started.basket.x == basket_x
        assert other.y == other_y
        assert started.get_score() == 1

    def test_fruit_after_bomb_are_left_unprocessed(self, started):
        make_fruit(started, kind=FruitKind.BOMB)
        after = make_fruit(started)
        started.update(NO_KEYS)
        assert started.fruits == [after]
        assert after.y == CATCH_Y
        assert started.get_score() == 0

    def test_confirm_restarts(self, started):
        for _ in range(12):
            make_fruit(started)
        started.update(NO_KEYS)
        make_fruit(started, kind=FruitKind.BOMB)
        make_fruit(started, x=10.0, y=100.0)
        started.update(NO_KEYS)
        assert started.state == GameState.GAME_OVER

        started.update(CONFIRM)
        assert started.state == GameState.PLAYING
        assert started.get_score() == 0
        assert started.level == 0
        assert started.fruits == []
        assert started.session_best == 12


class TestPause:

    def test_pause_and_resume(self, started):
        fruit = make_fruit(started, x=10.0, y=100.0)
        started.update(PAUSE)
        assert started.state == GameState.PAUSED

        frame, y = started.frame, fruit.y
        started.update(PAUSE)
        started.update(RIGHT)
        assert started.state == GameState.PAUSED
        assert started.frame == frame
        assert fruit.y == y

        started.update(CONFIRM)
        assert started.state == GameState.PLAYING
        started.update(NO_KEYS)
        assert fruit.y > y

    def test_pause_keeps_score(self, started):
        make_fruit(started)
        started.update(NO_KEYS)
        started.update(PAUSE)
        started.update(CONFIRM)
        assert started.get_score() == 1


class TestDraw:

    @pytest.mark.parametrize("keys", [NO_KEYS, PAUSE])
    def test_draw_smoke(self, started, keys):
        make_fruit(started, x=10.0, y=100.0)
        started.update(keys)
        screen = pygame.Surface((WIDTH, HEIGHT))
        started.draw(screen)
        if started.state == GameState.PLAYING:
            assert screen.get_at((WIDTH // 2, HEIGHT // 2))[:3] == config.BACKGROUND_COLOR

    def test_draw_game_over(self, started):
        make_fruit(started, kind=FruitKind.BOMB)
        started.update(NO_KEYS)
        screen = pygame.Surface((WIDTH, HEIGHT))
        started.draw(screen)
        assert screen.get_at((5, 300))[:3] != config.BACKGROUND_COLOR

    def test_draw_before_first_update(self, game):
        game.draw(pygame.Surface((WIDTH, HEIGHT)))

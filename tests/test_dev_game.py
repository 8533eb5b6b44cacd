"""Tests for the command-line launcher."""

import importlib

import pytest

import dev_game
from games.FruitCatch.game_mode import FruitCatchMode


@pytest.fixture
def launched(monkeypatch):
    """Replace run_game with a recorder; returns the list of launches."""
    calls = []

    def fake_run_game(game, resolution, title="", fps=60, fullscreen=False):
        calls.append({'game': game, 'resolution': resolution,
                      'title': title, 'fullscreen': fullscreen})
        return 0

    monkeypatch.setattr(dev_game, 'run_game', fake_run_game)
    return calls


class TestLauncher:

    def test_list(self, capsys, launched):
        assert dev_game.main(['--list']) == 0
        out = capsys.readouterr().out
        assert 'bouncingball' in out
        assert 'fruitcatch' in out
        assert '--spawn-interval' in out
        assert launched == []

    def test_no_game_prints_help(self, capsys, launched):
        assert dev_game.main([]) == 1
        assert 'usage' in capsys.readouterr().out
        assert launched == []

    def test_bad_resolution(self, capsys, launched):
        assert dev_game.main(['bouncingball', '--resolution', 'huge']) == 1
        assert launched == []

    def test_unknown_game_is_rejected(self, launched):
        with pytest.raises(SystemExit):
            dev_game.main(['pong'])

    def test_game_options_reach_the_game(self, launched):
        assert dev_game.main(['fruitcatch', '-r', '800x600',
                              '--spawn-interval', '30', '--seed', '5']) == 0
        (call,) = launched
        game = call['game']
        assert isinstance(game, FruitCatchMode)
        assert game.spawner.interval_frames == 30
        assert game.screen_size == (800, 600)
        assert call['resolution'].as_tuple == (800, 600)
        assert call['title'] == "Fruit Catch"
        assert not call['fullscreen']

    def test_game_options_of_other_games_are_rejected(self, launched):
        with pytest.raises(SystemExit):
            dev_game.main(['bouncingball', '--seed', '5'])

    def test_fullscreen(self, launched):
        dev_game.main(['bouncingball', '--fullscreen'])
        assert launched[0]['fullscreen']


class TestStandaloneEntryPoints:

    @pytest.mark.parametrize("module_name,title", [
        ('games.BouncingBall.main', "Hello, World!"),
        ('games.FruitCatch.main', "Fruit Catch"),
    ])
    def test_main_runs_game_with_config(self, monkeypatch, module_name, title):
        module = importlib.import_module(module_name)
        calls = []
        monkeypatch.setattr(module, 'run_game',
                            lambda game, resolution, **kwargs: calls.append((resolution, kwargs)) or 0)
        assert module.main() == 0
        (resolution, kwargs), = calls
        assert resolution.as_tuple == (1024, 768)
        assert kwargs == {'title': title, 'fps': 60}

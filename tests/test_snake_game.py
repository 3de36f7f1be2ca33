import json

import numpy as np
import pygame
import pytest

from config import UP, DOWN
from snake_game import SnakeGameScreen, START_MESSAGE
from wall import Wall


@pytest.fixture
def game(screen, clock, dialogs, tmp_path):
    return SnakeGameScreen(
        screen, clock, dialogs,
        settings_path=str(tmp_path / "settings.json"),
        highscores_path=str(tmp_path / "highscores.txt"),
        sounds_dir=str(tmp_path / "sounds"),
        mute=True,
        rng=np.random.default_rng(5),
    )


def crash_into_self(game):
    game.env.snake = [(5, 5), (6, 5), (6, 6), (5, 6), (4, 6)]
    game.env.direction = DOWN
    game.env.food_active = False
    game.env.walls = []


def test_waits_for_first_key(game):
    steps = game.env.steps
    game.update()
    assert not game.started
    assert game.env.steps == steps


def test_first_key_starts_and_turns(game):
    game.handle_key(pygame.K_w)
    assert game.started
    assert list(game.env.direction_queue) == [UP]

    game.update()
    assert game.env.direction == UP


def test_pause_stops_ticks(game):
    game.handle_key(pygame.K_RIGHT)
    game.handle_key(pygame.K_p)
    assert game.paused

    steps = game.env.steps
    game.update()
    assert game.env.steps == steps

    game.handle_key(pygame.K_p)
    assert not game.paused
    game.update()
    assert game.env.steps == steps + 1


def test_restart_waits_for_key(game, dialogs):
    game.handle_key(pygame.K_RIGHT)
    game.update()
    game.handle_key(pygame.K_r)

    assert not game.started
    assert game.env.steps == 0
    assert game.env.snake == [(10, 5)]
    assert dialogs.messages[-1][1] == START_MESSAGE


def test_escape_closes(game):
    game.handle_key(pygame.K_ESCAPE)
    assert not game.running
    assert not game.quit_requested


def test_game_over_records_score_and_closes(game, dialogs, tmp_path):
    game.handle_key(pygame.K_RIGHT)
    crash_into_self(game)
    game.env.score = 42

    game.update()

    assert (tmp_path / "highscores.txt").read_text() == "42\n"
    texts = [text for _, text in dialogs.messages]
    assert "Game Over! Your score: 42" in texts
    assert "High Scores:\n1. 42" in texts
    assert dialogs.questions == [("Snake Game", "Do you want to play again?")]
    assert not game.running
    assert game.games == 1


def test_game_over_play_again(game, dialogs):
    dialogs.answer = True
    game.handle_key(pygame.K_RIGHT)
    crash_into_self(game)

    game.update()

    assert game.running
    assert not game.started
    assert not game.env.done
    assert game.env.snake == [(10, 5)]
    assert dialogs.messages[-1][1] == START_MESSAGE


def test_default_settings_file_created(game, tmp_path):
    saved = json.loads((tmp_path / "settings.json").read_text())
    assert saved["speed"] == 10


def test_bad_settings_file_falls_back(screen, clock, dialogs, tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{broken")
    game = SnakeGameScreen(screen, clock, dialogs,
                           settings_path=str(path),
                           highscores_path=str(tmp_path / "highscores.txt"),
                           mute=True)
    assert dialogs.errors
    assert game.settings.speed == 10


def test_settings_not_utf8_falls_back(screen, clock, dialogs, tmp_path):
    path = tmp_path / "settings.json"
    path.write_bytes(b'\xff\xfe{"speed": 5}')
    game = SnakeGameScreen(screen, clock, dialogs,
                           settings_path=str(path),
                           highscores_path=str(tmp_path / "highscores.txt"),
                           mute=True)
    assert dialogs.errors
    assert game.settings.speed == 10


def test_settings_with_list_value_falls_back(screen, clock, dialogs, tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"direction": []}))
    game = SnakeGameScreen(screen, clock, dialogs,
                           settings_path=str(path),
                           highscores_path=str(tmp_path / "highscores.txt"),
                           mute=True)
    assert dialogs.errors
    assert game.settings.direction == 'right'


def test_highscores_not_utf8_reported(screen, clock, dialogs, tmp_path):
    path = tmp_path / "highscores.txt"
    path.write_bytes(b'10\n\xff\n')
    game = SnakeGameScreen(screen, clock, dialogs,
                           settings_path=str(tmp_path / "settings.json"),
                           highscores_path=str(path),
                           mute=True)
    assert dialogs.errors
    assert game.highscores is None
    game.draw()


def test_draw_all_objects(game):
    game.env.food = (3, 3)
    game.env.food_active = True
    game.env.food_timer = 40
    game.env.walls = [Wall([(7, 7), (7, 8)]), Wall([(20, 20)], flash_duration=1)]
    game.env.walls[1].tick()
    game.paused = True
    game.draw()


def test_run_returns_to_menu_on_escape(game):
    pygame.event.clear()
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
    assert game.run() is True


def test_run_reports_window_close(game):
    pygame.event.clear()
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    assert game.run() is False

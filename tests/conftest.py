import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import numpy as np
import pygame
import pytest

from config import WIDTH, HEIGHT
from env import SnakeEnv
from settings import Settings


class FakeDialogs:
    """Диалоги без окна: запоминают сообщения, на вопрос отвечают self.answer"""

    def __init__(self, answer=False):
        self.answer = answer
        self.messages = []
        self.errors = []
        self.questions = []

    def show_message(self, title, text):
        self.messages.append((title, text))

    def show_error(self, text):
        self.errors.append(text)

    def ask_yes_no(self, title, text):
        self.questions.append((title, text))
        return self.answer


@pytest.fixture
def env():
    game = SnakeEnv(width=40, height=30, settings=Settings(), rng=np.random.default_rng(0))
    # Еда не должна мешать тестам движения
    game.food_active = False
    game.food = None
    return game


@pytest.fixture(scope="session")
def screen():
    pygame.init()
    surface = pygame.display.set_mode((WIDTH, HEIGHT))
    yield surface
    pygame.quit()


@pytest.fixture
def clock():
    return pygame.time.Clock()


@pytest.fixture
def dialogs():
    return FakeDialogs()

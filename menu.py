"""
Стартовое меню "Arcade Hub": Snake, Tetris, Pong.
Готова только змейка, остальные пункты сообщают, что их ещё нет.
"""
import logging

import pygame

from config import (
    WIDTH, BACKGROUND, TEXT_COLOR, BUTTON_COLOR, BUTTON_ACTIVE, MENU_FPS,
    SETTINGS_FILE, HIGHSCORES_FILE, SOUNDS_DIR,
)
from snake_game import SnakeGameScreen

logger = logging.getLogger(__name__)

TITLE = "Arcade Hub"
ITEMS = ["Snake", "Tetris", "Pong"]

BUTTON_X = 350
BUTTON_Y = 250
BUTTON_STEP = 70
BUTTON_WIDTH = 300
BUTTON_HEIGHT = 50


class MainMenu:
    def __init__(self, screen, clock, dialogs,
                 settings_path=SETTINGS_FILE,
                 highscores_path=HIGHSCORES_FILE,
                 sounds_dir=SOUNDS_DIR,
                 mute=False):
        self.screen = screen
        self.clock = clock
        self.dialogs = dialogs
        self.settings_path = settings_path
        self.highscores_path = highscores_path
        self.sounds_dir = sounds_dir
        self.mute = mute

        self.title_font = pygame.font.SysFont('arial', 40, bold=True)
        self.font = pygame.font.SysFont('arial', 24)

        self.selected = 0
        self.running = True
        self.buttons = [
            pygame.Rect(BUTTON_X, BUTTON_Y + i * BUTTON_STEP, BUTTON_WIDTH, BUTTON_HEIGHT)
            for i in range(len(ITEMS))
        ]

    def open_snake(self):
        """Открыть змейку; после её закрытия меню возвращается"""
        logger.info("Starting Snake")
        game = SnakeGameScreen(
            self.screen, self.clock, self.dialogs,
            settings_path=self.settings_path,
            highscores_path=self.highscores_path,
            sounds_dir=self.sounds_dir,
            mute=self.mute,
        )
        keep_running = game.run()
        pygame.display.set_caption(TITLE)
        if not keep_running:
            self.running = False
        return game

    def activate(self, index):
        name = ITEMS[index]
        if name == "Snake":
            self.open_snake()
        else:
            self.dialogs.show_message(TITLE, f"{name} not implemented yet.")

    def handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key in (pygame.K_UP, pygame.K_w):
                    self.selected = (self.selected - 1) % len(ITEMS)
                elif event.key in (pygame.K_DOWN, pygame.K_s):
                    self.selected = (self.selected + 1) % len(ITEMS)
                elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE):
                    self.activate(self.selected)
            elif event.type == pygame.MOUSEMOTION:
                for i, rect in enumerate(self.buttons):
                    if rect.collidepoint(event.pos):
                        self.selected = i
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                for i, rect in enumerate(self.buttons):
                    if rect.collidepoint(event.pos):
                        self.selected = i
                        self.activate(i)
                        break
            if not self.running:
                break

    def draw(self):
        self.screen.fill(BACKGROUND)

        title = self.title_font.render(TITLE, True, TEXT_COLOR)
        self.screen.blit(title, title.get_rect(center=(WIDTH // 2, 170)))

        for i, (label, rect) in enumerate(zip(ITEMS, self.buttons)):
            pygame.draw.rect(self.screen, BUTTON_ACTIVE if i == self.selected else BUTTON_COLOR, rect)
            text = self.font.render(label, True, TEXT_COLOR)
            self.screen.blit(text, text.get_rect(center=rect.center))

        pygame.display.flip()

    def run(self):
        pygame.display.set_caption(TITLE)
        while self.running:
            self.handle_events()
            if not self.running:
                break
            self.draw()
            self.clock.tick(MENU_FPS)

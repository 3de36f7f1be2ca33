"""
Экран игры "Змейка".

Цикл: события -> тик симуляции -> отрисовка, темп задаёт settings.speed.
Все ошибки окружения (звук, файлы) показываются модальными диалогами.
"""
import logging

import pygame

from config import (
    PANEL_X, PANEL_Y, PANEL_WIDTH, PANEL_HEIGHT, UP, DOWN, LEFT, RIGHT,
    BACKGROUND, PANEL_BG, PANEL_BORDER, SNAKE, SNAKE_HEAD, FOOD, GRAY, LIME,
    WALL_FLASHING, WALL_SOLID, DARK_YELLOW, YELLOW, TEXT_COLOR, FOOD_BAR_HEIGHT,
    SETTINGS_FILE, HIGHSCORES_FILE, SOUNDS_DIR,
)
from env import SnakeEnv
from highscores import HighScores
from settings import Settings, SettingsError
from sound import SoundManager

logger = logging.getLogger(__name__)

TITLE = "Snake Game"
START_MESSAGE = "Press any key to start the game!"

DIRECTION_KEYS = {
    pygame.K_UP: UP,
    pygame.K_w: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_s: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_a: LEFT,
    pygame.K_RIGHT: RIGHT,
    pygame.K_d: RIGHT,
}


class SnakeGameScreen:
    def __init__(self, screen, clock, dialogs,
                 settings_path=SETTINGS_FILE,
                 highscores_path=HIGHSCORES_FILE,
                 sounds_dir=SOUNDS_DIR,
                 mute=False,
                 rng=None):
        self.screen = screen
        self.clock = clock
        self.dialogs = dialogs

        pygame.display.set_caption(TITLE)
        self.font = pygame.font.SysFont('arial', 16)
        self.big_font = pygame.font.SysFont('arial', 24, bold=True)
        self.title_font = pygame.font.SysFont('arial', 32, bold=True)

        self.settings = self._load_settings(settings_path)
        self.highscores = self._load_highscores(highscores_path)

        self.sound = SoundManager(sounds_dir, enabled=not mute)
        errors = self.sound.take_errors()
        if errors:
            self.dialogs.show_error("\n".join(errors))

        self.env = SnakeEnv(settings=self.settings, rng=rng)
        self.panel = pygame.Surface((PANEL_WIDTH, PANEL_HEIGHT))

        self.started = False
        self.paused = False
        self.running = True
        self.quit_requested = False
        self.games = 0

    def _load_settings(self, path):
        try:
            return Settings.load(path)
        except (SettingsError, OSError) as e:
            logger.error("Settings not loaded: %s", e)
            self.dialogs.show_error(f"An error occurred while loading settings: {e}")
            return Settings()

    def _load_highscores(self, path):
        try:
            return HighScores(path)
        except (OSError, ValueError) as e:
            logger.error("High scores not loaded: %s", e)
            self.dialogs.show_error(f"An error occurred while loading high scores: {e}")
            return None

    # --- Управление игрой -----------------------------------------------------

    def start(self):
        self.started = True
        self.sound.play_background()
        self._show_sound_errors()

    def restart(self):
        """Новая игра, ждём нажатия клавиши"""
        self.sound.stop_background()
        self.env.reset()
        self.started = False
        self.paused = False
        self.draw()
        self.dialogs.show_message(TITLE, START_MESSAGE)

    def toggle_pause(self):
        if not self.started:
            return
        self.paused = not self.paused
        if self.paused:
            self.sound.pause_background()
        else:
            self.sound.resume_background()

    def close(self):
        self.running = False

    def handle_key(self, key):
        if key == pygame.K_ESCAPE:
            self.close()
            return

        if key == pygame.K_r:
            self.restart()
            return

        if not self.started:
            self.start()

        if key == pygame.K_p:
            self.toggle_pause()
        elif key in DIRECTION_KEYS:
            self.env.queue_direction(DIRECTION_KEYS[key])

    def handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.quit_requested = True
                self.close()
            elif event.type == pygame.KEYDOWN:
                self.handle_key(event.key)

    def update(self):
        """Один тик, если игра идёт"""
        if not self.started or self.paused or self.env.done:
            return
        ate, done = self.env.step()
        if ate:
            self.sound.play('eat')
        if done:
            self.game_over()

    def game_over(self):
        self.games += 1
        score = self.env.score
        self.sound.stop_background()
        self.sound.play('gameover')
        self.draw()

        if self.highscores is not None:
            try:
                self.highscores.add_score(score)
            except OSError as e:
                logger.error("High scores not saved: %s", e)
                self.dialogs.show_error(f"An error occurred while saving high scores: {e}")

        self.dialogs.show_message(TITLE, f"Game Over! Your score: {score}")
        if self.highscores is not None:
            self.dialogs.show_message("High Scores", self.highscores.format_table())

        if self.dialogs.ask_yes_no(TITLE, "Do you want to play again?"):
            self.restart()
        else:
            self.close()

    def _show_sound_errors(self):
        errors = self.sound.take_errors()
        if errors:
            self.dialogs.show_error("\n".join(errors))

    def run(self):
        """
        Главный цикл экрана.
        Возвращает False, если закрыли окно (выход из приложения).
        """
        self.draw()
        self.dialogs.show_message(TITLE, START_MESSAGE)

        while self.running:
            self.handle_events()
            if not self.running:
                break
            self.update()
            self.draw()
            self.clock.tick(self.settings.speed)

        self.sound.stop_all()
        return not self.quit_requested

    # --- Отрисовка ------------------------------------------------------------

    def cell_rect(self, x, y):
        size = self.settings.size
        return pygame.Rect(x * size, y * size, size, size)

    def draw_walls(self):
        for wall in self.env.walls:
            if wall.is_solid:
                color = WALL_SOLID
            else:
                # Мигание: два тика ярко, два тика тускло
                color = WALL_FLASHING if wall.flash_counter % 4 < 2 else DARK_YELLOW
            for x, y in wall.blocks:
                pygame.draw.rect(self.panel, color, self.cell_rect(x, y))

    def draw_snake(self):
        for i, (x, y) in enumerate(self.env.snake):
            color = SNAKE_HEAD if i == 0 else SNAKE  # Голова темнее
            pygame.draw.ellipse(self.panel, color, self.cell_rect(x, y))

    def draw_food(self):
        """Еда тускнеет по мере старения, под ней полоска таймера"""
        if not self.env.food_active:
            return
        size = self.settings.size
        remaining = self.env.food_remaining
        fx, fy = self.env.food

        food_surf = pygame.Surface((size, size), pygame.SRCALPHA)
        pygame.draw.ellipse(food_surf, FOOD + (int(remaining * 255),), food_surf.get_rect())
        self.panel.blit(food_surf, (fx * size, fy * size))

        bar = pygame.Rect(fx * size, fy * size + size + 2, size, FOOD_BAR_HEIGHT)
        pygame.draw.rect(self.panel, GRAY, bar)
        pygame.draw.rect(self.panel, LIME, (bar.x, bar.y, int(size * remaining), FOOD_BAR_HEIGHT))

    def draw_hud(self):
        score = self.font.render(f"Score: {self.env.score}", True, TEXT_COLOR)
        self.panel.blit(score, (5, 5))

        if self.paused:
            text = self.big_font.render("Paused", True, YELLOW)
            self.panel.blit(text, text.get_rect(center=(PANEL_WIDTH // 2, PANEL_HEIGHT // 2)))

    def draw(self):
        self.screen.fill(BACKGROUND)

        title = self.title_font.render(TITLE, True, TEXT_COLOR)
        self.screen.blit(title, title.get_rect(center=(self.screen.get_width() // 2, PANEL_Y // 2 - 10)))

        self.panel.fill(PANEL_BG)
        self.draw_walls()
        self.draw_snake()
        self.draw_food()
        self.draw_hud()
        self.screen.blit(self.panel, (PANEL_X, PANEL_Y))
        pygame.draw.rect(self.screen, PANEL_BORDER,
                         (PANEL_X - 2, PANEL_Y - 2, PANEL_WIDTH + 4, PANEL_HEIGHT + 4), 2)

        best = self.highscores.best if self.highscores is not None else 0
        hints = f"Best: {best}    Arrows/WASD move    P pause    R restart    Esc menu"
        hint = self.font.render(hints, True, TEXT_COLOR)
        self.screen.blit(hint, (PANEL_X, PANEL_Y - hint.get_height() - 4))

        pygame.display.flip()

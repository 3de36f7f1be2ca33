"""
Звук через pygame.mixer.

Фоновая музыка зациклена, эффекты играют "выстрелил и забыл".
Если файла нет или mixer не поднялся - звук просто пропускается,
а текст ошибки копится в self.errors, чтобы экран показал его в диалоге.
"""
import logging
import os

import pygame

from config import SOUNDS_DIR

logger = logging.getLogger(__name__)

BACKGROUND_FILE = "background.wav"
GAME_OVER_FILE = "gameover.wav"
EAT_FILE = "eat.wav"


class SoundManager:
    def __init__(self, sounds_dir=SOUNDS_DIR, enabled=True):
        self.sounds_dir = sounds_dir
        self.enabled = enabled
        self.ok = False
        self.errors = []

        self.background_path = None
        self.effects = {}
        self._music_started = False

        if enabled:
            self._init_mixer()

    def _init_mixer(self):
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
        except pygame.error as e:
            self._report(f"An error occurred during sound initialization: {e}")
            return

        self.ok = True

        background = os.path.join(self.sounds_dir, BACKGROUND_FILE)
        if os.path.exists(background):
            self.background_path = background
        else:
            self._report("Background sound file not found.")

        self.effects['gameover'] = self._load_effect(GAME_OVER_FILE, "Game Over sound file not found.")
        self.effects['eat'] = self._load_effect(EAT_FILE, "Eat sound file not found.")

    def _load_effect(self, filename, missing_message):
        path = os.path.join(self.sounds_dir, filename)
        if not os.path.exists(path):
            self._report(missing_message)
            return None
        try:
            return pygame.mixer.Sound(path)
        except pygame.error as e:
            self._report(f"Could not load {filename}: {e}")
            return None

    def _report(self, message):
        logger.warning(message)
        self.errors.append(message)

    def take_errors(self):
        """Забрать накопленные ошибки (один раз)"""
        errors, self.errors = self.errors, []
        return errors

    @property
    def active(self):
        return self.enabled and self.ok

    # --- Фоновая музыка -----------------------------------------------------

    def play_background(self):
        if not self.active or self.background_path is None:
            return
        try:
            pygame.mixer.music.load(self.background_path)
            pygame.mixer.music.play(loops=-1)
            self._music_started = True
        except pygame.error as e:
            self._report(f"An error occurred while playing background music: {e}")

    def pause_background(self):
        if self.active and self._music_started:
            pygame.mixer.music.pause()

    def resume_background(self):
        if self.active and self._music_started:
            pygame.mixer.music.unpause()

    def stop_background(self):
        if self.active and self._music_started:
            pygame.mixer.music.stop()
            self._music_started = False

    # --- Эффекты ------------------------------------------------------------

    def play(self, name):
        if not self.active:
            return
        effect = self.effects.get(name)
        if effect is not None:
            effect.play()

    def stop_all(self):
        if not self.active:
            return
        self.stop_background()
        pygame.mixer.stop()

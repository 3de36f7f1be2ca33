"""
Настройки игры в JSON-файле.

Формат:
    {"speed": 10, "size": 20, "direction": "right", "score_increment": 10}
"""
import json
import logging
import os

from config import DIRECTION_NAMES, SETTINGS_FILE, PANEL_WIDTH, PANEL_HEIGHT

# Клетка не больше поля, иначе сетка 0xN
MAX_CELL_SIZE = min(PANEL_WIDTH, PANEL_HEIGHT)

logger = logging.getLogger(__name__)


class SettingsError(Exception):
    """Файл настроек не читается или содержит неверные значения"""


class Settings:
    def __init__(self, speed=10, size=20, direction='right', score_increment=10):
        self.speed = speed                        # тиков в секунду
        self.size = size                          # размер клетки в пикселях
        self.direction = direction                # стартовое направление
        self.score_increment = score_increment    # максимум очков за еду
        self.validate()

    def validate(self):
        if not isinstance(self.speed, int) or self.speed < 1:
            raise SettingsError(f"speed must be a positive integer, got {self.speed!r}")
        if not isinstance(self.size, int) or not 4 <= self.size <= MAX_CELL_SIZE:
            raise SettingsError(
                f"size must be an integer in 4..{MAX_CELL_SIZE}, got {self.size!r}")
        if not isinstance(self.score_increment, int) or self.score_increment < 0:
            raise SettingsError(
                f"score_increment must be a non-negative integer, got {self.score_increment!r}")
        if not isinstance(self.direction, str) or self.direction not in DIRECTION_NAMES:
            raise SettingsError(f"unknown direction {self.direction!r}")

    @property
    def direction_vector(self):
        return DIRECTION_NAMES[self.direction]

    def to_dict(self):
        return {
            'speed': self.speed,
            'size': self.size,
            'direction': self.direction,
            'score_increment': self.score_increment,
        }

    @classmethod
    def load(cls, path=SETTINGS_FILE):
        """Загрузить настройки; если файла нет - создать его со значениями по умолчанию"""
        if not os.path.exists(path):
            settings = cls()
            settings.save(path)
            logger.info("Created default settings at %s", path)
            return settings

        try:
            with open(path, 'r', encoding='utf-8') as f:
                raw = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise SettingsError(f"{path}: {e}") from e

        if not isinstance(raw, dict):
            raise SettingsError(f"{path}: expected a JSON object")

        defaults = cls().to_dict()
        unknown = set(raw) - set(defaults)
        if unknown:
            logger.warning("Ignoring unknown settings: %s", ", ".join(sorted(unknown)))
        defaults.update({k: v for k, v in raw.items() if k in defaults})

        return cls(**defaults)

    def save(self, path=SETTINGS_FILE):
        folder = os.path.dirname(path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(self.to_dict(), f, indent=2)

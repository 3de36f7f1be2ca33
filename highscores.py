"""
Таблица рекордов: текстовый файл, по одному числу в строке, лучшие 10.
"""
import logging
import os

from config import HIGHSCORES_FILE, MAX_HIGH_SCORES

logger = logging.getLogger(__name__)


def _parse_score(line):
    """Мусорные строки считаются нулём"""
    try:
        return int(line.strip())
    except ValueError:
        return 0


class HighScores:
    def __init__(self, path=HIGHSCORES_FILE, limit=MAX_HIGH_SCORES):
        self.path = path
        self.limit = limit
        self.scores = []
        self.load()

    def load(self):
        if not os.path.exists(self.path):
            self.scores = []
            return self.scores

        with open(self.path, 'r', encoding='utf-8') as f:
            lines = f.read().splitlines()

        self.scores = sorted((_parse_score(line) for line in lines), reverse=True)[:self.limit]
        return self.scores

    def add_score(self, score):
        """Добавить результат и сразу сохранить"""
        self.scores.append(int(score))
        self.scores = sorted(self.scores, reverse=True)[:self.limit]
        self.save()
        logger.info("Score %d recorded, best is %d", score, self.best)

    def save(self):
        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as f:
            f.write("\n".join(str(s) for s in self.scores))
            if self.scores:
                f.write("\n")

    @property
    def best(self):
        return self.scores[0] if self.scores else 0

    def format_table(self):
        lines = ["High Scores:"]
        for i, score in enumerate(self.scores):
            lines.append(f"{i + 1}. {score}")
        return "\n".join(lines)

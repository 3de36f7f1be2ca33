# Настройки игры
# Окно 1000x700, игровое поле 800x600 (при клетке 20px = 40x30 клеток)
WIDTH = 1000
HEIGHT = 700

# Игровое поле внутри окна
PANEL_X = 100
PANEL_Y = 80
PANEL_WIDTH = 800
PANEL_HEIGHT = 600

# Цвета
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
RED = (255, 0, 0)
GREEN = (0, 128, 0)
DARK_GREEN = (0, 100, 0)
LIME = (0, 255, 0)
GRAY = (128, 128, 128)
YELLOW = (255, 255, 0)
DARK_YELLOW = (160, 160, 0)
BLUE = (0, 139, 139)

BACKGROUND = (20, 20, 30)
PANEL_BG = BLACK
PANEL_BORDER = (150, 50, 50)
SNAKE_HEAD = DARK_GREEN
SNAKE = GREEN
FOOD = RED
WALL_FLASHING = YELLOW
WALL_SOLID = GRAY
TEXT_COLOR = WHITE
BUTTON_COLOR = (40, 40, 40)
BUTTON_ACTIVE = BLUE

# Направления
UP = (0, -1)
DOWN = (0, 1)
RIGHT = (1, 0)
LEFT = (-1, 0)

DIRECTION_NAMES = {
    'up': UP,
    'down': DOWN,
    'left': LEFT,
    'right': RIGHT,
}

# Стартовая позиция головы (в клетках)
START_HEAD = (10, 5)

# Еда: сколько тиков живёт и через сколько мс появляется новая
FOOD_MAX_TIME = 100
FOOD_RESPAWN_DELAY = 2000

# Стены
WALL_SPAWN_INTERVAL = 7000   # мс между попытками
WALL_FLASH_DURATION = 30     # тиков мигает (безопасна)
WALL_LIFETIME = 300          # тиков стоит твёрдой, потом исчезает
WALL_MIN_BLOCKS = 3
WALL_MAX_BLOCKS = 8

# Полоска таймера еды
FOOD_BAR_HEIGHT = 5

# Таблица рекордов
MAX_HIGH_SCORES = 10

# Файлы
SETTINGS_FILE = "settings.json"
HIGHSCORES_FILE = "highscores.txt"
SOUNDS_DIR = "resources/sounds"

# Частота отрисовки меню и диалогов
MENU_FPS = 30

from config import SETTINGS_FILE, HIGHSCORES_FILE, SOUNDS_DIR
from play import parse_args


def test_defaults():
    args = parse_args([])
    assert args.settings == SETTINGS_FILE
    assert args.highscores == HIGHSCORES_FILE
    assert args.sounds == SOUNDS_DIR
    assert not args.mute
    assert not args.snake


def test_flags():
    args = parse_args(['--snake', '--mute', '-v', '--settings', 'a.json', '--highscores', 'b.txt'])
    assert args.snake and args.mute and args.verbose
    assert args.settings == 'a.json'
    assert args.highscores == 'b.txt'

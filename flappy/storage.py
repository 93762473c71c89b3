"""Best score persistence in a small JSON key-value file."""

import json
import os

from .config import BEST_SCORE_KEY
from .logger import get_logger

log = get_logger(__name__)

DEFAULT_SCORES_FILE = '.flappy_bird.json'


def default_scores_path():
    """Score file in the user's home directory."""
    return os.path.join(os.path.expanduser('~'), DEFAULT_SCORES_FILE)


class ScoreStore:
    def __init__(self, path=None):
        self.path = path or default_scores_path()

    def _read(self):
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as exc:
            log.debug("Ignoring unreadable score file %s: %s", self.path, exc)
            return {}
        return data if isinstance(data, dict) else {}

    def get(self, key, default=None):
        return self._read().get(key, default)

    def set(self, key, value):
        data = self._read()
        data[key] = value
        try:
            with open(self.path, 'w', encoding='utf-8') as f:
                json.dump(data, f)
        except OSError as exc:
            log.warning("Could not save %s to %s: %s", key, self.path, exc)
            return False
        return True


def load_best_score(store):
    """Stored best score, 0 when there is none or it can't be read."""
    if store is None:
        return 0
    raw = store.get(BEST_SCORE_KEY)
    try:
        return max(0, int(raw))
    except (TypeError, ValueError):
        return 0


def save_best_score(store, value):
    if store is not None:
        store.set(BEST_SCORE_KEY, str(int(value)))


def reset_best_score(store):
    """Wipes the best score."""
    save_best_score(store, 0)
    log.info("Best score reset")

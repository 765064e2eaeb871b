
"""Key bindings and intent dispatch"""
from enum import Enum, auto
from typing import Dict, Optional

import pygame

from tetris_engine import BoardEngine


class Intent(Enum):
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    SOFT_DROP = auto()
    ROTATE = auto()
    HARD_DROP = auto()
    TOGGLE_PAUSE = auto()
    RESTART = auto()


KEY_BINDINGS: Dict[int, Intent] = {
    pygame.K_LEFT: Intent.MOVE_LEFT,
    pygame.K_RIGHT: Intent.MOVE_RIGHT,
    pygame.K_DOWN: Intent.SOFT_DROP,
    pygame.K_UP: Intent.ROTATE,
    pygame.K_SPACE: Intent.HARD_DROP,
    pygame.K_p: Intent.TOGGLE_PAUSE,
    pygame.K_r: Intent.RESTART,
}


def intent_for_key(key: int) -> Optional[Intent]:
    return KEY_BINDINGS.get(key)


def dispatch(engine: BoardEngine, intent: Intent):
    if intent is Intent.MOVE_LEFT: return engine.move_left()
    if intent is Intent.MOVE_RIGHT: return engine.move_right()
    if intent is Intent.SOFT_DROP: return engine.soft_drop()
    if intent is Intent.ROTATE: return engine.rotate()
    if intent is Intent.HARD_DROP: return engine.hard_drop()
    if intent is Intent.TOGGLE_PAUSE: return engine.toggle_pause()
    if intent is Intent.RESTART: return engine.restart()
    raise ValueError(f"unhandled intent {intent!r}")

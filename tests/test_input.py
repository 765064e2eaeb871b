import pygame

from tetris_engine import Status
from tetris_input import KEY_BINDINGS, Intent, dispatch, intent_for_key


def test_every_intent_has_a_key():
    assert set(KEY_BINDINGS.values()) == set(Intent)
    assert intent_for_key(pygame.K_SPACE) is Intent.HARD_DROP
    assert intent_for_key(pygame.K_p) is Intent.TOGGLE_PAUSE
    assert intent_for_key(pygame.K_q) is None


def test_dispatch_calls_engine(make_engine):
    e = make_engine(["O", "T"])
    e.spawn_next()
    assert dispatch(e, Intent.MOVE_LEFT)
    assert e.active.x == 3
    assert dispatch(e, Intent.MOVE_RIGHT)
    assert dispatch(e, Intent.SOFT_DROP)
    assert e.active.y == 1
    assert dispatch(e, Intent.ROTATE)
    assert dispatch(e, Intent.HARD_DROP) == 17
    assert dispatch(e, Intent.TOGGLE_PAUSE) is Status.PAUSED
    dispatch(e, Intent.RESTART)
    assert e.status is Status.PLAYING and e.score == 0


"""
Board engine: owns the playfield and the falling-piece lifecycle.

The engine is purely synchronous. Callers (timer, keyboard handler, tests)
issue intents and read snapshots; every operation runs to completion and is
at worst O(board area). Rejected moves are silent no-ops, and GameOver is a
terminal status rather than an error.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from tetris_board import Board, collide, drop_distance, empty_board, merge, overlay, sweep
from tetris_config import CONFIG, validate_config
from tetris_piece import Piece, try_rotate
from tetris_rng import UniformRandom, make_randomizer

logger = logging.getLogger(__name__)


class Status(Enum):
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class Snapshot:
    """Read-only view handed to renderers."""
    grid: Tuple[Tuple[Optional[str], ...], ...]
    ghost: Tuple[Tuple[int, int], ...]
    active_color: Optional[str]
    next_shape: Optional[Tuple[Tuple[int, ...], ...]]
    next_color: Optional[str]
    score: int
    lines: int
    status: Status


class BoardEngine:
    def __init__(self, config: Optional[Dict[str, Any]] = None, rng: Optional[UniformRandom] = None):
        self.config = validate_config(dict(CONFIG, **(config or {})))
        self.cols = int(self.config["COLS"])
        self.rows = int(self.config["ROWS"])
        self.rng = rng or make_randomizer(self.config["RANDOMIZER"], self.config["SEED"])
        self.board: Board = empty_board(self.cols, self.rows)
        self.active: Optional[Piece] = None
        self.next: Optional[Piece] = None
        self.score = 0
        self.lines = 0
        self.status = Status.PLAYING

    # ---------- lifecycle ----------
    def _generate(self) -> Piece:
        return Piece.spawn(self.rng.next_piece(), self.cols)

    def spawn_next(self) -> bool:
        """Promote the preview piece (or deal two on the first call).

        Returns False and ends the game when the new piece collides at its
        spawn position. A no-op returning False unless the game is playing.
        """
        if self.status is not Status.PLAYING:
            return False
        if self.next is None:
            self.active = self._generate()
            self.next = self._generate()
        else:
            self.active = self.next
            self.next = self._generate()
        if collide(self.board, self.active):
            self.status = Status.GAME_OVER
            logger.info("game over: %s blocked at spawn, score=%d lines=%d",
                        self.active.t, self.score, self.lines)
            return False
        logger.debug("spawned %s at (%d,%d), next %s",
                     self.active.t, self.active.x, self.active.y, self.next.t)
        return True

    def _can_act(self) -> bool:
        return self.status is Status.PLAYING and self.active is not None

    def _land(self) -> None:
        merge(self.board, self.active)
        cleared = sweep(self.board)
        if cleared:
            self.score += cleared * int(self.config["LINE_SCORE"])
            self.lines += cleared
            logger.debug("cleared %d row(s), score=%d", cleared, self.score)
        logger.debug("landed %s at (%d,%d)", self.active.t, self.active.x, self.active.y)
        self.spawn_next()

    # ---------- intents ----------
    def translate(self, dx: int, dy: int) -> bool:
        if not self._can_act():
            return False
        if not collide(self.board, self.active, dx, dy):
            self.active = self.active.moved(dx, dy)
            return True
        if dy > 0:
            self._land()
        return False

    def move_left(self) -> bool:
        return self.translate(-1, 0)

    def move_right(self) -> bool:
        return self.translate(1, 0)

    def soft_drop(self) -> bool:
        return self.translate(0, 1)

    def rotate(self) -> bool:
        if not self._can_act():
            return False
        turned = try_rotate(self.board, self.active, self.config["ROTATION_KICKS"])
        if turned is None:
            return False
        self.active = turned
        return True

    def hard_drop(self) -> int:
        if not self._can_act():
            return 0
        d = drop_distance(self.board, self.active)
        self.active = self.active.moved(0, d)
        self.score += d * int(self.config["HARD_DROP_PER_CELL"])
        self._land()
        return d

    def tick(self) -> None:
        """Drop-timer callback."""
        if self.status is not Status.PLAYING:
            return
        if self.active is None:
            self.spawn_next()
        else:
            self.soft_drop()

    def toggle_pause(self) -> Status:
        if self.status is Status.PLAYING:
            self.status = Status.PAUSED
        elif self.status is Status.PAUSED:
            self.status = Status.PLAYING
        else:
            return self.status
        logger.info("status -> %s", self.status.value)
        return self.status

    def restart(self) -> None:
        self.board = empty_board(self.cols, self.rows)
        self.active = None
        self.next = None
        self.score = 0
        self.lines = 0
        self.status = Status.PLAYING
        logger.info("restarted")

    # ---------- output ----------
    def snapshot(self) -> Snapshot:
        grid = overlay(self.board, self.active)
        ghost: Tuple[Tuple[int, int], ...] = ()
        if self.active is not None and self.status is not Status.GAME_OVER:
            d = drop_distance(self.board, self.active)
            ghost = tuple((x, y) for x, y in self.active.cells(0, d) if y >= 0)
        nxt = self.next
        return Snapshot(
            grid=tuple(tuple(row) for row in grid),
            ghost=ghost,
            active_color=self.active.color if self.active else None,
            next_shape=tuple(tuple(r) for r in nxt.shape) if nxt else None,
            next_color=nxt.color if nxt else None,
            score=self.score,
            lines=self.lines,
            status=self.status,
        )

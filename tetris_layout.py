"""Pixel geometry for the board and the side panel"""
from dataclasses import dataclass
from typing import Optional

from tetris_config import CONFIG

MARGIN = 16
PANEL_PAD = 12
PANEL_MIN_W = 180   # room for the controls legend
PREVIEW_CELLS = 4   # the preview box fits the 4x4 I matrix


@dataclass
class Dims:
    cell: int
    cols: int
    rows: int
    board_x: int
    board_y: int
    panel_x: int
    panel_w: int
    pv_cell: int
    pv_x: int
    pv_y: int

    @property
    def board_w(self) -> int:
        return self.cols * self.cell

    @property
    def board_h(self) -> int:
        return self.rows * self.cell

    @property
    def panel_y(self) -> int:
        return self.board_y

    @property
    def total_w(self) -> int:
        return self.panel_x + self.panel_w + MARGIN

    @property
    def total_h(self) -> int:
        return self.board_y + self.board_h + MARGIN

    def cell_origin(self, x: int, y: int):
        """Top-left pixel of board cell (x, y)."""
        return self.board_x + x * self.cell, self.board_y + y * self.cell


def compute_dims(cell: Optional[int] = None, cols: Optional[int] = None, rows: Optional[int] = None) -> Dims:
    cell = int(cell or CONFIG["CELL_SIZE"])
    cols = int(cols or CONFIG["COLS"])
    rows = int(rows or CONFIG["ROWS"])

    pv_cell = max(14, int(cell * 0.75))
    panel_x = MARGIN + cols * cell + MARGIN
    panel_w = max(PANEL_MIN_W, PREVIEW_CELLS * pv_cell + 2 * PANEL_PAD)

    return Dims(cell=cell, cols=cols, rows=rows,
                board_x=MARGIN, board_y=MARGIN,
                panel_x=panel_x, panel_w=panel_w,
                pv_cell=pv_cell, pv_x=panel_x + PANEL_PAD, pv_y=MARGIN + 120)


"""Piece model, shapes, clockwise rotation"""
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

SHAPES = {
    "I": [[0,0,0,0],[1,1,1,1],[0,0,0,0],[0,0,0,0]],
    "J": [[1,0,0],[1,1,1],[0,0,0]],
    "L": [[0,0,1],[1,1,1],[0,0,0]],
    "O": [[1,1],[1,1]],
    "S": [[0,1,1],[1,1,0],[0,0,0]],
    "T": [[0,1,0],[1,1,1],[0,0,0]],
    "Z": [[1,1,0],[0,1,1],[0,0,0]],
}

# Cell color identifiers written into the board
COLORS = {
    "I": "#00F0F0",
    "J": "#0000F0",
    "L": "#F0A000",
    "O": "#F0F000",
    "S": "#00F000",
    "T": "#A000F0",
    "Z": "#F00000",
}

Shape = List[List[int]]


def rotate_cw(m: Shape) -> Shape:
    """Transpose, then reverse each row."""
    return [list(r)[::-1] for r in zip(*m)]


@dataclass
class Piece:
    t: str
    shape: Shape
    color: str
    x: int
    y: int

    @staticmethod
    def spawn(t: str, cols: int = 10) -> "Piece":
        s = [r[:] for r in SHAPES[t]]
        return Piece(t, s, COLORS[t], cols // 2 - len(s[0]) // 2, 0)

    def moved(self, dx: int, dy: int) -> "Piece":
        return Piece(self.t, [r[:] for r in self.shape], self.color, self.x + dx, self.y + dy)

    def rotated(self) -> "Piece":
        return Piece(self.t, rotate_cw(self.shape), self.color, self.x, self.y)

    def cells(self, dx: int = 0, dy: int = 0) -> Iterator[Tuple[int, int]]:
        for y, row in enumerate(self.shape):
            for x, v in enumerate(row):
                if v:
                    yield self.x + dx + x, self.y + dy + y

# rotation

def try_rotate(board, piece: Piece, kicks: Sequence[Tuple[int, int]] = ((0, 0),)) -> Optional[Piece]:
    from tetris_board import collide
    turned = piece.rotated()
    for dx, dy in kicks:
        test = turned.moved(dx, dy)
        if not collide(board, test): return test
    return None


"""Board helpers: collide, merge, sweep, ghost, overlay"""
from typing import List, Optional
from tetris_piece import Piece

Board = List[List[Optional[str]]]


def empty_board(cols: int = 10, rows: int = 20) -> Board:
    return [[None] * cols for _ in range(rows)]


def collide(board: Board, piece: Piece, dx: int = 0, dy: int = 0) -> bool:
    rows, cols = len(board), len(board[0])
    for bx, by in piece.cells(dx, dy):
        if bx < 0 or bx >= cols or by >= rows: return True
        if by >= 0 and board[by][bx]: return True
    return False


def merge(board: Board, piece: Piece) -> None:
    """Write the piece color into the board; cells above the top are dropped."""
    rows, cols = len(board), len(board[0])
    for bx, by in piece.cells():
        if 0 <= by < rows and 0 <= bx < cols:
            board[by][bx] = piece.color


def sweep(board: Board) -> int:
    """Clear full rows in place and return how many were removed."""
    cols = len(board[0])
    kept = [row for row in board if any(c is None for c in row)]
    cleared = len(board) - len(kept)
    board[:] = [[None] * cols for _ in range(cleared)] + kept
    return cleared


def drop_distance(board: Board, piece: Piece) -> int:
    d = 0
    while not collide(board, piece, 0, d + 1):
        d += 1
    return d


def ghost_y(board: Board, piece: Piece) -> int:
    return piece.y + drop_distance(board, piece)


def overlay(board: Board, piece: Optional[Piece]) -> Board:
    """Copy of the board with the piece painted in."""
    out = [row[:] for row in board]
    if piece is not None:
        merge(out, piece)
    return out

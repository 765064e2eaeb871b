
"""
Rendering helpers for the board engine's snapshots.

- Pre-render the static background (grid + panel frame) once per Dims.
- Cache one block Surface per color (solid + ghost outline) and blit them.
- Cache HUD text surfaces; re-render only when values change.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Optional
from tetris_engine import Snapshot, Status
from tetris_layout import Dims

BG = (10,13,34)
GRID = (40,50,90)
TEXT = (200,210,240)
HINT = (165,175,215)

CONTROLS = [
    "←/→ Move",
    "↓ Soft drop",
    "↑ Rotate",
    "Space Hard drop",
    "P Pause • R Restart",
]

@dataclass
class HudCache:
    score: int = -1
    lines: int = -1
    score_s: Optional[pygame.Surface] = None
    lines_s: Optional[pygame.Surface] = None

class Renderer:
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: Optional[pygame.font.Font] = None):
        self.dims = dims
        self.font = font
        self.big_font = big_font or font
        self.cell_surf: Dict[str, pygame.Surface] = {}
        self.ghost_surf: Dict[str, pygame.Surface] = {}
        self.hud = HudCache()
        self._make_static()

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill(BG)
        for x in range(d.cols+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, GRID, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(d.rows+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, GRID, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (21,25,53), panel_rect)
        pygame.draw.rect(self.bg, (50,60,100), panel_rect, 1)
        frame = pygame.Rect(d.pv_x-6, d.pv_y-6, d.pv_cell*4+12, d.pv_cell*4+12)
        pygame.draw.rect(self.bg, (15,18,40), frame)
        pygame.draw.rect(self.bg, (55,65,110), frame, 1)
        self.controls = [self.font.render("Controls:", True, TEXT)]
        self.controls += [self.font.render(c, True, HINT) for c in CONTROLS]

    # ---------- Cell sprites, built on first use per color ----------
    def _cell(self, color: str, size: int) -> pygame.Surface:
        key = f"{color}:{size}"
        if key not in self.cell_surf:
            s = pygame.Surface((size-2, size-2))
            s.fill(pygame.Color(color))
            self.cell_surf[key] = s
        return self.cell_surf[key]

    def _ghost(self, color: str) -> pygame.Surface:
        if color not in self.ghost_surf:
            c = self.dims.cell
            g = pygame.Surface((c-8, c-8), pygame.SRCALPHA)
            pygame.draw.rect(g, pygame.Color(color), (0,0,c-8,c-8), 2)
            self.ghost_surf[color] = g
        return self.ghost_surf[color]

    # ---------- Frame ----------
    def draw(self, screen: pygame.Surface, snap: Snapshot):
        d = self.dims
        screen.blit(self.bg, (0,0))
        for y, row in enumerate(snap.grid):
            for x, color in enumerate(row):
                if color:
                    X, Y = d.cell_origin(x, y)
                    screen.blit(self._cell(color, d.cell), (X + 1, Y + 1))
        # Ghost only where the grid is still empty
        if snap.active_color:
            for x, y in snap.ghost:
                if not snap.grid[y][x]:
                    X, Y = d.cell_origin(x, y)
                    screen.blit(self._ghost(snap.active_color), (X + 4, Y + 4))
        self.draw_panel(screen, snap)
        if snap.status is Status.PAUSED:
            self._banner(screen, "PAUSED  (P to Resume)", (220,240,255))
        elif snap.status is Status.GAME_OVER:
            self._banner(screen, "GAME OVER  (R to Restart)", (255,220,220))

    def _banner(self, screen: pygame.Surface, text: str, color):
        d = self.dims
        msg = self.big_font.render(text, True, color)
        rect = msg.get_rect(center=(d.board_x + d.board_w // 2, d.board_y + d.board_h // 2))
        screen.blit(msg, rect)

    # ---------- HUD / Panel ----------
    def draw_panel(self, screen: pygame.Surface, snap: Snapshot):
        d = self.dims
        f = self.font
        if snap.score != self.hud.score:
            self.hud.score = snap.score
            self.hud.score_s = f.render(f"Score: {snap.score}", True, TEXT)
        if snap.lines != self.hud.lines:
            self.hud.lines = snap.lines
            self.hud.lines_s = f.render(f"Lines: {snap.lines}", True, TEXT)
        screen.blit(self.hud.score_s, (d.panel_x + 12, d.panel_y + 12))
        screen.blit(self.hud.lines_s, (d.panel_x + 12, d.panel_y + 36))
        screen.blit(f.render("Next:", True, TEXT), (d.panel_x + 12, d.panel_y + 94))
        if snap.next_shape is not None:
            shape = snap.next_shape
            offx = (4 - len(shape[0])) // 2
            offy = max(0, (4 - len(shape)) // 2)
            for y, row in enumerate(shape):
                for x, v in enumerate(row):
                    if v:
                        screen.blit(self._cell(snap.next_color, d.pv_cell),
                                    (d.pv_x + (x+offx)*d.pv_cell + 1, d.pv_y + (y+offy)*d.pv_cell + 1))
        y = d.pv_y + d.pv_cell*4 + 16
        for surf in self.controls:
            screen.blit(surf, (d.panel_x + 12, y)); y += 20

# gridpath/app/viewer.py
#!/usr/bin/env python3
"""
gridpath Viewer — animates AStarAlgo.step() on a board.

- Keyboard:
    [SPACE]      -> run/pause
    [N]          -> single step
    [R]          -> reset
    [+]/[-]      -> steps/sec
    [Q]/[ESC]    -> quit

Overlays: cyan = in the frontier, magenta = expanded, mint line = route.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple
import logging
import sys
import time

import pygame

from gridpath.app.config import Settings
from gridpath.core.astar import AStarAlgo
from gridpath.core.types import Board, Cell, CellState

logger = logging.getLogger(__name__)

PANEL_W = 280
MARGIN = 16
CELL_MIN, CELL_MAX = 8, 32
MAX_START_H = 720
BUTTON_H = 36
FONT_NAME = None  # default pygame font

BACKGROUND  = (24, 26, 32)
OBSTACLE    = (0, 0, 0)
FREE        = (200, 200, 200)
GRID_LINE   = (0, 0, 0)
FRONTIER_A  = (0, 150, 255, 110)
EXPANDED_A  = (255, 0, 120, 90)
ROUTE       = (0, 255, 200)
START_BADGE = (70, 130, 180)
GOAL_BADGE  = (220, 50, 47)
TEXT        = (230, 235, 240)
HEADING     = (255, 210, 0)
BUTTON_IDLE = (40, 44, 54)
BUTTON_ON   = (58, 86, 160)

FINISHED = {
    "done": "Done",
    "no_path": "No path",
    "cancelled": "Cancelled",
}


@dataclass
class PanelButton:
    label: str
    action: Callable[[], None]
    rect: pygame.Rect
    lit: Callable[[], bool] = lambda: False

    def draw(self, screen: pygame.Surface, font: pygame.font.Font) -> None:
        pygame.draw.rect(screen, BUTTON_ON if self.lit() else BUTTON_IDLE, self.rect, border_radius=8)
        text = font.render(self.label, True, TEXT)
        screen.blit(text, text.get_rect(center=self.rect.center))


def fit_cell_size(board: Board, win_w: int, win_h: int) -> int:
    """Largest cell size in [CELL_MIN, CELL_MAX] that fits the grid area."""
    by_w = (win_w - PANEL_W - 2 * MARGIN) // max(1, board.width)
    by_h = (win_h - 2 * MARGIN) // max(1, board.height)
    return max(CELL_MIN, min(CELL_MAX, by_w, by_h))


class Viewer:
    def __init__(self, board: Board, start: Cell, goal: Cell, settings: Optional[Settings] = None):
        settings = settings or Settings()
        self.algo = AStarAlgo(path_mode=settings.path_mode)
        self.algo.init(board, start, goal)  # validates before a window opens

        self.board = board
        self.start = tuple(start)
        self.goal = tuple(goal)
        self.steps_per_sec = settings.steps_per_sec
        self.running = False
        self.state = "Idle"
        self.open_set: set = set()
        self.closed_set: set = set()
        self.path: List[Cell] = []
        self._last_metrics: Dict = {}
        self._last_step_t = 0.0

        pygame.init()
        self.font = pygame.font.Font(FONT_NAME, 18)
        self.font_small = pygame.font.Font(FONT_NAME, 14)
        self.clock = pygame.time.Clock()

        side = min(CELL_MAX, (MAX_START_H - 2 * MARGIN) // max(1, board.height))
        win_w = PANEL_W + 2 * MARGIN + board.width * max(CELL_MIN, side)
        win_h = max(420, 2 * MARGIN + board.height * max(CELL_MIN, side))
        self.screen = pygame.display.set_mode((win_w, win_h), pygame.RESIZABLE)
        pygame.display.set_caption(f"gridpath — A* {self.start} -> {self.goal}")
        self._layout(win_w, win_h)
        self._reset_overlays()

        self._keys: Dict[int, Callable[[], None]] = {
            pygame.K_SPACE: self._toggle_run,
            pygame.K_n: self._do_step,
            pygame.K_r: self._reset,
            pygame.K_PLUS: lambda: self._bump_speed(+1),
            pygame.K_EQUALS: lambda: self._bump_speed(+1),
            pygame.K_MINUS: lambda: self._bump_speed(-1),
            pygame.K_UNDERSCORE: lambda: self._bump_speed(-1),
        }

    # ---------- layout ----------
    def _layout(self, win_w: int, win_h: int) -> None:
        self.cell_size = fit_cell_size(self.board, win_w, win_h)
        grid_h = self.board.height * self.cell_size
        self._grid_origin = (MARGIN, max(MARGIN, (win_h - grid_h) // 2))
        panel_x = MARGIN * 2 + self.board.width * self.cell_size

        labels: List[Tuple[str, Callable[[], None], Callable[[], bool]]] = [
            ("Run / Pause", self._toggle_run, lambda: self.running),
            ("Step Once", self._do_step, lambda: False),
            ("Reset", self._reset, lambda: False),
            ("Speed +", lambda: self._bump_speed(+1), lambda: False),
            ("Speed -", lambda: self._bump_speed(-1), lambda: False),
        ]
        top = MARGIN + 7 * 26
        self._buttons = [
            PanelButton(label, action, pygame.Rect(panel_x, top + i * (BUTTON_H + 8), PANEL_W - MARGIN, BUTTON_H), lit)
            for i, (label, action, lit) in enumerate(labels)
        ]
        self._panel_origin = (panel_x, MARGIN)

    def _cell_rect(self, cell: Cell) -> pygame.Rect:
        row, col = cell
        ox, oy = self._grid_origin
        cs = self.cell_size
        return pygame.Rect(ox + col * cs, oy + row * cs, cs, cs)

    # ---------- loop ----------
    def run(self):
        while True:
            self._handle_events()
            if self.running and time.time() - self._last_step_t >= 1.0 / self.steps_per_sec:
                self._last_step_t = time.time()
                self._do_step()
            self._draw()
            self.clock.tick(60)

    def _handle_events(self):
        for e in pygame.event.get():
            if e.type == pygame.QUIT or (e.type == pygame.KEYDOWN and e.key in (pygame.K_ESCAPE, pygame.K_q)):
                pygame.quit()
                sys.exit(0)
            if e.type == pygame.KEYDOWN and e.key in self._keys:
                self._keys[e.key]()
            elif e.type == pygame.VIDEORESIZE:
                self.screen = pygame.display.set_mode((e.w, e.h), pygame.RESIZABLE)
                self._layout(e.w, e.h)
            elif e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
                for b in self._buttons:
                    if b.rect.collidepoint(e.pos):
                        b.action()

    # ---------- algorithm ----------
    def _do_step(self):
        res = self.algo.step()
        self.open_set.update(res.opened)
        self.open_set.difference_update(res.closed)
        self.closed_set.update(res.closed)
        if res.path is not None:
            self.path = res.path
        if res.status in FINISHED:
            if self.state != FINISHED[res.status]:
                logger.info("search finished: %s (%s)", res.status, res.metrics)
            self.state = FINISHED[res.status]
            self.running = False
        else:
            self.state = "Running" if self.running else "Idle"
        self._last_metrics = res.metrics

    def _reset_overlays(self):
        self.open_set = set(self.algo.frontier.cells())
        self.closed_set = set()
        self.path = []
        self._last_metrics = self.algo.metrics()

    def _reset(self):
        self.running = False
        self.state = "Idle"
        self.algo.reset()
        self._reset_overlays()

    def _toggle_run(self):
        if self.state in FINISHED.values():
            return
        self.running = not self.running
        self.state = "Running" if self.running else "Paused"

    def _bump_speed(self, dv: int):
        self.steps_per_sec = max(1, min(60, self.steps_per_sec + dv))

    def panel_lines(self) -> List[str]:
        m = self._last_metrics
        return [
            f"Popped: {m.get('popped', 0)}",
            f"Open: {m.get('open_size', 0)}",
            f"Visited: {m.get('visited_count', 0)}",
            f"Path Len: {m.get('path_len', 0)}",
            f"State: {self.state}",
            f"Speed: {self.steps_per_sec} steps/s",
        ]

    # ---------- drawing ----------
    def _draw(self):
        self.screen.fill(BACKGROUND)
        self._draw_board()
        self._draw_panel()
        pygame.display.flip()

    def _shade(self, cells, rgba):
        tint = pygame.Surface((self.cell_size, self.cell_size), pygame.SRCALPHA)
        tint.fill(rgba)
        for c in cells:
            self.screen.blit(tint, self._cell_rect(c).topleft)

    def _draw_board(self):
        for cell, state in self.board.cells():
            rect = self._cell_rect(cell)
            pygame.draw.rect(self.screen, OBSTACLE if state is CellState.OBSTACLE else FREE, rect)
            pygame.draw.rect(self.screen, GRID_LINE, rect, 1)
        self._shade(self.closed_set, EXPANDED_A)
        self._shade(self.open_set, FRONTIER_A)
        if len(self.path) >= 2:
            pygame.draw.lines(self.screen, ROUTE, False, [self._cell_rect(c).center for c in self.path], 5)
        for cell, label, color in ((self.start, "S", START_BADGE), (self.goal, "G", GOAL_BADGE)):
            rect = self._cell_rect(cell)
            pygame.draw.circle(self.screen, color, rect.center, max(4, self.cell_size // 2 - 2))
            txt = self.font_small.render(label, True, TEXT)
            self.screen.blit(txt, txt.get_rect(center=rect.center))

    def _draw_panel(self):
        x, y = self._panel_origin
        self.screen.blit(self.font.render("Metrics", True, HEADING), (x, y))
        for i, text in enumerate(self.panel_lines(), start=1):
            self.screen.blit(self.font.render(text, True, TEXT), (x, y + i * 26))
        for b in self._buttons:
            b.draw(self.screen, self.font)


def run_viewer(board: Board, start: Cell, goal: Cell, settings: Optional[Settings] = None) -> None:
    Viewer(board, start, goal, settings).run()

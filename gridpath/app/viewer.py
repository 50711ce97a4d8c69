# gridpath/app/viewer.py
#!/usr/bin/env python3
"""
Pathfinding viewer: click cells to toggle obstacles, the route follows.

- Mouse:
    [LEFT CLICK] -> toggle obstacle under the cursor
- Keyboard:
    [R]          -> clear all obstacles
    [Q]/[ESC]    -> quit

Config: GRIDPATH_SIZE / --size=N, GRIDPATH_FPS / --fps=N, GRIDPATH_QUEUE / --queue=N
"""

import sys
from typing import List, Tuple, Optional

import pygame

from gridpath.config import Config, load_config, WINDOW_TITLE, WINDOW_W, WINDOW_H
from gridpath.core.grid import Grid, GridInitError
from gridpath.core.ticker import TickOrchestrator
from gridpath.core.types import Cell, Frame
from gridpath.log import log_info, log_error

PANEL_W = 260            # right band: metrics + buttons
GRID_MARGIN = 16
FONT_NAME = None  # default pygame font

# Colors
BLACK       = (  0,  0,  0)
WHITE       = (255,255,255)
BLOCK_BLUE  = (128,128,255)
FREE_GRAY   = ( 38, 42, 52)
PATH_WHITE  = (255,255,255)
CARD_BG     = (24,28,36,220)
CARD_HI     = (255,255,255,18)
TEXT_LIGHT  = (230,235,240)
ACCENT_GOLD = (255,210,0)
NO_PATH_RED = (220, 50, 47)

TILE_FILL = 35 / 40      # drawn square vs cell pitch
PATH_DOT = 5 / 40


# ---------- Pointer -> grid ----------
def pixel_to_cell(pos: Tuple[int, int], origin: Tuple[int, int],
                  cell_size: int, size: int) -> Optional[Cell]:
    """Grid cell under a window pixel, or None if the pixel is off the grid."""
    px, py = pos
    ox, oy = origin
    dx, dy = px - ox, py - oy
    if dx < 0 or dy < 0 or cell_size <= 0:
        return None
    x, y = dx // cell_size, dy // cell_size
    if x >= size or y >= size:
        return None
    return (int(x), int(y))


def cell_center(c: Cell, origin: Tuple[int, int], cell_size: int) -> Tuple[int, int]:
    x, y = c
    ox, oy = origin
    return (ox + x*cell_size + cell_size//2, oy + y*cell_size + cell_size//2)


# ---------- Simple UI Button ----------
class UIButton:
    def __init__(self, label: str, rect: pygame.Rect, callback):
        self.label = label
        self.rect = rect
        self.callback = callback
        self.hover = False

    def draw(self, screen: pygame.Surface, font: pygame.font.Font):
        base = pygame.Surface(self.rect.size, pygame.SRCALPHA)
        bg = (46, 50, 60, 230) if self.hover else (36, 40, 48, 220)
        pygame.draw.rect(base, bg, base.get_rect(), border_radius=10)

        # subtle highlight top band
        hi = pygame.Surface((self.rect.width, 18), pygame.SRCALPHA)
        pygame.draw.rect(hi, (255,255,255,20), hi.get_rect(), border_radius=10)
        base.blit(hi, (0,0))

        screen.blit(base, self.rect.topleft)
        text = font.render(self.label, True, (235,238,242))
        screen.blit(text, text.get_rect(center=self.rect.center))

    def handle_mouse(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEMOTION:
            self.hover = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.callback()
                return True
        return False


# ---------- Viewer ----------
class Viewer:
    def __init__(self, grid: Grid, cfg: Config):
        pygame.init()

        self.cfg = cfg
        self.orchestrator = TickOrchestrator(grid, publish=self._on_frame,
                                             capacity=cfg.queue_capacity)
        self.frame: Optional[Frame] = None

        self.font_small = pygame.font.Font(FONT_NAME, 14)
        self.font = pygame.font.Font(FONT_NAME, 18)
        self.font_big = pygame.font.Font(FONT_NAME, 22)

        self.screen = pygame.display.set_mode((WINDOW_W, WINDOW_H))
        pygame.display.set_caption(WINDOW_TITLE)

        self._buttons: List[UIButton] = []
        self._layout(WINDOW_W, WINDOW_H)

        self.clock = pygame.time.Clock()

    # ---------- layout ----------
    def _layout(self, win_w: int, win_h: int):
        """Integer cell size that fits the window, grid centered left of the panel."""
        size = self.orchestrator.grid.size
        avail_w = max(1, win_w - PANEL_W - 2 * GRID_MARGIN)
        avail_h = max(1, win_h - 2 * GRID_MARGIN)
        self.cell_size = int(max(4, min(avail_w // size, avail_h // size)))

        grid_px = size * self.cell_size
        left_x = max(GRID_MARGIN, (win_w - PANEL_W - grid_px) // 2)
        top_y = max(GRID_MARGIN, (win_h - grid_px) // 2)
        self._grid_origin = (left_x, top_y)
        self._right_band = pygame.Rect(win_w - PANEL_W, 0, PANEL_W, win_h)
        self._build_buttons()

    def _build_buttons(self):
        self._buttons.clear()
        rb = self._right_band
        rect = pygame.Rect(rb.x + 16, rb.y + 250, rb.width - 32, 38)
        self._buttons.append(UIButton("Clear obstacles", rect, self._clear_blocks))

    def run(self):
        while True:
            self._handle_events()
            self.orchestrator.tick()
            self._draw()
            self.clock.tick(self.cfg.fps)

    def _on_frame(self, frame: Frame):
        self.frame = frame

    # ---------- input ----------
    def _handle_events(self):
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit(0)
            elif e.type == pygame.KEYDOWN:
                if e.key in (pygame.K_ESCAPE, pygame.K_q):
                    pygame.quit(); sys.exit(0)
                elif e.key == pygame.K_r:
                    self._clear_blocks()
            elif e.type in (pygame.MOUSEMOTION, pygame.MOUSEBUTTONDOWN):
                if any(b.handle_mouse(e) for b in self._buttons):
                    continue
                if e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
                    self._click(e.pos)

    def _click(self, pos: Tuple[int, int]):
        c = pixel_to_cell(pos, self._grid_origin, self.cell_size,
                          self.orchestrator.grid.size)
        log_info(f"cursor: {pos[0]},{pos[1]} grid: {c}")
        if c is not None:
            self.orchestrator.request_toggle(c)

    def _clear_blocks(self):
        # queued like a click, so earlier clicks this frame are applied first
        self.orchestrator.request_clear()

    # ---------- drawing ----------
    def _draw(self):
        self.screen.fill(BLACK)
        if self.frame is not None:
            self._draw_grid(self.frame)
            self._draw_path(self.frame)
        self._draw_metrics_and_buttons()
        pygame.display.flip()

    def _tile_rect(self, c: Cell) -> pygame.Rect:
        cs = self.cell_size
        inner = max(1, int(cs * TILE_FILL))
        rect = pygame.Rect(0, 0, inner, inner)
        rect.center = cell_center(c, self._grid_origin, cs)
        return rect

    def _draw_grid(self, frame: Frame):
        for y in range(frame.size):
            for x in range(frame.size):
                c = (x, y)
                if c == frame.start or c == frame.goal:
                    color = WHITE
                elif frame.is_blocked(c):
                    color = BLOCK_BLUE
                else:
                    color = FREE_GRAY
                pygame.draw.rect(self.screen, color, self._tile_rect(c))

        for c, label in ((frame.start, "S"), (frame.goal, "E")):
            txt = self.font_small.render(label, True, BLACK)
            self.screen.blit(txt, txt.get_rect(center=cell_center(c, self._grid_origin, self.cell_size)))

    def _draw_path(self, frame: Frame):
        path = frame.path
        if not path:
            return
        cs = self.cell_size
        pts = [cell_center(c, self._grid_origin, cs) for c in path]
        if len(pts) >= 2:
            pygame.draw.lines(self.screen, PATH_WHITE, False, pts, 1)
        dot = max(2, int(cs * PATH_DOT))
        for p in pts:
            r = pygame.Rect(0, 0, dot, dot)
            r.center = p
            pygame.draw.rect(self.screen, PATH_WHITE, r)

    def _draw_metrics_and_buttons(self):
        rb = self._right_band

        card_h = 230
        card = pygame.Surface((rb.width - 20, card_h), pygame.SRCALPHA)
        pygame.draw.rect(card, CARD_BG, card.get_rect(), border_radius=14)
        hi = pygame.Surface((card.get_width(), 24), pygame.SRCALPHA)
        pygame.draw.rect(hi, CARD_HI, hi.get_rect(), border_radius=14)
        card.blit(hi, (0,0))
        self.screen.blit(card, (rb.x + 10, rb.y + 10))

        x0 = rb.x + 24
        y0 = rb.y + 18

        def line(text, big=False, color=TEXT_LIGHT):
            nonlocal y0
            f = self.font_big if big else self.font
            surf = f.render(text, True, color)
            self.screen.blit(surf, (x0, y0))
            y0 += surf.get_height() + 6

        line("Metrics", big=True, color=ACCENT_GOLD)
        frame = self.frame
        if frame is not None:
            m = frame.result.metrics
            line(f"Tick: {frame.tick}")
            line(f"Blocked: {len(frame.blocked)}")
            if frame.result.found:
                line(f"Path Len: {m.get('path_len', 0)}")
            else:
                line("No path", color=NO_PATH_RED)
            line(f"Popped: {m.get('popped', 0)}")
            line(f"Visited: {m.get('visited', 0)}")
        handler = self.orchestrator.handler
        line(f"Toggles: {handler.accepted} ok / {handler.dropped} dropped")

        for b in self._buttons:
            b.draw(self.screen, self.font)


# ---------- main ----------
def main():
    try:
        cfg = load_config()
        grid = Grid.square(cfg.size)
    except GridInitError as ex:
        log_error(f"Invalid grid: {ex}")
        sys.exit(1)
    except ValueError as ex:
        log_error(f"Bad configuration: {ex}")
        sys.exit(1)
    log_info(cfg.display())
    Viewer(grid, cfg).run()

if __name__ == "__main__":
    main()

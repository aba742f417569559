# render.py
from typing import Dict, Optional, Tuple
import numpy as np  # type: ignore
import pygame # type: ignore

from .config import (
    BG, GRID, GREEN, HEAD, RED, TEXT, PANEL, BUTTON, BUTTON_HI,
    CONTROLS_H, BUTTON_SIZE, BUTTON_GAP,
    Config,
)
from .game import CellKind, Direction, Snapshot

# ---------- Helpers ----------
def draw_cell(screen: pygame.Surface, gx: int, gy: int, color: Tuple[int, int, int], cell_size: int) -> None:
    rect = pygame.Rect(gx * cell_size, gy * cell_size, cell_size, cell_size)
    pygame.draw.rect(screen, color, rect)

def button_rects(cfg: Config) -> Dict[Direction, pygame.Rect]:
    """Arrow buttons laid out as a cross, centred in the strip under the board."""
    s, g = BUTTON_SIZE, BUTTON_GAP
    cx = cfg.width_px // 2
    top = cfg.board_h_px + (CONTROLS_H - 3 * s - 2 * g) // 2
    return {
        Direction.UP:    pygame.Rect(cx - s // 2, top, s, s),
        Direction.LEFT:  pygame.Rect(cx - s // 2 - g - s, top + s + g, s, s),
        Direction.RIGHT: pygame.Rect(cx + s // 2 + g, top + s + g, s, s),
        Direction.DOWN:  pygame.Rect(cx - s // 2, top + 2 * (s + g), s, s),
    }

def hit_button(pos: Tuple[int, int], cfg: Config) -> Optional[Direction]:
    """Direction of the arrow button under `pos`, or None."""
    for direction, rect in button_rects(cfg).items():
        if rect.collidepoint(pos):
            return direction
    return None

def _arrow(rect: pygame.Rect, direction: Direction):
    # Triangle pointing along `direction`, inset from the button edge
    dx, dy = direction.value
    r = rect.inflate(-rect.w // 2, -rect.h // 2)
    cx, cy = r.center
    half = r.w // 2
    tip = (cx + dx * half, cy + dy * half)
    # perpendicular (-dy, dx) spans the base
    base = (cx - dx * half, cy - dy * half)
    left = (base[0] - dy * half, base[1] + dx * half)
    right = (base[0] + dy * half, base[1] - dx * half)
    return [tip, left, right]

# ---------- Draw ----------
def draw_board(screen: pygame.Surface, board: np.ndarray, cell_size: int) -> None:
    """Paint a CellKind grid (from GameState.board()) onto the board area."""
    for kind, color in ((CellKind.FOOD, RED), (CellKind.BODY, GREEN), (CellKind.HEAD, HEAD)):
        for gy, gx in np.argwhere(board == kind):
            draw_cell(screen, int(gx), int(gy), color, cell_size)

def draw_controls(screen: pygame.Surface, cfg: Config, current: Direction) -> None:
    panel = pygame.Rect(0, cfg.board_h_px, cfg.width_px, CONTROLS_H)
    pygame.draw.rect(screen, PANEL, panel)
    for direction, rect in button_rects(cfg).items():
        color = BUTTON_HI if direction is current else BUTTON
        pygame.draw.rect(screen, color, rect, border_radius=4)
        pygame.draw.polygon(screen, TEXT, _arrow(rect, direction))

def draw_game(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot, cfg: Config) -> None:
    screen.fill(BG)
    pygame.draw.rect(screen, GRID, pygame.Rect(0, 0, cfg.width_px, cfg.board_h_px), width=1)
    draw_board(screen, snap.board(), cfg.cell_size)
    # score
    txt = font.render(f"Score: {snap.score}", True, TEXT)
    screen.blit(txt, (8, 6))
    draw_controls(screen, cfg, snap.direction)

def draw_game_over(screen: pygame.Surface, font: pygame.font.Font, score: int, cfg: Config) -> None:
    # Dim the board area only; controls stay visible
    overlay = pygame.Surface((cfg.width_px, cfg.board_h_px), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))  # RGBA
    screen.blit(overlay, (0, 0))

    mid_x, mid_y = cfg.width_px // 2, cfg.board_h_px // 2
    title = font.render("GAME OVER", True, (240, 240, 250))
    sco   = font.render(f"Final score: {score}", True, TEXT)
    sub   = font.render("Press R or click to restart", True, TEXT)

    screen.blit(title, title.get_rect(center=(mid_x, mid_y - 16)))
    screen.blit(sco, sco.get_rect(center=(mid_x, mid_y + 16)))
    screen.blit(sub, sub.get_rect(center=(mid_x, mid_y + 44)))

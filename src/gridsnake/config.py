from dataclasses import dataclass
from typing import Optional

# ----- Colors -----
BG      = (20, 20, 24)
GRID    = (32, 32, 38)
GREEN   = (80, 200, 80)
HEAD    = (140, 240, 140)
RED     = (200, 70, 70)
TEXT    = (220, 220, 230)
PANEL   = (28, 28, 34)
BUTTON  = (60, 60, 72)
BUTTON_HI = (90, 90, 110)

# ----- Control strip under the board (pixels) -----
CONTROLS_H = 96
BUTTON_SIZE = 28
BUTTON_GAP = 4

# ----- Tunables -----
@dataclass
class Config:
    seed: Optional[int] = None       # None -> fresh randomness every game
    grid_w: int = 20
    grid_h: int = 20
    cell_size: int = 24
    move_every_ms: int = 150
    placement_attempts: int = 64     # rejection samples before a full scan

    @property
    def width_px(self) -> int:
        return self.grid_w * self.cell_size

    @property
    def board_h_px(self) -> int:
        return self.grid_h * self.cell_size

    @property
    def height_px(self) -> int:
        return self.board_h_px + CONTROLS_H

CFG = Config()

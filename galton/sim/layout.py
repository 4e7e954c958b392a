# galton/sim/layout.py
from dataclasses import dataclass

from galton.shared.board_config import CFG, BoardConfig


@dataclass(frozen=True)
class Layout:
    rows: int
    scale_factor: float
    width: float
    height: float
    peg_spacing_x: float
    peg_spacing_y: float
    start_y: float          # y of the first peg row centre
    peg_radius: float
    ball_radius: float
    bin_height: float
    space_below_pegs: float
    bottom_padding: float

    @property
    def last_row_y(self) -> float:
        return self.start_y + (self.rows - 1) * self.peg_spacing_y

    @property
    def bins_top(self) -> float:
        return self.last_row_y + self.peg_radius + self.space_below_pegs

    @property
    def size(self):
        return int(round(self.width)), int(round(self.height))


def compute_layout(rows: int, viewport_width: float, cfg: BoardConfig = CFG) -> Layout:
    """
    Derive every scaled dimension from one scale factor.

    The board is (rows + 3.5) horizontal pitches wide. It shrinks to fit the
    viewport, but the pitch never drops below three base peg radii; when that
    floor binds the board is allowed to be wider than the viewport.
    """
    pitches = rows + cfg.width_in_pitches
    ideal = pitches * cfg.base_peg_spacing_x
    width = min(ideal, viewport_width)

    spacing_x = width / pitches
    min_spacing_x = cfg.base_peg_radius * 3
    if spacing_x < min_spacing_x:
        spacing_x = min_spacing_x
        width = pitches * spacing_x

    s = spacing_x / cfg.base_peg_spacing_x

    spacing_y = cfg.base_peg_spacing_y * s
    start_y = cfg.base_start_y * s
    peg_r = cfg.base_peg_radius * s
    bin_h = cfg.base_bin_height * s
    below = cfg.base_space_below_pegs * s
    bottom = cfg.base_bottom_padding * s

    height = start_y + (rows - 1) * spacing_y + peg_r + below + bin_h + bottom

    return Layout(
        rows=rows,
        scale_factor=s,
        width=width,
        height=height,
        peg_spacing_x=spacing_x,
        peg_spacing_y=spacing_y,
        start_y=start_y,
        peg_radius=peg_r,
        ball_radius=cfg.base_ball_radius * s,
        bin_height=bin_h,
        space_below_pegs=below,
        bottom_padding=bottom,
    )

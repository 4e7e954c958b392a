# galton/shared/board_config.py
from dataclasses import dataclass

@dataclass(frozen=True)
class BoardConfig:
    # unscaled geometry (pixels at scale 1.0)
    base_peg_radius: float = 6
    base_ball_radius: float = 5
    base_peg_spacing_x: float = 40
    base_peg_spacing_y: float = 30
    base_start_y: float = 30        # centre of the first peg row
    base_bin_height: float = 60
    base_space_below_pegs: float = 30
    base_bottom_padding: float = 40
    width_in_pitches: float = 3.5   # extra pitches around the triangle

    gravity: float = 0.15           # px/tick^2 at scale 1.0
    bounce_factor: float = 0.1
    horizontal_bump: float = 1.5
    min_bump: float = 0.5
    wall_restitution: float = 0.5
    full_bin_restitution: float = 0.5   # extra damping on a full bin
    peg_push: float = 0.51
    spawn_jitter: float = 0.25      # vx drawn from [-jitter, jitter]
    label_font_size: float = 14     # bin label, pygame default font, at scale 1.0
    label_offset: float = 5

    # input limits
    min_rows: int = 1
    max_rows: int = 30
    min_balls: int = 1
    max_balls: int = 5000
    min_capacity: int = 1
    max_capacity: int = 1000
    default_capacity: int = 100

    # spawn cadence: delay = base - total * per_ball, clamped
    spawn_base_ms: float = 200.0
    spawn_per_ball_ms: float = 0.1
    spawn_min_ms: float = 50.0

    log_format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

CFG = BoardConfig()

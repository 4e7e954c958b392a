# galton/sim/entities.py
import enum
import random
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from galton.shared.board_config import CFG
from galton.shared.constants import BALL_COLOR
from galton.sim.layout import Layout


class BallState(enum.Enum):
    FALLING = "falling"
    SETTLING = "settling"   # captured this tick, finalized on the next
    LANDED = "landed"


@dataclass(frozen=True)
class Peg:
    x: float
    y: float
    radius: float


@dataclass
class Bin:
    x: float
    y: float
    width: float
    height: float
    max_capacity: int
    count: int = 0

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def is_full(self) -> bool:
        return self.count >= self.max_capacity

    def fill_ratio(self) -> float:
        if self.max_capacity <= 0:
            return 0.0
        return self.count / self.max_capacity


@dataclass
class Ball:
    x: float
    y: float
    radius: float
    vx: float = 0.0
    vy: float = 0.0
    state: BallState = BallState.FALLING
    bin_index: Optional[int] = None     # None while falling or once lost
    color: Tuple[int, int, int] = BALL_COLOR

    @property
    def landed(self) -> bool:
        return self.state is BallState.LANDED

    @property
    def captured(self) -> bool:
        return self.bin_index is not None


def create_ball(layout: Layout, pegs: Sequence[Peg], rng=random) -> Ball:
    x = pegs[0].x if pegs else layout.width / 2
    return Ball(
        x=x,
        y=layout.start_y - layout.peg_spacing_y,
        radius=layout.ball_radius,
        vx=rng.uniform(-CFG.spawn_jitter, CFG.spawn_jitter),
        vy=0.0,
    )

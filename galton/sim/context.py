# galton/sim/context.py
from dataclasses import dataclass, field
from typing import List, Optional

from galton.sim.board import build_board
from galton.sim.entities import Ball, BallState, Bin, Peg
from galton.sim.layout import Layout
from galton.sim.validation import SimParams


@dataclass
class SimContext:
    """Everything one board instance owns. Passed by reference to driver, physics and renderer."""
    params: Optional[SimParams] = None
    layout: Optional[Layout] = None
    pegs: List[Peg] = field(default_factory=list)
    bins: List[Bin] = field(default_factory=list)
    balls: List[Ball] = field(default_factory=list)

    spawned: int = 0
    lost: int = 0               # balls that left through the bottom edge

    # scheduler handles, None when the task is not scheduled
    frame_handle: Optional[int] = None
    spawn_handle: Optional[int] = None

    def rebuild(self, layout: Layout, capacity: int):
        self.layout = layout
        self.pegs, self.bins = build_board(layout, capacity)
        self.clear_balls()

    def clear_balls(self):
        self.balls = []
        self.spawned = 0
        self.lost = 0

    # ---------------- Counters ----------------
    @property
    def captured(self) -> int:
        return sum(b.count for b in self.bins)

    @property
    def in_flight(self) -> int:
        return sum(1 for b in self.balls if b.state is BallState.FALLING)

    def any_active(self) -> bool:
        return any(not b.landed for b in self.balls)

# galton/sim/driver.py
import logging
import random
from typing import Callable, Optional

from galton.shared.board_config import CFG, BoardConfig
from galton.sim.context import SimContext
from galton.sim.entities import create_ball
from galton.sim.physics import step_all
from galton.sim.scheduler import Scheduler

log = logging.getLogger(__name__)


def spawn_delay_ms(total: int, cfg: BoardConfig = CFG) -> float:
    # more balls -> faster drops
    delay = cfg.spawn_base_ms - total * cfg.spawn_per_ball_ms
    return max(cfg.spawn_min_ms, min(cfg.spawn_base_ms, delay))


class SimulationDriver:
    """
    Runs one board: a spawn interval that drops balls, and a frame task
    that draws, steps physics and redraws bins.

    renderer may be None (headless); otherwise it needs draw_frame(ctx)
    and draw_bins(ctx).
    """

    def __init__(self, ctx: SimContext, scheduler: Scheduler, renderer=None,
                 on_finished: Optional[Callable[[], None]] = None, rng=random):
        self.ctx = ctx
        self.scheduler = scheduler
        self.renderer = renderer
        self.on_finished = on_finished
        self.rng = rng

    @property
    def is_running(self) -> bool:
        return self.ctx.frame_handle is not None or self.ctx.spawn_handle is not None

    @property
    def spawning(self) -> bool:
        return self.ctx.spawn_handle is not None

    # ---------------- Lifecycle ----------------
    def begin(self):
        total = self.ctx.params.balls
        self._spawn_one()
        if self.ctx.spawned < total:
            delay = spawn_delay_ms(total)
            self.ctx.spawn_handle = self.scheduler.set_interval(self._on_spawn_timer, delay)
            log.debug("spawning %d balls every %.0f ms", total, delay)
        self.ctx.frame_handle = self.scheduler.request_frame(self._on_frame)

    def halt(self):
        self.scheduler.cancel_frame(self.ctx.frame_handle)
        self.scheduler.clear_interval(self.ctx.spawn_handle)
        self.ctx.frame_handle = None
        self.ctx.spawn_handle = None

    # ---------------- Tasks ----------------
    def _spawn_one(self):
        self.ctx.balls.append(create_ball(self.ctx.layout, self.ctx.pegs, self.rng))
        self.ctx.spawned += 1

    def _on_spawn_timer(self):
        if self.ctx.spawned < self.ctx.params.balls:
            self._spawn_one()
        if self.ctx.spawned >= self.ctx.params.balls:
            self.scheduler.clear_interval(self.ctx.spawn_handle)
            self.ctx.spawn_handle = None

    def _on_frame(self):
        ctx = self.ctx
        ctx.frame_handle = None

        # draw the previous tick's positions, then advance
        if self.renderer is not None:
            self.renderer.draw_frame(ctx)
        step_all(ctx, self.rng)
        if self.renderer is not None:
            self.renderer.draw_bins(ctx)

        if self.spawning or ctx.any_active():
            ctx.frame_handle = self.scheduler.request_frame(self._on_frame)
            return

        log.info("run finished: %d captured, %d lost of %d",
                 ctx.captured, ctx.lost, ctx.spawned)
        if self.on_finished:
            self.on_finished()

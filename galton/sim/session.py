# galton/sim/session.py
import logging
import random
from typing import Callable, Optional, Tuple

from galton.sim.context import SimContext
from galton.sim.driver import SimulationDriver
from galton.sim.layout import compute_layout
from galton.sim.scheduler import Scheduler
from galton.sim.validation import (
    InputError, RawValue, SimParams, parse_capacity, parse_params, parse_rows,
)

log = logging.getLogger(__name__)

Inputs = Callable[[], Tuple[RawValue, RawValue, RawValue]]


def _noop(*_args):
    pass


class SessionController:
    """
    start / stop / reset for one board.

    inputs() returns the raw (rows, balls, capacity) control values.
    Signals:
      on_controls_enabled(bool)  - parameter inputs + Start
      on_reset_enabled(bool)     - Reset button
      on_validation_error(str)
      on_board_changed(layout)
    """

    def __init__(self, scheduler: Scheduler, inputs: Inputs, viewport_width: float,
                 renderer=None, rng=random,
                 on_controls_enabled: Optional[Callable[[bool], None]] = None,
                 on_reset_enabled: Optional[Callable[[bool], None]] = None,
                 on_validation_error: Optional[Callable[[str], None]] = None,
                 on_board_changed: Optional[Callable] = None):
        self.scheduler = scheduler
        self.inputs = inputs
        self.viewport_width = viewport_width
        self.renderer = renderer

        self.on_controls_enabled = on_controls_enabled or _noop
        self.on_reset_enabled = on_reset_enabled or _noop
        self.on_validation_error = on_validation_error or _noop
        self.on_board_changed = on_board_changed or _noop

        self.ctx = SimContext()
        self.driver = SimulationDriver(self.ctx, scheduler, renderer,
                                       on_finished=self.stop, rng=rng)

    @property
    def running(self) -> bool:
        return self.driver.is_running

    def _report(self, err: InputError):
        log.warning("invalid input: %s", err)
        self.on_validation_error(str(err))

    def _rebuild(self, rows: int, capacity: int):
        layout = compute_layout(rows, self.viewport_width)
        self.ctx.rebuild(layout, capacity)
        self.on_board_changed(layout)
        return layout

    # ---------------- Commands ----------------
    def start(self):
        if self.running:
            return
        try:
            params: SimParams = parse_params(*self.inputs())
        except InputError as e:
            self._report(e)
            return

        self.ctx.params = params
        layout = self._rebuild(params.rows, params.bin_capacity)
        log.info("run started: rows=%d balls=%d capacity=%d board=%dx%d scale=%.3f",
                 params.rows, params.balls, params.bin_capacity,
                 *layout.size, layout.scale_factor)

        self.on_controls_enabled(False)
        self.on_reset_enabled(True)
        self.driver.begin()

    def stop(self):
        if self.running:
            log.debug("stopping run")
        self.driver.halt()
        self.on_controls_enabled(True)

    def reset(self):
        self.stop()
        rows_raw, _, cap_raw = self.inputs()
        try:
            rows = parse_rows(rows_raw)
            capacity = parse_capacity(cap_raw)
        except InputError as e:
            # keep the previous board
            self._report(e)
            return

        self.ctx.params = None
        layout = self._rebuild(rows, capacity)
        log.info("board reset: rows=%d capacity=%d board=%dx%d", rows, capacity, *layout.size)
        if self.renderer is not None:
            self.renderer.draw_static(self.ctx)

        self.on_controls_enabled(True)
        self.on_reset_enabled(False)

    # ---------------- Triggers ----------------
    def parameters_changed(self):
        if not self.running:
            self.reset()

    def viewport_resized(self, width: float):
        self.viewport_width = width
        if not self.running:
            self.reset()

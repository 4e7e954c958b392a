import pygame
from galton.shared.constants import (
    CANVAS_MARGIN_LEFT, CANVAS_MARGIN_RIGHT, CONTROL_BAR_H, WHITE, BLACK, GRAY, BLUE, ORANGE,
)
from galton.client.renderer import BoardRenderer
from galton.client.ui import AlertDialog, Button, NumberInput
from galton.sim.scheduler import Scheduler
from galton.sim.session import SessionController

class Screen:
    name = "base"
    def __init__(self, app): self.app = app
    def on_enter(self, **kwargs): pass
    def on_exit(self): pass
    def handle_event(self, event): pass
    def update(self, dt): pass
    def draw(self, surface): pass


def viewport_width(window_w):
    return max(1, window_w - CANVAS_MARGIN_LEFT - CANVAS_MARGIN_RIGHT)


# -------------------- Board --------------------
class BoardScreen(Screen):
    name = "board"
    def __init__(self, app):
        super().__init__(app)
        self.small_font = pygame.font.SysFont(None, 24)
        settings = app.settings

        y = 34
        self.rows_in = NumberInput((20, y, 90, 36), self.small_font, "Rows", settings.rows,
                                   max_len=2, on_commit=self._on_param_commit)
        self.balls_in = NumberInput((130, y, 110, 36), self.small_font, "Balls", settings.balls,
                                    max_len=4)
        self.cap_in = NumberInput((260, y, 130, 36), self.small_font, "Bin capacity", settings.capacity,
                                  max_len=4, on_commit=self._on_param_commit)
        self.inputs = [self.rows_in, self.balls_in, self.cap_in]

        self.start_btn = Button((420, y, 120, 36), "Start", self.small_font, BLUE, WHITE)
        self.reset_btn = Button((555, y, 120, 36), "Reset", self.small_font, ORANGE, BLACK)

        self.alert = AlertDialog(self.small_font)

        self.scheduler = Scheduler()
        self.renderer = BoardRenderer()
        self.session = SessionController(
            self.scheduler,
            inputs=self._read_inputs,
            viewport_width=viewport_width(app.screen.get_width()),
            renderer=self.renderer,
            on_controls_enabled=self._set_controls_enabled,
            on_reset_enabled=self._set_reset_enabled,
            on_validation_error=self.alert.show,
        )

    def _read_inputs(self):
        return self.rows_in.value(), self.balls_in.value(), self.cap_in.value()

    def _set_controls_enabled(self, enabled):
        for w in self.inputs:
            w.set_enabled(enabled)
        self.start_btn.enabled = enabled

    def _set_reset_enabled(self, enabled):
        self.reset_btn.enabled = enabled

    def _on_param_commit(self, _text):
        self.session.parameters_changed()

    def _typing(self):
        return any(w.active for w in self.inputs)

    def on_enter(self, **kwargs):
        self.session.reset()

    def on_exit(self):
        self.session.stop()

    def handle_event(self, event):
        if event.type == pygame.VIDEORESIZE:
            self.session.viewport_resized(viewport_width(event.w))
            return

        # modal
        if self.alert.handle_event(event):
            return

        for w in self.inputs:
            w.handle_event(event)

        if self.start_btn.is_clicked(event):
            self.session.start()
        elif self.reset_btn.is_clicked(event):
            self.session.reset()
        elif event.type == pygame.KEYDOWN and not self._typing():
            if event.key == pygame.K_SPACE and self.start_btn.enabled:
                self.session.start()
            elif event.key == pygame.K_r and self.reset_btn.enabled:
                self.session.reset()

    def update(self, dt):
        self.scheduler.tick(dt * 1000.0)

    def _status_line(self):
        ctx = self.session.ctx
        state = "running" if self.session.running else "idle"
        return (f"{state} | spawned {ctx.spawned} | in flight {ctx.in_flight} | "
                f"captured {ctx.captured} | lost {ctx.lost}")

    def draw(self, surface):
        surface.fill((36, 44, 56))

        for w in self.inputs:
            w.draw(surface)
        self.start_btn.draw(surface)
        self.reset_btn.draw(surface)

        st = self.small_font.render(self._status_line(), True, GRAY)
        surface.blit(st, (20, CONTROL_BAR_H - 22))

        board = self.renderer.surface
        bx = max(CANVAS_MARGIN_LEFT, (surface.get_width() - board.get_width()) // 2)
        surface.blit(board, (bx, CONTROL_BAR_H))

        self.alert.draw(surface)

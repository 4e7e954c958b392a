# galton/client/renderer.py
from functools import lru_cache

import pygame

from galton.shared.board_config import CFG
from galton.shared.constants import BALL_COLOR, BIN_COLOR, BOARD_BG, LABEL_COLOR, PEG_COLOR
from galton.sim.context import SimContext


@lru_cache(maxsize=32)
def _label_font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.SysFont(None, size)


class BoardRenderer:
    """Paints a SimContext onto its own surface. Never touches simulation state."""

    def __init__(self):
        self.surface = pygame.Surface((1, 1))

    def _fit(self, ctx: SimContext):
        size = ctx.layout.size
        if self.surface.get_size() != size:
            self.surface = pygame.Surface(size)

    def clear(self, ctx: SimContext):
        self._fit(ctx)
        self.surface.fill(BOARD_BG)

    # ---------------- Passes ----------------
    def draw_static(self, ctx: SimContext):
        self.clear(ctx)
        self.draw_pegs(ctx)
        self.draw_bins(ctx)

    def draw_frame(self, ctx: SimContext):
        self.clear(ctx)
        self.draw_pegs(ctx)
        self.draw_balls(ctx)

    # ---------------- Elements ----------------
    def draw_pegs(self, ctx: SimContext):
        for p in ctx.pegs:
            pygame.draw.circle(self.surface, PEG_COLOR, (int(p.x), int(p.y)), max(1, int(p.radius)))

    def draw_balls(self, ctx: SimContext):
        for b in ctx.balls:
            if b.landed:
                continue
            pygame.draw.circle(self.surface, b.color, (int(b.x), int(b.y)), max(1, int(b.radius)))

    def draw_bins(self, ctx: SimContext):
        s = ctx.layout.scale_factor
        font = _label_font(max(8, int(round(CFG.label_font_size * s))))

        for b in ctx.bins:
            rect = pygame.Rect(int(b.x), int(b.y), int(b.width), int(b.height))
            pygame.draw.rect(self.surface, BIN_COLOR, rect, 1)

            if b.count > 0 and b.max_capacity > 0:
                # bar scale is the logical capacity; keep one pixel of frame visible
                bar_h = min(b.fill_ratio() * b.height, b.height - 1)
                bar = pygame.Rect(int(b.x + 1), int(b.bottom - bar_h), max(1, int(b.width - 2)), max(1, int(bar_h)))
                pygame.draw.rect(self.surface, BALL_COLOR, bar)

            img = font.render(str(b.count), True, LABEL_COLOR)
            self.surface.blit(img, img.get_rect(midbottom=(int(b.center_x), int(b.y - CFG.label_offset * s))))

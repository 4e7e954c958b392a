import pygame

from galton.client.renderer import BoardRenderer
from galton.shared.constants import BALL_COLOR, BOARD_BG, PEG_COLOR
from galton.sim.entities import Ball, BallState

from boards import make_context


def rgb(surface, x, y):
    return tuple(surface.get_at((int(x), int(y))))[:3]


def test_static_board_matches_layout_size():
    ctx = make_context(rows=10)
    ren = BoardRenderer()
    ren.draw_static(ctx)
    assert ren.surface.get_size() == ctx.layout.size


def test_pegs_are_painted():
    ctx = make_context(rows=4)
    ren = BoardRenderer()
    ren.draw_static(ctx)
    for p in ctx.pegs:
        assert rgb(ren.surface, p.x, p.y) == PEG_COLOR


def test_fill_bar_reflects_count():
    ctx = make_context(rows=10, capacity=100)
    b = ctx.bins[3]
    b.count = 50
    ren = BoardRenderer()
    ren.draw_static(ctx)
    assert rgb(ren.surface, b.center_x, b.bottom - 3) == BALL_COLOR
    assert rgb(ren.surface, b.center_x, b.y + 5) == BOARD_BG
    empty = ctx.bins[4]
    assert rgb(ren.surface, empty.center_x, empty.bottom - 3) == BOARD_BG


def test_full_bin_bar_stays_inside_frame():
    ctx = make_context(rows=2, capacity=5)
    b = ctx.bins[0]
    b.count = 5
    ren = BoardRenderer()
    ren.draw_static(ctx)
    assert rgb(ren.surface, b.center_x, b.y + 2) == BALL_COLOR


def test_landed_balls_are_not_drawn():
    ctx = make_context(rows=10)
    ctx.balls = [Ball(100, 100, 5), Ball(200, 100, 5, state=BallState.LANDED)]
    ren = BoardRenderer()
    ren.draw_frame(ctx)
    assert rgb(ren.surface, 100, 100) == BALL_COLOR
    assert rgb(ren.surface, 200, 100) == BOARD_BG


def test_drawing_does_not_touch_state():
    ctx = make_context(rows=5)
    ctx.bins[2].count = 3
    ctx.balls = [Ball(50, 50, 5, vx=1, vy=2)]
    before = ([b.count for b in ctx.bins], [(b.x, b.y, b.vx, b.vy, b.state) for b in ctx.balls])
    ren = BoardRenderer()
    ren.draw_frame(ctx)
    ren.draw_bins(ctx)
    after = ([b.count for b in ctx.bins], [(b.x, b.y, b.vx, b.vy, b.state) for b in ctx.balls])
    assert before == after


def test_surface_follows_layout_changes():
    ren = BoardRenderer()
    ren.draw_static(make_context(rows=3))
    small = ren.surface.get_size()
    ren.draw_static(make_context(rows=12))
    assert ren.surface.get_size() != small
    assert isinstance(ren.surface, pygame.Surface)

# galton/sim/physics.py
import math
import random

from galton.shared.board_config import CFG
from galton.sim.entities import Ball, BallState
from galton.sim.context import SimContext


def _sign(v: float) -> float:
    if v > 0:
        return 1.0
    if v < 0:
        return -1.0
    return 0.0


def step_ball(ball: Ball, ctx: SimContext, rng=random) -> None:
    """
    Advance one ball by one tick:
    integrate -> walls -> pegs -> bins.

    A ball captured on the previous tick is finalized here and not moved.
    """
    if ball.state is BallState.LANDED:
        return
    if ball.state is BallState.SETTLING:
        ball.state = BallState.LANDED
        return

    layout = ctx.layout
    s = layout.scale_factor

    # integrate
    ball.vy += CFG.gravity * s
    ball.x += ball.vx
    ball.y += ball.vy

    if _resolve_walls(ball, layout.width, layout.height):
        ctx.lost += 1
        return

    _resolve_pegs(ball, ctx.pegs, s, rng)
    _resolve_bins(ball, ctx.bins, s, rng)


def step_all(ctx: SimContext, rng=random) -> None:
    for ball in ctx.balls:
        if not ball.landed:
            step_ball(ball, ctx, rng)


# ---------------- Walls ----------------
def _resolve_walls(ball: Ball, width: float, height: float) -> bool:
    """Returns True when the ball dropped out through the bottom edge."""
    r = ball.radius

    if ball.x - r < 0:
        ball.x = r
        ball.vx *= -CFG.wall_restitution
    elif ball.x + r > width:
        ball.x = width - r
        ball.vx *= -CFG.wall_restitution

    if ball.y - r < 0:
        ball.y = r
        ball.vy *= -CFG.bounce_factor

    if ball.y + r > height and ball.state is BallState.FALLING:
        ball.state = BallState.LANDED
        ball.bin_index = None
        return True
    return False


# ---------------- Pegs ----------------
def _resolve_pegs(ball: Ball, pegs, s: float, rng) -> None:
    bump = CFG.horizontal_bump * s
    min_bump = CFG.min_bump * s

    # no early exit: a ball may touch two pegs in one tick
    for peg in pegs:
        dx = ball.x - peg.x
        dy = ball.y - peg.y
        reach = ball.radius + peg.radius
        if math.hypot(dx, dy) >= reach:
            continue

        # partial push-out, a full one makes the ball chatter on the peg
        ball.y = peg.y + _sign(dy) * reach * CFG.peg_push
        ball.vy *= -CFG.bounce_factor

        direction = -1.0 if ball.x < peg.x else 1.0
        ball.vx = direction * bump * rng.random()
        if abs(ball.vx) < min_bump:
            ball.vx = direction * min_bump


# ---------------- Bins ----------------
def _resolve_bins(ball: Ball, bins, s: float, rng) -> None:
    if ball.state is not BallState.FALLING or not bins:
        return

    r = ball.radius
    band_top = bins[0].y
    band_bottom = bins[0].bottom
    if ball.y + r <= band_top or ball.y - r >= band_bottom:
        return

    for i, b in enumerate(bins):
        if ball.x + r <= b.x or ball.x - r >= b.x + b.width:
            continue

        if not b.is_full():
            b.count += 1
            ball.state = BallState.SETTLING
            ball.bin_index = i
            ball.vx = 0.0
            ball.vy = 0.0
            # one resting spot per bin, the fill bar shows the pile
            ball.x = b.center_x
            ball.y = b.bottom - r
        else:
            ball.vy = -abs(ball.vy) * CFG.bounce_factor * CFG.full_bin_restitution
            ball.y = b.y - r
            min_bump = CFG.min_bump * s
            if abs(ball.vx) < min_bump:
                ball.vx = rng.choice((-1.0, 1.0)) * min_bump
        break

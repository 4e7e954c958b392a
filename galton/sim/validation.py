# galton/sim/validation.py
from dataclasses import dataclass
from typing import Optional, Union

from galton.shared.board_config import CFG, BoardConfig

RawValue = Union[str, int, None]


class InputError(ValueError):
    """Control values outside their allowed range. The message is shown to the user."""


@dataclass(frozen=True)
class SimParams:
    rows: int
    balls: int
    bin_capacity: int


def _to_int(raw: RawValue) -> Optional[int]:
    if raw is None:
        return None
    if isinstance(raw, int):
        return raw
    s = str(raw).strip()
    try:
        return int(s)
    except ValueError:
        return None


def parse_rows(raw: RawValue, cfg: BoardConfig = CFG) -> int:
    rows = _to_int(raw)
    if rows is None or not cfg.min_rows <= rows <= cfg.max_rows:
        raise InputError(f"Number of rows must be between {cfg.min_rows} and {cfg.max_rows}.")
    return rows


def parse_balls(raw: RawValue, cfg: BoardConfig = CFG) -> int:
    balls = _to_int(raw)
    if balls is None or not cfg.min_balls <= balls <= cfg.max_balls:
        raise InputError(f"Number of balls must be between {cfg.min_balls} and {cfg.max_balls}.")
    return balls


def parse_capacity(raw: RawValue, cfg: BoardConfig = CFG) -> int:
    # blank or non-numeric falls back to the default; a number out of range is an error
    cap = _to_int(raw)
    if cap is None:
        return cfg.default_capacity
    if not cfg.min_capacity <= cap <= cfg.max_capacity:
        raise InputError(f"Bin capacity must be between {cfg.min_capacity} and {cfg.max_capacity}.")
    return cap


def parse_params(rows: RawValue, balls: RawValue, capacity: RawValue,
                 cfg: BoardConfig = CFG) -> SimParams:
    return SimParams(
        rows=parse_rows(rows, cfg),
        balls=parse_balls(balls, cfg),
        bin_capacity=parse_capacity(capacity, cfg),
    )

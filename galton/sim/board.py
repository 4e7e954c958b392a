# galton/sim/board.py
from typing import List, Tuple

from galton.sim.entities import Bin, Peg
from galton.sim.layout import Layout


def build_pegs(layout: Layout) -> List[Peg]:
    pegs: List[Peg] = []
    for row in range(layout.rows):
        n = row + 1
        row_w = (n - 1) * layout.peg_spacing_x
        start_x = (layout.width - row_w) / 2
        y = layout.start_y + row * layout.peg_spacing_y
        for col in range(n):
            pegs.append(Peg(start_x + col * layout.peg_spacing_x, y, layout.peg_radius))
    return pegs


def build_bins(layout: Layout, capacity: int) -> List[Bin]:
    n = layout.rows + 1
    w = layout.peg_spacing_x
    first_x = (layout.width - n * w) / 2
    top = layout.bins_top
    return [Bin(first_x + i * w, top, w, layout.bin_height, max_capacity=capacity)
            for i in range(n)]


def build_board(layout: Layout, capacity: int) -> Tuple[List[Peg], List[Bin]]:
    return build_pegs(layout), build_bins(layout, capacity)

import pytest

from galton.sim.board import build_bins, build_board, build_pegs
from galton.sim.layout import compute_layout


@pytest.mark.parametrize("rows", range(1, 31))
def test_peg_and_bin_counts(rows):
    pegs, bins = build_board(compute_layout(rows, 1200), 100)
    assert len(pegs) == rows * (rows + 1) // 2
    assert len(bins) == rows + 1


def test_single_row_board():
    lay = compute_layout(1, 2000)
    pegs, bins = build_board(lay, 7)
    assert len(pegs) == 1
    assert pegs[0].x == pytest.approx(90)
    assert pegs[0].y == pytest.approx(30)
    assert [b.x for b in bins] == pytest.approx([50, 90])
    assert all(b.y == pytest.approx(66) for b in bins)
    assert all(b.count == 0 and b.max_capacity == 7 for b in bins)


def test_rows_are_centred():
    lay = compute_layout(8, 2000)
    pegs = build_pegs(lay)
    for row in range(8):
        y = lay.start_y + row * lay.peg_spacing_y
        xs = [p.x for p in pegs if p.y == pytest.approx(y)]
        assert len(xs) == row + 1
        assert sum(xs) / len(xs) == pytest.approx(lay.width / 2)


def test_bins_are_contiguous_and_centred():
    lay = compute_layout(6, 500)
    bins = build_bins(lay, 10)
    for a, b in zip(bins, bins[1:]):
        assert b.x == pytest.approx(a.x + a.width)
    assert all(b.width == pytest.approx(lay.peg_spacing_x) for b in bins)
    assert all(b.height == pytest.approx(lay.bin_height) for b in bins)
    left = bins[0].x
    right = bins[-1].x + bins[-1].width
    assert (left + right) / 2 == pytest.approx(lay.width / 2)


def test_pegs_are_immutable():
    pegs = build_pegs(compute_layout(2, 2000))
    with pytest.raises(Exception):
        pegs[0].x = 1

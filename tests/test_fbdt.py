import pytest

from sboxtables.ddt import ddt
from sboxtables.fbct import fbct
from sboxtables.fbdt import fbdt, format_table3d, max_fbdt

TWINE = [0x0C, 0x00, 0x0F, 0x0A, 0x02, 0x0B, 0x09, 0x05,
         0x08, 0x03, 0x0D, 0x07, 0x01, 0x0E, 0x06, 0x04]


def test_summing_out_difference_gives_fbct():
    table = fbdt(TWINE, 4)
    boomerang = fbct(TWINE, 4)
    assert all(sum(table[a][b]) == boomerang[a][b] for a in range(16) for b in range(16))


def test_zero_b_slice_is_ddt():
    table = fbdt(TWINE, 4)
    differences = ddt(TWINE, 4)
    assert all(table[a][0] == differences[a] for a in range(16))


def test_zero_a_plane_counts_only_zero_difference():
    table = fbdt(TWINE, 4)
    assert all(table[0][b] == [16] + [0] * 15 for b in range(16))


def test_identity_reaches_full_count():
    assert max_fbdt(fbdt(list(range(16)), 4)) == 16


def test_twine_below_linear():
    assert max_fbdt(fbdt(TWINE, 4)) < 16


def test_max_fbdt_skips_excluded_indices():
    table = [[[50, 50], [50, 50]], [[40, 3], [40, 5]]]
    assert max_fbdt(table) == 5


def test_format_table3d_layout():
    table = [[[1, 2], [3, 4]], [[5, 6], [7, 8]]]
    assert format_table3d(table) == (
        "Con k=0 \n1 ,3 ,\n5 ,7 ,\n"
        "Con k=1 \n2 ,4 ,\n6 ,8 ,\n"
    )


def test_bad_sbox_rejected():
    with pytest.raises(ValueError):
        fbdt([0, 1, 2, 3, 4], 2)
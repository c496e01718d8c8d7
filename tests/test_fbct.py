import pytest

from sboxtables.fbct import fbct, format_table, max_fbct

TWINE = [0x0C, 0x00, 0x0F, 0x0A, 0x02, 0x0B, 0x09, 0x05,
         0x08, 0x03, 0x0D, 0x07, 0x01, 0x0E, 0x06, 0x04]


def test_format_table_layout():
    assert format_table([[1, 2], [3, 4]]) == "1 ,2 ,\n3 ,4 ,\n"


def test_trivial_rows_columns_and_diagonal_are_full():
    table = fbct(TWINE, 4)
    for k in range(16):
        assert table[0][k] == 16
        assert table[k][0] == 16
        assert table[k][k] == 16


def test_table_is_symmetric():
    table = fbct(TWINE, 4)
    assert all(table[a][b] == table[b][a] for a in range(16) for b in range(16))


def test_entries_are_even():
    table = fbct(TWINE, 4)
    assert all(v % 2 == 0 for row in table for v in row)


def test_linear_sbox_reaches_full_count():
    table = fbct(list(range(16)), 4)
    assert max_fbct(table) == 16


def test_twine_is_below_linear():
    assert max_fbct(fbct(TWINE, 4)) < 16


def test_max_fbct_ignores_excluded_cells():
    table = [[99, 99, 99], [99, 99, 5], [99, 7, 99]]
    assert max_fbct(table) == 7


def test_wrong_length_rejected():
    with pytest.raises(ValueError):
        fbct(TWINE[:15], 4)


def test_out_of_range_value_rejected():
    with pytest.raises(ValueError):
        fbct([0, 1, 2, 4], 2)


def test_width_limit():
    with pytest.raises(ValueError):
        fbct([0], 0)
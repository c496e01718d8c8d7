import pytest

from sboxtables.lat import carl1, inner_product, lat, max_lat

TWINE = [0x0C, 0x00, 0x0F, 0x0A, 0x02, 0x0B, 0x09, 0x05,
         0x08, 0x03, 0x0D, 0x07, 0x01, 0x0E, 0x06, 0x04]
IDENTITY = list(range(16))


@pytest.mark.parametrize("a,b", [(0, 0), (1, 1), (5, 3), (0xF, 0xA), (0xFF, 0x80)])
def test_inner_product_symmetric_and_binary(a, b):
    assert inner_product(a, b) == inner_product(b, a)
    assert inner_product(a, b) in (0, 1)


def test_inner_product_with_zero():
    assert all(inner_product(a, 0) == 0 for a in range(256))


def test_inner_product_single_bit():
    assert inner_product(1, 1) == 1


def test_inner_product_is_linear():
    for a in range(16):
        for c in range(16):
            for b in range(16):
                assert inner_product(a ^ c, b) == inner_product(a, b) ^ inner_product(c, b)


def test_bijection_border():
    table = lat(TWINE, 4)
    assert table[0][0] == 8
    assert all(table[0][b] == 0 for b in range(1, 16))
    assert all(table[a][0] == 0 for a in range(1, 16))


def test_identity_table_is_diagonal():
    table = lat(IDENTITY, 4)
    assert all(table[a][b] == (8 if a == b else 0) for a in range(16) for b in range(16))
    assert max_lat(table) == 8


def test_identity_carl1():
    assert carl1(lat(IDENTITY, 4)) == 4


def test_twine_bias_below_linear():
    assert max_lat(lat(TWINE, 4)) < 8


def test_max_lat_skips_border():
    assert max_lat([[9, 9, 9], [9, 2, 1], [9, 0, 3]]) == 3


def test_carl1_needs_four_bit_table():
    with pytest.raises(ValueError):
        carl1([[0]])


def test_bad_sbox_rejected():
    with pytest.raises(ValueError):
        lat(TWINE, 3)
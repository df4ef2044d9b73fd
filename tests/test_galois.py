from __future__ import annotations

import pytest

from qrforge.galois import (
    EXP_TABLE,
    LOG_TABLE,
    generator_polynomial,
    gf_divide,
    gf_inverse,
    gf_multiply,
    gf_power,
    rs_remainder,
)


def evaluate(polynomial: list[int], x: int) -> int:
    result = 0
    for coefficient in polynomial:
        result = gf_multiply(result, x) ^ coefficient
    return result


def test_tables_are_inverse_of_each_other() -> None:
    for value in range(1, 256):
        assert EXP_TABLE[LOG_TABLE[value]] == value
    assert EXP_TABLE[8] == 29
    assert EXP_TABLE[255] == 1


def test_field_operations() -> None:
    for a in range(1, 256):
        assert gf_multiply(a, gf_inverse(a)) == 1
        assert gf_divide(gf_multiply(a, 83), 83) == a
    assert gf_multiply(0, 17) == 0
    assert gf_power(2, 8) == 29
    assert gf_power(0, 0) == 1


def test_division_by_zero() -> None:
    with pytest.raises(ZeroDivisionError):
        gf_divide(5, 0)
    with pytest.raises(ZeroDivisionError):
        gf_inverse(0)


@pytest.mark.parametrize(
    "degree, exponents",
    [
        (7, [87, 229, 146, 149, 238, 102, 21]),
        (10, [251, 67, 46, 61, 118, 70, 64, 94, 32, 45]),
        (13, [74, 152, 176, 100, 86, 100, 106, 104, 130, 218, 206, 140, 78]),
    ],
)
def test_generator_polynomial_coefficients(degree: int, exponents: list[int]) -> None:
    polynomial = generator_polynomial(degree)
    assert len(polynomial) == degree + 1
    assert polynomial[0] == 1
    assert [LOG_TABLE[coefficient] for coefficient in polynomial[1:]] == exponents


def test_hello_world_error_correction() -> None:
    data = [32, 91, 11, 120, 209, 114, 220, 77, 67, 64, 236, 17, 236, 17, 236, 17]
    assert rs_remainder(data, 10) == [196, 35, 39, 119, 235, 215, 231, 226, 93, 23]


def test_codeword_is_divisible_by_generator() -> None:
    data = [64, 86, 134, 86, 198, 198, 242, 7, 118, 247, 38, 198, 66, 0]
    codeword = data + rs_remainder(data, 18)
    for power in range(18):
        assert evaluate(codeword, EXP_TABLE[power]) == 0

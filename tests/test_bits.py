from __future__ import annotations

import pytest

from qrforge.bits import BitBuffer


def test_put_appends_most_significant_bit_first() -> None:
    buffer = BitBuffer()
    buffer.put(0b0100, 4)
    buffer.put(5, 8)
    assert len(buffer) == 12
    assert buffer.bits[0:4] == [0, 1, 0, 0]
    assert buffer.bits[-3:] == [1, 0, 1]


def test_put_bit_and_to_bytes() -> None:
    buffer = BitBuffer()
    for bit in "001010110010101001010101":
        buffer.put_bit(bit == "1")
    assert buffer.to_bytes() == [43, 42, 85]


def test_put_zero_length_is_noop() -> None:
    buffer = BitBuffer()
    buffer.put(0, 0)
    assert len(buffer) == 0


def test_put_rejects_values_that_do_not_fit() -> None:
    with pytest.raises(ValueError):
        BitBuffer().put(16, 4)


def test_to_bytes_requires_whole_bytes() -> None:
    buffer = BitBuffer()
    buffer.put(1, 3)
    with pytest.raises(AssertionError):
        buffer.to_bytes()

import pytest

from aoctools.chars import LowerAlpha
from aoctools.registers import (
    RegisterOutOfBoundsError,
    Registers,
    VmError,
    register_index,
    standard_registers,
)


def test_basic_operations():
    r = standard_registers(5)
    for i in range(5):
        assert r.get(i) == 0

    r.set(2, -5)
    assert r.get(2) == -5

    with pytest.raises(RegisterOutOfBoundsError):
        r.get(5)
    with pytest.raises(RegisterOutOfBoundsError):
        r.set(5, 1)


def test_out_of_bounds_is_vm_error():
    r = Registers(2, 0)
    with pytest.raises(VmError) as info:
        r.get(7)
    assert info.value.index == 7
    assert str(info.value) == "Register index out of bounds: 7"


def test_register_index_from_lower_alpha():
    assert register_index(LowerAlpha("c")) == 2
    assert register_index(4) == 4


def test_register_index_rejects_negative():
    with pytest.raises(RegisterOutOfBoundsError):
        register_index(-1)


def test_letter_indexing():
    r = standard_registers(26)
    r.set(LowerAlpha("z"), 9)
    assert r.get(25) == 9


def test_len_iter_and_str():
    r = Registers(3, 1)
    r.set(1, 7)
    assert len(r) == 3
    assert list(r) == [1, 7, 1]
    assert str(r) == "Registers:\n000: 1\n001: 7\n002: 1"


def test_registers_are_independent():
    a = standard_registers(2)
    b = standard_registers(2)
    a.set(0, 3)
    assert b.get(0) == 0
    assert a != b
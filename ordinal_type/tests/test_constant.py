# -*- coding: utf-8 -*-

import pytest

from ordinal_type.constant import IntType


def test_names_and_values():
    assert 'U8' in IntType.names()
    assert 'ISIZE' in IntType.names()
    assert len(IntType.values()) == 12
    assert 'bounds' not in IntType.names()


@pytest.mark.parametrize('name', ['u8', 'u128', 'usize', 'i8', 'i64', 'isize'])
def test_is_valid(name):
    assert IntType.is_valid(name)


@pytest.mark.parametrize('name', ['u7', 'int', '', None, 8])
def test_is_not_valid(name):
    assert not IntType.is_valid(name)


def test_bounds():
    assert IntType.bounds(IntType.U8) == (0, 255)
    assert IntType.bounds(IntType.I8) == (-128, 127)
    assert IntType.bounds(IntType.USIZE) == (0, 2 ** 64 - 1)
    assert IntType.bounds(IntType.ISIZE) == (-2 ** 63, 2 ** 63 - 1)
    assert IntType.bounds(IntType.I128) == (-2 ** 127, 2 ** 127 - 1)


def test_signed():
    assert IntType.is_signed('i32')
    assert not IntType.is_signed('u32')


def test_bounds_unknown():
    with pytest.raises(ValueError):
        IntType.bounds('f64')

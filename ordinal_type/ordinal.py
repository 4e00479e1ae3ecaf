# -*- coding: utf-8 -*-

# Copyright 2009 SendCloud
#
# Licensed under the Apache License, Version 2.0 (the "License"); you may
# not use this file except in compliance with the License. You may obtain
# a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
# WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
# License for the specific language governing permissions and limitations
# under the License.

"""
Ordinal formatting of integers: 1 -> 1st, 2 -> 2nd, 11 -> 11th, -21 -> -21st.

The suffix is taken from the magnitude's last two digits, the sign is kept
in front of the digits. Python integers never overflow on ``abs()``, so the
smallest 64-bit value needs no special path: ``abs(-2 ** 63) % 100`` is the
same 8 that its unsigned two's-complement reading gives.
"""

import functools
import logging
import operator

from cached_property import cached_property

from ordinal_type.constant import IntType

__all__ = [
    'Ordinal',
    'OrdinalRangeError',
    'render',
    'suffix_for',
    'to_ordinal',
]

SUFFIXES = {1: 'st', 2: 'nd', 3: 'rd'}
TEENS = (11, 12, 13)

LOG = logging.getLogger(__name__)


class OrdinalRangeError(OverflowError):
    def __init__(self, value, int_type):
        super().__init__(value, int_type)
        self.value = value
        self.int_type = int_type

    def __str__(self):
        low, high = IntType.bounds(self.int_type)
        return 'ordinal value %d does not fit in %s [%d, %d]' % (self.value, self.int_type, low, high)


def _as_int(value):
    # bool is an int subclass, True would render as "1st"
    if isinstance(value, bool):
        raise TypeError('ordinal requires an integer, got bool')
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError('ordinal requires an integer, got %s' % type(value).__name__) from None


def suffix_for(value):
    """Return "st", "nd", "rd" or "th" for an integer."""
    magnitude = abs(_as_int(value))
    if magnitude % 100 in TEENS:
        return 'th'
    return SUFFIXES.get(magnitude % 10, 'th')


def render(value):
    """Return the integer's decimal digits followed by its ordinal suffix."""
    value = _as_int(value)
    return '%d%s' % (value, suffix_for(value))


@functools.total_ordering
class Ordinal(object):
    """An integer that displays as an ordinal number.

    Instances are immutable; ``str()`` gives the ordinal text.

    >>> str(Ordinal(22))
    '22nd'
    >>> Ordinal(113).suffix
    'th'
    """

    def __init__(self, value=0):
        object.__setattr__(self, '_value', _as_int(value))

    def __setattr__(self, name, value):
        raise AttributeError('%s is immutable' % type(self).__name__)

    def __delattr__(self, name):
        raise AttributeError('%s is immutable' % type(self).__name__)

    @property
    def value(self):
        return self._value

    @cached_property
    def suffix(self):
        return suffix_for(self._value)

    def __str__(self):
        return '%d%s' % (self._value, self.suffix)

    def __repr__(self):
        return '%s(%d)' % (type(self).__name__, self._value)

    def __int__(self):
        return self._value

    __index__ = __int__

    def __hash__(self):
        return hash(self._value)

    def __eq__(self, other):
        if not isinstance(other, Ordinal):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other):
        if not isinstance(other, Ordinal):
            return NotImplemented
        return self._value < other._value

    def to_primitive(self):
        return self._value

    def to(self, int_type):
        """Return the value if it fits ``int_type``, else raise OrdinalRangeError."""
        low, high = IntType.bounds(int_type)
        if not low <= self._value <= high:
            LOG.debug('value %s out of %s range [%s, %s]', self._value, int_type, low, high)
            raise OrdinalRangeError(self._value, int_type)
        return self._value

    def to_u8(self):
        return self.to(IntType.U8)

    def to_u16(self):
        return self.to(IntType.U16)

    def to_u32(self):
        return self.to(IntType.U32)

    def to_u64(self):
        return self.to(IntType.U64)

    def to_u128(self):
        return self.to(IntType.U128)

    def to_usize(self):
        return self.to(IntType.USIZE)

    def to_i8(self):
        return self.to(IntType.I8)

    def to_i16(self):
        return self.to(IntType.I16)

    def to_i32(self):
        return self.to(IntType.I32)

    def to_i64(self):
        return self.to(IntType.I64)

    def to_i128(self):
        return self.to(IntType.I128)

    def to_isize(self):
        return self.to(IntType.ISIZE)


def to_ordinal(value):
    return Ordinal(value)

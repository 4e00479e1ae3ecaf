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

import re

EMPTY_MAPPING = {}
RE_CONSTANT_NAME = re.compile('^[A-Z][A-Z0-9_]*$')


class Constant:
    __mapping__ = EMPTY_MAPPING

    @classmethod
    def initialize(cls):
        if cls.__mapping__ is EMPTY_MAPPING:
            cls.__mapping__ = {k: v for k, v in cls.__dict__.items() if RE_CONSTANT_NAME.match(k)}

    @classmethod
    def names(cls):
        cls.initialize()
        return list(cls.__mapping__.keys())

    @classmethod
    def values(cls):
        cls.initialize()
        return list(cls.__mapping__.values())

    @classmethod
    def is_valid(cls, item):
        cls.initialize()
        return item in cls.__mapping__.values()


class IntType(Constant):
    """Fixed-width integer types an ordinal can be converted to.

    ``usize``/``isize`` are treated as 64 bits wide.
    """
    U8 = 'u8'
    U16 = 'u16'
    U32 = 'u32'
    U64 = 'u64'
    U128 = 'u128'
    USIZE = 'usize'
    I8 = 'i8'
    I16 = 'i16'
    I32 = 'i32'
    I64 = 'i64'
    I128 = 'i128'
    ISIZE = 'isize'

    @classmethod
    def bits(cls, name):
        if not cls.is_valid(name):
            raise ValueError('unknown integer type %r, expected one of: %s' % (name, ', '.join(cls.values())))
        if name.endswith('size'):
            return 64
        return int(name[1:])

    @classmethod
    def is_signed(cls, name):
        cls.bits(name)
        return name.startswith('i')

    @classmethod
    def bounds(cls, name):
        bits = cls.bits(name)
        if cls.is_signed(name):
            return -(1 << (bits - 1)), (1 << (bits - 1)) - 1
        return 0, (1 << bits) - 1

# -*- coding: utf-8 -*-

from ordinal_type.constant import IntType
from ordinal_type.ordinal import Ordinal, OrdinalRangeError, render, suffix_for, to_ordinal

__version__ = '0.1.0'

__all__ = [
    'IntType',
    'Ordinal',
    'OrdinalRangeError',
    'render',
    'suffix_for',
    'to_ordinal',
]

import numbers
from enum import IntEnum
from typing import Any, Dict

import numpy as np


# ----------------------------------------------------------------------------------------------------------------------

class BoundKind(IntEnum):
    '''
    The kind of an interval endpoint.

    The integer values establish the strictness ordering ``OPEN < CLOSED < UNBOUNDED``,
    which is used for breaking ties between endpoints sharing the same value. It is
    never used to compare the magnitude of values.
    '''
    OPEN = 0
    CLOSED = 1
    UNBOUNDED = 2

    @staticmethod
    def stricter(k1: 'BoundKind', k2: 'BoundKind') -> 'BoundKind':
        '''Return the stricter of the two kinds ``k1`` and ``k2``.'''
        return k1 if k1 <= k2 else k2

    @staticmethod
    def from_json(data: str) -> 'BoundKind':
        return BoundKind[data.upper()]

    def to_json(self) -> str:
        return self.name.lower()


OPEN = BoundKind.OPEN
CLOSED = BoundKind.CLOSED
UNBOUNDED = BoundKind.UNBOUNDED


# ----------------------------------------------------------------------------------------------------------------------

class Point:
    '''
    A single boundary value of an interval tagged with its :class:`BoundKind`.

    Points are immutable and hashable.
    '''

    __slots__ = ('_value', '_kind')

    def __init__(self, value: numbers.Real, kind: BoundKind):
        self._value = value
        self._kind = BoundKind(kind)

    @staticmethod
    def open(value: numbers.Real) -> 'Point':
        return Point(value, OPEN)

    @staticmethod
    def closed(value: numbers.Real) -> 'Point':
        return Point(value, CLOSED)

    @staticmethod
    def ninf() -> 'Point':
        '''The unbounded lower point at -∞.'''
        return Point(-np.inf, UNBOUNDED)

    @staticmethod
    def pinf() -> 'Point':
        '''The unbounded upper point at +∞.'''
        return Point(np.inf, UNBOUNDED)

    @property
    def value(self) -> numbers.Real:
        return self._value

    @property
    def kind(self) -> BoundKind:
        return self._kind

    def isinclusive(self) -> bool:
        return self._kind is CLOSED

    def isunbounded(self) -> bool:
        return self._kind is UNBOUNDED

    def __setattr__(self, key, value):
        if hasattr(self, '_kind'):
            raise AttributeError('%s objects are immutable.' % type(self).__name__)
        super().__setattr__(key, value)

    def __eq__(self, other: Any) -> bool:
        return (
            isinstance(other, Point) and
            self._kind == other._kind and
            self._value == other._value
        )

    def __hash__(self):
        return hash((Point, self._value, self._kind))

    def __repr__(self):
        return '<Point value=%s kind=%s>' % (self._value, self._kind.name)

    def __reduce__(self):
        return Point, (self._value, self._kind)

    def to_json(self) -> Dict[str, Any]:
        return {
            'value': None if self.isunbounded() else self._value,
            'kind': self._kind.to_json()
        }

    @staticmethod
    def from_json(data: Dict[str, Any], upper: bool = False) -> 'Point':
        '''
        Reconstruct a point from its JSON representation.

        Unbounded points do not carry a value in their JSON form, so ``upper``
        determines whether the infinity is positive or negative.
        '''
        kind = BoundKind.from_json(data['kind'])
        if kind is UNBOUNDED:
            return Point.pinf() if upper else Point.ninf()
        return Point(data['value'], kind)

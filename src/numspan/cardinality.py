import numbers
from functools import total_ordering
from typing import Any, Optional

import numpy as np

from .base.constants import SYMBOL


# ----------------------------------------------------------------------------------------------------------------------

@total_ordering
class Cardinality:
    '''
    The number of members of an interval.

    A cardinality is either finite, carrying a non-negative integer count, or the
    distinguished :attr:`Cardinality.INFINITE` value. The infinite cardinality is
    never converted into an integer: ``int(Cardinality.INFINITE)`` raises an
    ``OverflowError`` just like ``int(float('inf'))`` does.

    Cardinalities compare to each other and to plain numbers:

        >>> Cardinality(3) == 3
        True
        >>> Cardinality(3) < Cardinality.INFINITE
        True
        >>> Cardinality.INFINITE == float('inf')
        True
    '''

    __slots__ = ('_n',)

    INFINITE = None  # set below

    def __init__(self, n: Optional[int] = None):
        if n is not None:
            if not isinstance(n, numbers.Integral) or n < 0:
                raise ValueError('Finite cardinality must be a non-negative integer, got %r' % n)
            n = int(n)
        self._n = n

    def isfinite(self) -> bool:
        return self._n is not None

    def isinf(self) -> bool:
        return self._n is None

    def _key(self):
        return np.inf if self._n is None else self._n

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Cardinality):
            return self._n == other._n
        if isinstance(other, numbers.Number):
            return self._key() == other
        return NotImplemented

    def __lt__(self, other: Any) -> bool:
        if isinstance(other, Cardinality):
            return self._key() < other._key()
        if isinstance(other, numbers.Number):
            return self._key() < other
        return NotImplemented

    def __hash__(self):
        return hash(self._key())

    def __int__(self):
        if self._n is None:
            raise OverflowError('Cannot convert an infinite cardinality to an integer.')
        return self._n

    def __index__(self):
        return int(self)

    def __bool__(self):
        return self._n != 0

    def __str__(self):
        return SYMBOL.INFTY if self._n is None else str(self._n)

    def __repr__(self):
        return '<Cardinality %s>' % self


Cardinality.INFINITE = Cardinality()

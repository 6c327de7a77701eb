'''
Numeric domains intervals can be defined over.

A domain fixes which values are admissible as interval bounds, how they are
normalized and rendered, and whether (and how) the members of a finite
interval are enumerated. Integers and reals are kept as distinct domains:
only the integer domain has a natural successor function, so the real domain
materializes values only if it has been given an explicit ``step``.
'''
import math
import numbers
from typing import Any, Dict, Optional, Union

import numpy as np

from .base.constants import SYMBOL
from .base.errors import DomainError
from .points import Point
from .shapes import Shape


# ----------------------------------------------------------------------------------------------------------------------

class NumericDomain:
    '''
    Abstract base class of totally ordered numeric domains with a
    representable positive and negative infinity.
    '''

    NAME = None
    CHAR = None

    ninf = -np.inf
    pinf = np.inf

    def coerce(self, value: Any) -> numbers.Real:
        '''
        Validate ``value`` as a bound of an interval in this domain and return its
        normalized representation. The infinities are always admissible.

        :raises DomainError: if ``value`` does not belong to the domain.
        '''
        if not isinstance(value, numbers.Real) or isinstance(value, bool):
            raise DomainError('%r is not a number.' % (value,))
        if math.isnan(value):
            raise DomainError('NaN is not a member of %s.' % self)
        if math.isinf(value):
            return self.pinf if value > 0 else self.ninf
        return self._coerce_finite(value)

    def _coerce_finite(self, value: numbers.Real) -> numbers.Real:
        raise NotImplementedError()

    def ismember(self, value: Any) -> bool:
        '''Check if ``value`` is a finite member of this domain.'''
        try:
            return not math.isinf(self.coerce(value))
        except DomainError:
            return False

    def fmt(self, value: numbers.Real) -> str:
        '''Render the bound ``value`` as a string.'''
        if value == self.ninf:
            return SYMBOL.NINFTY
        if value == self.pinf:
            return SYMBOL.PINFTY
        return self._fmt_finite(value)

    def _fmt_finite(self, value: numbers.Real) -> str:
        return str(value)

    def materialize(self, lower: Point, upper: Point, shape: Shape) -> Optional[np.ndarray]:
        '''
        Enumerate the members of the interval ``shape`` spanned by ``lower`` and
        ``upper`` in ascending order.

        Returns ``None`` for all shapes that cannot be enumerated. The returned
        array is read-only.
        '''
        if shape is Shape.DEGENERATE:
            values = np.array([lower.value])
        elif shape.isfinite():
            values = self._enumerate(lower, upper)
            if values is None:
                return None
        else:
            return None
        values.flags.writeable = False
        return values

    def _enumerate(self, lower: Point, upper: Point) -> Optional[np.ndarray]:
        raise NotImplementedError()

    def __eq__(self, other: Any) -> bool:
        return type(self) is type(other)

    def __hash__(self):
        return hash(type(self))

    def __str__(self):
        return self.CHAR

    def __repr__(self):
        return '<%s>' % type(self).__name__

    def to_json(self) -> Dict[str, Any]:
        return {'type': self.NAME}

    @staticmethod
    def from_json(data: Union[str, Dict[str, Any]]) -> 'NumericDomain':
        if isinstance(data, str):
            data = {'type': data}
        if data['type'] == IntegerDomain.NAME:
            return Z
        elif data['type'] == RealDomain.NAME:
            return RealDomain(step=data.get('step'))
        raise TypeError('Unknown domain type: %s' % data['type'])


# ----------------------------------------------------------------------------------------------------------------------

class IntegerDomain(NumericDomain):
    '''
    The integers. Bounds are normalized to Python ``int``; integral floats
    like ``2.0`` are accepted.
    '''

    NAME = 'integer'
    CHAR = 'ℤ'

    def _coerce_finite(self, value: numbers.Real) -> int:
        if isinstance(value, numbers.Integral):
            return int(value)
        if float(value).is_integer():
            return int(value)
        raise DomainError('%s is not a member of %s.' % (value, self))

    def _enumerate(self, lower: Point, upper: Point) -> np.ndarray:
        start = lower.value if lower.isinclusive() else lower.value + 1
        stop = upper.value + 1 if upper.isinclusive() else upper.value
        return np.arange(start, max(start, stop), dtype=np.int64)


# ----------------------------------------------------------------------------------------------------------------------

class RealDomain(NumericDomain):
    '''
    The reals, approximated by 64-bit floats.

    Intervals over the reals are uncountable, so by default their members are
    not enumerated. If ``step`` is given, the grid values ``lower + k * step``
    lying inside a finite interval are materialized.
    '''

    NAME = 'real'
    CHAR = 'ℝ'

    # Relative tolerance for matching grid points against the bounds
    TOLERANCE = 1e-9

    def __init__(self, step: Optional[float] = None):
        if step is not None and not step > 0:
            raise ValueError('Step must be positive, got %s' % step)
        self.step = None if step is None else float(step)

    def _coerce_finite(self, value: numbers.Real) -> float:
        return float(value)

    def _enumerate(self, lower: Point, upper: Point) -> Optional[np.ndarray]:
        if self.step is None:
            return None
        span = (upper.value - lower.value) / self.step
        n = int(math.floor(span + self.TOLERANCE * max(1., abs(span))))
        values = lower.value + self.step * np.arange(n + 1, dtype=np.float64)
        # grid points within rounding error of a bound are snapped onto it
        values[np.isclose(values, upper.value, rtol=self.TOLERANCE, atol=0)] = upper.value
        values[np.isclose(values, lower.value, rtol=self.TOLERANCE, atol=0)] = lower.value
        mask = values <= upper.value if upper.isinclusive() else values < upper.value
        if not lower.isinclusive():
            mask &= values > lower.value
        return values[mask]

    def __eq__(self, other: Any) -> bool:
        return type(self) is type(other) and self.step == other.step

    def __hash__(self):
        return hash((type(self), self.step))

    def __str__(self):
        if self.step is None:
            return self.CHAR
        return '%s[%s]' % (self.CHAR, self.step)

    def __repr__(self):
        return '<%s step=%s>' % (type(self).__name__, self.step)

    def to_json(self) -> Dict[str, Any]:
        return {'type': self.NAME, 'step': self.step}


# ----------------------------------------------------------------------------------------------------------------------

Z = IntegerDomain()
R = RealDomain()

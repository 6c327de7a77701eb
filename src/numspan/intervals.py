import logging
import math
import numbers
import re
from typing import Any, Dict, Iterator, Optional

import numpy as np
from dnutils import getlogger, ifnone, logs

from .base.constants import (
    SYMBOL,
    STR_EMPTY,
    SET_VARIABLE,
    NOTATIONS,
    NOTATION_PAR,
    NOTATION_SQ,
    NOTATION_SET,
    DEFAULT_NOTATION,
    sepcomma
)
from .base.errors import InvalidBoundsError, DomainError, ParseError
from .base.utils import minimum, maximum
from .cardinality import Cardinality
from .domains import NumericDomain, Z
from .points import Point, BoundKind, OPEN, CLOSED, UNBOUNDED
from .shapes import Shape, classify


logger = getlogger('/numspan', level=logs.INFO)


_NOVALUES = np.array([])
_NOVALUES.flags.writeable = False


# ----------------------------------------------------------------------------------------------------------------------

class Interval:
    '''
    An interval over a numeric domain, spanned by a lower and an upper :class:`Point`.

    The shape of an interval is derived from its two points upon construction
    and cannot be set otherwise. If the shape is finite, the members of the
    interval are enumerated eagerly and are available as :attr:`values`.

    Intervals are immutable. All operations combining intervals return new
    instances.

    :Example:

        >>> i = Interval.open(0, 9)
        >>> i.values
        array([1, 2, 3, 4, 5, 6, 7, 8])
        >>> 9 in i
        False
        >>> print(i & Interval.closed(2, 12))
        [2,9)
        >>> print(Interval.atleast(2) & Interval.lessthan(1))
        {}
    '''

    __slots__ = ('_lower', '_upper', '_shape', '_values', '_domain')

    def __init__(self, lower: Point, upper: Point, domain: Optional[NumericDomain] = None):
        domain = ifnone(domain, Z)
        lower = Interval._check_point(lower, domain, upper=False)
        upper = Interval._check_point(upper, domain, upper=True)
        if lower.value > upper.value:
            raise InvalidBoundsError(
                'Lower bound %s must not be greater than upper bound %s.' % (lower.value, upper.value),
                lower=lower,
                upper=upper
            )
        self._setup(lower, upper, classify(lower, upper), domain)

    def _setup(self, lower: Point, upper: Point, shape: Shape, domain: NumericDomain) -> None:
        self._lower = lower
        self._upper = upper
        self._shape = shape
        self._domain = domain
        self._values = domain.materialize(lower, upper, shape)

    @staticmethod
    def _check_point(point: Point, domain: NumericDomain, upper: bool) -> Point:
        if not isinstance(point, Point):
            raise TypeError('Expected a Point, got %s.' % type(point).__name__)
        value = domain.coerce(point.value)
        if point.isunbounded():
            if value != (domain.pinf if upper else domain.ninf):
                raise InvalidBoundsError(
                    'Unbounded %s point must be at %s, got %s.' % (
                        'upper' if upper else 'lower',
                        SYMBOL.PINFTY if upper else SYMBOL.NINFTY,
                        value
                    )
                )
        elif math.isinf(value):
            raise InvalidBoundsError(
                'Infinite value %s requires an unbounded point, got %s.' % (value, point.kind.name)
            )
        return Point(value, point.kind)

    # ------------------------------------------------------------------------------------------------------------------
    # Generation functions

    @staticmethod
    def open(lower: numbers.Real, upper: numbers.Real, domain: NumericDomain = None) -> 'Interval':
        '''The open interval ``(lower,upper)``.'''
        return Interval(Point.open(lower), Point.open(upper), domain)

    @staticmethod
    def closed(lower: numbers.Real, upper: numbers.Real, domain: NumericDomain = None) -> 'Interval':
        '''The closed interval ``[lower,upper]``.'''
        return Interval(Point.closed(lower), Point.closed(upper), domain)

    @staticmethod
    def openclosed(lower: numbers.Real, upper: numbers.Real, domain: NumericDomain = None) -> 'Interval':
        '''The left-open interval ``(lower,upper]``.'''
        return Interval(Point.open(lower), Point.closed(upper), domain)

    @staticmethod
    def closedopen(lower: numbers.Real, upper: numbers.Real, domain: NumericDomain = None) -> 'Interval':
        '''The right-open interval ``[lower,upper)``.'''
        return Interval(Point.closed(lower), Point.open(upper), domain)

    @staticmethod
    def degenerate(value: numbers.Real, domain: NumericDomain = None) -> 'Interval':
        '''The single-point interval ``{value}``.'''
        return Interval(Point.closed(value), Point.closed(value), domain)

    @staticmethod
    def greaterthan(lower: numbers.Real, domain: NumericDomain = None) -> 'Interval':
        return Interval(Point.open(lower), Point.pinf(), domain)

    @staticmethod
    def atleast(lower: numbers.Real, domain: NumericDomain = None) -> 'Interval':
        return Interval(Point.closed(lower), Point.pinf(), domain)

    @staticmethod
    def lessthan(upper: numbers.Real, domain: NumericDomain = None) -> 'Interval':
        return Interval(Point.ninf(), Point.open(upper), domain)

    @staticmethod
    def atmost(upper: numbers.Real, domain: NumericDomain = None) -> 'Interval':
        return Interval(Point.ninf(), Point.closed(upper), domain)

    @staticmethod
    def unbounded(domain: NumericDomain = None) -> 'Interval':
        '''The interval ``(-∞,+∞)`` covering the whole domain.'''
        return Interval(Point.ninf(), Point.pinf(), domain)

    @staticmethod
    def emptyset(domain: NumericDomain = None) -> 'Interval':
        '''
        The empty interval.

        This is the only interval whose shape is not derived from its points, which
        are both set to ``Point(0, OPEN)``.
        '''
        empty = Interval.__new__(Interval)
        empty._setup(Point.open(0), Point.open(0), Shape.EMPTY, ifnone(domain, Z))
        return empty

    # ------------------------------------------------------------------------------------------------------------------
    # Queries

    @property
    def lower(self) -> Point:
        return self._lower

    @property
    def upper(self) -> Point:
        return self._upper

    @property
    def shape(self) -> Shape:
        return self._shape

    @property
    def domain(self) -> NumericDomain:
        return self._domain

    @property
    def values(self) -> np.ndarray:
        '''
        The ascending, read-only array of members of this interval.

        The array is empty if the interval has not been materialized, which is the
        case for all shapes involving an infinity, for the empty interval, and for
        finite intervals over domains without a step size.
        '''
        return _NOVALUES if self._values is None else self._values

    def ismaterialized(self) -> bool:
        return self._values is not None

    def isempty(self) -> bool:
        return self._shape is Shape.EMPTY

    def isninf(self) -> bool:
        '''Check if this interval is unbounded towards -∞.'''
        return self._lower.isunbounded()

    def ispinf(self) -> bool:
        '''Check if this interval is unbounded towards +∞.'''
        return self._upper.isunbounded()

    def isinf(self) -> bool:
        return self.isninf() or self.ispinf()

    def contains(self, value: Any) -> bool:
        '''
        Check if ``value`` is a member of this interval.

        Values that do not belong to the domain of this interval are never
        contained, so this check never fails.
        '''
        shape = self._shape
        if shape is Shape.EMPTY:
            return False
        try:
            value = self._domain.coerce(value)
        except DomainError:
            return False
        if shape is Shape.UNBOUNDED:
            return True
        if shape is Shape.DEGENERATE:
            return value == self._lower.value
        return _above(self._lower, value) and _below(self._upper, value)

    def count(self) -> Cardinality:
        '''
        The number of members of this interval.

        Intervals involving an infinity, as well as finite intervals over
        uncountable domains, have :attr:`Cardinality.INFINITE` members.
        '''
        if self._shape is Shape.EMPTY:
            return Cardinality(0)
        if self._shape is Shape.DEGENERATE:
            return Cardinality(1)
        if self._values is None:
            return Cardinality.INFINITE
        return Cardinality(len(self._values))

    # ------------------------------------------------------------------------------------------------------------------
    # Combination

    def intersection(self, other: 'Interval') -> 'Interval':
        '''Compute the intersection of this interval with ``other``.'''
        return intersect(self, other)

    def intersects(self, other: 'Interval') -> bool:
        return not intersect(self, other).isempty()

    # ------------------------------------------------------------------------------------------------------------------
    # Presentation

    def pfmt(self, notation: str = None) -> str:
        '''
        Render this interval as a string.

        :param notation:  ``'par'`` for parenthesis notation like ``(0,9]``,
                          ``'sq'`` for square-bracket notation like ``]0,9]``, or
                          ``'set'`` for set-builder notation like ``{x | 0 < x <= 9}``.
                          Defaults to :data:`DEFAULT_NOTATION`.
        '''
        notation = ifnone(notation, DEFAULT_NOTATION)
        if notation not in NOTATIONS:
            raise ValueError('Unknown notation %r, expected one of %s.' % (notation, ', '.join(NOTATIONS)))
        if self._shape is Shape.EMPTY:
            return STR_EMPTY
        if notation == NOTATION_SET:
            return self.setnotation()
        fmt = self._domain.fmt
        if self._shape is Shape.DEGENERATE:
            return '{%s}' % fmt(self._lower.value)
        if notation == NOTATION_SQ:
            ldelim = '[' if self._lower.isinclusive() else ']'
            rdelim = ']' if self._upper.isinclusive() else '['
        else:
            ldelim = '[' if self._lower.isinclusive() else '('
            rdelim = ']' if self._upper.isinclusive() else ')'
        return '%s%s%s%s%s' % (ldelim, fmt(self._lower.value), sepcomma, fmt(self._upper.value), rdelim)

    def setnotation(self) -> str:
        '''Render this interval in set-builder notation, e.g. ``{x | 0 < x < 9}``.'''
        x = SET_VARIABLE
        fmt = self._domain.fmt
        if self._shape is Shape.EMPTY:
            return STR_EMPTY
        if self._shape is Shape.UNBOUNDED:
            return '{%s}' % x
        if self._shape is Shape.DEGENERATE:
            return '{%s %s %s %s %s}' % (x, SYMBOL.MID, x, SYMBOL.EQ, fmt(self._lower.value))
        lop = SYMBOL.LTE if self._lower.isinclusive() else SYMBOL.LT
        uop = SYMBOL.LTE if self._upper.isinclusive() else SYMBOL.LT
        if self.isninf():
            predicate = '%s %s %s' % (x, uop, fmt(self._upper.value))
        elif self.ispinf():
            predicate = '%s %s %s' % (x, SYMBOL.GTE if self._lower.isinclusive() else SYMBOL.GT, fmt(self._lower.value))
        else:
            predicate = '%s %s %s %s %s' % (fmt(self._lower.value), lop, x, uop, fmt(self._upper.value))
        return '{%s %s %s}' % (x, SYMBOL.MID, predicate)

    @staticmethod
    def parse(s: str, domain: NumericDomain = None) -> 'Interval':
        '''
        Parse an interval from its string representation.

        Accepts parenthesis and square-bracket notation, ``{}`` or ``∅`` for the
        empty set and ``{a}`` for a single point. Infinities may be written as
        ``inf`` or ``∞`` with an optional sign.

        :Example:

            >>> Interval.parse('(0, 9]')
            <Interval=(0,9]>
            >>> Interval.parse(']-inf, 2[')
            <Interval=(-∞,2)>
        '''
        s_ = s.replace(' ', '').replace(SYMBOL.INFTY, 'inf')
        if s_ in (STR_EMPTY, SYMBOL.EMPTYSET):
            return Interval.emptyset(domain)
        match = _RE_DEGENERATE.match(s_)
        if match is not None:
            return Interval.degenerate(_parse_value(match.group('val'), s), domain)
        match = _RE_INTERVAL.match(s_)
        if match is None:
            raise ParseError('Illegal interval: %s' % s)
        lval = _parse_value(match.group('lval'), s)
        rval = _parse_value(match.group('rval'), s)
        lower = Point(lval, UNBOUNDED if math.isinf(lval) else (CLOSED if match.group('ldelim') == '[' else OPEN))
        upper = Point(rval, UNBOUNDED if math.isinf(rval) else (CLOSED if match.group('rdelim') == ']' else OPEN))
        result = Interval(lower, upper, domain)
        if logger.level <= logging.DEBUG:
            logger.debug('Parsed %r as %s' % (s, result))
        return result

    def __str__(self):
        return self.pfmt()

    def __repr__(self):
        return '<{}={}>'.format(__class__.__name__, self.pfmt(NOTATION_PAR))

    # ------------------------------------------------------------------------------------------------------------------
    # Serialization

    def to_json(self) -> Dict[str, Any]:
        return {
            'type': 'interval',
            'domain': self._domain.to_json(),
            'shape': self._shape.value,
            'lower': self._lower.to_json(),
            'upper': self._upper.to_json()
        }

    @staticmethod
    def from_json(data: Dict[str, Any]) -> 'Interval':
        '''
        Reconstruct an interval from its JSON representation.

        The shape and values are recomputed from the points, only the empty
        interval is recognized by its shape.
        '''
        if data.get('type') != 'interval':
            raise TypeError('Unknown type: %s' % data.get('type'))
        domain = NumericDomain.from_json(data['domain'])
        if data['shape'] == Shape.EMPTY.value:
            return Interval.emptyset(domain)
        return Interval(
            Point.from_json(data['lower']),
            Point.from_json(data['upper'], upper=True),
            domain
        )

    def __getstate__(self):
        return self.to_json()

    def __setstate__(self, state):
        i = Interval.from_json(state)
        self._setup(i._lower, i._upper, i._shape, i._domain)

    # ------------------------------------------------------------------------------------------------------------------
    # Builtins

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def __and__(self, other: 'Interval') -> 'Interval':
        return intersect(self, other)

    def __iter__(self) -> Iterator[numbers.Real]:
        if self._values is None and not self.isempty():
            raise TypeError('The members of %s cannot be enumerated.' % self)
        yield from self.values.tolist()

    def __len__(self):
        count = self.count()
        if count.isinf():
            raise TypeError('%s has no finite length.' % self)
        return int(count)

    def __bool__(self):
        return not self.isempty()

    def __eq__(self, other: Any) -> bool:
        return (
            isinstance(other, Interval) and
            self._shape is other._shape and
            self._lower == other._lower and
            self._upper == other._upper and
            self._domain == other._domain
        )

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((Interval, self._shape, self._lower, self._upper, self._domain))


# ----------------------------------------------------------------------------------------------------------------------
# Membership helpers

def _above(lower: Point, value: numbers.Real) -> bool:
    if lower.kind is UNBOUNDED:
        return True
    return lower.value <= value if lower.kind is CLOSED else lower.value < value


def _below(upper: Point, value: numbers.Real) -> bool:
    if upper.kind is UNBOUNDED:
        return True
    return value <= upper.value if upper.kind is CLOSED else value < upper.value


# ----------------------------------------------------------------------------------------------------------------------
# Parsing helpers

_RE_DEGENERATE = re.compile(r'^\{(?P<val>[^,{}]+)\}$')
_RE_INTERVAL = re.compile(r'^(?P<ldelim>[(\[\]])(?P<lval>[^,]+),(?P<rval>[^,]+)(?P<rdelim>[)\]\[])$')


def _parse_value(token: str, s: str) -> numbers.Real:
    try:
        return int(token)
    except ValueError:
        pass
    try:
        return float(token)
    except ValueError:
        raise ParseError('Illegal value %s in interval %s' % (token, s))


# ----------------------------------------------------------------------------------------------------------------------
# Intersection

def _tighter(p1: Point, p2: Point, larger: bool) -> Point:
    '''
    Return the point bounding the intersection of two intervals on one side.

    If the values differ, the point with the larger (``larger=True``, for lower
    bounds) or smaller value wins. On equal values, the stricter kind wins, so a
    shared value is excluded from the intersection as soon as one side excludes it.
    '''
    if p1.value == p2.value:
        return Point(p1.value, BoundKind.stricter(p1.kind, p2.kind))
    if (p1.value > p2.value) == larger:
        return p1
    return p2


def intersect(a: Interval, b: Interval) -> Interval:
    '''
    Compute the interval representing the set intersection of ``a`` and ``b``.

    The resulting interval is built from scratch, so its shape and values
    are always consistent with its points.

    :raises DomainError: if ``a`` and ``b`` are defined over different domains.
    '''
    if a.isempty() or b.isempty():
        result = Interval.emptyset(b.domain if a.isempty() else a.domain)
    elif a.domain != b.domain:
        raise DomainError('Cannot intersect intervals over %s and %s.' % (a.domain, b.domain))
    elif maximum(a.lower.value, b.lower.value) > minimum(a.upper.value, b.upper.value):
        result = Interval.emptyset(a.domain)
    else:
        result = Interval(
            _tighter(a.lower, b.lower, larger=True),
            _tighter(a.upper, b.upper, larger=False),
            a.domain
        )
    if logger.level <= logging.DEBUG:
        logger.debug('%s ∩ %s = %s' % (a, b, result))
    return result

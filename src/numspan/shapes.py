from enum import Enum

from .points import Point, OPEN, CLOSED, UNBOUNDED


# ----------------------------------------------------------------------------------------------------------------------

class Shape(Enum):
    '''The eleven forms an interval can take.'''
    EMPTY = 'empty'                # {}
    DEGENERATE = 'degenerate'      # [a,a] = {a}
    OPEN = 'open'                  # (a,b) = {x | a < x < b}
    CLOSED = 'closed'              # [a,b] = {x | a <= x <= b}
    OPENCLOSED = 'openclosed'      # (a,b] = {x | a < x <= b}
    CLOSEDOPEN = 'closedopen'      # [a,b) = {x | a <= x < b}
    GREATERTHAN = 'greaterthan'    # (a,+∞) = {x | x > a}
    ATLEAST = 'atleast'            # [a,+∞) = {x | x >= a}
    LESSTHAN = 'lessthan'          # (-∞,b) = {x | x < b}
    ATMOST = 'atmost'              # (-∞,b] = {x | x <= b}
    UNBOUNDED = 'unbounded'        # (-∞,+∞) = {x}

    def isfinite(self) -> bool:
        '''
        ``True`` for the four shapes bounded by two finite points that
        do not coincide.
        '''
        return self in _FINITE

    def ismaterializable(self) -> bool:
        '''``True`` for all shapes whose members can be enumerated.'''
        return self is Shape.DEGENERATE or self in _FINITE

    def isbounded(self) -> bool:
        return self not in _INFINITE

    def isinf(self) -> bool:
        return self in _INFINITE


_FINITE = frozenset([Shape.OPEN, Shape.CLOSED, Shape.OPENCLOSED, Shape.CLOSEDOPEN])
_INFINITE = frozenset([Shape.GREATERTHAN, Shape.ATLEAST, Shape.LESSTHAN, Shape.ATMOST, Shape.UNBOUNDED])


# ----------------------------------------------------------------------------------------------------------------------
# Classification table: (lower kind, upper kind) -> shape

_SHAPES = {
    (OPEN, OPEN): Shape.OPEN,
    (CLOSED, CLOSED): Shape.CLOSED,
    (OPEN, CLOSED): Shape.OPENCLOSED,
    (CLOSED, OPEN): Shape.CLOSEDOPEN,
    (OPEN, UNBOUNDED): Shape.GREATERTHAN,
    (CLOSED, UNBOUNDED): Shape.ATLEAST,
    (UNBOUNDED, OPEN): Shape.LESSTHAN,
    (UNBOUNDED, CLOSED): Shape.ATMOST,
    (UNBOUNDED, UNBOUNDED): Shape.UNBOUNDED,
}


def classify(lower: Point, upper: Point) -> Shape:
    '''
    Determine the shape of the interval spanned by ``lower`` and ``upper``.

    The caller must make sure that ``lower.value <= upper.value``. Two finite
    points with the same value always denote the single-point set ``{a}``,
    irrespective of their kinds, so ``(a,a)``, ``[a,a]``, ``(a,a]`` and ``[a,a)``
    are all classified as :attr:`Shape.DEGENERATE`. The empty shape is never
    returned.
    '''
    shape = _SHAPES[lower.kind, upper.kind]
    if shape.isfinite() and lower.value == upper.value:
        return Shape.DEGENERATE
    return shape

'''Intervals over ordered numeric domains: classification, membership, cardinality and intersection.'''

from .version import __version__

from .base.errors import InvalidBoundsError, EmptyInputError, DomainError, ParseError
from .base.utils import minimum, maximum
from .points import BoundKind, Point, OPEN, CLOSED, UNBOUNDED
from .shapes import Shape, classify
from .cardinality import Cardinality
from .domains import NumericDomain, IntegerDomain, RealDomain, Z, R
from .intervals import Interval, intersect


EMPTY = Interval.emptyset()

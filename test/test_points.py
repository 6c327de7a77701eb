from unittest import TestCase

import pickle

import numpy as np
from ddt import ddt, data, unpack

from numspan import BoundKind, Point, OPEN, CLOSED, UNBOUNDED


@ddt
class BoundKindTest(TestCase):

    def test_strictness_order(self):
        self.assertLess(OPEN, CLOSED)
        self.assertLess(CLOSED, UNBOUNDED)

    @data(
        (OPEN, CLOSED, OPEN),
        (CLOSED, OPEN, OPEN),
        (CLOSED, UNBOUNDED, CLOSED),
        (UNBOUNDED, OPEN, OPEN),
        (UNBOUNDED, UNBOUNDED, UNBOUNDED),
        (CLOSED, CLOSED, CLOSED)
    )
    @unpack
    def test_stricter(self, k1, k2, truth):
        self.assertIs(truth, BoundKind.stricter(k1, k2))

    @data(OPEN, CLOSED, UNBOUNDED)
    def test_serialization(self, kind):
        self.assertIs(kind, BoundKind.from_json(kind.to_json()))


@ddt
class PointTest(TestCase):

    def test_factories(self):
        self.assertEqual(Point(1, OPEN), Point.open(1))
        self.assertEqual(Point(1, CLOSED), Point.closed(1))
        self.assertEqual(Point(-np.inf, UNBOUNDED), Point.ninf())
        self.assertEqual(Point(np.inf, UNBOUNDED), Point.pinf())

    def test_kind_from_int(self):
        self.assertIs(CLOSED, Point(0, 1).kind)

    def test_immutable(self):
        # Arrange
        p = Point.closed(1)

        # Act & Assert
        with self.assertRaises(AttributeError):
            p.value = 2
        with self.assertRaises(AttributeError):
            p._kind = OPEN
        self.assertEqual(Point.closed(1), p)

    @data(
        (Point.open(1), Point.open(1), True),
        (Point.open(1), Point.closed(1), False),
        (Point.open(1), Point.open(2), False),
        (Point.closed(1), Point.closed(1.0), True)
    )
    @unpack
    def test_equality(self, p1, p2, truth):
        self.assertEqual(truth, p1 == p2)
        if truth:
            self.assertEqual(hash(p1), hash(p2))

    def test_predicates(self):
        self.assertTrue(Point.closed(0).isinclusive())
        self.assertFalse(Point.open(0).isinclusive())
        self.assertFalse(Point.ninf().isinclusive())
        self.assertTrue(Point.pinf().isunbounded())
        self.assertFalse(Point.open(0).isunbounded())

    def test_pickle(self):
        # Arrange
        p = Point.open(3)

        # Act
        p_ = pickle.loads(pickle.dumps(p))

        # Assert
        self.assertEqual(p, p_)

    @data(
        (Point.open(3), False),
        (Point.closed(-2), True),
        (Point.ninf(), False),
        (Point.pinf(), True)
    )
    @unpack
    def test_json(self, p, upper):
        self.assertEqual(p, Point.from_json(p.to_json(), upper=upper))

    def test_json_unbounded_has_no_value(self):
        self.assertEqual(
            {'value': None, 'kind': 'unbounded'},
            Point.ninf().to_json()
        )

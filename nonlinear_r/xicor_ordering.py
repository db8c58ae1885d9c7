"""
Orderings used by the xi correlation pipeline.

A comparator follows the `cmp` convention: it returns a negative number, zero or a
positive number as its first argument is less than, equal to or greater than the second.
Comparators must be strict weak orderings; this is not checked.
"""

from functools import cmp_to_key
from typing import Any, Callable, Iterable, List, NamedTuple, Sequence

Compare = Callable[[Any, Any], int]


class Point(NamedTuple):
    x: Any
    y: Any


def compare_natural(a: Any, b: Any) -> int:
    """
    Three-way comparison using the built-in order of the values

    :param a: left value
    :param b: right value
    :return: -1, 0 or 1 as a <, ==, > b
    """
    if a < b:
        return -1
    if a == b:
        return 0
    return 1


def compare_float(a: Any, b: Any) -> int:
    """
    Three-way comparison of the two values converted to float
    """
    return compare_natural(float(a), float(b))


class Ordering:
    """
    Pair of comparators, one for the x domain and one for the y domain
    """

    def __init__(self, compare_x: Compare, compare_y: Compare):
        self.compare_x = compare_x
        self.compare_y = compare_y

    @classmethod
    def natural(cls) -> 'Ordering':
        """
        Built-in order of the values for both coordinates
        """
        return cls(compare_natural, compare_natural)

    @classmethod
    def numeric(cls) -> 'Ordering':
        """
        Both coordinates compared as floats
        """
        return cls(compare_float, compare_float)

    @classmethod
    def shared(cls, compare: Compare) -> 'Ordering':
        """
        Same comparator for both coordinates (x and y must share a domain)
        """
        return cls(compare, compare)

    @classmethod
    def mixed(cls, compare_x: Compare, compare_y: Compare) -> 'Ordering':
        """
        Independent comparators for x and y, which may be of different types
        """
        return cls(compare_x, compare_y)

    def x_key(self) -> Callable[[Point], Any]:
        """
        Sort key ordering points by their x coordinate
        """
        key = cmp_to_key(self.compare_x)
        return lambda p: key(p.x)

    def y_key(self) -> Callable[[Point], Any]:
        """
        Sort key ordering points by their y coordinate
        """
        key = cmp_to_key(self.compare_y)
        return lambda p: key(p.y)

    def same_x(self, a: Point, b: Point) -> bool:
        """
        True when a and b tie in x
        """
        return self.compare_x(a.x, b.x) == 0

    def same_y(self, a: Point, b: Point) -> bool:
        """
        True when a and b tie in y
        """
        return self.compare_y(a.y, b.y) == 0


def as_points(observations: Iterable[Sequence[Any]]) -> List[Point]:
    """
    Copies observations into a fresh list of points; the caller's sequence is left as is

    :param observations: iterable of (x, y) pairs
    :return: list of Point
    """
    return [Point(*obs) for obs in observations]

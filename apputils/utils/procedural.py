"""Procedural colors, positions and strings drawn from a seeded generator."""

import string

from PySide6.QtCore import QPointF, QRectF
from PySide6.QtGui import QColor

from ..domain.sampling import random_element
from ..domain.types import EDGES, RandomSource

ALPHANUMERIC = string.ascii_lowercase + string.ascii_uppercase + string.digits


def random_color(rng: RandomSource) -> QColor:
    """
    Generate an opaque color with each RGB channel uniform in [0, 1].
    Channels are drawn in red, green, blue order.
    """
    red = rng.uniform_float(0.0, 1.0, inclusive=True)
    green = rng.uniform_float(0.0, 1.0, inclusive=True)
    blue = rng.uniform_float(0.0, 1.0, inclusive=True)
    return QColor.fromRgbF(red, green, blue)


def random_point(rng: RandomSource, rect: QRectF) -> QPointF:
    """
    A random point inside the rectangle.

    Args:
        rng: Generator to draw from
        rect: Rectangle with positive width and height

    Returns:
        Point in [left, right) x [top, bottom)
    """
    x = rng.uniform_float(rect.left(), rect.right())
    y = rng.uniform_float(rect.top(), rect.bottom())
    return QPointF(x, y)


def random_point_on_edge(rng: RandomSource, rect: QRectF) -> QPointF:
    """A random point on one of the rectangle's four edges."""
    edge = random_element(rng, EDGES)

    if edge == "top":
        return QPointF(rng.uniform_float(rect.left(), rect.right()), rect.top())
    if edge == "leading":
        return QPointF(rect.left(), rng.uniform_float(rect.top(), rect.bottom()))
    if edge == "bottom":
        return QPointF(rng.uniform_float(rect.left(), rect.right()), rect.bottom())
    return QPointF(rect.right(), rng.uniform_float(rect.top(), rect.bottom()))


def random_string(rng: RandomSource, length: int) -> str:
    """Generate a string of `length` random ASCII letters and digits."""
    if length < 0:
        raise ValueError(f"Length must be non-negative, got {length}")
    return "".join(random_element(rng, ALPHANUMERIC) for _ in range(length))

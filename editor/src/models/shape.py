"""
Dilation Sandbox - Shape (Point Store)

Ordered sequence of grid points making up the user's polygon. Insertion
order is label order: the first point is "A", the second "B", and so on.

Insertion rules (the click state machine):
    Empty -> Open (1..25 points) -> Closed (first point repeated at the end)
    Any state is capped at MAX_POINTS (Full).

    - Clicking the first point of an open shape with >= 2 points closes it
      by appending a copy of the first point.
    - Clicking an unused, integral, in-range grid point appends it.
    - Anything else is ignored.

Only clicked points are range-checked. Dilation and loading replace the
points wholesale and may leave the grid range.

Labels are never stored per point; they are recomputed from position by
``vertex_labels``.
"""

import logging
from enum import Enum

from constants import GRID_RANGE, LABEL_ALPHABET, MAX_POINTS, EMPTY_TEXT
from models.point import Point


class ShapeState(str, Enum):
    EMPTY = 'empty'
    OPEN = 'open'
    CLOSED = 'closed'
    FULL = 'full'


class ClickAction(str, Enum):
    """What a click on a grid point would do to the shape."""
    CLOSE = 'close'
    ADD = 'add'


def label_for_index(index):
    """Label for the vertex at ``index``, cycling through A-Z."""
    return LABEL_ALPHABET[index % len(LABEL_ALPHABET)]


def vertex_labels(points):
    """Labels for drawing, one per point.

    The first occurrence of each coordinate gets the next letter; repeated
    coordinates (the closing point) get None.
    """
    labels = []
    seen = set()
    next_index = 0
    for point in points:
        key = (point.x, point.y)
        if key in seen:
            labels.append(None)
            continue
        seen.add(key)
        labels.append(label_for_index(next_index))
        next_index += 1
    return labels


def is_closed_sequence(points):
    """True if there are >= 2 points and the last repeats the first."""
    return len(points) >= 2 and points[0] == points[-1]


def format_coordinates(points):
    """Human-readable list like "A (0, 0), B (4, 0)".

    The closing duplicate is dropped. Returns "None" for an empty shape.
    """
    points = list(points)
    if not points:
        return EMPTY_TEXT
    unique = points[:-1] if is_closed_sequence(points) else points
    return ', '.join(
        f"{label_for_index(i)} {point}" for i, point in enumerate(unique)
    )


class Shape:
    """Point store with click insertion and closure rules

    Usage:
        shape = Shape()
        shape.apply_click(Point(0, 0))   # ClickAction.ADD
        shape.apply_click(Point(4, 0))   # ClickAction.ADD
        shape.apply_click(Point(4, 3))   # ClickAction.ADD
        shape.apply_click(Point(0, 0))   # ClickAction.CLOSE
        shape.is_closed()                # True

        snapshot = shape.get_snapshot()
        shape.set_snapshot(snapshot)
    """

    def __init__(self, points=None, max_points=MAX_POINTS, grid_range=GRID_RANGE):
        self._logger = logging.getLogger('Shape')
        self.max_points = max_points
        self.grid_range = grid_range
        self._points = [self._coerce(p) for p in (points or [])]

    @staticmethod
    def _coerce(point):
        if isinstance(point, Point):
            return point
        if isinstance(point, dict):
            return Point.from_dict(point)
        x, y = point
        return Point(x, y)

    # ------------------------------------------------------------------
    # Query API

    @property
    def points(self):
        """Copy of the current points, in insertion order."""
        return list(self._points)

    def __len__(self):
        return len(self._points)

    def __iter__(self):
        return iter(list(self._points))

    def __getitem__(self, index):
        return self._points[index]

    def is_empty(self):
        return not self._points

    def is_full(self):
        return len(self._points) >= self.max_points

    def is_closed(self):
        return is_closed_sequence(self._points)

    @property
    def state(self):
        if self.is_full():
            return ShapeState.FULL
        if self.is_empty():
            return ShapeState.EMPTY
        if self.is_closed():
            return ShapeState.CLOSED
        return ShapeState.OPEN

    @property
    def first(self):
        return self._points[0] if self._points else None

    def contains(self, point):
        return point in self._points

    def labels(self):
        return vertex_labels(self._points)

    def formatted(self):
        return format_coordinates(self._points)

    # ------------------------------------------------------------------
    # Click insertion

    def classify_click(self, point):
        """Decide what clicking ``point`` would do without changing anything.

        Returns:
            ClickAction.CLOSE, ClickAction.ADD, or None if the click is ignored
        """
        if self.is_full():
            return None
        if (
            len(self._points) >= 2
            and not self.is_closed()
            and point == self._points[0]
        ):
            return ClickAction.CLOSE
        if (
            point.is_integral()
            and point.within_range(self.grid_range)
            and not self.contains(point)
        ):
            return ClickAction.ADD
        return None

    def apply_click(self, point):
        """Apply a click and return the resulting ClickAction (or None)."""
        action = self.classify_click(point)
        if action is ClickAction.CLOSE:
            first = self._points[0]
            self._points.append(Point(first.x, first.y))
            self._logger.debug(f"Closed shape at {first}")
        elif action is ClickAction.ADD:
            self._points.append(Point(int(point.x), int(point.y)))
            self._logger.debug(f"Added point {point} ({len(self._points)}/{self.max_points})")
        return action

    # ------------------------------------------------------------------
    # Bulk replacement

    def replace_points(self, points):
        """Replace every point (used by transforms, undo and load).

        No range or duplicate validation happens here.
        """
        self._points = [self._coerce(p) for p in points]
        self._logger.debug(f"Replaced points ({len(self._points)} total)")

    def clear(self):
        self._points = []

    # ------------------------------------------------------------------
    # Snapshot API (for undo support)

    def get_snapshot(self):
        """Deep copy of the points as plain dicts."""
        return [p.to_dict() for p in self._points]

    def set_snapshot(self, snapshot):
        self.replace_points(Point.from_dict(d) for d in snapshot)

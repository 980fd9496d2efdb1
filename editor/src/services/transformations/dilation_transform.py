"""Dilation: independent x/y scaling about a center point."""

import numpy as np

from models.point import Point
from models.transform_log import LogEntry
from .base_transform import BaseTransform


class DilationTransform(BaseTransform):
    """Scale each point's displacement from the center.

        p' = center + scale * (p - center)   (per axis)

    Results are real-valued and are not snapped back to the grid.

    Args:
        x_scale: Horizontal scale factor
        y_scale: Vertical scale factor
        x_text: Raw x input text, shown in the log when non-empty
        y_text: Raw y input text, shown in the log when non-empty
    """

    def __init__(self, x_scale=1.0, y_scale=1.0, x_text='', y_text=''):
        self.x_scale = float(x_scale)
        self.y_scale = float(y_scale)
        self.x_text = x_text or ''
        self.y_text = y_text or ''

    def get_name(self):
        return "dilation"

    def get_display_name(self):
        return "Dilation"

    def is_identity(self):
        return self.x_scale == 1 and self.y_scale == 1

    def transform_point(self, point, center):
        return Point(
            center.x + self.x_scale * (point.x - center.x),
            center.y + self.y_scale * (point.y - center.y),
        )

    def apply(self, points, center):
        if not points:
            return []
        coords = np.array([[p.x, p.y] for p in points], dtype=float)
        origin = np.array([center.x, center.y], dtype=float)
        scale = np.array([self.x_scale, self.y_scale], dtype=float)
        # Overflow yields inf; callers reject non-finite results
        with np.errstate(over='ignore', invalid='ignore'):
            scaled = origin + scale * (coords - origin)
        return [Point(x, y) for x, y in scaled.tolist()]

    def log_entry(self):
        return LogEntry.dilated(self.x_scale, self.y_scale, self.x_text, self.y_text)

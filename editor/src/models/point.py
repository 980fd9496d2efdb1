"""Point data structure for grid coordinates."""
import math
from dataclasses import dataclass


def format_number(value):
    """Format a coordinate or scale the way it reads on screen.

    Integral values print without a trailing ``.0`` (``8.0`` -> ``"8"``),
    everything else keeps its full repr (``0.5`` -> ``"0.5"``).
    """
    value = float(value)
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)


@dataclass(frozen=True)
class Point:
    """2D point in grid space (origin at the canvas center, y-up).

    Points placed by clicking are integral; dilation moves them to real
    coordinates. Equality is component-wise, so ``Point(8.0, 6.0)`` equals
    ``Point(8, 6)``.
    """
    x: float
    y: float

    def __iter__(self):
        """Allow tuple unpacking: x, y = point"""
        return iter((self.x, self.y))

    def is_integral(self):
        """True if both coordinates are finite whole numbers."""
        return all(
            math.isfinite(float(v)) and float(v).is_integer()
            for v in (self.x, self.y)
        )

    def within_range(self, limit):
        """True if both coordinates lie in [-limit, limit]."""
        return abs(self.x) <= limit and abs(self.y) <= limit

    def to_dict(self):
        return {'x': self.x, 'y': self.y}

    @classmethod
    def from_dict(cls, data):
        return cls(data['x'], data['y'])

    def __str__(self):
        return f"({format_number(self.x)}, {format_number(self.y)})"

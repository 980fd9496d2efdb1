"""Base class for center-relative transform plugins.

Each transform type is a self-contained plugin that defines:
- How a single point moves relative to the center
- The log entry describing the applied transform
"""

from abc import ABC, abstractmethod
from typing import List, Sequence

from models.point import Point


class BaseTransform(ABC):
    """Abstract base class for transforms applied about a center point.

    Subclasses must implement:
    - get_name(): Return internal identifier (e.g., "dilation")
    - get_display_name(): Return UI display name (e.g., "Dilation")
    - transform_point(): Map one point given the center
    - log_entry(): Describe the transform for the transformation log
    """

    @abstractmethod
    def get_name(self) -> str:
        """Return internal identifier for this transform type."""
        pass

    @abstractmethod
    def get_display_name(self) -> str:
        """Return display name for UI."""
        pass

    @abstractmethod
    def transform_point(self, point: Point, center: Point) -> Point:
        """Map a single point.

        Args:
            point: Point to transform
            center: Center the transform is relative to

        Returns:
            New Point
        """
        pass

    @abstractmethod
    def log_entry(self):
        """Return the LogEntry recorded when this transform is applied."""
        pass

    def apply(self, points: Sequence[Point], center: Point) -> List[Point]:
        """Map every point through transform_point.

        Subclasses may override with a vectorized version; the result must
        match point-by-point application.
        """
        return [self.transform_point(point, center) for point in points]

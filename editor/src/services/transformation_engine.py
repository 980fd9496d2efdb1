"""
Dilation Sandbox - Transformation Engine

Applies center-relative transforms to every point of the session's shape.

All input is validated before anything changes: a bad scale or center
raises InvalidInputError and leaves the session untouched (no snapshot, no
log entry).
"""

import logging
import math

from models.point import Point
from services.transformations import BaseTransform, get_transform
from utils.errors import InvalidInputError, VacuousTransformError
from utils.fraction_parser import parse_fraction

_logger = logging.getLogger('TransformationEngine')

INVALID_CENTER_MESSAGE = 'Please enter valid numbers for center of dilation.'
SCALE_TOO_LARGE_MESSAGE = 'Scale factor too large.'


def parse_center(x_text, y_text):
    """Parse the center-of-dilation input fields.

    The center is not restricted to the grid range and may be fractional.

    Raises:
        InvalidInputError: Either field is blank, non-numeric or not finite
    """
    try:
        x = float(str(x_text).strip())
        y = float(str(y_text).strip())
    except ValueError:
        raise InvalidInputError(INVALID_CENTER_MESSAGE) from None
    if not (math.isfinite(x) and math.isfinite(y)):
        raise InvalidInputError(INVALID_CENTER_MESSAGE)
    return Point(x, y)


def read_scale_factors(x_text, y_text):
    """Parse both scale inputs.

    Returns:
        (x_scale, y_scale)

    Raises:
        InvalidInputError: The first invalid input encountered
    """
    errors = []
    x_scale = parse_fraction(x_text, on_invalid=errors.append)
    y_scale = parse_fraction(y_text, on_invalid=errors.append)
    if errors:
        raise errors[0]
    return x_scale, y_scale


def apply_transformation(session, transform: BaseTransform, center: Point):
    """Snapshot, map every point through the transform, append its log entry.

    This is the single path every center-relative transform goes through.
    The result is checked before the snapshot, so a rejected transform
    leaves the session untouched.

    Returns:
        The new list of points

    Raises:
        InvalidInputError: A coordinate overflowed to infinity or NaN
    """
    new_points = transform.apply(session.shape.points, center)
    if not all(math.isfinite(v) for point in new_points for v in point):
        raise InvalidInputError(SCALE_TOO_LARGE_MESSAGE)

    session.snapshot(transform.get_display_name())
    session.shape.replace_points(new_points)
    session.log.append(transform.log_entry())
    _logger.debug(f"Applied {transform.get_name()} about {center} to {len(new_points)} points")
    return new_points


def dilate(session, x_text, y_text, center: Point):
    """Dilate the shape about ``center`` by the scale factors typed in.

    Args:
        session: Session to mutate
        x_text: Raw x scale input (fraction or number, blank = 1)
        y_text: Raw y scale input (fraction or number, blank = 1)
        center: Center of dilation

    Returns:
        The new list of points

    Raises:
        InvalidInputError: A scale input could not be parsed or is zero,
            or the result does not fit in a float
        VacuousTransformError: Both scales are 1 but at least one input was
            filled in; nothing changes and nothing is logged
    """
    x_text = (x_text or '').strip()
    y_text = (y_text or '').strip()
    x_scale, y_scale = read_scale_factors(x_text, y_text)

    if x_scale == 1 and y_scale == 1 and (x_text or y_text):
        raise VacuousTransformError(
            f"Scale factors '{x_text}', '{y_text}' leave the shape unchanged"
        )

    transform = get_transform(
        'dilation', x_scale=x_scale, y_scale=y_scale, x_text=x_text, y_text=y_text
    )
    new_points = apply_transformation(session, transform, center)
    session.has_dilated = True
    return new_points

"""
Dilation Sandbox - Shape Operations Service

Session-level operations triggered by canvas clicks and buttons. Every
mutation of the shape is preceded by a history snapshot and followed by a
log entry. Separates these rules from the Qt window.
"""

import logging

from constants import DEFAULT_CENTER_X, DEFAULT_CENTER_Y
from models.point import Point
from models.shape import ClickAction
from models.transform_log import LogEntry
from utils.errors import EmptyUndoError

_logger = logging.getLogger('ShapeOperations')

NOTHING_TO_UNDO_MESSAGE = 'Nothing to undo.'


def click_point(session, grid_point):
    """Feed a clicked grid point into the shape's insertion rules.

    Returns:
        ClickAction.CLOSE, ClickAction.ADD, or None if the click was ignored
    """
    shape = session.shape
    action = shape.classify_click(grid_point)
    if action is None:
        _logger.debug(f"Ignored click at {grid_point}")
        return None

    if action is ClickAction.CLOSE:
        session.snapshot("Close shape")
        shape.apply_click(grid_point)
        session.log.append(LogEntry.closed_shape(shape.first))
    else:
        session.snapshot("Add point")
        shape.apply_click(grid_point)
        session.log.append(LogEntry.added_point(shape[-1]))
    return action


def toggle_center_mode(session):
    """Toggle the one-shot "next click sets the center" mode"""
    session.setting_center = not session.setting_center
    return session.setting_center


def set_center_from_click(session, grid_point):
    """Use a click as the new center of dilation.

    Only valid while center mode is active; the mode switches off again.

    Returns:
        The new center Point, or None if center mode was not active or the
        point is not an integral grid point
    """
    if not session.setting_center or not grid_point.is_integral():
        return None
    center = Point(int(grid_point.x), int(grid_point.y))
    session.setting_center = False
    session.log.append(LogEntry.set_center(center))
    return center


def reset_center(session):
    """Log a center reset and return the default center"""
    center = Point(DEFAULT_CENTER_X, DEFAULT_CENTER_Y)
    session.log.append(LogEntry.reset_center(center))
    return center


def undo(session):
    """Restore the most recent snapshot.

    The restored dilation flag comes from the snapshot itself. Undo is not
    pushed onto the history, so it cannot itself be undone.

    Raises:
        EmptyUndoError: The history stack is empty
    """
    state = session.history.undo()
    if state is None:
        raise EmptyUndoError(NOTHING_TO_UNDO_MESSAGE)
    session.restore_state(state)
    session.log.append(LogEntry.undo())
    return session.shape.points


def clear_all(session):
    """Empty the shape, history and log"""
    session.reset()

"""
Dilation Sandbox - Session

One Session holds all mutable editor state: the shape, its undo history,
the transformation log and the two UI flags. The main window owns a single
instance and hands it to every service function.

Each history snapshot stores the points together with the dilation flag, so
undo restores exactly the state that was captured.
"""

import logging

from constants import MAX_HISTORY_ENTRIES, MAX_POINTS, GRID_RANGE
from models.shape import Shape
from models.transform_log import TransformationLog
from utils.history_manager import HistoryManager


class Session:
    """Editor state passed by reference into every operation

    Attributes:
        shape: Current Shape (point store)
        history: HistoryManager of snapshots taken before each mutation
        log: TransformationLog of user-visible events
        has_dilated: True while the current points came from a dilation
        setting_center: One-shot "next click sets the center" mode
    """

    def __init__(self, max_history=MAX_HISTORY_ENTRIES, max_points=MAX_POINTS,
                 grid_range=GRID_RANGE, show_log=False):
        self._logger = logging.getLogger('Session')
        self.shape = Shape(max_points=max_points, grid_range=grid_range)
        self.history = HistoryManager(max_history=max_history)
        self.log = TransformationLog(visible=show_log)
        self.has_dilated = False
        self.setting_center = False

    # ------------------------------------------------------------------
    # Snapshot API

    def capture_state(self):
        """Current state in the form stored on the history stack"""
        return {
            'points': self.shape.get_snapshot(),
            'has_dilated': self.has_dilated,
        }

    def restore_state(self, state):
        """Restore a state captured by capture_state"""
        self.shape.set_snapshot(state['points'])
        self.has_dilated = bool(state.get('has_dilated', False))

    def snapshot(self, description=""):
        """Push the current state before a mutation"""
        self.history.save_state(self.capture_state(), description)

    def previous_points(self):
        """Points of the most recent snapshot, or None if history is empty.

        Used to draw the pre-transform ghost.
        """
        state = self.history.peek()
        if state is None:
            return None
        return Shape(state['points']).points

    def show_ghost(self):
        """Whether the previous shape and center rays should be drawn"""
        return self.has_dilated and self.history.can_undo()

    def reset(self):
        """Empty shape, history and log and clear both flags"""
        self.shape.clear()
        self.history.clear()
        self.log.clear()
        self.has_dilated = False
        self.setting_center = False
        self._logger.debug("Session reset")

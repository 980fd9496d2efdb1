"""History management and undo for DilationSandbox"""

from models.shape import format_coordinates
from services import shape_operations
from utils.errors import EmptyUndoError


class HistoryMixin:
	"""Undo, view refresh after state changes, and status bar updates"""

	def undo(self):
		"""Undo the last action"""
		try:
			shape_operations.undo(self.session)
		except EmptyUndoError as e:
			self._alert(str(e))
			return
		self.refresh_view()

	def _on_history_changed(self, can_undo):
		"""Called when history state changes to update UI"""
		if hasattr(self, 'control_panel'):
			self.control_panel.set_undo_enabled(can_undo)
		self._update_status_bar()

	def refresh_view(self):
		"""Push session state into every widget"""
		if not hasattr(self, 'control_panel'):
			return
		self.control_panel.set_coordinates_text(format_coordinates(self.session.shape.points))
		self.control_panel.set_log(self.session.log.display_text(), self.session.log.visible)
		self.control_panel.set_center_mode(self.session.setting_center)
		self.control_panel.set_undo_enabled(self.session.history.can_undo())
		self.canvas_widget.refresh()
		self._update_status_bar()

	def _update_status_bar(self):
		"""Update status bar with the undoable action and stats"""
		undo_desc = self.session.history.get_undo_description()
		left_msg = f"Undo: {undo_desc}" if undo_desc else "Ready"

		shape = self.session.shape
		state = shape.state.value.capitalize()
		right_msg = f"Points: {len(shape)}/{shape.max_points} | {state} | History: {len(self.session.history)}"

		if hasattr(self, 'status_left'):
			self.status_left.setText(left_msg)
		if hasattr(self, 'status_right'):
			self.status_right.setText(right_msg)

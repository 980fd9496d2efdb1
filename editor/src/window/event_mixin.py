"""Canvas and keyboard event handlers for DilationSandbox"""

from PyQt5.QtCore import Qt

from services import shape_operations
from services.transformation_engine import parse_center
from utils.errors import InvalidInputError


class EventMixin:
	"""Canvas clicks, center-of-dilation controls and keyboard shortcuts"""

	def _on_grid_clicked(self, grid_point):
		"""Route a canvas click to center mode or the shape"""
		if self.session.setting_center:
			center = shape_operations.set_center_from_click(self.session, grid_point)
			if center is not None:
				self.control_panel.set_center(center)
			self.refresh_view()
			return

		if shape_operations.click_point(self.session, grid_point) is not None:
			self.refresh_view()

	def current_center(self):
		"""Center of dilation from the input fields, or None if invalid"""
		if not hasattr(self, 'control_panel'):
			return None
		try:
			return parse_center(*self.control_panel.center_texts())
		except InvalidInputError:
			return None

	def toggle_center_mode(self):
		"""Arm or disarm the one-shot set-center-by-click mode"""
		shape_operations.toggle_center_mode(self.session)
		self.canvas_widget.hover_point = None
		self.refresh_view()

	def reset_center(self):
		"""Put the center back at the origin"""
		center = shape_operations.reset_center(self.session)
		self.control_panel.set_center(center)
		self.refresh_view()

	def keyPressEvent(self, event):
		"""Handle keyboard shortcuts"""
		# Ctrl+Z for undo
		if event.key() == Qt.Key_Z and event.modifiers() == Qt.ControlModifier:
			self.undo()
			event.accept()
		# Ctrl+S for save
		elif event.key() == Qt.Key_S and event.modifiers() == Qt.ControlModifier:
			self.file_actions.save_shape()
			event.accept()
		# Ctrl+O for load
		elif event.key() == Qt.Key_O and event.modifiers() == Qt.ControlModifier:
			self.file_actions.load_shape()
			event.accept()
		# Escape cancels center mode
		elif event.key() == Qt.Key_Escape and self.session.setting_center:
			self.toggle_center_mode()
			event.accept()
		else:
			super().keyPressEvent(event)

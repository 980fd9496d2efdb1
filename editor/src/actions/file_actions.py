"""Shape persistence and reset actions for the main window"""

from services import shape_operations
from services.shape_storage import save_shape, load_shape
from utils.errors import EmptyLoadError
from utils.logger import report_error


class FileActions:
	"""Handles save, load and clear-all"""

	def __init__(self, main_window):
		"""Initialize with reference to main window

		Args:
			main_window: The DilationSandbox main window instance
		"""
		self.main_window = main_window

	def save_shape(self):
		"""Persist the current shape to the key-value store"""
		try:
			save_shape(self.main_window.session, self.main_window.store)
		except (OSError, ValueError) as e:
			report_error(e, f"Failed to save shape: {e}")
			return
		self.main_window._alert('Shape saved!')
		self.main_window.refresh_view()

	def load_shape(self):
		"""Replace the current shape with the saved one"""
		try:
			load_shape(self.main_window.session, self.main_window.store)
		except EmptyLoadError as e:
			self.main_window._alert(str(e))
			return
		self.main_window.refresh_view()

	def clear_all(self):
		"""Empty shape, history and log"""
		shape_operations.clear_all(self.main_window.session)
		self.main_window.canvas_widget.hover_point = None
		self.main_window.refresh_view()

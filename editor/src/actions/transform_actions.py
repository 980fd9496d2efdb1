"""Transform actions for the main window"""

from services.transformation_engine import dilate, parse_center
from utils.errors import InvalidInputError, VacuousTransformError


class TransformActions:
	"""Reads the input fields and applies transforms to the session"""

	def __init__(self, main_window):
		"""Initialize with reference to main window

		Args:
			main_window: The DilationSandbox main window instance
		"""
		self.main_window = main_window

	def dilate(self):
		"""Dilate the shape using the scale and center inputs

		Invalid input is reported and nothing changes. A vacuous request
		(both scales 1 from non-blank input) is skipped without a message.
		"""
		panel = self.main_window.control_panel
		x_text, y_text = panel.scale_texts()
		try:
			center = parse_center(*panel.center_texts())
			dilate(self.main_window.session, x_text, y_text, center)
		except InvalidInputError as e:
			self.main_window._alert(str(e))
			return
		except VacuousTransformError:
			return
		self.main_window.refresh_view()

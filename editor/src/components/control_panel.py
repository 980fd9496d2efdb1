"""Control panel - scale/center inputs, action buttons and read-outs."""

from PyQt5.QtWidgets import (
	QWidget, QVBoxLayout, QHBoxLayout, QFormLayout, QLabel, QLineEdit, QPushButton, QGroupBox
)
from PyQt5.QtCore import Qt

from constants import (
	DEFAULT_CENTER_X, DEFAULT_CENTER_Y, SHOW_HISTORY_CAPTION, HIDE_HISTORY_CAPTION,
	SET_CENTER_CAPTION, SETTING_CENTER_CAPTION, COORDINATES_PREFIX, HISTORY_PREFIX, EMPTY_TEXT,
)
from models.point import format_number


class ControlPanel(QWidget):
	"""Input fields and buttons driving the sandbox.

	Input fields are read on demand by the main window; the panel holds no
	state of its own beyond what is shown.
	"""

	def __init__(self, parent=None):
		super().__init__(parent)
		self._setup_ui()

	def _setup_ui(self):
		layout = QVBoxLayout(self)
		layout.setContentsMargins(8, 8, 8, 8)
		layout.setSpacing(8)

		# Scale factors
		scale_group = QGroupBox("Scale Factor")
		scale_form = QFormLayout(scale_group)
		self.x_scale_input = QLineEdit()
		self.x_scale_input.setPlaceholderText("e.g. 2 or 3/2")
		self.y_scale_input = QLineEdit()
		self.y_scale_input.setPlaceholderText("e.g. 2 or 3/2")
		scale_form.addRow("x:", self.x_scale_input)
		scale_form.addRow("y:", self.y_scale_input)
		layout.addWidget(scale_group)

		# Center of dilation
		center_group = QGroupBox("Center of Dilation")
		center_layout = QVBoxLayout(center_group)
		center_form = QFormLayout()
		self.x_center_input = QLineEdit(str(DEFAULT_CENTER_X))
		self.y_center_input = QLineEdit(str(DEFAULT_CENTER_Y))
		center_form.addRow("x:", self.x_center_input)
		center_form.addRow("y:", self.y_center_input)
		center_layout.addLayout(center_form)

		center_buttons = QHBoxLayout()
		self.reset_center_button = QPushButton("Reset Center")
		self.set_center_button = QPushButton(SET_CENTER_CAPTION)
		self.set_center_button.setCheckable(True)
		center_buttons.addWidget(self.reset_center_button)
		center_buttons.addWidget(self.set_center_button)
		center_layout.addLayout(center_buttons)
		layout.addWidget(center_group)

		# Actions
		self.dilate_button = QPushButton("Dilate")
		self.undo_button = QPushButton("Undo")
		self.undo_button.setEnabled(False)
		self.clear_button = QPushButton("Clear All")
		self.save_button = QPushButton("Save Shape")
		self.load_button = QPushButton("Load Shape")
		for button in (self.dilate_button, self.undo_button, self.clear_button,
		               self.save_button, self.load_button):
			layout.addWidget(button)

		# Read-outs
		self.coordinates_label = QLabel(f"{COORDINATES_PREFIX}{EMPTY_TEXT}")
		self.coordinates_label.setWordWrap(True)
		self.coordinates_label.setTextInteractionFlags(Qt.TextSelectableByMouse)
		layout.addWidget(self.coordinates_label)

		self.toggle_history_button = QPushButton(SHOW_HISTORY_CAPTION)
		layout.addWidget(self.toggle_history_button)

		self.log_label = QLabel(f"{HISTORY_PREFIX}{EMPTY_TEXT}")
		self.log_label.setWordWrap(True)
		self.log_label.setTextInteractionFlags(Qt.TextSelectableByMouse)
		self.log_label.setVisible(False)
		layout.addWidget(self.log_label)

		layout.addStretch()

	# ------------------------------------------------------------------
	# Inputs

	def scale_texts(self):
		return self.x_scale_input.text().strip(), self.y_scale_input.text().strip()

	def center_texts(self):
		return self.x_center_input.text(), self.y_center_input.text()

	def set_center(self, point):
		self.x_center_input.setText(format_number(point.x))
		self.y_center_input.setText(format_number(point.y))

	# ------------------------------------------------------------------
	# Read-outs

	def set_coordinates_text(self, text):
		self.coordinates_label.setText(f"{COORDINATES_PREFIX}{text}")

	def set_log(self, text, visible):
		"""Update the log label and the show/hide caption"""
		self.log_label.setText(text)
		self.log_label.setVisible(visible)
		self.toggle_history_button.setText(HIDE_HISTORY_CAPTION if visible else SHOW_HISTORY_CAPTION)

	def set_center_mode(self, active):
		self.set_center_button.setChecked(active)
		self.set_center_button.setText(SETTING_CENTER_CAPTION if active else SET_CENTER_CAPTION)

	def set_undo_enabled(self, enabled):
		self.undo_button.setEnabled(enabled)

"""UI setup for DilationSandbox"""

from PyQt5.QtWidgets import QWidget, QHBoxLayout, QStatusBar, QLabel

from components.canvas_widget import GridCanvas
from components.control_panel import ControlPanel


class UISetupMixin:
	"""UI initialization and component wiring"""

	def setup_ui(self):
		"""Initialize and wire up all UI components"""
		central_widget = QWidget()
		self.setCentralWidget(central_widget)

		main_layout = QHBoxLayout(central_widget)
		main_layout.setContentsMargins(0, 0, 0, 0)
		main_layout.setSpacing(0)

		# Canvas on the left
		self.canvas_widget = GridCanvas(self)
		self.canvas_widget.session = self.session
		self.canvas_widget.center_provider = self.current_center
		main_layout.addWidget(self.canvas_widget)

		# Controls on the right
		self.control_panel = ControlPanel(self)
		main_layout.addWidget(self.control_panel)

		self._setup_status_bar()
		self._connect_signals()

	def _setup_status_bar(self):
		"""Status bar: last undoable action on the left, counts on the right"""
		status_bar = QStatusBar()
		self.setStatusBar(status_bar)
		self.status_left = QLabel("Ready")
		self.status_right = QLabel("")
		status_bar.addWidget(self.status_left, 1)
		status_bar.addPermanentWidget(self.status_right)

	def _connect_signals(self):
		panel = self.control_panel
		self.canvas_widget.gridClicked.connect(self._on_grid_clicked)
		panel.dilate_button.clicked.connect(self.transform_actions.dilate)
		panel.undo_button.clicked.connect(self.undo)
		panel.clear_button.clicked.connect(self.file_actions.clear_all)
		panel.save_button.clicked.connect(self.file_actions.save_shape)
		panel.load_button.clicked.connect(self.file_actions.load_shape)
		panel.reset_center_button.clicked.connect(self.reset_center)
		panel.set_center_button.clicked.connect(self.toggle_center_mode)
		panel.toggle_history_button.clicked.connect(self.toggle_history)
		# Center edits move the marker
		panel.x_center_input.textChanged.connect(self.canvas_widget.refresh)
		panel.y_center_input.textChanged.connect(self.canvas_widget.refresh)

"""Grid canvas - draws the grid, the shape and its dilation overlays."""

from PyQt5.QtWidgets import QWidget
from PyQt5.QtCore import Qt, QPointF, QRectF, pyqtSignal
from PyQt5.QtGui import QPainter, QPen, QColor, QBrush, QFont, QPainterPath

from constants import (
	CANVAS_SIZE, GRID_SIZE, GRID_RANGE, AXIS_LABEL_STEP, POINT_RADIUS,
	LABEL_OFFSET_X, LABEL_BOX_SIZE, CANVAS_FONT_FAMILY, CANVAS_FONT_SIZE,
	COLOR_GRID_LINE, COLOR_AXIS, COLOR_AXIS_LABEL, COLOR_CENTER_MARKER,
	COLOR_RAY, COLOR_SHAPE_LINE, COLOR_SHAPE_POINT, COLOR_GHOST_LINE,
	COLOR_GHOST_POINT, COLOR_HOVER_POINT, COLOR_HOVER_TEXT,
	COLOR_LABEL_BACKGROUND, COLOR_LABEL_TEXT,
	GRID_LINE_WIDTH, AXIS_LINE_WIDTH, SHAPE_LINE_WIDTH, RAY_LINE_WIDTH,
)
from models.shape import vertex_labels, is_closed_sequence
from utils.coordinate_transforms import canvas_to_grid, grid_to_canvas


class GridCanvas(QWidget):
	"""Square drawing surface for the dilation sandbox.

	Draws, in order: grid and axis labels, the center of dilation, the
	pre-dilation ghost shape, rays from the center to each vertex, and the
	labeled current shape. While the mouse moves it previews the grid point
	a click would hit.

	References set by the main window:
		session: Session to draw
		center_provider: Callable returning the current center Point, or
			None when the center inputs are invalid
	"""

	gridClicked = pyqtSignal(object)  # Emits the clicked grid Point

	def __init__(self, parent=None, canvas_size=CANVAS_SIZE, grid_size=GRID_SIZE, grid_range=GRID_RANGE):
		super().__init__(parent)
		self.canvas_size = canvas_size
		self.grid_size = grid_size
		self.grid_range = grid_range
		self.setFixedSize(canvas_size, canvas_size)
		self.setMouseTracking(True)

		self.session = None
		self.center_provider = None
		self.hover_point = None  # Grid point under the cursor, if previewed

		self._font = QFont(CANVAS_FONT_FAMILY, CANVAS_FONT_SIZE)

	# ------------------------------------------------------------------
	# Coordinate helpers

	def to_canvas(self, point):
		"""Grid Point -> QPointF in widget pixels"""
		x, y = grid_to_canvas(point.x, point.y, self.canvas_size, self.grid_size)
		return QPointF(x, y)

	def to_grid(self, pos):
		"""Widget pixel position -> nearest grid Point"""
		return canvas_to_grid(pos.x(), pos.y(), self.canvas_size, self.grid_size)

	def current_center(self):
		if self.center_provider is None:
			return None
		return self.center_provider()

	def refresh(self):
		"""Trigger repaint"""
		self.update()

	# ------------------------------------------------------------------
	# Mouse handling

	def _hover_enabled(self):
		if self.session is None:
			return False
		return not self.session.shape.is_full() and not self.session.setting_center

	def mouseMoveEvent(self, event):
		"""Track the snapped grid point under the cursor"""
		self.hover_point = self.to_grid(event.pos()) if self._hover_enabled() else None
		self.update()
		super().mouseMoveEvent(event)

	def leaveEvent(self, event):
		"""Drop the hover preview when the cursor leaves the canvas"""
		self.hover_point = None
		self.update()
		super().leaveEvent(event)

	def mousePressEvent(self, event):
		"""Emit the clicked grid point"""
		if event.button() == Qt.LeftButton:
			self.gridClicked.emit(self.to_grid(event.pos()))
			event.accept()
		else:
			super().mousePressEvent(event)

	# ------------------------------------------------------------------
	# Painting

	def paintEvent(self, event):
		"""Draw the full scene"""
		painter = QPainter(self)
		painter.setRenderHint(QPainter.Antialiasing)
		painter.setFont(self._font)

		self._draw_grid(painter)

		center = self.current_center()
		if center is not None:
			self._draw_center(painter, center)

		if self.session is not None:
			points = self.session.shape.points
			if self.session.show_ghost():
				previous = self.session.previous_points()
				if previous:
					self._draw_shape(painter, previous, ghost=True)
			if self.session.has_dilated and center is not None:
				self._draw_rays(painter, center, points)
			self._draw_shape(painter, points)

		if self.hover_point is not None:
			self._draw_hover(painter, self.hover_point)

		painter.end()

	def _draw_grid(self, painter):
		"""Draw grid lines, axis tick labels and the two axes"""
		size = self.canvas_size
		half = size / 2
		painter.fillRect(QRectF(0, 0, size, size), QColor(255, 255, 255))

		painter.setPen(QPen(QColor(*COLOR_GRID_LINE), GRID_LINE_WIDTH))
		for i in range(-self.grid_range, self.grid_range + 1):
			x = half + i * self.grid_size
			y = half - i * self.grid_size
			painter.drawLine(QPointF(x, 0), QPointF(x, size))
			painter.drawLine(QPointF(0, y), QPointF(size, y))

		painter.setPen(QColor(*COLOR_AXIS_LABEL))
		metrics = painter.fontMetrics()
		for i in range(-self.grid_range, self.grid_range + 1):
			if i == 0 or i % AXIS_LABEL_STEP != 0:
				continue
			text = str(i)
			# X axis: centered under the tick
			x = half + i * self.grid_size - metrics.horizontalAdvance(text) / 2
			painter.drawText(QPointF(x, half + 5 + metrics.ascent()), text)
			# Y axis: just right of the axis
			y = half - i * self.grid_size + metrics.ascent() / 2
			painter.drawText(QPointF(half + 5, y), text)

		painter.setPen(QPen(QColor(*COLOR_AXIS), AXIS_LINE_WIDTH))
		painter.drawLine(QPointF(0, half), QPointF(size, half))
		painter.drawLine(QPointF(half, 0), QPointF(half, size))

	def _draw_dot(self, painter, pos, color):
		painter.setPen(Qt.NoPen)
		painter.setBrush(QBrush(QColor(*color)))
		painter.drawEllipse(pos, POINT_RADIUS, POINT_RADIUS)
		painter.setBrush(Qt.NoBrush)

	def _draw_center(self, painter, center):
		self._draw_dot(painter, self.to_canvas(center), COLOR_CENTER_MARKER)

	def _draw_rays(self, painter, center, points):
		"""Sight-lines from the center to each vertex"""
		if not points:
			return
		origin = self.to_canvas(center)
		painter.setPen(QPen(QColor(*COLOR_RAY), RAY_LINE_WIDTH))
		for point in points:
			painter.drawLine(origin, self.to_canvas(point))

	def _draw_shape(self, painter, points, ghost=False):
		"""Draw the polyline, vertex labels (not for the ghost) and vertices"""
		if not points:
			return
		line_color = COLOR_GHOST_LINE if ghost else COLOR_SHAPE_LINE
		point_color = COLOR_GHOST_POINT if ghost else COLOR_SHAPE_POINT

		start = self.to_canvas(points[0])
		path = QPainterPath(start)
		for point in points[1:]:
			path.lineTo(self.to_canvas(point))
		if len(points) > 2 and is_closed_sequence(points):
			path.closeSubpath()
		painter.setPen(QPen(QColor(*line_color), SHAPE_LINE_WIDTH))
		painter.drawPath(path)

		if not ghost:
			for point, label in zip(points, vertex_labels(points)):
				if label is not None:
					self._draw_label(painter, self.to_canvas(point), label)

		for point in points:
			self._draw_dot(painter, self.to_canvas(point), point_color)

	def _draw_label(self, painter, pos, label):
		box = QRectF(pos.x() + LABEL_OFFSET_X - 2, pos.y() + 2, LABEL_BOX_SIZE, LABEL_BOX_SIZE)
		painter.fillRect(box, QColor(*COLOR_LABEL_BACKGROUND))
		painter.setPen(QColor(*COLOR_LABEL_TEXT))
		painter.drawText(box, Qt.AlignCenter, label)

	def _draw_hover(self, painter, grid_point):
		"""Translucent dot and coordinates at the snapped grid point"""
		pos = self.to_canvas(grid_point)
		self._draw_dot(painter, pos, COLOR_HOVER_POINT)
		painter.setPen(QColor(*COLOR_HOVER_TEXT))
		text_y = pos.y() + painter.fontMetrics().ascent() / 2
		painter.drawText(QPointF(pos.x() + LABEL_OFFSET_X, text_y), str(grid_point))

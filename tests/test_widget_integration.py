"""
pytest-qt widget integration tests.

Drives the real main window headless: canvas clicks, the input fields and
buttons, keyboard shortcuts, config persistence and painting.

Blocking alerts are captured by the ``alerts`` fixture instead of opening
message boxes.
"""
import json
import os

import pytest
from PyQt5.QtCore import Qt, QPoint

from constants import (
    CANVAS_SIZE, GRID_SIZE, SAVED_SHAPE_KEY, SET_CENTER_CAPTION, SETTING_CENTER_CAPTION,
    SHOW_HISTORY_CAPTION, HIDE_HISTORY_CAPTION,
)
from models.point import Point
from utils.coordinate_transforms import grid_to_canvas
from utils.fraction_parser import ZERO_DENOMINATOR_MESSAGE
from services.transformation_engine import INVALID_CENTER_MESSAGE
from services.shape_storage import KeyValueStore


def click_grid(qtbot, window, x, y):
    """Left-click the canvas at grid coordinates (x, y)"""
    cx, cy = grid_to_canvas(x, y, CANVAS_SIZE, GRID_SIZE)
    qtbot.mouseClick(window.canvas_widget, Qt.LeftButton, pos=QPoint(int(cx), int(cy)))


def draw_triangle(qtbot, window):
    for x, y in [(0, 0), (4, 0), (4, 3)]:
        click_grid(qtbot, window, x, y)


def set_scales(window, x_text, y_text):
    window.control_panel.x_scale_input.setText(x_text)
    window.control_panel.y_scale_input.setText(y_text)


# ══════════════════════════════════════════════════════════════════════════
# Startup
# ══════════════════════════════════════════════════════════════════════════

class TestStartup:

    def test_initial_widgets(self, window):
        panel = window.control_panel
        assert panel.coordinates_label.text() == "Coordinates: None"
        assert not panel.undo_button.isEnabled()
        assert not panel.log_label.isVisible()
        assert panel.toggle_history_button.text() == SHOW_HISTORY_CAPTION
        assert panel.center_texts() == ("0", "0")

    def test_title_has_version(self, window):
        assert window.windowTitle().startswith("Dilation Sandbox ")

    def test_current_center(self, window):
        assert window.current_center() == Point(0, 0)
        window.control_panel.x_center_input.setText("abc")
        assert window.current_center() is None


# ══════════════════════════════════════════════════════════════════════════
# Canvas clicks
# ══════════════════════════════════════════════════════════════════════════

class TestCanvasClicks:

    def test_click_adds_point(self, qtbot, window):
        click_grid(qtbot, window, 4, 3)
        assert window.session.shape.points == [Point(4, 3)]
        assert window.control_panel.coordinates_label.text() == "Coordinates: A (4, 3)"
        assert window.control_panel.undo_button.isEnabled()

    def test_grid_clicked_signal(self, qtbot, window):
        with qtbot.waitSignal(window.canvas_widget.gridClicked, timeout=1000) as blocker:
            click_grid(qtbot, window, -2, 5)
        assert blocker.args == [Point(-2, 5)]

    def test_close_shape(self, qtbot, window):
        draw_triangle(qtbot, window)
        click_grid(qtbot, window, 0, 0)
        assert window.session.shape.is_closed()
        assert window.control_panel.coordinates_label.text() == \
            "Coordinates: A (0, 0), B (4, 0), C (4, 3)"

    def test_right_click_ignored(self, qtbot, window):
        qtbot.mouseClick(window.canvas_widget, Qt.RightButton, pos=QPoint(350, 350))
        assert window.session.shape.is_empty()

    def test_out_of_range_click_ignored(self, qtbot, window):
        # Corner pixel snaps to (-18, 18), outside the grid range
        qtbot.mouseClick(window.canvas_widget, Qt.LeftButton, pos=QPoint(0, 0))
        assert window.session.shape.is_empty()


# ══════════════════════════════════════════════════════════════════════════
# Dilation and undo
# ══════════════════════════════════════════════════════════════════════════

class TestDilateWorkflow:

    def test_dilate_button(self, qtbot, window, alerts):
        draw_triangle(qtbot, window)
        set_scales(window, "2", "2")
        qtbot.mouseClick(window.control_panel.dilate_button, Qt.LeftButton)
        assert window.session.shape.points == [Point(0, 0), Point(8, 0), Point(8, 6)]
        assert window.control_panel.coordinates_label.text() == \
            "Coordinates: A (0, 0), B (8, 0), C (8, 6)"
        assert alerts == []

    def test_invalid_scale_alerts(self, qtbot, window, alerts):
        draw_triangle(qtbot, window)
        set_scales(window, "3/0", "2")
        history_before = len(window.session.history)
        qtbot.mouseClick(window.control_panel.dilate_button, Qt.LeftButton)
        assert alerts == [ZERO_DENOMINATOR_MESSAGE]
        assert len(window.session.history) == history_before
        assert not window.session.has_dilated

    def test_invalid_center_alerts(self, qtbot, window, alerts):
        draw_triangle(qtbot, window)
        set_scales(window, "2", "2")
        window.control_panel.y_center_input.setText("")
        qtbot.mouseClick(window.control_panel.dilate_button, Qt.LeftButton)
        assert alerts == [INVALID_CENTER_MESSAGE]
        assert not window.session.has_dilated

    def test_vacuous_request_is_silent(self, qtbot, window, alerts):
        draw_triangle(qtbot, window)
        set_scales(window, "1", "1")
        log_before = len(window.session.log)
        qtbot.mouseClick(window.control_panel.dilate_button, Qt.LeftButton)
        assert alerts == []
        assert len(window.session.log) == log_before

    def test_undo_button_reverts(self, qtbot, window):
        draw_triangle(qtbot, window)
        set_scales(window, "2", "2")
        qtbot.mouseClick(window.control_panel.dilate_button, Qt.LeftButton)
        qtbot.mouseClick(window.control_panel.undo_button, Qt.LeftButton)
        assert window.session.shape.points == [Point(0, 0), Point(4, 0), Point(4, 3)]
        assert not window.session.has_dilated

    def test_ctrl_z(self, qtbot, window):
        click_grid(qtbot, window, 1, 1)
        qtbot.keyClick(window, Qt.Key_Z, Qt.ControlModifier)
        assert window.session.shape.is_empty()
        assert not window.control_panel.undo_button.isEnabled()

    def test_undo_with_empty_history_alerts(self, window, alerts):
        window.undo()
        assert alerts == ["Nothing to undo."]

    def test_clear_all(self, qtbot, window):
        draw_triangle(qtbot, window)
        qtbot.mouseClick(window.control_panel.clear_button, Qt.LeftButton)
        assert window.session.shape.is_empty()
        assert not window.control_panel.undo_button.isEnabled()
        assert window.control_panel.coordinates_label.text() == "Coordinates: None"


# ══════════════════════════════════════════════════════════════════════════
# Center of dilation
# ══════════════════════════════════════════════════════════════════════════

class TestCenterControls:

    def test_set_center_by_click(self, qtbot, window):
        panel = window.control_panel
        qtbot.mouseClick(panel.set_center_button, Qt.LeftButton)
        assert window.session.setting_center
        assert panel.set_center_button.text() == SETTING_CENTER_CAPTION

        click_grid(qtbot, window, 3, -2)
        assert panel.center_texts() == ("3", "-2")
        assert window.session.shape.is_empty()
        assert not window.session.setting_center
        assert panel.set_center_button.text() == SET_CENTER_CAPTION
        assert window.session.log.render() == "Set center to (3, -2)"

    def test_escape_cancels_center_mode(self, qtbot, window):
        window.toggle_center_mode()
        qtbot.keyClick(window, Qt.Key_Escape)
        assert not window.session.setting_center

    def test_reset_center(self, qtbot, window):
        panel = window.control_panel
        panel.x_center_input.setText("5")
        panel.y_center_input.setText("1.5")
        qtbot.mouseClick(panel.reset_center_button, Qt.LeftButton)
        assert panel.center_texts() == ("0", "0")
        assert window.session.log.render() == "Reset center to (0, 0)"

    def test_dilate_about_clicked_center(self, qtbot, window):
        draw_triangle(qtbot, window)
        window.toggle_center_mode()
        click_grid(qtbot, window, 4, 3)
        set_scales(window, "2", "1/2")
        qtbot.mouseClick(window.control_panel.dilate_button, Qt.LeftButton)
        assert window.session.shape.points == [Point(-4, 1.5), Point(4, 1.5), Point(4, 3)]


# ══════════════════════════════════════════════════════════════════════════
# Save / load
# ══════════════════════════════════════════════════════════════════════════

class TestSaveLoad:

    def test_save_then_load(self, qtbot, window, alerts):
        draw_triangle(qtbot, window)
        qtbot.mouseClick(window.control_panel.save_button, Qt.LeftButton)
        assert alerts == ["Shape saved!"]
        assert window.store.get_item(SAVED_SHAPE_KEY) is not None

        qtbot.mouseClick(window.control_panel.clear_button, Qt.LeftButton)
        qtbot.mouseClick(window.control_panel.load_button, Qt.LeftButton)
        assert window.session.shape.points == [Point(0, 0), Point(4, 0), Point(4, 3)]
        assert window.control_panel.undo_button.isEnabled()

    def test_ctrl_s_and_ctrl_o(self, qtbot, window, alerts):
        click_grid(qtbot, window, 2, 2)
        qtbot.keyClick(window, Qt.Key_S, Qt.ControlModifier)
        click_grid(qtbot, window, 3, 3)
        qtbot.keyClick(window, Qt.Key_O, Qt.ControlModifier)
        assert window.session.shape.points == [Point(2, 2)]

    def test_load_with_nothing_saved(self, qtbot, window, alerts):
        qtbot.mouseClick(window.control_panel.load_button, Qt.LeftButton)
        assert alerts == ["No saved shape found."]
        assert window.session.shape.is_empty()

    def test_unwritable_store_reports_error(self, qtbot, window, alerts, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        window.store = KeyValueStore(str(blocker / "storage.json"))
        click_grid(qtbot, window, 2, 2)
        log_before = len(window.session.log)

        qtbot.mouseClick(window.control_panel.save_button, Qt.LeftButton)

        assert len(alerts) == 1
        assert alerts[0].startswith("Failed to save shape:")
        assert len(window.session.log) == log_before
        assert window.session.shape.points == [Point(2, 2)]


# ══════════════════════════════════════════════════════════════════════════
# Transformation log and config
# ══════════════════════════════════════════════════════════════════════════

class TestHistoryToggle:

    def test_toggle_shows_log_and_saves_config(self, qtbot, window):
        panel = window.control_panel
        click_grid(qtbot, window, 1, 2)
        qtbot.mouseClick(panel.toggle_history_button, Qt.LeftButton)
        assert panel.toggle_history_button.text() == HIDE_HISTORY_CAPTION
        assert not panel.log_label.isHidden()
        assert panel.log_label.text() == "Transformation History: Added point (1, 2)"

        with open(window.config_file, encoding="utf-8") as f:
            config = json.load(f)
        assert config["show_history"] is True

        qtbot.mouseClick(panel.toggle_history_button, Qt.LeftButton)
        assert panel.toggle_history_button.text() == SHOW_HISTORY_CAPTION
        assert panel.log_label.isHidden()

    def test_config_write_failure_reports_error(self, qtbot, window, alerts, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        window.config_dir = str(blocker)
        window.config_file = os.path.join(str(blocker), "config.json")

        qtbot.mouseClick(window.control_panel.toggle_history_button, Qt.LeftButton)

        assert len(alerts) == 1
        assert alerts[0].startswith("Error saving config:")
        assert window.session.log.visible
        assert window.control_panel.toggle_history_button.text() == HIDE_HISTORY_CAPTION

    def test_visibility_restored_from_config(self, qtbot, tmp_path, alerts):
        from main import DilationSandbox
        config_dir = tmp_path / "cfg"
        os.makedirs(config_dir)
        (config_dir / "config.json").write_text(json.dumps({"show_history": True}))

        win = DilationSandbox(config_dir=str(config_dir))
        qtbot.addWidget(win)
        assert win.session.log.visible
        assert win.control_panel.toggle_history_button.text() == HIDE_HISTORY_CAPTION

    def test_corrupt_config_uses_defaults(self, qtbot, tmp_path, alerts):
        from main import DilationSandbox
        config_dir = tmp_path / "cfg"
        os.makedirs(config_dir)
        (config_dir / "config.json").write_text("{broken")

        win = DilationSandbox(config_dir=str(config_dir))
        qtbot.addWidget(win)
        assert not win.session.log.visible
        assert win.storage_path == str(config_dir / "storage.json")


# ══════════════════════════════════════════════════════════════════════════
# Painting
# ══════════════════════════════════════════════════════════════════════════

class TestPainting:

    def test_paint_after_dilation(self, qtbot, window):
        draw_triangle(qtbot, window)
        set_scales(window, "2", "2")
        qtbot.mouseClick(window.control_panel.dilate_button, Qt.LeftButton)
        assert window.session.show_ghost()
        image = window.canvas_widget.grab().toImage()
        assert image.width() == CANVAS_SIZE

    def test_paint_with_invalid_center(self, qtbot, window):
        draw_triangle(qtbot, window)
        window.control_panel.x_center_input.setText("nope")
        image = window.canvas_widget.grab().toImage()
        assert not image.isNull()

    def test_hover_point_drawn_and_cleared(self, qtbot, window):
        canvas = window.canvas_widget
        canvas.hover_point = Point(2, 2)
        assert not canvas.grab().toImage().isNull()
        qtbot.mouseClick(window.control_panel.clear_button, Qt.LeftButton)
        assert canvas.hover_point is None

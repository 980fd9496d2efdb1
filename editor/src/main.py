import sys
import os
import argparse
import logging

# Add editor/src to path so imports work when running directly
if __name__ == "__main__":
    current_dir = os.path.dirname(os.path.abspath(__file__))
    if current_dir not in sys.path:
        sys.path.insert(0, current_dir)

# PyQt5 imports
from PyQt5 import QtWidgets
from PyQt5.QtWidgets import QMainWindow
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QPalette, QColor

from constants import CONFIG_DIR, CONFIG_FILE_NAME, WINDOW_TITLE
from models.session import Session
from services.shape_storage import KeyValueStore
from utils.logger import notify_user, set_main_window
from version import get_version

# Action imports
from actions.file_actions import FileActions
from actions.transform_actions import TransformActions

# Mixin imports
from window.event_mixin import EventMixin
from window.config_mixin import ConfigMixin
from window.history_mixin import HistoryMixin
from window.ui_setup_mixin import UISetupMixin


class DilationSandbox(EventMixin, ConfigMixin, HistoryMixin, UISetupMixin, QMainWindow):
    """Main window: grid canvas on the left, controls on the right

    Args:
        config_dir: Directory holding config.json (and by default the
            key-value store); defaults to ~/.dilation_sandbox
        store: Key-value store for saved shapes; defaults to a JSON file
            in the config directory
    """

    def __init__(self, config_dir=None, store=None):
        super().__init__()
        self.setWindowTitle(f"{WINDOW_TITLE} {get_version()}")

        self.config_dir = config_dir or CONFIG_DIR
        self.config_file = os.path.join(self.config_dir, CONFIG_FILE_NAME)
        self._load_config()

        # Session is the single source of truth for all editor state
        self.session = Session(show_log=self.show_history)
        self.session.history.add_listener(self._on_history_changed)

        self.store = store if store is not None else KeyValueStore(self.storage_path)

        # Initialize global notifier with main window reference
        set_main_window(self)

        # Initialize action handlers (composition pattern)
        self.file_actions = FileActions(self)
        self.transform_actions = TransformActions(self)

        self.setup_ui()
        self.refresh_view()

    def _alert(self, message):
        """Blocking notification to the user"""
        notify_user(message, WINDOW_TITLE)


def main(argv=None):
    """Main entry point for the Dilation Sandbox application"""
    parser = argparse.ArgumentParser(
        description='Place points on a grid and dilate the shape about a center.',
    )
    parser.add_argument(
        '--config-dir',
        default=None,
        help=f'Directory for config and saved shapes (default: {CONFIG_DIR}).',
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose logging.',
    )
    args, qt_args = parser.parse_known_args(argv)

    # Logging
    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    app = QtWidgets.QApplication([sys.argv[0]] + qt_args)
    app.setStyle("Fusion")

    light_palette = QPalette()
    light_palette.setColor(QPalette.Window, QColor(240, 240, 240))
    light_palette.setColor(QPalette.WindowText, Qt.black)
    light_palette.setColor(QPalette.Base, Qt.white)
    light_palette.setColor(QPalette.Button, QColor(225, 225, 225))
    light_palette.setColor(QPalette.ButtonText, Qt.black)
    light_palette.setColor(QPalette.Highlight, QColor(42, 130, 218))
    light_palette.setColor(QPalette.HighlightedText, Qt.white)
    app.setPalette(light_palette)

    window = DilationSandbox(config_dir=args.config_dir)
    window.show()
    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())

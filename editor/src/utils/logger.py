"""Global logging, user notification and error reporting utilities"""
import logging
import traceback

from PyQt5.QtWidgets import QMessageBox

_main_window = None
_logger = logging.getLogger('Notify')


def set_main_window(window):
    """Set the main window reference for showing popups"""
    global _main_window
    _main_window = window


def notify_user(message, title="Dilation Sandbox"):
    """Show a blocking notification to the user

    Falls back to a logged warning when no main window is set (tests,
    headless use).
    """
    if _main_window is not None:
        QMessageBox.information(_main_window, title, message)
    else:
        _logger.warning(f"{title}: {message}")


def report_error(e: Exception, user_message: str = None, title: str = "Error"):
    """Log an exception with its traceback and show an error popup

    The exception is not re-raised: callers are Qt slots, and an exception
    escaping a slot aborts the application.

    Args:
        e: The exception to report
        user_message: User-friendly message to show in popup (optional)
        title: Title for the popup dialog
    """
    details = ''.join(traceback.format_exception(type(e), e, e.__traceback__))
    _logger.error(f"{user_message or 'Unhandled error'}\n{details}")

    message = user_message if user_message else str(e)
    if _main_window is not None:
        QMessageBox.critical(_main_window, title, message)
    else:
        _logger.error(f"ERROR POPUP (no window): {title} - {message}")

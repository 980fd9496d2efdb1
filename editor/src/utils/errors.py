"""Exception types raised by the sandbox services.

The window layer catches these and shows the message to the user; none of
them leave the application in an unrecoverable state.
"""


class SandboxError(Exception):
    """Base class for all recoverable sandbox errors."""


class InvalidInputError(SandboxError, ValueError):
    """Text from an input field could not be used (bad fraction, zero scale,
    non-numeric center)."""


class VacuousTransformError(SandboxError):
    """Both scale factors resolved to 1 although the user typed something.

    Skipped silently: no alert, no log entry.
    """


class EmptyUndoError(SandboxError):
    """Undo was requested with nothing on the history stack."""


class EmptyLoadError(SandboxError):
    """Load was requested but no saved shape exists."""

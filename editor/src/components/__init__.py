"""UI components for the Dilation Sandbox

- canvas_widget: GridCanvas, the drawing surface
- control_panel: ControlPanel, the inputs, buttons and read-outs
"""

from .canvas_widget import GridCanvas
from .control_panel import ControlPanel

__all__ = [
    'GridCanvas',
    'ControlPanel',
]

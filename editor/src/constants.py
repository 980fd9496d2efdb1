"""
Dilation Sandbox - Constants and Configuration

This module contains all constant values used throughout the application:
- Grid geometry (cell size, coordinate range, canvas extent)
- Shape and history limits
- Persistence keys and config locations
- Drawing colors for the canvas
- Button captions that swap with UI state
"""

import os

# ======================================================================
# GRID GEOMETRY
# ======================================================================

# Size of one grid cell on the drawing surface (pixels)
GRID_SIZE = 20

# Grid coordinates run from -GRID_RANGE to +GRID_RANGE on both axes
GRID_RANGE = 17

# Drawing surface is square (pixels)
CANVAS_SIZE = 700

# Axis tick labels are drawn on every Nth grid line
AXIS_LABEL_STEP = 2

# ======================================================================
# SHAPE LIMITS
# ======================================================================

# One label per point, A-Z
LABEL_ALPHABET = 'ABCDEFGHIJKLMNOPQRSTUVWXYZ'
MAX_POINTS = len(LABEL_ALPHABET)  # 26

# ======================================================================
# HISTORY MANAGEMENT
# ======================================================================

# Maximum undo history (oldest snapshot evicted beyond this)
MAX_HISTORY_ENTRIES = 20

# ======================================================================
# CENTER OF DILATION
# ======================================================================

DEFAULT_CENTER_X = 0
DEFAULT_CENTER_Y = 0

# ======================================================================
# PERSISTENCE
# ======================================================================

# Key used in the key-value store for the saved point set
SAVED_SHAPE_KEY = 'savedShape'

CONFIG_DIR = os.path.join(os.path.expanduser("~"), ".dilation_sandbox")
CONFIG_FILE_NAME = 'config.json'
STORAGE_FILE_NAME = 'storage.json'

# ======================================================================
# CANVAS RENDERING
# ======================================================================

# Colors as (r, g, b, a) 0-255
COLOR_GRID_LINE = (204, 204, 204, 255)
COLOR_AXIS = (0, 0, 0, 255)
COLOR_AXIS_LABEL = (0, 0, 0, 255)
COLOR_CENTER_MARKER = (0, 128, 0, 255)
COLOR_RAY = (0, 128, 0, 128)
COLOR_SHAPE_LINE = (0, 0, 255, 255)
COLOR_SHAPE_POINT = (255, 0, 0, 255)
COLOR_GHOST_LINE = (128, 128, 128, 255)
COLOR_GHOST_POINT = (240, 128, 128, 255)
COLOR_HOVER_POINT = (255, 0, 0, 128)
COLOR_HOVER_TEXT = (255, 0, 0, 255)
COLOR_LABEL_BACKGROUND = (255, 255, 255, 255)
COLOR_LABEL_TEXT = (0, 0, 0, 255)

GRID_LINE_WIDTH = 1
AXIS_LINE_WIDTH = 2
SHAPE_LINE_WIDTH = 2
RAY_LINE_WIDTH = 1

# Vertex and center marker radius (pixels)
POINT_RADIUS = 5

# Label box offset from its vertex (pixels)
LABEL_OFFSET_X = 10
LABEL_BOX_SIZE = 15

CANVAS_FONT_FAMILY = 'Arial'
CANVAS_FONT_SIZE = 10

# ======================================================================
# UI CAPTIONS
# ======================================================================

WINDOW_TITLE = 'Dilation Sandbox'

SHOW_HISTORY_CAPTION = 'Show Transformation History'
HIDE_HISTORY_CAPTION = 'Hide Transformation History'

SET_CENTER_CAPTION = 'Set Center by Click'
SETTING_CENTER_CAPTION = 'Click to Set Center'

COORDINATES_PREFIX = 'Coordinates: '
HISTORY_PREFIX = 'Transformation History: '
EMPTY_TEXT = 'None'

"""
K-Pop Choreo Formation Editor - Constants

All configuration constants for the editor including stage dimensions,
colors, layout values and the starting formation.
"""

# Stage (in stage units)
STAGE_WIDTH = 1000
STAGE_HEIGHT = 600
GRID_SIZE = 40
DANCER_RADIUS = 22

# Pointer ids
MOUSE_POINTER_ID = 0

# Window
WINDOW_WIDTH = 1040
WINDOW_HEIGHT = 720
FPS = 60

# UI Layout
TOOLBAR_HEIGHT = 40
STATUS_HEIGHT = 30
CANVAS_MARGIN = 20
CANVAS_OFFSET_X = CANVAS_MARGIN
CANVAS_OFFSET_Y = TOOLBAR_HEIGHT + CANVAS_MARGIN

# Colors
COLOR_BG = (250, 250, 250)
COLOR_TOOLBAR = (32, 32, 32)
COLOR_STATUS = (32, 32, 32)
COLOR_STAGE = (255, 255, 255)
COLOR_STAGE_BORDER = (17, 17, 17)
COLOR_GRID = (232, 232, 232)
COLOR_MARKER = (17, 17, 17)
COLOR_DANCER_OUTLINE = (17, 17, 17)
COLOR_DANCER_LABEL = (255, 255, 255)
COLOR_DRAG_HIGHLIGHT = (255, 255, 0)
COLOR_TEXT = (255, 255, 255)
COLOR_BUTTON = (64, 64, 64)
COLOR_BUTTON_HOVER = (80, 80, 80)
COLOR_BUTTON_ACTIVE = (100, 100, 200)
COLOR_BUTTON_BORDER = (80, 80, 80)

# Stage markers
FRONT_LABEL = "FRONT (Audience)"
FRONT_LABEL_Y = 28
CENTER_LABEL = "Center"
CENTER_MARKER_RADIUS = 6

# Starting formation: (id, name, x, y, color)
DEFAULT_DANCERS = [
    ("d1", "1", 250, 220, (255, 77, 109)),
    ("d2", "2", 350, 260, (77, 121, 255)),
    ("d3", "3", 500, 300, (52, 199, 89)),
    ("d4", "4", 650, 260, (255, 176, 32)),
    ("d5", "5", 750, 220, (168, 85, 247)),
]

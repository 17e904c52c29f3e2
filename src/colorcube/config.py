"""
Configuration & Constants
=========================
This module serves as the central registry for the numeric constants that
shape the RGB cube view. Keeping them here keeps magic numbers (zoom limits,
drag sensitivity, colors) out of the projection, rendering and interaction
code.

Exports:
    DEFAULT_RX, DEFAULT_RY, DEFAULT_ZOOM (float): The initial orbit.
    ZOOM_MIN, ZOOM_MAX (float): Zoom clamp shared by wheel input and auto-fit.
"""
import math

# --- View defaults ---
DEFAULT_RX: float = -0.9
DEFAULT_RY: float = 0.6
DEFAULT_ZOOM: float = 1.6

# Pitch is clamped to the open interval (-PITCH_LIMIT, PITCH_LIMIT) so the cube never flips over a pole
PITCH_LIMIT: float = math.pi / 2 - 0.01

# --- Projection ---
CUBE_CENTER: float = 0.5
VIEWPORT_FILL: float = 0.9  # fraction of the short side covered by one cube unit at zoom 1

# --- Zoom ---
ZOOM_MIN: float = 0.2
ZOOM_MAX: float = 6.0
WHEEL_ZOOM_IN: float = 1.04
WHEEL_ZOOM_OUT: float = 0.96
FIT_FRACTION: float = 0.70  # auto-fit target, fraction of the short side
FIT_EVAL_ZOOM: float = 1.0
FIT_DEGENERATE_ZOOM: float = 1.0

# --- Interaction ---
DRAG_SENSITIVITY: float = 0.006  # radians per logical pixel

# --- Sampling ---
ALPHA_THRESHOLD: float = 0.01
POINT_ALPHA: float = 0.9
DEFAULT_SAMPLING_STEP: int = 4
SAMPLING_STEPS: tuple[tuple[str, int], ...] = (
    ("Coarse", 8),
    ("Medium", 4),
    ("Fine", 2),
    ("Full", 1),
)

# --- Rendering ---
BACKGROUND_COLOR: str = "#061017"
AXIS_LINE_WIDTH: float = 2.0
AXIS_COLORS: tuple[tuple[int, int, int, float], ...] = (
    (220, 80, 80, 0.7),
    (80, 220, 120, 0.7),
    (90, 140, 240, 0.8),
)
CORNER_MARKER_RADIUS: float = 6.0
LABEL_COLOR: tuple[int, int, int, float] = (230, 235, 240, 0.95)
LABEL_FONT_FAMILY: str = "sans-serif"
LABEL_PIXEL_SIZE: int = 12
LABEL_OFFSET: tuple[float, float] = (8.0, 4.0)

POINT_OPACITY: float = 0.95
POINT_MIN_RADIUS: float = 0.9
POINT_RADIUS_COEFF: float = 3.0 * 0.6
POINT_OUTLINE_RATIO: float = 0.25
LUMINANCE_WEIGHTS: tuple[float, float, float] = (0.299, 0.587, 0.114)
LUMINANCE_THRESHOLD: float = 0.6
OUTLINE_DARK: tuple[int, int, int, float] = (0, 0, 0, 0.75)
OUTLINE_LIGHT: tuple[int, int, int, float] = (255, 255, 255, 0.95)

# --- Presets ---
PRESET_SIZE: int = 64

"""Shared constants: sizes, colours and toolbar icons."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """An RGBA colour with float channels in the range 0.0–1.0."""

    r: float
    g: float
    b: float
    a: float = 1.0

    def to_rgba8(self) -> tuple[int, int, int, int]:
        """Return the colour as four 8-bit channels, clamped to 0–255."""
        return tuple(
            round(min(1.0, max(0.0, channel)) * 255)
            for channel in (self.r, self.g, self.b, self.a)
        )  # type: ignore[return-value]


WINDOW_TITLE = "ScreenshotWindow"
MIN_BOX_SIZE = 50
TEXT_BOX_WIDTH = 100
TEXT_BOX_HEIGHT = 30

COLOR_SELECTION_BORDER = Color(0.0, 0.47, 0.84, 1.0)
COLOR_SELECTION_DASHED = Color(0.31, 0.31, 0.31, 1.0)
COLOR_HANDLE_FILL = Color(1.0, 1.0, 1.0, 1.0)
COLOR_HANDLE_BORDER = Color(0.0, 0.47, 0.84, 1.0)
COLOR_MASK = Color(0.0, 0.0, 0.0, 0.6)
COLOR_TOOLBAR_BG = Color(1.0, 1.0, 1.0, 0.95)
COLOR_BUTTON_HOVER = Color(0.75, 0.75, 0.75, 1.0)
COLOR_BUTTON_ACTIVE = Color(0.78, 0.9, 1.0, 1.0)
COLOR_TEXT_NORMAL = Color(0.25, 0.25, 0.25, 1.0)
COLOR_ICON_NORMAL = Color(0.1, 0.1, 0.1, 1.0)
COLOR_ICON_DISABLED = Color(0.6, 0.6, 0.6, 1.0)
COLOR_ICON_CLICKED = Color(0.13, 0.77, 0.37, 1.0)

DEFAULT_DRAWING_COLOR = Color(1.0, 0.0, 0.0, 1.0)
DEFAULT_THICKNESS = 3.0
TEXT_FONT_SIZE = 20.0
TEXT_PLACEHOLDER = "Text"
SAMPLE_TEXT = "Sample Text"
MAX_HISTORY = 20

TOOLBAR_HEIGHT = 40.0
BUTTON_WIDTH = 30.0
BUTTON_HEIGHT = 30.0
BUTTON_SPACING = 4.0
TOOLBAR_PADDING = 8.0
TOOLBAR_MARGIN = 3.0
BUTTON_COUNT = 11

HANDLE_SIZE = 8.0
HANDLE_DETECTION_RADIUS = 10.0

SAVE_ICON = "💾"
COPY_ICON = "📋"
RECT_ICON = "⬜"
CIRCLE_ICON = "◯"
ARROW_ICON = "ↆ"
PEN_ICON = "🖊"
TEXT_ICON = "T₊"
UNDO_ICON = "↩"
CONFIRM_ICON = "✔"
CANCEL_ICON = "✖"
PIN_ICON = "📌"
"""The floating toolbar shown under (or above) the selection."""

from __future__ import annotations

from dataclasses import dataclass, field

from .constants import (
    ARROW_ICON,
    BUTTON_COUNT,
    BUTTON_HEIGHT,
    BUTTON_SPACING,
    BUTTON_WIDTH,
    CANCEL_ICON,
    CIRCLE_ICON,
    CONFIRM_ICON,
    COPY_ICON,
    PEN_ICON,
    PIN_ICON,
    RECT_ICON,
    SAVE_ICON,
    TEXT_ICON,
    TOOLBAR_HEIGHT,
    TOOLBAR_MARGIN,
    TOOLBAR_PADDING,
    UNDO_ICON,
)
from .elements import ToolbarButton
from .geometry import Rect

_LAYOUT = (
    (ToolbarButton.RECTANGLE, RECT_ICON),
    (ToolbarButton.CIRCLE, CIRCLE_ICON),
    (ToolbarButton.ARROW, ARROW_ICON),
    (ToolbarButton.PEN, PEN_ICON),
    (ToolbarButton.TEXT, TEXT_ICON),
    (ToolbarButton.UNDO, UNDO_ICON),
    (ToolbarButton.SAVE, SAVE_ICON),
    (ToolbarButton.PIN, PIN_ICON),
    (ToolbarButton.COPY, COPY_ICON),
    (ToolbarButton.CONFIRM, CONFIRM_ICON),
    (ToolbarButton.CANCEL, CANCEL_ICON),
)

TOOLBAR_WIDTH = (
    BUTTON_WIDTH * BUTTON_COUNT + BUTTON_SPACING * (BUTTON_COUNT - 1) + TOOLBAR_PADDING * 2.0
)


@dataclass(frozen=True)
class ToolbarSlot:
    """One button on the toolbar: where it is, what it does and its icon."""

    rect: Rect
    button: ToolbarButton
    icon: str


@dataclass
class Toolbar:
    """Toolbar layout and its hover/click state. Coordinates are floats."""

    rect: Rect = field(default_factory=lambda: Rect(0.0, 0.0, 0.0, 0.0))
    visible: bool = False
    buttons: list[ToolbarSlot] = field(default_factory=list)
    hovered_button: ToolbarButton = ToolbarButton.NONE
    clicked_button: ToolbarButton = ToolbarButton.NONE

    def update_position(self, selection: Rect, screen_width: int, screen_height: int) -> None:
        """Lay the toolbar out below the selection (above it if there is no room) and show it."""
        x = selection.left + selection.width() / 2.0 - TOOLBAR_WIDTH / 2.0
        y = selection.bottom + TOOLBAR_MARGIN
        if y + TOOLBAR_HEIGHT > screen_height:
            y = selection.top - TOOLBAR_HEIGHT - TOOLBAR_MARGIN

        x = min(max(x, 0.0), screen_width - TOOLBAR_WIDTH)
        y = min(max(y, 0.0), screen_height - TOOLBAR_HEIGHT)

        self.rect = Rect(x, y, x + TOOLBAR_WIDTH, y + TOOLBAR_HEIGHT)

        button_y = y + (TOOLBAR_HEIGHT - BUTTON_HEIGHT) / 2.0
        step = BUTTON_WIDTH + BUTTON_SPACING
        self.buttons = [
            ToolbarSlot(
                Rect(
                    x + TOOLBAR_PADDING + i * step,
                    button_y,
                    x + TOOLBAR_PADDING + i * step + BUTTON_WIDTH,
                    button_y + BUTTON_HEIGHT,
                ),
                button,
                icon,
            )
            for i, (button, icon) in enumerate(_LAYOUT)
        ]
        self.visible = True

    def button_at(self, x: int, y: int) -> ToolbarButton:
        """The button under (x, y), or ``ToolbarButton.NONE``."""
        return next(
            (slot.button for slot in self.buttons if slot.rect.contains(x, y)),
            ToolbarButton.NONE,
        )

    def contains(self, x: int, y: int) -> bool:
        """True when the toolbar is visible and (x, y) lies on it."""
        return self.visible and self.rect.contains(x, y)

    def clear_clicked(self) -> None:
        self.clicked_button = ToolbarButton.NONE

    def hide(self) -> None:
        self.visible = False
        self.hovered_button = ToolbarButton.NONE
"""The screenshot editor: turns mouse and keyboard events into edits of the selection."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from .dragging import DragController
from .elements import DragMode, DrawingTool, ToolbarButton
from .geometry import Point, Rect
from .selection import Cursor

_TOOL_FOR_BUTTON = {
    ToolbarButton.RECTANGLE: DrawingTool.RECTANGLE,
    ToolbarButton.CIRCLE: DrawingTool.CIRCLE,
    ToolbarButton.ARROW: DrawingTool.ARROW,
    ToolbarButton.PEN: DrawingTool.PEN,
    ToolbarButton.TEXT: DrawingTool.TEXT,
}


class Key(enum.Enum):
    """The keys the editor reacts to."""

    ESCAPE = "escape"
    RETURN = "return"
    Z = "z"
    OTHER = "other"


@dataclass
class EditorHost:
    """A window-less host that records what the editor asks of it."""

    window_rect: Rect = field(default_factory=Rect)
    repaint_count: int = 0
    cursor: Cursor = Cursor.ARROW
    copied: list[Rect] = field(default_factory=list)
    quit_requested: bool = False

    def repaint(self) -> None:
        self.repaint_count += 1

    def set_cursor(self, cursor: Cursor) -> None:
        self.cursor = cursor

    def copy_selection(self, rect: Rect) -> None:
        self.copied.append(rect)

    def pin_window(self, rect: Rect) -> Rect:
        """Move the window onto ``rect``; returns where it was before."""
        previous = self.window_rect
        self.window_rect = rect
        return previous

    def move_window_by(self, dx: int, dy: int) -> None:
        self.window_rect = self.window_rect.translated(dx, dy)

    def quit(self) -> None:
        self.quit_requested = True


@dataclass
class ScreenshotEditor(DragController):
    """Selection model wired to a host window."""

    host: EditorHost = field(default_factory=EditorHost)
    is_pinned: bool = False
    original_window_pos: Rect = field(default_factory=Rect)

    def is_button_disabled(self, button: ToolbarButton) -> bool:
        return button is ToolbarButton.UNDO and not self.can_undo()

    # --- mouse -----------------------------------------------------------

    def handle_left_button_down(self, x: int, y: int) -> None:
        if self.is_pinned:
            self.mouse_pressed = True
            self.drag_start_pos = Point(x, y)
            self.drag_mode = DragMode.MOVING
            return

        if self.has_selection:
            button = self.toolbar.button_at(x, y)
            if button is not ToolbarButton.NONE:
                if not self.is_button_disabled(button):
                    self.toolbar.clicked_button = button
                    self.handle_toolbar_click(button)
                return

        if self.current_tool is DrawingTool.TEXT:
            index = self.element_at(x, y)
            if index is not None:
                element = self.drawing_elements[index]
                if element.tool is DrawingTool.TEXT:
                    self.select_element(index)
                    self.mouse_pressed = True
                    self.drag_start_pos = Point(x, y)
                    self.drag_mode = DragMode.MOVING_ELEMENT
                    self.drag_start_rect = element.rect
                    self.host.repaint()
                    return
            elif self.has_selection and self.selection_rect.contains(x, y):
                self.create_text_element(x, y)
                self.host.repaint()
                return

        self.mouse_pressed = True
        self.drag_start_pos = Point(x, y)

        if self.has_selection:
            inside = self.selection_rect.contains(x, y)
            on_handle = self.handle_at(x, y) is not DragMode.NONE
            if inside or on_handle:
                self.toolbar.clear_clicked()
                self.start_drag(x, y)
        else:
            self.start_drag(x, y)

        self.host.repaint()

    def handle_left_button_up(self, x: int, y: int) -> None:
        if self.is_pinned:
            self.mouse_pressed = False
            self.drag_mode = DragMode.NONE
            return

        button = self.toolbar.button_at(x, y)
        if not (button is not ToolbarButton.NONE and button is self.toolbar.clicked_button):
            self.toolbar.clear_clicked()
            if self.mouse_pressed:
                self.end_drag()

        self.mouse_pressed = False
        self.drag_mode = DragMode.NONE
        self.host.repaint()

    def handle_double_click(self, x: int, y: int) -> None:
        self.save_selection()

    def handle_mouse_move(self, x: int, y: int) -> None:
        if self.is_pinned:
            if self.mouse_pressed and self.drag_mode is DragMode.MOVING:
                self.host.move_window_by(x - self.drag_start_pos.x, y - self.drag_start_pos.y)
            self.host.set_cursor(Cursor.SIZE_ALL)
            return

        hovered = self.toolbar.button_at(x, y)
        disabled = self.is_button_disabled(hovered)
        self.toolbar.hovered_button = ToolbarButton.NONE if disabled else hovered

        if self.mouse_pressed:
            self.update_drag(x, y)
        else:
            self.host.set_cursor(self._idle_cursor(x, y, hovered, disabled))

        self.host.repaint()

    def _idle_cursor(self, x: int, y: int, hovered: ToolbarButton, disabled: bool) -> Cursor:
        if hovered is not ToolbarButton.NONE and not disabled:
            return Cursor.HAND
        if self.current_tool is DrawingTool.TEXT:
            if self.element_at(x, y) is not None:
                return Cursor.SIZE_ALL
            if self.has_selection and self.selection_rect.contains(x, y):
                return Cursor.CROSS
            return Cursor.ARROW
        if self.has_selection:
            return self.cursor_for_position(x, y)
        return Cursor.ARROW

    # --- keyboard --------------------------------------------------------

    def handle_key_down(self, key: Key, ctrl: bool = False) -> None:
        if self.is_pinned:
            if key is Key.ESCAPE:
                self.host.quit()
            return

        if key is Key.ESCAPE:
            self.host.quit()
        elif key is Key.RETURN:
            self.save_selection()
            self.host.quit()
        elif key is Key.Z and ctrl:
            self.undo()
            self.host.repaint()

    # --- toolbar actions -------------------------------------------------

    def handle_toolbar_click(self, button: ToolbarButton) -> None:
        tool = _TOOL_FOR_BUTTON.get(button)
        if tool is not None:
            self.current_tool = tool
            self.clear_element_selection()
        elif button is ToolbarButton.UNDO:
            if self.can_undo():
                self.undo()
        elif button in (ToolbarButton.SAVE, ToolbarButton.COPY):
            self.save_selection()
        elif button is ToolbarButton.PIN:
            self.pin_selection()
        elif button is ToolbarButton.CONFIRM:
            self.save_selection()
            self.host.quit()
        elif button is ToolbarButton.CANCEL:
            self.current_tool = DrawingTool.NONE
            self.current_element = None
            self.clear_element_selection()
            self.host.quit()
        self.host.repaint()

    def save_selection(self) -> bool:
        """Hand the selection to the host for copying; False when it is empty."""
        rect = self.selection_rect
        if rect.width() <= 0 or rect.height() <= 0:
            return False
        self.host.copy_selection(rect)
        return True

    def pin_selection(self) -> bool:
        """Shrink the window onto the selection and keep it on top; False when it is empty."""
        rect = self.selection_rect
        width, height = rect.width(), rect.height()
        if width <= 0 or height <= 0:
            return False

        previous = self.host.pin_window(rect)
        if not self.is_pinned:
            self.original_window_pos = previous

        self.screen_width = width
        self.screen_height = height
        self.selection_rect = Rect(0, 0, width, height)
        self.drawing_elements.clear()
        self.current_element = None
        self.selected_element = None
        self.current_tool = DrawingTool.NONE
        self.has_selection = False
        self.toolbar.hide()
        self.is_pinned = True
        return True
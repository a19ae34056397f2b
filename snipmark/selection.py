"""Selection state, undo history and hit testing for handles and elements."""

from __future__ import annotations

import copy
import enum
from dataclasses import dataclass, field

from .constants import (
    DEFAULT_DRAWING_COLOR,
    DEFAULT_THICKNESS,
    HANDLE_DETECTION_RADIUS,
    MAX_HISTORY,
    MIN_BOX_SIZE,
    Color,
)
from .elements import HANDLE_MODES, DragMode, DrawingElement, DrawingTool, HistoryState
from .geometry import Point, Rect, handle_points
from .toolbar import Toolbar

_BORDER_MARGIN = 5
_RADIUS = int(HANDLE_DETECTION_RADIUS)


class Cursor(enum.Enum):
    ARROW = "arrow"
    HAND = "hand"
    CROSS = "cross"
    IBEAM = "ibeam"
    SIZE_ALL = "size_all"
    SIZE_NWSE = "size_nwse"
    SIZE_NESW = "size_nesw"
    SIZE_NS = "size_ns"
    SIZE_WE = "size_we"
    NO = "no"


_RESIZE_CURSORS = {
    DragMode.RESIZING_TOP_LEFT: Cursor.SIZE_NWSE,
    DragMode.RESIZING_BOTTOM_RIGHT: Cursor.SIZE_NWSE,
    DragMode.RESIZING_TOP_RIGHT: Cursor.SIZE_NESW,
    DragMode.RESIZING_BOTTOM_LEFT: Cursor.SIZE_NESW,
    DragMode.RESIZING_TOP_CENTER: Cursor.SIZE_NS,
    DragMode.RESIZING_BOTTOM_CENTER: Cursor.SIZE_NS,
    DragMode.RESIZING_MIDDLE_LEFT: Cursor.SIZE_WE,
    DragMode.RESIZING_MIDDLE_RIGHT: Cursor.SIZE_WE,
}

_LEFT_MODES = frozenset(
    {DragMode.RESIZING_TOP_LEFT, DragMode.RESIZING_BOTTOM_LEFT, DragMode.RESIZING_MIDDLE_LEFT}
)
_TOP_MODES = frozenset(
    {DragMode.RESIZING_TOP_LEFT, DragMode.RESIZING_TOP_CENTER, DragMode.RESIZING_TOP_RIGHT}
)


def point_near(x1: int, y1: int, x2: int, y2: int, radius: int) -> bool:
    """True when the two points are within ``radius`` of each other."""
    dx = x1 - x2
    dy = y1 - y2
    return dx * dx + dy * dy <= radius * radius


@dataclass
class SelectionModel:
    """Everything the editor knows about the selection and its annotations."""

    screen_width: int
    screen_height: int
    selection_rect: Rect = field(default_factory=Rect)
    has_selection: bool = False
    drag_mode: DragMode = DragMode.NONE
    mouse_pressed: bool = False
    drag_start_pos: Point = field(default_factory=lambda: Point(0, 0))
    drag_start_rect: Rect = field(default_factory=Rect)
    toolbar: Toolbar = field(default_factory=Toolbar)
    current_tool: DrawingTool = DrawingTool.NONE
    drawing_elements: list[DrawingElement] = field(default_factory=list)
    current_element: DrawingElement | None = None
    selected_element: int | None = None
    drawing_color: Color = DEFAULT_DRAWING_COLOR
    drawing_thickness: float = DEFAULT_THICKNESS
    history: list[HistoryState] = field(default_factory=list)

    # --- history ---------------------------------------------------------

    def save_history(self) -> None:
        """Snapshot the annotations; only the newest MAX_HISTORY snapshots are kept."""
        self.history.append(
            HistoryState(copy.deepcopy(self.drawing_elements), self.selected_element)
        )
        if len(self.history) > MAX_HISTORY:
            del self.history[0]

    def can_undo(self) -> bool:
        return bool(self.history)

    def undo(self) -> None:
        """Restore the most recent snapshot, if any."""
        if not self.history:
            return
        state = self.history.pop()
        self.drawing_elements = state.drawing_elements
        self.selected_element = state.selected_element
        for element in self.drawing_elements:
            element.selected = False
        index = self.selected_element
        if index is not None and index < len(self.drawing_elements):
            self.drawing_elements[index].selected = True

    # --- element selection -----------------------------------------------

    def select_element(self, index: int) -> None:
        """Make the element at ``index`` the only selected one."""
        for element in self.drawing_elements:
            element.selected = False
        self.drawing_elements[index].selected = True
        self.selected_element = index

    def clear_element_selection(self) -> None:
        for element in self.drawing_elements:
            element.selected = False
        self.selected_element = None

    def _selected(self) -> DrawingElement | None:
        index = self.selected_element
        if index is not None and index < len(self.drawing_elements):
            return self.drawing_elements[index]
        return None

    # --- hit testing -----------------------------------------------------

    def element_at(self, x: int, y: int) -> int | None:
        """Index of the topmost visible element under (x, y) inside the selection."""
        if not self.selection_rect.contains(x, y):
            return None
        if not (0 <= x < self.screen_width and 0 <= y < self.screen_height):
            return None
        for index in reversed(range(len(self.drawing_elements))):
            element = self.drawing_elements[index]
            if self.is_element_visible(element) and element.contains_point(x, y):
                return index
        return None

    def is_element_visible(self, element: DrawingElement) -> bool:
        """True when the element touches both the selection and the screen."""
        bounds = element.bounding_rect()
        screen = Rect(0, 0, self.screen_width, self.screen_height)
        return bounds.intersects(self.selection_rect) and bounds.intersects(screen)

    def is_element_visible_in_selection(self, element: DrawingElement) -> bool:
        return element.bounding_rect().intersects(self.selection_rect)

    def handle_at(self, x: int, y: int) -> DragMode:
        """Which selection handle (or the move area) is under (x, y)."""
        if self.toolbar.contains(x, y) or not self.has_selection:
            return DragMode.NONE
        rect = self.selection_rect
        for (hx, hy), mode in zip(handle_points(rect), HANDLE_MODES):
            if point_near(x, y, hx, hy, _RADIUS):
                return mode
        if (
            rect.left + _BORDER_MARGIN <= x <= rect.right - _BORDER_MARGIN
            and rect.top + _BORDER_MARGIN <= y <= rect.bottom - _BORDER_MARGIN
        ):
            return DragMode.MOVING
        return DragMode.NONE

    def element_handle_at(self, x: int, y: int, rect: Rect) -> DragMode:
        """Which handle of the selected element (with bounds ``rect``) is under (x, y)."""
        sel = self.selection_rect
        if not sel.contains(x, y):
            return DragMode.NONE

        element = self._selected()
        if element is not None and element.tool is DrawingTool.ARROW and len(element.points) >= 2:
            start, end = element.points[0], element.points[1]
            if sel.contains(start.x, start.y) and point_near(x, y, start.x, start.y, _RADIUS):
                return DragMode.RESIZING_TOP_LEFT
            if sel.contains(end.x, end.y) and point_near(x, y, end.x, end.y, _RADIUS):
                return DragMode.RESIZING_BOTTOM_RIGHT
            return DragMode.NONE

        for (hx, hy), mode in zip(handle_points(rect), HANDLE_MODES):
            if sel.contains(hx, hy) and point_near(x, y, hx, hy, _RADIUS):
                return mode
        return DragMode.NONE

    def drag_mode_at(self, x: int, y: int) -> DragMode:
        """Handle or move area of the selection under (x, y), ignoring the toolbar."""
        if not self.has_selection:
            return DragMode.NONE
        for (hx, hy), mode in zip(handle_points(self.selection_rect), HANDLE_MODES):
            if point_near(x, y, hx, hy, _RADIUS):
                return mode
        if self.selection_rect.contains(x, y):
            return DragMode.MOVING
        return DragMode.NONE

    def cursor_for_position(self, x: int, y: int) -> Cursor:
        """The pointer shape to show at (x, y) when no button is held."""
        if not (0 <= x < self.screen_width and 0 <= y < self.screen_height):
            return Cursor.ARROW
        if not self.has_selection:
            return Cursor.ARROW
        if self.toolbar.contains(x, y):
            return Cursor.HAND

        inside = self.selection_rect.contains(x, y)

        element = self._selected()
        if (
            element is not None
            and element.tool is not DrawingTool.PEN
            and self.is_element_visible(element)
            and inside
        ):
            mode = self.element_handle_at(x, y, element.rect)
            if mode is not DragMode.NONE:
                return _RESIZE_CURSORS.get(mode, Cursor.ARROW)
            if element.contains_point(x, y):
                return Cursor.SIZE_ALL

        if inside:
            index = self.element_at(x, y)
            if index is not None and self.drawing_elements[index].tool is not DrawingTool.PEN:
                return Cursor.SIZE_ALL

        if self.current_tool is not DrawingTool.NONE and inside:
            return Cursor.IBEAM if self.current_tool is DrawingTool.TEXT else Cursor.CROSS

        mode = self.handle_at(x, y)
        if mode is DragMode.MOVING:
            return Cursor.SIZE_ALL
        return _RESIZE_CURSORS.get(mode, Cursor.NO)

    # --- selection geometry ----------------------------------------------

    def clamp_selection_to_screen(self) -> None:
        """Shift the selection back on screen, keeping its size."""
        r = self.selection_rect
        width, height = r.width(), r.height()
        left, top, right, bottom = r.left, r.top, r.right, r.bottom
        if left < 0:
            left, right = 0, width
        if top < 0:
            top, bottom = 0, height
        if right > self.screen_width:
            right, left = self.screen_width, self.screen_width - width
        if bottom > self.screen_height:
            bottom, top = self.screen_height, self.screen_height - height
        self.selection_rect = Rect(left, top, right, bottom)

    def ensure_minimum_size(self) -> None:
        """Grow the selection to MIN_BOX_SIZE, away from the edge being dragged."""
        r = self.selection_rect
        left, top, right, bottom = r.left, r.top, r.right, r.bottom
        if right - left < MIN_BOX_SIZE:
            if self.drag_mode in _LEFT_MODES:
                left = right - MIN_BOX_SIZE
            else:
                right = left + MIN_BOX_SIZE
        if bottom - top < MIN_BOX_SIZE:
            if self.drag_mode in _TOP_MODES:
                top = bottom - MIN_BOX_SIZE
            else:
                bottom = top + MIN_BOX_SIZE
        self.selection_rect = Rect(left, top, right, bottom)
        self.clamp_selection_to_screen()
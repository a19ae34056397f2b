"""Mouse drags: drawing the selection, moving and resizing it, and editing annotations."""

from __future__ import annotations

from .constants import MIN_BOX_SIZE, SAMPLE_TEXT, TEXT_BOX_HEIGHT, TEXT_BOX_WIDTH, TEXT_FONT_SIZE
from .elements import RESIZE_MODES, DragMode, DrawingElement, DrawingTool
from .geometry import Point, Rect
from .selection import SelectionModel

_MIN_ELEMENT_SIZE = 10
_MIN_SHAPE_EXTENT = 5
_SHAPE_TOOLS = frozenset({DrawingTool.RECTANGLE, DrawingTool.CIRCLE, DrawingTool.ARROW})


def _resized(rect: Rect, mode: DragMode, dx: int, dy: int) -> Rect:
    """Move the edges of ``rect`` that the handle ``mode`` controls."""
    left, top, right, bottom = rect.left, rect.top, rect.right, rect.bottom
    if mode in (DragMode.RESIZING_TOP_LEFT, DragMode.RESIZING_BOTTOM_LEFT, DragMode.RESIZING_MIDDLE_LEFT):
        left += dx
    if mode in (DragMode.RESIZING_TOP_RIGHT, DragMode.RESIZING_BOTTOM_RIGHT, DragMode.RESIZING_MIDDLE_RIGHT):
        right += dx
    if mode in (DragMode.RESIZING_TOP_LEFT, DragMode.RESIZING_TOP_CENTER, DragMode.RESIZING_TOP_RIGHT):
        top += dy
    if mode in (DragMode.RESIZING_BOTTOM_LEFT, DragMode.RESIZING_BOTTOM_CENTER, DragMode.RESIZING_BOTTOM_RIGHT):
        bottom += dy
    return Rect(left, top, right, bottom)


def _should_keep(element: DrawingElement) -> bool:
    """Whether a freshly drawn element is large enough to keep."""
    points = element.points
    if element.tool is DrawingTool.PEN:
        return len(points) > 1
    if element.tool in _SHAPE_TOOLS:
        if len(points) < 2:
            return False
        dx = abs(points[1].x - points[0].x)
        dy = abs(points[1].y - points[0].y)
        return dx > _MIN_SHAPE_EXTENT or dy > _MIN_SHAPE_EXTENT
    if element.tool is DrawingTool.TEXT:
        return bool(points)
    return False


class DragController(SelectionModel):
    """Selection model that reacts to press, drag and release of the mouse."""

    def _begin(self, mode: DragMode, x: int, y: int, rect: Rect) -> None:
        self.drag_mode = mode
        self.mouse_pressed = True
        self.drag_start_pos = Point(x, y)
        self.drag_start_rect = rect

    def start_drag(self, x: int, y: int) -> None:
        """Decide what a press at (x, y) starts dragging."""
        if not self.has_selection:
            if self.current_tool is DrawingTool.NONE:
                self.clear_element_selection()
                self.drag_mode = DragMode.DRAWING
                self.mouse_pressed = True
                self.drag_start_pos = Point(x, y)
                self.selection_rect = Rect(x, y, x, y)
                self.has_selection = True
                self.toolbar.hide()
            return

        inside = self.selection_rect.contains(x, y)

        element = self._selected()
        if (
            element is not None
            and element.tool is not DrawingTool.PEN
            and self.is_element_visible(element)
        ):
            mode = self.element_handle_at(x, y, element.rect)
            if mode is not DragMode.NONE:
                self._begin(mode, x, y, element.rect)
                return
            if inside and element.contains_point(x, y):
                self._begin(DragMode.MOVING_ELEMENT, x, y, element.rect)
                return

        if inside:
            index = self.element_at(x, y)
            if index is not None:
                if self.drawing_elements[index].tool is DrawingTool.PEN:
                    return
                self.select_element(index)
                hit = self.drawing_elements[index]
                hit.update_bounding_rect()
                rect = hit.rect
                mode = self.element_handle_at(x, y, rect)
                if mode is DragMode.NONE:
                    mode = DragMode.MOVING_ELEMENT
                self._begin(mode, x, y, rect)
                return

        if self.current_tool is not DrawingTool.NONE:
            if inside:
                self.clear_element_selection()
                self.save_history()
                self.drag_mode = DragMode.DRAWING_SHAPE
                self.mouse_pressed = True
                self.drag_start_pos = Point(x, y)
                self.current_element = DrawingElement(
                    self.current_tool,
                    points=[Point(x, y)],
                    color=self.drawing_color,
                    thickness=float(self.drawing_thickness),
                )
            return

        self.clear_element_selection()
        mode = self.handle_at(x, y)
        if mode is DragMode.MOVING or mode in RESIZE_MODES:
            self._begin(mode, x, y, self.selection_rect)

    def update_drag(self, x: int, y: int) -> None:
        """Follow the pointer to (x, y) while a button is held."""
        if not self.mouse_pressed:
            return
        mode = self.drag_mode
        start = self.drag_start_pos

        if mode is DragMode.DRAWING:
            self.selection_rect = Rect(
                max(min(start.x, x), 0),
                max(min(start.y, y), 0),
                min(max(start.x, x), self.screen_width),
                min(max(start.y, y), self.screen_height),
            )
        elif mode is DragMode.DRAWING_SHAPE:
            self._extend_current_element(x, y)
        elif mode is DragMode.MOVING:
            self._move_selection(x, y)
        elif mode is DragMode.MOVING_ELEMENT:
            self._move_selected_element(x, y)
        elif mode in RESIZE_MODES:
            index = self.selected_element
            if index is None:
                self._resize_selection(x, y)
            elif index < len(self.drawing_elements):
                self._resize_element(self.drawing_elements[index], x, y)

    def _extend_current_element(self, x: int, y: int) -> None:
        element = self.current_element
        if element is None:
            return
        sel = self.selection_rect
        point = Point(min(max(x, sel.left), sel.right), min(max(y, sel.top), sel.bottom))
        if element.tool is DrawingTool.PEN:
            element.points.append(point)
        elif element.tool in _SHAPE_TOOLS:
            if not element.points:
                element.points.append(self.drag_start_pos)
            if len(element.points) == 1:
                element.points.append(point)
            else:
                element.points[1] = point
            element.rect = Rect.from_points(element.points[0], element.points[1])

    def _move_selection(self, x: int, y: int) -> None:
        if self.current_tool is not DrawingTool.NONE:
            return
        dx = x - self.drag_start_pos.x
        dy = y - self.drag_start_pos.y
        origin = self.drag_start_rect
        width, height = origin.width(), origin.height()
        left = min(max(origin.left + dx, 0), self.screen_width - width)
        top = min(max(origin.top + dy, 0), self.screen_height - height)
        self.selection_rect = Rect(left, top, left + width, top + height)
        if self.toolbar.visible:
            self.toolbar.update_position(self.selection_rect, self.screen_width, self.screen_height)

    def _move_selected_element(self, x: int, y: int) -> None:
        element = self._selected()
        if element is None or element.tool is DrawingTool.PEN:
            return
        dx = x - self.drag_start_pos.x
        dy = y - self.drag_start_pos.y
        moved_x = element.rect.left - self.drag_start_rect.left
        moved_y = element.rect.top - self.drag_start_rect.top
        element.move_by(dx - moved_x, dy - moved_y)

    def _resize_element(self, element: DrawingElement, x: int, y: int) -> None:
        if element.tool is DrawingTool.PEN:
            return
        if element.tool is DrawingTool.ARROW and len(element.points) >= 2:
            if self.drag_mode is DragMode.RESIZING_TOP_LEFT:
                element.points[0] = Point(x, y)
            elif self.drag_mode is DragMode.RESIZING_BOTTOM_RIGHT:
                element.points[1] = Point(x, y)
            element.update_bounding_rect()
            return
        new_rect = _resized(
            self.drag_start_rect,
            self.drag_mode,
            x - self.drag_start_pos.x,
            y - self.drag_start_pos.y,
        )
        if new_rect.width() >= _MIN_ELEMENT_SIZE and new_rect.height() >= _MIN_ELEMENT_SIZE:
            element.resize(new_rect)

    def _resize_selection(self, x: int, y: int) -> None:
        r = _resized(
            self.drag_start_rect,
            self.drag_mode,
            x - self.drag_start_pos.x,
            y - self.drag_start_pos.y,
        )
        r = Rect(
            max(r.left, 0),
            max(r.top, 0),
            min(r.right, self.screen_width),
            min(r.bottom, self.screen_height),
        )
        if r.width() >= MIN_BOX_SIZE and r.height() >= MIN_BOX_SIZE:
            self.selection_rect = r
            if self.toolbar.visible:
                self.toolbar.update_position(r, self.screen_width, self.screen_height)

    def end_drag(self) -> None:
        """Finish the current drag: keep a drawn shape, or settle the new selection."""
        if self.drag_mode is DragMode.DRAWING_SHAPE:
            element, self.current_element = self.current_element, None
            if element is not None and _should_keep(element):
                element.update_bounding_rect()
                self.drawing_elements.append(element)
        elif self.drag_mode is DragMode.DRAWING:
            sel = self.selection_rect
            if sel.width() < MIN_BOX_SIZE or sel.height() < MIN_BOX_SIZE:
                self.has_selection = False
                self.toolbar.hide()
            else:
                self.toolbar.update_position(sel, self.screen_width, self.screen_height)
        self.mouse_pressed = False
        self.drag_mode = DragMode.NONE

    def create_text_element(self, x: int, y: int) -> None:
        """Add a text box with sample text whose top-left corner is (x, y)."""
        self.save_history()
        self.drawing_elements.append(
            DrawingElement(
                DrawingTool.TEXT,
                points=[Point(x, y)],
                rect=Rect(x, y, x + TEXT_BOX_WIDTH, y + TEXT_BOX_HEIGHT),
                color=self.drawing_color,
                thickness=TEXT_FONT_SIZE,
                text=SAMPLE_TEXT,
            )
        )
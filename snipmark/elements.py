"""Annotation elements drawn over the screenshot and the states they move through."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from .constants import DEFAULT_DRAWING_COLOR, DEFAULT_THICKNESS, TEXT_FONT_SIZE, TEXT_PLACEHOLDER, Color
from .geometry import Point, Rect, arrow_wings, point_to_line_distance


class DrawingTool(enum.Enum):
    NONE = "none"
    RECTANGLE = "rectangle"
    CIRCLE = "circle"
    ARROW = "arrow"
    PEN = "pen"
    TEXT = "text"


class DragMode(enum.Enum):
    NONE = "none"
    DRAWING = "drawing"
    MOVING = "moving"
    RESIZING_TOP_LEFT = "resizing_top_left"
    RESIZING_TOP_CENTER = "resizing_top_center"
    RESIZING_TOP_RIGHT = "resizing_top_right"
    RESIZING_MIDDLE_RIGHT = "resizing_middle_right"
    RESIZING_BOTTOM_RIGHT = "resizing_bottom_right"
    RESIZING_BOTTOM_CENTER = "resizing_bottom_center"
    RESIZING_BOTTOM_LEFT = "resizing_bottom_left"
    RESIZING_MIDDLE_LEFT = "resizing_middle_left"
    DRAWING_SHAPE = "drawing_shape"
    MOVING_ELEMENT = "moving_element"
    RESIZING_ELEMENT = "resizing_element"


# Handle modes in the same clockwise order as geometry.handle_points.
HANDLE_MODES = (
    DragMode.RESIZING_TOP_LEFT,
    DragMode.RESIZING_TOP_CENTER,
    DragMode.RESIZING_TOP_RIGHT,
    DragMode.RESIZING_MIDDLE_RIGHT,
    DragMode.RESIZING_BOTTOM_RIGHT,
    DragMode.RESIZING_BOTTOM_CENTER,
    DragMode.RESIZING_BOTTOM_LEFT,
    DragMode.RESIZING_MIDDLE_LEFT,
)
RESIZE_MODES = frozenset(HANDLE_MODES)


class ToolbarButton(enum.Enum):
    SAVE = "save"
    COPY = "copy"
    RECTANGLE = "rectangle"
    CIRCLE = "circle"
    ARROW = "arrow"
    PEN = "pen"
    TEXT = "text"
    UNDO = "undo"
    CONFIRM = "confirm"
    CANCEL = "cancel"
    NONE = "none"
    PIN = "pin"


_ARROW_MARGIN = 20
_HIT_SLACK = 5.0


@dataclass
class DrawingElement:
    """One annotation: a shape, a freehand stroke or a text box."""

    tool: DrawingTool
    points: list[Point] = field(default_factory=list)
    rect: Rect = field(default_factory=Rect)
    color: Color = DEFAULT_DRAWING_COLOR
    thickness: float = DEFAULT_THICKNESS
    text: str = ""
    selected: bool = False

    def update_bounding_rect(self) -> None:
        """Recompute ``rect`` from the element's points."""
        if not self.points:
            return
        first = self.points[0]
        if self.tool is DrawingTool.TEXT:
            display = self.text or TEXT_PLACEHOLDER
            font_size = self.thickness if self.thickness > 0.0 else TEXT_FONT_SIZE
            factor = 0.9 if any(ord(c) > 127 for c in display) else 0.6
            est_width = int(len(display) * font_size * factor)
            est_height = int(font_size * 1.2)
            width = min(max(est_width, 50) + 16, 300)
            height = min(max(est_height, 20) + 8, 80)
            self.rect = Rect(first.x, first.y, first.x + width, first.y + height)
        elif self.tool is DrawingTool.PEN:
            xs = [p.x for p in self.points]
            ys = [p.y for p in self.points]
            margin = int(self.thickness / 2.0) + 1
            self.rect = Rect(min(xs) - margin, min(ys) - margin, max(xs) + margin, max(ys) + margin)
        elif self.tool in (DrawingTool.RECTANGLE, DrawingTool.CIRCLE):
            if len(self.points) >= 2:
                self.rect = Rect.from_points(self.points[0], self.points[1])
        elif self.tool is DrawingTool.ARROW:
            if len(self.points) >= 2:
                span = Rect.from_points(self.points[0], self.points[1])
                self.rect = Rect(
                    span.left - _ARROW_MARGIN,
                    span.top - _ARROW_MARGIN,
                    span.right + _ARROW_MARGIN,
                    span.bottom + _ARROW_MARGIN,
                )
        else:
            self.rect = Rect(first.x, first.y, first.x + 50, first.y + 30)

    def contains_point(self, x: int, y: int) -> bool:
        """Hit test for selecting the element with the mouse."""
        reach = self.thickness + _HIT_SLACK
        if self.tool is DrawingTool.PEN:
            return any(
                point_to_line_distance(x, y, a.x, a.y, b.x, b.y) <= reach
                for a, b in zip(self.points, self.points[1:])
            )
        if self.tool in (DrawingTool.RECTANGLE, DrawingTool.CIRCLE):
            if len(self.points) < 2:
                return False
            return Rect.from_points(self.points[0], self.points[1]).contains(x, y)
        if self.tool is DrawingTool.ARROW:
            if len(self.points) < 2:
                return False
            start, end = self.points[0], self.points[1]
            if point_to_line_distance(x, y, start.x, start.y, end.x, end.y) <= reach:
                return True
            wings = arrow_wings(start, end)
            if wings is None:
                return False
            return any(
                point_to_line_distance(x, y, end.x, end.y, w.x, w.y) <= reach for w in wings
            )
        if self.tool is DrawingTool.TEXT:
            return self.rect.contains(x, y)
        return False

    def resize(self, new_rect: Rect) -> None:
        """Fit the element's points to ``new_rect`` and adopt it as the bounds."""
        old = self.rect
        if self.tool in (DrawingTool.RECTANGLE, DrawingTool.CIRCLE):
            if len(self.points) >= 2:
                self.points[0] = Point(new_rect.left, new_rect.top)
                self.points[1] = Point(new_rect.right, new_rect.bottom)
        elif self.tool is DrawingTool.ARROW:
            if len(self.points) >= 2:
                old_w, old_h = old.width(), old.height()
                if old_w == 0 or old_h == 0:
                    self.points[0] = Point(new_rect.left, new_rect.top)
                    self.points[1] = Point(new_rect.right, new_rect.bottom)
                else:
                    new_w, new_h = new_rect.width(), new_rect.height()
                    for i in (0, 1):
                        p = self.points[i]
                        rel_x = (p.x - old.left) / old_w
                        rel_y = (p.y - old.top) / old_h
                        self.points[i] = Point(
                            new_rect.left + int(rel_x * new_w),
                            new_rect.top + int(rel_y * new_h),
                        )
        elif self.tool is DrawingTool.PEN:
            scale_x = new_rect.width() / old.width() if old.width() else 1.0
            scale_y = new_rect.height() / old.height() if old.height() else 1.0
            self.points = [
                Point(
                    new_rect.left + int((p.x - old.left) * scale_x),
                    new_rect.top + int((p.y - old.top) * scale_y),
                )
                for p in self.points
            ]
        elif self.tool is DrawingTool.TEXT:
            if self.points:
                self.points[0] = Point(new_rect.left, new_rect.top)
        self.rect = new_rect

    def move_by(self, dx: int, dy: int) -> None:
        self.points = [Point(p.x + dx, p.y + dy) for p in self.points]
        self.rect = self.rect.translated(dx, dy)

    def bounding_rect(self) -> Rect:
        """The extent used for visibility checks."""
        if self.tool in (DrawingTool.RECTANGLE, DrawingTool.CIRCLE, DrawingTool.ARROW, DrawingTool.TEXT):
            return self.rect
        if self.tool is DrawingTool.PEN and self.points:
            xs = [p.x for p in self.points]
            ys = [p.y for p in self.points]
            return Rect(min(xs), min(ys), max(xs), max(ys))
        return Rect()


@dataclass
class HistoryState:
    """A snapshot of the annotations for undo."""

    drawing_elements: list[DrawingElement]
    selected_element: int | None = None
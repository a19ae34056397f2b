from snipmark.constants import MAX_HISTORY, MIN_BOX_SIZE
from snipmark.elements import DragMode, DrawingElement, DrawingTool
from snipmark.geometry import Point, Rect
from snipmark.selection import Cursor, SelectionModel, point_near

SEL = Rect(100, 100, 300, 300)


def _model(**kwargs):
    model = SelectionModel(screen_width=1000, screen_height=800, **kwargs)
    model.selection_rect = SEL
    model.has_selection = True
    return model


def _shape(tool, a, b):
    element = DrawingElement(tool, points=[Point(*a), Point(*b)])
    element.update_bounding_rect()
    return element


def test_point_near():
    assert point_near(0, 0, 3, 4, 5)
    assert not point_near(0, 0, 3, 4, 4)


def test_handle_at_corners_and_edges():
    model = _model()
    assert model.handle_at(100, 100) is DragMode.RESIZING_TOP_LEFT
    assert model.handle_at(200, 100) is DragMode.RESIZING_TOP_CENTER
    assert model.handle_at(300, 300) is DragMode.RESIZING_BOTTOM_RIGHT
    assert model.handle_at(100, 200) is DragMode.RESIZING_MIDDLE_LEFT
    assert model.handle_at(200, 200) is DragMode.MOVING
    assert model.handle_at(50, 50) is DragMode.NONE


def test_handle_at_without_selection_or_over_toolbar():
    model = _model()
    model.toolbar.update_position(SEL, 1000, 800)
    r = model.toolbar.rect
    assert model.handle_at((r.left + r.right) / 2, (r.top + r.bottom) / 2) is DragMode.NONE
    model.has_selection = False
    assert model.handle_at(200, 200) is DragMode.NONE


def test_drag_mode_at_matches_handles():
    model = _model()
    assert model.drag_mode_at(300, 100) is DragMode.RESIZING_TOP_RIGHT
    assert model.drag_mode_at(101 + 10, 101 + 10) is DragMode.MOVING
    assert model.drag_mode_at(0, 0) is DragMode.NONE


def test_undo_restores_previous_elements():
    model = _model()
    model.drawing_elements.append(_shape(DrawingTool.RECTANGLE, (120, 120), (180, 180)))
    model.select_element(0)
    model.save_history()
    model.drawing_elements.append(_shape(DrawingTool.CIRCLE, (150, 150), (250, 250)))
    model.clear_element_selection()
    assert model.can_undo()
    model.undo()
    assert len(model.drawing_elements) == 1
    assert model.selected_element == 0
    assert model.drawing_elements[0].selected
    assert not model.can_undo()


def test_history_snapshot_is_independent():
    model = _model()
    model.drawing_elements.append(_shape(DrawingTool.RECTANGLE, (120, 120), (180, 180)))
    model.save_history()
    model.drawing_elements[0].move_by(10, 10)
    model.undo()
    assert model.drawing_elements[0].points[0] == Point(120, 120)


def test_history_is_capped():
    model = _model()
    for _ in range(MAX_HISTORY + 5):
        model.save_history()
    assert len(model.history) == MAX_HISTORY


def test_undo_on_empty_history_changes_nothing():
    model = _model()
    model.drawing_elements.append(_shape(DrawingTool.RECTANGLE, (120, 120), (180, 180)))
    model.undo()
    assert len(model.drawing_elements) == 1


def test_element_at_returns_topmost():
    model = _model()
    model.drawing_elements.append(_shape(DrawingTool.RECTANGLE, (120, 120), (200, 200)))
    model.drawing_elements.append(_shape(DrawingTool.RECTANGLE, (150, 150), (250, 250)))
    assert model.element_at(160, 160) == 1
    assert model.element_at(130, 130) == 0
    assert model.element_at(280, 280) is None


def test_element_at_ignores_points_outside_selection():
    model = _model()
    model.drawing_elements.append(_shape(DrawingTool.RECTANGLE, (50, 50), (200, 200)))
    assert model.element_at(60, 60) is None
    assert model.element_at(150, 150) == 0


def test_visibility_checks():
    model = _model()
    inside = _shape(DrawingTool.RECTANGLE, (120, 120), (180, 180))
    outside = _shape(DrawingTool.RECTANGLE, (400, 400), (500, 500))
    assert model.is_element_visible(inside)
    assert model.is_element_visible_in_selection(inside)
    assert not model.is_element_visible(outside)
    assert not model.is_element_visible_in_selection(outside)


def test_element_handle_at_for_arrow_endpoints():
    model = _model()
    model.drawing_elements.append(_shape(DrawingTool.ARROW, (150, 150), (250, 250)))
    model.select_element(0)
    rect = model.drawing_elements[0].rect
    assert model.element_handle_at(150, 152, rect) is DragMode.RESIZING_TOP_LEFT
    assert model.element_handle_at(250, 250, rect) is DragMode.RESIZING_BOTTOM_RIGHT
    assert model.element_handle_at(200, 200, rect) is DragMode.NONE


def test_element_handle_at_for_rectangle():
    model = _model()
    model.drawing_elements.append(_shape(DrawingTool.RECTANGLE, (150, 150), (250, 250)))
    model.select_element(0)
    rect = model.drawing_elements[0].rect
    assert model.element_handle_at(250, 150, rect) is DragMode.RESIZING_TOP_RIGHT
    assert model.element_handle_at(150, 200, rect) is DragMode.RESIZING_MIDDLE_LEFT
    assert model.element_handle_at(50, 50, rect) is DragMode.NONE


def test_cursor_for_selection_handles():
    model = _model()
    assert model.cursor_for_position(100, 100) is Cursor.SIZE_NWSE
    assert model.cursor_for_position(300, 100) is Cursor.SIZE_NESW
    assert model.cursor_for_position(200, 100) is Cursor.SIZE_NS
    assert model.cursor_for_position(300, 200) is Cursor.SIZE_WE
    assert model.cursor_for_position(200, 200) is Cursor.SIZE_ALL
    assert model.cursor_for_position(50, 50) is Cursor.NO


def test_cursor_outside_screen_or_without_selection():
    model = _model()
    assert model.cursor_for_position(-1, 5) is Cursor.ARROW
    model.has_selection = False
    assert model.cursor_for_position(200, 200) is Cursor.ARROW


def test_cursor_for_tools_and_elements():
    model = _model(current_tool=DrawingTool.PEN)
    assert model.cursor_for_position(200, 200) is Cursor.CROSS
    model.current_tool = DrawingTool.TEXT
    assert model.cursor_for_position(200, 200) is Cursor.IBEAM
    model.drawing_elements.append(_shape(DrawingTool.RECTANGLE, (150, 150), (250, 250)))
    assert model.cursor_for_position(200, 200) is Cursor.SIZE_ALL


def test_cursor_over_toolbar_is_hand():
    model = _model()
    model.toolbar.update_position(SEL, 1000, 800)
    r = model.toolbar.rect
    assert model.cursor_for_position(int((r.left + r.right) / 2), int(r.top) + 5) is Cursor.HAND


def test_clamp_selection_keeps_size():
    model = _model()
    model.selection_rect = Rect(-10, 20, 90, 120)
    model.clamp_selection_to_screen()
    assert model.selection_rect == Rect(0, 20, 100, 120)
    model.selection_rect = Rect(950, 700, 1050, 850)
    model.clamp_selection_to_screen()
    assert model.selection_rect.right == 1000
    assert model.selection_rect.bottom == 800
    assert model.selection_rect.width() == 100
    assert model.selection_rect.height() == 150


def test_ensure_minimum_size_grows_away_from_dragged_edge():
    model = _model(drag_mode=DragMode.RESIZING_MIDDLE_LEFT)
    model.selection_rect = Rect(100, 100, 120, 300)
    model.ensure_minimum_size()
    assert model.selection_rect.right == 120
    assert model.selection_rect.width() == MIN_BOX_SIZE

    model.drag_mode = DragMode.RESIZING_BOTTOM_CENTER
    model.selection_rect = Rect(100, 100, 300, 110)
    model.ensure_minimum_size()
    assert model.selection_rect.top == 100
    assert model.selection_rect.height() == MIN_BOX_SIZE
import pytest

from geistengine.gui.base import (
    BLACK,
    WHITE,
    Color,
    Font,
    Gui,
    GuiElement,
    GuiElementType,
    InputState,
    Key,
    Rect,
    Renderer,
    Sprite,
    Vector2,
)


class Label(GuiElement):
    def update(self):
        self.hovered = self.gui.input.is_mouse_in_rect(
            self.pos.x, self.pos.y, self.width, self.height
        )

    def draw(self):
        self.gui.renderer.text(self.gui.font, self.text, self.pos, 10, self.color)

    def value(self):
        return int(self.hovered)


def test_rect_contains_is_half_open():
    rect = Rect(10, 20, 5, 5)
    assert rect.contains(10, 20)
    assert rect.contains(14.9, 24.9)
    assert not rect.contains(15, 20)
    assert not rect.contains(10, 25)
    assert not rect.contains(9.9, 22)


def test_font_measure_invariants():
    font = Font(base_size=16)
    two = font.measure("aa", 10, 1)
    four = font.measure("aaaa", 10, 1)
    assert four.x == 2 * two.x + 1
    assert two.y == 10
    assert font.measure("", 10, 1).x == 0.0


def test_font_measure_multiline_uses_widest_line():
    font = Font()
    multi = font.measure("ab\nabcd", 12, 1)
    assert multi.x == font.measure("abcd", 12, 1).x
    assert multi.y == 2 * font.measure("abcd", 12, 1).y


def test_input_state_rect_queries():
    state = InputState(mouse=Vector2(5, 5))
    assert state.is_mouse_in_rect(0, 0, 10, 10)
    assert not state.is_left_down_in_rect(0, 0, 10, 10)
    state.left_down = True
    assert state.is_left_down_in_rect(0, 0, 10, 10)
    assert not state.is_left_down_in_rect(6, 6, 10, 10)
    state.left_clicked = True
    assert state.was_left_clicked_in_rect(0, 0, 10, 10)


def test_input_state_keys():
    state = InputState(pressed_keys={Key.ENTER})
    assert state.is_key_pressed(Key.ENTER)
    assert not state.is_key_pressed(Key.BACKSPACE)


def test_renderer_records_shapes_and_sprites():
    renderer = Renderer()
    rect = Rect(1, 2, 3, 4)
    sprite = Sprite("corner", Rect(0, 0, 8, 8))
    renderer.rectangle(rect, BLACK)
    renderer.rounded_rectangle_lines(rect, 0.5, 1, WHITE)
    renderer.sprite(sprite, rect)
    assert renderer.commands == [
        ("rectangle", rect, BLACK),
        ("rounded_rectangle_lines", rect, 0.5, 1, WHITE),
        ("sprite", sprite, rect, WHITE),
    ]


def test_renderer_text_alignment():
    renderer = Renderer()
    font = Font()
    anchor = Vector2(100, 50)
    renderer.text(font, "hello", anchor, 10, WHITE)
    renderer.text_centered(font, "hello", anchor, 10, WHITE)
    renderer.text_right(font, "hello", anchor, 10, WHITE)
    width = font.measure("hello", 10, 1).x
    left, centered, right = (cmd[3] for cmd in renderer.commands)
    assert left == anchor
    assert centered.x + width / 2 == anchor.x
    assert right.x + width == anchor.x
    assert right.y == anchor.y


def test_element_type_lookup_follows_declaration_order():
    assert GuiElementType(0) is GuiElementType.TEXTBUTTON
    assert GuiElementType(len(GuiElementType) - 1) is GuiElementType.STRETCHBUTTON
    with pytest.raises(ValueError):
        GuiElementType(len(GuiElementType))


def test_gui_add_registers_and_rejects_duplicates():
    gui = Gui()
    label = Label(gui, 3)
    assert gui.add(label) is label
    assert gui.elements == {3: label}
    with pytest.raises(ValueError):
        gui.add(Label(gui, 3))


def test_gui_origin_is_truncated():
    gui = Gui(pos=Vector2(10.7, -2.5))
    assert (gui.gui_x, gui.gui_y) == (10, -2)


def test_element_base_is_abstract():
    with pytest.raises(TypeError):
        GuiElement(Gui(), 1)


def test_element_position_size_and_text():
    gui = Gui()
    label = Label(gui, 1, text="Britannia")
    label.set_pos(4, 6)
    label.set_size(20, 8)
    assert label.pos == Vector2(4.0, 6.0)
    assert (label.width, label.height) == (20.0, 8.0)
    assert label.display_text() == "Britannia"
    assert label.color == Color(255, 255, 255, 255)


def test_concrete_element_uses_gui_input_and_renderer():
    gui = Gui()
    label = gui.add(Label(gui, 1, 0, 0, 10, 10, text="hi"))
    gui.input.mouse = Vector2(3, 3)
    label.update()
    label.draw()
    assert label.value() == 1
    assert gui.renderer.commands[0][2] == "hi"
import pytest

from geistengine.gui.base import BLACK, WHITE, Color, Font, Gui, Rect, Sprite, Vector2
from geistengine.gui.decor import (
    GuiOctagonBox,
    GuiPanel,
    GuiSprite,
    GuiTextArea,
    Justification,
)


def _borders(size=4):
    return [Sprite(f"b{i}", Rect(0, 0, size, size)) for i in range(9)]


def test_filled_panel_draws_rectangle():
    gui = Gui(pos=Vector2(100, 50))
    red = Color(255, 0, 0)
    panel = gui.add(GuiPanel(gui, 1, 10, 20, 30, 40, color=red, filled=True))
    panel.draw()
    assert gui.renderer.commands == [("rectangle", Rect(110, 70, 30, 40), red)]
    assert panel.value() == 0


def test_outline_panel_draws_lines():
    gui = Gui()
    panel = gui.add(GuiPanel(gui, 1, 1, 2, 3, 4))
    panel.draw()
    assert gui.renderer.commands == [("rectangle_lines", Rect(1, 2, 3, 4), WHITE)]


def test_invisible_panel_draws_nothing():
    gui = Gui()
    panel = gui.add(GuiPanel(gui, 1, 1, 2, 3, 4, filled=True))
    panel.visible = False
    panel.draw()
    assert gui.renderer.commands == []


def test_text_area_without_width_takes_font_size_height():
    gui = Gui(font_size=18.0)
    area = GuiTextArea(gui, 1, Font(), "hello", 0, 0, height=99)
    assert area.height == 18
    wide = GuiTextArea(gui, 2, Font(), "hello", 0, 0, 50, 99)
    assert wide.height == 99


def test_text_area_positions_scale_with_gui():
    gui = Gui(scale=2.0)
    area = GuiTextArea(gui, 1, Font(), "x", 3, 4, 10)
    assert (area.pos.x, area.pos.y, area.width) == (6.0, 8.0, 20.0)


def test_left_text_area_draws_with_gui_font_and_shadow():
    gui = Gui(pos=Vector2(10, 20), font=Font(base_size=12))
    own_font = Font(base_size=20)
    red = Color(255, 0, 0)
    area = gui.add(GuiTextArea(gui, 1, own_font, "hi", 5, 6, color=red, shadowed=True))
    area.draw()
    shadow, main = gui.renderer.commands
    assert main[1] is gui.font
    assert main[3] == Vector2(15, 26)
    assert main[4] == own_font.base_size
    assert main[5] == red
    assert shadow[3] == Vector2(17, 28)
    assert shadow[5] == BLACK


def test_left_text_area_with_width_draws_nothing():
    gui = Gui()
    area = gui.add(GuiTextArea(gui, 1, Font(), "paragraph", 0, 0, 200, 50))
    area.draw()
    assert gui.renderer.commands == []


def test_right_text_area_ends_at_right_edge():
    gui = Gui(pos=Vector2(10, 0))
    font = Font()
    area = gui.add(
        GuiTextArea(gui, 1, font, "right", 5, 0, 40, justified=Justification.RIGHT)
    )
    area.draw()
    (cmd,) = gui.renderer.commands
    width = font.measure("right", font.base_size, 1).x
    assert cmd[3].x + width == pytest.approx(10 + 5 + 40)


def test_centered_text_area_centres_on_middle():
    gui = Gui()
    font = Font()
    area = gui.add(
        GuiTextArea(gui, 1, font, "ab", 0, 0, 100, justified=Justification.CENTERED)
    )
    area.draw()
    (cmd,) = gui.renderer.commands
    width = font.measure("ab", font.base_size, 1).x
    assert cmd[3].x + width / 2 == pytest.approx(50)


def test_centered_text_too_wide_draws_nothing():
    gui = Gui()
    area = gui.add(
        GuiTextArea(gui, 1, Font(), "far too long a line", 0, 0, 10,
                    justified=Justification.CENTERED)
    )
    area.draw()
    assert gui.renderer.commands == []


def test_inactive_text_area_draws_nothing():
    gui = Gui()
    area = gui.add(GuiTextArea(gui, 1, Font(), "hi", 0, 0, active=False))
    area.draw()
    assert gui.renderer.commands == []
    assert area.value() == 0


def test_sprite_element_draws_scaled():
    gui = Gui(scale=2.0, pos=Vector2(5, 5))
    sprite = Sprite("s", Rect(0, 0, 16, 8))
    element = gui.add(GuiSprite(gui, 1, 1, 2, sprite, scale_x=3.0, scale_y=4.0))
    assert (element.width, element.height) == (16.0, 8.0)
    element.draw()
    assert gui.renderer.commands == [("sprite", sprite, Rect(6, 7, 6.0, 8.0), WHITE)]


def test_sprite_element_can_swap_sprite():
    gui = Gui()
    element = gui.add(GuiSprite(gui, 1, 0, 0, Sprite("a", Rect(0, 0, 1, 1))))
    other = Sprite("b", Rect(0, 0, 2, 2))
    element.sprite = other
    element.draw()
    assert gui.renderer.commands[0][1] == other


def test_sprite_element_requires_sprite():
    with pytest.raises(ValueError):
        GuiSprite(Gui(), 1, 0, 0, None)


def test_octagon_box_requires_nine_sprites():
    with pytest.raises(ValueError):
        GuiOctagonBox(Gui(), 1, 0, 0, 40, 40, _borders()[:8])


def test_octagon_box_draw_order_and_layout():
    gui = Gui()
    borders = _borders(4)
    box = gui.add(GuiOctagonBox(gui, 1, 10, 20, 40, 30, borders))
    box.draw()
    commands = gui.renderer.commands
    order = [borders.index(cmd[1]) for cmd in commands]
    assert order == [4, 1, 7, 3, 5, 0, 2, 6, 8]
    by_index = {borders.index(cmd[1]): cmd[2] for cmd in commands}
    assert by_index[0] == Rect(10, 20, 4, 4)
    centre = by_index[4]
    assert centre.x == by_index[0].x + by_index[0].width
    assert centre.x + centre.width == by_index[2].x
    assert by_index[8].x + by_index[8].width == 10 + 40
    assert by_index[8].y + by_index[8].height == 20 + 30


def test_inactive_octagon_box_draws_nothing():
    gui = Gui()
    box = gui.add(GuiOctagonBox(gui, 1, 0, 0, 40, 40, _borders(), active=False))
    box.draw()
    assert gui.renderer.commands == []
    assert box.value() == 0
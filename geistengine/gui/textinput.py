"""A single-line text field that takes typed characters while it has focus."""

from __future__ import annotations

from typing import ClassVar, Optional

from .base import (
    WHITE,
    Color,
    Font,
    Gui,
    GuiElement,
    GuiElementType,
    Key,
    Rect,
    Vector2,
)

_TRANSPARENT = Color(0, 0, 0, 0)
_CURSOR_DELAY = 500


class GuiTextInput(GuiElement):
    """Clicking gives the field focus; typing appends, backspace deletes, enter leaves."""

    element_type: ClassVar[Optional[GuiElementType]] = GuiElementType.TEXTINPUT

    def __init__(
        self,
        gui: Gui,
        element_id: int,
        x: int,
        y: int,
        width: int,
        height: int,
        font: Font,
        initial_text: str = "",
        *,
        text_color: Color = WHITE,
        box_color: Color = WHITE,
        background_color: Color = _TRANSPARENT,
        group: int = 0,
        active: bool = True,
    ) -> None:
        super().__init__(
            gui, element_id, float(x), float(y), width, height,
            group=group, active=active, text=initial_text,
        )
        self.font = font
        self.text_color = text_color
        self.box_color = box_color
        self.background_color = background_color
        self.has_focus = False

    def draw(self) -> None:
        if not self.visible:
            return

        gui = self.gui
        renderer = gui.renderer
        x = gui.gui_x + self.pos.x
        y = gui.gui_y + self.pos.y
        rect = Rect(x, y, self.width, self.height)
        renderer.rectangle(rect, self.background_color)
        renderer.rectangle_lines(rect, self.box_color)

        shown = self.text
        if self.has_focus and gui.time > _CURSOR_DELAY:
            shown += "|"
        renderer.text(self.font, shown, Vector2(x + 2, y + 2), gui.font_size, self.text_color)

    def update(self) -> None:
        gui = self.gui
        x = int(gui.gui_x + self.pos.x)
        y = int(gui.gui_y + self.pos.y)

        if self.has_focus and gui.last_element != self.id:
            self.has_focus = False

        if not gui.accepting_input:
            return

        state = gui.input
        if state.was_left_clicked_in_rect(x, y, x + self.width, y + self.height):
            self.has_focus = True
            gui.active_element = self.id

        if self.has_focus and (
            state.is_key_pressed(Key.KP_ENTER) or state.is_key_pressed(Key.ENTER)
        ):
            self.has_focus = False

        if self.has_focus and state.is_key_pressed(Key.BACKSPACE):
            self.text = self.text[:-1]

        if self.has_focus and state.key_queue:
            key = state.key_queue.pop(0)
            if Key.SPACE <= key <= Key.Z:
                self.text += chr(key)

    def value(self) -> int:
        return 0
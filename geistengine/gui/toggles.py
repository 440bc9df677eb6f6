"""Check boxes and radio buttons: elements that keep a selected state between frames."""

from __future__ import annotations

from typing import ClassVar, Optional

from .base import (
    BLACK,
    WHITE,
    Color,
    Gui,
    GuiElement,
    GuiElementType,
    Rect,
    Sprite,
)


def _hit_area(element: GuiElement) -> tuple[int, int, int, int]:
    x = element.gui.gui_x + int(element.pos.x)
    y = element.gui.gui_y + int(element.pos.y)
    return x, y, x + int(element.width), y + int(element.height)


def _draw_plain_box(element: GuiElement) -> None:
    """Draw a box outline, filled with an inner box when the element is selected."""
    renderer = element.gui.renderer
    x = element.gui.gui_x + int(element.pos.x)
    y = element.gui.gui_y + int(element.pos.y)
    w = int(element.width)
    h = int(element.height)
    renderer.rectangle_lines(Rect(x, y, w, h), WHITE)
    if element.selected:
        renderer.rectangle(Rect(x + 2, y + 2, w - 4, h - 4), WHITE)


class GuiCheckBox(GuiElement):
    """A box that flips between selected and unselected each time it is clicked.

    With no sprites it is drawn as a box, filled when selected.
    """

    element_type: ClassVar[Optional[GuiElementType]] = GuiElementType.CHECKBOX

    def __init__(
        self,
        gui: Gui,
        element_id: int,
        x: int,
        y: int,
        width: int = 0,
        height: int = 0,
        *,
        select_sprite: Optional[Sprite] = None,
        deselect_sprite: Optional[Sprite] = None,
        hovered_sprite: Optional[Sprite] = None,
        hovered_selected_sprite: Optional[Sprite] = None,
        scale_x: float = 1.0,
        scale_y: float = 1.0,
        color: Color = WHITE,
        group: int = 0,
        active: bool = True,
    ) -> None:
        if select_sprite is not None:
            if deselect_sprite is None:
                raise ValueError("a sprite check box needs a deselect sprite")
            width = select_sprite.source_rect.width
            height = select_sprite.source_rect.height
        super().__init__(
            gui, element_id, float(x), float(y), width, height,
            group=group, active=active, color=color,
        )
        self.select_sprite = select_sprite
        self.deselect_sprite = deselect_sprite
        self.hovered_sprite = hovered_sprite
        self.hovered_selected_sprite = hovered_selected_sprite
        self.scale_x = scale_x
        self.scale_y = scale_y

    def draw(self) -> None:
        if not self.visible:
            return
        if self.select_sprite is None:
            _draw_plain_box(self)
            return

        gui = self.gui
        x = gui.gui_x + int(self.pos.x)
        y = gui.gui_y + int(self.pos.y)
        hot = self.hovered or self.down

        if self.selected:
            if hot:
                sprite = self.hovered_selected_sprite or self.select_sprite
                dest = Rect(x, y, self.scale_x * gui.scale, self.scale_y * gui.scale)
            else:
                sprite = self.select_sprite
                dest = Rect(x, y, self.scale_x, self.scale_y)
        else:
            if hot:
                sprite = self.hovered_sprite or self.deselect_sprite
            else:
                sprite = self.deselect_sprite
            dest = Rect(x, y, self.scale_x, self.scale_y)
        assert sprite is not None
        gui.renderer.sprite(sprite, dest, self.color)

    def update(self) -> None:
        gui = self.gui
        if not gui.accepting_input or not self.visible:
            return

        area = _hit_area(self)
        state = gui.input
        self.hovered = state.is_mouse_in_rect(*area)
        self.down = state.is_left_down_in_rect(*area)
        if state.was_left_clicked_in_rect(*area):
            self.selected = not self.selected
            gui.active_element = self.id

    def value(self) -> int:
        return int(self.selected) if self.active else 0


class GuiRadioButton(GuiElement):
    """A button that, when clicked, becomes selected and deselects the rest of its group."""

    element_type: ClassVar[Optional[GuiElementType]] = GuiElementType.RADIOBUTTON

    def __init__(
        self,
        gui: Gui,
        element_id: int,
        x: int,
        y: int,
        width: int = 0,
        height: int = 0,
        *,
        select_sprite: Optional[Sprite] = None,
        deselect_sprite: Optional[Sprite] = None,
        hovered_sprite: Optional[Sprite] = None,
        scale_x: float = 1.0,
        scale_y: float = 1.0,
        color: Color = WHITE,
        group: int = 0,
        active: bool = True,
        shadowed: bool = False,
    ) -> None:
        if select_sprite is not None:
            if deselect_sprite is None:
                raise ValueError("a sprite radio button needs a deselect sprite")
            width = select_sprite.source_rect.width
            height = select_sprite.source_rect.height
        super().__init__(
            gui, element_id, float(x), float(y), width, height,
            group=group, active=active, color=color, shadowed=shadowed,
        )
        self.select_sprite = select_sprite
        self.deselect_sprite = deselect_sprite
        self.hovered_sprite = hovered_sprite
        self.scale_x = scale_x
        self.scale_y = scale_y

    def draw(self) -> None:
        if not self.visible:
            return
        if self.select_sprite is None:
            _draw_plain_box(self)
            return

        gui = self.gui
        if self.selected:
            sprite = self.select_sprite
        elif self.hovered and self.hovered_sprite is not None:
            sprite = self.hovered_sprite
        else:
            sprite = self.deselect_sprite
        assert sprite is not None

        width = self.scale_x * gui.scale
        height = self.scale_y * gui.scale
        if self.shadowed:
            shadow = Rect(
                gui.gui_x + int(self.pos.x + 3), gui.gui_y + int(self.pos.y + 3), width, height
            )
            gui.renderer.sprite(sprite, shadow, BLACK)
        dest = Rect(gui.gui_x + int(self.pos.x), gui.gui_y + int(self.pos.y), width, height)
        gui.renderer.sprite(sprite, dest, self.color)

    def update(self) -> None:
        gui = self.gui
        if not gui.accepting_input or not self.visible:
            return

        area = _hit_area(self)
        state = gui.input
        self.hovered = state.is_mouse_in_rect(*area)

        if state.was_left_clicked_in_rect(*area):
            if not self.selected:
                self.selected = True
                for other in gui.elements.values():
                    if other.group == self.group and other is not self:
                        other.selected = False
            gui.active_element = self.id

    def value(self) -> int:
        return int(self.selected) if self.active else 0
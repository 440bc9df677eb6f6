"""A scroll bar whose spur can be dragged to pick a value in a range."""

from __future__ import annotations

import math
from typing import ClassVar, Optional

from .base import (
    BLACK,
    Color,
    Gui,
    GuiElement,
    GuiElementType,
    Rect,
    Sprite,
)

_DEFAULT_SPUR = Color(128, 128, 255, 255)
_TRANSPARENT = Color(0, 0, 0, 0)


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class GuiScrollBar(GuiElement):
    """A horizontal or vertical bar with a spur marking a value in ``0..value_range``.

    Without sprites the bar and spur are drawn as coloured rectangles; with
    sprites the bar is built from left, centre and right pieces.
    """

    element_type: ClassVar[Optional[GuiElementType]] = GuiElementType.SCROLLBAR

    def __init__(
        self,
        gui: Gui,
        element_id: int,
        value_range: int,
        x: int,
        y: int,
        width: int,
        height: int,
        vertical: bool,
        *,
        spur_color: Color = _DEFAULT_SPUR,
        background_color: Color = _TRANSPARENT,
        active_left: Optional[Sprite] = None,
        active_right: Optional[Sprite] = None,
        active_center: Optional[Sprite] = None,
        spur_active: Optional[Sprite] = None,
        inactive_left: Optional[Sprite] = None,
        inactive_right: Optional[Sprite] = None,
        inactive_center: Optional[Sprite] = None,
        spur_inactive: Optional[Sprite] = None,
        group: int = 0,
        active: bool = True,
        shadowed: bool = False,
    ) -> None:
        super().__init__(
            gui, element_id, float(x), float(y), width, height,
            group=group, active=active, shadowed=shadowed,
        )
        self.value_range = value_range
        self.vertical = vertical
        self.scroll_value = 0
        self.spur_location = 0
        self.spur_color = spur_color
        self.background_color = background_color
        self.active_left = active_left
        self.active_right = active_right
        self.active_center = active_center
        self.spur_active = spur_active
        self.inactive_left = inactive_left
        self.inactive_right = inactive_right
        self.inactive_center = inactive_center
        self.spur_inactive = spur_inactive

    def _fraction(self) -> float:
        if self.value_range == 0:
            return 0.0
        return float(self.scroll_value) / float(self.value_range)

    def draw(self) -> None:
        if not self.visible:
            return

        gui = self.gui
        renderer = gui.renderer
        adjx = int(gui.gui_x + self.pos.x)
        adjy = int(gui.gui_y + self.pos.y)
        adjw = int(self.width)
        adjh = int(self.height)

        if self.active_left is None:
            renderer.rectangle(Rect(adjx, adjy, adjw, adjh), self.background_color)
            if self.vertical:
                self.spur_location = int(self._fraction() * (self.height - self.width))
                side = int(self.width)
                renderer.rectangle(
                    Rect(adjx, adjy + self.spur_location, side, side), self.spur_color
                )
            else:
                self.spur_location = int(self._fraction() * (adjw - adjh))
                side = int(self.height)
                renderer.rectangle(
                    Rect(adjx + self.spur_location, adjy, side, side), self.spur_color
                )
            return

        if not self.selected and self.inactive_left is not None:
            left, center = self.inactive_left, self.inactive_center
            right, spur = self.inactive_right, self.spur_inactive
        else:
            left, center = self.active_left, self.active_center
            right, spur = self.active_right, self.spur_active
        if center is None or right is None or spur is None:
            raise ValueError("a sprite scroll bar needs centre, right and spur sprites")

        scale = gui.scale
        stretch_source = self.inactive_center if self.inactive_center is not None else center
        xmiddle = float(left.source_rect.width)
        xright = float(self.width - (left.source_rect.width + right.source_rect.width))
        center_scale = (xright + 3) / stretch_source.source_rect.width
        base_x = gui.pos.x + self.pos.x
        base_y = gui.pos.y + self.pos.y

        if self.shadowed:
            renderer.sprite(left, Rect(base_x + 3, base_y + 3, scale, scale), BLACK)
            renderer.sprite(
                center, Rect(base_x + 3 + xmiddle - 1, base_y + 3, center_scale, scale), BLACK
            )
            renderer.sprite(
                right, Rect(base_x + 3 + xmiddle + xright, base_y + 3, scale, scale), BLACK
            )

        renderer.sprite(left, Rect(base_x, base_y, scale, scale))
        renderer.sprite(center, Rect(base_x + xmiddle - 1, base_y, center_scale, scale))
        renderer.sprite(right, Rect(base_x + xmiddle + xright, base_y, scale, scale))

        spur_x = base_x - spur.source_rect.width / 2 + self._fraction() * self.width
        spur_y = base_y + self.height / 2.0 - spur.source_rect.height / 2.0
        renderer.sprite(spur, Rect(spur_x, spur_y, scale, scale))

    def _set_from_mouse(self, adjx: int, adjy: int, adjw: int, adjh: int) -> None:
        mouse = self.gui.input.mouse
        if self.vertical:
            fraction = (mouse.y - adjy) / adjh if adjh else 0.0
        else:
            fraction = (mouse.x - adjx) / adjw if adjw else 0.0
        value = _round_half_away(fraction * self.value_range)
        self.scroll_value = max(0, min(value, self.value_range))

    def update(self) -> None:
        gui = self.gui
        if not gui.accepting_input or not self.active:
            return

        self.hovered = False
        state = gui.input

        spur_height = (
            self.spur_active.source_rect.height if self.spur_active is not None else self.height
        )
        adjx = int(gui.gui_x + self.pos.x)
        adjy = int(gui.pos.y + self.pos.y + self.height / 2.0 - spur_height / 2.0)
        adjw = int(self.width)
        adjh = int(spur_height)
        hit = (adjx, adjy, adjx + adjw, adjy + adjh)

        if gui.last_element == self.id:
            # Keep tracking the mouse while the drag that started here continues.
            if state.left_dragging or state.is_left_down_in_rect(*hit):
                gui.active_element = self.id
                self._set_from_mouse(adjx, adjy, adjw, adjh)
            else:
                gui.active_element = -1
        elif (
            gui.active_element == -1
            and gui.last_element == -1
            and state.is_left_down_in_rect(*hit)
        ):
            gui.active_element = self.id
            self._set_from_mouse(adjx, adjy, adjw, adjh)
        elif state.is_mouse_in_rect(*hit):
            self.hovered = True

    def value(self) -> int:
        return self.scroll_value

    def display_text(self) -> str:
        return str(self.scroll_value)
"""Clickable buttons: text buttons, sprite icon buttons and stretchable sprite buttons."""

from __future__ import annotations

import math
from typing import ClassVar, Optional

from .base import (
    BLACK,
    WHITE,
    Color,
    Font,
    Gui,
    GuiElement,
    GuiElementType,
    Rect,
    Sprite,
    Vector2,
)

_DISABLED_TEXT = Color(25, 25, 25, 255)
_GREYED = Color(128, 128, 128, 255)
_ROUNDNESS = 0.5


class GuiTextButton(GuiElement):
    """A rounded button sized to fit its label; its colours invert while pressed."""

    element_type: ClassVar[Optional[GuiElementType]] = GuiElementType.TEXTBUTTON

    def __init__(
        self,
        gui: Gui,
        element_id: int,
        x: int,
        y: int,
        text: str,
        font: Optional[Font],
        *,
        text_color: Color = WHITE,
        background_color: Color = BLACK,
        border_color: Color = WHITE,
        group: int = 0,
        active: bool = True,
    ) -> None:
        if font is None:
            raise ValueError("a text button needs a font")
        super().__init__(
            gui, element_id, float(x) * gui.scale, float(y) * gui.scale,
            group=group, active=active, text=text,
        )
        self.font = font
        self.text_color = text_color
        self.background_color = background_color
        self.border_color = border_color

        dims = font.measure(text, font.base_size, 1)
        # Extra room for the rounded left and right ends.
        self.width = dims.x * 1.25
        self.height = dims.y
        self.text_width = int(dims.x)

    def _origin(self) -> tuple[int, int]:
        return self.gui.gui_x + int(self.pos.x), self.gui.gui_y + int(self.pos.y)

    def update(self) -> None:
        self.hovered = False
        self.clicked = False
        self.down = False

        if not self.gui.accepting_input or not (self.visible and self.active):
            return

        x, y = self._origin()
        state = self.gui.input
        if state.is_mouse_in_rect(x, y, self.width, self.height):
            self.hovered = True

        if state.is_left_down_in_rect(x, y, self.width, self.height):
            self.hovered = False
            self.down = True
        elif state.was_left_clicked_in_rect(x, y, self.width, self.height):
            self.down = False
            self.hovered = False
            self.clicked = True
            self.gui.active_element = self.id

    def draw(self) -> None:
        if not self.visible:
            return

        x, y = self._origin()
        rect = Rect(x, y, self.width, self.height)
        renderer = self.gui.renderer
        centre = Vector2(x + self.width / 2, self.gui.gui_y + int(self.pos.y + self.height * 0.6))
        size = self.font.base_size

        if not self.active:
            renderer.rounded_rectangle(rect, _ROUNDNESS, self.background_color)
            renderer.rounded_rectangle_lines(rect, _ROUNDNESS, self.gui.scale, self.border_color)
            renderer.text_centered(self.gui.font, self.text, centre, size, _DISABLED_TEXT)
        elif not self.down:
            renderer.rounded_rectangle(rect, _ROUNDNESS, self.background_color)
            renderer.rounded_rectangle_lines(rect, _ROUNDNESS, self.gui.scale, self.border_color)
            renderer.text_centered(self.gui.font, self.text, centre, size, self.text_color)
        else:
            renderer.rounded_rectangle(rect, _ROUNDNESS, self.border_color)
            renderer.rounded_rectangle_lines(
                rect, _ROUNDNESS, self.gui.scale, self.background_color
            )
            renderer.text_centered(self.font, self.text, centre, size, self.background_color)

    def value(self) -> int:
        return int(self.clicked)


class GuiIconButton(GuiElement):
    """A button drawn with an up sprite and optional pressed and inactive sprites."""

    element_type: ClassVar[Optional[GuiElementType]] = GuiElementType.ICONBUTTON

    def __init__(
        self,
        gui: Gui,
        element_id: int,
        x: int,
        y: int,
        up_sprite: Optional[Sprite],
        down_sprite: Optional[Sprite] = None,
        inactive_sprite: Optional[Sprite] = None,
        text: str = "",
        font: Optional[Font] = None,
        *,
        font_color: Color = WHITE,
        group: int = 0,
        active: bool = True,
        bobbing: bool = False,
    ) -> None:
        if up_sprite is None:
            raise ValueError("an icon button needs an up sprite")
        super().__init__(
            gui, element_id, float(x) * gui.scale, float(y) * gui.scale,
            up_sprite.source_rect.width * gui.scale,
            up_sprite.source_rect.height * gui.scale,
            group=group, active=active, text=text,
        )
        self.up_sprite = up_sprite
        self.down_sprite = down_sprite
        self.inactive_sprite = inactive_sprite
        self.font = font
        self.font_color = font_color
        self.bobbing = bobbing

    def _origin(self) -> tuple[int, int]:
        return self.gui.gui_x + int(self.pos.x), self.gui.gui_y + int(self.pos.y)

    def draw(self) -> None:
        if not self.visible:
            return

        # Bobbing only shifts where the button is drawn, not where it is hit.
        yoffset = 0
        if self.bobbing:
            yoffset = int(math.sin(self.gui.time * 10) * self.height * 0.025)

        renderer = self.gui.renderer
        x, y = self._origin()

        if not self.active:
            if self.inactive_sprite is not None:
                dest = Rect(
                    self.gui.gui_x + self.pos.x, self.gui.gui_y + self.pos.y,
                    self.width, self.height,
                )
                renderer.sprite(self.inactive_sprite, dest, self.color)
            else:
                renderer.sprite(self.up_sprite, Rect(x, y, self.width, self.height), self.color)
            return

        sprite = self.up_sprite
        if self.down and self.down_sprite is not None:
            sprite = self.down_sprite
        renderer.sprite(sprite, Rect(x, y + yoffset, self.width, self.height), self.color)

    def update(self) -> None:
        self.hovered = False
        self.clicked = False
        self.down = False

        if not self.gui.accepting_input or not (self.visible and self.active):
            return

        x, y = self._origin()
        w, h = int(self.width), int(self.height)
        state = self.gui.input
        if state.is_mouse_in_rect(x, y, w, h):
            self.hovered = True

        if state.is_left_down_in_rect(x, y, w, h):
            self.hovered = False
            self.down = True
        elif state.was_left_clicked_in_rect(x, y, w, h):
            self.down = False
            self.hovered = False
            self.clicked = True
            self.gui.active_element = self.id

    def value(self) -> int:
        return int(self.clicked)


class GuiStretchButton(GuiElement):
    """A button of left, centre and right sprites; the centre stretches to the width."""

    element_type: ClassVar[Optional[GuiElementType]] = GuiElementType.STRETCHBUTTON

    def __init__(
        self,
        gui: Gui,
        element_id: int,
        x: int,
        y: int,
        width: int,
        text: str,
        active_left: Optional[Sprite],
        active_right: Optional[Sprite],
        active_center: Optional[Sprite],
        inactive_left: Optional[Sprite],
        inactive_right: Optional[Sprite],
        inactive_center: Optional[Sprite],
        *,
        indent: int = 0,
        color: Color = WHITE,
        group: int = 0,
        active: bool = True,
        shadowed: bool = False,
    ) -> None:
        sprites = (
            active_left, active_right, active_center,
            inactive_left, inactive_right, inactive_center,
        )
        if any(sprite is None for sprite in sprites):
            raise ValueError("a stretch button needs all six sprites")
        assert active_left is not None
        super().__init__(
            gui, element_id, float(x) * gui.scale, float(y) * gui.scale,
            width, active_left.source_rect.height,
            group=group, active=active, color=color, shadowed=shadowed, text=text,
        )
        self.active_left: Sprite = active_left
        self.active_right: Sprite = active_right  # type: ignore[assignment]
        self.active_center: Sprite = active_center  # type: ignore[assignment]
        self.inactive_left: Sprite = inactive_left  # type: ignore[assignment]
        self.inactive_right: Sprite = inactive_right  # type: ignore[assignment]
        self.inactive_center: Sprite = inactive_center  # type: ignore[assignment]
        self.indent = indent

    def draw(self) -> None:
        if not self.visible:
            return

        gui = self.gui
        renderer = gui.renderer
        scale = gui.scale
        offset = 1.0
        il = self.inactive_left.source_rect
        ir = self.inactive_right.source_rect
        ic = self.inactive_center.source_rect

        xmiddle = float(il.width)
        xright = float(self.width - (il.width + il.width)) * scale
        center_width = float(self.width - (il.width + ir.width))

        dims = gui.font.measure(self.text, gui.font.base_size / scale, 1)
        text_width = dims.x * 0.85
        text_height = dims.y

        left_x = gui.pos.x + self.pos.x
        top_y = gui.pos.y + self.pos.y

        if not self.active:
            if self.shadowed:
                renderer.sprite(
                    self.inactive_left,
                    Rect(left_x + offset, gui.pos.y + offset, il.width, il.height), BLACK,
                )
                renderer.sprite(
                    self.inactive_center,
                    Rect(left_x + 3 + xmiddle - 1, top_y + 3, (xright + 3) / ic.width, scale),
                    BLACK,
                )
                renderer.sprite(
                    self.inactive_right,
                    Rect(left_x + 3 + xmiddle + xright, top_y + 3, scale, scale), BLACK,
                )
            renderer.sprite(
                self.inactive_left, Rect(left_x, gui.pos.y, il.width, il.height), _GREYED
            )
            renderer.sprite(
                self.inactive_center,
                Rect(left_x + xmiddle - 1, top_y, (xright + 3) / ic.width, ic.height), _GREYED,
            )
            renderer.sprite(
                self.inactive_right, Rect(left_x + xmiddle + xright, top_y, scale, ir.height),
                _GREYED,
            )
            renderer.text(
                gui.font, self.text, Vector2(left_x + self.indent, top_y), gui.font_size, WHITE
            )
        elif self.hovered or self.down or self.clicked:
            shift = offset if self.down else 0.0
            al = self.active_left.source_rect
            ac = self.active_center.source_rect
            ar = self.active_right.source_rect
            renderer.sprite(
                self.active_left,
                Rect(left_x + shift, top_y + shift, al.width * scale, al.height * scale),
            )
            renderer.sprite(
                self.active_center,
                Rect(left_x + xmiddle + shift, top_y + shift,
                     center_width * scale, ac.height * scale),
            )
            renderer.sprite(
                self.active_right,
                Rect(left_x + xmiddle + xright + shift, top_y + shift,
                     ar.width * scale, ar.height * scale),
            )
            renderer.text(
                gui.font, self.text,
                Vector2(left_x + text_width / 2 + shift, top_y + text_height / 2 + shift),
                gui.font_size * scale, WHITE,
            )
        else:
            if self.shadowed:
                renderer.sprite(
                    self.inactive_left,
                    Rect(left_x + offset, top_y + offset, il.width, il.height), BLACK,
                )
                renderer.sprite(
                    self.inactive_center,
                    Rect(left_x + xmiddle + offset, top_y + offset, center_width, ic.height),
                    BLACK,
                )
                renderer.sprite(
                    self.inactive_right,
                    Rect(left_x + xmiddle + xright + offset, top_y + offset,
                         ir.width, ir.height),
                    BLACK,
                )
            renderer.sprite(
                self.inactive_left,
                Rect(left_x, top_y, il.width * scale, il.height * scale),
            )
            renderer.sprite(
                self.inactive_center,
                Rect(left_x + xmiddle, top_y, center_width * scale, ic.height * scale),
            )
            renderer.sprite(
                self.inactive_right,
                Rect(left_x + xmiddle + xright, top_y, ir.width * scale, ir.height * scale),
            )
            renderer.text(
                gui.font, self.text,
                Vector2(left_x + text_width / 2, top_y + text_height / 2),
                gui.font_size * scale, WHITE,
            )

    def update(self) -> None:
        self.clicked = False
        self.hovered = False
        self.down = False

        if not self.gui.accepting_input or not (self.visible and self.active):
            return

        x = self.gui.pos.x + self.pos.x
        y = self.gui.pos.y + self.pos.y
        scale = self.gui.scale
        state = self.gui.input

        # Stretch buttons react on press, so there is no separate "hot" state while down.
        if state.is_left_down_in_rect(x, y, self.width * scale, self.height * scale):
            self.down = True
            self.gui.active_element = self.id
        elif state.was_left_clicked_in_rect(x, y, self.width, self.height):
            self.clicked = True
            self.gui.active_element = self.id
        elif state.is_mouse_in_rect(x, y, self.width, self.height):
            self.hovered = True

    def value(self) -> int:
        return 0
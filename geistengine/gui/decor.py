"""Non-interactive elements: panels, text areas, sprites and nine-piece boxes."""

from __future__ import annotations

from enum import IntEnum
from typing import ClassVar, Optional, Sequence

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


class Justification(IntEnum):
    LEFT = 0
    CENTERED = 1
    RIGHT = 2


class GuiPanel(GuiElement):
    """A box on the screen, filled or outlined."""

    element_type: ClassVar[Optional[GuiElementType]] = GuiElementType.PANEL

    def __init__(
        self,
        gui: Gui,
        element_id: int,
        x: int,
        y: int,
        width: int,
        height: int,
        *,
        color: Color = WHITE,
        filled: bool = False,
        group: int = 0,
        active: bool = True,
    ) -> None:
        super().__init__(
            gui, element_id, float(x), float(y), width, height,
            group=group, active=active, color=color,
        )
        self.filled = filled

    def update(self) -> None:
        """Panels do not react to input."""

    def draw(self) -> None:
        if not self.visible:
            return
        rect = Rect(
            self.gui.gui_x + int(self.pos.x), self.gui.gui_y + int(self.pos.y),
            int(self.width), int(self.height),
        )
        if self.filled:
            self.gui.renderer.rectangle(rect, self.color)
        else:
            self.gui.renderer.rectangle_lines(rect, self.color)

    def value(self) -> int:
        return 0


class GuiTextArea(GuiElement):
    """Text drawn at a location, left-aligned, centred or right-aligned.

    A width of zero means a single unbounded line. Multi-line paragraph layout
    is not supported: left-aligned text with a width, and centred text wider
    than its area, are not drawn.
    """

    element_type: ClassVar[Optional[GuiElementType]] = GuiElementType.TEXTAREA

    def __init__(
        self,
        gui: Gui,
        element_id: int,
        font: Font,
        text: str,
        x: int,
        y: int,
        width: int = 0,
        height: int = 0,
        *,
        color: Color = WHITE,
        justified: Justification = Justification.LEFT,
        group: int = 0,
        active: bool = True,
        shadowed: bool = False,
    ) -> None:
        scaled_width = width * gui.scale
        super().__init__(
            gui, element_id, float(x) * gui.scale, float(y) * gui.scale,
            scaled_width, int(gui.font_size) if scaled_width == 0 else height,
            group=group, active=active, color=color, shadowed=shadowed, text=text,
        )
        self.font = font
        self.justified = Justification(justified)

    def update(self) -> None:
        """Text areas do not react to input."""

    def draw(self) -> None:
        if not self.active or not self.visible:
            return

        gui = self.gui
        renderer = gui.renderer
        x = gui.pos.x + self.pos.x
        y = gui.pos.y + self.pos.y
        size = self.font.base_size

        if self.justified is Justification.RIGHT:
            if self.shadowed:
                renderer.text_right(
                    self.font, self.text, Vector2(x + self.width + 2, y + 2), size, BLACK
                )
            renderer.text_right(self.font, self.text, Vector2(x + self.width, y), size, self.color)
        elif self.justified is Justification.CENTERED:
            if self.font.measure(self.text, gui.font_size, 1).x < self.width:
                if self.shadowed:
                    renderer.text_centered(
                        self.font, self.text,
                        Vector2(int(x + 2 + self.width / 2), int(y + 2)), size, BLACK,
                    )
                renderer.text_centered(
                    self.font, self.text,
                    Vector2(int(x + self.width / 2), int(y)), size, self.color,
                )
        elif self.width == 0:
            if self.shadowed:
                renderer.text(gui.font, self.text, Vector2(x + 2, y + 2), size, BLACK)
            renderer.text(gui.font, self.text, Vector2(x, y), size, self.color)

    def value(self) -> int:
        return 0


class GuiSprite(GuiElement):
    """A single sprite placed on the GUI."""

    element_type: ClassVar[Optional[GuiElementType]] = GuiElementType.SPRITE

    def __init__(
        self,
        gui: Gui,
        element_id: int,
        x: int,
        y: int,
        sprite: Optional[Sprite],
        *,
        scale_x: float = 1.0,
        scale_y: float = 1.0,
        color: Color = WHITE,
        group: int = 0,
        active: bool = True,
    ) -> None:
        if sprite is None:
            raise ValueError("a sprite element needs a sprite")
        super().__init__(
            gui, element_id, float(x), float(y),
            sprite.source_rect.width, sprite.source_rect.height,
            group=group, active=active, color=color,
        )
        self.sprite: Optional[Sprite] = sprite
        self.scale_x = scale_x
        self.scale_y = scale_y

    def update(self) -> None:
        """Sprites do not react to input."""

    def draw(self) -> None:
        if self.sprite is None or not self.active or not self.visible:
            return
        gui = self.gui
        dest = Rect(
            gui.gui_x + int(self.pos.x), gui.gui_y + int(self.pos.y),
            self.scale_x * gui.scale, self.scale_y * gui.scale,
        )
        gui.renderer.sprite(self.sprite, dest, self.color)

    def value(self) -> int:
        return 0


class GuiOctagonBox(GuiElement):
    """A resizable box built from four corners, four edges and a centre.

    ``borders`` holds nine sprites in reading order: top left, top, top right,
    left, centre, right, bottom left, bottom, bottom right. Corners keep their
    size; edges and centre stretch to fill the box.
    """

    element_type: ClassVar[Optional[GuiElementType]] = GuiElementType.OCTAGONBOX

    def __init__(
        self,
        gui: Gui,
        element_id: int,
        x: int,
        y: int,
        width: int,
        height: int,
        borders: Sequence[Sprite],
        *,
        color: Color = WHITE,
        group: int = 0,
        active: bool = True,
    ) -> None:
        if len(borders) != 9:
            raise ValueError(f"an octagon box needs 9 border sprites, got {len(borders)}")
        super().__init__(
            gui, element_id, float(x) * gui.scale, float(y) * gui.scale,
            width * gui.scale, height * gui.scale,
            group=group, active=active, color=color,
        )
        self.sprites = list(borders)

    def update(self) -> None:
        """Octagon boxes do not react to input."""

    def draw(self) -> None:
        if not self.active or not self.visible:
            return

        gui = self.gui
        sprites = self.sprites
        rects = [sprite.source_rect for sprite in sprites]
        x = gui.pos.x + self.pos.x
        y = gui.pos.y + self.pos.y

        pad = 1 if gui.scale < 1 else 0
        corner_w = rects[0].width + pad
        corner_h = rects[0].height + pad
        runner_w = self.width - corner_w * 2
        runner_h = self.height - corner_h * 2
        right_x = x + corner_w + runner_w
        bottom_y = y + corner_h + runner_h

        placements = [
            (4, Rect(x + corner_w, y + corner_h, runner_w, runner_h)),
            (1, Rect(x + corner_w, y, runner_w, rects[1].height)),
            (7, Rect(x + corner_w, bottom_y, runner_w, rects[7].height)),
            (3, Rect(x, y + corner_h, rects[3].width, runner_h)),
            (5, Rect(right_x, y + corner_h, rects[5].height, runner_h)),
            (0, Rect(x, y, rects[0].width, rects[0].height)),
            (2, Rect(right_x, y, rects[2].width, rects[2].height)),
            (6, Rect(x, bottom_y, rects[6].width, rects[6].width)),
            (8, Rect(right_x, bottom_y, gui.scale * rects[8].width, rects[8].width)),
        ]
        for index, dest in placements:
            gui.renderer.sprite(sprites[index], dest, self.color)

    def value(self) -> int:
        return 0
"""Shared types for the GUI: geometry, fonts, input, drawing and the element base."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, ClassVar, Optional


@dataclass(frozen=True)
class Color:
    r: int
    g: int
    b: int
    a: int = 255


WHITE = Color(255, 255, 255, 255)
BLACK = Color(0, 0, 0, 255)


@dataclass
class Vector2:
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    def contains(self, x: float, y: float) -> bool:
        """True if the point lies inside; the right and bottom edges are excluded."""
        return self.x <= x < self.x + self.width and self.y <= y < self.y + self.height


@dataclass(frozen=True)
class Sprite:
    """A named region of a texture sheet."""

    name: str
    source_rect: Rect


@dataclass(frozen=True)
class Font:
    """A monospaced font: each glyph advances ``glyph_width`` times the size."""

    base_size: int = 16
    glyph_width: float = 0.5

    def measure(self, text: str, size: float, spacing: float = 1.0) -> Vector2:
        """Width of the widest line and total height of ``text`` at ``size``."""
        lines = text.split("\n")
        advance = size * self.glyph_width
        widest = max(
            (len(line) * advance + (len(line) - 1) * spacing if line else 0.0) for line in lines
        )
        return Vector2(widest, size * len(lines))


class Key(IntEnum):
    SPACE = 32
    A = 65
    Z = 90
    ENTER = 257
    BACKSPACE = 259
    F9 = 298
    F12 = 301
    KP_ENTER = 335


@dataclass
class InputState:
    """Mouse and keyboard state for the current frame."""

    mouse: Vector2 = field(default_factory=Vector2)
    left_down: bool = False
    left_clicked: bool = False
    left_dragging: bool = False
    pressed_keys: set[int] = field(default_factory=set)
    key_queue: list[int] = field(default_factory=list)

    def is_mouse_in_rect(self, x: float, y: float, width: float, height: float) -> bool:
        return Rect(x, y, width, height).contains(self.mouse.x, self.mouse.y)

    def is_left_down_in_rect(self, x: float, y: float, width: float, height: float) -> bool:
        return self.left_down and self.is_mouse_in_rect(x, y, width, height)

    def was_left_clicked_in_rect(self, x: float, y: float, width: float, height: float) -> bool:
        """True if the left button was released over the rectangle this frame."""
        return self.left_clicked and self.is_mouse_in_rect(x, y, width, height)

    def is_key_pressed(self, key: int) -> bool:
        return key in self.pressed_keys


class Renderer:
    """Drawing backend that records each draw call as a tuple in ``commands``.

    Text calls are normalised to ``("text", font, text, top_left, size, color)``.
    """

    def __init__(self) -> None:
        self.commands: list[tuple[Any, ...]] = []

    def rectangle(self, rect: Rect, color: Color) -> None:
        self.commands.append(("rectangle", rect, color))

    def rectangle_lines(self, rect: Rect, color: Color) -> None:
        self.commands.append(("rectangle_lines", rect, color))

    def rounded_rectangle(self, rect: Rect, roundness: float, color: Color) -> None:
        self.commands.append(("rounded_rectangle", rect, roundness, color))

    def rounded_rectangle_lines(
        self, rect: Rect, roundness: float, thickness: float, color: Color
    ) -> None:
        self.commands.append(("rounded_rectangle_lines", rect, roundness, thickness, color))

    def text(self, font: Font, text: str, position: Vector2, size: float, color: Color) -> None:
        self.commands.append(("text", font, text, Vector2(position.x, position.y), size, color))

    def text_centered(
        self, font: Font, text: str, position: Vector2, size: float, color: Color
    ) -> None:
        """Draw ``text`` with its centre at ``position``."""
        dims = font.measure(text, size, 1)
        self.text(
            font, text, Vector2(position.x - dims.x / 2, position.y - dims.y / 2), size, color
        )

    def text_right(
        self, font: Font, text: str, position: Vector2, size: float, color: Color
    ) -> None:
        """Draw ``text`` so that it ends at ``position.x``."""
        dims = font.measure(text, size, 1)
        self.text(font, text, Vector2(position.x - dims.x, position.y), size, color)

    def sprite(self, sprite: Sprite, dest: Rect, color: Color = WHITE) -> None:
        self.commands.append(("sprite", sprite, dest, color))


class GuiElementType(IntEnum):
    TEXTBUTTON = 0
    ICONBUTTON = 1
    SCROLLBAR = 2
    RADIOBUTTON = 3
    CHECKBOX = 4
    TEXTINPUT = 5
    PANEL = 6
    TEXTAREA = 7
    SPRITE = 8
    OCTAGONBOX = 9
    STRETCHBUTTON = 10


@dataclass
class Gui:
    """A collection of elements sharing an origin, scale, font, input and renderer."""

    font: Font = field(default_factory=Font)
    font_size: float = 16.0
    scale: float = 1.0
    pos: Vector2 = field(default_factory=Vector2)
    accepting_input: bool = True
    input: InputState = field(default_factory=InputState)
    renderer: Renderer = field(default_factory=Renderer)
    time: float = 0.0
    active_element: int = -1
    last_element: int = -1
    elements: dict[int, GuiElement] = field(default_factory=dict)

    @property
    def gui_x(self) -> int:
        return int(self.pos.x)

    @property
    def gui_y(self) -> int:
        return int(self.pos.y)

    def add(self, element: GuiElement) -> GuiElement:
        """Register ``element`` under its id; ids must be unique."""
        if element.id in self.elements:
            raise ValueError(f"duplicate GUI element id {element.id}")
        element.gui = self
        self.elements[element.id] = element
        return element


class GuiElement(ABC):
    """Base of every GUI element."""

    element_type: ClassVar[Optional[GuiElementType]] = None

    def __init__(
        self,
        gui: Gui,
        element_id: int,
        x: float = 0.0,
        y: float = 0.0,
        width: float = 0.0,
        height: float = 0.0,
        *,
        group: int = 0,
        active: bool = True,
        visible: bool = True,
        color: Color = WHITE,
        shadowed: bool = False,
        text: str = "",
    ) -> None:
        self.gui = gui
        self.id = element_id
        self.pos = Vector2(float(x), float(y))
        self.width = float(width)
        self.height = float(height)
        self.group = group
        self.active = active
        self.visible = visible
        self.color = color
        self.shadowed = shadowed
        self.text = text
        self.hovered = False
        self.down = False
        self.clicked = False
        self.selected = False

    @abstractmethod
    def update(self) -> None:
        """Process this frame's input."""

    @abstractmethod
    def draw(self) -> None:
        """Emit draw calls to the parent GUI's renderer."""

    @abstractmethod
    def value(self) -> int:
        """The element's current value."""

    def display_text(self) -> str:
        return self.text

    def set_pos(self, x: float, y: float) -> None:
        self.pos.x = float(x)
        self.pos.y = float(y)

    def set_size(self, width: float, height: float) -> None:
        self.width = float(width)
        self.height = float(height)
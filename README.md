# geistengine

A small, dependency-free core for games:

- `geistengine.config` – a line-oriented `key = value` configuration format
  that keeps the file's line order (comments and blank lines included) when
  it is saved back.
- `geistengine.units` – `Unit2D` and `Unit3D`, base classes for things that
  have a position, can die, and carry their own `Config`.
- `geistengine.engine` – `Engine`, which loads the master config, starts and
  stops a list of subsystems, and drives update/draw through a `Platform`.
- `geistengine.gui` – immediate-mode GUI elements that read input from an
  `InputState` and draw through a `Renderer`:
  - `gui.base`: `Gui`, `GuiElement`, `Color`, `Vector2`, `Rect`, `Sprite`,
    `Font`, `Key`, `InputState`, `Renderer`, `GuiElementType`
  - `gui.buttons`: `GuiTextButton`, `GuiIconButton`, `GuiStretchButton`
  - `gui.scrollbar`: `GuiScrollBar`
  - `gui.textinput`: `GuiTextInput`
  - `gui.toggles`: `GuiCheckBox`, `GuiRadioButton`
  - `gui.decor`: `GuiPanel`, `GuiTextArea` (with `Justification`),
    `GuiSprite`, `GuiOctagonBox`

## Installing

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Configuration files

Each line holding an `=` is a setting: the key is the text up to the
character before the `=`, the value the text from two characters after it.
A value that begins with an unsigned integer is stored as a number (parsed as
a 32-bit float), anything else as text. Lines without `=` are kept verbatim.

```python
from geistengine.config import Config

config = Config()
config.load("engine.cfg")          # raises OSError if the file cannot be opened
width = config.get_number("h_res")
config.set_string("title", "My Game")
config.save()                      # writes back to engine.cfg
config.save("copy.cfg")            # or to another file, which becomes the default
```

`get_number` returns `0.0` and `get_string` returns `""` for a missing key or
a key of the other type. Setting a new key, or changing a key's type, appends
it to the end of the saved file.

## Engine

```python
from geistengine.engine import Engine

engine = Engine(subsystems=[my_resources, my_states])
engine.init("engine.cfg")
while not engine.done:
    engine.update()
    engine.draw()
engine.shutdown()
```

A subsystem is any object with `init(configfile)`, `shutdown()`, `update()`
and `draw()`. `init` reads `h_res`, `v_res`, `h_renderres`, `v_renderres` and
`full_screen` from the config and asks the platform for a window, a 60 FPS
target and a hidden cursor. Each `update` counts `game_updates`, sets `done`
when the platform reports the window should close, takes a screenshot on
`Key.F12` (named `screenshot_YYYY-MM-DD_HH_MM_SS.png` in UTC, see
`screenshot_filename`) and toggles `debug_drawing` on `Key.F9`. Subsystems are
shut down in reverse order.

## GUI elements

Elements belong to a `Gui`, which holds the shared font, font size, scale,
position, the current `InputState`, the `Renderer` and the active element id.
Each frame, fill in the input state, call `update()` then `draw()` on the
elements, and read `value()`:

```python
from geistengine.gui.base import Font, Gui, Vector2
from geistengine.gui.buttons import GuiTextButton

gui = Gui()
ok = gui.add(GuiTextButton(gui, 1, 10, 10, "OK", Font()))

gui.input.mouse = Vector2(15, 15)
gui.input.left_clicked = True
ok.update()
assert ok.value() == 1
```

Buttons report `1` on the frame they are clicked; a scroll bar reports its
spur position in `0..value_range`; check boxes and radio buttons report
whether they are selected (clicking a radio button deselects the others in
its group); a text input collects keys from `InputState.key_queue` while it
has focus.

## What it does not do

There is no graphics or window back end. `Platform` and `Renderer` only
record what is asked of them (`Platform.screenshots`, `Renderer.commands`,
and so on); to show anything, subclass them and draw with a library of your
choice. `Font` measures text as a simple monospaced font. `GuiTextArea` does
not lay out multi-line paragraphs: left-aligned text with a width, and
centred text wider than its area, are not drawn. There are no resource
managers or game states built in; supply them as engine subsystems.
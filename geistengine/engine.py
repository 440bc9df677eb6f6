"""The master subsystem that owns configuration and drives the frame loop."""

from __future__ import annotations

import logging
import os
from datetime import datetime, timezone
from typing import Iterable, Optional, Protocol

from .config import Config
from .gui.base import Key

_log = logging.getLogger(__name__)

WINDOW_TITLE = "Ultima VII: Revisited"
TARGET_FPS = 60


class _Subsystem(Protocol):
    def init(self, configfile: str) -> None: ...

    def shutdown(self) -> None: ...

    def update(self) -> None: ...

    def draw(self) -> None: ...


class Platform:
    """Headless window and input backend that records what the engine asks of it."""

    def __init__(self) -> None:
        self.window_open = False
        self.width = 0
        self.height = 0
        self.title = ""
        self.fullscreen = False
        self.target_fps = 0
        self.cursor_hidden = False
        self.close_requested = False
        self.pressed_keys: set[int] = set()
        self.screenshots: list[str] = []

    def init_window(self, width: int, height: int, title: str) -> None:
        self.width = width
        self.height = height
        self.title = title
        self.window_open = True

    def toggle_fullscreen(self) -> None:
        self.fullscreen = not self.fullscreen

    def set_target_fps(self, fps: int) -> None:
        self.target_fps = fps

    def hide_cursor(self) -> None:
        self.cursor_hidden = True

    def window_should_close(self) -> bool:
        return self.close_requested

    def is_key_pressed(self, key: int) -> bool:
        return key in self.pressed_keys

    def take_screenshot(self, filename: str) -> None:
        self.screenshots.append(filename)


def screenshot_filename(when: datetime) -> str:
    """Screenshot file name for the moment ``when``, expressed in UTC."""
    if when.tzinfo is not None:
        when = when.astimezone(timezone.utc)
    return when.strftime("screenshot_%Y-%m-%d_%H_%M_%S.png")


class Engine:
    """Initialises, updates, draws and shuts down the engine's subsystems."""

    def __init__(
        self,
        platform: Optional[Platform] = None,
        subsystems: Iterable[_Subsystem] = (),
    ) -> None:
        self.platform = platform if platform is not None else Platform()
        self.subsystems = list(subsystems)
        self.config = Config()
        self.done = False
        self.config_filename = ""
        self.game_updates = 0
        self.current_frame = 0
        self.debug_drawing = False
        self.render_width = 0.0
        self.render_height = 0.0
        self.screen_width = 0.0
        self.screen_height = 0.0

    def init(self, configfile: "str | os.PathLike[str]" = "") -> None:
        """Load the engine configuration, start subsystems and open the window."""
        _log.info("Starting Engine.init()")
        self.done = False
        self.config_filename = os.fspath(configfile)
        self.config = Config()
        try:
            self.config.load(self.config_filename)
        except OSError:
            pass  # Config.load has already logged the failure.

        for subsystem in self.subsystems:
            subsystem.init(self.config_filename)

        self.game_updates = 0
        self.current_frame = 0
        self.debug_drawing = False

        self.render_width = self.config.get_number("h_renderres")
        self.render_height = self.config.get_number("v_renderres")
        self.screen_width = self.config.get_number("h_res")
        self.screen_height = self.config.get_number("v_res")

        self.platform.init_window(int(self.screen_width), int(self.screen_height), WINDOW_TITLE)
        if self.config.get_number("full_screen") == 1:
            self.platform.toggle_fullscreen()
        self.platform.set_target_fps(TARGET_FPS)
        self.platform.hide_cursor()
        _log.info("Done with Engine.init()")

    def shutdown(self) -> None:
        """Shut subsystems down in the reverse of their start order."""
        for subsystem in reversed(self.subsystems):
            subsystem.shutdown()

    def update(self) -> None:
        """Run one update tick and handle the engine's own hotkeys."""
        for subsystem in self.subsystems:
            subsystem.update()

        if self.platform.window_should_close():
            self.done = True
        if self.platform.is_key_pressed(Key.F12):
            self.capture_screenshot()
        if self.platform.is_key_pressed(Key.F9):
            self.debug_drawing = not self.debug_drawing

        self.game_updates += 1

    def draw(self) -> None:
        for subsystem in self.subsystems:
            subsystem.draw()

    def capture_screenshot(self) -> str:
        """Take a screenshot named after the current UTC time and return its name."""
        filename = screenshot_filename(datetime.now(timezone.utc))
        self.platform.take_screenshot(filename)
        return filename
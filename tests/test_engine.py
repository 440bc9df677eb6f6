from datetime import datetime, timedelta, timezone

import pytest

from geistengine.engine import TARGET_FPS, WINDOW_TITLE, Engine, Platform, screenshot_filename
from geistengine.gui.base import Key


class Recorder:
    def __init__(self, name, log):
        self.name = name
        self.log = log

    def init(self, configfile):
        self.log.append((self.name, "init", configfile))

    def shutdown(self):
        self.log.append((self.name, "shutdown"))

    def update(self):
        self.log.append((self.name, "update"))

    def draw(self):
        self.log.append((self.name, "draw"))


@pytest.fixture
def engine_cfg(tmp_path):
    path = tmp_path / "engine.cfg"
    path.write_text(
        "h_res = 800\nv_res = 600\nh_renderres = 640\nv_renderres = 360\nfull_screen = 1\n"
    )
    return path


def test_init_opens_window_from_config(engine_cfg):
    platform = Platform()
    engine = Engine(platform)
    engine.init(engine_cfg)
    assert (platform.width, platform.height) == (800, 600)
    assert platform.title == WINDOW_TITLE == "Ultima VII: Revisited"
    assert platform.fullscreen is True
    assert platform.target_fps == TARGET_FPS == 60
    assert platform.cursor_hidden is True
    assert (engine.render_width, engine.render_height) == (640.0, 360.0)
    assert (engine.screen_width, engine.screen_height) == (800.0, 600.0)
    assert engine.done is False


def test_init_without_fullscreen_flag(tmp_path):
    path = tmp_path / "e.cfg"
    path.write_text("h_res = 320\nv_res = 200")
    platform = Platform()
    Engine(platform).init(path)
    assert platform.fullscreen is False
    assert platform.window_open is True


def test_init_survives_missing_config(tmp_path):
    platform = Platform()
    engine = Engine(platform)
    engine.init(tmp_path / "missing.cfg")
    assert (platform.width, platform.height) == (0, 0)
    assert engine.config.get_number("h_res") == 0.0


def test_subsystem_order(engine_cfg):
    log = []
    engine = Engine(Platform(), [Recorder("resources", log), Recorder("states", log)])
    engine.init(engine_cfg)
    engine.update()
    engine.draw()
    engine.shutdown()
    assert log == [
        ("resources", "init", str(engine_cfg)),
        ("states", "init", str(engine_cfg)),
        ("resources", "update"),
        ("states", "update"),
        ("resources", "draw"),
        ("states", "draw"),
        ("states", "shutdown"),
        ("resources", "shutdown"),
    ]


def test_update_counts_and_detects_close(engine_cfg):
    platform = Platform()
    engine = Engine(platform)
    engine.init(engine_cfg)
    engine.update()
    engine.update()
    assert engine.game_updates == 2
    assert engine.done is False
    platform.close_requested = True
    engine.update()
    assert engine.done is True


def test_f9_toggles_debug_drawing(engine_cfg):
    platform = Platform()
    engine = Engine(platform)
    engine.init(engine_cfg)
    platform.pressed_keys.add(Key.F9)
    engine.update()
    assert engine.debug_drawing is True
    engine.update()
    assert engine.debug_drawing is False


def test_f12_takes_screenshot(engine_cfg):
    platform = Platform()
    engine = Engine(platform)
    engine.init(engine_cfg)
    platform.pressed_keys.add(Key.F12)
    engine.update()
    assert len(platform.screenshots) == 1
    name = platform.screenshots[0]
    assert name.startswith("screenshot_")
    assert name.endswith(".png")


def test_capture_screenshot_returns_recorded_name():
    platform = Platform()
    engine = Engine(platform)
    name = engine.capture_screenshot()
    assert platform.screenshots == [name]


def test_screenshot_filename_format():
    when = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    assert screenshot_filename(when) == "screenshot_2024-01-02_03_04_05.png"


def test_screenshot_filename_uses_utc():
    utc = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    shifted = utc.astimezone(timezone(timedelta(hours=5)))
    assert screenshot_filename(shifted) == screenshot_filename(utc)
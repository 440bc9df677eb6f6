"""Base classes for game units moving through 2D or 3D space."""

from __future__ import annotations

import os
from typing import Callable, Optional

from .config import Config

ConfigLoader = Callable[[str], Config]


def _load_config(path: str) -> Config:
    config = Config()
    if path:
        config.load(path)
    return config


class Unit2D:
    """A unit with a 2D position and a lifespan, meant to be subclassed."""

    def __init__(self, config_loader: Optional[ConfigLoader] = None) -> None:
        self._config_loader = config_loader or _load_config
        self.pos: tuple[float, float] = (0.0, 0.0)
        self.is_dead = False
        self.config: Optional[Config] = None
        self.age = 0
        self.frames_drawn = 0

    def init(self, configfile: "str | os.PathLike[str]" = "") -> None:
        """Attach the unit's configuration, loaded from ``configfile``."""
        self.config = self._config_loader(os.fspath(configfile))

    def update(self) -> None:
        """Advance the unit by one frame, counting the frames it has lived."""
        self.age += 1

    def draw(self) -> None:
        """Render the unit, counting the frames it has been drawn."""
        self.frames_drawn += 1

    def shutdown(self) -> None:
        """Release the unit's configuration."""
        self.config = None


class Unit3D:
    """A unit with a 3D position and a lifespan, meant to be subclassed."""

    def __init__(self, config_loader: Optional[ConfigLoader] = None) -> None:
        self._config_loader = config_loader or _load_config
        self.pos: tuple[float, float, float] = (0.0, 0.0, 0.0)
        self.is_dead = False
        self.config: Optional[Config] = None
        self.age = 0
        self.frames_drawn = 0

    def init(self, configfile: "str | os.PathLike[str]" = "") -> None:
        """Attach the unit's configuration, loaded from ``configfile``."""
        self.config = self._config_loader(os.fspath(configfile))

    def update(self) -> None:
        """Advance the unit by one frame, counting the frames it has lived."""
        self.age += 1

    def draw(self) -> None:
        """Render the unit, counting the frames it has been drawn."""
        self.frames_drawn += 1

    def shutdown(self) -> None:
        """Release the unit's configuration."""
        self.config = None
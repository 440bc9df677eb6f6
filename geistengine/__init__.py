"""Game-engine core: configuration files, base units, an engine loop and GUI elements."""

__version__ = "0.1.0"
"""Line-oriented ``key = value`` configuration files."""

from __future__ import annotations

import logging
import math
import os
import re
import struct
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Union

_log = logging.getLogger(__name__)

_UINT_MAX = 0xFFFFFFFF
_INTEGER_PREFIX = re.compile(r"\s*[+-]?(\d+)")
_HEX_PREFIX = re.compile(
    r"\s*[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?\d+)?"
)
_FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

PathType = Union[str, "os.PathLike[str]"]


class DataType(IntEnum):
    """Kind of value held by a configuration entry."""

    STRING = 0
    NUMBER = 1


@dataclass
class ConfigEntry:
    """A single configuration value."""

    data_type: DataType
    number: float = 0.0
    text: str = ""


def _to_float32(value: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _leading_float(text: str) -> float:
    """Parse the longest numeric prefix of ``text``, or 0.0 if there is none."""
    hex_match = _HEX_PREFIX.match(text)
    if hex_match:
        return float.fromhex(hex_match.group().strip())
    match = _FLOAT_PREFIX.match(text)
    return float(match.group()) if match else 0.0


def _looks_numeric(text: str) -> bool:
    """True when ``text`` begins with an unsigned 32-bit integer."""
    match = _INTEGER_PREFIX.match(text)
    return bool(match) and int(match.group(1)) <= _UINT_MAX


def _format_number(value: float) -> str:
    return f"{value:g}"


class Config:
    """Ordered ``key = value`` configuration that round-trips through a file.

    Lines without an ``=`` are kept verbatim so comments and blank lines
    survive a load/save cycle.
    """

    def __init__(self) -> None:
        self.filename = ""
        self._entries: dict[str, ConfigEntry] = {}
        self._order: list[str] = []

    def load(self, filename: PathType) -> None:
        """Read entries from ``filename``; raises ``OSError`` if it cannot be opened."""
        path = os.fspath(filename)
        try:
            with open(path, encoding="utf-8", newline="") as stream:
                content = stream.read()
        except OSError:
            _log.error("Could not open %s", path)
            raise

        self.filename = path
        self._entries.clear()

        for raw in content.split("\n"):
            line = raw[:-1] if raw.endswith("\r") else raw
            idx = line.find("=")
            if idx < 0:
                self._order.append(line)
                continue

            key = line[: idx - 1] if idx > 0 else line
            value = line[idx + 2 :]
            if _looks_numeric(value):
                entry = ConfigEntry(DataType.NUMBER, number=_to_float32(_leading_float(value)))
            else:
                entry = ConfigEntry(DataType.STRING, text=value)
            self._entries.setdefault(key, entry)
            self._order.append(key)

    def save(self, filename: Optional[PathType] = None) -> None:
        """Write the configuration, to ``filename`` if given, else to the last file used."""
        if filename is not None:
            self.filename = os.fspath(filename)

        lines = []
        for node in self._order:
            entry = self._entries.get(node)
            if entry is None:
                lines.append(node)
            elif entry.data_type is DataType.NUMBER:
                lines.append(f"{node} = {_format_number(entry.number)}")
            else:
                lines.append(f"{node} = {entry.text}")

        with open(self.filename, "w", encoding="utf-8", newline="") as stream:
            stream.write("\n".join(lines))

    def get_number(self, node: str) -> float:
        """Numeric value of ``node``, or 0.0 if it is missing or not a number."""
        entry = self._entries.get(node)
        if entry is not None and entry.data_type is DataType.NUMBER:
            return entry.number
        return 0.0

    def get_string(self, node: str) -> str:
        """String value of ``node``, or an empty string if it is missing or a number."""
        entry = self._entries.get(node)
        if entry is not None and entry.data_type is DataType.STRING:
            return entry.text
        return ""

    def set_number(self, node: str, number: float) -> None:
        """Store a number; a new or retyped key is appended to the output order."""
        entry = self._entries.get(node)
        if entry is not None and entry.data_type is DataType.NUMBER:
            entry.number = _to_float32(number)
        else:
            self._entries[node] = ConfigEntry(DataType.NUMBER, number=_to_float32(number))
            self._order.append(node)

    def set_string(self, node: str, value: str) -> None:
        """Store a string; a new or retyped key is appended to the output order."""
        entry = self._entries.get(node)
        if entry is not None and entry.data_type is DataType.STRING:
            entry.text = value
        else:
            self._entries[node] = ConfigEntry(DataType.STRING, text=value)
            self._order.append(node)
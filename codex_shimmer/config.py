"""
Animation and appearance parameters built from key -> JSON literal entries
"""
import json
import math
import os
import re
from collections import namedtuple
from dataclasses import dataclass

from PyQt6.QtGui import QColor

from codex_shimmer.logger import get_logger

log = get_logger(__name__)

Rgb = namedtuple("Rgb", ["red", "green", "blue"])

DEFAULT_PERIOD_MS = 1600.0
DEFAULT_PAUSE_MS = 500.0
DEFAULT_WIDTH_CHARS = 4.0
DEFAULT_CYCLES = 1.0
DEFAULT_TICK_MS = 33
DEFAULT_HIGHLIGHT_ALPHA = 0.35
DEFAULT_BASE_ALPHA = 1.0
DEFAULT_BASE_COLOR = "#C7D3FF"
DEFAULT_HIGHLIGHT_COLOR = "#FFFFFF"

MIN_PERIOD_MS = 200.0
WIDTH_CHARS_RANGE = (1.0, 20.0)
CYCLES_RANGE = (0.1, 6.0)
TICK_MS_RANGE = (5, 1000)

_RGB_FUNC = re.compile(r"^rgba?\(\s*([^)]*)\)$", re.IGNORECASE)


def default_cache_path():
    return os.path.join(os.path.expanduser("~"), ".cache", "codex-shimmer", "latest.json")


def expand_user_path(path):
    """A leading ~ is always the current user's home, "~name" is not a lookup"""
    if path.startswith("~"):
        return os.path.join(os.path.expanduser("~"), path[1:].lstrip("/"))
    return path


def clamp(value, low, high):
    return max(low, min(high, value))


def parse_color(value):
    """Parses a color string to Rgb, or returns None if it is not a color"""
    if not isinstance(value, str):
        return None
    value = value.strip()
    match = _RGB_FUNC.match(value)
    if match:
        return _parse_rgb_function(match.group(1))
    color = QColor(value)
    if not color.isValid():
        return None
    return Rgb(color.red(), color.green(), color.blue())


def _parse_rgb_function(args):
    parts = [p.strip() for p in args.split(",")]
    if len(parts) not in (3, 4):
        return None
    channels = []
    for part in parts[:3]:
        try:
            if part.endswith("%"):
                channel = float(part[:-1]) * 255.0 / 100.0
            else:
                channel = float(part)
        except ValueError:
            return None
        channels.append(int(round(clamp(channel, 0.0, 255.0))))
    # alpha is carried by the separate *_alpha fields
    return Rgb(*channels)


@dataclass(frozen=True)
class ShimmerConfig:
    """Validated settings; every field is already inside its clamp range"""
    cache_path: str
    period_ms: float = DEFAULT_PERIOD_MS
    pause_ms: float = DEFAULT_PAUSE_MS
    width_chars: float = DEFAULT_WIDTH_CHARS
    cycles: float = DEFAULT_CYCLES
    tick_ms: int = DEFAULT_TICK_MS
    highlight_alpha: float = DEFAULT_HIGHLIGHT_ALPHA
    base_alpha: float = DEFAULT_BASE_ALPHA
    base_color: Rgb = parse_color(DEFAULT_BASE_COLOR)
    highlight_color: Rgb = parse_color(DEFAULT_HIGHLIGHT_COLOR)

    def __post_init__(self):
        # frozen dataclass: clamps go through object.__setattr__
        object.__setattr__(self, "period_ms", max(float(self.period_ms), MIN_PERIOD_MS))
        object.__setattr__(self, "pause_ms", max(float(self.pause_ms), 0.0))
        object.__setattr__(self, "width_chars", clamp(float(self.width_chars), *WIDTH_CHARS_RANGE))
        object.__setattr__(self, "cycles", clamp(float(self.cycles), *CYCLES_RANGE))
        object.__setattr__(self, "tick_ms", int(clamp(int(self.tick_ms), *TICK_MS_RANGE)))
        object.__setattr__(self, "highlight_alpha", clamp(float(self.highlight_alpha), 0.0, 1.0))
        object.__setattr__(self, "base_alpha", clamp(float(self.base_alpha), 0.0, 1.0))

    @property
    def total_cycle_ms(self):
        return self.period_ms + self.pause_ms


def _parse_literal(key, raw):
    """Decodes one config value; a broken literal logs and yields None"""
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except (TypeError, ValueError) as e:
        log.warning("failed to parse config value %s=%r: %s", key, raw, e)
        return None


def _is_number(value):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def _number_or(value, fallback):
    return float(value) if _is_number(value) else fallback


def _uint_or(value, fallback):
    if not _is_number(value):
        return fallback
    return max(int(value), 0)


def _color_or(key, value, fallback):
    if not isinstance(value, str):
        return fallback
    color = parse_color(value)
    if color is None:
        log.warning("ignoring unparseable color %s=%r", key, value)
        return fallback
    return color


def parse_config(entries=None):
    """
    Builds a ShimmerConfig from a mapping of key -> JSON literal string.

    Unknown keys are ignored and bad values fall back to the defaults, so
    this never raises.
    """
    entries = entries or {}

    def lookup(key):
        return _parse_literal(key, entries.get(key)) if key in entries else None

    cache_path = None
    value = lookup("cache_path")
    if isinstance(value, str) and value:
        cache_path = expand_user_path(value)
    if not cache_path:
        cache_path = default_cache_path()

    if "width_chars" in entries:
        width_value = lookup("width_chars")
    else:
        width_value = lookup("width")

    return ShimmerConfig(
        cache_path=cache_path,
        period_ms=_number_or(lookup("period_ms"), DEFAULT_PERIOD_MS),
        pause_ms=_number_or(lookup("pause_ms"), DEFAULT_PAUSE_MS),
        width_chars=_number_or(width_value, DEFAULT_WIDTH_CHARS),
        cycles=_number_or(lookup("cycles"), DEFAULT_CYCLES),
        tick_ms=_uint_or(lookup("tick_ms"), DEFAULT_TICK_MS),
        highlight_alpha=_number_or(lookup("highlight_alpha"), DEFAULT_HIGHLIGHT_ALPHA),
        base_alpha=_number_or(lookup("base_alpha"), DEFAULT_BASE_ALPHA),
        base_color=_color_or("base_color", lookup("base_color"), parse_color(DEFAULT_BASE_COLOR)),
        highlight_color=_color_or(
            "highlight_color", lookup("highlight_color"), parse_color(DEFAULT_HIGHLIGHT_COLOR)
        ),
    )

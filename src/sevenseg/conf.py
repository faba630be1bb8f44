"""Rendering defaults and config persistence for sevenseg.

Config is stored at ~/.config/sevenseg/config.json (XDG-compliant).

Usage:
    from sevenseg.conf import Settings

    settings = Settings()
    settings.color          # RGBA tuple for lit segments
    settings.skew           # Skew (none / traditional / custom)
    settings.height         # default image height in pixels
    settings.aspect_ratio   # width/height of one character cell
    settings.background     # RGBA background for rendered images

    # Low-level config access
    from sevenseg.conf import load_config, save_config
"""
from __future__ import annotations

import json
import logging
import math
import os

from .display import DEFAULT_COLOR, Color, Skew, color_to_hex, parse_color
from .readout import DEFAULT_CHARACTER_ASPECT_RATIO, DEFAULT_HEIGHT

log = logging.getLogger(__name__)

# =========================================================================
# Config file location (XDG-compliant)
# =========================================================================

_XDG_CONFIG = os.environ.get('XDG_CONFIG_HOME', os.path.expanduser('~/.config'))
CONFIG_DIR = os.path.join(_XDG_CONFIG, 'sevenseg')
CONFIG_PATH = os.path.join(CONFIG_DIR, 'config.json')

DEFAULT_BACKGROUND: Color = (0, 0, 0, 255)


# =========================================================================
# Low-level config persistence
# =========================================================================

def load_config() -> dict:
    """Load user config from disk. Returns empty dict on missing/corrupt file."""
    try:
        with open(CONFIG_PATH, 'r') as f:
            config = json.load(f)
    except FileNotFoundError:
        return {}
    except (json.JSONDecodeError, OSError) as e:
        log.warning("Ignoring unreadable config %s: %s", CONFIG_PATH, e)
        return {}
    if not isinstance(config, dict):
        log.warning("Ignoring config %s: expected an object", CONFIG_PATH)
        return {}
    return config


def save_config(config: dict):
    """Save user config to disk."""
    os.makedirs(CONFIG_DIR, exist_ok=True)
    with open(CONFIG_PATH, 'w') as f:
        json.dump(config, f, indent=2)


def _save_value(key: str, value):
    config = load_config()
    config[key] = value
    save_config(config)


# =========================================================================
# Individual preferences
# =========================================================================

def get_saved_color() -> Color:
    """Saved lit color, defaulting to red. Bad values fall back to the default."""
    value = load_config().get('color')
    if value is None:
        return DEFAULT_COLOR
    try:
        return parse_color(value)
    except ValueError:
        log.warning("Invalid color in config: %r", value)
        return DEFAULT_COLOR


def save_color(color):
    """Persist lit color (stored as hex)."""
    _save_value('color', color_to_hex(parse_color(color)))


def get_saved_skew() -> Skew:
    value = load_config().get('skew', 'none')
    try:
        return Skew.parse(value)
    except ValueError:
        log.warning("Invalid skew in config: %r", value)
        return Skew.NONE


def save_skew(skew):
    """Persist skew as a preset name or factor string."""
    _save_value('skew', str(Skew.parse(skew)))


def get_saved_height() -> float:
    value = load_config().get('height', DEFAULT_HEIGHT)
    try:
        height = float(value)
    except (TypeError, ValueError):
        log.warning("Invalid height in config: %r", value)
        return DEFAULT_HEIGHT
    return height if height > 0 else DEFAULT_HEIGHT


def save_height(height: float):
    if height <= 0:
        raise ValueError(f"Height must be positive, got {height}")
    _save_value('height', height)


def get_saved_aspect_ratio() -> float:
    """Saved width/height of one character cell. Bad values fall back to 9:16."""
    value = load_config().get('aspect_ratio', DEFAULT_CHARACTER_ASPECT_RATIO)
    try:
        ratio = float(value)
    except (TypeError, ValueError):
        log.warning("Invalid aspect_ratio in config: %r", value)
        return DEFAULT_CHARACTER_ASPECT_RATIO
    if not math.isfinite(ratio) or ratio <= 0:
        log.warning("Invalid aspect_ratio in config: %r", value)
        return DEFAULT_CHARACTER_ASPECT_RATIO
    return ratio


# =========================================================================
# Settings
# =========================================================================

class Settings:
    """Rendering defaults read from config.

    Values are read once at construction; ``set_*`` methods update the
    instance and persist.
    """

    def __init__(self) -> None:
        config = load_config()
        self.color: Color = get_saved_color()
        self.skew: Skew = get_saved_skew()
        self.height: float = get_saved_height()
        self.aspect_ratio: float = get_saved_aspect_ratio()
        try:
            self.background: Color = parse_color(config.get('background', DEFAULT_BACKGROUND))
        except ValueError:
            log.warning("Invalid background in config: %r", config.get('background'))
            self.background = DEFAULT_BACKGROUND

    def set_color(self, color) -> None:
        self.color = parse_color(color)
        save_color(self.color)

    def set_skew(self, skew) -> None:
        self.skew = Skew.parse(skew)
        save_skew(self.skew)

    def set_height(self, height: float) -> None:
        save_height(height)
        self.height = height

    def as_dict(self) -> dict:
        return {
            'color': color_to_hex(self.color),
            'skew': str(self.skew),
            'height': self.height,
            'aspect_ratio': self.aspect_ratio,
            'background': color_to_hex(self.background),
        }

import json
import logging
import os
from dataclasses import dataclass, fields, replace

from .algorithms import Algorithm
from .bars import bar_count

log = logging.getLogger(__name__)

# ============================================================
# ===================== USER SETTINGS ========================
# ============================================================

WINDOW_WIDTH  = 1100
WINDOW_HEIGHT = 768
CANVAS_WIDTH  = 840
PADDING       = 5
BAR_WIDTH     = 5

# Bars are drawn from [VALUE_LOW, VALUE_HIGH)
VALUE_LOW  = 10
VALUE_HIGH = 700

FPS             = 120
STEPS_PER_FRAME = 1

BACKGROUND_COLOR = (5, 5, 10)
COMPARED_COLOR   = (0, 255, 0)

DEFAULT_ALGORITHM = "bubble"

# JSON file saved next to the launcher, every key optional
SETTINGS_FILE = "stepsorter_settings.json"


@dataclass(frozen=True)
class Settings:
    """Resolved settings for one application run."""
    window_width: int = WINDOW_WIDTH
    window_height: int = WINDOW_HEIGHT
    canvas_width: int = CANVAS_WIDTH
    padding: int = PADDING
    bar_width: int = BAR_WIDTH
    value_low: int = VALUE_LOW
    value_high: int = VALUE_HIGH
    fps: int = FPS
    steps_per_frame: int = STEPS_PER_FRAME
    algorithm: Algorithm = Algorithm.from_key(DEFAULT_ALGORITHM)
    seed: int | None = None

    @property
    def num_bars(self) -> int:
        return bar_count(self.canvas_width, self.padding, self.bar_width)


def _read_settings_json(path: str) -> dict:
    if not os.path.exists(path):
        return {}
    try:
        with open(path) as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        log.warning("Ignoring settings file %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        log.warning("Ignoring settings file %s: top level is not an object", path)
        return {}
    return data


def load_settings(path: str | None = None) -> Settings:
    """
    Build Settings from the defaults above, overridden by a JSON file.

    Unknown keys are logged and skipped. An unknown "algorithm" key raises
    KeyError, same as Algorithm.from_key.
    """
    if path is None:
        path = SETTINGS_FILE
    data = _read_settings_json(path)

    types = {f.name: f.type for f in fields(Settings)}
    # Algorithms are stored in the file by key
    types["algorithm"] = str
    overrides = {}
    for key, value in data.items():
        if key not in types:
            log.warning("Unknown setting %r in %s", key, path)
            continue
        # bool is an int subclass but never a valid value here
        if isinstance(value, bool) or not isinstance(value, types[key]):
            log.warning("Ignoring setting %r in %s: bad value %r", key, path, value)
            continue
        overrides[key] = value

    if "algorithm" in overrides:
        overrides["algorithm"] = Algorithm.from_key(overrides["algorithm"])

    settings = replace(Settings(), **overrides)
    log.debug("Loaded settings: %s", settings)
    return settings

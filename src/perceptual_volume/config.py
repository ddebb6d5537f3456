# config.py
"""
Load a PerceptualScale from a TOML file:

    [scale]
    normalized_max = 100
    range_db = 50
    boost_range_db = 6

Missing keys keep their defaults. This is the caller side of the conversion,
so unlike the formulas it rejects non-numeric and non-positive values.
"""

import math

import toml

from .perceptual import PerceptualScale

SCALE_KEYS = ("normalized_max", "range_db", "boost_range_db")


def scale_from_dict(cfg) -> PerceptualScale:
    """Build a scale from the [scale] table of a parsed config mapping."""
    section = cfg.get("scale", {}) if cfg else {}
    if not isinstance(section, dict):
        raise ValueError("[scale] must be a table")

    unknown = sorted(set(section) - set(SCALE_KEYS))
    if unknown:
        raise ValueError(f"Unknown scale keys: {', '.join(unknown)}")

    params = {}
    for key in SCALE_KEYS:
        if key not in section:
            continue
        value = section[key]
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"{key} must be a number, got {value!r}")
        value = float(value)
        if not math.isfinite(value) or value <= 0:
            raise ValueError(f"{key} must be positive, got {value}")
        params[key] = value
    return PerceptualScale(**params)


def load_scale(path) -> PerceptualScale:
    """Read a TOML config file and return its scale."""
    try:
        cfg = toml.load(path)
    except toml.TomlDecodeError as exc:
        raise ValueError(f"Invalid TOML in {path}: {exc}") from exc
    return scale_from_dict(cfg)

# decibel.py
import numpy as np


def as_result(value):
    """Return a Python float for 0-d results, the array otherwise."""
    value = np.asarray(value)
    if value.ndim == 0:
        return float(value)
    return value


def db_to_ratio(db):
    """Convert decibels to a linear amplitude ratio."""
    db = np.asarray(db, dtype=float)
    with np.errstate(over="ignore", invalid="ignore"):
        return as_result(10.0 ** (db / 20.0))


def ratio_to_db(ratio):
    """Convert a linear amplitude ratio to decibels (-inf for 0, nan below)."""
    ratio = np.asarray(ratio, dtype=float)
    with np.errstate(divide="ignore", invalid="ignore"):
        return as_result(20.0 * np.log10(ratio))

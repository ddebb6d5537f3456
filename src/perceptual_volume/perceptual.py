# perceptual.py
"""
Volume control helpers that follow how loudness is perceived.

Hearing is logarithmic: the difference between two soft sounds is heard more
clearly than the same amplitude difference between two loud ones. A slider
that feels natural therefore moves linearly in decibels, not in amplitude.

The perceptual value runs from 0 to 2 * normalized_max:
- [0, normalized_max] selects a fraction of the normal dynamic range, so with
  a 50 dB range the midpoint is 0.5 * 50 - 50 = -25 dB, about 5.6% amplitude.
- (normalized_max, 2 * normalized_max] is the boost region, mapped onto
  (0, boost_range_db] dB of amplification above unity.

normalized_max is only a unit convention: 1 for fractions, 100 for percent.
Nothing is clamped or validated here; degenerate parameters give inf/nan.
"""

from __future__ import annotations
from dataclasses import dataclass

import numpy as np

from .decibel import as_result, db_to_ratio

DEFAULT_VOLUME_DYNAMIC_RANGE_DB = 50.0  # normal range, perceptual [0, 1]
DEFAULT_VOLUME_BOOST_DYNAMIC_RANGE_DB = 6.0  # boost range, perceptual (1, 2]


def perceptual_to_amplitude(perceptual,
                            range_db: float = DEFAULT_VOLUME_DYNAMIC_RANGE_DB,
                            boost_range_db: float = DEFAULT_VOLUME_BOOST_DYNAMIC_RANGE_DB,
                            *, normalized_max: float = 1.0):
    """
    Convert a user-facing control value to a linear amplitude.

    Parameters
    ----------
    perceptual : float or ndarray
        Control value, nominally in [0, 2 * normalized_max].
    range_db : float
        Decibel span of the perceptual range [0, normalized_max].
    boost_range_db : float
        Decibel span of the boost range (normalized_max, 2 * normalized_max].
    normalized_max : float
        Unity gain point (1 or 100).

    Returns
    -------
    amplitude : float or ndarray
        Nominally in [0, 2 * normalized_max]; 0 maps to exactly 0.
    """
    p = np.asarray(perceptual, dtype=float)
    nm = np.float64(normalized_max)
    range_db = np.float64(range_db)
    boost_range_db = np.float64(boost_range_db)

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        db = np.where(p > nm,
                      (p - nm) / nm * boost_range_db,
                      p / nm * range_db - range_db)
        amplitude = nm * db_to_ratio(db)
        amplitude = np.where(p == 0, 0.0, amplitude)
    return as_result(amplitude)


def amplitude_to_perceptual(amplitude,
                            range_db: float = DEFAULT_VOLUME_DYNAMIC_RANGE_DB,
                            boost_range_db: float = DEFAULT_VOLUME_BOOST_DYNAMIC_RANGE_DB,
                            *, normalized_max: float = 1.0):
    """
    Convert a linear amplitude back to the user-facing control value.

    Exact inverse of perceptual_to_amplitude for the same parameters.
    A negative amplitude has no logarithm and yields nan.
    """
    a = np.asarray(amplitude, dtype=float)
    nm = np.float64(normalized_max)
    range_db = np.float64(range_db)
    boost_range_db = np.float64(boost_range_db)

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        db = 20.0 * np.log10(a / nm)
        perceptual = np.where(db > 0,
                              nm * (db / boost_range_db + 1.0),
                              nm * (range_db + db) / range_db)
        perceptual = np.where(a == 0, 0.0, perceptual)
    return as_result(perceptual)


@dataclass(frozen=True)
class PerceptualScale:
    """Parameter set shared by both directions of the conversion."""
    normalized_max: float = 1.0
    range_db: float = DEFAULT_VOLUME_DYNAMIC_RANGE_DB
    boost_range_db: float = DEFAULT_VOLUME_BOOST_DYNAMIC_RANGE_DB

    @classmethod
    def percent(cls) -> "PerceptualScale":
        """Scale for the 0-200 % convention with default ranges."""
        return cls(normalized_max=100.0)

    @property
    def max_value(self) -> float:
        """Top of the boost region."""
        return 2.0 * self.normalized_max

    def to_amplitude(self, perceptual):
        return perceptual_to_amplitude(perceptual,
                                       range_db=self.range_db,
                                       boost_range_db=self.boost_range_db,
                                       normalized_max=self.normalized_max)

    def to_perceptual(self, amplitude):
        return amplitude_to_perceptual(amplitude,
                                       range_db=self.range_db,
                                       boost_range_db=self.boost_range_db,
                                       normalized_max=self.normalized_max)

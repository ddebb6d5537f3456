from .perceptual import (
    DEFAULT_VOLUME_BOOST_DYNAMIC_RANGE_DB,
    DEFAULT_VOLUME_DYNAMIC_RANGE_DB,
    PerceptualScale,
    amplitude_to_perceptual,
    perceptual_to_amplitude,
)
from .decibel import db_to_ratio, ratio_to_db

__version__ = "0.1.0"

import numpy as np
import matplotlib.pyplot as plt

from .decibel import ratio_to_db


def plot_curve(scale, n_points=201, ax=None, show=False):
    """
    Plot amplitude against perceptual value for a scale.

    Parameters
    ----------
    scale : PerceptualScale
        Conversion parameters.
    n_points : int
        Number of samples over [0, scale.max_value].
    ax : matplotlib Axes
        Axes to draw on; a new figure is created when None.
    show : bool
        Call plt.show() once drawn.

    Returns
    -------
    ax : matplotlib Axes
    """
    perceptual = np.linspace(0.0, scale.max_value, int(n_points))
    amplitude = scale.to_amplitude(perceptual)

    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 5))

    ax.plot(perceptual, amplitude, label="Amplitude")
    ax.plot(perceptual, perceptual, linestyle="dashed",
            color="gray", label="Linear reference")
    ax.axvline(scale.normalized_max, color="C1", linestyle="dotted",
               label="Unity gain")
    ax.scatter([scale.normalized_max], [scale.normalized_max], c="C1")

    top_db = ratio_to_db(scale.to_amplitude(scale.max_value) / scale.normalized_max)
    ax.set_title(f"Perceptual volume (-{scale.range_db:g} dB .. +{top_db:.1f} dB)")
    ax.set_xlabel("Perceptual value")
    ax.set_ylabel("Amplitude")
    ax.legend()
    ax.grid(True)

    if show:
        plt.tight_layout()
        plt.show()
    return ax

import math
from dataclasses import replace

import click
import numpy as np

from .config import load_scale
from .decibel import ratio_to_db
from .perceptual import PerceptualScale


def _log(ctx, message):
    if ctx.obj["verbose"]:
        click.echo(message, err=True)


@click.group()
@click.option("--config", "config_file", type=click.Path(exists=True, dir_okay=False),
              help="TOML file with a [scale] table")
@click.option("--normalized-max", type=float, help="Unity gain point (1 or 100)")
@click.option("--range-db", type=float, help="Dynamic range of the normal region in dB")
@click.option("--boost-range-db", type=float, help="Dynamic range of the boost region in dB")
@click.option("--verbose", is_flag=True, help="Print the scale in use to stderr")
@click.pass_context
def cli(ctx, config_file, normalized_max, range_db, boost_range_db, verbose):
    if config_file:
        try:
            scale = load_scale(config_file)
        except ValueError as exc:
            raise click.BadParameter(str(exc), param_hint="--config") from exc
    else:
        scale = PerceptualScale()

    overrides = {
        "normalized_max": normalized_max,
        "range_db": range_db,
        "boost_range_db": boost_range_db,
    }
    for key, value in overrides.items():
        if value is None:
            continue
        if not math.isfinite(value) or value <= 0:
            raise click.BadParameter(f"must be positive, got {value}",
                                     param_hint="--" + key.replace("_", "-"))
        scale = replace(scale, **{key: value})

    ctx.obj = {"scale": scale, "verbose": verbose}
    _log(ctx, f"normalized_max={scale.normalized_max:g} "
              f"range_db={scale.range_db:g} boost_range_db={scale.boost_range_db:g}")


@cli.command("to-amplitude")
@click.argument("values", type=float, nargs=-1, required=True)
@click.pass_context
def to_amplitude(ctx, values):
    """Convert perceptual control values to amplitudes."""
    scale = ctx.obj["scale"]
    for value in values:
        click.echo(f"{scale.to_amplitude(value):.6g}")


@cli.command("to-perceptual")
@click.argument("values", type=float, nargs=-1, required=True)
@click.pass_context
def to_perceptual(ctx, values):
    """Convert amplitudes to perceptual control values."""
    scale = ctx.obj["scale"]
    for value in values:
        if value < 0:
            _log(ctx, f"Warning: negative amplitude {value} has no perceptual value")
        click.echo(f"{scale.to_perceptual(value):.6g}")


@cli.command()
@click.option("--steps", type=click.IntRange(min=1), default=10,
              help="Number of intervals from 0 to the top of the boost region")
@click.pass_context
def table(ctx, steps):
    """Print a perceptual / amplitude / dB table."""
    scale = ctx.obj["scale"]
    perceptual = np.linspace(0.0, scale.max_value, steps + 1)
    amplitude = scale.to_amplitude(perceptual)
    db = ratio_to_db(amplitude / scale.normalized_max)

    click.echo(f"{'perceptual':>12} {'amplitude':>12} {'dB':>9}")
    for p, a, d in zip(perceptual, amplitude, db):
        click.echo(f"{p:12.4g} {a:12.4g} {d:9.2f}")


@cli.command()
@click.option("--output", type=click.Path(dir_okay=False), help="Save the plot instead of showing it")
@click.option("--points", type=click.IntRange(min=2), default=201, help="Number of curve samples")
@click.pass_context
def plot(ctx, output, points):
    """Plot the perceptual-to-amplitude curve."""
    import matplotlib.pyplot as plt

    from .visuals import plot_curve

    scale = ctx.obj["scale"]
    ax = plot_curve(scale, n_points=points, show=output is None)
    if output:
        ax.figure.tight_layout()
        ax.figure.savefig(output)
        plt.close(ax.figure)
        click.echo(f"Wrote: {output}")

"""Visualization utilities for simulated paths and Bollinger bands."""

from pathlib import Path
from typing import Optional, Sequence
import matplotlib
# Use non-interactive backend for headless environments
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from netenomics.indicators import bollinger_bands
from netenomics.exceptions import InsufficientDataError
from netenomics.simulation.batch import SimulationBatch


def _finish(fig, output_path: Optional[str], show_plot: bool) -> None:
    """Save and/or show *fig*, creating the output directory as needed."""
    fig.tight_layout()

    if output_path:
        output_path_abs = Path(output_path).resolve()
        output_path_abs.parent.mkdir(parents=True, exist_ok=True)
        plt.savefig(str(output_path_abs), dpi=300, bbox_inches='tight')

    if show_plot:
        plt.show()
    else:
        plt.close(fig)


def plot_batch(
    batch: SimulationBatch,
    output_path: Optional[str] = None,
    show_plot: bool = True,
    title: Optional[str] = None,
) -> None:
    """Plot every path of a batch with its min/max envelope and mean.

    Parameters
    ----------
    batch : SimulationBatch
        Simulated paths
    output_path : str, optional
        Path to save the plot
    show_plot : bool, default=True
        Whether to display the plot
    title : str, optional
        Plot title. Defaults to a summary of the batch.
    """
    fig, ax = plt.subplots(figsize=(16, 10), dpi=150)
    steps = np.arange(batch.num_steps + 1)

    # Plot all paths (with transparency)
    for path in batch:
        ax.plot(steps, path, alpha=0.1, color='blue', linewidth=0.5)

    bounds = pd.DataFrame([batch.bounds_at(step) for step in steps], index=steps)

    ax.fill_between(
        steps,
        bounds['min'],
        bounds['max'],
        alpha=0.2,
        color='blue',
        label='Path Range',
    )
    ax.plot(steps, bounds['mean'], color='darkblue', linewidth=2, label='Mean Path')
    ax.axhline(
        y=batch.start_price,
        color='red',
        linestyle='--',
        linewidth=2,
        label=f'Start Price: {batch.start_price:.2f}',
    )

    if title is None:
        stats = batch.statistics()
        title = (
            f"Paths: {stats['num_paths']} | "
            f"Mean End: {stats['average_end_price']:.2f} | "
            f"P(loss): {stats['probability_of_loss']*100:.1f}%"
        )

    ax.set_title(title, fontsize=14, fontweight='bold')
    ax.set_xlabel('Step', fontsize=12)
    ax.set_ylabel('Price', fontsize=12)
    ax.legend(loc='best', fontsize=9)
    ax.grid(True, alpha=0.3)

    _finish(fig, output_path, show_plot)


def plot_bollinger(
    series: Sequence[float],
    period: int = 20,
    std_dev_mult: float = 2.0,
    output_path: Optional[str] = None,
    show_plot: bool = True,
) -> None:
    """Plot a price series with its Bollinger bands.

    Raises
    ------
    InsufficientDataError
        If the series is shorter than ``period``
    """
    bands = bollinger_bands(series, period=period, std_dev_mult=std_dev_mult)
    if bands is None:
        raise InsufficientDataError(
            f"need at least {period} prices to draw Bollinger bands, got {len(series)}"
        )

    prices = np.asarray(series, dtype=float)
    x = np.arange(prices.size)
    # bands are aligned to the tail of the series
    band_x = x[period - 1:]

    fig, ax = plt.subplots(figsize=(16, 10), dpi=150)
    ax.plot(x, prices, color='black', linewidth=1, label='Price')
    ax.plot(band_x, [b.middle for b in bands], color='darkblue', linewidth=1.5, label=f'SMA({period})')
    ax.fill_between(
        band_x,
        [b.lower for b in bands],
        [b.upper for b in bands],
        alpha=0.2,
        color='blue',
        label=f'{std_dev_mult:g} SD Band',
    )

    ax.set_title(f'Bollinger Bands ({period}, {std_dev_mult:g})', fontsize=14, fontweight='bold')
    ax.set_xlabel('Index', fontsize=12)
    ax.set_ylabel('Price', fontsize=12)
    ax.legend(loc='best', fontsize=9)
    ax.grid(True, alpha=0.3)

    _finish(fig, output_path, show_plot)

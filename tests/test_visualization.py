"""
Tests for the plotting helpers.
"""

import pytest
import numpy as np
from unittest.mock import patch
from netenomics.exceptions import InsufficientDataError
from netenomics.simulation import SequenceRandomSource, simulate_paths
from netenomics.visualization import plot_batch, plot_bollinger


class TestVisualization:
    """Test suite for plot_batch and plot_bollinger."""

    @pytest.fixture
    def batch(self):
        """Create a small deterministic batch."""
        return simulate_paths(100, 0.1, 10, simulations=4, rng=SequenceRandomSource([0.2, 0.9, 0.4]))

    def test_plot_batch_saves_file(self, batch, tmp_path):
        """Test that the plot is written and parent directories created."""
        output = tmp_path / "plots" / "batch.png"

        plot_batch(batch, output_path=str(output), show_plot=False)

        assert output.exists()

    @patch('netenomics.visualization.plt.show')
    def test_plot_batch_show(self, mock_show, batch):
        """Test displaying without saving."""
        plot_batch(batch, title="Custom")
        mock_show.assert_called_once()

    def test_plot_bollinger_saves_file(self, tmp_path):
        """Test Bollinger band plot output."""
        prices = list(100 + np.sin(np.arange(40)))
        output = tmp_path / "bands.png"

        plot_bollinger(prices, period=10, output_path=str(output), show_plot=False)

        assert output.exists()

    def test_plot_bollinger_insufficient_data(self):
        """Test that short series cannot be plotted."""
        with pytest.raises(InsufficientDataError):
            plot_bollinger([1, 2, 3], period=20, show_plot=False)

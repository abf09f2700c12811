"""
Tests for the Geometric Brownian Motion model.
"""

import pytest
import numpy as np
import pandas as pd
from unittest.mock import patch
from netenomics.exceptions import InsufficientDataError
from netenomics.model import GBM, TRADING_DAYS


class TestGBM:
    """Test suite for the GBM class."""

    @pytest.fixture
    def sample_prices(self):
        """Create sample closing prices for testing."""
        rng = np.random.default_rng(0)
        dates = pd.date_range('2023-01-01', periods=100, freq='D')
        return pd.Series(100 + np.cumsum(rng.normal(0, 0.5, 100)), index=dates)

    @pytest.fixture
    def gbm_instance(self, sample_prices):
        """Create a GBM instance for testing."""
        return GBM(sample_prices, forecast_period=252, seed=42)

    def test_gbm_initialization(self, sample_prices):
        """Test GBM initialization with default and custom parameters."""
        gbm1 = GBM(sample_prices)
        assert gbm1.forecast_period == 252
        assert gbm1.seed == 20
        assert len(gbm1.stock_price) == 100
        assert gbm1.mu is None

        gbm2 = GBM([1.0, 2.0, 3.0], forecast_period=500, seed=7, name='TEST')
        assert gbm2.forecast_period == 500
        assert gbm2.seed == 7
        assert gbm2.name == 'TEST'

    @pytest.mark.parametrize("prices", [[], [100.0]])
    def test_too_few_prices(self, prices):
        """Test that returns need at least two prices."""
        with pytest.raises(InsufficientDataError):
            GBM(prices)

    def test_calculate_mu_sigma(self, gbm_instance, sample_prices):
        """Test calculation of mu and sigma."""
        stock_price, mu, sigma = gbm_instance.calculate_mu_sigma()

        daily = sample_prices.pct_change(1)
        assert mu == pytest.approx(daily.mean() * TRADING_DAYS)
        assert sigma == pytest.approx(daily.std() * np.sqrt(TRADING_DAYS))
        assert sigma >= 0
        assert 'Daily return' in stock_price.columns

    def test_two_prices_have_zero_sigma(self):
        """Test that a single return gives zero volatility instead of NaN."""
        _, mu, sigma = GBM([100.0, 110.0]).calculate_mu_sigma()

        assert mu == pytest.approx(0.1 * TRADING_DAYS)
        assert sigma == 0.0

    def test_simulate(self, gbm_instance):
        """Test forecast path calculation."""
        gbm_instance.calculate_mu_sigma()
        S, x_axis = gbm_instance.simulate()

        assert len(S) == gbm_instance.forecast_period + 1
        assert len(x_axis) == gbm_instance.forecast_period + 1
        assert S[0] == gbm_instance.So
        assert gbm_instance.So == gbm_instance.stock_price['Close'].iloc[-1]
        assert x_axis[0] == 100
        assert all(s > 0 for s in S)

    def test_simulate_reproducibility(self, sample_prices):
        """Test that the forecast is reproducible with the same seed."""
        gbm1 = GBM(sample_prices, forecast_period=100, seed=42)
        gbm2 = GBM(sample_prices, forecast_period=100, seed=42)
        gbm1.calculate_mu_sigma()
        gbm2.calculate_mu_sigma()

        np.testing.assert_array_equal(gbm1.simulate()[0], gbm2.simulate()[0])

    def test_simulate_missing_mu_sigma(self, gbm_instance):
        """Test that simulate raises error when mu/sigma not calculated."""
        with pytest.raises(ValueError, match="Mu and sigma not calculated"):
            gbm_instance.simulate()

    @patch('netenomics.model.plt.show')
    @patch('netenomics.model.plt.figure')
    @patch('netenomics.model.plt.plot')
    @patch('netenomics.model.plt.legend')
    @patch('netenomics.model.plt.ylabel')
    @patch('netenomics.model.plt.xlabel')
    @patch('netenomics.model.plt.title')
    @patch('netenomics.model.plt.grid')
    def test_plot(
        self,
        mock_grid,
        mock_title,
        mock_xlabel,
        mock_ylabel,
        mock_legend,
        mock_plot,
        mock_figure,
        mock_show,
        gbm_instance,
    ):
        """Test plotting functionality."""
        gbm_instance.S = np.full(253, 100.0)
        gbm_instance.x_axis = np.linspace(100, 352, 253)

        gbm_instance.plot(show_plot=True)

        mock_figure.assert_called_once()
        assert mock_plot.call_count == 2  # Actual and forecast
        mock_legend.assert_called_once()
        mock_show.assert_called_once()

    @patch('netenomics.model.plt.savefig')
    @patch('netenomics.model.plt.close')
    def test_plot_save_output(self, mock_close, mock_savefig, gbm_instance):
        """Test saving plot to file."""
        gbm_instance.S = np.full(253, 100.0)
        gbm_instance.x_axis = np.linspace(100, 352, 253)

        gbm_instance.plot(output_path='test.png', show_plot=False)

        mock_savefig.assert_called_once_with('test.png', dpi=300, bbox_inches='tight')
        mock_close.assert_called_once()

    def test_plot_missing_data(self, gbm_instance):
        """Test that plot raises error when the forecast is missing."""
        with pytest.raises(ValueError, match="Forecasted prices not available"):
            gbm_instance.plot()

    @patch('netenomics.model.plt.show')
    def test_run_complete_pipeline(self, mock_show, gbm_instance):
        """Test the complete run pipeline."""
        gbm_instance.run(show_plot=True)

        assert gbm_instance.mu is not None
        assert gbm_instance.sigma is not None
        assert gbm_instance.S is not None
        mock_show.assert_called_once()

    @patch('netenomics.model.GBM.plot')
    def test_run_without_plot(self, mock_plot, gbm_instance):
        """Test that run skips plotting when nothing is shown or saved."""
        gbm_instance.run(show_plot=False)

        assert gbm_instance.S is not None
        mock_plot.assert_not_called()

"""
Tests for risk measures, market state analysis and option pricing.
"""

import math
import pytest
from netenomics.exceptions import EmptyInputError, InvalidArgumentError
from netenomics.pricing import black_scholes
from netenomics.risk import (
    MarketState,
    analyze_market_state,
    clean_outliers,
    sharpe_ratio,
    value_at_risk,
)


class TestAnalyzeMarketState:
    """Test suite for analyze_market_state."""

    def test_insufficient_history(self):
        """Test the insufficient-data sentinel."""
        assert analyze_market_state([1, 2, 3, 4]) is None

    def test_overbought(self):
        """Test a spike above mean + 2 SD."""
        state = analyze_market_state([10] * 9 + [20])

        assert isinstance(state, MarketState)
        assert state.state == "OVERBOUGHT"
        assert state.trend == "BULLISH"
        assert state.signal == "HOLD"
        assert state.momentum == pytest.approx(100.0)
        assert state.volatility == pytest.approx(3 / 11)

    def test_oversold(self):
        """Test a drop below mean - 2 SD."""
        state = analyze_market_state([10] * 9 + [0])

        assert state.state == "OVERSOLD"
        assert state.trend == "BEARISH"
        assert state.signal == "BUY_DIP"
        assert state.momentum == pytest.approx(-100.0)

    def test_stable(self):
        """Test a price inside the envelope."""
        state = analyze_market_state([10, 11, 10, 11, 10.5])

        assert state.state == "STABLE"
        assert state.trend == "BEARISH"
        assert state.signal == "HOLD"

    def test_zero_previous_price(self):
        """Test that a zero previous price divides the change by 1."""
        state = analyze_market_state([5, 4, 3, 0, 2])

        assert state.state == "STABLE"
        assert state.trend == "BULLISH"
        assert state.signal == "BUY_DIP"
        assert state.momentum == 200.0
        assert state.volatility == pytest.approx(math.sqrt(2.96) / 2.8)

    def test_all_zero_prices(self):
        """Test that a zero mean gives zero volatility instead of raising."""
        state = analyze_market_state([0] * 5)

        assert state.state == "STABLE"
        assert state.trend == "BEARISH"
        assert state.signal == "HOLD"
        assert state.momentum == 0.0
        assert state.volatility == 0.0


class TestValueAtRisk:
    """Test suite for historical VaR."""

    @pytest.fixture
    def history(self):
        """Prices whose returns are -10%, +10%, 0%, -10%."""
        return [100, 90, 99, 99, 89.1]

    def test_default_confidence(self, history):
        """Test the worst-return quantile at 95%."""
        assert value_at_risk(history) == pytest.approx(-0.1)

    def test_median_confidence(self, history):
        """Test the index floor((1 - c) * n)."""
        assert value_at_risk(history, confidence=0.5) == pytest.approx(0.0)

    def test_index_past_end_is_zero(self, history):
        """Test that zero confidence falls past the last return."""
        assert value_at_risk(history, confidence=0.0) == 0.0

    def test_short_history_is_zero(self):
        """Test that fewer than two prices have no returns."""
        assert value_at_risk([100]) == 0.0
        assert value_at_risk([]) == 0.0

    def test_zero_price_stays_finite(self):
        """Test that a return after a zero price is divided by 1."""
        # returns -0.2, -0.25, -1.0, 2.0
        assert value_at_risk([5, 4, 3, 0, 2]) == pytest.approx(-1.0)
        assert value_at_risk([5, 4, 3, 0, 2], confidence=0.0) == 0.0
        assert value_at_risk([0, 0, 0]) == 0.0

    @pytest.mark.parametrize("confidence", [-0.1, 1.5])
    def test_invalid_confidence_raises(self, history, confidence):
        """Test that confidence outside [0, 1] is rejected."""
        with pytest.raises(InvalidArgumentError):
            value_at_risk(history, confidence=confidence)


class TestSharpeRatio:
    """Test suite for the Sharpe ratio."""

    def test_sharpe_ratio(self):
        """Test excess return over population deviation."""
        assert sharpe_ratio([0.1, 0.3]) == pytest.approx(1.8)

    def test_zero_deviation_uses_unit_denominator(self):
        """Test that flat returns do not divide by zero."""
        assert sharpe_ratio([0.05, 0.05], risk_free_rate=0.02) == pytest.approx(0.03)

    def test_empty_raises(self):
        """Test that no returns are rejected."""
        with pytest.raises(EmptyInputError):
            sharpe_ratio([])


class TestCleanOutliers:
    """Test suite for clean_outliers."""

    def test_removes_spike(self):
        """Test that a pump beyond 3 SD is dropped."""
        assert clean_outliers([10] * 10 + [100]) == [10.0] * 10

    def test_keeps_everything_with_wide_threshold(self):
        """Test that a large threshold keeps all values in order."""
        values = [3, 1, 4, 1, 5, 9, 2, 6]
        assert clean_outliers(values, sigma_threshold=10) == [float(v) for v in values]

    def test_constant_series_kept(self):
        """Test that zero deviation keeps identical values."""
        assert clean_outliers([5, 5, 5]) == [5.0, 5.0, 5.0]

    def test_negative_threshold_raises(self):
        """Test that a negative threshold is rejected."""
        with pytest.raises(InvalidArgumentError):
            clean_outliers([1, 2, 3], sigma_threshold=-1)


class TestBlackScholes:
    """Test suite for Black-Scholes pricing."""

    def test_reference_call(self):
        """Test the textbook at-the-money call."""
        assert black_scholes(100, 100, 1, 0.05, 0.2) == pytest.approx(10.4506, abs=1e-3)

    def test_reference_put(self):
        """Test the textbook at-the-money put."""
        assert black_scholes(100, 100, 1, 0.05, 0.2, "put") == pytest.approx(5.5735, abs=1e-3)

    @pytest.mark.parametrize("s, k, t, r, v", [(90, 100, 0.5, 0.03, 0.3), (120, 100, 2, 0.01, 0.15)])
    def test_put_call_parity(self, s, k, t, r, v):
        """Test C - P = S - K * exp(-rT)."""
        call = black_scholes(s, k, t, r, v, "call")
        put = black_scholes(s, k, t, r, v, "put")
        assert call - put == pytest.approx(s - k * math.exp(-r * t))

    @pytest.mark.parametrize("args", [(0, 100, 1, 0.05, 0.2), (100, 100, 0, 0.05, 0.2), (100, 100, 1, 0.05, 0)])
    def test_non_positive_inputs_raise(self, args):
        """Test that prices, time and volatility must be positive."""
        with pytest.raises(InvalidArgumentError):
            black_scholes(*args)

    def test_unknown_option_type_raises(self):
        """Test that only calls and puts are priced."""
        with pytest.raises(InvalidArgumentError):
            black_scholes(100, 100, 1, 0.05, 0.2, "straddle")

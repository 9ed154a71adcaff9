"""
Tests for RSI divergence detection.
"""
from confluence.indicators.divergence import (
    detect_bearish_divergence,
    detect_bullish_divergence,
)


def _series(length, base=100.0):
    return [base] * length, [50.0] * length


class TestBullishDivergence:
    """Lower low in price, higher low in RSI."""

    def test_detected(self):
        closes, rsi = _series(21)
        closes[5], rsi[5] = 90.0, 25.0
        closes[-1], rsi[-1] = 89.0, 30.0
        assert detect_bullish_divergence(closes, rsi, lookback=20) is True

    def test_rsi_lower_low_is_not_divergence(self):
        closes, rsi = _series(21)
        closes[5], rsi[5] = 90.0, 25.0
        closes[-1], rsi[-1] = 89.0, 20.0
        assert detect_bullish_divergence(closes, rsi, lookback=20) is False

    def test_equal_low_is_not_lower_low(self):
        closes, rsi = _series(21)
        closes[5], rsi[5] = 90.0, 25.0
        closes[-1], rsi[-1] = 90.0, 30.0
        assert detect_bullish_divergence(closes, rsi, lookback=20) is False

    def test_equal_prior_lows_use_most_recent(self):
        closes, rsi = _series(21)
        closes[5], rsi[5] = 90.0, 25.0
        closes[15], rsi[15] = 90.0, 35.0
        closes[-1], rsi[-1] = 89.0, 30.0
        assert detect_bullish_divergence(closes, rsi, lookback=20) is False

    def test_lowest_close_wins_over_recency(self):
        closes, rsi = _series(21)
        closes[5], rsi[5] = 90.0, 25.0
        closes[15], rsi[15] = 92.0, 40.0
        closes[-1], rsi[-1] = 89.0, 30.0
        assert detect_bullish_divergence(closes, rsi, lookback=20) is True

    def test_bars_outside_lookback_ignored(self):
        closes, rsi = _series(30)
        closes[2], rsi[2] = 80.0, 10.0
        closes[20], rsi[20] = 95.0, 25.0
        closes[-1], rsi[-1] = 94.0, 30.0
        assert detect_bullish_divergence(closes, rsi, lookback=20) is True

    def test_missing_rsi_at_prior_low(self):
        closes, rsi = _series(21)
        closes[5], rsi[5] = 90.0, None
        closes[-1], rsi[-1] = 89.0, 30.0
        assert detect_bullish_divergence(closes, rsi, lookback=20) is False

    def test_short_series(self):
        closes, rsi = _series(10)
        closes[-1] = 50.0
        assert detect_bullish_divergence(closes, rsi, lookback=20) is False
        assert detect_bullish_divergence([], [], lookback=20) is False


class TestBearishDivergence:
    """Higher high in price, lower high in RSI."""

    def test_detected(self):
        closes, rsi = _series(21)
        closes[8], rsi[8] = 110.0, 75.0
        closes[-1], rsi[-1] = 111.0, 70.0
        assert detect_bearish_divergence(closes, rsi, lookback=20) is True

    def test_rsi_higher_high_is_not_divergence(self):
        closes, rsi = _series(21)
        closes[8], rsi[8] = 110.0, 75.0
        closes[-1], rsi[-1] = 111.0, 80.0
        assert detect_bearish_divergence(closes, rsi, lookback=20) is False

    def test_not_a_higher_high(self):
        closes, rsi = _series(21)
        closes[8], rsi[8] = 110.0, 75.0
        closes[-1], rsi[-1] = 105.0, 60.0
        assert detect_bearish_divergence(closes, rsi, lookback=20) is False

    def test_missing_current_rsi(self):
        closes, rsi = _series(21)
        closes[8], rsi[8] = 110.0, 75.0
        closes[-1], rsi[-1] = 111.0, None
        assert detect_bearish_divergence(closes, rsi, lookback=20) is False

    def test_default_lookback(self):
        closes, rsi = _series(25)
        closes[10], rsi[10] = 110.0, 75.0
        closes[-1], rsi[-1] = 111.0, 70.0
        assert detect_bearish_divergence(closes, rsi) is True

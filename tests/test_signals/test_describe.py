"""
Tests for signal descriptions.
"""
from confluence.shared.types import (
    Direction,
    IndicatorSnapshot,
    SignalStrength,
    TradeParameters,
    TradingSignal,
)
from confluence.signals.describe import NEUTRAL_DESCRIPTION, describe_signal, format_trade_plan


class TestDescribeSignal:

    def test_directional_signal(self):
        signal = TradingSignal(
            direction=Direction.BUY,
            strength=SignalStrength.STRONG,
            timestamp=0,
            reason="Strong Buy Signal: HTF Trend: UP",
            indicators=IndicatorSnapshot(rsi=61.2, vwap=101.5, atr=0.8, ema9=102.0, ema21=101.0),
        )
        assert describe_signal(signal) == (
            "STRONG BUY signal (RSI at 61.20, VWAP at 101.50, ATR at 0.80, "
            "EMA9 at 102.00, EMA21 at 101.00). Reason: Strong Buy Signal: HTF Trend: UP"
        )

    def test_missing_indicators_are_skipped(self):
        signal = TradingSignal(
            direction=Direction.SELL,
            strength=SignalStrength.MODERATE,
            timestamp=0,
            reason="r",
            indicators=IndicatorSnapshot(rsi=40.0),
        )
        assert describe_signal(signal) == "MODERATE SELL signal (RSI at 40.00). Reason: r"

    def test_neutral_uses_reason(self):
        signal = TradingSignal(Direction.NEUTRAL, SignalStrength.WEAK, 0, "Not enough data.")
        assert describe_signal(signal) == "Not enough data."

    def test_neutral_without_reason(self):
        signal = TradingSignal(Direction.NEUTRAL, SignalStrength.WEAK, 0, "")
        assert describe_signal(signal) == NEUTRAL_DESCRIPTION


class TestTradePlan:

    def test_lines(self):
        params = TradeParameters(entry=100.0, stop_loss=98.5, profit_target1=103.0, profit_target2=106.0)
        assert format_trade_plan(params) == [
            "Entry: ~100.00",
            "Stop-loss: 98.50",
            "Target 1: 103.00",
            "Target 2: 106.00",
            "Risk/Reward: 2.0",
        ]

    def test_zero_risk_has_no_ratio(self):
        params = TradeParameters(entry=100.0, stop_loss=100.0, profit_target1=103.0, profit_target2=106.0)
        assert len(format_trade_plan(params)) == 4

"""
Shared types and defaults for the signal engine.

This module provides:
- Candle, TradingSignal and the enums/value objects around them
- Centralized default values for all indicator and scoring parameters
- Trading session lookup
"""
from .types import (
    Candle,
    Direction,
    SignalStrength,
    TrendBias,
    IndicatorSnapshot,
    TradeParameters,
    TradingSignal,
)
from .defaults import (
    RSI_PERIOD, DIVERGENCE_LOOKBACK, ATR_PERIOD,
    EMA_FAST_PERIOD, EMA_SLOW_PERIOD, TREND_EMA_PERIOD,
    MACD_FAST, MACD_SLOW, MACD_SIGNAL,
    STRONG_THRESHOLD, MODERATE_THRESHOLD,
    STOP_ATR_MULTIPLIER, TARGET_ATR_MULTIPLIER,
)
from .sessions import TradingSession, SESSIONS, session_for_timestamp

__all__ = [
    'Candle',
    'Direction',
    'SignalStrength',
    'TrendBias',
    'IndicatorSnapshot',
    'TradeParameters',
    'TradingSignal',
    'RSI_PERIOD', 'DIVERGENCE_LOOKBACK', 'ATR_PERIOD',
    'EMA_FAST_PERIOD', 'EMA_SLOW_PERIOD', 'TREND_EMA_PERIOD',
    'MACD_FAST', 'MACD_SLOW', 'MACD_SIGNAL',
    'STRONG_THRESHOLD', 'MODERATE_THRESHOLD',
    'STOP_ATR_MULTIPLIER', 'TARGET_ATR_MULTIPLIER',
    'TradingSession',
    'SESSIONS',
    'session_for_timestamp',
]

"""
Indicator calculation module.

Provides the indicators used by confluence scoring:
- Technical indicators (SMA, EMA, RSI, MACD, VWAP, ATR)
- RSI divergence detection

All functions are pure: deterministic, no I/O, no shared state.
"""
from .technical import (
    TechnicalIndicators,
    MACDResult,
    sma,
    ema,
    rsi,
    pad_rsi,
    macd,
    vwap,
    true_range,
    atr,
)
from .divergence import detect_bullish_divergence, detect_bearish_divergence

__all__ = [
    'TechnicalIndicators',
    'MACDResult',
    'sma',
    'ema',
    'rsi',
    'pad_rsi',
    'macd',
    'vwap',
    'true_range',
    'atr',
    'detect_bullish_divergence',
    'detect_bearish_divergence',
]

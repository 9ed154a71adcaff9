"""
Centralized default values for indicator and scoring parameters.

This is the SINGLE SOURCE OF TRUTH for all parameter defaults.
All modules should import from here to ensure consistency.

Tuned for 5-minute entries with a 1-hour bias series (crypto, 24/7 markets).
"""

# RSI (Relative Strength Index) defaults
RSI_PERIOD = 14

# Divergence detection
DIVERGENCE_LOOKBACK = 20  # Bars scanned before the latest one for the prior extreme

# ATR (Average True Range) defaults
ATR_PERIOD = 14

# EMA crossover on the short timeframe
EMA_FAST_PERIOD = 9
EMA_SLOW_PERIOD = 21

# Higher timeframe trend bias (close vs EMA)
TREND_EMA_PERIOD = 20

# MACD (Moving Average Convergence Divergence) defaults
MACD_FAST = 12
MACD_SLOW = 26
MACD_SIGNAL = 9

# VWAP price source: "close" or "typical" ((high + low + close) / 3)
VWAP_PRICE_SOURCE = "close"
VWAP_NEAR_BAND_PCT = 0.005  # Within 0.5% of VWAP on the unfavorable side = pullback entry

# Confluence score weights
TREND_BIAS_WEIGHT = 1.0
VWAP_WEIGHT = 1.0
VWAP_NEAR_WEIGHT = 0.5
DIVERGENCE_WEIGHT = 2.0
EMA_CROSSOVER_WEIGHT = 1.5
HEALTH_PENALTY = 1.0  # Subtracted from every positive score when the health gate fails

# Direction resolution thresholds
STRONG_THRESHOLD = 4.0
MODERATE_THRESHOLD = 2.5

# Volume / volatility health gate
VOLUME_WINDOW = 10  # Trailing candles for the average volume
VOLUME_HEALTH_RATIO = 0.8  # Latest volume must exceed 80% of the trailing average
MIN_ATR_PCT = 0.0005  # ATR must exceed 0.05% of price

# Trade parameters (STRONG signals only)
STOP_ATR_MULTIPLIER = 1.5
TARGET_ATR_MULTIPLIER = 3.0  # First target; second target is twice this distance

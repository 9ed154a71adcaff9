"""
RSI divergence detection.

Compares the latest close against the most extreme close of the preceding
lookback window, and the latest RSI against the RSI recorded at that extreme:

- Bullish: price makes a lower low, RSI makes a higher low.
- Bearish: price makes a higher high, RSI makes a lower high.

`rsi_values` must be index-aligned with `closes` (see technical.pad_rsi).
"""
from typing import Optional, Sequence

from ..shared.defaults import DIVERGENCE_LOOKBACK


def _prior_extreme_index(closes: Sequence[float], lookback: int, lowest: bool) -> int:
    """
    Index of the lowest (or highest) close among the `lookback` bars before the latest.

    Scans from the most recent bar backwards and only replaces on a strictly
    more extreme close, so equal extremes resolve to the most recent one.
    Returns -1 if the window is empty.
    """
    last = len(closes) - 1
    stop = max(last - lookback, 0)
    best_index = -1
    best = None
    for i in range(last - 1, stop - 1, -1):
        value = closes[i]
        if best is None or (value < best if lowest else value > best):
            best = value
            best_index = i
    return best_index


def _window_ok(closes: Sequence[float], rsi_values: Sequence[Optional[float]], lookback: int) -> bool:
    return len(closes) >= lookback and len(rsi_values) >= lookback and len(closes) > 1


def detect_bullish_divergence(
    closes: Sequence[float],
    rsi_values: Sequence[Optional[float]],
    lookback: int = DIVERGENCE_LOOKBACK,
) -> bool:
    """
    Detect bullish RSI divergence at the latest bar.

    True only if the current close is strictly below the lowest close of the
    preceding `lookback` bars and the current RSI is strictly above the RSI at
    that prior low. False if either series is shorter than `lookback` or an
    RSI value involved is missing.
    """
    if not _window_ok(closes, rsi_values, lookback):
        return False

    low_index = _prior_extreme_index(closes, lookback, lowest=True)
    if low_index < 0 or closes[-1] >= closes[low_index]:
        return False

    current_rsi = rsi_values[-1]
    prior_rsi = rsi_values[low_index]
    if current_rsi is None or prior_rsi is None:
        return False
    return current_rsi > prior_rsi


def detect_bearish_divergence(
    closes: Sequence[float],
    rsi_values: Sequence[Optional[float]],
    lookback: int = DIVERGENCE_LOOKBACK,
) -> bool:
    """
    Detect bearish RSI divergence at the latest bar.

    Mirror of detect_bullish_divergence: current close strictly above the prior
    lookback high, and current RSI strictly below the RSI at that high.
    """
    if not _window_ok(closes, rsi_values, lookback):
        return False

    high_index = _prior_extreme_index(closes, lookback, lowest=False)
    if high_index < 0 or closes[-1] <= closes[high_index]:
        return False

    current_rsi = rsi_values[-1]
    prior_rsi = rsi_values[high_index]
    if current_rsi is None or prior_rsi is None:
        return False
    return current_rsi < prior_rsi

"""
Technical indicators for confluence scoring.

Pure functions over numeric sequences (SMA, EMA, RSI, MACD) and candle
sequences (VWAP, ATR). Outputs are plain lists aligned 1:1 with the input,
with None for warm-up entries, so an indicator value can be looked up by the
same index as its source candle. sma and rsi keep their compact shapes
(n - period + 1 and n - period values).
"""
from typing import Dict, List, NamedTuple, Optional, Sequence

import numpy as np
import pandas as pd

from ..data.frames import CandleInput, candles_to_frame
from ..shared.defaults import (
    RSI_PERIOD, ATR_PERIOD,
    EMA_FAST_PERIOD, EMA_SLOW_PERIOD,
    MACD_FAST, MACD_SLOW, MACD_SIGNAL,
    VWAP_PRICE_SOURCE,
)

Series = List[Optional[float]]

MACD_DECIMALS = 6


class MACDResult(NamedTuple):
    """MACD line, signal line and histogram, each null-padded to len(prices)."""
    macd: Series
    signal: Series
    histogram: Series


def _as_array(values: Sequence[float]) -> np.ndarray:
    return np.asarray(values, dtype=float)


def sma(prices: Sequence[float], period: int) -> List[float]:
    """
    Simple Moving Average over trailing windows.

    Returns an empty list for empty input, period <= 0 or period > len(prices);
    otherwise len(prices) - period + 1 values.
    """
    values = _as_array(prices)
    if values.size == 0 or period <= 0 or period > values.size:
        return []
    running = np.concatenate(([0.0], np.cumsum(values)))
    return ((running[period:] - running[:-period]) / period).tolist()


def ema(values: Sequence[float], period: int) -> Series:
    """
    Exponential Moving Average seeded with the SMA of the first `period` values.

    First period-1 entries are None. period == 1 is the identity.

    Raises:
        ValueError: If period < 1
    """
    if period < 1:
        raise ValueError(f"EMA period must be >= 1, got {period}")
    data = _as_array(values)
    if period == 1:
        return data.tolist()
    if data.size < period:
        return [None] * data.size

    k = 2.0 / (period + 1)
    result: Series = [None] * (period - 1)
    current = float(data[:period].sum() / period)
    result.append(current)
    for value in data[period:]:
        current = (float(value) - current) * k + current
        result.append(current)
    return result


def rsi(prices: Sequence[float], period: int = RSI_PERIOD) -> List[float]:
    """
    Relative Strength Index with Wilder smoothing.

    RSI = 100 - 100 / (1 + avg_gain / avg_loss), and 100 when avg_loss == 0.
    Value j corresponds to price index j + period (see pad_rsi).

    Returns:
        len(prices) - period values, or [] if len(prices) < period + 1

    Raises:
        ValueError: If period < 1
    """
    if period < 1:
        raise ValueError(f"RSI period must be >= 1, got {period}")
    data = _as_array(prices)
    if data.size < period + 1:
        return []

    deltas = np.diff(data)
    gains = np.where(deltas > 0, deltas, 0.0)
    losses = np.where(deltas < 0, -deltas, 0.0)

    avg_gain = float(gains[:period].mean())
    avg_loss = float(losses[:period].mean())

    def _value(g: float, l: float) -> float:
        if l == 0:
            return 100.0
        return 100.0 - 100.0 / (1.0 + g / l)

    result = [_value(avg_gain, avg_loss)]
    for gain, loss in zip(gains[period:], losses[period:]):
        avg_gain = (avg_gain * (period - 1) + float(gain)) / period
        avg_loss = (avg_loss * (period - 1) + float(loss)) / period
        result.append(_value(avg_gain, avg_loss))
    return result


def pad_rsi(rsi_values: Sequence[float], length: int, period: int = RSI_PERIOD) -> Series:
    """Left-pad an RSI series with None so it aligns with its `length` source prices."""
    if not rsi_values:
        return [None] * length
    return [None] * period + [float(v) for v in rsi_values]


def macd(
    prices: Sequence[float],
    fast: int = MACD_FAST,
    slow: int = MACD_SLOW,
    signal: int = MACD_SIGNAL,
) -> MACDResult:
    """
    Calculate MACD (Moving Average Convergence Divergence).

    The MACD line (EMA fast - EMA slow) starts at index slow-1. The signal line
    is the EMA of the non-null MACD values, so its first value sits at
    slow-1 + signal-1. Values are rounded to 6 decimals.

    Raises:
        ValueError: If slow <= fast
    """
    if slow <= fast:
        raise ValueError(f"MACD slow period ({slow}) must be greater than fast period ({fast})")

    n = len(prices)
    macd_line: Series = [None] * n
    signal_line: Series = [None] * n
    histogram: Series = [None] * n

    fast_ema = ema(prices, fast)
    slow_ema = ema(prices, slow)
    start = slow - 1
    for i in range(start, n):
        if fast_ema[i] is not None and slow_ema[i] is not None:
            macd_line[i] = round(fast_ema[i] - slow_ema[i], MACD_DECIMALS)

    valid = [v for v in macd_line[start:] if v is not None]
    if valid:
        signal_values = ema(valid, signal)
        for offset, value in enumerate(signal_values):
            if value is not None:
                signal_line[start + offset] = round(value, MACD_DECIMALS)

    for i in range(n):
        if macd_line[i] is not None and signal_line[i] is not None:
            histogram[i] = round(macd_line[i] - signal_line[i], MACD_DECIMALS)

    return MACDResult(macd_line, signal_line, histogram)


def _price_column(df: pd.DataFrame, price_source: str) -> pd.Series:
    if price_source == 'close':
        return df['Close']
    if price_source == 'typical':
        return (df['High'] + df['Low'] + df['Close']) / 3.0
    raise ValueError(f"price_source must be 'close' or 'typical', got {price_source!r}")


def vwap(candles: CandleInput, price_source: str = VWAP_PRICE_SOURCE) -> Series:
    """
    Cumulative Volume-Weighted Average Price.

    Each value is sum(price * volume) / sum(volume) up to and including that
    candle. Missing volume counts as 0; while cumulative volume is 0 the value
    is None.

    Args:
        candles: Candles or candle frame, oldest first
        price_source: "close" (default) or "typical" ((high + low + close) / 3)
    """
    df = candles_to_frame(candles)
    price = _price_column(df, price_source)
    volume = df['Volume'].fillna(0.0)
    cum_pv = (price * volume).cumsum()
    cum_vol = volume.cumsum()
    result = cum_pv / cum_vol.where(cum_vol > 0)
    return [None if pd.isna(v) else float(v) for v in result]


def true_range(candles: CandleInput) -> List[float]:
    """True range per candle; the first candle has no previous close and uses high - low."""
    df = candles_to_frame(candles)
    high, low, close = df['High'], df['Low'], df['Close']
    prev_close = close.shift(1)
    tr1 = high - low
    tr2 = (high - prev_close).abs()
    tr3 = (low - prev_close).abs()
    tr = pd.concat([tr1, tr2, tr3], axis=1).max(axis=1)
    return tr.astype(float).tolist()


def atr(candles: CandleInput, period: int = ATR_PERIOD) -> Series:
    """
    Average True Range with Wilder smoothing.

    Same warm-up as RSI: the first value sits at index `period` and is the mean
    of true ranges 1..period (each needs a previous close); entries before it
    are None.

    Raises:
        ValueError: If period < 1
    """
    if period < 1:
        raise ValueError(f"ATR period must be >= 1, got {period}")
    tr = true_range(candles)
    n = len(tr)
    result: Series = [None] * n
    if n < period + 1:
        return result

    current = float(np.mean(tr[1:period + 1]))
    result[period] = current
    for i in range(period + 1, n):
        current = (current * (period - 1) + tr[i]) / period
        result[i] = current
    return result


class TechnicalIndicators:
    """Calculates the short-timeframe indicator set from a candle frame."""

    def __init__(
        self,
        rsi_period: int = RSI_PERIOD,  # From shared.defaults
        atr_period: int = ATR_PERIOD,  # From shared.defaults
        ema_fast_period: int = EMA_FAST_PERIOD,  # From shared.defaults
        ema_slow_period: int = EMA_SLOW_PERIOD,  # From shared.defaults
        vwap_price_source: str = VWAP_PRICE_SOURCE,
    ):
        """
        Initialize indicator calculator.

        Args:
            rsi_period: Period for RSI calculation
            atr_period: Period for ATR calculation
            ema_fast_period: Fast EMA period of the crossover pair
            ema_slow_period: Slow EMA period of the crossover pair
            vwap_price_source: "close" or "typical"
        """
        self.rsi_period = rsi_period
        self.atr_period = atr_period
        self.ema_fast_period = ema_fast_period
        self.ema_slow_period = ema_slow_period
        self.vwap_price_source = vwap_price_source

    def calculate_all(self, candles: CandleInput) -> pd.DataFrame:
        """
        Calculate all indicators and return them as a DataFrame.

        Every column is aligned with the input candles; warm-up entries are NaN.

        Columns: price, volume, rsi, vwap, atr, ema_fast, ema_slow,
        ema_bullish_cross, ema_bearish_cross
        """
        frame = candles_to_frame(candles)
        closes = frame['Close'].tolist()
        n = len(closes)

        columns: Dict[str, Series] = {
            'rsi': pad_rsi(rsi(closes, self.rsi_period), n, self.rsi_period),
            'vwap': vwap(frame, self.vwap_price_source),
            'atr': atr(frame, self.atr_period),
            'ema_fast': ema(closes, self.ema_fast_period),
            'ema_slow': ema(closes, self.ema_slow_period),
        }

        df = pd.DataFrame(index=frame.index)
        df['price'] = frame['Close']
        df['volume'] = frame['Volume']
        for name, values in columns.items():
            df[name] = pd.Series(values, index=frame.index, dtype=float)

        ema_diff = df['ema_fast'] - df['ema_slow']
        ema_diff_prev = ema_diff.shift(1)
        df['ema_bullish_cross'] = (ema_diff > 0) & (ema_diff_prev <= 0)
        df['ema_bearish_cross'] = (ema_diff < 0) & (ema_diff_prev >= 0)
        return df

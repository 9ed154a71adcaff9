"""
Conversion between candle sequences and pandas DataFrames.

Candle frames use the columns Time, Open, High, Low, Close, Volume (Time in
epoch seconds, missing volume as NaN). Row order is preserved as given; the
indicator code relies on callers supplying oldest-to-newest data.
"""
from typing import Any, List, Mapping, Sequence, Union

import numpy as np
import pandas as pd

from ..shared.types import Candle

FRAME_COLUMNS = ['Time', 'Open', 'High', 'Low', 'Close', 'Volume']
REQUIRED_COLUMNS = ['Open', 'High', 'Low', 'Close']

CandleInput = Union[pd.DataFrame, Sequence[Candle], Sequence[Mapping[str, Any]]]


def _normalize_frame(df: pd.DataFrame) -> pd.DataFrame:
    """Match columns case-insensitively and fill in Time/Volume when absent."""
    lookup = {str(c).strip().lower(): c for c in df.columns}
    missing = [c for c in REQUIRED_COLUMNS if c.lower() not in lookup]
    if missing:
        raise ValueError(f"Candle frame is missing columns: {', '.join(missing)}")

    out = pd.DataFrame(index=range(len(df)))
    for col in FRAME_COLUMNS:
        src = lookup.get(col.lower())
        if src is not None:
            out[col] = df[src].to_numpy()
        elif col == 'Volume':
            out[col] = np.nan
        elif isinstance(df.index, pd.DatetimeIndex):
            index = df.index if df.index.tz is not None else df.index.tz_localize('UTC')
            out[col] = ((index - pd.Timestamp(0, tz='UTC')) // pd.Timedelta(seconds=1)).to_numpy()
        else:
            out[col] = np.arange(len(df), dtype=np.int64)

    for col in REQUIRED_COLUMNS + ['Volume']:
        out[col] = pd.to_numeric(out[col], errors='raise').astype(float)
    out['Time'] = out['Time'].astype(np.int64)
    return out


def candles_to_frame(candles: CandleInput) -> pd.DataFrame:
    """
    Build a candle frame from candles, mappings, or an existing DataFrame.

    Args:
        candles: Sequence of Candle, sequence of dicts with lowercase keys
                 (time, open, high, low, close, volume), or a DataFrame

    Returns:
        DataFrame with FRAME_COLUMNS and a RangeIndex

    Raises:
        ValueError: If a required OHLC column is missing
    """
    if isinstance(candles, pd.DataFrame):
        return _normalize_frame(candles)

    rows = []
    for c in candles:
        if isinstance(c, Candle):
            rows.append((c.time, c.open, c.high, c.low, c.close, c.volume))
        else:
            rows.append((
                c['time'], c['open'], c['high'], c['low'], c['close'], c.get('volume'),
            ))

    df = pd.DataFrame(rows, columns=FRAME_COLUMNS)
    df['Time'] = df['Time'].astype(np.int64)
    for col in REQUIRED_COLUMNS:
        df[col] = df[col].astype(float)
    # None volumes become NaN
    df['Volume'] = pd.to_numeric(df['Volume'], errors='coerce').astype(float)
    return df


def frame_to_candles(df: pd.DataFrame) -> List[Candle]:
    """Convert a candle frame (any column casing) into Candle objects."""
    frame = _normalize_frame(df)
    candles = []
    for row in frame.itertuples(index=False):
        volume = None if pd.isna(row.Volume) else float(row.Volume)
        candles.append(Candle(
            time=int(row.Time),
            open=float(row.Open),
            high=float(row.High),
            low=float(row.Low),
            close=float(row.Close),
            volume=volume,
        ))
    return candles

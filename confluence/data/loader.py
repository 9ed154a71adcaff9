"""
Candle loader for CSV files.

Feeds the CLI with candle series exported by an external data-acquisition
component. Supports:
- time as epoch seconds or any datetime string pandas can parse
- case-insensitive OHLCV headers, volume optional
- time range filtering
"""
import pandas as pd
from pathlib import Path
from typing import List, Optional, Union
from datetime import datetime

from ..shared.types import Candle
from .frames import candles_to_frame, frame_to_candles

TimeBound = Optional[Union[int, str, datetime, pd.Timestamp]]


def _to_epoch_seconds(values: pd.Series) -> pd.Series:
    """Convert a time column to integer epoch seconds."""
    if pd.api.types.is_numeric_dtype(values):
        return values.astype('int64')
    parsed = pd.to_datetime(values, utc=True)
    return (parsed - pd.Timestamp(0, tz='UTC')) // pd.Timedelta(seconds=1)


def _bound_to_seconds(bound: TimeBound) -> Optional[int]:
    if bound is None:
        return None
    if isinstance(bound, int):
        return bound
    ts = pd.Timestamp(bound)
    if ts.tzinfo is None:
        ts = ts.tz_localize('UTC')
    return int(ts.timestamp())


class CandleLoader:
    """
    Loads candles from a CSV file.

    The file must have a header row with time, open, high, low, close and
    optionally volume columns.
    """

    def __init__(self, data_path: Union[str, Path]):
        """
        Initialize the candle loader.

        Args:
            data_path: Path to the CSV file containing the candles
        """
        self.data_path = Path(data_path)
        if not self.data_path.exists():
            raise FileNotFoundError(f"Data file not found: {self.data_path}")

    def load_frame(self, start: TimeBound = None, end: TimeBound = None) -> pd.DataFrame:
        """
        Load the CSV into a candle frame, oldest first.

        Args:
            start: Earliest candle time to keep (inclusive). If None, no start filter.
            end: Latest candle time to keep (inclusive). If None, no end filter.

        Returns:
            Candle frame (Time, Open, High, Low, Close, Volume)

        Raises:
            ValueError: If the file has no time column or misses OHLC columns
        """
        raw = pd.read_csv(self.data_path)
        lookup = {str(c).strip().lower(): c for c in raw.columns}
        time_col = lookup.get('time') or lookup.get('timestamp') or lookup.get('date')
        if time_col is None:
            raise ValueError(f"No time column in {self.data_path}. Columns: {list(raw.columns)}")

        raw = raw.rename(columns={time_col: 'Time'})
        raw['Time'] = _to_epoch_seconds(raw['Time'])
        df = candles_to_frame(raw)

        # Sort by time and drop repeated bars (last write wins)
        df = df.sort_values('Time', kind='stable')
        df = df.drop_duplicates(subset='Time', keep='last').reset_index(drop=True)

        start_s = _bound_to_seconds(start)
        end_s = _bound_to_seconds(end)
        if start_s is not None:
            df = df[df['Time'] >= start_s]
        if end_s is not None:
            df = df[df['Time'] <= end_s]

        return df.reset_index(drop=True)

    def load(self, start: TimeBound = None, end: TimeBound = None) -> List[Candle]:
        """Load the CSV as a list of Candle objects (see load_frame)."""
        return frame_to_candles(self.load_frame(start=start, end=end))


def load_candles(path: Union[str, Path]) -> List[Candle]:
    """Convenience wrapper: all candles of a CSV file, oldest first."""
    return CandleLoader(path).load()

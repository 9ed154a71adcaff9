"""
Tests for candle frame conversion.
"""
import numpy as np
import pandas as pd
import pytest

from confluence.data.frames import FRAME_COLUMNS, candles_to_frame, frame_to_candles
from confluence.shared.types import Candle


class TestCandlesToFrame:

    def test_from_candles(self):
        candles = [
            Candle(time=60, open=1.0, high=2.0, low=0.5, close=1.5, volume=10.0),
            Candle(time=120, open=1.5, high=2.5, low=1.0, close=2.0),
        ]
        df = candles_to_frame(candles)

        assert list(df.columns) == FRAME_COLUMNS
        assert df['Time'].tolist() == [60, 120]
        assert df['Close'].tolist() == [1.5, 2.0]
        assert df['Volume'].iloc[0] == 10.0
        assert np.isnan(df['Volume'].iloc[1])

    def test_from_dicts(self):
        rows = [
            {'time': 0, 'open': 1, 'high': 2, 'low': 0, 'close': 1.5, 'volume': 5},
            {'time': 60, 'open': 1.5, 'high': 2, 'low': 1, 'close': 1.8},
        ]
        df = candles_to_frame(rows)
        assert df['Close'].tolist() == [1.5, 1.8]
        assert np.isnan(df['Volume'].iloc[1])

    def test_from_dataframe_any_case(self):
        raw = pd.DataFrame({
            'TIME': [0, 60],
            'open': [1.0, 1.1],
            'High': [1.2, 1.3],
            'low': [0.9, 1.0],
            'Close': [1.1, 1.2],
        })
        df = candles_to_frame(raw)
        assert list(df.columns) == FRAME_COLUMNS
        assert df['Time'].tolist() == [0, 60]
        assert df['Volume'].isna().all()

    def test_time_from_datetime_index(self):
        index = pd.date_range("2024-01-01", periods=2, freq="h", tz="UTC")
        raw = pd.DataFrame({
            'Open': [1.0, 1.1], 'High': [1.2, 1.3], 'Low': [0.9, 1.0], 'Close': [1.1, 1.2],
        }, index=index)
        df = candles_to_frame(raw)
        assert df['Time'].tolist() == [1704067200, 1704070800]

    def test_missing_close(self):
        raw = pd.DataFrame({'open': [1.0], 'high': [1.0], 'low': [1.0]})
        with pytest.raises(ValueError, match="missing columns: Close"):
            candles_to_frame(raw)

    def test_empty(self):
        df = candles_to_frame([])
        assert len(df) == 0
        assert list(df.columns) == FRAME_COLUMNS


class TestFrameToCandles:

    def test_round_trip_keeps_missing_volume(self):
        candles = [
            Candle(time=60, open=1.0, high=2.0, low=0.5, close=1.5, volume=10.0),
            Candle(time=120, open=1.5, high=2.5, low=1.0, close=2.0, volume=None),
        ]
        assert frame_to_candles(candles_to_frame(candles)) == candles

"""
Candle data handling.

Provides conversion between candle sequences and pandas frames, and a CSV
loader for the command-line tools. The signal engine itself never reads files.
"""
from .frames import candles_to_frame, frame_to_candles, FRAME_COLUMNS
from .loader import CandleLoader, load_candles

__all__ = [
    'candles_to_frame',
    'frame_to_candles',
    'FRAME_COLUMNS',
    'CandleLoader',
    'load_candles',
]

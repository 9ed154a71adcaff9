"""Shared fixtures: synthetic candle series."""
import pytest

from confluence.shared.types import Candle

START_TIME = 1_700_000_000
STEP = 300


def build_candles(closes, volumes=None, spread=1.0, start=START_TIME, step=STEP):
    """Candles whose open is the previous close and whose wicks extend `spread` past the body."""
    candles = []
    prev_close = closes[0] if closes else 0.0
    for i, close in enumerate(closes):
        volume = 1000.0 if volumes is None else volumes[i]
        candles.append(Candle(
            time=start + step * i,
            open=prev_close,
            high=max(prev_close, close) + spread,
            low=min(prev_close, close) - spread,
            close=close,
            volume=volume,
        ))
        prev_close = close
    return candles


@pytest.fixture
def make_candles():
    return build_candles


@pytest.fixture
def bullish_short(make_candles):
    """Steady decline followed by a jump: bullish EMA crossover on the last bar."""
    return make_candles([120 - 0.5 * i for i in range(39)] + [140.0])


@pytest.fixture
def bearish_short(make_candles):
    """Steady rise followed by a drop: bearish EMA crossover on the last bar."""
    return make_candles([80 + 0.5 * i for i in range(39)] + [60.0])


@pytest.fixture
def flat_long(make_candles):
    """Higher timeframe series with its trend EMA at 100."""
    return make_candles([100.0] * 25, step=3600)

"""
Shared types for the signal engine.

This module consolidates the value types that flow between the indicator
library, the signal generator and its consumers: candles in, TradingSignal out.
Everything that leaves the generator is frozen so subscribers always see a
stable snapshot.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


class Direction(Enum):
    """Direction of a trading signal."""
    BUY = "BUY"
    SELL = "SELL"
    NEUTRAL = "NEUTRAL"


class SignalStrength(Enum):
    """Confidence tier of a trading signal."""
    WEAK = "WEAK"
    MODERATE = "MODERATE"
    STRONG = "STRONG"


class TrendBias(Enum):
    """Higher timeframe bias (short close vs long-timeframe EMA)."""
    UP = "UP"
    DOWN = "DOWN"


@dataclass(frozen=True)
class Candle:
    """One OHLCV bar. `time` is seconds since epoch; volume may be absent."""
    time: int
    open: float
    high: float
    low: float
    close: float
    volume: Optional[float] = None


@dataclass(frozen=True)
class IndicatorSnapshot:
    """Latest indicator values reported alongside a signal (None = not available)."""
    rsi: Optional[float] = None
    vwap: Optional[float] = None
    atr: Optional[float] = None
    ema9: Optional[float] = None
    ema21: Optional[float] = None

    def to_dict(self) -> Dict[str, Optional[float]]:
        return {
            'rsi': self.rsi,
            'vwap': self.vwap,
            'atr': self.atr,
            'ema9': self.ema9,
            'ema21': self.ema21,
        }


@dataclass(frozen=True)
class TradeParameters:
    """Entry, stop-loss and two profit targets for a STRONG signal."""
    entry: float
    stop_loss: float
    profit_target1: float
    profit_target2: float

    @property
    def risk_reward(self) -> Optional[float]:
        """Reward to first target per unit of risk; None when the stop sits on the entry."""
        risk = abs(self.entry - self.stop_loss)
        if risk == 0:
            return None
        return abs(self.profit_target1 - self.entry) / risk

    def to_dict(self) -> Dict[str, float]:
        return {
            'entry': self.entry,
            'stopLoss': self.stop_loss,
            'profitTarget1': self.profit_target1,
            'profitTarget2': self.profit_target2,
        }


@dataclass(frozen=True)
class TradingSignal:
    """
    A trading recommendation produced by one generator invocation.

    Immutable once produced: subscribers of the notification channel receive
    the same instance the caller gets back.
    """
    direction: Direction
    strength: SignalStrength
    timestamp: int  # milliseconds since epoch
    reason: str
    indicators: IndicatorSnapshot = field(default_factory=IndicatorSnapshot)
    trade_parameters: Optional[TradeParameters] = None  # STRONG signals only

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready representation (camelCase keys for UI consumers)."""
        out: Dict[str, Any] = {
            'direction': self.direction.value,
            'strength': self.strength.value,
            'indicators': self.indicators.to_dict(),
            'timestamp': self.timestamp,
            'reason': self.reason,
        }
        if self.trade_parameters is not None:
            out['tradeParameters'] = self.trade_parameters.to_dict()
        return out

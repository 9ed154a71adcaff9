"""
Two-timeframe confluence signal generator.

Combines short-timeframe indicators (RSI divergence, VWAP, EMA crossover,
ATR) with a higher timeframe trend bias into buy/sell scores, resolves a
direction and confidence tier, and derives ATR-based trade parameters for
STRONG signals.

Each call is a pure function of its two candle series; the only state a
generator holds is its config and the optional notification channel.
"""
import logging
import time
from typing import Callable, List, Optional

import pandas as pd

from ..data.frames import CandleInput, candles_to_frame
from ..indicators.divergence import detect_bearish_divergence, detect_bullish_divergence
from ..indicators.technical import TechnicalIndicators, ema
from ..shared.types import (
    Direction,
    IndicatorSnapshot,
    SignalStrength,
    TradingSignal,
)
from .channel import SignalChannel
from .config import DEFAULT_CONFIG, SignalConfig
from .rules import (
    MarketSnapshot,
    ScoreContribution,
    apply_trend_filter,
    build_trade_parameters,
    get_confluence_rules,
    is_market_healthy,
    resolve_direction,
)

logger = logging.getLogger(__name__)

HEALTH_PENALTY_REASON = "Volume or Volatility not optimal for strong signal."
INDICATOR_FAILURE_REASON = "Indicator calculation failed (null values)."
NO_CONFLUENCE_REASON = "No strong confluence detected."

REASON_PREFIXES = {
    (Direction.BUY, SignalStrength.STRONG): "Strong Buy Signal: ",
    (Direction.BUY, SignalStrength.MODERATE): "Moderate Buy Signal: ",
    (Direction.SELL, SignalStrength.STRONG): "Strong Sell Signal: ",
    (Direction.SELL, SignalStrength.MODERATE): "Moderate Sell Signal: ",
}


def _wall_clock_ms() -> int:
    return int(time.time() * 1000)


def _value(x) -> Optional[float]:
    """NaN/None -> None, anything else -> float."""
    if x is None or pd.isna(x):
        return None
    return float(x)


class SignalGenerator:
    """
    Generates one TradingSignal per call from a short and a long candle series.

    Insufficient history is not an error: the generator returns a NEUTRAL/WEAK
    signal whose reason names the unmet requirement.
    """

    def __init__(
        self,
        config: Optional[SignalConfig] = None,
        channel: Optional[SignalChannel] = None,
        clock: Optional[Callable[[], int]] = None,
    ):
        """
        Initialize the signal generator.

        Args:
            config: SignalConfig (default: DEFAULT_CONFIG)
            channel: Optional channel every produced signal is published to
            clock: Millisecond clock, used only to timestamp signals for an empty short series
        """
        self.config = config or DEFAULT_CONFIG
        self.channel = channel
        self.clock = clock or _wall_clock_ms
        self.technical_indicators = TechnicalIndicators(
            rsi_period=self.config.rsi_period,
            atr_period=self.config.atr_period,
            ema_fast_period=self.config.ema_fast_period,
            ema_slow_period=self.config.ema_slow_period,
            vwap_price_source=self.config.vwap_price_source,
        )
        self.rules = get_confluence_rules()

    def generate(self, short_candles: CandleInput, long_candles: CandleInput) -> TradingSignal:
        """
        Generate a signal and publish it to the channel (if any).

        Args:
            short_candles: Entry timeframe candles (e.g. 5-minute), oldest first
            long_candles: Bias timeframe candles (e.g. 1-hour), oldest first

        Returns:
            The produced TradingSignal
        """
        short = candles_to_frame(short_candles)
        long = candles_to_frame(long_candles)
        signal = self._generate(short, long)
        if self.channel is not None:
            self.channel.publish(signal)
        return signal

    def _generate(self, short: pd.DataFrame, long: pd.DataFrame) -> TradingSignal:
        config = self.config
        timestamp = int(short['Time'].iloc[-1]) * 1000 if len(short) else self.clock()

        need_short = config.min_short_candles
        if len(short) < need_short:
            reason = (
                f"Not enough short timeframe candle data for reliable signals "
                f"(need {need_short}, got {len(short)})."
            )
            logger.info(reason)
            return self._neutral(timestamp, reason)

        need_long = config.min_long_candles
        if len(long) < need_long:
            reason = (
                f"Not enough higher timeframe candle data for trend bias "
                f"(need {need_long}, got {len(long)})."
            )
            logger.info(reason)
            return self._neutral(timestamp, reason)

        snapshot = self.build_snapshot(short, long)
        indicators = self._indicator_snapshot(snapshot)
        if None in (snapshot.rsi, snapshot.vwap, snapshot.atr, snapshot.ema_fast, snapshot.ema_slow):
            logger.info(f"{INDICATOR_FAILURE_REASON} {indicators}")
            return self._neutral(timestamp, INDICATOR_FAILURE_REASON, indicators)

        return self.evaluate_snapshot(snapshot, timestamp)

    def build_snapshot(self, short_candles: CandleInput, long_candles: CandleInput) -> MarketSnapshot:
        """
        Compute the indicator state at the latest short-timeframe candle.

        Args:
            short_candles: Entry timeframe candles (non-empty)
            long_candles: Bias timeframe candles

        Returns:
            MarketSnapshot (values are None where history is too short)
        """
        config = self.config
        short = candles_to_frame(short_candles)
        long = candles_to_frame(long_candles)

        df = self.technical_indicators.calculate_all(short)
        closes = short['Close'].tolist()
        rsi_aligned = [_value(v) for v in df['rsi']]

        last = df.iloc[-1]
        prev = df.iloc[-2] if len(df) > 1 else None

        trend_values = ema(long['Close'].tolist(), config.trend_ema_period)
        trend_ema = trend_values[-1] if trend_values else None

        recent_volumes = short['Volume'].tail(config.volume_window).dropna()
        avg_volume = float(recent_volumes.mean()) if len(recent_volumes) else 0.0

        return MarketSnapshot(
            price=float(last['price']),
            rsi=_value(last['rsi']),
            vwap=_value(last['vwap']),
            atr=_value(last['atr']),
            ema_fast=_value(last['ema_fast']),
            ema_slow=_value(last['ema_slow']),
            prev_ema_fast=_value(prev['ema_fast']) if prev is not None else None,
            prev_ema_slow=_value(prev['ema_slow']) if prev is not None else None,
            trend_ema=trend_ema,
            bullish_divergence=detect_bullish_divergence(closes, rsi_aligned, config.divergence_lookback),
            bearish_divergence=detect_bearish_divergence(closes, rsi_aligned, config.divergence_lookback),
            volume=_value(last['volume']),
            avg_volume=avg_volume,
        )

    def evaluate_snapshot(self, snapshot: MarketSnapshot, timestamp: int) -> TradingSignal:
        """
        Score a snapshot and build the resulting signal.

        Args:
            snapshot: Indicator state at the latest candle
            timestamp: Signal timestamp in milliseconds

        Returns:
            TradingSignal with direction, strength, reason trace and, for
            STRONG signals, trade parameters
        """
        config = self.config
        buy: List[ScoreContribution] = []
        sell: List[ScoreContribution] = []
        for rule in self.rules:
            rule_buy, rule_sell = rule.evaluate(snapshot, config)
            buy.extend(rule_buy)
            sell.extend(rule_sell)
        buy, sell = apply_trend_filter(buy, sell, snapshot.trend_bias)

        reasons = [c.reason for c in buy] + [c.reason for c in sell]
        buy_score = sum(c.points for c in buy)
        sell_score = sum(c.points for c in sell)

        if not is_market_healthy(snapshot, config):
            if buy_score > 0:
                reasons.append(HEALTH_PENALTY_REASON)
                buy_score -= config.health_penalty
            if sell_score > 0:
                reasons.append(HEALTH_PENALTY_REASON)
                sell_score -= config.health_penalty

        direction, strength = resolve_direction(buy_score, sell_score, config)
        logger.debug(
            f"buy_score={buy_score:.2f} sell_score={sell_score:.2f} -> "
            f"{direction.value}/{strength.value}"
        )

        prefix = REASON_PREFIXES.get((direction, strength))
        if prefix is not None:
            reason = prefix + ", ".join(reasons)
        else:
            reason = "Neutral: " + (", ".join(reasons) if reasons else NO_CONFLUENCE_REASON)

        trade_parameters = None
        if strength == SignalStrength.STRONG and snapshot.atr is not None:
            trade_parameters = build_trade_parameters(direction, snapshot.price, snapshot.atr, config)

        return TradingSignal(
            direction=direction,
            strength=strength,
            timestamp=timestamp,
            reason=reason,
            indicators=self._indicator_snapshot(snapshot),
            trade_parameters=trade_parameters,
        )

    @staticmethod
    def _indicator_snapshot(snapshot: MarketSnapshot) -> IndicatorSnapshot:
        return IndicatorSnapshot(
            rsi=snapshot.rsi,
            vwap=snapshot.vwap,
            atr=snapshot.atr,
            ema9=snapshot.ema_fast,
            ema21=snapshot.ema_slow,
        )

    @staticmethod
    def _neutral(
        timestamp: int,
        reason: str,
        indicators: Optional[IndicatorSnapshot] = None,
    ) -> TradingSignal:
        return TradingSignal(
            direction=Direction.NEUTRAL,
            strength=SignalStrength.WEAK,
            timestamp=timestamp,
            reason=reason,
            indicators=indicators or IndicatorSnapshot(),
        )


def generate_signal(
    short_candles: CandleInput,
    long_candles: CandleInput,
    config: Optional[SignalConfig] = None,
    channel: Optional[SignalChannel] = None,
) -> TradingSignal:
    """Convenience wrapper: SignalGenerator(config, channel).generate(short, long)."""
    return SignalGenerator(config=config, channel=channel).generate(short_candles, long_candles)

"""
Pluggable confluence rules.

Rules turn a MarketSnapshot into buy/sell score contributions (reason clause
plus points); the generator merges contributions in rule order, drops the ones
that go against the higher timeframe bias, applies the health gate and
resolves direction. New rules can be added without changing generator logic.
"""
from dataclasses import dataclass
from typing import List, NamedTuple, Optional, Protocol, Tuple

from ..shared.types import Direction, SignalStrength, TrendBias, TradeParameters
from .config import SignalConfig


@dataclass(frozen=True)
class MarketSnapshot:
    """Indicator state at the latest short-timeframe candle."""
    price: float
    rsi: Optional[float]
    vwap: Optional[float]
    atr: Optional[float]
    ema_fast: Optional[float]
    ema_slow: Optional[float]
    prev_ema_fast: Optional[float]
    prev_ema_slow: Optional[float]
    trend_ema: Optional[float]
    bullish_divergence: bool = False
    bearish_divergence: bool = False
    volume: Optional[float] = None
    avg_volume: float = 0.0

    @property
    def trend_bias(self) -> Optional[TrendBias]:
        """UP if price is above the higher timeframe EMA, else DOWN; None without an EMA."""
        if self.trend_ema is None:
            return None
        return TrendBias.UP if self.price > self.trend_ema else TrendBias.DOWN

    @property
    def ema_bullish_cross(self) -> bool:
        """Fast EMA crossed above slow EMA on this bar."""
        if None in (self.ema_fast, self.ema_slow, self.prev_ema_fast, self.prev_ema_slow):
            return False
        return self.ema_fast > self.ema_slow and self.prev_ema_fast <= self.prev_ema_slow

    @property
    def ema_bearish_cross(self) -> bool:
        """Fast EMA crossed below slow EMA on this bar."""
        if None in (self.ema_fast, self.ema_slow, self.prev_ema_fast, self.prev_ema_slow):
            return False
        return self.ema_fast < self.ema_slow and self.prev_ema_fast >= self.prev_ema_slow


class ScoreContribution(NamedTuple):
    """One reason clause and the points it adds to a side's score."""
    reason: str
    points: float


Contributions = Tuple[List[ScoreContribution], List[ScoreContribution]]


class ConfluenceRule(Protocol):
    """Protocol for a rule that evaluates the snapshot and returns buy/sell contributions."""

    def evaluate(self, snapshot: MarketSnapshot, config: SignalConfig) -> Contributions:
        """
        Evaluate rule at the latest bar.

        Args:
            snapshot: Indicator state at the latest candle
            config: SignalConfig with weights and thresholds

        Returns:
            (buy_contributions, sell_contributions); either list may be empty
        """
        ...


class TrendBiasRule:
    """Higher timeframe bias: +weight to the side matching the bias."""

    def evaluate(self, snapshot: MarketSnapshot, config: SignalConfig) -> Contributions:
        bias = snapshot.trend_bias
        if bias == TrendBias.UP:
            return [ScoreContribution("HTF Trend: UP", config.trend_bias_weight)], []
        if bias == TrendBias.DOWN:
            return [], [ScoreContribution("HTF Trend: DOWN", config.trend_bias_weight)]
        return [], []


class VwapRule:
    """Price on the favorable side of VWAP, or just under it as a pullback entry."""

    def evaluate(self, snapshot: MarketSnapshot, config: SignalConfig) -> Contributions:
        buy: List[ScoreContribution] = []
        sell: List[ScoreContribution] = []
        if snapshot.vwap is None:
            return buy, sell
        price, vwap = snapshot.price, snapshot.vwap
        band = config.vwap_near_band_pct

        if price > vwap:
            buy.append(ScoreContribution("Price above VWAP (intraday bullish bias)", config.vwap_weight))
        elif vwap * (1 - band) < price < vwap:
            buy.append(ScoreContribution("Price near VWAP (potential pullback entry)", config.vwap_near_weight))

        if price < vwap:
            sell.append(ScoreContribution("Price below VWAP (intraday bearish bias)", config.vwap_weight))
        elif price < vwap * (1 + band):
            sell.append(ScoreContribution("Price near VWAP (potential pullback entry)", config.vwap_near_weight))
        return buy, sell


class DivergenceRule:
    """RSI divergence against the prior lookback extreme."""

    def evaluate(self, snapshot: MarketSnapshot, config: SignalConfig) -> Contributions:
        buy: List[ScoreContribution] = []
        sell: List[ScoreContribution] = []
        if snapshot.bullish_divergence:
            buy.append(ScoreContribution(
                "Bullish RSI Divergence detected (momentum fading for sellers)", config.divergence_weight,
            ))
        if snapshot.bearish_divergence:
            sell.append(ScoreContribution(
                "Bearish RSI Divergence detected (momentum fading for buyers)", config.divergence_weight,
            ))
        return buy, sell


class EmaCrossoverRule:
    """Fast/slow EMA crossover on the latest bar (ordering alone does not count)."""

    def evaluate(self, snapshot: MarketSnapshot, config: SignalConfig) -> Contributions:
        buy: List[ScoreContribution] = []
        sell: List[ScoreContribution] = []
        fast, slow = config.ema_fast_period, config.ema_slow_period
        if snapshot.ema_bullish_cross:
            buy.append(ScoreContribution(
                f"Bullish EMA Crossover ({fast} EMA > {slow} EMA)", config.ema_crossover_weight,
            ))
        if snapshot.ema_bearish_cross:
            sell.append(ScoreContribution(
                f"Bearish EMA Crossover ({fast} EMA < {slow} EMA)", config.ema_crossover_weight,
            ))
        return buy, sell


def get_confluence_rules() -> List[ConfluenceRule]:
    """
    Return the confluence rules in evaluation order.

    Order: trend bias, VWAP, divergence, EMA crossover. The order is visible
    in the reason text of every signal.
    """
    return [TrendBiasRule(), VwapRule(), DivergenceRule(), EmaCrossoverRule()]


def apply_trend_filter(
    buy: List[ScoreContribution],
    sell: List[ScoreContribution],
    bias: Optional[TrendBias],
) -> Tuple[List[ScoreContribution], List[ScoreContribution]]:
    """Drop buy contributions in a DOWN bias and sell contributions in an UP bias (none without a bias)."""
    if bias == TrendBias.UP:
        return buy, []
    if bias == TrendBias.DOWN:
        return [], sell
    return [], []


def is_market_healthy(snapshot: MarketSnapshot, config: SignalConfig) -> bool:
    """
    Volume and volatility health gate.

    Volume is healthy when the latest volume is present and exceeds
    volume_health_ratio x the trailing average; volatility is healthy when ATR
    exceeds min_atr_pct of price. Both must hold.
    """
    volume_ok = (
        snapshot.volume is not None
        and snapshot.volume > snapshot.avg_volume * config.volume_health_ratio
    )
    volatility_ok = (
        snapshot.atr is not None
        and snapshot.atr > snapshot.price * config.min_atr_pct
    )
    return volume_ok and volatility_ok


def resolve_direction(
    buy_score: float,
    sell_score: float,
    config: SignalConfig,
) -> Tuple[Direction, SignalStrength]:
    """
    Resolve final direction and strength from the two scores.

    The winning side must be strictly ahead; ties and scores below
    moderate_threshold resolve to NEUTRAL/WEAK.
    """
    if buy_score > sell_score:
        direction, score = Direction.BUY, buy_score
    elif sell_score > buy_score:
        direction, score = Direction.SELL, sell_score
    else:
        return Direction.NEUTRAL, SignalStrength.WEAK

    if score >= config.strong_threshold:
        return direction, SignalStrength.STRONG
    if score >= config.moderate_threshold:
        return direction, SignalStrength.MODERATE
    return Direction.NEUTRAL, SignalStrength.WEAK


def build_trade_parameters(
    direction: Direction,
    entry: float,
    atr: float,
    config: SignalConfig,
) -> Optional[TradeParameters]:
    """
    Stop-loss and targets as ATR multiples around the entry.

    BUY: stop below, targets above; SELL mirrored. The second target is twice
    the first target's distance. None for NEUTRAL.
    """
    stop_distance = atr * config.stop_atr_multiplier
    target_distance = atr * config.target_atr_multiplier
    if direction == Direction.BUY:
        return TradeParameters(
            entry=entry,
            stop_loss=entry - stop_distance,
            profit_target1=entry + target_distance,
            profit_target2=entry + target_distance * 2,
        )
    if direction == Direction.SELL:
        return TradeParameters(
            entry=entry,
            stop_loss=entry + stop_distance,
            profit_target1=entry - target_distance,
            profit_target2=entry - target_distance * 2,
        )
    return None

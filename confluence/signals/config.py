"""
Signal generator configuration.

Holds indicator periods, confluence weights, resolution thresholds, health
gate limits and trade parameter multipliers. Config validation runs at
construction time (fail fast with clear errors).
"""
from dataclasses import dataclass

from ..shared.defaults import (
    RSI_PERIOD, DIVERGENCE_LOOKBACK, ATR_PERIOD,
    EMA_FAST_PERIOD, EMA_SLOW_PERIOD, TREND_EMA_PERIOD,
    VWAP_PRICE_SOURCE, VWAP_NEAR_BAND_PCT,
    TREND_BIAS_WEIGHT, VWAP_WEIGHT, VWAP_NEAR_WEIGHT,
    DIVERGENCE_WEIGHT, EMA_CROSSOVER_WEIGHT, HEALTH_PENALTY,
    STRONG_THRESHOLD, MODERATE_THRESHOLD,
    VOLUME_WINDOW, VOLUME_HEALTH_RATIO, MIN_ATR_PCT,
    STOP_ATR_MULTIPLIER, TARGET_ATR_MULTIPLIER,
)

VWAP_PRICE_SOURCES = ("close", "typical")


def _validate_config(config: "SignalConfig") -> None:
    """Validate indicator, scoring and risk parameters. Raises ValueError with clear message on failure."""
    if config.rsi_period < 1:
        raise ValueError(f"rsi_period must be >= 1, got {config.rsi_period}")
    if config.atr_period < 1:
        raise ValueError(f"atr_period must be >= 1, got {config.atr_period}")
    if config.divergence_lookback < 1:
        raise ValueError(f"divergence_lookback must be >= 1, got {config.divergence_lookback}")
    for name in ("ema_fast_period", "ema_slow_period", "trend_ema_period"):
        value = getattr(config, name)
        if value < 2:
            raise ValueError(f"{name} must be >= 2, got {value}")
    if config.ema_fast_period >= config.ema_slow_period:
        raise ValueError(
            f"EMA fast period ({config.ema_fast_period}) must be less than slow period ({config.ema_slow_period})"
        )
    if config.vwap_price_source not in VWAP_PRICE_SOURCES:
        raise ValueError(
            f"vwap_price_source must be one of {VWAP_PRICE_SOURCES}, got {config.vwap_price_source!r}"
        )
    if not (0 <= config.vwap_near_band_pct < 1):
        raise ValueError(f"vwap_near_band_pct must be in [0, 1), got {config.vwap_near_band_pct}")
    for name in (
        "trend_bias_weight", "vwap_weight", "vwap_near_weight",
        "divergence_weight", "ema_crossover_weight", "health_penalty",
    ):
        value = getattr(config, name)
        if value < 0:
            raise ValueError(f"{name} must be >= 0, got {value}")
    if config.moderate_threshold <= 0:
        raise ValueError(f"moderate_threshold must be > 0, got {config.moderate_threshold}")
    if config.moderate_threshold > config.strong_threshold:
        raise ValueError(
            f"moderate_threshold ({config.moderate_threshold}) must not exceed "
            f"strong_threshold ({config.strong_threshold})"
        )
    if config.volume_window < 1:
        raise ValueError(f"volume_window must be >= 1, got {config.volume_window}")
    if config.volume_health_ratio < 0:
        raise ValueError(f"volume_health_ratio must be >= 0, got {config.volume_health_ratio}")
    if config.min_atr_pct < 0:
        raise ValueError(f"min_atr_pct must be >= 0, got {config.min_atr_pct}")
    if config.stop_atr_multiplier <= 0:
        raise ValueError(f"stop_atr_multiplier must be > 0, got {config.stop_atr_multiplier}")
    if config.target_atr_multiplier <= 0:
        raise ValueError(f"target_atr_multiplier must be > 0, got {config.target_atr_multiplier}")


@dataclass(frozen=True)
class SignalConfig:
    """Configuration for two-timeframe confluence signal generation."""
    name: str = "default"
    description: str = ""

    # Short timeframe indicators
    rsi_period: int = RSI_PERIOD
    divergence_lookback: int = DIVERGENCE_LOOKBACK
    atr_period: int = ATR_PERIOD
    ema_fast_period: int = EMA_FAST_PERIOD
    ema_slow_period: int = EMA_SLOW_PERIOD
    vwap_price_source: str = VWAP_PRICE_SOURCE

    # Long timeframe bias
    trend_ema_period: int = TREND_EMA_PERIOD

    # Confluence weights
    trend_bias_weight: float = TREND_BIAS_WEIGHT
    vwap_weight: float = VWAP_WEIGHT
    vwap_near_weight: float = VWAP_NEAR_WEIGHT
    vwap_near_band_pct: float = VWAP_NEAR_BAND_PCT
    divergence_weight: float = DIVERGENCE_WEIGHT
    ema_crossover_weight: float = EMA_CROSSOVER_WEIGHT

    # Resolution
    strong_threshold: float = STRONG_THRESHOLD
    moderate_threshold: float = MODERATE_THRESHOLD

    # Volume / volatility health gate
    volume_window: int = VOLUME_WINDOW
    volume_health_ratio: float = VOLUME_HEALTH_RATIO
    min_atr_pct: float = MIN_ATR_PCT
    health_penalty: float = HEALTH_PENALTY

    # Trade parameters
    stop_atr_multiplier: float = STOP_ATR_MULTIPLIER
    target_atr_multiplier: float = TARGET_ATR_MULTIPLIER

    def __post_init__(self) -> None:
        _validate_config(self)

    @property
    def min_short_candles(self) -> int:
        """Short series length needed for RSI, divergence lookback and ATR."""
        return max(self.rsi_period + 1, self.divergence_lookback, self.atr_period)

    @property
    def min_long_candles(self) -> int:
        """Long series length needed for the trend EMA."""
        return self.trend_ema_period


DEFAULT_CONFIG = SignalConfig()

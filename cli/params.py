#!/usr/bin/env python3
"""
Parameter reference CLI.

Shows all configurable signal parameters, their YAML keys, and defaults.
"""
import sys

from confluence.shared.defaults import (
    RSI_PERIOD, DIVERGENCE_LOOKBACK, ATR_PERIOD,
    EMA_FAST_PERIOD, EMA_SLOW_PERIOD, TREND_EMA_PERIOD,
    VWAP_PRICE_SOURCE, VWAP_NEAR_BAND_PCT,
    TREND_BIAS_WEIGHT, VWAP_WEIGHT, VWAP_NEAR_WEIGHT,
    DIVERGENCE_WEIGHT, EMA_CROSSOVER_WEIGHT, HEALTH_PENALTY,
    STRONG_THRESHOLD, MODERATE_THRESHOLD,
    VOLUME_WINDOW, VOLUME_HEALTH_RATIO, MIN_ATR_PCT,
    STOP_ATR_MULTIPLIER, TARGET_ATR_MULTIPLIER,
)


def main():
    """Print all configurable parameters with their defaults."""

    print("=" * 80)
    print("CONFLUENCE SIGNAL PARAMETER REFERENCE")
    print("=" * 80)
    print()

    print("INDICATORS (short timeframe)")
    print("-" * 80)
    print(f"  indicators.rsi.period            RSI period: {RSI_PERIOD} (default)")
    print(f"  indicators.divergence.lookback   Bars scanned for the prior extreme: {DIVERGENCE_LOOKBACK}")
    print(f"  indicators.atr.period            ATR period: {ATR_PERIOD}")
    print(f"  indicators.ema.fast_period       Fast EMA: {EMA_FAST_PERIOD}")
    print(f"  indicators.ema.slow_period       Slow EMA: {EMA_SLOW_PERIOD}")
    print("                                   Note: fast period must be < slow period")
    print(f"  indicators.vwap.price_source     'close' or 'typical': {VWAP_PRICE_SOURCE}")
    print(f"  indicators.vwap.near_band_pct    Pullback band below/above VWAP: {VWAP_NEAR_BAND_PCT}")
    print()

    print("TREND BIAS (higher timeframe)")
    print("-" * 80)
    print(f"  indicators.trend.ema_period      EMA period: {TREND_EMA_PERIOD}")
    print("                                   Also the minimum number of higher timeframe candles")
    print()

    print("SCORING")
    print("-" * 80)
    print(f"  scoring.weights.trend_bias       {TREND_BIAS_WEIGHT}")
    print(f"  scoring.weights.vwap             {VWAP_WEIGHT}")
    print(f"  scoring.weights.vwap_near        {VWAP_NEAR_WEIGHT}")
    print(f"  scoring.weights.divergence       {DIVERGENCE_WEIGHT}")
    print(f"  scoring.weights.ema_crossover    {EMA_CROSSOVER_WEIGHT}")
    print(f"  scoring.strong_threshold         {STRONG_THRESHOLD}")
    print(f"  scoring.moderate_threshold       {MODERATE_THRESHOLD}")
    print()

    print("HEALTH GATE")
    print("-" * 80)
    print(f"  health.volume_window             Trailing candles for average volume: {VOLUME_WINDOW}")
    print(f"  health.volume_ratio              Latest volume must exceed ratio x average: {VOLUME_HEALTH_RATIO}")
    print(f"  health.min_atr_pct               ATR must exceed this fraction of price: {MIN_ATR_PCT}")
    print(f"  health.penalty                   Subtracted from positive scores on failure: {HEALTH_PENALTY}")
    print()

    print("RISK (STRONG signals only)")
    print("-" * 80)
    print(f"  risk.stop_atr_multiplier         Stop distance in ATR: {STOP_ATR_MULTIPLIER}")
    print(f"  risk.target_atr_multiplier       First target distance in ATR: {TARGET_ATR_MULTIPLIER}")
    print("                                   Second target is twice the first target distance")
    print()

    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
YAML configuration loader for the signal generator.

Loads SignalConfig from YAML files, allowing thresholds and weights to be
tuned without code changes. Missing keys fall back to shared.defaults.
"""
import yaml
from pathlib import Path
from typing import Union

from .config import SignalConfig
from ..shared.defaults import *


def load_config_from_yaml(yaml_path: Union[str, Path]) -> SignalConfig:
    """
    Load signal configuration from YAML file.

    Args:
        yaml_path: Path to YAML configuration file

    Returns:
        SignalConfig object

    Raises:
        FileNotFoundError: If YAML file doesn't exist
        ValueError: If YAML is empty or contains invalid values
    """
    yaml_path = Path(yaml_path)

    if not yaml_path.exists():
        raise FileNotFoundError(f"Config file not found: {yaml_path}")

    with open(yaml_path, 'r') as f:
        config_dict = yaml.safe_load(f)

    if not config_dict:
        raise ValueError(f"Empty config file: {yaml_path}")
    if not isinstance(config_dict, dict):
        raise ValueError(f"Config file must contain a mapping: {yaml_path}")

    name = config_dict.get('name', yaml_path.stem)
    description = config_dict.get('description', '')

    # Indicators
    indicators = config_dict.get('indicators', {})
    rsi = indicators.get('rsi', {})
    ema = indicators.get('ema', {})
    atr = indicators.get('atr', {})
    trend = indicators.get('trend', {})
    divergence = indicators.get('divergence', {})
    vwap = indicators.get('vwap', {})

    # Scoring
    scoring = config_dict.get('scoring', {})
    weights = scoring.get('weights', {})

    # Health gate
    health = config_dict.get('health', {})

    # Risk management
    risk = config_dict.get('risk', {})

    return SignalConfig(
        name=name,
        description=description,

        rsi_period=rsi.get('period', RSI_PERIOD),
        divergence_lookback=divergence.get('lookback', DIVERGENCE_LOOKBACK),
        atr_period=atr.get('period', ATR_PERIOD),
        ema_fast_period=ema.get('fast_period', EMA_FAST_PERIOD),
        ema_slow_period=ema.get('slow_period', EMA_SLOW_PERIOD),
        vwap_price_source=vwap.get('price_source', VWAP_PRICE_SOURCE),
        vwap_near_band_pct=vwap.get('near_band_pct', VWAP_NEAR_BAND_PCT),
        trend_ema_period=trend.get('ema_period', TREND_EMA_PERIOD),

        trend_bias_weight=weights.get('trend_bias', TREND_BIAS_WEIGHT),
        vwap_weight=weights.get('vwap', VWAP_WEIGHT),
        vwap_near_weight=weights.get('vwap_near', VWAP_NEAR_WEIGHT),
        divergence_weight=weights.get('divergence', DIVERGENCE_WEIGHT),
        ema_crossover_weight=weights.get('ema_crossover', EMA_CROSSOVER_WEIGHT),
        strong_threshold=scoring.get('strong_threshold', STRONG_THRESHOLD),
        moderate_threshold=scoring.get('moderate_threshold', MODERATE_THRESHOLD),

        volume_window=health.get('volume_window', VOLUME_WINDOW),
        volume_health_ratio=health.get('volume_ratio', VOLUME_HEALTH_RATIO),
        min_atr_pct=health.get('min_atr_pct', MIN_ATR_PCT),
        health_penalty=health.get('penalty', HEALTH_PENALTY),

        stop_atr_multiplier=risk.get('stop_atr_multiplier', STOP_ATR_MULTIPLIER),
        target_atr_multiplier=risk.get('target_atr_multiplier', TARGET_ATR_MULTIPLIER),
    )


def save_config_to_yaml(config: SignalConfig, yaml_path: Union[str, Path]):
    """
    Save signal configuration to YAML file.

    Args:
        config: SignalConfig object to save
        yaml_path: Path where to save YAML file
    """
    yaml_path = Path(yaml_path)

    # Build nested structure
    config_dict = {
        'name': config.name,
        'description': config.description,

        'indicators': {
            'rsi': {'period': config.rsi_period},
            'ema': {
                'fast_period': config.ema_fast_period,
                'slow_period': config.ema_slow_period,
            },
            'atr': {'period': config.atr_period},
            'trend': {'ema_period': config.trend_ema_period},
            'divergence': {'lookback': config.divergence_lookback},
            'vwap': {
                'price_source': config.vwap_price_source,
                'near_band_pct': config.vwap_near_band_pct,
            },
        },

        'scoring': {
            'strong_threshold': config.strong_threshold,
            'moderate_threshold': config.moderate_threshold,
            'weights': {
                'trend_bias': config.trend_bias_weight,
                'vwap': config.vwap_weight,
                'vwap_near': config.vwap_near_weight,
                'divergence': config.divergence_weight,
                'ema_crossover': config.ema_crossover_weight,
            },
        },

        'health': {
            'volume_window': config.volume_window,
            'volume_ratio': config.volume_health_ratio,
            'min_atr_pct': config.min_atr_pct,
            'penalty': config.health_penalty,
        },

        'risk': {
            'stop_atr_multiplier': config.stop_atr_multiplier,
            'target_atr_multiplier': config.target_atr_multiplier,
        },
    }

    # Ensure parent directory exists
    yaml_path.parent.mkdir(parents=True, exist_ok=True)

    # Write YAML
    with open(yaml_path, 'w') as f:
        yaml.dump(config_dict, f, default_flow_style=False, sort_keys=False)

"""
Signal generation module.

Two-timeframe confluence signal generator: short-timeframe indicators and a
higher timeframe trend bias are scored by pluggable rules, resolved into a
direction and confidence tier, and broadcast through a notification channel.
"""
from .generator import SignalGenerator, generate_signal
from .config import SignalConfig, DEFAULT_CONFIG
from .config_loader import load_config_from_yaml, save_config_to_yaml
from .channel import SignalChannel
from .describe import describe_signal, format_trade_plan
from .rules import (
    MarketSnapshot,
    ScoreContribution,
    ConfluenceRule,
    TrendBiasRule,
    VwapRule,
    DivergenceRule,
    EmaCrossoverRule,
    get_confluence_rules,
    apply_trend_filter,
    is_market_healthy,
    resolve_direction,
    build_trade_parameters,
)

__all__ = [
    'SignalGenerator',
    'generate_signal',
    'SignalConfig',
    'DEFAULT_CONFIG',
    'load_config_from_yaml',
    'save_config_to_yaml',
    'SignalChannel',
    'describe_signal',
    'format_trade_plan',
    'MarketSnapshot',
    'ScoreContribution',
    'ConfluenceRule',
    'TrendBiasRule',
    'VwapRule',
    'DivergenceRule',
    'EmaCrossoverRule',
    'get_confluence_rules',
    'apply_trend_filter',
    'is_market_healthy',
    'resolve_direction',
    'build_trade_parameters',
]

"""Human-readable rendering of trading signals."""
from typing import List

from ..shared.types import Direction, TradeParameters, TradingSignal

NEUTRAL_DESCRIPTION = "Neutral market conditions. No strong trading signals detected."

_INDICATOR_LABELS = (
    ('rsi', 'RSI'),
    ('vwap', 'VWAP'),
    ('atr', 'ATR'),
    ('ema9', 'EMA9'),
    ('ema21', 'EMA21'),
)


def describe_signal(signal: TradingSignal) -> str:
    """
    Describe a signal in one line.

    NEUTRAL signals are described by their reason. Otherwise:
    "STRONG BUY signal (RSI at 61.20, VWAP at 101.50, ...). Reason: ..."
    """
    if signal.direction == Direction.NEUTRAL:
        return signal.reason or NEUTRAL_DESCRIPTION

    parts = []
    for attr, label in _INDICATOR_LABELS:
        value = getattr(signal.indicators, attr)
        if value is not None:
            parts.append(f"{label} at {value:.2f}")
    indicators_text = f" ({', '.join(parts)})" if parts else ""

    return (
        f"{signal.strength.value} {signal.direction.value} signal{indicators_text}. "
        f"Reason: {signal.reason or 'N/A'}"
    )


def format_trade_plan(params: TradeParameters) -> List[str]:
    """Trade plan lines: entry, stop, targets and risk/reward."""
    lines = [
        f"Entry: ~{params.entry:.2f}",
        f"Stop-loss: {params.stop_loss:.2f}",
        f"Target 1: {params.profit_target1:.2f}",
        f"Target 2: {params.profit_target2:.2f}",
    ]
    if params.risk_reward is not None:
        lines.append(f"Risk/Reward: {params.risk_reward:.1f}")
    return lines

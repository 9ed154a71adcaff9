#!/usr/bin/env python3
"""
Trade recommendation CLI.

Runs the two-timeframe confluence generator over a short-timeframe and a
higher-timeframe candle CSV and prints the resulting signal.
"""
import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

from confluence.data.loader import load_candles
from confluence.shared.sessions import session_for_timestamp
from confluence.shared.types import TradingSignal
from confluence.signals.channel import SignalChannel
from confluence.signals.config import SignalConfig
from confluence.signals.config_loader import load_config_from_yaml
from confluence.signals.describe import describe_signal, format_trade_plan
from confluence.signals.generator import SignalGenerator

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """
    Setup logging to stdout.

    Args:
        verbose: If True, use DEBUG level, otherwise WARNING
    """
    level = logging.DEBUG if verbose else logging.WARNING

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)


def log_signal(signal: TradingSignal) -> None:
    """Channel subscriber: log every generated signal."""
    logger.info(f"Signal published: {describe_signal(signal)}")


def format_signal_output(signal: TradingSignal) -> str:
    """Format a signal for display."""
    lines = []

    lines.append("Signal:")
    lines.append(f"  Direction: {signal.direction.value}")
    lines.append(f"  Strength: {signal.strength.value}")

    signal_time = datetime.fromtimestamp(signal.timestamp / 1000, tz=timezone.utc)
    session = session_for_timestamp(signal.timestamp // 1000)
    lines.append(
        f"  Time: {signal_time:%Y-%m-%d %H:%M} UTC" + (f" ({session} session)" if session else "")
    )

    for name, value in signal.indicators.to_dict().items():
        if value is not None:
            lines.append(f"  {name.upper()}: {value:.2f}")

    if signal.trade_parameters is not None:
        for line in format_trade_plan(signal.trade_parameters):
            lines.append(f"  {line}")

    lines.append(f"  Reasoning: {signal.reason}")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None):
    """Main entry point for the trade recommendation."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Generate a confluence trading signal from two candle CSV files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # 5-minute entries with 1-hour bias
    python -m cli.recommend --short data/btc_5m.csv --long data/btc_1h.csv

    # Custom thresholds, JSON output
    python -m cli.recommend --short s.csv --long l.csv --config configs/default.yaml --json
        """
    )
    parser.add_argument("--short", required=True, help="CSV with entry timeframe candles")
    parser.add_argument("--long", required=True, help="CSV with higher timeframe candles")
    parser.add_argument("--config", type=str, help="YAML signal config (default: built-in defaults)")
    parser.add_argument("--json", action="store_true", help="Print the signal as JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging (DEBUG level)")

    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if args.config:
        try:
            config = load_config_from_yaml(Path(args.config))
        except (FileNotFoundError, ValueError) as e:
            print(f"Error loading config: {e}", file=sys.stderr)
            return 1
    else:
        config = SignalConfig()

    try:
        short_candles = load_candles(args.short)
        long_candles = load_candles(args.long)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error loading candles: {e}", file=sys.stderr)
        return 1

    channel = SignalChannel()
    channel.subscribe(log_signal)
    generator = SignalGenerator(config=config, channel=channel)
    signal = generator.generate(short_candles, long_candles)

    if args.json:
        print(json.dumps(signal.to_dict(), indent=2))
    else:
        print("=" * 60)
        print(f"CONFLUENCE SIGNAL ({config.name})")
        print("=" * 60)
        print(f"Short candles: {len(short_candles)}  Long candles: {len(long_candles)}")
        print()
        print(format_signal_output(signal))
        print()

    return 0


if __name__ == "__main__":
    sys.exit(main())

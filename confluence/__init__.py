"""
Confluence signal engine.

Provides unified interfaces for:
- Candle handling (frames, CSV loading for the CLI)
- Indicator calculations (SMA, EMA, RSI, MACD, VWAP, ATR, RSI divergence)
- Two-timeframe signal generation with trade parameters
- Signal notification (publish/subscribe)
"""

"""
Unified CLI entry points.

Provides command-line interfaces for:
- Signal generation from candle CSV files (recommend)
- Parameter reference (params)
"""

"""
Tests for signal configuration and the YAML loader.
"""
import dataclasses

import pytest
import yaml

from confluence.shared.defaults import (
    RSI_PERIOD, DIVERGENCE_LOOKBACK, ATR_PERIOD,
    EMA_FAST_PERIOD, EMA_SLOW_PERIOD, TREND_EMA_PERIOD,
    STRONG_THRESHOLD, MODERATE_THRESHOLD,
)
from confluence.signals.config import DEFAULT_CONFIG, SignalConfig
from confluence.signals.config_loader import load_config_from_yaml, save_config_to_yaml


class TestSignalConfig:
    """Test SignalConfig dataclass."""

    def test_default_config_uses_defaults(self):
        assert isinstance(DEFAULT_CONFIG, SignalConfig)
        assert DEFAULT_CONFIG.rsi_period == RSI_PERIOD
        assert DEFAULT_CONFIG.divergence_lookback == DIVERGENCE_LOOKBACK
        assert DEFAULT_CONFIG.atr_period == ATR_PERIOD
        assert DEFAULT_CONFIG.ema_fast_period == EMA_FAST_PERIOD
        assert DEFAULT_CONFIG.ema_slow_period == EMA_SLOW_PERIOD
        assert DEFAULT_CONFIG.trend_ema_period == TREND_EMA_PERIOD
        assert DEFAULT_CONFIG.strong_threshold == STRONG_THRESHOLD
        assert DEFAULT_CONFIG.moderate_threshold == MODERATE_THRESHOLD

    def test_minimum_history(self):
        """Defaults need 20 short candles and 20 long candles."""
        assert DEFAULT_CONFIG.min_short_candles == 20
        assert DEFAULT_CONFIG.min_long_candles == 20

    def test_minimum_history_follows_periods(self):
        config = SignalConfig(rsi_period=30, trend_ema_period=50)
        assert config.min_short_candles == 31
        assert config.min_long_candles == 50

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_CONFIG.strong_threshold = 1.0


class TestConfigValidation:
    """Config validation fails fast with clear errors."""

    def test_ema_fast_must_be_less_than_slow(self):
        with pytest.raises(ValueError, match="EMA fast period.*must be less than slow period"):
            SignalConfig(ema_fast_period=21, ema_slow_period=9)

    def test_moderate_must_not_exceed_strong(self):
        with pytest.raises(ValueError, match="must not exceed strong_threshold"):
            SignalConfig(strong_threshold=2.0, moderate_threshold=3.0)

    def test_periods_must_be_positive(self):
        with pytest.raises(ValueError, match="rsi_period must be >= 1"):
            SignalConfig(rsi_period=0)
        with pytest.raises(ValueError, match="atr_period must be >= 1"):
            SignalConfig(atr_period=0)
        with pytest.raises(ValueError, match="trend_ema_period must be >= 2"):
            SignalConfig(trend_ema_period=1)

    def test_price_source(self):
        with pytest.raises(ValueError, match="vwap_price_source"):
            SignalConfig(vwap_price_source="open")
        assert SignalConfig(vwap_price_source="typical").vwap_price_source == "typical"

    def test_weights_must_be_non_negative(self):
        with pytest.raises(ValueError, match="divergence_weight must be >= 0"):
            SignalConfig(divergence_weight=-1)

    def test_risk_multipliers_must_be_positive(self):
        with pytest.raises(ValueError, match="stop_atr_multiplier must be > 0"):
            SignalConfig(stop_atr_multiplier=0)
        with pytest.raises(ValueError, match="target_atr_multiplier must be > 0"):
            SignalConfig(target_atr_multiplier=-2.0)


class TestConfigLoader:
    """Test YAML loading and saving."""

    def test_round_trip(self, tmp_path):
        config = SignalConfig(
            name="tuned",
            description="tighter thresholds",
            rsi_period=10,
            ema_fast_period=5,
            ema_slow_period=13,
            vwap_price_source="typical",
            strong_threshold=3.5,
            moderate_threshold=2.0,
            volume_window=20,
            stop_atr_multiplier=2.0,
        )
        path = tmp_path / "nested" / "tuned.yaml"
        save_config_to_yaml(config, path)

        assert path.exists()
        assert load_config_from_yaml(path) == config

    def test_saved_layout(self, tmp_path):
        path = tmp_path / "default.yaml"
        save_config_to_yaml(DEFAULT_CONFIG, path)
        data = yaml.safe_load(path.read_text())

        assert data['indicators']['rsi']['period'] == RSI_PERIOD
        assert data['scoring']['weights']['divergence'] == DEFAULT_CONFIG.divergence_weight
        assert data['health']['volume_ratio'] == DEFAULT_CONFIG.volume_health_ratio
        assert data['risk']['stop_atr_multiplier'] == DEFAULT_CONFIG.stop_atr_multiplier

    def test_partial_file_uses_defaults(self, tmp_path):
        path = tmp_path / "partial.yaml"
        path.write_text("scoring:\n  strong_threshold: 5.0\n")
        config = load_config_from_yaml(path)

        assert config.name == "partial"
        assert config.strong_threshold == 5.0
        assert config.moderate_threshold == MODERATE_THRESHOLD
        assert config.rsi_period == RSI_PERIOD

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config_from_yaml(tmp_path / "missing.yaml")

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        with pytest.raises(ValueError, match="Empty config file"):
            load_config_from_yaml(path)

    def test_invalid_values_rejected(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("indicators:\n  ema:\n    fast_period: 30\n    slow_period: 10\n")
        with pytest.raises(ValueError, match="EMA fast period"):
            load_config_from_yaml(path)

    def test_shipped_default_config(self):
        from pathlib import Path

        path = Path(__file__).resolve().parents[2] / "configs" / "default.yaml"
        config = load_config_from_yaml(path)
        assert dataclasses.replace(config, name=DEFAULT_CONFIG.name, description="") == DEFAULT_CONFIG

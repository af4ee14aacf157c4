"""Tests for settings defaults and validation."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from dominance.config import AppSettings, DecodeSettings, LedgerSettings


class TestDecodeSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("DECODE_SCHEMA_VERSION", raising=False)
        monkeypatch.delenv("DECODE_EXPECTED_DISCRIMINATOR", raising=False)
        settings = DecodeSettings()
        assert settings.schema_version == "extended"
        assert settings.scale_factor == Decimal("10000000000")
        assert settings.discriminator_bytes() is None
        assert settings.display_places == 3

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DECODE_SCHEMA_VERSION", "compact")
        monkeypatch.setenv("DECODE_SCALE_FACTOR", "1000000")
        settings = DecodeSettings()
        assert settings.schema_version == "compact"
        assert settings.scale_factor == Decimal("1000000")

    def test_discriminator_hex(self) -> None:
        settings = DecodeSettings(expected_discriminator="0A0B0C0D0E0F1011")
        assert settings.expected_discriminator == "0a0b0c0d0e0f1011"
        assert settings.discriminator_bytes() == bytes.fromhex("0a0b0c0d0e0f1011")

    @pytest.mark.parametrize("value", ["abcd", "zz" * 8])
    def test_bad_discriminator(self, value: str) -> None:
        with pytest.raises(ValidationError):
            DecodeSettings(expected_discriminator=value)

    def test_scale_factor_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            DecodeSettings(scale_factor=0)

    def test_unknown_schema_version(self) -> None:
        with pytest.raises(ValidationError):
            DecodeSettings(schema_version="v3")


def test_app_settings_composes_groups(app_settings: AppSettings) -> None:
    assert app_settings.log_level == "DEBUG"
    assert app_settings.decode.schema_version == "compact"
    assert app_settings.ledger.aggregator_seed == "aggregator_v2"


def test_ledger_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LEDGER_PROGRAM_ID", raising=False)
    settings = LedgerSettings()
    assert settings.program_id == "DP9kZHS77pbTuTHKNsaxqFjrUboFLGXvyCQsxYvWM26c"
    assert settings.aggregator_seed == "aggregator_v2"


class TestBounds:
    """Settings that would make the pipeline fail are rejected up front."""

    def test_display_places_upper_bound(self) -> None:
        assert DecodeSettings(display_places=18).display_places == 18
        with pytest.raises(ValidationError):
            DecodeSettings(display_places=19)

    def test_program_id_must_be_base58_key(self) -> None:
        with pytest.raises(ValidationError, match="program_id"):
            LedgerSettings(program_id="not-base58!")

    def test_program_id_wrong_length(self) -> None:
        with pytest.raises(ValidationError):
            LedgerSettings(program_id="111")

    def test_log_format(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_FORMAT", "json")
        assert AppSettings().log_format == "json"
        with pytest.raises(ValidationError):
            AppSettings(log_format="xml")

"""Configuration system using pydantic-settings with environment variable loading."""

from decimal import Decimal
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from solders.pubkey import Pubkey  # type: ignore[import-untyped]


class LedgerSettings(BaseSettings):
    """Where the aggregator account lives and who must own it."""

    model_config = SettingsConfigDict(env_prefix="LEDGER_")

    program_id: str = "DP9kZHS77pbTuTHKNsaxqFjrUboFLGXvyCQsxYvWM26c"
    aggregator_seed: str = "aggregator_v2"

    @field_validator("program_id")
    @classmethod
    def _check_program_id(cls, value: str) -> str:
        try:
            Pubkey.from_string(value)
        except ValueError as e:
            raise ValueError(f"program_id is not a base58 public key: {e}") from e
        return value


class DecodeSettings(BaseSettings):
    """Binary layout and aggregation parameters.

    The scale factor is the fixed-point denominator of the on-chain
    dominance value: value / scale_factor is a fraction of 1.
    All fields configurable via DECODE_ environment variable prefix.
    """

    model_config = SettingsConfigDict(env_prefix="DECODE_")

    schema_version: Literal["compact", "extended"] = "extended"
    scale_factor: Decimal = Field(default=Decimal("10000000000"), gt=0)
    expected_discriminator: str | None = None  # 8 bytes as hex, unchecked when None
    display_places: int = Field(default=3, ge=0, le=18)

    @field_validator("expected_discriminator")
    @classmethod
    def _check_discriminator(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.lower()
        if len(value) != 16:
            raise ValueError("expected_discriminator must be 16 hex characters (8 bytes)")
        bytes.fromhex(value)
        return value

    def discriminator_bytes(self) -> bytes | None:
        """Return the expected discriminator as raw bytes, or None if unchecked."""
        if self.expected_discriminator is None:
            return None
        return bytes.fromhex(self.expected_discriminator)


class AppSettings(BaseSettings):
    """Root application settings, composing all sub-settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"
    ledger: LedgerSettings = LedgerSettings()
    decode: DecodeSettings = DecodeSettings()

"""Configuration system using pydantic-settings with environment variable loading."""

from typing import Literal

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class SheetSettings(BaseSettings):
    """Google Sheets data source settings.

    The sheet holds one row per 5-minute sample laid out as
    ``[date, price, dominance]``, oldest first.
    """

    model_config = SettingsConfigDict(env_prefix="SHEETS_")

    sheet_id: str = "1x6e3sVeWdv-E0czCTp3tGrmuAxrkyWR_HSLMnHKPNK0"
    tab_name: str = "btc_price_log"
    api_key: SecretStr = SecretStr("")
    base_url: str = "https://sheets.googleapis.com/v4"
    timeout_seconds: float = 10.0
    first_entry_timestamp: str = "2021-10-08T12:23:02Z"  # date of the first sheet row
    row_offset: int = 63  # added to the elapsed-interval estimate of the latest row


class WindowSettings(BaseSettings):
    """Row window sizing for each refresh."""

    model_config = SettingsConfigDict(env_prefix="WINDOW_")

    days_before: int = 4  # full days kept in addition to today
    trim_check_rows: int = 5  # leading rows inspected for stale dates


class DashboardSettings(BaseSettings):
    """Dashboard server configuration."""

    model_config = SettingsConfigDict(env_prefix="DASHBOARD_")

    host: str = "0.0.0.0"
    port: int = 8080
    refresh_interval: int = 300  # seconds between sheet refreshes
    default_duration: Literal["5m", "1h", "1d"] = "1d"


class AppSettings(BaseSettings):
    """Root application settings, composing all sub-settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    log_level: str = "INFO"
    log_format: str = "console"  # "console" or "json"
    sheets: SheetSettings = SheetSettings()
    window: WindowSettings = WindowSettings()
    dashboard: DashboardSettings = DashboardSettings()

"""Mini README: Centralised configuration models and helpers for the tracker.

Structure:
    * DEFAULT_PALETTE - colour tokens cycled across chart slices.
    * ExpenseTrackerSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read environment variables (prefixed with
    ``EXPENSE_TRACKER_``), locate the JSON store and choose the port of the
    web interface. The configuration is cached so validation runs once per
    process.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Tuple

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PALETTE: Tuple[str, ...] = (
    "#FF6384",
    "#36A2EB",
    "#FFCE56",
    "#4BC0C0",
    "#9966FF",
    "#FF9F40",
)


class ExpenseTrackerSettings(BaseSettings):
    """Runtime configuration for the expense tracker."""

    model_config = SettingsConfigDict(
        env_prefix="EXPENSE_TRACKER_",
        env_file=".env",
        case_sensitive=False,
    )

    environment: str = Field(
        "development",
        description="Environment label; 'development' enables debug logging.",
    )
    data_directory: Path = Field(
        Path("data"),
        description="Directory holding the JSON key-value store.",
    )
    storage_filename: str = Field(
        "storage.json",
        description="File name of the key-value store inside the data directory.",
    )
    storage_key: str = Field(
        "transactions",
        description="Key under which the serialised ledger is stored.",
    )
    palette: Tuple[str, ...] = Field(
        DEFAULT_PALETTE,
        description="Ordered colour tokens assigned to new transactions.",
    )
    interface_host: str = Field(
        "127.0.0.1",
        description="Network interface for the web dashboard to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the web dashboard listens on.",
        ge=1,
        le=65535,
    )

    @field_validator("data_directory", mode="before")
    @classmethod
    def _expand_path(cls, value: str | Path) -> Path:
        """Expand user directories so ``~/ledger`` style values work."""

        return Path(value).expanduser()

    @field_validator("palette")
    @classmethod
    def _require_colours(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        """Reject an empty palette since colours are picked by modulo."""

        if not value:
            raise ValueError("The palette needs at least one colour.")
        return value

    @property
    def storage_path(self) -> Path:
        """Full path of the JSON store file."""

        return self.data_directory / self.storage_filename


@lru_cache()
def get_settings() -> ExpenseTrackerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return ExpenseTrackerSettings()

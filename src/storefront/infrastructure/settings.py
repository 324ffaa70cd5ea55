"""Runtime configuration, read from the environment (and an optional .env).

Every variable carries the ``STOREFRONT_`` prefix, e.g.
``STOREFRONT_TAX_RATE=0.07`` or ``STOREFRONT_DATA_DIR=/var/lib/storefront``.
"""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorefrontSettings(BaseSettings):
    tax_rate: Decimal = Field(default=Decimal("0.085"), ge=0, le=1)
    currency: str = Field(default="USD", min_length=3, max_length=3)
    data_dir: Path = Path("data")
    log_format: Literal["console", "json"] = "console"
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="STOREFRONT_",
        env_file=".env",
        extra="ignore",
    )

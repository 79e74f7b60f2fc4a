"""
Runtime configuration, read from APIM_FLOW_* environment variables or .env.
"""

from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

REPO_ROOT = Path(__file__).resolve().parent.parent


class FlowSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="APIM_FLOW_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    catalog_path: Path = Field(default=REPO_ROOT / "catalog")
    log_level: str = "info"
    mode: str = "demo"
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])

    def resolved_catalog_path(self) -> Path:
        if self.catalog_path.is_absolute():
            return self.catalog_path
        return REPO_ROOT / self.catalog_path


@lru_cache
def get_settings() -> FlowSettings:
    return FlowSettings()

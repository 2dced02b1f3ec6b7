from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


BASE_DIR = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=BASE_DIR / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Server Settings
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=3000, description="Server port")
    log_level: str = Field(default="INFO", description="Logging level")

    # Token / transaction data providers, in order of preference
    moralis_api_key: str = Field(default="", description="Moralis Web3 Data API key")
    covalent_api_key: str = Field(default="", description="Covalent unified API key")

    # Pricing
    coingecko_api_key: str = Field(default="", description="Coingecko demo API key (optional)")

    # Upstream requests
    request_timeout_seconds: int = Field(default=30, ge=1, description="Request timeout")
    solana_signature_limit: int = Field(
        default=20,
        ge=1,
        le=1000,
        description="Number of recent signatures returned for Solana history",
    )


# Global settings instance
settings = Settings()

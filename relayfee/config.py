from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


BASE_DIR = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=BASE_DIR / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="auto", description="Log renderer: auto, json or console")

    # Price quotes
    coingecko_api_key: str = Field(default="", description="Coingecko API key")
    coingecko_base_url: str = Field(
        default="https://api.coingecko.com/api/v3",
        description="Coingecko API base URL",
    )
    enable_coingecko: bool = Field(default=True, description="Enable Coingecko provider")
    price_vs_currency: str = Field(
        default="usd",
        description="Fiat-equivalent currency fees are quoted in",
    )

    # Relayer registry
    relayer_registry_url: str = Field(
        default="",
        description="URL of the relayer supported-token list",
        validation_alias=AliasChoices("relayer_registry_url", "RELAYER_INFO_URL"),
    )

    # Gas price
    ethereum_rpc_url: str = Field(
        default="",
        description="Ethereum JSON-RPC endpoint used for eth_gasPrice",
        validation_alias=AliasChoices("ethereum_rpc_url", "ETH_RPC_URL"),
    )

    request_timeout_seconds: int = Field(default=15, ge=1, description="Request timeout")

    @property
    def has_coingecko_key(self) -> bool:
        return bool(self.coingecko_api_key)

    @property
    def has_relayer_registry(self) -> bool:
        return bool(self.relayer_registry_url)

    @property
    def has_ethereum_rpc(self) -> bool:
        return bool(self.ethereum_rpc_url)


# Global settings instance
settings = Settings()

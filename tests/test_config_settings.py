from relayfee.config import Settings


def test_registry_url_legacy_alias(monkeypatch):
    """Relayer registry URL should load from the legacy RELAYER_INFO_URL name."""

    monkeypatch.delenv("RELAYER_REGISTRY_URL", raising=False)
    monkeypatch.setenv("RELAYER_INFO_URL", "https://relayer.example/tokens.json")

    settings = Settings()

    assert settings.relayer_registry_url == "https://relayer.example/tokens.json"
    assert settings.has_relayer_registry is True


def test_registry_url_direct_env(monkeypatch):
    """The primary environment variable wins over the legacy alias."""

    monkeypatch.setenv("RELAYER_REGISTRY_URL", "https://primary.example/tokens.json")
    monkeypatch.setenv("RELAYER_INFO_URL", "https://legacy.example/tokens.json")

    settings = Settings()

    assert settings.relayer_registry_url == "https://primary.example/tokens.json"


def test_defaults_without_environment(monkeypatch):
    for name in ("COINGECKO_API_KEY", "ETHEREUM_RPC_URL", "ETH_RPC_URL", "PRICE_VS_CURRENCY"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.has_coingecko_key is False
    assert settings.has_ethereum_rpc is False
    assert settings.price_vs_currency == "usd"
    assert settings.coingecko_base_url == "https://api.coingecko.com/api/v3"

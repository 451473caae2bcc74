from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Runtime capability: True routes every ERC20 call through the bridge
    RESTRICTED_RUNTIME: bool = False

    # Bridge (defaults match a bridge host started with
    # `uvicorn host_app:build --factory --port 8000`, see src/main.py)
    BRIDGE_URL: str = "http://localhost:8000/api/v1/bridge/invoke"
    BRIDGE_TIMEOUT_SECONDS: float = 30.0

    # Signing: optional ambient signer key, never logged
    SIGNER_PRIVATE_KEY: str | None = None

    # Display
    DISPLAY_DECIMALS: int = 4

    # App
    APP_NAME: str = "Token Gateway"
    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False  # Safe default for production; set DEBUG=True in .env for local dev


settings = Settings()

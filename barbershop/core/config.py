from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    BUSINESS_NAME: str = "Barbershop"
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    STORE_PROVIDER: str = "memory"  # "memory" or "json"
    DATA_DIR: str = "./data"
    DIRECTORY_SEED_FILE: str | None = None

    CONFLICT_LOOKBACK_MINUTES: int = 120
    UPCOMING_LIMIT: int = 10

    SALES_API_BASE_URL: str | None = None
    SALES_API_KEY: str | None = None


settings = Settings()

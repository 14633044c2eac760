from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    BUSINESS_NAME: str = "Serenity Spa"
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    STORE_PROVIDER: str = "memory"  # "memory" | "json"
    DATA_DIR: str = "./data/store"
    SEED_DEMO_DATA: bool = True

    ENFORCE_STATUS_TRANSITIONS: bool = False
    CHECK_SPECIALIST_CONFLICTS: bool = False


settings = Settings()

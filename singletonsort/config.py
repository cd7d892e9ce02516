from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env")

    app_name: str = "SingletonSort"
    debug: bool = False

    database_url: str = "sqlite:///singletonsort.db"

    # Key under which all card lists are stored as one document
    storage_key: str = "singleton-sort-card-lists"

    moxfield_url: str = "https://api2.moxfield.com"
    moxfield_timeout: float = 30.0

    host: str = "127.0.0.1"
    port: int = 8989


settings = Settings()

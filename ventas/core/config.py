from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    VENTAS_API_BASE_URL: str = "https://ventas-produccion-1f4baea70467.herokuapp.com/api"
    HTTP_TIMEOUT_SECONDS: float = 10.0

    SESSION_TTL_HOURS: int = 24
    TOKEN_STORE: str = "memory"  # "memory" | "json"
    TOKEN_STORE_PATH: str = "./data/session.json"

    LOGIN_PATH: str = "/"
    PROTECTED_PREFIX: str = "/panel"
    LANDING_PATH: str = "/panel"

    PRODUCT_KEY_FIELD: str = "id"

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"


settings = Settings()

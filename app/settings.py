from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    ENV: str = "local"
    API_VERSION: str = "dev"

    # Auth: compared with the x-api-key header on every request
    APP_SECRET_PASSWORD: str = ""

    # Firestore
    GCP_PROJECT_ID: str = ""
    GOOGLE_CLOUD_PROJECT: str = ""   # set by the serverless runtime
    FIRESTORE_DATABASE: str = "climbing-tracker-db"

    ALLOW_ORIGINS: str = "*"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def PROJECT_ID(self) -> str:
        return self.GCP_PROJECT_ID or self.GOOGLE_CLOUD_PROJECT

    @property
    def CORS_ORIGINS(self) -> list[str]:
        return [o.strip() for o in self.ALLOW_ORIGINS.split(",") if o.strip()]

@lru_cache
def get_settings() -> Settings:
    return Settings()

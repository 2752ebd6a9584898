from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # API Settings
    PROJECT_NAME: str = "Trip Split API"
    API_V1_STR: str = "/api/v1"
    PROJECT_VERSION: str = "0.1.0"
    DESCRIPTION: str = "Shared trip expenses, balances and read-only share links"

    # MongoDB
    MONGODB_URL: str = "mongodb://localhost:27017"
    DATABASE_NAME: str = "tripsplit"
    TRIPS_COLLECTION: str = "trip_split_data"

    # Gemini expense parser
    GEMINI_API_KEY: str = ""
    GEMINI_MODEL: str = "gemini-2.5-flash"
    GEMINI_TIMEOUT: int = 60

    # Share links
    PUBLIC_BASE_URL: str = "http://localhost:3000/"
    SHARE_FRAGMENT_MARKER: str = "#share="
    SHARE_URL_MAX_LENGTH: int = 8000

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env"
    )

settings = Settings()

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # Embedded store
    DATABASE_URL: str = "sqlite+aiosqlite:///./ufmaps.db"
    DATABASE_ECHO: bool = False
    SCHEMA_VERSION: int = 1  # Bump when the Place schema changes

    # UFPA Campus (fallback map center)
    CAMPUS_NAME: str = "UFPA"
    CAMPUS_DESCRIPTION: str = "Campus Belém"
    CAMPUS_CENTER_LAT: float = -1.475640
    CAMPUS_CENTER_LNG: float = -48.457319
    CAMPUS_REGION_DELTA: float = 0.02
    USER_REGION_DELTA: float = 0.01  # Closer zoom around the user

    # Position watch
    WATCH_ACCURACY: str = "high"
    WATCH_TIME_INTERVAL_MS: int = 1000  # 1 second
    WATCH_DISTANCE_INTERVAL_M: float = 1  # 1 meter

    # Logging
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

settings = Settings()

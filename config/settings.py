# DEPENDENCIES
from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application-wide settings: primary configuration source
    """
    # Application Info
    APP_NAME               : str            = "BC Rental Contract Analyzer"
    APP_VERSION            : str            = "1.0.0"
    API_PREFIX             : str            = "/api/v1"

    # Server Configuration
    HOST                   : str            = "0.0.0.0"
    PORT                   : int            = 8000
    RELOAD                 : bool           = False
    WORKERS                : int            = 1

    # CORS Settings
    CORS_ORIGINS           : list           = ["http://localhost:3000", "http://localhost:8000", "http://127.0.0.1:8000"]
    CORS_ALLOW_CREDENTIALS : bool           = True
    CORS_ALLOW_METHODS     : list           = ["*"]
    CORS_ALLOW_HEADERS     : list           = ["*"]

    # File Upload Settings
    MAX_UPLOAD_SIZE        : int            = 10 * 1024 * 1024  # 10 MB
    ALLOWED_EXTENSIONS     : list           = [".pdf", ".txt"]

    # Analysis Limits
    MIN_CONTRACT_LENGTH    : int            = 100     # Minimum stripped characters for a usable contract
    MAX_CONTRACT_LENGTH    : int            = 500000  # Maximum characters (500KB text)

    # Clause catalog: JSON file overriding the built-in BC catalog
    CLAUSE_CATALOG_PATH    : Optional[Path] = None

    # Logging Settings
    LOG_LEVEL              : str            = "INFO"
    LOG_DIR                : Path           = Path("logs")
    APP_LOG_NAME           : str            = "contract_analyzer"


    class Config:
        env_file          = ".env"
        env_file_encoding = "utf-8"
        case_sensitive    = True
        extra             = "ignore"


# Global settings instance
settings = Settings()

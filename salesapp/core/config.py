# Standard library imports
import os
from typing import Final, List, Optional
from dotenv import load_dotenv


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Load environment variables from .env file
        load_dotenv()

        self.app_name: Final[str] = os.getenv("APP_NAME", "Sales App API")

        # Timezone Configuration
        # Default to UTC, but can be set via TIMEZONE env var (e.g., "UTC", "America/Sao_Paulo")
        self.timezone: Final[str] = os.getenv("TIMEZONE", "UTC")

        # Storage backend: "mongo" (default) or "memory" (no external database, data lost on restart)
        self.storage_backend: Final[str] = os.getenv("STORAGE_BACKEND", "mongo").lower()

        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("DB_NAME", "sales_app")

        # Collection Names
        self.people_collection: Final[str] = os.getenv("PEOPLE_COLLECTION", "people")
        self.products_collection: Final[str] = os.getenv("PRODUCTS_COLLECTION", "products")
        self.orders_collection: Final[str] = os.getenv("ORDERS_COLLECTION", "orders")
        self.counters_collection: Final[str] = os.getenv("COUNTERS_COLLECTION", "counters")

        # Insert sample people/products on startup when collections are empty
        self.seed_on_startup: Final[bool] = os.getenv(
            "SEED_ON_STARTUP", "false"
        ).lower() in ("true", "1", "yes")

        # Logging
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()
        self.log_file: Final[Optional[str]] = os.getenv("LOG_FILE") or None

        # HTTP server
        self.cors_allow_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
            if origin.strip()
        ]
        self.host: Final[str] = os.getenv("HOST", "0.0.0.0")
        self.port: Final[int] = int(os.getenv("PORT", "8000"))


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings

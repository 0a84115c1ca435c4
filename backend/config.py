"""
Configuration settings for the UPI SMS transaction parser.
Centralized configuration management for the host worker and API.
"""

import os
from pathlib import Path


class Config:
    """Application configuration class."""

    # Application Settings
    APP_NAME = "UPI SMS Transaction Parser"
    VERSION = "1.0.0"

    # Output Settings
    LOG_DIR: Path = Path(os.getenv("LOG_DIR", "./logs"))

    # Validation Settings
    STRICT_MODE: bool = os.getenv("STRICT_MODE", "false").lower() == "true"
    MAX_TRANSACTION_AMOUNT: float = float(os.getenv("MAX_TRANSACTION_AMOUNT", "999999.99"))
    MIN_MERCHANT_LENGTH: int = int(os.getenv("MIN_MERCHANT_LENGTH", "2"))
    MAX_MERCHANT_LENGTH: int = int(os.getenv("MAX_MERCHANT_LENGTH", "100"))

    # Logging Settings
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    LOG_DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"

    # API Settings
    API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
    API_PORT: int = int(os.getenv("API_PORT", "8000"))

    @classmethod
    def ensure_directories(cls):
        """Ensure required directories exist."""
        cls.LOG_DIR.mkdir(parents=True, exist_ok=True)

    @classmethod
    def get_log_path(cls, filename: str) -> Path:
        """Get full path for log file."""
        cls.ensure_directories()
        return cls.LOG_DIR / filename

    @classmethod
    def to_dict(cls) -> dict:
        """Convert configuration to dictionary."""
        return {
            "app_name": cls.APP_NAME,
            "version": cls.VERSION,
            "log_dir": str(cls.LOG_DIR),
            "log_level": cls.LOG_LEVEL,
            "strict_mode": cls.STRICT_MODE,
            "max_transaction_amount": cls.MAX_TRANSACTION_AMOUNT,
            "min_merchant_length": cls.MIN_MERCHANT_LENGTH,
            "max_merchant_length": cls.MAX_MERCHANT_LENGTH,
            "api_host": cls.API_HOST,
            "api_port": cls.API_PORT,
        }


# Create a singleton instance
config = Config()

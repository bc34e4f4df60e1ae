"""
Configuration management for the employment application service
Handles environment variables, API keys, and application settings
"""

import os
from pathlib import Path
from typing import List, Optional, Union

from pydantic import field_validator
from pydantic_settings import BaseSettings
import structlog

logger = structlog.get_logger()

PACKAGE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """
    Application settings with environment variable support
    Uses Pydantic for validation and type conversion
    """

    # Application Settings
    app_name: str = "Employment Application Service"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = "development"

    # Server Settings
    host: str = "0.0.0.0"
    port: int = 3000

    # Database Configuration
    database_url: str = "sqlite+aiosqlite:///./applications.db"
    database_pool_size: int = 10
    database_max_overflow: int = 20

    # OpenAI Configuration
    openai_api_key: Optional[str] = None
    openai_model_text: str = "gpt-4o-mini"
    openai_temperature: float = 0.1
    openai_timeout: int = 60

    # Upload Settings
    max_file_size_mb: int = 10
    vercel: bool = False

    # Static resources
    static_dir: str = str(PACKAGE_DIR / "static")
    fonts_dir: str = str(PACKAGE_DIR / "assets" / "fonts")
    logo_path: str = str(PACKAGE_DIR / "assets" / "Logo.png")

    # Comma separated in the environment
    cors_origins: Union[List[str], str] = ["*"]

    # Monitoring & Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, v):
        """Validate database URL format"""
        if not v.startswith(("postgresql://", "postgres://", "postgresql+asyncpg://",
                             "sqlite://", "sqlite+aiosqlite://")):
            raise ValueError("Database URL must be a PostgreSQL or SQLite connection string")
        return v

    @field_validator("openai_api_key")
    @classmethod
    def validate_openai_key(cls, v):
        """Treat blank keys as unset; reject keys without the OpenAI prefix"""
        if v is None or not v.strip():
            return None
        if not v.startswith("sk-"):
            raise ValueError("OpenAI API key must start with 'sk-'")
        return v

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from string or list"""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",")]
        return v

    @property
    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.environment.lower() in ("production", "prod")

    @property
    def max_file_size_bytes(self) -> int:
        """Convert max file size to bytes"""
        return self.max_file_size_mb * 1024 * 1024

    @property
    def upload_dir(self) -> Path:
        """Serverless deployments can only write below /tmp"""
        return Path("/tmp/uploads") if self.vercel else Path("uploads")

    @property
    def openai_configured(self) -> bool:
        return bool(self.openai_api_key)

    def get_openai_config(self) -> dict:
        """Get OpenAI configuration dictionary"""
        return {
            "api_key": self.openai_api_key,
            "model_text": self.openai_model_text,
            "temperature": self.openai_temperature,
            "timeout": self.openai_timeout,
        }

    def get_database_config(self) -> dict:
        """Get database configuration dictionary"""
        return {
            "url": self.database_url,
            "pool_size": self.database_pool_size,
            "max_overflow": self.database_max_overflow,
            "echo": self.debug,
        }


class DevelopmentSettings(Settings):
    """Development-specific settings"""
    debug: bool = True
    log_level: str = "DEBUG"


class ProductionSettings(Settings):
    """Production-specific settings"""
    debug: bool = False
    log_level: str = "INFO"


class TestSettings(Settings):
    """Test-specific settings"""
    environment: str = "testing"
    debug: bool = False
    database_url: str = "sqlite+aiosqlite:///:memory:"
    openai_api_key: Optional[str] = None


def get_settings() -> Settings:
    """
    Get application settings based on environment

    Returns:
        Settings: Configured settings instance
    """
    environment = os.getenv("ENVIRONMENT", "development").lower()

    if environment in ("production", "prod"):
        settings = ProductionSettings()
    elif environment in ("test", "testing"):
        settings = TestSettings()
    else:
        settings = DevelopmentSettings()

    logger.info("Settings loaded",
                environment=settings.environment,
                debug=settings.debug,
                app_name=settings.app_name)

    return settings


def log_settings_summary(settings: Settings):
    """Log a summary of current settings (without sensitive data)"""
    logger.info("Application configuration summary",
                app_name=settings.app_name,
                environment=settings.environment,
                debug=settings.debug,
                host=settings.host,
                port=settings.port,
                openai_configured=settings.openai_configured,
                openai_model_text=settings.openai_model_text,
                max_file_size_mb=settings.max_file_size_mb,
                upload_dir=str(settings.upload_dir))

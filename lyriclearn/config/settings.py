"""
Configuration management system using Pydantic Settings.
Supports environment-based configuration for different deployment environments.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from typing import Optional, Dict, Any, List
from enum import Enum


class Environment(str, Enum):
    """Supported deployment environments"""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(str, Enum):
    """Supported log levels"""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class DatabaseSettings(BaseSettings):
    """Relational database configuration"""

    url: str = Field(
        default="sqlite:///./lyriclearn.db",
        description="SQLAlchemy database URL"
    )
    echo: bool = Field(default=False)
    auto_create_tables: bool = Field(
        default=False,
        description="Create missing tables on startup (development only)"
    )

    model_config = {"env_prefix": "DATABASE_"}


class ScoringSettings(BaseSettings):
    """Phrase, vocabulary and difficulty scoring configuration"""

    frequency_table_path: Optional[str] = Field(
        default=None,
        description="JSON word -> Zipf frequency file; the packaged Spanish table is used when unset"
    )
    idioms_path: Optional[str] = Field(
        default=None,
        description="JSON array of idioms counted by difficulty scoring; the packaged list is used when unset"
    )

    model_config = {"env_prefix": "SCORING_"}


class ExtractionSettings(BaseSettings):
    """Batch phrase, vocabulary and song leveling configuration"""

    translation_language: str = Field(default="en", min_length=2, max_length=8)
    min_line_length: int = Field(default=5, ge=1, le=100)
    vocabulary_limit: int = Field(default=200, ge=1, le=10000)
    max_examples_per_word: int = Field(default=3, ge=0, le=20)
    min_example_length: int = Field(default=10, ge=0, le=200)
    song_vocabulary_limit: int = Field(default=12, ge=1, le=500)
    report_top_n: int = Field(default=10, ge=0, le=100)
    recalibrate_baselines: bool = Field(
        default=True,
        description="Recompute difficulty baselines from the scored corpus before leveling"
    )
    min_songs_for_calibration: int = Field(default=10, ge=2, le=100000)

    model_config = {"env_prefix": "EXTRACTION_"}


class SecuritySettings(BaseSettings):
    """CORS configuration"""

    cors_origins: List[str] = Field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = Field(default=True)
    cors_allow_methods: List[str] = Field(
        default_factory=lambda: ["GET", "POST"]
    )
    cors_allow_headers: List[str] = Field(default_factory=lambda: ["*"])

    @field_validator('cors_origins', mode='before')
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from environment variable or list"""
        if isinstance(v, str):
            origin_list = v.split(",")
            return [origin.strip() for origin in origin_list if origin.strip()]
        return v or ["*"]

    model_config = {"env_prefix": "SECURITY_"}


class Settings(BaseSettings):
    """Main application settings"""

    # Application Configuration
    app_name: str = Field(default="LyricLearn")
    app_version: str = Field(default="1.0.0")
    environment: Environment = Field(default=Environment.DEVELOPMENT)
    debug: bool = Field(default=False)

    # Server Configuration
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000, ge=1, le=65535)
    reload: bool = Field(default=False)
    workers: int = Field(default=1, ge=1, le=16)

    # Logging Configuration
    log_level: LogLevel = Field(default=LogLevel.INFO)
    log_json: bool = Field(default=True)
    log_file: Optional[str] = Field(default=None)

    # Nested Settings
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    scoring: ScoringSettings = Field(default_factory=ScoringSettings)
    extraction: ExtractionSettings = Field(default_factory=ExtractionSettings)
    security: SecuritySettings = Field(default_factory=SecuritySettings)

    @field_validator('environment', mode='before')
    @classmethod
    def validate_environment(cls, v):
        """Validate and normalize environment setting"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.environment == Environment.PRODUCTION

    def is_development(self) -> bool:
        """Check if running in development environment"""
        return self.environment == Environment.DEVELOPMENT

    def get_cors_config(self) -> Dict[str, Any]:
        """Get CORS configuration for FastAPI"""
        return {
            "allow_origins": self.security.cors_origins,
            "allow_credentials": self.security.cors_allow_credentials,
            "allow_methods": self.security.cors_allow_methods,
            "allow_headers": self.security.cors_allow_headers,
        }

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get application settings instance"""
    return settings


def reload_settings() -> Settings:
    """Reload settings from environment and files"""
    global settings
    settings = Settings()
    return settings

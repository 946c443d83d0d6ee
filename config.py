"""
Centralized Configuration Management

All environment variables are defined here using Pydantic Settings.
This provides validation, type safety, and documentation in one place.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables (or a .env file).

    To use in your code:
        from config import settings
        db_url = settings.get_db_url()
    """

    # Database Configuration
    DB_URL: str = Field(default="mongodb://localhost:27017", description="MongoDB connection string")
    DB_NAME: str = Field(default="blog_app", description="Database name")
    TEST_DB_URL: str | None = Field(
        default=None, description="MongoDB connection string for integration tests"
    )
    TEST_DB_NAME: str = Field(default="blog_app_test", description="Test database name")
    DB_TIMEOUT_MS: int = Field(
        default=5000, description="Server selection timeout for MongoDB in milliseconds"
    )

    # Server
    PORT: int = Field(default=8080, description="Port the API server listens on")

    # Application Settings
    DEBUG_LEVEL: int = Field(default=0, description="Debug verbosity level (0-3)")
    LOG_DIR: str = Field(default="logs", description="Directory for rotating log files")
    ENVIRONMENT: str = Field(
        default="development", description="Environment: development, test, production"
    )

    # CORS Configuration
    CORS_ORIGINS: str = Field(
        default="*", description="Comma-separated list of allowed CORS origins"
    )

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", case_sensitive=True)

    @field_validator("DEBUG_LEVEL")
    @classmethod
    def validate_debug_level(cls, v):
        if v not in [0, 1, 2, 3]:
            raise ValueError("DEBUG_LEVEL must be 0, 1, 2, or 3")
        return v

    @field_validator("CORS_ORIGINS")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse comma-separated CORS origins into a list"""
        if v == "*":
            return ["*"]
        return [origin.strip() for origin in v.split(",")]

    def get_db_url(self, use_test: bool = False) -> str:
        """Get database URL based on environment"""
        if use_test and self.TEST_DB_URL:
            return self.TEST_DB_URL
        return self.DB_URL

    def get_db_name(self, use_test: bool = False) -> str:
        """Get database name based on environment"""
        return self.TEST_DB_NAME if use_test else self.DB_NAME

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.ENVIRONMENT.lower() == "production"


# Singleton instance - import this throughout your application
settings = Settings()

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List
from pydantic import Field, field_validator


class Settings(BaseSettings):
    """
    Application settings using pure Pydantic approach.
    Environment variables are automatically loaded and validated.
    """

    # Application Configuration
    DEBUG: bool = Field(default=False, description="Enable debug mode")

    # Supabase Configuration
    SUPABASE_URL: str = Field(default="", description="Supabase project URL")
    SUPABASE_KEY: str = Field(default="", description="Supabase service role key")

    # CORS Configuration
    CORS_ORIGINS: str = Field(default="*", description="Allowed CORS origins (comma-separated)")

    # Integration Configuration
    INTEGRATION_TIMEOUT: int = Field(default=15, description="Timeout in seconds for job platform API calls")
    INDEED_APPLIED_JOBS_URL: str = Field(
        default="https://apis.indeed.com/oauth/v2/applied-jobs",
        description="Indeed applied jobs endpoint"
    )
    LINKEDIN_API_BASE_URL: str = Field(
        default="https://api.linkedin.com/v2",
        description="LinkedIn REST API base URL"
    )

    @property
    def cors_origins_list(self) -> List[str]:
        """Convert comma-separated CORS_ORIGINS string to list"""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(',') if origin.strip()]

    @field_validator('INTEGRATION_TIMEOUT', mode='before')
    @classmethod
    def parse_integration_timeout(cls, v):
        """Ensure integration timeout is an integer"""
        if isinstance(v, str):
            return int(v)
        return v

    model_config = SettingsConfigDict(
        # Pydantic will automatically load from .env file
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        # Allow extra fields for flexibility
        extra="ignore",
        # Validate assignment to catch runtime changes
        validate_assignment=True,
    )


# Create global settings instance
settings = Settings()

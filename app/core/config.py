"""
Configuration settings for the Flight Search Gateway
"""

import logging
from typing import List, Optional, Dict, Any
from enum import Enum
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings


class Environment(str, Enum):
    """Supported environment types"""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class LogLevel(str, Enum):
    """Supported log levels"""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Settings(BaseSettings):
    """Application settings loaded from environment variables with validation"""

    # API Configuration
    API_TITLE: str = Field(default="Flight Search Gateway", description="API title")
    API_VERSION: str = Field(default="1.0.0", description="API version")
    API_HOST: str = Field(default="0.0.0.0", description="API host")
    API_PORT: int = Field(default=8000, ge=1, le=65535, description="API port")

    # CORS Configuration (stored as string, parsed to list)
    CORS_ORIGINS_STR: str = Field(
        default="http://localhost:3000",
        description="Allowed CORS origins (comma-separated)",
        alias="CORS_ORIGINS"
    )

    # Upstream Configuration
    REQUEST_TIMEOUT: float = Field(
        default=10.0,
        gt=0,
        le=300,
        description="Deadline in seconds applied to each upstream call of a search"
    )
    AIRLINE_A_BASE_URL: str = Field(
        default="http://interview.duffel.com/airline_a",
        description="Base address of the airline A offers service"
    )
    AIRLINE_B_BASE_URL: str = Field(
        default="http://interview.duffel.com/airline_b",
        description="Base address of the airline B offers service"
    )

    # Logging Configuration
    LOG_LEVEL: LogLevel = Field(
        default=LogLevel.INFO,
        description="Logging level"
    )

    # Environment Configuration
    ENVIRONMENT: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment"
    )

    @property
    def CORS_ORIGINS(self) -> List[str]:
        """Get CORS origins as a list"""
        return [origin.strip() for origin in self.CORS_ORIGINS_STR.split(',') if origin.strip()]

    @field_validator('AIRLINE_A_BASE_URL', 'AIRLINE_B_BASE_URL')
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate upstream base URLs"""
        if not v.startswith(('http://', 'https://')):
            raise ValueError("Upstream base URL must start with 'http://' or 'https://'")

        return v.rstrip('/')

    @field_validator('LOG_LEVEL', mode='before')
    @classmethod
    def validate_log_level(cls, v) -> str:
        """Validate and normalize log level"""
        if isinstance(v, str):
            return v.upper()
        return v

    @model_validator(mode='after')
    def validate_environment_specific_settings(self) -> 'Settings':
        """Validate environment-specific configuration"""
        if self.ENVIRONMENT == Environment.PRODUCTION:
            if any('localhost' in origin for origin in self.CORS_ORIGINS):
                logging.warning(
                    "Production environment detected with localhost CORS origins. "
                    "Consider updating CORS_ORIGINS for production."
                )

            if self.LOG_LEVEL == LogLevel.DEBUG:
                logging.warning(
                    "DEBUG log level detected in production environment. "
                    "Consider using INFO or WARNING for production."
                )

        return self

    def get_environment_config(self) -> Dict[str, Any]:
        """Get environment-specific configuration"""
        base_config = {
            'api_title': self.API_TITLE,
            'api_version': self.API_VERSION,
            'environment': self.ENVIRONMENT,
            'debug': self.ENVIRONMENT == Environment.DEVELOPMENT,
        }

        if self.ENVIRONMENT == Environment.PRODUCTION:
            base_config.update({
                'log_level': LogLevel.INFO,
                'enable_docs': False,
            })
        else:
            base_config.update({
                'log_level': self.LOG_LEVEL,
                'enable_docs': True,
            })

        return base_config

    def get_upstream_config(self) -> Dict[str, Any]:
        """Get upstream provider configuration"""
        return {
            'airline_a_base_url': self.AIRLINE_A_BASE_URL,
            'airline_b_base_url': self.AIRLINE_B_BASE_URL,
            'timeout': self.REQUEST_TIMEOUT,
        }

    model_config = {
        "env_file": ".env",
        "case_sensitive": True,
        "validate_assignment": True,
        "use_enum_values": True,
        "env_parse_none_str": "None",
    }


def get_settings() -> Settings:
    """Get validated settings instance"""
    return Settings()


# Global settings instance - will be initialized when first accessed
settings: Optional[Settings] = None


def get_global_settings() -> Settings:
    """Get or create global settings instance"""
    global settings
    if settings is None:
        settings = get_settings()
    return settings

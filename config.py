"""Configuration management for URL shortener."""

from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import Field


class Config(BaseSettings):
    """Application configuration."""
    
    # Server settings
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind to"
    )
    
    port: int = Field(
        default=3000,
        description="Port to listen on"
    )
    
    # URL shortener settings
    base_url: str = Field(
        default="http://localhost:3000",
        description="Base URL for generating short URLs"
    )
    
    path_prefix: str = Field(
        default="",
        description="Path prefix for short URLs (e.g., '/s' for /s/abc123)"
    )
    
    short_code_length: int = Field(
        default=6,
        ge=1,
        description="Length of generated short codes"
    )
    
    default_validity_minutes: int = Field(
        default=30,
        gt=0,
        description="Validity window applied when a request gives none"
    )
    
    enable_custom_codes: bool = Field(
        default=True,
        description="Allow users to provide custom short codes"
    )
    
    max_collision_retries: int = Field(
        default=0,
        ge=0,
        description="Retries when a generated short code collides (0 reports the collision as a conflict)"
    )
    
    # Logging settings
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    
    log_file: Optional[str] = Field(
        default=None,
        description="Log file path (logs to stdout if not specified)"
    )
    
    log_json: bool = Field(
        default=False,
        description="Use JSON format for logs"
    )
    
    # Remote log shipping
    log_endpoint: Optional[str] = Field(
        default=None,
        description="HTTP endpoint that receives log records (shipping disabled if not set)"
    )
    
    auth_token: Optional[str] = Field(
        default=None,
        description="Bearer token for the log endpoint"
    )
    
    log_stack: str = Field(
        default="backend",
        description="Stack name sent with shipped log records"
    )
    
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",  # Ignore extra environment variables
    }


def load_config() -> Config:
    """Load configuration from environment."""
    return Config()

"""
Application settings loaded from environment variables.

Uses pydantic-settings for validation and type safety.
Shopify credentials are NOT settings: they arrive with each request.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from functools import lru_cache


class Settings(BaseSettings):
    """
    Application settings.
    
    All values loaded from .env file or environment variables.
    Validation happens automatically on startup.
    """
    
    model_config = SettingsConfigDict(
        env_file=(".env", "../.env"),  # Check current dir, then parent
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"  # Ignore extra env vars
    )
    
    # ===================
    # SHOPIFY
    # ===================
    shopify_api_version: str = Field(
        default="2024-10",
        pattern=r"^\d{4}-\d{2}$",
        description="Shopify Admin REST API version"
    )
    shopify_page_limit: int = Field(
        default=250,
        ge=1,
        le=250,
        description="Products fetched per catalog request (single page)"
    )
    shopify_timeout_seconds: float = Field(
        default=15.0,
        gt=0,
        le=120,
        description="Timeout for each Shopify HTTP call"
    )
    
    # ===================
    # MATCHING
    # ===================
    match_score_cutoff: float = Field(
        default=60.0,
        ge=0,
        le=100,
        description="Minimum similarity (0-100) for a catalog title to match"
    )
    
    # ===================
    # DRAFT ORDERS
    # ===================
    default_invoice_subject: str = Field(
        default="Your invoice",
        description="Invoice email subject when none is supplied"
    )
    default_invoice_message: str = Field(
        default="Hi {customer_name}, here is your invoice.",
        description="Invoice email body template when none is supplied"
    )
    draft_note_template: str = Field(
        default="OrderSnap for {customer_name}",
        description="Note attached to every draft order"
    )
    
    # ===================
    # APP SETTINGS
    # ===================
    environment: str = Field(
        default="development",
        pattern="^(development|staging|production)$",
        description="Application environment"
    )
    debug: bool = Field(
        default=True,
        description="Enable debug mode"
    )
    log_level: str = Field(
        default="INFO",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Logging level"
    )
    api_host: str = Field(
        default="0.0.0.0",
        description="API host"
    )
    api_port: int = Field(
        default=8000,
        ge=1000,
        le=65535,
        description="API port"
    )
    cors_origins: list[str] = Field(
        default=[
            "http://localhost:3000",
            "http://localhost:5173",
        ],
        description="Origins allowed to call the API"
    )
    
    # ===================
    # COMPUTED PROPERTIES
    # ===================
    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment == "production"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    
    Uses lru_cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload.
    
    Returns:
        Settings: Application settings
        
    Raises:
        ValidationError: If env vars are invalid
    """
    return Settings()


# For convenient imports: from config.settings import settings
settings = get_settings()

"""Application Configuration

Type-safe configuration using Pydantic Settings for environment variable handling.
Values come from the process environment or a ``.env`` file.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings

from .domain.domain_type import StoreBackend, UpdateLookup


class Settings(BaseSettings):
    """Application settings from environment variables"""

    # =============================================================================
    # APPLICATION
    # =============================================================================

    app_name: str = Field(..., alias="APP_NAME")
    app_version: str = Field(..., alias="APP_VERSION")
    app_description: str = Field(..., alias="APP_DESCRIPTION")
    environment: str = Field(..., alias="ENVIRONMENT")

    # =============================================================================
    # API CONFIGURATION
    # =============================================================================

    api_host: str = Field(..., alias="API_HOST")
    api_port: int = Field(..., alias="API_PORT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # CORS Settings
    cors_origins: str = Field(default="", alias="CORS_ORIGINS")
    cors_credentials: bool = Field(default=False, alias="CORS_CREDENTIALS")
    cors_methods: str = Field(default="*", alias="CORS_METHODS")
    cors_headers: str = Field(default="*", alias="CORS_HEADERS")

    # Identity headers set by the authenticating gateway
    user_id_header: str = Field(default="X-User-Id", alias="USER_ID_HEADER")
    user_roles_header: str = Field(default="X-User-Roles", alias="USER_ROLES_HEADER")

    # =============================================================================
    # PERSISTENCE
    # =============================================================================

    store_backend: StoreBackend = Field(default=StoreBackend.MEMORY, alias="STORE_BACKEND")

    # Redis - Test records (used when STORE_BACKEND=redis)
    redis_url: str = Field(default="redis://localhost:6379/0", alias="REDIS_URL")
    redis_key_prefix: str = Field(default="testsystem:", alias="REDIS_KEY_PREFIX")

    # =============================================================================
    # ACCESS RULES
    # =============================================================================

    # owner: update only finds the caller's own tests; id: any test by id
    update_lookup: UpdateLookup = Field(default=UpdateLookup.OWNER, alias="UPDATE_LOOKUP")

    model_config = {"env_file": ".env", "case_sensitive": False, "extra": "ignore"}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.model_validate({})


settings = get_settings()

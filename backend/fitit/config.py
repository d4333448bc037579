import logging
from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_config_logger = logging.getLogger(__name__)

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "FitIt API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    cors_origins: list[str] = ["http://localhost:5173"]

    # AWS / DynamoDB
    aws_region: str = "us-east-1"
    aws_access_key_id: str = ""
    aws_secret_access_key: str = ""
    dynamodb_endpoint_url: str = ""          # e.g. http://localhost:8000 for DynamoDB Local
    dynamodb_max_attempts: int = 3
    dynamodb_auto_create_tables: bool = False

    # Table names
    dynamodb_products_table: str = "fitit-products"
    dynamodb_service_profiles_table: str = "fitit-service-profiles"
    dynamodb_service_requests_table: str = "fitit-service-requests"
    dynamodb_chat_table: str = "fitit-chat"
    dynamodb_users_table: str = "fitit-users"

    # Chat history retention
    chat_ttl_days: int = 30

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_aws: str = "WARNING"           # boto3 / botocore / aiobotocore
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_repository: str = "INFO"       # DynamoDB repositories

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    def model_post_init(self, __context: object) -> None:
        """Warn when only half of a static AWS credential pair is configured."""
        if bool(self.aws_access_key_id) != bool(self.aws_secret_access_key):
            _config_logger.warning(
                "Incomplete AWS credentials in settings; falling back to the default credential chain"
            )

    @property
    def has_static_credentials(self) -> bool:
        return bool(self.aws_access_key_id and self.aws_secret_access_key)


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from crud_admin.models.base_models import AssetOptions, Branding

BASE_DIR = Path(__file__).resolve().parent.parent  # crud-admin/


class AdminSettings(BaseSettings):
    """Admin instance configuration, read once and frozen.

    Values come from keyword arguments, ADMIN_* environment variables or the
    .env file. Nested options use a double underscore, e.g.
    ADMIN_BRANDING__COMPANY_NAME=Acme.

    The instance is frozen so a single ViewHelpers can be shared by every
    request without locking.
    """

    root_path: str = Field(default="/admin", description="Path the admin panel is mounted under")
    login_path: str = Field(default="/admin/login", description="URL of the login page")
    logout_path: str = Field(default="/admin/logout", description="URL of the logout action")

    branding: Branding = Field(default_factory=Branding)
    assets: AssetOptions = Field(default_factory=AssetOptions)

    # strftime patterns for date-valued properties
    datetime_format: str = Field(default="%Y-%m-%d %H:%M", min_length=1)
    date_format: str = Field(default="%Y-%m-%d", min_length=1)

    per_page: int = Field(default=10, ge=1, le=500, description="Records per list page")

    log_level: str = Field(default="INFO", pattern=r"(?i)^(debug|info|warning|error|critical)$")

    model_config = SettingsConfigDict(
        env_prefix="ADMIN_",
        env_nested_delimiter="__",
        env_file=Path(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
        validate_default=True,
    )

    @field_validator("root_path", mode="after")
    @classmethod
    def validate_root_path(cls, v: str) -> str:
        """Ensure root_path is absolute and has no trailing slash.

        The root itself ("/") is stored as an empty string so joined URLs
        never start with a double slash.
        """
        v = v.strip()
        if not v.startswith("/"):
            raise ValueError("root_path must start with '/'")
        return v.rstrip("/")

    @field_validator("login_path", "logout_path", mode="after")
    @classmethod
    def validate_auth_path(cls, v: str) -> str:
        v = v.strip()
        if not v.startswith(("/", "http://", "https://")):
            raise ValueError("auth paths must be absolute paths or http(s) URLs")
        return v


_settings_instance: AdminSettings | None = None


def get_settings() -> AdminSettings:
    """Get singleton AdminSettings instance for dependency injection.

    Returns:
        Cached AdminSettings instance
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = AdminSettings()
    return _settings_instance

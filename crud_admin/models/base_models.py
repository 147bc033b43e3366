"""Pydantic models for admin options and responses."""

from pydantic import BaseModel, ConfigDict, Field


class Branding(BaseModel):
    """Branding options shown in the admin layout."""

    model_config = ConfigDict(frozen=True)

    company_name: str = Field(default="CRUD Admin", min_length=1, description="Name shown in the sidebar")
    logo: str | None = Field(default=None, description="URL of the logo image")
    favicon: str | None = Field(default=None, description="URL of the favicon")
    soft_branding: bool = Field(default=True, description="Show the 'made with' footer")


class AssetOptions(BaseModel):
    """Custom stylesheets and scripts injected into every admin page."""

    model_config = ConfigDict(frozen=True)

    styles: list[str] = Field(default_factory=list, description="Stylesheet URLs")
    scripts: list[str] = Field(default_factory=list, description="Script URLs")


class HealthResponse(BaseModel):
    """Basic health check response."""

    status: str
    version: str

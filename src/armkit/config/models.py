"""Pydantic models for CLI configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from armkit.config.constants import DEFAULT_ENDPOINT, DEFAULT_TIMEOUT


class ArmProfile(BaseModel):
    """A named management endpoint profile."""

    name: str
    endpoint: str = Field(
        default=DEFAULT_ENDPOINT,
        description="Management endpoint, e.g. https://management.azure.com",
    )
    subscription_id: str | None = Field(
        default=None, description="Default subscription for commands",
    )
    token: str | None = Field(
        default=None, description="Pre-issued bearer token",
    )
    scopes: list[str] | None = Field(
        default=None, description="OAuth scopes; derived from the endpoint when unset",
    )
    verify_ssl: bool = Field(default=True, description="Verify SSL certificates")
    timeout: float = Field(
        default=DEFAULT_TIMEOUT, gt=0, le=600, description="Request timeout in seconds",
    )

    @field_validator("endpoint")
    @classmethod
    def validate_endpoint(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("Endpoint must start with http:// or https://")
        return v.rstrip("/")

    @property
    def auth_configured(self) -> bool:
        return self.token is not None


class CLIConfig(BaseModel):
    """Root configuration model."""

    default_profile: str | None = None
    default_format: str = "table"
    profiles: dict[str, ArmProfile] = Field(default_factory=dict)

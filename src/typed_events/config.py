"""Configuration models for typed-events."""
from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field, field_validator, model_validator

DEFAULT_NAMESPACE = "APP"
DEFAULT_ENVIRONMENT = "development"


class EmitterSettings(BaseModel):
    """Settings controlling how a dispatcher validates emissions."""

    validate_types: bool = Field(
        default=False,
        description="If True emitted arguments are checked against the declared annotations.",
    )


class LoggerOptions(BaseModel):
    """Options for the namespaced console logger."""

    namespace: str | None = Field(default=None, description="Prefix shown in front of every message")
    env: List[str] = Field(
        default_factory=list,
        description="Environments in which the logger is active. Empty means always active.",
    )
    env_var: str = Field(default="APP_ENV", description="Environment variable holding the current environment")

    @field_validator("env_var")
    @classmethod
    def validate_env_var(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("env_var must not be blank")
        return value.strip()

    @model_validator(mode="after")
    def normalise_namespace(self) -> "LoggerOptions":
        self.namespace = self.namespace.upper() if self.namespace else DEFAULT_NAMESPACE
        return self


__all__ = ["DEFAULT_ENVIRONMENT", "DEFAULT_NAMESPACE", "EmitterSettings", "LoggerOptions"]

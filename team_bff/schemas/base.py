"""
Base Pydantic schemas and common types
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class TeamBaseRequest(BaseModel):
    """
    Base request schema for team endpoints.

    Every field is optional at the schema level so that controllers
    can report missing fields with their own messages. Blank strings
    are treated as absent.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def blank_strings_to_none(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {
                key: None if isinstance(value, str) and not value.strip() else value
                for key, value in data.items()
            }
        return data

    def missing(self, *fields: str) -> bool:
        """Whether any of the named fields is absent."""
        return any(getattr(self, name) is None for name in fields)


class UpstreamEnvelope(BaseModel):
    """Documentation shape of an upstream response; bodies are forwarded as-is."""

    model_config = ConfigDict(extra="allow")

    success: bool = Field(description="Upstream success flag")
    message: str | None = Field(default=None, description="Upstream message")
    data: Any = Field(default=None, description="Upstream payload")


class ErrorResponse(BaseModel):
    """Error response schema."""

    success: bool = Field(default=False, description="Always false for errors")
    status: int = Field(description="HTTP status code")
    message: str = Field(description="Error detail message")

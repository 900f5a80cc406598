"""Base Pydantic models for MCP tool input validation.

This module defines the shared building blocks for tool input models:

- IgnoredInput: parameterless tools (some clients insist on at least one field)
- BasePeriodInput: tools addressed by a periodic note period
- require_text / format_validation_error helpers used by the models and the
  tool registry
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from obsidian_rest.constants import PERIODS


def require_text(value: Optional[str], field_name: str) -> str:
    """Strip ``value`` and reject it when nothing is left.

    Raises:
        ValueError: If the value is empty or whitespace only.
    """
    cleaned = (value or "").strip()
    if not cleaned:
        raise ValueError(f"{field_name} is required")
    return cleaned


def format_validation_error(exc: ValidationError) -> str:
    """Collapse a pydantic error into one readable line per failing field.

    Examples:
        ``dirpath: Field required``
        ``content_length: content_length must be greater than 0``
    """
    lines = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())) or "input"
        message = error.get("msg", "invalid value")
        # field_validator errors are prefixed by pydantic
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        lines.append(f"{location}: {message}")
    return "; ".join(lines) if lines else str(exc)


class IgnoredInput(BaseModel):
    """Input model for tools that take no parameters.

    The single optional field exists only because some MCP clients refuse to
    call a tool whose schema has no properties.
    """

    ignore: Optional[str] = Field(
        None,
        description="ignore this parameter",
    )


class BasePeriodInput(BaseModel):
    """Base model for periodic note operations.

    Provides the ``period`` field. The schema advertises the allowed values as
    an enum, and the validator checks them again so a client that ignores the
    schema still cannot reach the backend with an unknown period.
    """

    period: str = Field(
        description="The period type (daily, weekly, monthly, quarterly, yearly)",
        json_schema_extra={"enum": list(PERIODS)},
        examples=["daily", "weekly"],
    )

    @field_validator('period')
    @classmethod
    def validate_period(cls, v: str) -> str:
        """Validate the period against the supported periodic note kinds.

        Args:
            v: The period to validate

        Returns:
            The normalized (stripped, lowercase) period

        Raises:
            ValueError: If the period is empty or not a supported kind
        """
        cleaned = require_text(v, "period").lower()
        if cleaned not in PERIODS:
            raise ValueError(
                f"invalid period: {cleaned}, must be one of {', '.join(PERIODS)}"
            )
        return cleaned

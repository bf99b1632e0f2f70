"""Descriptors advertised through ``tools/list``."""

from __future__ import annotations

from typing import Any

from jsonschema import Draft202012Validator
from jsonschema.exceptions import SchemaError
from pydantic import BaseModel, ConfigDict, Field, field_validator

__all__ = ["ToolDescriptor", "string_arguments_schema"]


def string_arguments_schema(**properties: str) -> dict[str, Any]:
    """Build an object schema whose properties are all required strings.

    Each keyword maps an argument name to its human readable description.
    """

    return {
        "type": "object",
        "properties": {
            name: {"type": "string", "description": description}
            for name, description in properties.items()
        },
        "required": list(properties),
    }


class ToolDescriptor(BaseModel):
    """Name, description and argument schema of one registered operation."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(min_length=1)
    description: str
    inputSchema: dict[str, Any] = Field(default_factory=string_arguments_schema)

    @field_validator("inputSchema")
    @classmethod
    def _check_schema(cls, value: dict[str, Any]) -> dict[str, Any]:
        try:
            Draft202012Validator.check_schema(value)
        except SchemaError as exc:
            raise ValueError(f"inputSchema is not a valid JSON schema: {exc.message}") from exc
        if value.get("type") != "object":
            raise ValueError("inputSchema must describe an object")
        return value

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump()

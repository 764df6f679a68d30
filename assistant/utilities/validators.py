"""
Input validation schemas using Pydantic for request bodies.
"""
from typing import Type, TypeVar

from pydantic import BaseModel, Field, field_validator
from pydantic import ValidationError as SchemaError

from assistant.utilities.errors import ValidationError

SchemaT = TypeVar("SchemaT", bound=BaseModel)


class _StrippedInput(BaseModel):
    @field_validator('*', mode='before')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace; treat null as empty."""
        if v is None:
            return ""
        if isinstance(v, str):
            return v.strip()
        return v


class ChatInput(_StrippedInput):
    """Schema for a chat message."""
    message: str = Field(..., min_length=1)


class PlanInput(_StrippedInput):
    """Schema for a manually added plan entry."""
    date: str = Field(..., min_length=1)
    item: str = Field(..., min_length=1)


class PlanDeleteInput(_StrippedInput):
    id: str = Field(..., min_length=1)


def parse_input(schema: Type[SchemaT], payload, error_message: str) -> SchemaT:
    """Validate a JSON body against ``schema``; any failure becomes a 400 ValidationError."""
    if not isinstance(payload, dict):
        raise ValidationError(error_message)
    try:
        return schema.model_validate(payload)
    except SchemaError:
        raise ValidationError(error_message)

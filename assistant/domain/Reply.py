"""Classified model replies: a discriminated union over the structured shapes, plus plain chat.

The structured shapes are pydantic models tagged by ``type``; anything that does not
validate as one of them is represented as ``ChatReply`` with the raw text.
"""
from __future__ import annotations

from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator


class _StructuredReply(BaseModel):
    # No before-validators on ``type``: it is the union discriminator.
    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)


class PlanReply(_StructuredReply):
    type: Literal["plan"]
    date: str = Field(..., min_length=1)
    item: str = Field(..., min_length=1)


class RecipeReply(_StructuredReply):
    type: Literal["recipe"]
    name: str = Field(..., min_length=1)
    cuisine: str = ""
    health_tip: Optional[str] = None
    ingredients: List[str] = Field(..., min_length=1)
    instructions: List[str] = Field(..., min_length=1)

    @field_validator("cuisine", mode="before")
    @classmethod
    def cuisine_default(cls, v):
        return "" if v is None else v

    def to_dict(self):
        return self.model_dump(exclude_none=True)


class ChatReply(BaseModel):
    type: Literal["chat"] = "chat"
    text: str


StructuredReply = Annotated[Union[PlanReply, RecipeReply], Field(discriminator="type")]
ClassifiedReply = Union[PlanReply, RecipeReply, ChatReply]

STRUCTURED_REPLY_ADAPTER: TypeAdapter = TypeAdapter(StructuredReply)

__all__ = [
    'PlanReply', 'RecipeReply', 'ChatReply', 'StructuredReply', 'ClassifiedReply',
    'STRUCTURED_REPLY_ADAPTER',
]

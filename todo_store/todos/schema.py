"""Pydantic models for the Todo JSON contract.

The wire shape is ``{"id": int, "title": str | null, "isComplete": bool}``.
Python code uses ``is_complete``; ``isComplete`` is the JSON alias.
"""

from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_validator

TITLE_REQUIRED_MESSAGE = "The Title field is required."


class TodoSchema(BaseModel):
    """A persisted todo as returned by the service."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: int = Field(description="Store-assigned identifier")
    title: str | None = Field(default=None, description="Item text")
    is_complete: bool = Field(
        default=False, alias="isComplete", description="Completion flag"
    )


class TodoCreate(BaseModel):
    """Payload for creating a todo.

    Any ``id`` in the payload is ignored; the store assigns it.
    """

    model_config = ConfigDict(populate_by_name=True)

    title: str | None = Field(
        default=None, validate_default=True, description="Item text (required)"
    )
    is_complete: StrictBool = Field(
        default=False, alias="isComplete", description="Completion flag"
    )

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str | None) -> str:
        """Require a non-blank title."""
        if v is None or not v.strip():
            raise ValueError(TITLE_REQUIRED_MESSAGE)
        return v


__all__ = ["TITLE_REQUIRED_MESSAGE", "TodoCreate", "TodoSchema"]

"""
Input DTOs for issue and comment operations.

Bodies arrive with camelCase keys (``projectId``); snake_case is accepted too.
Dumping with ``by_alias=True`` gives back the camelCase wire form used in
published events.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


class IssueCreate(CamelModel):
    title: str = Field(min_length=1, max_length=255)
    description: str | None = None
    status: str | None = Field(default=None, max_length=64)
    project_id: str = Field(min_length=1, max_length=255)


class IssueUpdate(CamelModel):
    """
    Partial update. Only the keys present in the body are applied, and those
    same keys decide the update scopes reported in the event.
    """

    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    status: str | None = Field(default=None, max_length=64)

    @field_validator("title", "status")
    @classmethod
    def reject_null(cls, v: str | None) -> str:
        if v is None:
            raise ValueError("may be omitted but not null")
        return v

    def present_fields(self) -> dict:
        """Fields that were explicitly provided, keyed by attribute name."""
        return self.model_dump(exclude_unset=True)


class CommentCreate(CamelModel):
    content: str = Field(min_length=1)


__all__ = ["CamelModel", "IssueCreate", "IssueUpdate", "CommentCreate"]

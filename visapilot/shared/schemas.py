from typing import ClassVar, FrozenSet, Optional

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema serialised in camelCase; snake_case input is accepted too."""
    
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class PartialUpdateModel(CamelModel):
    """
    Base for PUT bodies.
    
    Omitted fields are left untouched. An explicit null is only accepted for
    the fields named in ``nullable_fields``; those are cleared on the document.
    """
    
    nullable_fields: ClassVar[FrozenSet[str]] = frozenset()
    
    @field_validator("*")
    @classmethod
    def reject_null(cls, value, info: ValidationInfo):
        if value is None and info.field_name not in cls.nullable_fields:
            raise ValueError("Field cannot be null")
        return value


class MessageResponse(CamelModel):
    """Generic message response."""
    message: str


class PageInfo(CamelModel):
    """Pagination fields shared by list responses."""
    total: int
    page: int
    limit: int
    total_pages: int


def page_fields(total: int, page: int, limit: int) -> dict:
    """Build the PageInfo fields for a list response."""
    return {
        "total": total,
        "page": page,
        "limit": limit,
        "total_pages": (total + limit - 1) // limit,
    }


def clean_optional(value: Optional[str]) -> Optional[str]:
    """Trim a string, mapping blank input to None."""
    if value is None:
        return None
    value = value.strip()
    return value or None
